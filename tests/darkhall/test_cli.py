"""Tests for the inspection CLI."""

from __future__ import annotations

import json

import pytest

from darkhall.cli import main

pytestmark = pytest.mark.unit


def test_prints_maze(capsys):
    assert main(["--seed", "3", "--width", "11", "--height", "9"]) == 0
    out = capsys.readouterr().out
    grid = out.split("\n\n")[0].splitlines()
    assert len(grid) == 9
    assert all(len(row) == 11 for row in grid)
    text = "\n".join(grid)
    for marker in "SPM":
        assert text.count(marker) == 1
    assert "11x9" in out


def test_same_seed_same_output(capsys):
    main(["--seed", "5"])
    first = capsys.readouterr().out
    main(["--seed", "5"])
    assert capsys.readouterr().out == first


def test_json_snapshot(capsys):
    assert main(["--seed", "1", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["state"] == "exploring"
    assert data["maze_size"] == {"width": 21, "height": 21}


def test_bad_size_exits_nonzero(capsys):
    assert main(["--width", "3"]) == 2
