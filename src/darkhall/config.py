"""Configuration management using Pydantic settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DarkHallSettings(BaseSettings):
    """Simulation tunables loaded from environment variables (DARKHALL_*)."""

    model_config = SettingsConfigDict(
        env_prefix="DARKHALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Maze
    maze_width: int = Field(21, ge=5)
    maze_height: int = Field(21, ge=5)
    maze_max_attempts: int = Field(10, ge=1)   # regeneration cap before giving up
    start_x: int = Field(1, ge=1)              # near-corner start, odd lattice cell
    start_y: int = Field(1, ge=1)

    # Flashlight cone
    flashlight_range: float = Field(4.0, gt=0)          # grid units
    flashlight_angle_deg: float = Field(60.0, gt=0, le=360)  # full cone angle

    # Ambient glow around the player
    ambient_radius: float = Field(1.5, gt=0)
    max_ambient_intensity: float = Field(0.6, ge=0, lt=1)

    # Footprint trail
    footprint_decay_ms: float = Field(15000.0, gt=0)
    max_footprint_intensity: float = Field(0.4, ge=0, le=1)

    # Line of sight: samples per grid unit along the sight line
    los_samples_per_unit: float = Field(2.0, gt=0)

    # Pursuer
    pursuer_base_speed_ms: float = Field(800.0, gt=0)     # ms between steps
    pursuer_recompute_ms: float = Field(1000.0, gt=0)
    pursuer_retarget_distance: float = Field(2.0, ge=0)
    pursuer_search_depth: int = Field(15, ge=1)
    pursuer_light_threshold: float = Field(0.5, ge=0, le=1)
    pursuer_light_slowdown: float = Field(2.0, ge=1)
    pursuer_fear_of_light: bool = True
    pursuer_visible_threshold: float = Field(0.1, ge=0, le=1)

    # Pursuer spawn placement
    spawn_min_start_distance: float = Field(5.0, ge=0)
    spawn_min_prize_distance: float = Field(3.0, ge=0)
    spawn_axis_alignment: float = Field(0.7, ge=-1, le=1)

    # Debug
    god_mode_floor_intensity: float = Field(0.2, ge=0, le=1)


settings = DarkHallSettings()
