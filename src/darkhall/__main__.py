from darkhall.cli import main

raise SystemExit(main())
