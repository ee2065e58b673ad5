"""Allow `python -m selpg`."""

from selpg.cli import main

raise SystemExit(main())
