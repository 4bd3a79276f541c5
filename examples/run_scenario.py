"""Run a scenario JSON through the command-line entrypoint."""

from __future__ import annotations

from gravity_clusters.__main__ import main


if __name__ == "__main__":
    raise SystemExit(main())
