"""Module entrypoint for running pageaudit as ``python -m pageaudit``."""

from __future__ import annotations

from pageaudit.cli import main


if __name__ == "__main__":
    main()
