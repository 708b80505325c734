"""Module entry point for ``python -m trishaft``."""

from __future__ import annotations

from .adapters.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
