"""Module entry point so ``python -m mycli`` behaves like the ``mycli`` script."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
