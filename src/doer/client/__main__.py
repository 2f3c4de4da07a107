"""Entry point for ``python -m doer.client``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
