"""Entry point for ``python -m pagetree``."""

from pagetree.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
