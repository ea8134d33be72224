"""Entry point for ``python -m documentatom``."""

from .console import main

if __name__ == "__main__":
    main()
