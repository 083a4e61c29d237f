"""Entry point for ``python -m grepbat``."""

from grepbat.presentation.cli import main

if __name__ == "__main__":
    main()
