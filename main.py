"""
Royal Game of Ur - command-line entry point.
Delegates to ``royal_ur.cli``; see ``python main.py --help``.
"""

from royal_ur.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
