"""Main entry point for the roadnet package when run as a module.

This module enables running roadnet directly using 'python -m roadnet'.
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
