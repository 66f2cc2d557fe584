"""
Morabox - Entry Point

Example:
    python main.py daily
    python main.py solve 1010100011111
"""

import sys

from morabox.cli import main

if __name__ == "__main__":
    sys.exit(main())
