"""Entry point for ``python -m rubies``."""

import sys

from rubies.cli import main

if __name__ == "__main__":
    sys.exit(main())
