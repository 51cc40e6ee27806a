"""Entry point for ``python -m tdmscrape``."""

import sys

from tdmscrape.cli import main

if __name__ == "__main__":
    sys.exit(main())
