"""Allow running the tool as ``python -m svg_combine``."""

import sys

from svg_combine.cli import main

if __name__ == "__main__":
    sys.exit(main())
