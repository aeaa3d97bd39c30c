"""Entry point for running thermalpos as a module."""

import sys

from thermalpos.cli.render import main

if __name__ == "__main__":
    sys.exit(main())
