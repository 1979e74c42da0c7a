"""Allow ``python -m solexplorer``."""

import sys

from solexplorer.cli import main

if __name__ == "__main__":
    sys.exit(main())
