"""Allow running aidocs with ``python -m aidocs``."""

import sys

from aidocs.cli import main

if __name__ == "__main__":
    sys.exit(main())
