"""Allow ``python -m bracketschedule.console``."""

import sys

from bracketschedule.console.cli import main

if __name__ == "__main__":
    sys.exit(main())
