"""Allow ``python -m bracketschedule.gui``."""

import sys

from bracketschedule.gui.mainwindow import main

if __name__ == "__main__":
    sys.exit(main())
