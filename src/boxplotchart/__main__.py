"""Allow ``python -m boxplotchart INPUT_FILE OUTPUT_FILE``."""

import sys

from boxplotchart.cli import main

if __name__ == "__main__":
    sys.exit(main())
