"""Entry point for ``python -m exam_toolkit``."""

import sys

from exam_toolkit.cli import main

if __name__ == "__main__":
    sys.exit(main())
