"""Entry point for `python -m cast_schedule`."""

import sys

from cast_schedule.cli import main

if __name__ == "__main__":
    sys.exit(main())
