#!/usr/bin/env python3
"""
Live scoreboard demo.
Starts five fixed matches, finishes one and prints the summary board.
"""

import sys

from live_scoreboard.demo import main


if __name__ == "__main__":
    sys.exit(main())
