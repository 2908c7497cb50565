#!/usr/bin/env python3
"""N-puzzle solver.

Usage::

    python main.py -f puzzle.txt          # solve a board file
    python main.py -r 3 --seed 7          # random 3×3, seeded
    python main.py -r 4 -b -e tiles_out   # bidirectional, other heuristic
    python main.py < puzzle.txt           # board on stdin
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from frontend.cli.app import app  # noqa: E402

if __name__ == "__main__":
    app()
