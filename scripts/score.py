#!/usr/bin/env python
"""
Scoring Script

Run the scoring CLI from a source checkout without installing the package.

Usage:
    python scripts/score.py wilson 314 341
    python scripts/score.py ordinal 4 6 35 45 25 --conf=.99
"""

import sys
from pathlib import Path

# Add src/ to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from review_score.cli import main


if __name__ == "__main__":
    sys.exit(main())
