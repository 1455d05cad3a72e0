#!/usr/bin/env python3
"""
CORPORATE COORDINATES quarter report from a source checkout.

Usage:
    python scripts/run_report.py
"""

import sys
from pathlib import Path

# Ensure corporate_coordinates is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from corporate_coordinates.cli import main

if __name__ == "__main__":
    sys.exit(main())
