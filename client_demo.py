#!/usr/bin/env python3
#
# PROJECT: wirespin
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.7
# LOG_REF: 2026-10-19
#

import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from wirespin.cli import main


if __name__ == "__main__":
    sys.exit(main())
