# run_gui.py
"""
Entry point for launching the GUI application.
Run with: python3 run_gui.py
"""

import os
# --- must be set before Qt is imported ---
os.environ.setdefault('QT_MAC_WANTS_LAYER', '1')

import sys

from c1_assist.app import main


if __name__ == "__main__":
    sys.exit(main())
