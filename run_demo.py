#!/usr/bin/env python3
"""Launch the typed inventory repository demos.

Usage:
    ./run_demo.py                   # Run every demo, then wait for Enter
    ./run_demo.py warehouse         # Run one demo
    ./run_demo.py --no-pause        # Exit straight away
    ./run_demo.py records --data-file /tmp/inventory.json
"""

import sys
from pathlib import Path

# Allow running from a source checkout without installing
sys.path.insert(0, str(Path(__file__).parent))

from inventory.cli import main


if __name__ == "__main__":
    sys.exit(main())
