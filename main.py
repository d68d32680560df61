"""
Entry point for running tinyunit from a source checkout.
"""

import sys
from pathlib import Path

# Add src to Python path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from tinyunit.cli import main


if __name__ == "__main__":
    sys.exit(main())
