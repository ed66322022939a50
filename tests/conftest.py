"""
Pytest configuration for the stargen tests.

This file ensures the stargen package under src/ is importable from tests.
"""

import sys
from pathlib import Path

# Add src to the Python path
src_dir = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_dir))
