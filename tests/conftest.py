"""Shared pytest configuration for the stroke_recognizer test suite.

Makes the package importable when the tests run from a source checkout
without installing it first.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))
