import sys, os

# Ensure the repository root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tests.helpers import FixedRandomizer, make_engine, fill_row

__all__ = [
    "FixedRandomizer",
    "make_engine",
    "fill_row",
]
