"""
Root conftest.py - Sets up Python path for tests.

This conftest is loaded by pytest before any test collection begins.
"""
import sys
import os

# Get the project root (where this conftest.py lives)
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

# Ensure the project root is the first path, filtering out stale hsvimage
# checkouts that would shadow the package under test
_filtered_paths = []
for p in sys.path:
    if 'hsvimage' not in p or p == PROJECT_ROOT:
        _filtered_paths.append(p)
sys.path = _filtered_paths

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
