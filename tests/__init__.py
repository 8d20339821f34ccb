"""
Test package for NoCrioulo.

This package contains all test modules.
Adds the project root to sys.path so the flat-layout packages import cleanly.
"""

import sys
import os

# Add parent directory to path to enable imports
parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)
