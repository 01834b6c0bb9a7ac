"""
Test package for the sweepfield module.

This package contains tests for all components of the sweepfield module,
organized into subdirectories that mirror the structure of the main package.

Subdirectories:
- core: Tests for the distance transform (boundary seeding, sweeps, entry point)

To run all tests:
    python -m unittest discover tests

To run tests in a specific directory:
    python -m unittest discover tests/core
"""

import sys
from pathlib import Path

# Add the project root to the path for proper imports
# This allows tests to be run from any directory
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.append(str(project_root))
