"""
Root conftest - shared pytest configuration and fixtures.
Ensures user_service package is discoverable when running pytest from the repository root.
"""
import sys
from pathlib import Path

# Ensure repository root is in path for 'from user_service...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
