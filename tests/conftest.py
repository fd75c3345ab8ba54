"""Pytest configuration for message-extensions tests."""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so absolute imports work
# (tests/ is inside the repository root, so parent is the root)
root_dir = Path(__file__).parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

from primitives.field import FIELD_NAMES, get_field


@pytest.fixture(params=FIELD_NAMES)
def field(request):
    """Every supported prime field."""
    return get_field(request.param)
