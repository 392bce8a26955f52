"""
Root conftest.py - Sets up Python path for tests.

This conftest is loaded by pytest before any test collection begins.
"""
import sys
import os

import pytest

# Get the project root (where this conftest.py lives)
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from cssgradient import Keyword, Length  # noqa: E402


@pytest.fixture
def worked_example_params():
    """to right, red, blue 10px, orange, yellow, black 100px, purple"""
    return [
        Keyword("to"), Keyword("right"),
        Keyword("red"),
        Keyword("blue"), Length(10, "px"),
        Keyword("orange"),
        Keyword("yellow"),
        Keyword("black"), Length(100, "px"),
        Keyword("purple"),
    ]
