"""Pytest configuration shared by all test suites"""

import sys
from pathlib import Path

import pytest

# Add project root to path for src imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.ukstemmer import UkrainianStemmer


@pytest.fixture(scope="session")
def stemmer():
    """Shared stemmer instance (pattern catalog is read-only)"""
    return UkrainianStemmer()
