"""Pytest configuration for repository-relative imports."""

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def sample_data():
    return [1, 2, 3, 4, 5]


@pytest.fixture
def decimals_data():
    return [1.5, 2.5, 3.5, 4.5, 5.5]
