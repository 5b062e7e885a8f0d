# tests/comparison/conftest.py
"""Shared datasets for comparison tests."""
from __future__ import annotations

import pytest

from labcompare.comparison.dataset import Dataset


@pytest.fixture
def ds_x():
    """Three rows, numeric t and v."""
    return Dataset(id="x", name="X", rows=[{"t": 0, "v": 1.0}, {"t": 1, "v": 2.0}, {"t": 2, "v": 3.0}])


@pytest.fixture
def ds_y():
    """Two rows, numeric t and v."""
    return Dataset(id="y", name="Y", rows=[{"t": 0, "v": 5.0}, {"t": 1, "v": 7.0}])


@pytest.fixture
def ds_z():
    """One row; t numeric, label text."""
    return Dataset(id="z", name="Z", rows=[{"t": 0, "label": "a"}])


@pytest.fixture
def ds_empty():
    return Dataset(id="e", name="Empty", rows=[])
