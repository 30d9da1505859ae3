from dataclasses import asdict

import pytest

import slicekit
from slicekit import Slice
from slicekit.config import SliceSettings


@pytest.fixture(autouse=True)
def default_settings():
    """Restores default settings after every test."""
    yield
    slicekit.configure(**asdict(SliceSettings()))


@pytest.fixture
def zero():
    return slicekit.make()


@pytest.fixture
def five():
    return slicekit.make(0, 1, 2, 3, 4)


@pytest.fixture
def ten():
    return slicekit.make(0, 1, 2, 3, 4, 5, 6, 7, 8, 9)


@pytest.fixture
def spare():
    """Length 5, capacity 10, filled with 0..4."""
    s = Slice(5, 10)
    for k in range(len(s)):
        s[k] = k
    return s
