"""Shared fixtures for GeoDNA tests."""

import pytest

from geodna.codec import encode


@pytest.fixture
def wellington():
    return encode(-41.288889, 174.777222, precision=22)


@pytest.fixture
def nelson():
    return encode(-41.283333, 173.283333, precision=16)


@pytest.fixture
def vienna():
    return encode(48.208889, 16.3725, precision=22)
