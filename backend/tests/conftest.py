"""Shared test configuration: fresh storage and vocabulary for every test."""

import pytest

from api.router import limiter
from services.matching.vocabulary import reset_vocabulary
from services.storage import get_storage


@pytest.fixture(autouse=True)
def _reset_state():
    """Clear cached vocabulary and stored records around each test."""
    reset_vocabulary()
    get_storage().clear()
    yield
    reset_vocabulary()
    get_storage().clear()


@pytest.fixture(autouse=True)
def _no_rate_limit():
    limiter.enabled = False
    yield
    limiter.enabled = True
