"""
Global test configuration and fixtures.

Shared by unit and e2e tests. Test doubles live in tests/fixtures.
"""

import pytest

from i18n_proxy.app.translation.models import Language
from tests.fixtures import FakeDictionaryService


@pytest.fixture
def native():
    return Language("en")


@pytest.fixture
def french():
    return Language("fr")


@pytest.fixture
def dictionary():
    return FakeDictionaryService()
