from __future__ import annotations

import pytest

from message_board.core.config import Settings
from tests.fakes import CountingStore, make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def store() -> CountingStore:
    return CountingStore()
