from unittest import mock

import pytest
import requests

from api.models import JournalEntry
from tests.helpers import FakeSleep


@pytest.fixture
def fake_sleep():
    return FakeSleep()


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def sample_entries():
    return [
        JournalEntry(id=i, title=f"Title {i}", body=f"Body {i}", user_id=1)
        for i in range(1, 13)
    ]
