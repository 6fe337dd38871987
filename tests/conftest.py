# tests/conftest.py
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from blog_api.app.core.context import ApiContext
from blog_api.app.main import create_app


@pytest.fixture
def context():
    """A fresh, empty context so tests never share repositories."""
    return ApiContext()


@pytest.fixture
def app(context):
    return create_app(context)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def test_date():
    return datetime(2018, 9, 16, 12, 0, 0, tzinfo=timezone.utc)
