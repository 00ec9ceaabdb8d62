from datetime import datetime, timedelta, timezone

import mongomock
import pytest

from ballotbox.database import connection

T0 = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def mongo(monkeypatch):
    """Fresh in-memory MongoDB behind MongoConnector for each test."""
    client = mongomock.MongoClient()
    monkeypatch.setattr(connection, "MongoClient", lambda *args, **kwargs: client)
    connection.MongoConnector._instance = None
    yield connection.MongoConnector()
    connection.MongoConnector.reset()


@pytest.fixture()
def election_input():
    return {
        "title": "Team lunch",
        "description": "Where should we go on Friday?",
        "options": ["A", "B", "C"],
        "start_date": T0 + timedelta(hours=1),
        "end_date": T0 + timedelta(hours=2),
    }
