"""
Tests for repository lookups.
"""
from uuid import UUID, uuid4

from chai_api.models.user import User
from chai_api.repositories.user import UserRepository


class RecordingSession:
    """Async session double recording primary-key lookups."""

    def __init__(self, rows: dict) -> None:
        self.rows = rows
        self.lookups = []

    async def get(self, model, id):
        self.lookups.append((model, id))
        return self.rows.get(id)


async def test_get_by_id_parses_string_ids():
    """Test string ids are converted to UUIDs before the lookup."""
    user = User(id=uuid4(), username="chai_creator", email="asha@example.com")
    session = RecordingSession({user.id: user})

    found = await UserRepository(session).get_by_id(str(user.id))

    assert found is user
    assert session.lookups == [(User, user.id)]
    assert isinstance(session.lookups[0][1], UUID)


async def test_get_by_id_malformed_id_returns_none():
    """Test malformed ids never reach the database."""
    session = RecordingSession({})

    found = await UserRepository(session).get_by_id("not-a-uuid")

    assert found is None
    assert session.lookups == []
