"""Tests for the people batch-insert service."""
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from csv_ingest.models.person import Person
from csv_ingest.schemas.people import PersonRecord
from csv_ingest.services import people as people_svc


def _mock_db() -> MagicMock:
    db = MagicMock()
    db.commit = AsyncMock()
    return db


@pytest.mark.asyncio
async def test_bulk_create_adds_all_records_and_commits_once():
    db = _mock_db()
    records = [
        PersonRecord(name="Ana", age="30", email="ana@example.com"),
        PersonRecord(name="Bruno", age="41", email="bruno@example.com"),
    ]

    people = await people_svc.bulk_create(db, records)

    db.add_all.assert_called_once()
    added = db.add_all.call_args.args[0]
    assert added is people
    assert all(isinstance(p, Person) for p in people)
    assert [(p.name, p.age, p.email) for p in people] == [
        ("Ana", "30", "ana@example.com"),
        ("Bruno", "41", "bruno@example.com"),
    ]
    db.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_bulk_create_propagates_database_errors():
    db = _mock_db()
    db.commit.side_effect = IntegrityError("INSERT INTO people", {}, Exception("duplicate"))

    with pytest.raises(IntegrityError):
        await people_svc.bulk_create(db, [PersonRecord(name="Ana", age="30", email="ana@example.com")])


def test_people_table_is_insert_only():
    """Imported rows carry an insert timestamp and no update timestamp."""
    columns = Person.__table__.c
    assert "created_at" in columns
    assert "updated_at" not in columns
    assert [ix.name for ix in Person.__table__.indexes] == ["ix_people_email"]
