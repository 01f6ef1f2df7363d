"""Tests for the local CSV import command."""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from csv_ingest import cli
from csv_ingest.core.errors import NoValidRecordsError
from csv_ingest.schemas.people import PersonRecord


def _session_factory(session):
    """Mimic ``async with AsyncSessionLocal() as db``."""
    ctx = MagicMock()
    ctx.__aenter__ = AsyncMock(return_value=session)
    ctx.__aexit__ = AsyncMock(return_value=False)
    return MagicMock(return_value=ctx)


@pytest.mark.asyncio
async def test_import_file_inserts_valid_rows(tmp_path):
    path = tmp_path / "people.csv"
    path.write_text("name,age,email\nAna,30,ana@example.com\n,1,x@y\nBruno,41,bruno@example.com\n", encoding="utf-8")
    session = AsyncMock()

    with patch.object(cli, "AsyncSessionLocal", _session_factory(session)), \
            patch("csv_ingest.services.people.bulk_create", new_callable=AsyncMock) as bulk_create:
        inserted = await cli.import_file(path)

    assert inserted == 2
    bulk_create.assert_awaited_once_with(
        session,
        [
            PersonRecord(name="Ana", age="30", email="ana@example.com"),
            PersonRecord(name="Bruno", age="41", email="bruno@example.com"),
        ],
    )


@pytest.mark.asyncio
async def test_import_file_without_valid_rows_raises(tmp_path):
    path = tmp_path / "invalid.csv"
    path.write_text("name,age,email\n,,\n", encoding="utf-8")

    with patch("csv_ingest.services.people.bulk_create", new_callable=AsyncMock) as bulk_create:
        with pytest.raises(NoValidRecordsError):
            await cli.import_file(path)

    bulk_create.assert_not_awaited()


def test_main_missing_file_returns_2(tmp_path):
    assert cli.main([str(tmp_path / "nope.csv")]) == 2
