"""Import a local CSV file of people through the upload pipeline.

Usage: python -m csv_ingest.cli path/to/people.csv
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from csv_ingest.core.errors import NoValidRecordsError, PersistenceError
from csv_ingest.core.logging import setup_logging
from csv_ingest.db.session import AsyncSessionLocal, engine
from csv_ingest.services import people as people_svc
from csv_ingest.services.csv_rows import collect_records, parse_csv

logger = logging.getLogger(__name__)


async def import_file(path: Path) -> int:
    """Parse, validate and batch-insert one file. Returns the inserted count."""
    rows = parse_csv(path.read_bytes())
    records, rejected = collect_records(rows)
    logger.info("%s: %d rows read, %d accepted, %d rejected", path, len(rows), len(records), rejected)
    if not records:
        raise NoValidRecordsError()

    async with AsyncSessionLocal() as db:
        try:
            await people_svc.bulk_create(db, records)
        except SQLAlchemyError as exc:
            await db.rollback()
            raise PersistenceError() from exc
    return len(records)


async def _run(path: Path) -> int:
    try:
        return await import_file(path)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Import people from a CSV file.")
    parser.add_argument("path", type=Path, help="CSV file with name, age and email columns")
    args = parser.parse_args(argv)

    setup_logging()
    if not args.path.is_file():
        logger.error("File not found: %s", args.path)
        return 2

    try:
        inserted = asyncio.run(_run(args.path))
    except (NoValidRecordsError, PersistenceError) as exc:
        logger.error("%s", exc.message, exc_info=isinstance(exc, PersistenceError))
        return 1

    print(f"{inserted} registros inseridos.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
