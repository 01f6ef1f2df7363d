"""Batch persistence of validated person records."""
import logging
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from csv_ingest.models.person import Person
from csv_ingest.schemas.people import PersonRecord

logger = logging.getLogger(__name__)


async def bulk_create(db: AsyncSession, records: Sequence[PersonRecord]) -> list[Person]:
    """Insert every record in one transaction and commit.

    Raises whatever SQLAlchemy raises; the caller owns error translation.
    """
    people = [Person(name=r.name, age=r.age, email=r.email) for r in records]
    db.add_all(people)
    await db.commit()
    logger.info("Inserted %d people", len(people))
    return people
