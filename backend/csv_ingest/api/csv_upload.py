"""CSV upload endpoint: parse, validate, and batch-insert people."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from csv_ingest.core.config import settings
from csv_ingest.core.errors import MissingFileError, NoValidRecordsError, PersistenceError
from csv_ingest.core.limiter import limiter
from csv_ingest.db.session import get_session
from csv_ingest.schemas.people import CsvUploadResponse, ErrorResponse
from csv_ingest.services import people as people_svc
from csv_ingest.services.csv_rows import collect_records, parse_csv

logger = logging.getLogger(__name__)

router = APIRouter()

SUCCESS_MESSAGE = "Dados inseridos com sucesso!"


# ─── POST /csv/upload ───

@router.post(
    "/upload",
    status_code=status.HTTP_201_CREATED,
    response_model=CsvUploadResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing file or no valid rows"},
        500: {"model": ErrorResponse, "description": "Batch insert failed"},
    },
    summary="Upload a CSV of people and insert every valid row",
)
@limiter.limit(settings.UPLOAD_RATE_LIMIT)
async def upload_csv(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_session)],
    file: UploadFile | None = File(default=None),
):
    if file is None or not file.filename:
        raise MissingFileError()

    content = await file.read()
    rows = parse_csv(content)
    records, rejected = collect_records(rows)
    logger.info(
        "CSV upload %s: %d rows read, %d accepted, %d rejected",
        file.filename, len(rows), len(records), rejected,
    )

    if not records:
        raise NoValidRecordsError()

    try:
        await people_svc.bulk_create(db, records)
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("Batch insert failed for upload %s", file.filename)
        raise PersistenceError() from exc

    return CsvUploadResponse(message=SUCCESS_MESSAGE, inserted=len(records))
