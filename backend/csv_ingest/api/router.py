from fastapi import APIRouter

from csv_ingest.api import csv_upload

api_router = APIRouter()

api_router.include_router(csv_upload.router, prefix="/csv", tags=["csv"])
