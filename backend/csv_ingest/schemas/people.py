"""Pydantic schemas for person records and CSV upload responses."""
from pydantic import BaseModel


class PersonRecord(BaseModel):
    """A validated CSV row: every field trimmed and non-empty."""

    name: str
    age: str
    email: str


class CsvUploadResponse(BaseModel):
    message: str
    inserted: int


class ErrorResponse(BaseModel):
    error: str
