from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from csv_ingest.db.base import Base, CreatedAtMixin, UUIDMixin


class Person(Base, UUIDMixin, CreatedAtMixin):
    __tablename__ = "people"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Stored verbatim from the upload; no numeric parsing.
    age: Mapped[str] = mapped_column(String(32), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
