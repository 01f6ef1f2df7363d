from csv_ingest.models.person import Person

__all__ = [
    "Person",
]
