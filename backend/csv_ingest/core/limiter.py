"""Rate limiter singleton shared by the app and the routers that decorate with it."""
from slowapi import Limiter
from slowapi.util import get_remote_address

from csv_ingest.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
