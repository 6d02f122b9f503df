from app.core.config import settings
from app.core.exceptions import UpstreamDataError

__all__ = [
    "settings",
    "UpstreamDataError",
]
