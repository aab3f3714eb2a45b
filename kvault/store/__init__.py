"""Key-value data service."""

from .schemas import DataEntry
from .service import DataService

__all__ = ["DataEntry", "DataService"]
