"""Service container for the Flask app.

``create_app`` builds one ``Services`` instance and stores it on
``app.extensions``; views fetch it with ``get_services()`` instead of
importing module-level singletons.
"""

from dataclasses import dataclass

from flask import current_app

from .auth.service import AuthService
from .config import Settings
from .db import Database
from .store.service import DataService

EXTENSION_KEY = "kvault"


@dataclass
class Services:
    settings: Settings
    database: Database
    auth: AuthService
    data: DataService

    @classmethod
    def build(cls, settings: Settings) -> "Services":
        """Construct the database and the services that depend on it."""
        database = Database(settings.database_path)
        database.init_schema()
        return cls(
            settings=settings,
            database=database,
            auth=AuthService(database, settings),
            data=DataService(database),
        )


def get_services() -> Services:
    """Services of the app handling the current request."""
    return current_app.extensions[EXTENSION_KEY]
