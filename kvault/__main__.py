"""Allow ``python -m kvault`` to start the server."""

from .main import run

run()
