"""kvault: authenticated key-value storage service."""

__version__ = "0.1.0"
