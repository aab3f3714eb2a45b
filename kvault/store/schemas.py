"""Key-value entry schemas shared by the data service and the API."""

from pydantic import BaseModel, Field


class DataEntry(BaseModel):
    """A stored key-value pair."""

    key: str = Field(..., description="Unique key")
    value: str = Field(..., description="Stored value")
