"""Listing models."""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class Listing(BaseModel):
    """Real estate listing as stored in listings.json."""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Record ID (epoch milliseconds at creation)")
    title: Any = Field(..., description="Listing title")
    location: Any = Field(..., description="Property location")
    price: Any = Field(..., description="Asking price, stored as submitted")
    beds: Any = Field("", description="Bedrooms")
    baths: Any = Field("", description="Bathrooms")
    size: Any = Field("", description="Property size")
    status: Any = Field("For Sale", description="Listing status")
    created_at: str = Field(..., alias="createdAt", description="ISO-8601 creation timestamp")

    def to_record(self) -> dict:
        """Serialize with wire field names."""
        return self.model_dump(by_alias=True)
