"""Contact inquiry models."""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class Contact(BaseModel):
    """Contact form submission as stored in contacts.json."""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Record ID (epoch milliseconds at creation)")
    name: Any = Field(..., description="Sender name")
    email: Any = Field(..., description="Sender e-mail address")
    phone: Any = Field("", description="Phone number")
    type: Any = Field("General", description="Inquiry type")
    message: Any = Field("", description="Free-form message")
    created_at: str = Field(..., alias="createdAt", description="ISO-8601 creation timestamp")

    def to_record(self) -> dict:
        """Serialize with wire field names."""
        return self.model_dump(by_alias=True)
