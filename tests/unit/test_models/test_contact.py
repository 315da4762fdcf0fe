"""Tests for Contact model."""

import pytest
from pydantic import ValidationError
from src.models.contact import Contact


@pytest.mark.unit
def test_contact_defaults():
    """Test optional fields take their defaults."""
    contact = Contact(
        id=1,
        name="Alice",
        email="a@example.com",
        created_at="2024-12-09T12:00:00.000Z"
    )
    
    assert contact.phone == ""
    assert contact.type == "General"
    assert contact.message == ""


@pytest.mark.unit
def test_contact_record_fields():
    """Test all declared fields are materialized in the record."""
    record = Contact(
        id=1,
        name="Alice",
        email="a@example.com",
        created_at="2024-12-09T12:00:00.000Z"
    ).to_record()
    
    assert record == {
        "id": 1,
        "name": "Alice",
        "email": "a@example.com",
        "phone": "",
        "type": "General",
        "message": "",
        "createdAt": "2024-12-09T12:00:00.000Z",
    }


@pytest.mark.unit
def test_contact_missing_required_fields():
    """Test that required fields are enforced."""
    with pytest.raises(ValidationError):
        Contact(id=1, name="Alice")
