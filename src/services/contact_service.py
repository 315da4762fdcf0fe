"""Contact service - store contact form submissions."""

from pathlib import Path
from typing import Optional
from src.models.contact import Contact
from src.services.json_store import JsonStore, get_json_store
from src.utils.config import get_contacts_file
from src.utils.errors import PersistenceError, ValidationError
from src.utils.ids import generate_record_id, iso_timestamp
from src.utils.logging import get_structured_logger, mask_record, sanitize_message_text

logger = get_structured_logger(__name__)

REQUIRED_FIELDS_MESSAGE = "name and email are required"
ACKNOWLEDGMENT_MESSAGE = "Contact message received. We will get back to you shortly."


def build_contact(payload: dict) -> Contact:
    """Build a new contact record; name and email must be truthy."""
    name = payload.get("name")
    email = payload.get("email")
    if not name or not email:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    return Contact(
        id=generate_record_id(),
        name=name,
        email=email,
        phone=payload.get("phone") or "",
        type=payload.get("type") or "General",
        message=payload.get("message") or "",
        created_at=iso_timestamp(),
    )


class ContactService:
    """Contacts collection backed by a single JSON file. Write-only over HTTP."""

    def __init__(self, store: Optional[JsonStore] = None, path: Optional[Path] = None):
        self.store = store or get_json_store()
        self._path = path

    @property
    def path(self) -> Path:
        return self._path or get_contacts_file()

    def create(self, payload: dict) -> dict:
        contact = build_contact(payload).to_record()

        with self.store.locked(self.path):
            contacts = self.store.load(self.path, [])
            if not isinstance(contacts, list):
                raise PersistenceError(f"{self.path} does not contain a JSON array")
            contacts.append(contact)
            self.store.save(self.path, contacts)

        message = contact["message"] if isinstance(contact["message"], str) else ""
        logger.info(
            "Contact message received",
            contact=mask_record({k: v for k, v in contact.items() if k != "message"}),
            message_preview=sanitize_message_text(message, max_length=200)
        )
        return contact


# Global service instance
_contact_service: Optional[ContactService] = None


def get_contact_service() -> ContactService:
    """Get or create global contact service instance."""
    global _contact_service
    if _contact_service is None:
        _contact_service = ContactService()
    return _contact_service
