"""Listing service - list and create listings over the JSON store."""

from pathlib import Path
from typing import Any, Optional
from src.models.listing import Listing
from src.services.json_store import JsonStore, get_json_store
from src.utils.config import get_listings_file
from src.utils.errors import PersistenceError, ValidationError
from src.utils.ids import generate_record_id, iso_timestamp
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)

REQUIRED_FIELDS_MESSAGE = "title, location, and price are required"


def build_listing(payload: dict) -> Listing:
    """
    Build a new listing from a request payload.

    Raises ValidationError unless title, location and price are all truthy.
    Falsy optional fields take their defaults.
    """
    title = payload.get("title")
    location = payload.get("location")
    price = payload.get("price")
    if not title or not location or not price:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    return Listing(
        id=generate_record_id(),
        title=title,
        location=location,
        price=price,
        beds=payload.get("beds") or "",
        baths=payload.get("baths") or "",
        size=payload.get("size") or "",
        status=payload.get("status") or "For Sale",
        created_at=iso_timestamp(),
    )


class ListingService:
    """Listings collection backed by a single JSON file."""

    def __init__(self, store: Optional[JsonStore] = None, path: Optional[Path] = None):
        self.store = store or get_json_store()
        self._path = path

    @property
    def path(self) -> Path:
        return self._path or get_listings_file()

    def list_all(self) -> Any:
        """Return every stored listing in insertion order."""
        return self.store.load(self.path, [])

    def create(self, payload: dict) -> dict:
        """Validate, append and persist a new listing; return the stored record."""
        listing = build_listing(payload).to_record()

        with self.store.locked(self.path):
            listings = self.store.load(self.path, [])
            if not isinstance(listings, list):
                raise PersistenceError(f"{self.path} does not contain a JSON array")
            listings.append(listing)
            self.store.save(self.path, listings)

        logger.info(
            "Listing created",
            listing_id=listing["id"],
            listing_count=len(listings)
        )
        return listing


# Global service instance
_listing_service: Optional[ListingService] = None


def get_listing_service() -> ListingService:
    """Get or create global listing service instance."""
    global _listing_service
    if _listing_service is None:
        _listing_service = ListingService()
    return _listing_service
