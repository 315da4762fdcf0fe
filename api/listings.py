"""Public listings endpoint."""

import logging
from src.services.listing_service import get_listing_service
from api.responses import json_response

logger = logging.getLogger(__name__)


def handler(request):
    """Return all listings (GET /api/listings)."""
    try:
        listings = get_listing_service().list_all()
        return json_response(200, listings)
    except Exception as e:
        logger.error(f"Error listing listings: {e}", exc_info=True)
        return json_response(500, {"error": "internal server error"})
