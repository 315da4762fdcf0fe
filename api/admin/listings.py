"""Admin listing creation endpoint. No authentication is enforced."""

import logging
from src.services.listing_service import get_listing_service
from src.utils.errors import ValidationError
from api.responses import json_response, parse_body

logger = logging.getLogger(__name__)


def handler(request):
    """
    Create a listing (POST /api/admin/listings).
    
    Responds 200 with {success, listing} or 400 with {error}.
    """
    try:
        payload = parse_body(request)
        listing = get_listing_service().create(payload)
        return json_response(200, {"success": True, "listing": listing})
    except ValidationError as e:
        return json_response(e.status_code, {"error": e.message})
    except Exception as e:
        logger.error(f"Error creating listing: {e}", exc_info=True)
        return json_response(500, {"error": "internal server error"})
