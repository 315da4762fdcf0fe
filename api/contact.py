"""Contact form endpoint."""

import logging
from src.services.contact_service import ACKNOWLEDGMENT_MESSAGE, get_contact_service
from src.utils.errors import ValidationError
from api.responses import json_response, parse_body

logger = logging.getLogger(__name__)


def handler(request):
    """
    Submit a contact inquiry (POST /api/contact).
    
    The stored record is not echoed back, only an acknowledgment.
    """
    try:
        payload = parse_body(request)
        get_contact_service().create(payload)
        return json_response(200, {"success": True, "message": ACKNOWLEDGMENT_MESSAGE})
    except ValidationError as e:
        return json_response(e.status_code, {"error": e.message})
    except Exception as e:
        logger.error(f"Error saving contact: {e}", exc_info=True)
        return json_response(500, {"error": "internal server error"})
