"""FastAPI dependencies shared by the route modules."""
import logging

from fastapi import HTTPException

from wod_parser_api.parsers.models import ReferenceData
from wod_parser_api.services.reference_data import ReferenceDataError, get_reference_data

logger = logging.getLogger(__name__)


def reference_data() -> ReferenceData:
    """Reference data for a request; 503 when it cannot be loaded."""
    try:
        return get_reference_data()
    except ReferenceDataError as e:
        logger.error(f"Reference data unavailable: {e}")
        raise HTTPException(status_code=503, detail="Workout reference data unavailable")
