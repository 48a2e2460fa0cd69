"""
Parse endpoints for pasted workout programming

Provides POST /parse/workout. The request handler owns the reference data
lookup; the parser itself only sees the text and the data handed to it.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from wod_parser_api.api.dependencies import reference_data
from wod_parser_api.config import settings
from wod_parser_api.parsers.models import ParseResult, ReferenceData
from wod_parser_api.parsers.workout_parser import WorkoutTextParser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/parse", tags=["parse"])


# ---------------------------------------------------------------------------
# Request/Response Models
# ---------------------------------------------------------------------------

class ParseWorkoutRequest(BaseModel):
    """Request model for POST /parse/workout"""
    text: str = Field(
        ...,
        max_length=settings.MAX_INPUT_CHARS,
        description="Pasted workout text (whiteboard app, coach notes, ...)"
    )


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.post("/workout", response_model=ParseResult)
def parse_workout(
    request: ParseWorkoutRequest,
    data: ReferenceData = Depends(reference_data),
) -> ParseResult:
    """Split pasted text into workouts and classify each one.

    Always answers 200; an unparseable text comes back with
    ``found=false`` and the reasons in ``errors``.
    """
    result = WorkoutTextParser().parse(request.text, data)
    logger.info(
        f"Parsed {len(request.text)} chars: found={result.found} "
        f"entities={len(result.entities)} category={result.category}"
    )
    return result
