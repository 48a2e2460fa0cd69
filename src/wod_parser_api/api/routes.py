"""API routes for health checks and benchmark lookups."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query

from wod_parser_api import __version__
from wod_parser_api.api.dependencies import reference_data
from wod_parser_api.config import settings
from wod_parser_api.parsers.matcher import search_benchmarks
from wod_parser_api.parsers.models import ReferenceData
from wod_parser_api.parsers.suggestions import suggest

STARTED_AT = datetime.now(timezone.utc).isoformat()

router = APIRouter()


# ---------------------------------------------------------------------------
# Version / health
# ---------------------------------------------------------------------------


@router.get("/version")
def get_version():
    """Service version and the environment it runs in."""
    return {
        "service": "wod-parser-api",
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "started_at": STARTED_AT,
    }


@router.get("/health")
def health():
    """Health check endpoint."""
    return {"ok": True}


# ---------------------------------------------------------------------------
# Benchmarks
# ---------------------------------------------------------------------------


@router.get("/benchmarks/search")
def search(
    q: str = Query(..., max_length=100, description="Partial benchmark name"),
    limit: int = Query(10, ge=1, le=50),
    data: ReferenceData = Depends(reference_data),
):
    """Benchmark names containing the query, Girls first, then Heroes, then Notables."""
    return {"results": search_benchmarks(q, data, limit=limit)}


@router.get("/benchmarks/suggestions")
def suggestions(
    text: str = Query(..., max_length=settings.MAX_INPUT_CHARS),
    data: ReferenceData = Depends(reference_data),
):
    """'Did you mean' benchmark names for the start of a text."""
    return {"suggestions": suggest(text, data.all_benchmark_names())}
