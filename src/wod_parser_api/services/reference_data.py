"""
Reference Data Service

PURPOSE
-------
- Load the benchmark catalogues (Girl, Hero, Notable WODs) and the barbell
  lift vocabulary the parser matches against
- Build the benchmark -> lift junction lookup handed to the parser as a
  callback
- Expose `get_reference_data()` for request handlers

The parser core never reads files itself; request handlers load the data
here once and pass it down.

DATA FILE
---------
`data/reference_data.json` ships with the package. Set REFERENCE_DATA_PATH
to point at another file with the same shape:

    {
      "girl_benchmarks": [{"id", "name", "description", "workout_type",
                           "scoring", "time_cap_seconds", "total_effort",
                           "barbell_lifts": ["Thruster", ...]}],
      "hero_benchmarks": [...],
      "notable_benchmarks": [...],
      "barbell_lifts": [{"id", "lift_name", "category", "lift_type"}]
    }
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from wod_parser_api.config import settings
from wod_parser_api.parsers.models import (
    BarbellLiftEntry,
    BenchmarkCatalogueEntry,
    ReferenceData,
    SourceCatalogue,
)

logger = logging.getLogger(__name__)

BUNDLED_DATA_FILE = Path(__file__).parent.parent / "data" / "reference_data.json"

CATALOGUE_KEYS = {
    SourceCatalogue.GIRL: "girl_benchmarks",
    SourceCatalogue.HERO: "hero_benchmarks",
    SourceCatalogue.NOTABLE: "notable_benchmarks",
}


class ReferenceDataError(RuntimeError):
    """Raised when reference data cannot be loaded."""


class BenchmarkLiftIndex:
    """Benchmark -> lift names junction, keyed by (catalogue, benchmark id)."""

    def __init__(self, rows: Optional[Dict[Tuple[SourceCatalogue, int], List[str]]] = None):
        self._rows = rows or {}

    def add(self, catalogue: SourceCatalogue, benchmark_id: int, lift_names: List[str]):
        self._rows[(catalogue, benchmark_id)] = list(lift_names)

    def __call__(self, benchmark_id: int, catalogue: SourceCatalogue) -> List[Dict[str, Any]]:
        names = self._rows.get((SourceCatalogue(catalogue), benchmark_id), [])
        return [{"lift_name": name} for name in names]


def build_reference_data(payload: Dict[str, Any]) -> ReferenceData:
    """Validate a raw reference-data payload into a ReferenceData."""
    if not isinstance(payload, dict):
        raise ReferenceDataError("Reference data must be a JSON object")

    lift_index = BenchmarkLiftIndex()
    catalogues: Dict[SourceCatalogue, List[BenchmarkCatalogueEntry]] = {}

    try:
        for catalogue, key in CATALOGUE_KEYS.items():
            entries = []
            for row in payload.get(key) or []:
                entry = BenchmarkCatalogueEntry(**row)
                entries.append(entry)
                lift_index.add(catalogue, entry.id, row.get("barbell_lifts") or [])
            catalogues[catalogue] = entries

        vocabulary = [BarbellLiftEntry(**row) for row in payload.get("barbell_lifts") or []]
    except (TypeError, ValidationError) as e:
        raise ReferenceDataError(f"Malformed reference data: {e}") from e

    return ReferenceData(
        girl_benchmarks=catalogues[SourceCatalogue.GIRL],
        hero_benchmarks=catalogues[SourceCatalogue.HERO],
        notable_benchmarks=catalogues[SourceCatalogue.NOTABLE],
        barbell_vocabulary=vocabulary,
        get_lifts_for_benchmark=lift_index,
    )


def load_reference_data(path: Optional[str] = None) -> ReferenceData:
    """Load reference data from `path`, REFERENCE_DATA_PATH or the bundled file."""
    data_file = Path(path or settings.REFERENCE_DATA_PATH or BUNDLED_DATA_FILE)

    try:
        with open(data_file, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as e:
        raise ReferenceDataError(f"Reference data file not found: {data_file}") from e
    except json.JSONDecodeError as e:
        raise ReferenceDataError(f"Reference data is not valid JSON: {e}") from e

    reference_data = build_reference_data(payload)
    logger.info(
        f"Loaded reference data from {data_file}: "
        f"{len(reference_data.girl_benchmarks)} girls, "
        f"{len(reference_data.hero_benchmarks)} heroes, "
        f"{len(reference_data.notable_benchmarks)} notables, "
        f"{len(reference_data.barbell_vocabulary)} lifts"
    )
    return reference_data


@lru_cache(maxsize=1)
def get_reference_data() -> ReferenceData:
    """Process-wide reference data, loaded once."""
    return load_reference_data()
