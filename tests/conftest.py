"""
Test fixtures for wod-parser-api.

Provides small in-memory reference data sets and a FastAPI test client
wired to them, so parsing tests never depend on the bundled data file.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import wod_parser_api...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from wod_parser_api.api.dependencies import reference_data
from wod_parser_api.main import app
from wod_parser_api.parsers.models import (
    BarbellLiftEntry,
    BenchmarkCatalogueEntry,
    ReferenceData,
    SourceCatalogue,
)


# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------


FRAN = BenchmarkCatalogueEntry(
    id=6,
    name="Fran",
    description="21-15-9:\nThrusters (95/65 lbs)\nPull-ups",
    workout_type="for_time",
    scoring="Time",
    time_cap_seconds=600,
    total_effort=90,
)

MURPH = BenchmarkCatalogueEntry(
    id=1,
    name="Murph",
    description="1 mile Run\n100 Pull-ups\n200 Push-ups\n300 Squats\n1 mile Run\n(20 lb vest)",
    workout_type="for_time",
    scoring="Time",
    time_cap_seconds=3600,
    total_effort=600,
)

FILTHY_FIFTY = BenchmarkCatalogueEntry(
    id=1,
    name="Filthy Fifty",
    description="50 Box Jumps\n50 Jumping Pull-ups\n50 KB Swings\n50 Push Press",
    workout_type="chipper",
    scoring="Time",
    time_cap_seconds=2400,
    total_effort=500,
)

VOCABULARY = [
    BarbellLiftEntry(id=1, lift_name="Back Squat", category="squat", lift_type="strength"),
    BarbellLiftEntry(id=8, lift_name="Clean", category="clean", lift_type="olympic_lift"),
    BarbellLiftEntry(id=10, lift_name="Clean and Jerk", category="olympic_lift", lift_type="olympic_composite"),
    BarbellLiftEntry(id=12, lift_name="Push Press", category="press", lift_type="olympic_variation"),
    BarbellLiftEntry(id=20, lift_name="Deadlift", category="deadlift", lift_type="strength_pull"),
    BarbellLiftEntry(id=24, lift_name="Thruster", category="olympic_lift", lift_type="olympic_composite"),
]

BENCHMARK_LIFTS = {
    (SourceCatalogue.GIRL, 6): ["Thruster"],
    (SourceCatalogue.NOTABLE, 1): ["Push Press"],
}


def lifts_for_benchmark(benchmark_id: int, catalogue: SourceCatalogue) -> List[Dict[str, Any]]:
    return [{"lift_name": name} for name in BENCHMARK_LIFTS.get((catalogue, benchmark_id), [])]


@pytest.fixture
def vocabulary() -> List[BarbellLiftEntry]:
    return list(VOCABULARY)


@pytest.fixture
def empty_reference() -> ReferenceData:
    """No catalogues, no vocabulary."""
    return ReferenceData()


@pytest.fixture
def lifts_only_reference() -> ReferenceData:
    """Barbell vocabulary without any benchmark catalogue."""
    return ReferenceData(barbell_vocabulary=list(VOCABULARY))


@pytest.fixture
def fran_reference() -> ReferenceData:
    """Girl catalogue holding Fran, plus vocabulary and junction lookup."""
    return ReferenceData(
        girl_benchmarks=[FRAN],
        barbell_vocabulary=list(VOCABULARY),
        get_lifts_for_benchmark=lifts_for_benchmark,
    )


@pytest.fixture
def full_reference() -> ReferenceData:
    return ReferenceData(
        girl_benchmarks=[FRAN],
        hero_benchmarks=[MURPH],
        notable_benchmarks=[FILTHY_FIFTY],
        barbell_vocabulary=list(VOCABULARY),
        get_lifts_for_benchmark=lifts_for_benchmark,
    )


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client(fran_reference) -> TestClient:
    """Per-test FastAPI TestClient backed by the Fran reference data."""
    app.dependency_overrides[reference_data] = lambda: fran_reference
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def bundled_client() -> TestClient:
    """TestClient using the real bundled reference data file."""
    app.dependency_overrides.clear()
    return TestClient(app)
