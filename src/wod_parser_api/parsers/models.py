"""
Parser Models

Pydantic models for the structured workout output of the free-text parser,
plus the read-only reference data the parser is handed by its caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field


class WorkoutType(str, Enum):
    """Closed set of workout types a parsed workout can carry"""
    FOR_TIME = "for_time"
    AMRAP = "amrap"
    EMOM = "emom"
    TABATA = "tabata"
    STRENGTH = "strength"
    INTERVAL = "interval"
    ENDURANCE = "endurance"
    CHIPPER = "chipper"
    LADDER = "ladder"
    UNBROKEN = "unbroken"


class SectionKind(str, Enum):
    """How an entity's section was detected"""
    SECTION_HEADER = "section_header"  # "STRENGTH", "METCON"
    NAMED_WORKOUT = "named_workout"    # "Workout: Chicago Slice"
    CAPS_HEADER = "caps_header"        # "BACK SQUAT & PULL"
    PRE_CONTENT = "pre_content"        # text before the first boundary
    FULL_CONTENT = "full_content"      # no boundaries at all


class SourceCatalogue(str, Enum):
    """Benchmark catalogue a workout was matched against"""
    GIRL = "girl"
    HERO = "hero"
    NOTABLE = "notable"
    CUSTOM = "custom"


# Category names used by the benchmark tables
CATALOGUE_CATEGORIES: Dict[SourceCatalogue, str] = {
    SourceCatalogue.GIRL: "girls",
    SourceCatalogue.HERO: "heroes",
    SourceCatalogue.NOTABLE: "notables",
    SourceCatalogue.CUSTOM: "custom",
}


class SectionBoundary(BaseModel):
    """A line that starts a new workout entity"""
    line_index: int = Field(..., ge=0)
    name: str
    kind: SectionKind


class WorkoutEntity(BaseModel):
    """One self-contained workout description cut out of the pasted text"""
    raw_text: str
    detected_name: str = "Custom Workout"
    section_kind: SectionKind = SectionKind.FULL_CONTENT


class BarbellLift(BaseModel):
    """Barbell movement identified in a workout"""
    lift_id: int
    lift_name: str
    category: str
    lift_type: str


class MatchedBenchmark(BaseModel):
    """Benchmark linkage for a parsed workout"""
    source_catalogue: SourceCatalogue = SourceCatalogue.CUSTOM
    database_id: Optional[int] = None
    category: str = "custom"

    class Config:
        use_enum_values = True


class ParsedWorkout(BaseModel):
    """Classifier output for a single entity"""
    name: str = Field(..., description="Workout name/title")
    description: str = ""
    workout_type: WorkoutType = WorkoutType.FOR_TIME
    scoring: str = "Time"
    time_cap_seconds: Optional[int] = Field(default=None, ge=0)
    total_effort: int = Field(default=50, ge=50)
    barbell_lifts: List[BarbellLift] = Field(default_factory=list)
    matched_benchmark: MatchedBenchmark = Field(default_factory=MatchedBenchmark)
    related_benchmark: Optional[str] = Field(
        default=None,
        description="Benchmark name mentioned in the text, if any"
    )

    class Config:
        use_enum_values = True


class BenchmarkCatalogueEntry(BaseModel):
    """Row of the girl/hero/notable benchmark catalogues"""
    id: int
    name: str
    description: str = ""
    workout_type: str = "for_time"
    scoring: str = "Time"
    time_cap_seconds: Optional[int] = None
    total_effort: Optional[int] = None


class BarbellLiftEntry(BaseModel):
    """Row of the barbell lift vocabulary"""
    id: int
    lift_name: str
    category: str = "other"
    lift_type: str = "strength"


class ParseResult(BaseModel):
    """Top-level result of parsing one block of text"""
    found: bool = False
    confidence: float = Field(default=0, ge=0, le=1)
    category: str = "unknown"
    entities: List[ParsedWorkout] = Field(default_factory=list)
    extracted_date: Optional[str] = None
    suggestions: List[str] = Field(default_factory=list, max_length=3)
    errors: List[str] = Field(default_factory=list)


LiftLookup = Callable[[int, SourceCatalogue], List[Dict[str, Any]]]


def _no_lifts(benchmark_id: int, catalogue: SourceCatalogue) -> List[Dict[str, Any]]:
    return []


@dataclass(frozen=True)
class ReferenceData:
    """Read-only catalogues and vocabulary supplied by the caller."""

    girl_benchmarks: List[BenchmarkCatalogueEntry] = field(default_factory=list)
    hero_benchmarks: List[BenchmarkCatalogueEntry] = field(default_factory=list)
    notable_benchmarks: List[BenchmarkCatalogueEntry] = field(default_factory=list)
    barbell_vocabulary: List[BarbellLiftEntry] = field(default_factory=list)
    get_lifts_for_benchmark: LiftLookup = _no_lifts

    def catalogues(self):
        """Catalogues in matching priority order: girl, hero, notable."""
        return [
            (SourceCatalogue.GIRL, self.girl_benchmarks),
            (SourceCatalogue.HERO, self.hero_benchmarks),
            (SourceCatalogue.NOTABLE, self.notable_benchmarks),
        ]

    def all_benchmark_names(self) -> List[str]:
        return [entry.name for _, entries in self.catalogues() for entry in entries]
