"""
Entity Classifier

Turns a WorkoutEntity into a ParsedWorkout: name, cleaned description,
workout type, scoring label, time cap, a rough total-effort volume and the
barbell lifts mentioned in the text.

Every helper here is a pure function over strings. Missing information is
filled with defaults (``for_time``, effort floor 50, "Custom Workout")
rather than reported as an error.
"""

import re
import logging
from typing import Iterable, List, Optional, Sequence

from .headers import is_header_line
from .models import (
    BarbellLift,
    BarbellLiftEntry,
    ParsedWorkout,
    WorkoutEntity,
    WorkoutType,
)
from wod_parser_api.utils import to_int

logger = logging.getLogger(__name__)

DEFAULT_WORKOUT_NAME = "Custom Workout"

# Effort estimate constants
MIN_TOTAL_EFFORT = 50
STRENGTH_TOTAL_EFFORT = 150

NAME_PATTERNS = [
    re.compile(r'workout\s*[:\-]\s*(.+)', re.IGNORECASE),
    re.compile(r'wod\s*[:\-]\s*(.+)', re.IGNORECASE),
    re.compile(r'^([A-Za-z][A-Za-z \t]+)$', re.MULTILINE),  # standalone letters-only line
]

# Checked in order, first hit wins
WORKOUT_TYPE_KEYWORDS = [
    (("for time", "rft"), WorkoutType.FOR_TIME),
    (("amrap",), WorkoutType.AMRAP),
    (("emom",), WorkoutType.EMOM),
    (("tabata",), WorkoutType.TABATA),
    (("build to", "rm"), WorkoutType.STRENGTH),
    (("max effort",), WorkoutType.STRENGTH),
]

SCORING_BY_TYPE = {
    WorkoutType.FOR_TIME: "Time",
    WorkoutType.AMRAP: "Rounds + Reps",
}
DEFAULT_SCORING = "Points"

TIME_CAP_PATTERN = re.compile(r'(?:cap|time cap)[:\s]*(\d+)(?:\s*min(?:utes?)?)?', re.IGNORECASE)
REP_COUNT_PATTERN = re.compile(r'(\d+)\s*(?:reps?|x)', re.IGNORECASE)
ROUND_COUNT_PATTERN = re.compile(r'(\d+)\s*rounds?', re.IGNORECASE)


def extract_workout_name(raw_text: str, default: str = DEFAULT_WORKOUT_NAME) -> str:
    """Pull a workout name out of free text.

    Tries ``workout: X``, ``wod: X`` and a standalone letters-only line, in
    that order, and returns the first capture longer than two characters.
    """
    for pattern in NAME_PATTERNS:
        match = pattern.search(raw_text)
        if match and len(match.group(1).strip()) > 2:
            return match.group(1).strip()
    return default


def clean_description(raw_text: str) -> str:
    """Drop a leading header line and join the remaining non-empty lines."""
    lines = raw_text.split('\n')
    if lines and is_header_line(lines[0]):
        lines = lines[1:]

    cleaned = [line.strip() for line in lines if line.strip()]
    return '\n'.join(cleaned) or raw_text.strip()


def detect_workout_type(text: str) -> WorkoutType:
    """Keyword scan over the lower-cased text, defaulting to for_time."""
    lowered = text.lower()
    for keywords, workout_type in WORKOUT_TYPE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return workout_type
    return WorkoutType.FOR_TIME


def determine_scoring(workout_type) -> str:
    try:
        workout_type = WorkoutType(workout_type)
    except ValueError:
        return DEFAULT_SCORING
    return SCORING_BY_TYPE.get(workout_type, DEFAULT_SCORING)


def extract_time_cap(text: str) -> Optional[int]:
    """Time cap in seconds; the captured number is read as minutes."""
    match = TIME_CAP_PATTERN.search(text)
    if not match:
        return None
    minutes = to_int(match.group(1))
    return minutes * 60 if minutes is not None else None


def calculate_total_effort(text: str) -> int:
    """Crude volume estimate used to compare workout intensity.

    Sums every number followed by ``rep``/``reps``/``x``, multiplies by the
    first ``N rounds`` found, forces 150 for strength sessions ("build to",
    "rm") and never returns less than 50.
    """
    total = sum(int(n) for n in REP_COUNT_PATTERN.findall(text))

    rounds = ROUND_COUNT_PATTERN.search(text)
    if rounds:
        total *= int(rounds.group(1))

    lowered = text.lower()
    if "build to" in lowered or "rm" in lowered:
        total = STRENGTH_TOTAL_EFFORT

    return max(total, MIN_TOTAL_EFFORT)


def identify_barbell_lifts(text: str, vocabulary: Iterable[BarbellLiftEntry]) -> List[BarbellLift]:
    """Vocabulary lifts whose name occurs in the text, in vocabulary order.

    Plain substring containment, so "Clean" also matches inside
    "Clean and Jerk".
    """
    lowered = text.lower()
    found = []
    for lift in vocabulary:
        if lift.lift_name.lower() in lowered:
            found.append(BarbellLift(
                lift_id=lift.id,
                lift_name=lift.lift_name,
                category=lift.category,
                lift_type=lift.lift_type,
            ))
    return found


def find_related_benchmark(text: str, benchmark_names: Sequence[str]) -> Optional[str]:
    """First benchmark name mentioned anywhere in the text."""
    lowered = text.lower()
    for name in benchmark_names:
        if name and name.lower() in lowered:
            return name
    return None


def resolve_name(entity: WorkoutEntity) -> str:
    if entity.detected_name and entity.detected_name != DEFAULT_WORKOUT_NAME:
        return entity.detected_name
    return extract_workout_name(entity.raw_text)


def classify(
    entity: WorkoutEntity,
    vocabulary: Iterable[BarbellLiftEntry] = (),
    benchmark_names: Sequence[str] = (),
) -> ParsedWorkout:
    """Build a complete ParsedWorkout for one entity."""
    raw_text = entity.raw_text
    workout_type = detect_workout_type(raw_text)

    parsed = ParsedWorkout(
        name=resolve_name(entity),
        description=clean_description(raw_text),
        workout_type=workout_type,
        scoring=determine_scoring(workout_type),
        time_cap_seconds=extract_time_cap(raw_text),
        total_effort=calculate_total_effort(raw_text),
        barbell_lifts=identify_barbell_lifts(raw_text, vocabulary),
        related_benchmark=find_related_benchmark(raw_text, benchmark_names),
    )
    logger.debug(
        f"Classified '{parsed.name}': type={parsed.workout_type} "
        f"effort={parsed.total_effort} lifts={len(parsed.barbell_lifts)}"
    )
    return parsed
