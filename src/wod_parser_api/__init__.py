"""Free-text CrossFit workout parser."""
__version__ = "0.1.0"

from .parsers.models import ParseResult, ParsedWorkout, ReferenceData
from .parsers.workout_parser import WorkoutTextParser, parse

__all__ = [
    "ParseResult",
    "ParsedWorkout",
    "ReferenceData",
    "WorkoutTextParser",
    "parse",
]
