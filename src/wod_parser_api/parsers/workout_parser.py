"""
Workout Text Parser

Entry point of the free-text parsing pipeline:

    normalize -> extract date -> segment -> classify -> match benchmark
              -> suggestions

The parser is handed all reference data by its caller and performs no I/O.
It never raises: unexpected faults are caught here and reported in
``ParseResult.errors``.
"""

import logging
from typing import List, Optional

from wod_parser_api.config import settings

from .classifier import classify
from .matcher import apply_benchmark_match, match_benchmark
from .models import CATALOGUE_CATEGORIES, ParseResult, ParsedWorkout, ReferenceData, SourceCatalogue
from .normalizer import extract_date, normalize
from .segmenter import segment
from .suggestions import suggest

logger = logging.getLogger(__name__)

EMPTY_INPUT_ERROR = "Invalid or empty input provided"
NO_ENTITIES_ERROR = "No workout entities could be identified"

# Per-entity confidence
BENCHMARK_CONFIDENCE = 0.9
CUSTOM_CONFIDENCE = 0.8


class WorkoutTextParser:
    """Parser for pasted workout programming"""

    def __init__(self, name_scoring: Optional[str] = None):
        self.name_scoring = name_scoring or settings.BENCHMARK_NAME_SCORING
        self.errors: List[str] = []

    def parse(self, raw_text: str, reference_data: Optional[ReferenceData] = None) -> ParseResult:
        """Parse a block of text into one or more structured workouts."""
        self.errors = []
        reference_data = reference_data or ReferenceData()

        try:
            text = normalize(raw_text)
            if not text:
                self.add_error(EMPTY_INPUT_ERROR)
                return self._failure()

            extracted_date = extract_date(text)
            entities = segment(text)
            logger.info(f"Found {len(entities)} workout entities")

            if not entities:
                self.add_error(NO_ENTITIES_ERROR)
                return self._failure(extracted_date=extracted_date)

            benchmark_names = reference_data.all_benchmark_names()
            parsed_entities: List[ParsedWorkout] = []
            scores: List[float] = []

            for entity in entities:
                parsed = classify(entity, reference_data.barbell_vocabulary, benchmark_names)
                match = match_benchmark(entity.raw_text, reference_data, self.name_scoring)
                parsed_entities.append(apply_benchmark_match(parsed, match))
                scores.append(BENCHMARK_CONFIDENCE if match else CUSTOM_CONFIDENCE)

            return ParseResult(
                found=True,
                confidence=min(sum(scores) / len(scores), 1.0),
                category=self._overall_category(parsed_entities),
                entities=parsed_entities,
                extracted_date=extracted_date,
                suggestions=suggest(raw_text, benchmark_names),
                errors=self.errors,
            )

        except Exception as e:
            logger.exception(f"Failed to parse workout text: {e}")
            self.errors.append(str(e) or e.__class__.__name__)
            return self._failure()

    def _failure(self, extracted_date: Optional[str] = None) -> ParseResult:
        return ParseResult(
            found=False,
            confidence=0,
            category="unknown",
            extracted_date=extracted_date,
            errors=self.errors,
        )

    @staticmethod
    def _overall_category(entities: List[ParsedWorkout]) -> str:
        for parsed in entities:
            if parsed.matched_benchmark.source_catalogue != SourceCatalogue.CUSTOM.value:
                return parsed.matched_benchmark.category
        return CATALOGUE_CATEGORIES[SourceCatalogue.CUSTOM]

    def add_error(self, error: str):
        """Add an error message"""
        self.errors.append(error)
        logger.error(f"Parser error: {error}")


def parse(raw_text: str, reference_data: Optional[ReferenceData] = None) -> ParseResult:
    """Parse with a fresh parser instance."""
    return WorkoutTextParser().parse(raw_text, reference_data)
