"""
Benchmark Matcher

Fuzzy matching of workout text against the Girl, Hero and Notable
benchmark catalogues.

Catalogues are checked girl -> hero -> notable and the first entry over the
threshold wins, so a borderline Girl WOD beats a strong Hero WOD match.

Name scoring has two modes:
- ``distance``: containment scores 0.9, otherwise the normalized
  Levenshtein *distance* is compared against the same ``> 0.8`` threshold.
  Higher means further apart, so long unrelated text can be accepted.
  This reproduces the behavior the benchmark tables were tuned against.
- ``similarity``: containment scores 0.9, otherwise ``1 - distance``.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .models import (
    CATALOGUE_CATEGORIES,
    BarbellLift,
    BenchmarkCatalogueEntry,
    MatchedBenchmark,
    ParsedWorkout,
    ReferenceData,
    SourceCatalogue,
)

logger = logging.getLogger(__name__)

NAME_MATCH_THRESHOLD = 0.8
DESCRIPTION_MATCH_THRESHOLD = 0.7
CONTAINMENT_SCORE = 0.9
MIN_DESCRIPTION_WORD_LEN = 3

NAME_SCORING_MODES = ("distance", "similarity")


@dataclass
class BenchmarkMatch:
    """A catalogue entry accepted by the matcher."""
    catalogue: SourceCatalogue
    entry: BenchmarkCatalogueEntry
    name_score: float
    description_score: float
    lifts: List[BarbellLift] = field(default_factory=list)

    def to_matched_benchmark(self) -> MatchedBenchmark:
        return MatchedBenchmark(
            source_catalogue=self.catalogue,
            database_id=self.entry.id,
            category=CATALOGUE_CATEGORIES[self.catalogue],
        )


def levenshtein_distance(a: str, b: str) -> int:
    """Classic edit distance; insert, delete and substitute all cost 1."""
    rows = len(b) + 1
    cols = len(a) + 1
    matrix = [[0] * cols for _ in range(rows)]

    for i in range(cols):
        matrix[0][i] = i
    for j in range(rows):
        matrix[j][0] = j

    for j in range(1, rows):
        for i in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[j][i] = min(
                matrix[j][i - 1] + 1,
                matrix[j - 1][i] + 1,
                matrix[j - 1][i - 1] + cost,
            )

    return matrix[len(b)][len(a)]


def name_similarity(text: str, name: str, mode: str = "distance") -> float:
    text = text.lower()
    name = name.lower()
    if name in text or text in name:
        return CONTAINMENT_SCORE

    longest = max(len(text), len(name))
    if longest == 0:
        return 0.0
    fraction = levenshtein_distance(text, name) / longest
    if mode == "similarity":
        return 1 - fraction
    return fraction


def description_similarity(text: str, description: str) -> float:
    """Share of input words that partially match a description word."""
    input_words = text.lower().split()
    target_words = description.lower().split()
    longest = max(len(input_words), len(target_words))
    if longest == 0:
        return 0.0

    matches = 0
    for word in input_words:
        if len(word) < MIN_DESCRIPTION_WORD_LEN:
            continue
        if any(target in word or word in target for target in target_words):
            matches += 1
    return matches / longest


def resolve_benchmark_lifts(
    entry: BenchmarkCatalogueEntry,
    catalogue: SourceCatalogue,
    reference_data: ReferenceData,
) -> List[BarbellLift]:
    """Lift set for a benchmark, resolved against the barbell vocabulary."""
    by_name = {lift.lift_name.lower(): lift for lift in reference_data.barbell_vocabulary}
    lifts = []
    for row in reference_data.get_lifts_for_benchmark(entry.id, catalogue) or []:
        lift_name = row.get("lift_name") or row.get("liftName") or ""
        vocab = by_name.get(lift_name.lower())
        if vocab is None:
            logger.warning(f"Benchmark '{entry.name}' references unknown lift '{lift_name}'")
            continue
        lifts.append(BarbellLift(
            lift_id=vocab.id,
            lift_name=vocab.lift_name,
            category=vocab.category,
            lift_type=vocab.lift_type,
        ))
    return lifts


def match_benchmark(
    text: str,
    reference_data: ReferenceData,
    name_scoring: str = "distance",
) -> Optional[BenchmarkMatch]:
    """First catalogue entry whose name or description clears the threshold."""
    if name_scoring not in NAME_SCORING_MODES:
        raise ValueError(f"Unknown name scoring mode: {name_scoring}")

    lowered = text.lower()
    for catalogue, entries in reference_data.catalogues():
        for entry in entries:
            if not entry.name.strip():
                continue
            name_score = name_similarity(lowered, entry.name, name_scoring)
            description_score = description_similarity(lowered, entry.description)
            if name_score > NAME_MATCH_THRESHOLD or description_score > DESCRIPTION_MATCH_THRESHOLD:
                logger.info(
                    f"Matched {catalogue.value} benchmark '{entry.name}' "
                    f"(name={name_score:.2f}, description={description_score:.2f})"
                )
                return BenchmarkMatch(
                    catalogue=catalogue,
                    entry=entry,
                    name_score=name_score,
                    description_score=description_score,
                    lifts=resolve_benchmark_lifts(entry, catalogue, reference_data),
                )
    return None


def apply_benchmark_match(parsed: ParsedWorkout, match: Optional[BenchmarkMatch]) -> ParsedWorkout:
    """Attach benchmark linkage and the benchmark's lifts to a parsed workout."""
    if match is None:
        return parsed

    known = {lift.lift_id for lift in parsed.barbell_lifts}
    extra = [lift for lift in match.lifts if lift.lift_id not in known]
    return parsed.model_copy(update={
        "matched_benchmark": match.to_matched_benchmark(),
        "barbell_lifts": parsed.barbell_lifts + extra,
    })


def search_benchmarks(partial: str, reference_data: ReferenceData, limit: int = 10) -> List[str]:
    """Benchmark names containing ``partial``, girl -> hero -> notable."""
    query = (partial or "").lower().strip()
    if len(query) < 2:
        return []

    results = []
    for name in reference_data.all_benchmark_names():
        if query in name.lower():
            results.append(name)
            if len(results) >= limit:
                break
    return results
