"""
Entity Segmenter

Splits a normalized block of pasted programming into workout entities.

A block like::

    27-June-2025| Friday
    STRENGTH
    Back Squat 5x5

    METCON
    AMRAP 12:
    10 burpees

becomes two entities, "STRENGTH" and "METCON". Boundaries are keyword
headers, ``workout: name`` lines and generic ALL-CAPS headers. Text before
the first boundary becomes its own entity, and input without any boundary
is returned as a single entity.
"""

import logging
from typing import List

from .classifier import DEFAULT_WORKOUT_NAME, extract_workout_name
from .headers import detect_boundary
from .models import SectionBoundary, SectionKind, WorkoutEntity
from .normalizer import is_date_line, strip_date_lines

logger = logging.getLogger(__name__)

PRE_CONTENT_NAME = "Pre-Section Content"


def find_content_start(lines: List[str]) -> int:
    """Index of the first line that is neither blank nor a date/day line."""
    for index, line in enumerate(lines):
        clean = line.strip()
        if clean and not is_date_line(clean):
            return index
    return len(lines)


def find_boundaries(lines: List[str], start: int = 0) -> List[SectionBoundary]:
    """Section boundaries from ``start`` onwards, ordered by line index."""
    boundaries = []
    for index in range(start, len(lines)):
        boundary = detect_boundary(lines[index], index)
        if boundary:
            boundaries.append(boundary)
    return boundaries


def _has_content(lines: List[str]) -> bool:
    return any(line.strip() for line in lines)


def _join(lines: List[str]) -> str:
    return '\n'.join(lines).strip()


def segment(text: str) -> List[WorkoutEntity]:
    """Split normalized text into workout entities.

    Never raises; any non-empty input yields at least one entity.
    """
    lines = text.split('\n')
    start = find_content_start(lines)
    boundaries = find_boundaries(lines, start)

    if not boundaries:
        logger.debug("No section boundaries, using whole input")
        return _whole_input(lines, start)

    entities = []

    pre_lines = strip_date_lines(lines[start:boundaries[0].line_index])
    if _has_content(pre_lines):
        pre_text = _join(pre_lines)
        entities.append(WorkoutEntity(
            raw_text=pre_text,
            detected_name=extract_workout_name(pre_text, default=PRE_CONTENT_NAME),
            section_kind=SectionKind.PRE_CONTENT,
        ))

    for position, boundary in enumerate(boundaries):
        if position + 1 < len(boundaries):
            end = boundaries[position + 1].line_index
        else:
            end = len(lines)

        body_lines = strip_date_lines(lines[boundary.line_index + 1:end])
        raw_text = _join([lines[boundary.line_index]] + body_lines)
        if not raw_text:
            continue

        entities.append(WorkoutEntity(
            raw_text=raw_text,
            detected_name=boundary.name or DEFAULT_WORKOUT_NAME,
            section_kind=boundary.kind,
        ))

    logger.info(f"Split into {len(entities)} entities: {[e.detected_name for e in entities]}")
    return entities


def _whole_input(lines: List[str], start: int) -> List[WorkoutEntity]:
    body = _join(lines[start:])
    if not body:
        return []
    return [WorkoutEntity(
        raw_text=body,
        detected_name=extract_workout_name(body),
        section_kind=SectionKind.FULL_CONTENT,
    )]
