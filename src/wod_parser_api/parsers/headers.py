"""
Section header patterns shared by the segmenter and the classifier.
"""

import re
from typing import Optional

from .models import SectionBoundary, SectionKind
from .normalizer import is_date_line

SECTION_KEYWORDS = (
    "STRENGTH",
    "WORKOUT",
    "SKILL",
    "GYMNASTICS",
    "MINI-PUMP",
    "ACCESSORY",
    "METCON",
    "WOD",
    "CONDITIONING",
)

# "STRENGTH", "*METCON:*"
SECTION_HEADER_PATTERN = re.compile(
    r'^\*?\s*(' + '|'.join(re.escape(k) for k in SECTION_KEYWORDS) + r')\s*:?\s*\*?$',
    re.IGNORECASE
)
# "Workout : Chicago Slice"
NAMED_WORKOUT_PATTERN = re.compile(r'^(workout|wod)\s*:\s*(.+)$', re.IGNORECASE)
# "BACK SQUAT & PULL"
CAPS_HEADER_PATTERN = re.compile(r'^[A-Z][A-Z &-]*$')
# Metric lines are never headers
METRIC_WORDS_PATTERN = re.compile(r'\b(reps?|rounds?|minutes?|seconds?)\b', re.IGNORECASE)

CAPS_HEADER_MIN_LEN = 3
CAPS_HEADER_MAX_LEN = 50


def is_caps_header(line: str) -> bool:
    """All-caps line, 4-49 chars, no digits, not a metric line."""
    if not CAPS_HEADER_MIN_LEN < len(line) < CAPS_HEADER_MAX_LEN:
        return False
    if not CAPS_HEADER_PATTERN.match(line):
        return False
    return not METRIC_WORDS_PATTERN.search(line)


def detect_boundary(line: str, line_index: int) -> Optional[SectionBoundary]:
    """Classify a line as a section boundary, first match wins.

    Priority: keyword header, then ``workout: name``, then generic caps
    header. Blank and date lines are never boundaries.
    """
    clean = line.strip()
    if not clean or is_date_line(clean):
        return None

    match = SECTION_HEADER_PATTERN.match(clean)
    if match:
        return SectionBoundary(
            line_index=line_index,
            name=match.group(1),
            kind=SectionKind.SECTION_HEADER,
        )

    match = NAMED_WORKOUT_PATTERN.match(clean)
    if match:
        return SectionBoundary(
            line_index=line_index,
            name=match.group(2).strip(),
            kind=SectionKind.NAMED_WORKOUT,
        )

    if is_caps_header(clean):
        return SectionBoundary(
            line_index=line_index,
            name=clean,
            kind=SectionKind.CAPS_HEADER,
        )

    return None


def is_header_line(line: str) -> bool:
    return detect_boundary(line, 0) is not None
