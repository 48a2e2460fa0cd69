"""
Text normalization and date extraction.

Pasted programming comes from whiteboard apps, spreadsheets and chat
messages, so line endings, tabs and blank-line runs are unified before any
segmentation happens. Dates are conventionally placed at the top of the
text and are pulled out of the first few lines only.
"""

import re
from typing import List, Optional

# Number of leading lines scanned for a date token
DATE_SCAN_LINES = 5

_TRAILING_WS = re.compile(r'[ \t\f\v]+$', re.MULTILINE)
_BLANK_RUN = re.compile(r'\n{3,}')

# "27-June-2025", "*06-APRIL-2023|THURSDAY*"
DATE_TOKEN_PATTERN = re.compile(r'(\d{1,2}-\w+-\d{4})')
STARRED_DATE_PATTERN = re.compile(r'\*(\d{2}-\w+-\d{4})')

DATE_LINE_PATTERNS = [
    re.compile(r'\d{1,2}[-/]\w+[-/]\d{4}', re.IGNORECASE),  # 27-June-2025, 27/June/2025
    re.compile(
        r'\b(jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?\s+\d{1,2},?\s+\d{4}',
        re.IGNORECASE
    ),  # June 27, 2025
    re.compile(r'\d{1,2}[-/]\d{1,2}[-/]\d{4}'),  # 27/06/2025
    re.compile(r'\*\d{2}-\w+-\d{4}\|\w+\*'),  # *27-June-2025|Friday*
    re.compile(r'\d{1,2}-\w+-\d{4}\|\s*\w+', re.IGNORECASE),  # 27-June-2025| Friday
]
WEEKDAY_PATTERN = re.compile(
    r'\b(monday|tuesday|wednesday|thursday|friday|saturday|sunday)\b',
    re.IGNORECASE
)


def normalize(raw: Optional[str]) -> str:
    """Clean raw pasted text.

    Steps, in order: CRLF to LF, tabs to single spaces, trailing whitespace
    stripped from every line, runs of 3+ newlines collapsed to 2, and the
    whole text trimmed. Empty or whitespace-only input gives ``""``.
    """
    if not raw or not isinstance(raw, str):
        return ""

    text = raw.replace('\r\n', '\n')
    text = text.replace('\t', ' ')
    text = _TRAILING_WS.sub('', text)
    text = _BLANK_RUN.sub('\n\n', text)
    return text.strip()


def extract_date(text: str) -> Optional[str]:
    """Return the first date token found in the first five lines, if any."""
    for line in text.split('\n')[:DATE_SCAN_LINES]:
        match = DATE_TOKEN_PATTERN.search(line) or STARRED_DATE_PATTERN.search(line)
        if match:
            return match.group(1)
    return None


def is_date_line(line: str) -> bool:
    """Check if a line carries date or weekday information."""
    if any(pattern.search(line) for pattern in DATE_LINE_PATTERNS):
        return True
    return bool(WEEKDAY_PATTERN.search(line))


def strip_date_lines(lines: List[str]) -> List[str]:
    """Drop date/day lines, keep everything else (blank lines included)."""
    return [line for line in lines if not (line.strip() and is_date_line(line.strip()))]
