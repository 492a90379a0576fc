"""
Semantic format detection for string values.

Patterns are checked in a fixed priority order and the first match wins,
so a full date-time string is never reported as a bare date.
"""

import re
from enum import Enum
from typing import Optional


class FormatTag(Enum):
    """Semantic string formats, valued with their JSON Schema names."""

    EMAIL = "email"
    URI = "uri"
    DATE_TIME = "date-time"
    DATE = "date"
    TIME = "time"
    UUID = "uuid"
    IPV4 = "ipv4"


# Order matters: first match wins
FORMAT_PATTERNS = (
    (FormatTag.EMAIL, re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")),
    (FormatTag.URI, re.compile(r"https?://.*", re.DOTALL)),
    (FormatTag.DATE_TIME, re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}.*", re.DOTALL)),
    (FormatTag.DATE, re.compile(r"\d{4}-\d{2}-\d{2}")),
    (FormatTag.TIME, re.compile(r"\d{2}:\d{2}:\d{2}")),
    (
        FormatTag.UUID,
        re.compile(
            r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
            re.IGNORECASE,
        ),
    ),
    (FormatTag.IPV4, re.compile(r"(\d{1,3}\.){3}\d{1,3}")),
)


def detect_format(value: str) -> Optional[FormatTag]:
    """Classify a string value, returning None when no format matches."""
    for tag, pattern in FORMAT_PATTERNS:
        if pattern.fullmatch(value):
            return tag
    return None
