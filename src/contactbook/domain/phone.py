"""Phone number normalization to a bare digit string for storage and deduplication."""

import re
import unicodedata

# DDD (2 digits) + subscriber number (9 digits).
PHONE_LENGTH = 11

_NON_DIGIT = re.compile(r"[^0-9]")


def normalize_phone(raw: str | None) -> str:
    """Return only the ASCII digits of raw, after NFD decomposition.

    Decomposing first splits accented characters into base + combining mark, so the
    marks are dropped together with spaces, parentheses, dashes and any other
    non-digit. "(11) 98888-7766" becomes "11988887766". Length is not checked here;
    see is_valid_phone.
    """
    if not raw:
        return ""
    return _NON_DIGIT.sub("", unicodedata.normalize("NFD", str(raw)))


def is_valid_phone(digits: str) -> bool:
    return len(digits) == PHONE_LENGTH
