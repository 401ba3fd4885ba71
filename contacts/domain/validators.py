"""Field validators.

Every validator maps a raw input string to the value that gets stored.
Input that fails a check is never rejected: it collapses to a sentinel so
that a record always stays structurally complete. When ``report`` is
given it receives a short diagnostic for each coerced value; otherwise the
validators are pure.
"""

import re
from collections.abc import Callable
from datetime import date
from typing import Final

from .constants import (
    ALLOWED_GENDERS,
    BAD_BIRTH_DATE,
    BAD_GENDER,
    NO_DATA,
    NO_NUMBER,
    WRONG_NUMBER_FORMAT,
)

Reporter = Callable[[str], None]
Validator = Callable[[str, Reporter | None], str]

# Optional "+" and a bare or parenthesized first group, then dash or space
# separated groups of two or more characters: an optional parenthesized
# second group followed by up to three bare groups.
PHONE_PATTERN: Final = re.compile(
    r"\+?(?:\(\w+\)|\w+)(?:[ -]\(\w{2,}\))?(?:[ -]\w{2,}){0,3}", re.ASCII
)
ISO_DATE_PATTERN: Final = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def validate_text(raw: str, report: Reporter | None = None) -> str:
    """Return ``raw`` unchanged, or the no-data sentinel if it is blank."""
    if not raw.strip():
        return NO_DATA
    return raw


def validate_phone(raw: str, report: Reporter | None = None) -> str:
    """Validate a phone number against the permissive group shape.

    Examples of accepted values: ``+1-2345-6789``, ``(123) 456-7890``,
    ``123 (45) 67``. Anything else, including blank input, becomes the
    no-number sentinel.
    """
    value = validate_text(raw)
    if PHONE_PATTERN.fullmatch(value):
        return value

    if report is not None:
        report(WRONG_NUMBER_FORMAT)
    return NO_NUMBER


def validate_date(raw: str, report: Reporter | None = None) -> str:
    """Normalize an ISO calendar date (``YYYY-MM-DD``)."""
    if ISO_DATE_PATTERN.fullmatch(raw):
        try:
            return date.fromisoformat(raw).isoformat()
        except ValueError:
            pass

    if report is not None:
        report(BAD_BIRTH_DATE)
    return NO_DATA


def validate_gender(raw: str, report: Reporter | None = None) -> str:
    """Accept only members of the allowed gender set (case-sensitive)."""
    value = validate_text(raw)
    if value in ALLOWED_GENDERS:
        return value

    if report is not None:
        report(BAD_GENDER)
    return NO_DATA
