"""Domain business rules and constants."""

from typing import Final

# Sentinels substituted for values that fail validation
NO_DATA: Final = "[no data]"
NO_NUMBER: Final = "[no number]"

ALLOWED_GENDERS: Final = frozenset({"M", "F"})

# Diagnostics reported when a value collapses to its sentinel
WRONG_NUMBER_FORMAT: Final = "Wrong number format!"
BAD_BIRTH_DATE: Final = "Bad birth date!"
BAD_GENDER: Final = "Bad gender!"
