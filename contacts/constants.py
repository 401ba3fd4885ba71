"""Infrastructure and technical constants."""

from typing import Final

# Persisted document layout
DISCRIMINATOR_KEY: Final = "phoneNumber"
PERSON_TAG: Final = "person"
COMPANY_TAG: Final = "company"
DOCUMENT_ENCODING: Final = "utf-8"

LOG_FILE_NAME: Final = "contacts.log"
MAX_LOGGED_VALUE_LENGTH: Final = 100
