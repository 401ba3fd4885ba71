"""Infrastructure layer - file persistence target for catalog documents."""

from pathlib import Path

from ..constants import DOCUMENT_ENCODING
from ..domain.exceptions import PersistenceError


class DocumentFile:
    """A JSON document on disk, rewritten as a whole on every write."""

    def __init__(self, path: Path):
        self.path = path

    def read(self) -> str:
        """Return the document text, or an empty string if there is none."""
        if not self.path.exists():
            return ""

        try:
            return self.path.read_text(encoding=DOCUMENT_ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Cannot read catalog '{self.path}': {e}") from e

    def write(self, text: str) -> None:
        """Overwrite the document with ``text``."""
        try:
            self.path.write_text(text, encoding=DOCUMENT_ENCODING)
        except OSError as e:
            raise PersistenceError(f"Cannot write catalog '{self.path}': {e}") from e
