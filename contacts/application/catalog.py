"""Catalog of contact records with load/save lifecycle around the codec."""

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Final

from ..domain.entities import Record
from ..domain.exceptions import CatalogDecodeError, CatalogIndexError, PersistenceError
from ..infrastructure.codec import decode_records, encode_records
from ..infrastructure.storage import DocumentFile
from ..logging_config import get_logger
from ..logging_utils import log_catalog_operation

logger: Final = get_logger(__name__)

RecordPredicate = Callable[[Record], bool]


class Catalog:
    """Ordered, mutable in-memory collection of records.

    Insertion order is the display and reference order. Without a path the
    catalog lives in memory only and ``load``/``save`` do nothing.
    """

    def __init__(self, path: Path | None = None, indent: int | None = None):
        self.path = path
        self.indent = indent
        self._records: list[Record] = []
        self._document = DocumentFile(path) if path is not None else None

    def load(self) -> None:
        """Replace the contents with the records of the persisted document.

        An absent or empty document leaves the catalog empty. On failure the
        current contents are kept.

        Raises:
            CatalogDecodeError: If the document is malformed
            PersistenceError: If the document cannot be read
        """
        if self._document is None:
            return

        try:
            records = decode_records(self._document.read())
        except (CatalogDecodeError, PersistenceError) as e:
            log_catalog_operation("load", self.path, success=False, error=str(e))
            raise

        self._records = records
        log_catalog_operation("load", self.path, record_count=len(records))
        logger.debug("Catalog loaded", path=str(self.path), count=len(records))

    def save(self) -> None:
        """Overwrite the persisted document with the current contents.

        Raises:
            PersistenceError: If the document cannot be written
        """
        if self._document is None:
            return

        text = encode_records(self._records, indent=self.indent)
        try:
            self._document.write(text)
        except PersistenceError as e:
            log_catalog_operation("save", self.path, success=False, error=str(e))
            raise

        log_catalog_operation("save", self.path, record_count=len(self._records))

    def append(self, record: Record) -> None:
        self._records.append(record)
        logger.debug(
            "Record appended", kind=record.kind, position=len(self._records) - 1
        )

    def remove_at(self, index: int) -> Record:
        """Remove and return the record at ``index``.

        Raises:
            CatalogIndexError: If ``index`` does not address a record
        """
        self._check_index(index)
        record = self._records.pop(index)
        logger.debug("Record removed", kind=record.kind, position=index)
        return record

    def get(self, index: int) -> Record:
        """Return the record at ``index``.

        Raises:
            CatalogIndexError: If ``index`` does not address a record
        """
        self._check_index(index)
        return self._records[index]

    def size(self) -> int:
        return len(self._records)

    def find_matching(self, predicate: RecordPredicate) -> list[tuple[int, Record]]:
        """Return matching records paired with their catalog positions."""
        return [
            (index, record)
            for index, record in enumerate(self._records)
            if predicate(record)
        ]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._records):
            raise CatalogIndexError(
                f"Record index {index} out of range for catalog of size "
                + f"{len(self._records)}"
            )

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)
