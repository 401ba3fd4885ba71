from ..domain.entities import Record
from .catalog import RecordPredicate


def matches_query(query: str) -> RecordPredicate:
    """Build a predicate matching records whose details contain ``query``.

    Matching is a case-insensitive substring search over the full record
    dump, timestamps included.
    """
    needle = query.casefold()

    def predicate(record: Record) -> bool:
        return needle in record.full_info().casefold()

    return predicate
