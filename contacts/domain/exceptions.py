"""Domain-specific exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""

    pass


class CatalogIndexError(DomainError, IndexError):
    """Raised when a catalog position does not address a record."""

    pass


class CatalogDecodeError(DomainError):
    """Raised when a persisted catalog document cannot be decoded."""

    pass


class PersistenceError(DomainError):
    """Raised when the persistence target cannot be read or written."""

    pass

