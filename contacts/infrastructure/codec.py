"""Infrastructure layer - JSON codec for catalog documents.

A catalog is persisted as one JSON array. Every element carries the
variant's own fields under their external keys plus a discriminator that
names the variant. Audit timestamps are not persisted.
"""

from collections.abc import Sequence
from typing import Annotated, Any, Final, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
)

from ..constants import COMPANY_TAG, DISCRIMINATOR_KEY, PERSON_TAG
from ..domain.entities import (
    OrganizationDetails,
    PersonDetails,
    Record,
    new_organization,
    new_person,
)
from ..domain.exceptions import CatalogDecodeError


def _ignore_diagnostics(message: str) -> None:
    """Stored sentinels are re-validated silently on decode."""


class _RecordDocument(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", strict=True, frozen=True
    )

    phone_number: str = Field(alias="phone-number")


class PersonDocument(_RecordDocument):
    """Persisted form of a person record."""

    kind: Literal["person"] = Field(default=PERSON_TAG, alias=DISCRIMINATOR_KEY)
    name: str
    surname: str
    birth_date: str = Field(alias="birthDate")
    gender: str

    @classmethod
    def from_domain(cls, record: Record, details: PersonDetails) -> "PersonDocument":
        return cls(
            name=details.name,
            surname=details.surname,
            birth_date=details.birth_date,
            gender=details.gender,
            phone_number=record.phone_number,
        )

    def to_domain(self) -> Record:
        return new_person(
            self.name,
            self.surname,
            self.birth_date,
            self.gender,
            self.phone_number,
            report=_ignore_diagnostics,
        )


class CompanyDocument(_RecordDocument):
    """Persisted form of an organization record."""

    kind: Literal["company"] = Field(default=COMPANY_TAG, alias=DISCRIMINATOR_KEY)
    organization_name: str = Field(alias="organization name")
    address: str

    @classmethod
    def from_domain(
        cls, record: Record, details: OrganizationDetails
    ) -> "CompanyDocument":
        return cls(
            organization_name=details.organization_name,
            address=details.address,
            phone_number=record.phone_number,
        )

    def to_domain(self) -> Record:
        return new_organization(
            self.organization_name,
            self.address,
            self.phone_number,
            report=_ignore_diagnostics,
        )


def _document_kind(value: Any) -> str | None:
    """Read the discriminator before any variant fields are validated."""
    if isinstance(value, dict):
        kind = value.get(DISCRIMINATOR_KEY)
    else:
        kind = getattr(value, "kind", None)
    return kind if isinstance(kind, str) else None


RecordDocument = Annotated[
    Annotated[PersonDocument, Tag(PERSON_TAG)]
    | Annotated[CompanyDocument, Tag(COMPANY_TAG)],
    Discriminator(_document_kind),
]

_encoder: Final = TypeAdapter(list[RecordDocument])
_decoder: Final = TypeAdapter(list[RecordDocument | None])


def to_document(record: Record) -> PersonDocument | CompanyDocument:
    """Convert a domain record to its persisted form."""
    match record.details:
        case PersonDetails() as details:
            return PersonDocument.from_domain(record, details)
        case OrganizationDetails() as details:
            return CompanyDocument.from_domain(record, details)


def encode_records(records: Sequence[Record], indent: int | None = None) -> str:
    """Serialize records to a JSON array in catalog order."""
    documents = [to_document(record) for record in records]
    return _encoder.dump_json(documents, by_alias=True, indent=indent).decode()


def decode_records(text: str) -> list[Record]:
    """Parse a JSON array back into records, preserving document order.

    ``null`` elements are dropped. An empty or blank document decodes to an
    empty list.

    Raises:
        CatalogDecodeError: If the document or any element is malformed
    """
    if not text.strip():
        return []

    try:
        documents = _decoder.validate_json(text)
    except ValidationError as e:
        raise CatalogDecodeError(f"Malformed catalog document: {e}") from e

    return [document.to_domain() for document in documents if document is not None]
