"""Pure domain entities: contact records and their field dispatch."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Final, NamedTuple

from ..logging_utils import log_validation_error
from .validators import (
    Reporter,
    Validator,
    validate_date,
    validate_gender,
    validate_phone,
    validate_text,
)


def current_timestamp() -> datetime:
    """Return the local time truncated to whole seconds."""
    return datetime.now().replace(microsecond=0)


class RecordKind(StrEnum):
    PERSON = "person"
    ORGANIZATION = "organization"


class FieldSpec(NamedTuple):
    """How a dispatch name maps onto a stored value."""

    attribute: str
    validator: Validator
    label: str


@dataclass
class PersonDetails:
    """Fields owned by an individual."""

    name: str
    surname: str
    birth_date: str
    gender: str


@dataclass
class OrganizationDetails:
    """Fields owned by an organization."""

    organization_name: str
    address: str


RecordDetails = PersonDetails | OrganizationDetails

# Ordered tables: variant fields first, base fields last
BASE_FIELDS: Final[dict[str, FieldSpec]] = {
    "number": FieldSpec("phone_number", validate_phone, "Number"),
}
PERSON_FIELDS: Final[dict[str, FieldSpec]] = {
    "name": FieldSpec("name", validate_text, "Name"),
    "surname": FieldSpec("surname", validate_text, "Surname"),
    "birth": FieldSpec("birth_date", validate_date, "Birth date"),
    "gender": FieldSpec("gender", validate_gender, "Gender"),
}
ORGANIZATION_FIELDS: Final[dict[str, FieldSpec]] = {
    "name": FieldSpec("organization_name", validate_text, "Organization name"),
    "address": FieldSpec("address", validate_text, "Address"),
}

_VARIANT_FIELDS: Final = {
    RecordKind.PERSON: PERSON_FIELDS,
    RecordKind.ORGANIZATION: ORGANIZATION_FIELDS,
}


def _reporter(report: Reporter | None, field_name: str, raw: str) -> Reporter:
    """Use the caller's reporter, or log diagnostics for ``field_name``."""
    if report is not None:
        return report

    def log_report(message: str) -> None:
        log_validation_error(field_name, raw, message)

    return log_report


@dataclass
class Record:
    """A catalog entry: shared fields plus exactly one variant payload.

    Field writes go through ``set_field`` so that every stored value has
    passed its validator and ``last_modified_at`` is refreshed.
    """

    details: RecordDetails
    phone_number: str
    created_at: datetime = field(default_factory=current_timestamp)
    last_modified_at: datetime = field(init=False)

    def __post_init__(self):
        self.last_modified_at = self.created_at

    @property
    def kind(self) -> RecordKind:
        if isinstance(self.details, PersonDetails):
            return RecordKind.PERSON
        return RecordKind.ORGANIZATION

    def list_fields(self) -> set[str]:
        """Return every mutable field name, variant and base combined."""
        return set(_VARIANT_FIELDS[self.kind]) | set(BASE_FIELDS)

    def get_field(self, name: str) -> str | None:
        """Return the current value of a field, or None for unknown names."""
        spec = _VARIANT_FIELDS[self.kind].get(name)
        if spec is None:
            return self._get_base_field(name)
        return getattr(self.details, spec.attribute)

    def set_field(self, name: str, raw: str, report: Reporter | None = None) -> bool:
        """Validate and store ``raw`` under a field name.

        Own variant fields are looked up first, then the base fields.

        Args:
            name: Dispatch name as returned by ``list_fields``
            raw: Unvalidated input
            report: Receives diagnostics; defaults to the validation logger

        Returns:
            True if a field was written, False if no layer knows ``name``
        """
        spec = _VARIANT_FIELDS[self.kind].get(name)
        if spec is None:
            return self._set_base_field(name, raw, report)

        value = spec.validator(raw, _reporter(report, name, raw))
        setattr(self.details, spec.attribute, value)
        self.touch()
        return True

    def _get_base_field(self, name: str) -> str | None:
        spec = BASE_FIELDS.get(name)
        if spec is None:
            return None
        return getattr(self, spec.attribute)

    def _set_base_field(self, name: str, raw: str, report: Reporter | None) -> bool:
        spec = BASE_FIELDS.get(name)
        if spec is None:
            return False

        value = spec.validator(raw, _reporter(report, name, raw))
        setattr(self, spec.attribute, value)
        self.touch()
        return True

    def touch(self) -> None:
        """Refresh the last edit timestamp."""
        self.last_modified_at = max(current_timestamp(), self.created_at)

    def describe(self) -> str:
        """Short identity used in compact listings."""
        if isinstance(self.details, PersonDetails):
            return f"{self.details.name} {self.details.surname}"
        return self.details.organization_name

    def full_info(self) -> str:
        """Multi-line dump of every field followed by the audit timestamps."""
        lines = [
            f"{spec.label}: {getattr(self.details, spec.attribute)}"
            for spec in _VARIANT_FIELDS[self.kind].values()
        ]
        lines.extend(
            f"{spec.label}: {getattr(self, spec.attribute)}"
            for spec in BASE_FIELDS.values()
        )
        lines.append(f"Time created: {self.created_at.isoformat()}")
        lines.append(f"Time last edit: {self.last_modified_at.isoformat()}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.describe()


def new_person(
    name: str,
    surname: str,
    birth_date: str,
    gender: str,
    phone_number: str,
    report: Reporter | None = None,
) -> Record:
    """Create a person record, validating every field."""
    details = PersonDetails(
        name=validate_text(name),
        surname=validate_text(surname),
        birth_date=validate_date(birth_date, _reporter(report, "birth", birth_date)),
        gender=validate_gender(gender, _reporter(report, "gender", gender)),
    )
    return Record(
        details=details,
        phone_number=validate_phone(
            phone_number, _reporter(report, "number", phone_number)
        ),
    )


def new_organization(
    organization_name: str,
    address: str,
    phone_number: str,
    report: Reporter | None = None,
) -> Record:
    """Create an organization record, validating every field."""
    details = OrganizationDetails(
        organization_name=validate_text(organization_name),
        address=validate_text(address),
    )
    return Record(
        details=details,
        phone_number=validate_phone(
            phone_number, _reporter(report, "number", phone_number)
        ),
    )
