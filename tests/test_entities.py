import logging
from datetime import datetime

import pytest

from contacts.domain.constants import NO_DATA, NO_NUMBER, WRONG_NUMBER_FORMAT
from contacts.domain.entities import (
    OrganizationDetails,
    PersonDetails,
    Record,
    RecordKind,
    new_organization,
    new_person,
)


def test_new_person_validates_every_field():
    """Covers:
    - Records are created complete, with sentinels for bad input
    """
    record = new_person("  ", "Doe", "2021-13-40", "X", "abc!")

    assert record.kind is RecordKind.PERSON
    assert record.details == PersonDetails(
        name=NO_DATA, surname="Doe", birth_date=NO_DATA, gender=NO_DATA
    )
    assert record.phone_number == NO_NUMBER


def test_new_organization(organization: Record):
    assert organization.kind is RecordKind.ORGANIZATION
    assert organization.details == OrganizationDetails(
        organization_name="Pizza Shop", address="Wall St. 1"
    )
    assert organization.phone_number == "(123) 456-7890"


def test_timestamps_are_whole_seconds(person: Record):
    assert person.created_at.microsecond == 0
    assert person.last_modified_at == person.created_at


def test_list_fields_person(person: Record):
    """Variant fields and base fields are combined."""
    assert person.list_fields() == {"name", "surname", "birth", "gender", "number"}


def test_list_fields_organization(organization: Record):
    assert organization.list_fields() == {"name", "address", "number"}


def test_set_field_variant_field(person: Record):
    assert person.set_field("surname", "Doe") is True
    assert person.details.surname == "Doe"  # type: ignore[union-attr]


def test_set_field_same_name_resolves_per_variant(
    person: Record, organization: Record
):
    """'name' maps onto each variant's own field."""
    assert person.set_field("name", "Jane")
    assert organization.set_field("name", "Pasta Place")

    assert person.details.name == "Jane"  # type: ignore[union-attr]
    assert organization.details.organization_name == "Pasta Place"  # type: ignore[union-attr]


def test_set_field_falls_back_to_base_field(person: Record):
    assert person.set_field("number", "123 456") is True
    assert person.phone_number == "123 456"


def test_set_field_unknown_name_changes_nothing(person: Record):
    before = PersonDetails(**vars(person.details))
    modified_before = person.last_modified_at

    assert person.set_field("address", "X") is False

    assert person.details == before
    assert person.phone_number == "+1-2345-6789"
    assert person.last_modified_at == modified_before


def test_set_field_coerces_invalid_value(person: Record):
    """A rejected value still counts as a write and never raises."""
    messages: list[str] = []

    assert person.set_field("number", "abc!", report=messages.append) is True

    assert person.phone_number == NO_NUMBER
    assert messages == [WRONG_NUMBER_FORMAT]


@pytest.mark.parametrize(
    "field, raw, expected",
    [
        ("name", "", NO_DATA),
        ("surname", "   ", NO_DATA),
        ("birth", "2021-01-05", "2021-01-05"),
        ("birth", "not a date", NO_DATA),
        ("gender", "F", "F"),
        ("gender", "X", NO_DATA),
    ],
)
def test_set_field_applies_field_validator(
    person: Record, field: str, raw: str, expected: str
):
    person.set_field(field, raw, report=lambda message: None)
    assert person.get_field(field) == expected


def test_set_field_logs_diagnostics(person: Record, caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.WARNING, logger="validation"):
        person.set_field("gender", "X")

    assert "Bad gender!" in caplog.text
    assert "'gender'" in caplog.text


def test_set_field_refreshes_last_modified(person: Record):
    person.created_at = datetime(2020, 1, 1, 12, 0, 0)
    person.last_modified_at = person.created_at

    person.set_field("gender", "X", report=lambda message: None)

    assert person.last_modified_at > person.created_at
    assert person.last_modified_at.microsecond == 0


def test_get_field(person: Record):
    assert person.get_field("birth") == "1990-04-12"
    assert person.get_field("number") == "+1-2345-6789"
    assert person.get_field("address") is None


def test_describe(person: Record, organization: Record):
    assert person.describe() == "John Smith"
    assert organization.describe() == "Pizza Shop"
    assert str(person) == "John Smith"


def test_full_info_person(person: Record):
    lines = person.full_info().splitlines()

    assert lines[:5] == [
        "Name: John",
        "Surname: Smith",
        "Birth date: 1990-04-12",
        "Gender: M",
        "Number: +1-2345-6789",
    ]
    assert lines[5] == f"Time created: {person.created_at.isoformat()}"
    assert lines[6] == f"Time last edit: {person.last_modified_at.isoformat()}"


def test_full_info_organization(organization: Record):
    lines = organization.full_info().splitlines()

    assert lines[:3] == [
        "Organization name: Pizza Shop",
        "Address: Wall St. 1",
        "Number: (123) 456-7890",
    ]
    assert lines[3].startswith("Time created: ")
    assert lines[4].startswith("Time last edit: ")
