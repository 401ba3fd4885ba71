from pathlib import Path

import pytest

from contacts.domain.entities import Record, new_organization, new_person


@pytest.fixture(name="person")
def person_fixture() -> Record:
    return new_person("John", "Smith", "1990-04-12", "M", "+1-2345-6789")


@pytest.fixture(name="organization")
def organization_fixture() -> Record:
    return new_organization("Pizza Shop", "Wall St. 1", "(123) 456-7890")


@pytest.fixture(name="catalog_path")
def catalog_path_fixture(tmp_path: Path) -> Path:
    """Path of a catalog document that does not exist yet."""
    return tmp_path / "phonebook.json"
