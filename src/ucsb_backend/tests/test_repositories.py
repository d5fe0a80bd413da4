"""
Test the organization repository against an in-memory SQLite database.
"""

import pytest
from ucsb_backend.model.organization import UCSBOrganization
from ucsb_backend.repositories import (
    DuplicateError,
    NotFoundError,
    UCSBOrganizationRepository,
)


@pytest.fixture
def repository(test_db) -> UCSBOrganizationRepository:
    return UCSBOrganizationRepository(test_db)


def organization(org_code: str, short: str = "short", full: str = "full", inactive: bool = False) -> UCSBOrganization:
    return UCSBOrganization(
        org_code=org_code,
        org_translation_short=short,
        org_translation=full,
        inactive=inactive
    )


@pytest.mark.integration
class TestLookups:

    def test_get_by_id_returns_stored_row(self, repository):
        repository.insert(organization("tasa", "taiwanese", "taiwaneseAtUCSB"))

        found = repository.get_by_id("tasa")

        assert found.to_dict() == {
            "org_code": "tasa",
            "org_translation_short": "taiwanese",
            "org_translation": "taiwaneseAtUCSB",
            "inactive": False,
        }

    def test_get_by_id_raises_not_found(self, repository):
        with pytest.raises(NotFoundError) as exc_info:
            repository.get_by_id("missing")

        assert str(exc_info.value) == "UCSBOrganizations with id missing not found"
        assert exc_info.value.entity_type == "UCSBOrganizations"
        assert exc_info.value.entity_id == "missing"

    def test_get_by_id_optional_returns_none(self, repository):
        assert repository.get_by_id_optional("missing") is None

    def test_list_returns_all_rows(self, repository):
        repository.insert(organization("tasa"))
        repository.insert(organization("osli"))

        codes = sorted(org.org_code for org in repository.list())

        assert codes == ["osli", "tasa"]

    def test_find_active_skips_inactive(self, repository):
        repository.insert(organization("tasa"))
        repository.insert(organization("old", inactive=True))

        assert [org.org_code for org in repository.find_active()] == ["tasa"]

    def test_exists_and_count(self, repository):
        repository.insert(organization("tasa"))

        assert repository.exists("tasa")
        assert not repository.exists("osli")
        assert repository.count() == 1
        assert repository.count(inactive=True) == 0


@pytest.mark.integration
class TestWrites:

    def test_insert_refuses_existing_code(self, repository):
        repository.insert(organization("tasa", "first"))

        with pytest.raises(DuplicateError) as exc_info:
            repository.insert(organization("tasa", "second"))

        assert str(exc_info.value) == "UCSBOrganizations with id tasa already exists"
        assert repository.get_by_id("tasa").org_translation_short == "first"

    def test_upsert_inserts_when_absent(self, repository):
        saved = repository.upsert(organization("krc", "koreanRadioCl", "koreanRadioClub"))

        assert saved.org_code == "krc"
        assert repository.count() == 1

    def test_upsert_overwrites_when_present(self, repository):
        repository.insert(organization("tasa", "first", "first full"))

        repository.upsert(organization("tasa", "second", "second full", inactive=True))

        stored = repository.get_by_id("tasa")
        assert stored.org_translation_short == "second"
        assert stored.org_translation == "second full"
        assert stored.inactive is True
        assert repository.count() == 1

    def test_upsert_renames_stored_row(self, repository):
        stored = repository.insert(organization("tasa"))

        stored.org_code = "tasa-new"
        repository.upsert(stored)

        assert repository.get_by_id_optional("tasa") is None
        assert repository.get_by_id("tasa-new").org_translation == "full"
        assert repository.count() == 1

    def test_upsert_rename_onto_existing_row_fails(self, repository):
        repository.insert(organization("osli"))
        stored = repository.insert(organization("tasa"))

        stored.org_code = "osli"

        with pytest.raises(DuplicateError):
            repository.upsert(stored)

        assert sorted(org.org_code for org in repository.list()) == ["osli", "tasa"]

    def test_delete_removes_row(self, repository):
        stored = repository.insert(organization("tasa"))

        repository.delete(stored)

        assert not repository.exists("tasa")


@pytest.mark.unit
def test_organizations_compare_by_value():
    assert organization("tasa") == organization("tasa")
    assert organization("tasa") != organization("tasa", inactive=True)
    assert organization("tasa") != "tasa"
