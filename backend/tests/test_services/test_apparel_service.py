"""
Unit tests for ApparelService

Repositories are mocked; mappers are real.
"""
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from apparel_store.core.exceptions import NotFoundError
from apparel_store.domain import ApparelDto, ApparelPatchDto, PageRequest
from apparel_store.mappers import ApparelMapper
from apparel_store.models import Apparel
from apparel_store.services import ApparelService


def stored_apparel() -> Apparel:
    return Apparel(
        id=1,
        version=1,
        apparel_name="Test Apparel",
        apparel_style="IPA",
        upc="123123",
        quantity_on_hand=10,
        description="A test apparel",
        price=Decimal("11.99"),
    )


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def mock_repository():
    repository = MagicMock()
    repository.find_all_by_name_containing.return_value = ([], 0)
    repository.find_all_by_name_and_style_containing.return_value = ([], 0)
    return repository


@pytest.fixture
def service(mock_db, mock_repository):
    return ApparelService(mock_db, mock_repository, ApparelMapper())


class TestListApparels:
    """Test filter dispatch of list_apparels"""

    def test_no_filters_uses_joint_query_with_empty_strings(self, service, mock_repository):
        page_request = PageRequest()

        service.list_apparels(None, None, page_request)

        mock_repository.find_all_by_name_and_style_containing.assert_called_once_with("", "", page_request)
        mock_repository.find_all_by_name_containing.assert_not_called()

    def test_blank_filters_behave_like_no_filters(self, service, mock_repository):
        page_request = PageRequest()

        service.list_apparels("", "   ", page_request)

        mock_repository.find_all_by_name_and_style_containing.assert_called_once_with("", "", page_request)

    def test_name_only_uses_name_query(self, service, mock_repository):
        page_request = PageRequest()

        service.list_apparels("denim", None, page_request)

        mock_repository.find_all_by_name_containing.assert_called_once_with("denim", page_request)

    def test_style_only_uses_joint_query_with_empty_name(self, service, mock_repository):
        page_request = PageRequest()

        service.list_apparels(None, "slim", page_request)

        mock_repository.find_all_by_name_and_style_containing.assert_called_once_with("", "slim", page_request)

    def test_both_filters_use_joint_query(self, service, mock_repository):
        page_request = PageRequest()

        service.list_apparels("denim", "slim", page_request)

        mock_repository.find_all_by_name_and_style_containing.assert_called_once_with("denim", "slim", page_request)

    def test_builds_page_envelope(self, service, mock_repository):
        mock_repository.find_all_by_name_containing.return_value = ([stored_apparel()], 21)

        page = service.list_apparels("test", None, PageRequest(page=2, size=10))

        assert page.total_elements == 21
        assert page.total_pages == 3
        assert page.number == 2
        assert page.number_of_elements == 1
        assert page.last is True
        assert page.content[0].apparel_name == "Test Apparel"


class TestSaveApparel:
    """Test insert vs update dispatch of save_apparel"""

    def test_without_id_inserts(self, service, mock_db, mock_repository):
        mock_repository.insert.side_effect = lambda entity: entity
        dto = ApparelDto(
            apparel_name="Hoodie", apparel_style="Loose", upc="555",
            quantity_on_hand=1, price=Decimal("20.00"),
        )

        result = service.save_apparel(dto)

        inserted = mock_repository.insert.call_args[0][0]
        assert isinstance(inserted, Apparel)
        assert inserted.apparel_name == "Hoodie"
        assert result.apparel_name == "Hoodie"
        mock_repository.update.assert_not_called()
        mock_db.commit.assert_called_once()

    def test_with_id_updates_and_passes_version(self, service, mock_repository):
        apparel = stored_apparel()
        mock_repository.find_by_id.return_value = apparel
        dto = ApparelDto(
            id=1, version=1, apparel_name="Renamed", apparel_style="IPA", upc="123123",
            quantity_on_hand=10, price=Decimal("11.99"),
        )

        result = service.save_apparel(dto)

        mock_repository.update.assert_called_once_with(apparel, expected_version=1)
        assert result.apparel_name == "Renamed"

    def test_with_unknown_id_raises_and_rolls_back(self, service, mock_db, mock_repository):
        mock_repository.find_by_id.return_value = None
        dto = ApparelDto(
            id=99, apparel_name="Ghost", apparel_style="IPA", upc="1",
            quantity_on_hand=0, price=Decimal("1.00"),
        )

        with pytest.raises(NotFoundError):
            service.save_apparel(dto)

        mock_db.rollback.assert_called_once()
        mock_db.commit.assert_not_called()


class TestPatchApparel:
    """Test partial update semantics"""

    def test_patch_changes_only_present_fields(self, service, mock_repository):
        mock_repository.find_by_id.return_value = stored_apparel()

        result = service.patch_apparel(1, ApparelPatchDto(price=Decimal("15.99")))

        assert result.price == Decimal("15.99")
        assert result.apparel_name == "Test Apparel"
        assert result.apparel_style == "IPA"
        assert result.quantity_on_hand == 10

    def test_patch_missing_apparel_returns_none(self, service, mock_repository):
        mock_repository.find_by_id.return_value = None

        assert service.patch_apparel(99, ApparelPatchDto(price=Decimal("1.00"))) is None
        mock_repository.update.assert_not_called()


def test_get_apparel_by_id_returns_none_when_missing(service, mock_repository):
    mock_repository.find_by_id.return_value = None

    assert service.get_apparel_by_id(5) is None


def test_delete_apparel_by_id_commits(service, mock_db, mock_repository):
    service.delete_apparel_by_id(3)

    mock_repository.delete_by_id.assert_called_once_with(3)
    mock_db.commit.assert_called_once()
