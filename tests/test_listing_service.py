import pytest

from src.kosh_collation import HindiCollator
from src.kosh_listing.listing_service import KoshListingService, ScopeNotFoundError


@pytest.fixture
def service(repository):
    return KoshListingService(repository, HindiCollator())


def ids(response):
    return [c["id"] for c in response["contents"]]


class TestSubcategoryContents:
    def test_sorted_by_hindi_word_with_empty_last(self, service):
        response = service.list_subcategory_contents(1, 10)

        assert [c["hindiWord"] for c in response["contents"]] == ["अमृत", "गच्छति", "पठति", ""]

    def test_response_shape(self, service):
        response = service.list_subcategory_contents(1, 10)

        assert list(response) == [
            "vishesh_suchi", "contents", "currentPage", "totalPages", "totalContents", "subcategory",
        ]
        assert response["currentPage"] == 1
        assert response["totalPages"] == 1
        assert response["totalContents"] == 4
        assert response["subcategory"]["cover_image"] == "kriya.png"

    def test_special_index_is_lexical(self, service):
        response = service.list_subcategory_contents(1, 10)

        assert response["vishesh_suchi"] == ["goes", "nectar", "reads", "अमृत", "गच्छति", "पठति"]

    def test_unknown_subcategory(self, service):
        with pytest.raises(ScopeNotFoundError):
            service.list_subcategory_contents(1, 20)

    def test_unknown_category(self, service):
        with pytest.raises(ScopeNotFoundError):
            service.list_subcategory_contents(42, 10)


class TestCategoryContents:
    def test_sorting_happens_before_pagination(self, service):
        first = service.list_category_contents(1, page=1, limit=2)
        second = service.list_category_contents(1, page=2, limit=2)

        assert ids(first) == [4, 7]
        assert ids(second) == [6, 2]
        assert second["totalPages"] == 4
        assert second["totalContents"] == 7

    def test_full_order(self, service):
        response = service.list_category_contents(1, limit=50)

        assert ids(response) == [4, 7, 6, 2, 1, 5, 3]

    def test_special_index_covers_whole_scope(self, service):
        response = service.list_category_contents(1, page=3, limit=2)

        assert response["vishesh_suchi"] == [
            "goes", "lotus", "nectar", "reads", "अमृत", "कमल", "क्षमा", "गच्छति", "पठति",
        ]

    def test_repeated_calls_are_deterministic(self, service):
        assert service.list_category_contents(1, limit=3) == service.list_category_contents(1, limit=3)

    def test_empty_category(self, service):
        response = service.list_category_contents(2)

        assert response["contents"] == []
        assert response["vishesh_suchi"] == []
        assert response["totalPages"] == 0

    def test_unknown_category(self, service):
        with pytest.raises(ScopeNotFoundError):
            service.list_category_contents(42)


class TestOtherListings:
    def test_list_contents(self, service):
        response = service.list_contents()

        assert ids(response) == [4, 7, 6, 2, 1, 5, 3]
        assert "vishesh_suchi" not in response

    def test_search_is_hindi_sorted(self, service):
        assert ids(service.search_contents("goes")) == [4, 2]
        assert ids(service.search_contents(" क ")) == [6, 5]

    def test_blank_search_is_rejected(self, service):
        with pytest.raises(ValueError):
            service.search_contents("   ")

    def test_list_categories(self, service):
        response = service.list_categories()

        assert [c["id"] for c in response["categories"]] == [2, 1]
        assert response["categories"][1]["cover_image"] == ""
        assert response["totalCategories"] == 2

    def test_list_subcategories(self, service):
        response = service.list_subcategories(1)

        assert [s["id"] for s in response["subcategories"]] == [11, 10]
        assert response["totalSubcategories"] == 2

        with pytest.raises(ScopeNotFoundError):
            service.list_subcategories(42)

    def test_limits_from_config(self, repository):
        service = KoshListingService.from_config(
            repository, HindiCollator(), {"default-limit": 3}
        )

        assert len(service.list_contents()["contents"]) == 3
        assert len(service.list_contents(limit=100)["contents"]) == 7
