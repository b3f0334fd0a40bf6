# Path: src/kosh_listing/listing_service.py
import logging
from typing import Any, Dict, List

from src.kosh_collation import HindiCollator, extract_special_index
from src.kosh_listing.pagination import DEFAULT_LIMIT, PageRequest, paginate
from src.kosh_listing.repository import KoshRepository

__all__ = ["KoshListingService", "ScopeNotFoundError"]

logger = logging.getLogger(__name__)

# Danh mục và subcategory luôn phân trang cố định 10 mục/trang
SCOPE_PAGE_LIMIT = 10


class ScopeNotFoundError(LookupError):
    """Không tìm thấy category hoặc subcategory được yêu cầu."""


def _with_cover_image(row: Dict[str, Any]) -> Dict[str, Any]:
    return {**row, "cover_image": row.get("cover_image") or ""}


class KoshListingService:
    """
    Ghép các bước cho mọi yêu cầu liệt kê Kosh: lấy toàn bộ mục trong phạm vi,
    sắp xếp theo thứ tự chữ cái Hindi, rồi mới phân trang. Với phạm vi
    category/subcategory, kèm theo vishesh_suchi.
    """

    def __init__(
        self,
        repository: KoshRepository,
        collator: HindiCollator | None = None,
        default_limit: int = DEFAULT_LIMIT,
    ):
        self.repository = repository
        self.collator = collator or HindiCollator()
        self.default_limit = default_limit

    @classmethod
    def from_config(cls, repository: KoshRepository, collator: HindiCollator, listing_config: Dict[str, Any] | None):
        listing_config = listing_config or {}
        return cls(
            repository,
            collator,
            default_limit=int(listing_config.get("default-limit", DEFAULT_LIMIT)),
        )

    def _page_request(self, page: Any, limit: Any) -> PageRequest:
        return PageRequest.from_raw(page, limit, self.default_limit)

    def _require_category(self, category_id: int) -> Dict[str, Any]:
        category = self.repository.get_category(category_id)
        if category is None:
            raise ScopeNotFoundError(f"Category not found: {category_id}")
        return category

    def _sorted_page(self, contents: List[Dict[str, Any]], page: Any, limit: Any) -> Dict[str, Any]:
        sorted_contents = self.collator.sort_by_key(contents, "hindiWord")
        page_slice = paginate(sorted_contents, self._page_request(page, limit))
        return {
            "contents": page_slice.items,
            "currentPage": page_slice.current_page,
            "totalPages": page_slice.total_pages,
            "totalContents": page_slice.total,
        }

    def _with_special_index(self, contents: List[Dict[str, Any]], page: Any, limit: Any) -> Dict[str, Any]:
        vishesh_suchi = extract_special_index(contents)
        logger.debug(f"vishesh_suchi có {len(vishesh_suchi)} từ khóa.")
        return {"vishesh_suchi": vishesh_suchi, **self._sorted_page(contents, page, limit)}

    def list_categories(self, page: Any = None) -> Dict[str, Any]:
        categories = [_with_cover_image(row) for row in self.repository.list_categories()]
        page_slice = paginate(categories, PageRequest.from_raw(page, SCOPE_PAGE_LIMIT))
        return {
            "categories": page_slice.items,
            "currentPage": page_slice.current_page,
            "totalPages": page_slice.total_pages,
            "totalCategories": page_slice.total,
        }

    def list_subcategories(self, category_id: int, page: Any = None) -> Dict[str, Any]:
        self._require_category(category_id)
        subcategories = [
            _with_cover_image(row) for row in self.repository.list_subcategories(category_id)
        ]
        page_slice = paginate(subcategories, PageRequest.from_raw(page, SCOPE_PAGE_LIMIT))
        return {
            "subcategories": page_slice.items,
            "currentPage": page_slice.current_page,
            "totalPages": page_slice.total_pages,
            "totalSubcategories": page_slice.total,
        }

    def list_contents(self, page: Any = None, limit: Any = None) -> Dict[str, Any]:
        contents = self.repository.fetch_all_contents()
        logger.info(f"Tổng số mục từ điển: {len(contents)}")
        return self._sorted_page(contents, page, limit)

    def list_category_contents(self, category_id: int, page: Any = None, limit: Any = None) -> Dict[str, Any]:
        self._require_category(category_id)
        contents = self.repository.fetch_contents_by_category(category_id)
        logger.info(f"Category {category_id}: {len(contents)} mục từ điển.")
        return self._with_special_index(contents, page, limit)

    def list_subcategory_contents(
        self, category_id: int, subcategory_id: int, page: Any = None, limit: Any = None
    ) -> Dict[str, Any]:
        self._require_category(category_id)
        subcategory = self.repository.get_subcategory(category_id, subcategory_id)
        if subcategory is None:
            raise ScopeNotFoundError(f"Subcategory not found: {subcategory_id}")

        contents = self.repository.fetch_contents_by_subcategory(subcategory_id)
        logger.info(f"Subcategory {subcategory_id}: {len(contents)} mục từ điển.")
        response = self._with_special_index(contents, page, limit)
        response["subcategory"] = _with_cover_image(subcategory)
        return response

    def search_contents(self, query: str, page: Any = None, limit: Any = None) -> Dict[str, Any]:
        if not query or not query.strip():
            raise ValueError("Từ khóa tìm kiếm không được để trống.")
        contents = self.repository.search_contents(query.strip())
        logger.info(f"Tìm kiếm '{query.strip()}': {len(contents)} kết quả.")
        return self._sorted_page(contents, page, limit)
