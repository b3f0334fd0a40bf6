# Path: src/kosh_listing/repository.py
import logging
from typing import Any, Dict, List

from src.kosh_builder.database_manager import DatabaseManager

logger = logging.getLogger(__name__)

CATEGORY_COLUMNS = "id, name, position, introduction, cover_image, createdAt"
SUBCATEGORY_COLUMNS = "id, parentCategory, name, position, introduction, cover_image, createdAt"
CONTENT_COLUMNS = (
    "c.id, c.sequenceNo, c.hindiWord, c.englishWord, c.hinglishWord, c.meaning, "
    "c.extra, c.structure, c.search, c.youtubeLink, c.image, c.createdAt"
)
SEARCHABLE_COLUMNS = ["hindiWord", "englishWord", "hinglishWord", "meaning", "search"]

Row = Dict[str, Any]


def _escape_like(query: str) -> str:
    return query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class KoshRepository:
    """
    Truy cập dữ liệu Kosh trong SQLite. Mọi hàm fetch_* trả về TOÀN BỘ các mục
    trong phạm vi, chưa sắp xếp và chưa phân trang.
    """

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager

    def list_categories(self) -> List[Row]:
        return self.db.fetch_all(
            f'SELECT {CATEGORY_COLUMNS} FROM "KoshCategory" ORDER BY position, id'
        )

    def get_category(self, category_id: int) -> Row | None:
        return self.db.fetch_one(
            f'SELECT {CATEGORY_COLUMNS} FROM "KoshCategory" WHERE id = ?', (category_id,)
        )

    def list_subcategories(self, category_id: int) -> List[Row]:
        return self.db.fetch_all(
            f'SELECT {SUBCATEGORY_COLUMNS} FROM "KoshSubCategory" '
            "WHERE parentCategory = ? ORDER BY position, id",
            (category_id,),
        )

    def get_subcategory(self, category_id: int, subcategory_id: int) -> Row | None:
        return self.db.fetch_one(
            f'SELECT {SUBCATEGORY_COLUMNS} FROM "KoshSubCategory" '
            "WHERE id = ? AND parentCategory = ?",
            (subcategory_id, category_id),
        )

    def fetch_contents_by_subcategory(self, subcategory_id: int) -> List[Row]:
        rows = self.db.fetch_all(
            f'SELECT {CONTENT_COLUMNS} FROM "KoshContent" c WHERE c.subCategory = ?',
            (subcategory_id,),
        )
        logger.debug(f"Subcategory {subcategory_id}: tìm thấy {len(rows)} mục.")
        return rows

    def fetch_contents_by_category(self, category_id: int) -> List[Row]:
        rows = self.db.fetch_all(
            f'SELECT {CONTENT_COLUMNS} FROM "KoshContent" c '
            'JOIN "KoshSubCategory" s ON s.id = c.subCategory '
            "WHERE s.parentCategory = ?",
            (category_id,),
        )
        logger.debug(f"Category {category_id}: tìm thấy {len(rows)} mục.")
        return rows

    def fetch_all_contents(self) -> List[Row]:
        return self.db.fetch_all(f'SELECT {CONTENT_COLUMNS} FROM "KoshContent" c')

    def search_contents(self, query: str) -> List[Row]:
        pattern = f"%{_escape_like(query)}%"
        conditions = " OR ".join(f"c.{column} LIKE ? ESCAPE '\\'" for column in SEARCHABLE_COLUMNS)
        rows = self.db.fetch_all(
            f'SELECT {CONTENT_COLUMNS} FROM "KoshContent" c WHERE {conditions}',
            [pattern] * len(SEARCHABLE_COLUMNS),
        )
        logger.debug(f"Tìm kiếm '{query}': {len(rows)} kết quả.")
        return rows
