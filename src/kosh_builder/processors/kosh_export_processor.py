# Path: src/kosh_builder/processors/kosh_export_processor.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from tqdm import tqdm

logger = logging.getLogger(__name__)

CATEGORY_FIELDS = ["id", "name", "position", "introduction", "cover_image", "createdAt"]
SUBCATEGORY_FIELDS = [
    "id", "parentCategory", "name", "position", "introduction", "cover_image", "createdAt",
]
CONTENT_FIELDS = [
    "id", "subCategory", "sequenceNo", "hindiWord", "englishWord", "hinglishWord",
    "meaning", "extra", "structure", "search", "youtubeLink", "image", "createdAt",
]

REQUIRED_FIELDS = {
    "categories": ["id", "name", "position"],
    "subcategories": ["id", "parentCategory", "name", "position"],
    "contents": ["id", "subCategory", "sequenceNo"],
}

INTEGER_FIELDS = {"id", "parentCategory", "subCategory", "position", "sequenceNo"}

Rows = List[Dict[str, Any]]


class KoshExportProcessor:
    """Đọc file JSON xuất từ Kosh và chuẩn hóa thành các hàng cho 3 bảng SQLite."""

    def __init__(self, export_path: Path, show_progress: bool = True):
        self.export_path = export_path
        self.show_progress = show_progress

    def _normalize(self, item: Any, section: str, columns: List[str]) -> Dict[str, Any] | None:
        if not isinstance(item, dict):
            logger.warning(f"⚠️  Mục trong '{section}' không phải dictionary, bỏ qua: {item!r}")
            return None

        missing = [key for key in REQUIRED_FIELDS[section] if item.get(key) in (None, "")]
        if missing:
            logger.warning(
                f"⚠️  Mục trong '{section}' thiếu trường bắt buộc {missing}, bỏ qua: id={item.get('id')}"
            )
            return None

        row: Dict[str, Any] = {}
        for column in columns:
            value = item.get(column)
            if column in INTEGER_FIELDS and value is not None:
                try:
                    value = int(value)
                except (TypeError, ValueError):
                    logger.warning(
                        f"⚠️  Trường '{column}' của mục id={item.get('id')} trong '{section}' không phải số, bỏ qua."
                    )
                    return None
            elif column == "createdAt":
                value = str(value) if value else None
            elif value is None:
                value = ""
            row[column] = value
        return row

    def _process_section(self, data: Dict[str, Any], section: str, columns: List[str]) -> Rows:
        items = data.get(section, [])
        if not isinstance(items, list):
            logger.warning(f"Mục '{section}' trong file xuất không phải danh sách. Bỏ qua.")
            return []

        iterable = items
        if section == "contents":
            iterable = tqdm(items, desc="Chuẩn hóa nội dung Kosh", unit="mục", disable=not self.show_progress)

        rows = []
        for item in iterable:
            row = self._normalize(item, section, columns)
            if row is not None:
                rows.append(row)
        return rows

    def process(self) -> Tuple[Rows, Rows, Rows]:
        logger.info(f"Bắt đầu xử lý file xuất Kosh từ: {self.export_path}")

        if not self.export_path.exists():
            logger.error(f"Không tìm thấy file xuất Kosh tại: {self.export_path}")
            raise FileNotFoundError(f"Không tìm thấy file xuất Kosh tại: {self.export_path}")

        try:
            with open(self.export_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Lỗi khi giải mã file JSON {self.export_path.name}: {e}")
            raise

        if not isinstance(data, dict):
            raise ValueError("File xuất Kosh phải là một object JSON ở cấp cao nhất.")

        categories = self._process_section(data, "categories", CATEGORY_FIELDS)
        category_ids = {row["id"] for row in categories}

        subcategories = []
        for row in self._process_section(data, "subcategories", SUBCATEGORY_FIELDS):
            if row["parentCategory"] not in category_ids:
                logger.warning(
                    f"⚠️  Subcategory id={row['id']} trỏ tới category không tồn tại ({row['parentCategory']}), bỏ qua."
                )
                continue
            subcategories.append(row)
        subcategory_ids = {row["id"] for row in subcategories}

        contents = []
        for row in self._process_section(data, "contents", CONTENT_FIELDS):
            if row["subCategory"] not in subcategory_ids:
                logger.warning(
                    f"⚠️  Content id={row['id']} trỏ tới subcategory không tồn tại ({row['subCategory']}), bỏ qua."
                )
                continue
            contents.append(row)

        logger.info(
            f"✅ Đã trích xuất {len(categories)} category, {len(subcategories)} subcategory "
            f"và {len(contents)} mục từ điển."
        )
        return categories, subcategories, contents
