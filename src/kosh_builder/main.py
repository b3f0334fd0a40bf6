# Path: src/kosh_builder/main.py

import logging
from pathlib import Path
from typing import Sequence

from src.config.constants import KOSH_CONFIG_FILE
from src.config.kosh_config_loader import load_config, resolve_db_path, resolve_source_path
from src.config.logging_config import setup_logging
from src.kosh_builder.database_manager import DatabaseManager
from src.kosh_builder.kosh_builder_arg_parser import BuilderArgsParser
from src.kosh_builder.processors.kosh_export_processor import KoshExportProcessor

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "kosh_schema.sql"


def build_database(db_path: Path, source_path: Path, overwrite: bool = False, show_progress: bool = True):
    if overwrite and db_path.exists():
        logger.warning(f"⚠️  Tùy chọn --overwrite được bật. Đang xóa database cũ: {db_path}")
        db_path.unlink()

    logger.info(f"Database sẽ được tạo tại: {db_path}")

    processor = KoshExportProcessor(source_path, show_progress=show_progress)
    categories, subcategories, contents = processor.process()

    with DatabaseManager(db_path) as db_manager:
        logger.info("--- Bắt đầu tạo cấu trúc bảng cho database ---")
        db_manager.create_tables_from_schema(SCHEMA_PATH)

        logger.info("--- Bắt đầu chèn dữ liệu vào các bảng ---")
        db_manager.insert_data("KoshCategory", categories)
        db_manager.insert_data("KoshSubCategory", subcategories)
        db_manager.insert_data("KoshContent", contents)


def main(argv: Sequence[str] | None = None) -> int:
    args = BuilderArgsParser().parse(argv)

    setup_logging("kosh_builder.log")
    logger.info("▶️  Bắt đầu chương trình xây dựng database Kosh...")

    try:
        config = load_config(KOSH_CONFIG_FILE)
        db_path = resolve_db_path(config)
        source_path = args.source or resolve_source_path(config)
        if source_path is None:
            raise ValueError("Chưa cấu hình 'source' và không có tham số --source.")

        build_database(db_path, source_path, args.overwrite, not args.no_progress)

    except Exception:
        logger.critical(
            "❌  Chương trình gặp lỗi nghiêm trọng và đã dừng lại.", exc_info=True
        )
        return 1
    else:
        logger.info("✅  Hoàn tất chương trình xây dựng database thành công.")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
