# Path: src/kosh_builder/database_manager.py
import logging
import sqlite3
from pathlib import Path
from typing import Any, Dict, List, Sequence

logger = logging.getLogger(__name__)


class DatabaseManager:

    def __init__(self, db_path: Path, read_only: bool = False):
        self.db_path = db_path
        self.read_only = read_only
        self.conn = None
        if not read_only:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def __enter__(self):
        try:
            if self.read_only:
                if not self.db_path.exists():
                    raise FileNotFoundError(f"Database không tồn tại: {self.db_path}")
                logger.debug(f"Đang mở database ở chế độ chỉ đọc: {self.db_path}")
                self.conn = sqlite3.connect(f"{self.db_path.resolve().as_uri()}?mode=ro", uri=True)
            else:
                logger.info(f"Đang kết nối đến database: {self.db_path}")
                self.conn = sqlite3.connect(self.db_path)

                self.conn.execute("PRAGMA foreign_keys = OFF;")

                self.conn.execute("PRAGMA synchronous = OFF;")

                logger.info("✅ Kết nối database thành công và tối ưu cho ghi hàng loạt.")

            self.conn.row_factory = sqlite3.Row

        except sqlite3.Error as e:
            logger.error(f"Lỗi khi kết nối hoặc cấu hình database: {e}")
            raise
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not self.conn:
            return
        try:
            if self.read_only:
                return
            if exc_type is None:

                logger.info("Không có lỗi xảy ra, đang commit toàn bộ các thay đổi...")
                self.conn.commit()
                logger.info("✅ Commit thành công.")
            else:

                logger.warning(f"Đã xảy ra lỗi: {exc_val}. Đang rollback...")
                self.conn.rollback()
                logger.warning("✅ Rollback thành công.")
        finally:
            self.conn.close()
            self.conn = None
            logger.debug("Đã đóng kết nối database.")

    def create_tables_from_schema(self, schema_path: Path):
        if not schema_path.exists():
            logger.error(f"File schema không tồn tại: {schema_path}")
            raise FileNotFoundError(f"File schema không tồn tại: {schema_path}")

        logger.info(f"Đang đọc schema từ: {schema_path}")
        try:
            with open(schema_path, "r", encoding="utf-8") as f:
                schema_sql = f.read()
            self.conn.executescript(schema_sql)
            logger.info(
                f"✅ Đã tạo tất cả các bảng từ file schema '{schema_path.name}' thành công."
            )
        except sqlite3.Error as e:
            logger.error(f"Lỗi khi thực thi file schema '{schema_path.name}': {e}")
            raise

    def insert_data(self, table_name: str, data: List[Dict[str, Any]]):
        if not data:
            logger.info(f"Không có dữ liệu để chèn vào bảng '{table_name}'.")
            return

        logger.info(f"Chuẩn bị chèn {len(data)} hàng vào bảng '{table_name}'...")

        columns = data[0].keys()
        column_list = ", ".join(columns)
        placeholders = ", ".join(f":{col}" for col in columns)

        sql = f'INSERT OR REPLACE INTO "{table_name}" ({column_list}) VALUES ({placeholders});'

        try:
            cursor = self.conn.cursor()
            cursor.executemany(sql, data)

            logger.info(
                f"✅ Đã chuẩn bị {cursor.rowcount} hàng để chèn vào '{table_name}'."
            )
        except sqlite3.Error as e:
            logger.error(f"Lỗi khi chèn hàng loạt vào '{table_name}': {e}")
            raise

    def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        try:
            cursor = self.conn.execute(sql, params)
            return [dict(row) for row in cursor.fetchall()]
        except sqlite3.Error as e:
            logger.error(f"Lỗi khi truy vấn database: {e}")
            raise

    def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Dict[str, Any] | None:
        rows = self.fetch_all(sql, params)
        return rows[0] if rows else None
