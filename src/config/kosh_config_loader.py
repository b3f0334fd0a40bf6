# Path: src/config/kosh_config_loader.py
import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from src.config.constants import DB_PATH_ENV_VAR, PROJECT_ROOT

logger = logging.getLogger(__name__)

ROOT_KEY = "kosh-sqlite"
REQUIRED_DB_KEYS = ["path", "name"]


def load_config(config_path: Path) -> dict:
    try:
        logger.info(f"Đang đọc file cấu hình từ: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict) or ROOT_KEY not in config:
            raise ValueError(f"Thiếu khóa chính '{ROOT_KEY}' trong file config.")

        db_config = config[ROOT_KEY]
        for key in REQUIRED_DB_KEYS:
            if key not in db_config:
                raise ValueError(f"Thiếu khóa '{key}' bên trong '{ROOT_KEY}'.")

        for section in ("collation", "listing"):
            if section in config and not isinstance(config[section], dict):
                raise ValueError(f"Mục '{section}' phải là một dictionary.")

        logger.info("✅ Đọc và xác thực file cấu hình thành công.")
        return config

    except FileNotFoundError:
        logger.error(f"Lỗi: Không tìm thấy file cấu hình tại '{config_path}'.")
        raise
    except yaml.YAMLError as e:
        logger.error(f"Lỗi: File cấu hình YAML không hợp lệ: {e}")
        raise
    except ValueError as e:
        logger.error(f"Lỗi: Cấu hình không hợp lệ. {e}")
        raise


def resolve_db_path(config: dict) -> Path:
    """Đường dẫn database, ưu tiên biến môi trường KOSH_DB_PATH (kể cả từ file .env)."""
    load_dotenv()
    override = os.getenv(DB_PATH_ENV_VAR)
    if override:
        logger.debug(f"Dùng đường dẫn database từ {DB_PATH_ENV_VAR}: {override}")
        return Path(override)

    db_config = config[ROOT_KEY]
    return PROJECT_ROOT / db_config["path"] / db_config["name"]


def resolve_source_path(config: dict) -> Path | None:
    source = config[ROOT_KEY].get("source")
    if not source:
        return None
    return PROJECT_ROOT / source
