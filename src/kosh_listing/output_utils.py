# Path: src/kosh_listing/output_utils.py
import json
import logging
from pathlib import Path
from typing import Any, Dict

__all__ = ["dump_json", "write_json_file"]

log = logging.getLogger(__name__)


def dump_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def write_json_file(data: Dict[str, Any], output_file: Path, file_type: str):
    log.info(f"Đang ghi kết quả {file_type} vào file: {output_file}")
    output_file.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(dump_json(data))
        log.info(f"✅ Đã tạo file {file_type} thành công.")
    except IOError as e:
        log.error(f"Không thể ghi file {file_type}: {e}")
        raise
