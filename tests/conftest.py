import json
import logging

import pytest

from src.kosh_builder.database_manager import DatabaseManager
from src.kosh_builder.main import build_database
from src.kosh_collation import HindiCollator
from src.kosh_listing.repository import KoshRepository

SAMPLE_EXPORT = {
    "categories": [
        {"id": 1, "name": "शब्दकोश", "position": 1, "introduction": "मुख्य कोश"},
        {"id": 2, "name": "धातु", "position": 0, "cover_image": "dhatu.png"},
    ],
    "subcategories": [
        {"id": 10, "parentCategory": 1, "name": "क्रिया", "position": 2, "cover_image": "kriya.png"},
        {"id": 11, "parentCategory": 1, "name": "संज्ञा", "position": 1},
        {"id": 20, "parentCategory": 2, "name": "Empty", "position": 1},
        {"id": 30, "parentCategory": 99, "name": "Orphan", "position": 1},
    ],
    "contents": [
        {"id": 1, "subCategory": 10, "sequenceNo": 1, "hindiWord": "पठति", "search": "पठति,reads"},
        {"id": 2, "subCategory": 10, "sequenceNo": 2, "hindiWord": "गच्छति", "search": "गच्छति,goes"},
        {"id": 3, "subCategory": 10, "sequenceNo": 3, "hindiWord": "", "search": ""},
        {"id": 4, "subCategory": 10, "sequenceNo": 4, "hindiWord": "अमृत", "search": "अमृत, nectar, goes"},
        {"id": 5, "subCategory": 11, "sequenceNo": 1, "hindiWord": "क्षमा", "englishWord": "forgiveness", "search": "क्षमा"},
        {"id": 6, "subCategory": 11, "sequenceNo": 2, "hindiWord": "कमल", "englishWord": "lotus", "search": " lotus ,,कमल "},
        {"id": 7, "subCategory": 11, "sequenceNo": 3, "hindiWord": "आम", "englishWord": "mango_tree 100%", "search": None},
        {"id": 8, "subCategory": 99, "sequenceNo": 1, "hindiWord": "अनाथ"},
        {"id": 9, "subCategory": 10, "hindiWord": "बिना क्रम"},
    ],
}


@pytest.fixture
def collator():
    return HindiCollator()


@pytest.fixture
def sample_export():
    return json.loads(json.dumps(SAMPLE_EXPORT))


@pytest.fixture
def export_file(tmp_path, sample_export):
    path = tmp_path / "kosh_export.json"
    path.write_text(json.dumps(sample_export, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def kosh_db(tmp_path, export_file):
    db_path = tmp_path / "processed" / "kosh.db"
    build_database(db_path, export_file, show_progress=False)
    return db_path


@pytest.fixture
def repository(kosh_db):
    with DatabaseManager(kosh_db, read_only=True) as db_manager:
        yield KoshRepository(db_manager)


@pytest.fixture
def isolated_logging(tmp_path, monkeypatch):
    """Giữ nguyên handler của root logger sau khi setup_logging() thay thế chúng."""
    monkeypatch.setattr("src.config.logging_config.LOGS_DIR", tmp_path / "logs")
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    yield tmp_path / "logs"
    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)
