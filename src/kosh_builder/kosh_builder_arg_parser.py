# Path: src/kosh_builder/kosh_builder_arg_parser.py
import argparse
from pathlib import Path
from typing import Sequence


class BuilderArgsParser:
    def __init__(self):
        self.parser = self._setup_parser()

    def _setup_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            description="Công cụ xây dựng database SQLite cho Kosh."
        )
        parser.add_argument(
            "--overwrite",
            action="store_true",
            help="Xóa file database hiện có trước khi xây dựng lại.",
        )
        parser.add_argument(
            "--source",
            type=Path,
            default=None,
            help="File JSON xuất từ Kosh (mặc định lấy từ file cấu hình).",
        )
        parser.add_argument(
            "--no-progress",
            action="store_true",
            help="Tắt thanh tiến trình.",
        )
        return parser

    def parse(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        return self.parser.parse_args(argv)
