# Path: src/kosh_listing/kosh_listing_arg_parser.py
import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

COMMANDS = ["categories", "subcategories", "contents", "search"]


@dataclass
class ParsedArgs:
    command: str
    category_id: int | None
    subcategory_id: int | None
    query: str | None
    page: str | None
    limit: str | None
    output: Path | None
    verbose: bool


class CliArgsHandler:
    def __init__(self, log: logging.Logger):
        self.log = log
        self.parser = self._setup_parser()

    def _setup_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            description="Công cụ dòng lệnh để liệt kê từ điển Kosh theo thứ tự chữ cái Hindi.",
            formatter_class=argparse.RawTextHelpFormatter,
        )
        parser.add_argument(
            "-o",
            "--output",
            type=Path,
            default=None,
            help="Ghi kết quả JSON ra file thay vì in ra stdout.",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Hiển thị log DEBUG trên console.",
        )

        subparsers = parser.add_subparsers(dest="command", metavar="{" + ",".join(COMMANDS) + "}")

        categories = subparsers.add_parser("categories", help="Liệt kê các category theo vị trí.")
        self._add_page_args(categories, with_limit=False)

        subcategories = subparsers.add_parser(
            "subcategories", help="Liệt kê các subcategory của một category."
        )
        subcategories.add_argument("-c", "--category", type=int, required=True, help="ID của category.")
        self._add_page_args(subcategories, with_limit=False)

        contents = subparsers.add_parser(
            "contents",
            help="Liệt kê mục từ điển đã sắp xếp, kèm vishesh_suchi.\n"
            "Không có -c: liệt kê toàn bộ từ điển.",
        )
        contents.add_argument("-c", "--category", type=int, default=None, help="ID của category.")
        contents.add_argument(
            "-s",
            "--subcategory",
            type=int,
            default=None,
            help="ID của subcategory. CHỈ hoạt động khi có -c/--category.",
        )
        self._add_page_args(contents)

        search = subparsers.add_parser("search", help="Tìm kiếm mục từ điển.")
        search.add_argument("-q", "--query", required=True, help="Từ khóa tìm kiếm.")
        self._add_page_args(search)

        return parser

    @staticmethod
    def _add_page_args(parser: argparse.ArgumentParser, with_limit: bool = True):
        parser.add_argument("-p", "--page", default=None, help="Số trang (mặc định 1).")
        if with_limit:
            parser.add_argument("-l", "--limit", default=None, help="Số mục mỗi trang.")

    def parse_args(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        return self.parser.parse_args(argv)

    def validate_args(self, args: argparse.Namespace) -> ParsedArgs | None:
        if args.command is None:
            self.log.error("Cần chỉ định một lệnh: " + ", ".join(COMMANDS))
            self.parser.print_help()
            return None

        category_id = getattr(args, "category", None)
        subcategory_id = getattr(args, "subcategory", None)
        if subcategory_id is not None and category_id is None:
            self.log.error("'-s/--subcategory' chỉ có thể được sử dụng cùng với '-c/--category'.")
            return None

        query = getattr(args, "query", None)
        if args.command == "search" and (query is None or not query.strip()):
            self.log.error("Từ khóa tìm kiếm '-q/--query' không được để trống.")
            return None

        return ParsedArgs(
            command=args.command,
            category_id=category_id,
            subcategory_id=subcategory_id,
            query=query,
            page=getattr(args, "page", None),
            limit=getattr(args, "limit", None),
            output=args.output,
            verbose=args.verbose,
        )
