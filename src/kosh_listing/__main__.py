# Path: src/kosh_listing/__main__.py
import logging
from typing import Any, Dict, Sequence

import argcomplete

from src.config.constants import KOSH_CONFIG_FILE
from src.config.kosh_config_loader import load_config, resolve_db_path
from src.config.logging_config import setup_logging
from src.kosh_builder.database_manager import DatabaseManager
from src.kosh_collation import HindiAlphabet, HindiCollator
from src.kosh_listing.kosh_listing_arg_parser import CliArgsHandler, ParsedArgs
from src.kosh_listing.listing_service import KoshListingService, ScopeNotFoundError
from src.kosh_listing.output_utils import dump_json, write_json_file
from src.kosh_listing.repository import KoshRepository


def run_command(service: KoshListingService, args: ParsedArgs) -> Dict[str, Any]:
    if args.command == "categories":
        return service.list_categories(args.page)
    if args.command == "subcategories":
        return service.list_subcategories(args.category_id, args.page)
    if args.command == "search":
        return service.search_contents(args.query, args.page, args.limit)

    if args.category_id is None:
        return service.list_contents(args.page, args.limit)
    if args.subcategory_id is None:
        return service.list_category_contents(args.category_id, args.page, args.limit)
    return service.list_subcategory_contents(
        args.category_id, args.subcategory_id, args.page, args.limit
    )


def main(argv: Sequence[str] | None = None) -> int:
    arg_handler = CliArgsHandler(log=logging.getLogger(__name__))
    argcomplete.autocomplete(arg_handler.parser)
    args = arg_handler.parse_args(argv)

    setup_logging("kosh_listing.log", verbose=args.verbose)
    log = logging.getLogger(__name__)

    processed_args = arg_handler.validate_args(args)
    if not processed_args:
        return 1

    try:
        config = load_config(KOSH_CONFIG_FILE)
        alphabet = HindiAlphabet.from_config(config.get("collation"))
        collator = HindiCollator(alphabet)
        log.debug(f"Bảng chữ cái gồm {len(alphabet)} grapheme, unknown-rank={alphabet.unknown_rank}.")

        db_path = resolve_db_path(config)
        with DatabaseManager(db_path, read_only=True) as db_manager:
            service = KoshListingService.from_config(
                KoshRepository(db_manager), collator, config.get("listing")
            )
            result = run_command(service, processed_args)

    except FileNotFoundError as e:
        log.error(f"❌ {e}. Hãy chạy 'python -m src.kosh_builder.main' trước.")
        return 1
    except ScopeNotFoundError as e:
        log.error(f"❌ {e}")
        return 1
    except ValueError as e:
        log.error(f"❌ Tham số hoặc cấu hình không hợp lệ: {e}")
        return 1
    except Exception:
        log.critical("❌ Lỗi nghiêm trọng khi liệt kê dữ liệu Kosh.", exc_info=True)
        return 1

    if processed_args.output:
        write_json_file(result, processed_args.output, processed_args.command)
    else:
        print(dump_json(result))

    log.info("Hoàn tất!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
