from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from eventarchive.app import get_catalog_graph, get_catalog_stats, import_csv_exports
from eventarchive.config import configure_logging, get_import_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Event archive catalog tools")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output, including skipped rows and unresolved links",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    importer = subparsers.add_parser("import", help="Import spreadsheet CSV exports")
    importer.add_argument(
        "--root",
        type=Path,
        help="Directory containing the export folders (defaults to EVENTARCHIVE_IMPORT_ROOT or cwd)",
    )
    importer.add_argument(
        "--identified-dir",
        type=str,
        help="Folder name of the sheets carrying form_record_id (default: Eventi)",
    )
    importer.add_argument(
        "--unidentified-dir",
        type=str,
        help="Folder name of the sheets without ids (default: Eventi-NO_ID)",
    )

    subparsers.add_parser("stats", help="Print entity and link counts as JSON")
    subparsers.add_parser("graph", help="Print the entity graph as JSON")

    return parser.parse_args(list(argv))


def _run_import(args: argparse.Namespace) -> None:
    config = get_import_config(root=args.root)
    overrides: dict[str, str] = {}
    if args.identified_dir:
        overrides["identified_dir_name"] = args.identified_dir
    if args.unidentified_dir:
        overrides["unidentified_dir_name"] = args.unidentified_dir
    config = replace(config, **overrides)
    import_csv_exports(config=config)


def _print_json(payload: object) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2))
    sys.stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "import":
            _run_import(parsed_args)
        elif parsed_args.command == "stats":
            _print_json(get_catalog_stats().as_dict())
        elif parsed_args.command == "graph":
            _print_json(get_catalog_graph().as_dict())
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Command %s failed", parsed_args.command)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
