"""Command-line front end that wraps duplicate_scanner with NDJSON logging."""
from __future__ import annotations

import argparse
import hashlib
import json
import logging
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.table import Table

from duplicate_scanner import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_DUPLICATES_CSV,
    DEFAULT_FILTER,
    DEFAULT_HASHED_CSV,
    MODULE_VERSION,
    DuplicateScanner,
    InvalidPathError,
    LedgerNotFoundError,
    ScanConfig,
    setup_logger,
)

CLI_VERSION = MODULE_VERSION
CLI_ENV = os.getenv("DUPSCAN_ENV", "dev")
CLI_COMPONENT = "cli"

EXIT_OK = 0
EXIT_INVALID_CONFIG = 1
EXIT_INVALID_PATH = 2
EXIT_LEDGER_NOT_FOUND = 3

console = Console()
_cli_logger = logging.getLogger("duplicate_scanner")


def _hash_payload(payload: Dict[str, Any]) -> str:
    try:
        encoded = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str)
    except TypeError:
        encoded = repr(payload)
    return hashlib.md5(encoded.encode("utf-8")).hexdigest()[:12]


def _log_cli_event(event: str, message: str, *, level: int = logging.INFO, **fields: Any) -> None:
    log_payload = {
        "event": event,
        "message": message,
        "component": CLI_COMPONENT,
        "version": CLI_VERSION,
        "env": CLI_ENV,
    }
    log_payload.update(fields)
    _cli_logger.log(level, message, extra={"log_payload": log_payload})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dupscan",
        description="Hash every file under a directory and report files with identical content.",
    )
    parser.add_argument("path", help="Root directory to scan")
    parser.add_argument(
        "--filter",
        default=DEFAULT_FILTER,
        help="Glob applied to file names (default: %(default)s)",
    )
    parser.add_argument(
        "--exclude",
        dest="excluded_folders",
        action="append",
        default=[],
        metavar="DIR",
        help="Folder whose files are left out; may be repeated",
    )
    parser.add_argument(
        "--hashed-csv",
        default=DEFAULT_HASHED_CSV,
        help="Hash ledger location (default: %(default)s)",
    )
    parser.add_argument(
        "--duplicates-csv",
        default=DEFAULT_DUPLICATES_CSV,
        help="Duplicate report location (default: %(default)s)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Threads used to hash each batch (default: %(default)s)",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help="Bytes read per hashing step (default: %(default)s)",
    )
    parser.add_argument(
        "--report-only",
        action="store_true",
        help="Skip scanning and regroup an existing hash ledger",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-file events",
    )
    return parser


def print_results(duplicates: Dict[str, List[str]], stats: Dict[str, Any], report_file: str) -> None:
    if not duplicates:
        console.print("\n[bold green]No duplicates found![/bold green]")
        console.print(f"Report stored in: {report_file}")
        return

    table = Table(title="Duplicate Files Found", box=box.ROUNDED)
    table.add_column("Filename", style="cyan")
    table.add_column("Directory", style="dim")

    for file_hash, paths in duplicates.items():
        table.add_section()
        table.add_row(f"[bold red]Group ({file_hash[:8]}...)[/bold red]", "")
        for file_path in paths:
            path = Path(file_path)
            table.add_row(path.name, str(path.parent))

    console.print(table)
    console.print(f"\n[bold green]Found {stats['total_duplicate_groups']} groups of duplicates.[/bold green]")
    console.print(f"[bold green]Total duplicate files: {stats['total_duplicate_files']}[/bold green]")
    console.print(f"[bold green]Reclaimable space: {stats['wasted_size_mb']} MB[/bold green]")
    console.print(f"Report stored in: {report_file}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logger()
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    run_id = str(uuid.uuid4())
    start = time.perf_counter()
    params = {
        "path": args.path,
        "filter": args.filter,
        "excluded_folders": args.excluded_folders,
        "hashed_csv_path": args.hashed_csv,
        "duplicates_csv_path": args.duplicates_csv,
        "workers": args.workers,
        "chunk_size": args.chunk_size,
    }
    _log_cli_event(
        "cli_request",
        "Scan requested",
        run_id=run_id,
        report_only=args.report_only,
        params_hash=_hash_payload(params),
    )

    try:
        config = ScanConfig(**params)
    except ValidationError as exc:
        console.print(f"[bold red]Error: invalid arguments.[/bold red]\n{exc}")
        _log_cli_event(
            "cli_response",
            "Scan request rejected",
            level=logging.ERROR,
            run_id=run_id,
            exit_code=EXIT_INVALID_CONFIG,
            exception_type=exc.__class__.__name__,
        )
        return EXIT_INVALID_CONFIG

    scanner = DuplicateScanner.from_config(config, logger=logger)
    try:
        if args.report_only:
            duplicates = scanner.find_duplicates(config.hashed_csv_path, config.duplicates_csv_path)
            stats = scanner.get_duplicate_stats(duplicates)
            report_file = config.duplicates_csv_path
        else:
            console.print(f"[bold]Starting scan in: {config.path}[/bold]")
            result = scanner.run(config)
            duplicates = result["duplicates"]
            stats = result["stats"]
            report_file = result["report_file"]
            ledger = result["ledger"]
            console.print(
                f"Hashed {ledger['files_hashed']} of {ledger['files_seen']} files "
                f"({ledger['files_skipped']} skipped) into {ledger['ledger_file']}"
            )
    except InvalidPathError as exc:
        console.print(f"[bold red]Error: Directory '{exc.path}' not found or is not a directory.[/bold red]")
        exit_code = EXIT_INVALID_PATH
    except LedgerNotFoundError as exc:
        console.print(f"[bold red]Error: hash ledger '{exc.path}' not found.[/bold red]")
        exit_code = EXIT_LEDGER_NOT_FOUND
    else:
        print_results(duplicates, stats, report_file)
        exit_code = EXIT_OK

    _log_cli_event(
        "cli_response",
        "Scan request completed" if exit_code == EXIT_OK else "Scan request failed",
        level=logging.INFO if exit_code == EXIT_OK else logging.ERROR,
        run_id=run_id,
        exit_code=exit_code,
        duration_ms=int((time.perf_counter() - start) * 1000),
    )
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
