#!/usr/bin/env python3
"""Hash-ledger duplicate scanner with structured NDJSON logging."""

from __future__ import annotations

import csv
import errno
import fnmatch
import hashlib
import json
import logging
import os
import sys
import time
import uuid
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime, timezone
from itertools import islice
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field, field_validator

MODULE_VERSION = "1.0.0"
DEFAULT_ENV = os.getenv("DUPSCAN_ENV", "dev")
BATCH_SIZE = 1000
HASH_ATTEMPTS = 3
RETRY_DELAY_SECONDS = 1.0
DEFAULT_CHUNK_SIZE = 64 * 1024

DEFAULT_FILTER = "*"
DEFAULT_HASHED_CSV = "hashedFiles.csv"
DEFAULT_DUPLICATES_CSV = "duplicate_files.csv"
LEDGER_HEADER = ("HASH", "Filename")
REPORT_HEADER = ("HASH", "Path")

LOG_DIR_ENV = "DUPSCAN_LOG_DIR"
DEFAULT_LOG_DIR = Path(__file__).resolve().parent / "logs"
GENERAL_LOG_FILENAME = "duplicate-scanner.log"
GENERAL_TEXT_LOG_FILENAME = "duplicate-scanner.txt"
CLI_LOG_FILENAME = "duplicate-scanner.cli.log"
CLI_TEXT_LOG_FILENAME = "duplicate-scanner.cli.txt"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5
CLI_LOG_BACKUP_COUNT = 3

# Lock and busy conditions reported while another process holds the file.
TRANSIENT_ERRNOS = frozenset(
    code
    for code in (
        getattr(errno, name, None) for name in ("EBUSY", "EAGAIN", "EDEADLK", "ETXTBSY")
    )
    if code is not None
)
# ERROR_SHARING_VIOLATION, ERROR_LOCK_VIOLATION
TRANSIENT_WINERRORS = frozenset({32, 33})


def _iso_utc(timestamp: float) -> str:
    """Return ISO-8601 UTC timestamp with Z suffix."""
    dt = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


class NDJSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload = getattr(record, "log_payload", {}).copy()
        payload.setdefault("timestamp", _iso_utc(record.created))
        payload.setdefault("level", record.levelname)

        message = record.getMessage()
        if not payload.get("message"):
            payload["message"] = message

        payload.setdefault("event", getattr(record, "event", message))
        return json.dumps(payload, ensure_ascii=False, default=str)


class PlainTextFormatter(logging.Formatter):
    """Render log records as human-readable text."""

    def format(self, record: logging.LogRecord) -> str:
        payload = getattr(record, "log_payload", {}).copy()
        timestamp = _iso_utc(record.created)
        event = payload.get("event") or getattr(record, "event", record.getMessage())
        human_message = payload.get("message") or record.getMessage()
        extras = {k: v for k, v in payload.items() if k not in {"event", "message"}}
        extra_str = " ".join(f"{key}={value}" for key, value in sorted(extras.items()))
        base = f"{timestamp} [{record.levelname}] {event}: {human_message}"
        return f"{base} | {extra_str}" if extra_str else base


class _ComponentFilter(logging.Filter):
    def __init__(self, *, component: str) -> None:
        super().__init__()
        self._component = component

    def filter(self, record: logging.LogRecord) -> bool:
        payload = getattr(record, "log_payload", {})
        return payload.get("component") == self._component


def _resolve_log_dir() -> Path:
    override = os.getenv(LOG_DIR_ENV)
    if override:
        candidate = Path(override).expanduser()
    else:
        candidate = DEFAULT_LOG_DIR
    try:
        candidate.mkdir(parents=True, exist_ok=True)
    except OSError:
        candidate = DEFAULT_LOG_DIR
        candidate.mkdir(parents=True, exist_ok=True)
    return candidate


def _rotating_handler(
    path: Path,
    formatter: logging.Formatter,
    backup_count: int,
    component: Optional[str] = None,
) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=LOG_MAX_BYTES,
        backupCount=backup_count,
        encoding="utf-8",
        delay=True,
    )
    handler.setFormatter(formatter)
    if component is not None:
        handler.addFilter(_ComponentFilter(component=component))
    return handler


def setup_logger() -> logging.Logger:
    """Configure the shared ``duplicate_scanner`` logger once per process."""
    logger = logging.getLogger("duplicate_scanner")
    logger.setLevel(logging.INFO)
    if logger.handlers:
        return logger

    log_dir = _resolve_log_dir()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(NDJSONFormatter())
    logger.addHandler(stream_handler)

    logger.addHandler(
        _rotating_handler(log_dir / GENERAL_LOG_FILENAME, NDJSONFormatter(), LOG_BACKUP_COUNT)
    )
    logger.addHandler(
        _rotating_handler(
            log_dir / GENERAL_TEXT_LOG_FILENAME, PlainTextFormatter(), LOG_BACKUP_COUNT
        )
    )
    logger.addHandler(
        _rotating_handler(
            log_dir / CLI_LOG_FILENAME, NDJSONFormatter(), CLI_LOG_BACKUP_COUNT, component="cli"
        )
    )
    logger.addHandler(
        _rotating_handler(
            log_dir / CLI_TEXT_LOG_FILENAME,
            PlainTextFormatter(),
            CLI_LOG_BACKUP_COUNT,
            component="cli",
        )
    )
    return logger


class DuplicateScanError(Exception):
    """Base class for scanner failures."""


class InvalidPathError(DuplicateScanError):
    """The scan root does not exist or is not a directory."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)
        super().__init__(f"Directory not found: {self.path}")


class LedgerNotFoundError(DuplicateScanError):
    """The hash ledger required for grouping is absent."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)
        super().__init__(f"Hash ledger not found: {self.path}")


class HashTransientError(DuplicateScanError):
    """The file was temporarily locked or busy; eligible for retry."""


class HashSkip(DuplicateScanError):
    """A file that could not be hashed and is left out of the ledger."""

    def __init__(self, path: Union[str, Path], reason: str, detail: str = "") -> None:
        self.path = str(path)
        self.reason = reason
        self.detail = detail
        message = f"Skipped {self.path}: {reason}"
        super().__init__(f"{message} ({detail})" if detail else message)


class FileEntry(NamedTuple):
    path: str
    directory: str


class FileRecord(NamedTuple):
    hash: str
    path: str


class ScanConfig(BaseModel):
    """Parameters for one scan run."""

    path: str
    filter: str = DEFAULT_FILTER
    excluded_folders: List[str] = Field(default_factory=list)
    hashed_csv_path: str = DEFAULT_HASHED_CSV
    duplicates_csv_path: str = DEFAULT_DUPLICATES_CSV
    workers: int = Field(default=1, ge=1)
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)

    @field_validator("filter")
    @classmethod
    def _default_filter(cls, value: str) -> str:
        return value.strip() or DEFAULT_FILTER


def _strip_trailing_separator(path: str) -> str:
    separators = (os.sep, os.altsep) if os.altsep else (os.sep,)
    if len(path) > 1 and path.endswith(separators):
        return path[:-1]
    return path


def normalize_excluded_folders(folders: Optional[Iterable[str]]) -> Tuple[str, ...]:
    """Build the excluded-folder prefixes used for every comparison of a run.

    Each entry is expanded, made absolute, stripped of one trailing separator
    and case-folded. Blank entries are ignored and duplicates collapsed while
    keeping the first-seen order.
    """
    if not folders:
        return ()
    cleaned: List[str] = []
    for item in folders:
        if not item or not item.strip():
            continue
        absolute = os.path.abspath(os.path.expanduser(item.strip()))
        value = _strip_trailing_separator(absolute).casefold()
        if value not in cleaned:
            cleaned.append(value)
    return tuple(cleaned)


def is_excluded(directory: Union[str, Path], excluded_prefixes: Sequence[str]) -> bool:
    """Return True when ``directory`` lies under any excluded prefix.

    This is a plain string prefix test: an exclusion of ``/data/Excluded1``
    also matches ``/data/Excluded1Extra``.
    """
    if not excluded_prefixes:
        return False
    normalized = _strip_trailing_separator(str(directory)).casefold()
    return any(normalized.startswith(prefix) for prefix in excluded_prefixes)


def _is_transient(exc: OSError) -> bool:
    if getattr(exc, "winerror", None) in TRANSIENT_WINERRORS:
        return True
    return exc.errno in TRANSIENT_ERRNOS


def _batched(items: Iterable[FileEntry], size: int) -> Iterator[List[FileEntry]]:
    iterator = iter(items)
    while True:
        batch = list(islice(iterator, size))
        if not batch:
            return
        yield batch


class DuplicateScanner:
    """Hash every file under a root into a ledger and report shared hashes."""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        *,
        batch_size: int = BATCH_SIZE,
        environment: str = DEFAULT_ENV,
        version: str = MODULE_VERSION,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")

        self.chunk_size = chunk_size
        self.batch_size = batch_size
        self.env = environment.lower()
        self.version = version
        self.component = "library"
        self._last_scan_context: Optional[Dict[str, Any]] = None
        self.logger = logger or setup_logger()

    @classmethod
    def from_config(
        cls, config: ScanConfig, logger: Optional[logging.Logger] = None
    ) -> "DuplicateScanner":
        return cls(chunk_size=config.chunk_size, logger=logger)

    def _build_log_context(
        self,
        scan_id: str,
        root_dir: Union[str, Path],
        extra: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "scan_id": scan_id,
            "component": self.component,
            "version": self.version,
            "env": self.env,
            "root_dir": str(root_dir),
            "hash_method": "sha1",
            "chunk_size": self.chunk_size,
        }
        if extra:
            payload.update(extra)
        return payload

    def _log_event(
        self,
        event: str,
        level: int,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        **fields: Any,
    ) -> None:
        payload: Dict[str, Any] = {"event": event, "message": message}
        payload.update(self._resolve_context(context))
        payload.update(fields)
        self.logger.log(level, message, extra={"log_payload": payload})

    def _resolve_context(self, context: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        if context:
            return dict(context)
        if self._last_scan_context:
            return dict(self._last_scan_context)
        return self._build_log_context("unknown-scan", "")

    @staticmethod
    def _duration_ms(start_time: float) -> int:
        return max(0, int((time.perf_counter() - start_time) * 1000))

    def walk_files(
        self,
        root: Union[str, Path],
        name_pattern: str = DEFAULT_FILTER,
        excluded: Sequence[str] = (),
        context: Optional[Dict[str, Any]] = None,
    ) -> Iterator[FileEntry]:
        """Lazily yield files under ``root`` whose names match ``name_pattern``.

        The root is validated immediately so a bad path fails before any
        ledger is touched. Every subdirectory is descended into; files whose
        directory is excluded are dropped one by one.
        """
        root_path = Path(root).expanduser()
        if not root_path.is_dir():
            raise InvalidPathError(root_path)
        return self._iter_files(
            os.path.abspath(root_path), name_pattern or DEFAULT_FILTER, excluded, context
        )

    def _iter_files(
        self,
        root: str,
        name_pattern: str,
        excluded: Sequence[str],
        context: Optional[Dict[str, Any]],
    ) -> Iterator[FileEntry]:
        def _on_error(exc: OSError) -> None:
            self._log_event(
                "walk_entry_error",
                logging.DEBUG,
                "Skipped unreadable directory entry",
                context,
                file=getattr(exc, "filename", None),
                exception_type=exc.__class__.__name__,
            )

        for directory, _dirnames, filenames in os.walk(root, onerror=_on_error):
            directory_excluded = is_excluded(directory, excluded)
            for name in filenames:
                if not fnmatch.fnmatch(name, name_pattern):
                    continue
                full_path = os.path.join(directory, name)
                if directory_excluded:
                    if self.logger.isEnabledFor(logging.DEBUG):
                        self._log_event(
                            "file_excluded",
                            logging.DEBUG,
                            "File under excluded folder",
                            context,
                            file=full_path,
                        )
                    continue
                yield FileEntry(path=full_path, directory=directory)

    def _read_digest(self, path: Path) -> str:
        hasher = hashlib.sha1()
        with path.open("rb") as handle:
            while chunk := handle.read(self.chunk_size):
                hasher.update(chunk)
        return hasher.hexdigest().upper()

    def _attempt_hash(self, path: Path) -> str:
        try:
            return self._read_digest(path)
        except OSError as exc:
            if _is_transient(exc):
                raise HashTransientError(str(exc)) from exc
            if isinstance(exc, FileNotFoundError):
                raise HashSkip(path, "missing", str(exc)) from exc
            if isinstance(exc, PermissionError):
                raise HashSkip(path, "permission", str(exc)) from exc
            raise HashSkip(path, "io_error", str(exc)) from exc

    def hash_file(
        self,
        file_path: Union[str, Path],
        context: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Return the upper-case SHA-1 hex digest of a file's content.

        Raises ``HashSkip`` when the file is gone, unreadable, or still locked
        after ``HASH_ATTEMPTS`` attempts spaced ``RETRY_DELAY_SECONDS`` apart.
        """
        path = Path(file_path)
        if not path.exists():
            raise HashSkip(path, "missing")

        last_error: Optional[HashTransientError] = None
        for attempt in range(1, HASH_ATTEMPTS + 1):
            try:
                return self._attempt_hash(path)
            except HashTransientError as exc:
                last_error = exc
                if attempt < HASH_ATTEMPTS:
                    self._log_event(
                        "hash_retry",
                        logging.WARNING,
                        "File temporarily locked, retrying",
                        context,
                        file=str(path),
                        attempt=attempt,
                        max_attempts=HASH_ATTEMPTS,
                        retry_in_s=RETRY_DELAY_SECONDS,
                    )
                    time.sleep(RETRY_DELAY_SECONDS)

        raise HashSkip(path, "retries_exhausted", str(last_error))

    def _hash_entry(
        self, entry: FileEntry, context: Optional[Dict[str, Any]]
    ) -> Optional[FileRecord]:
        try:
            file_hash = self.hash_file(entry.path, context)
        except HashSkip as exc:
            self._log_event(
                "file_skipped",
                logging.WARNING,
                "File skipped",
                context,
                file=exc.path,
                reason=exc.reason,
                exception_msg=exc.detail or None,
            )
            return None

        if self.logger.isEnabledFor(logging.DEBUG):
            self._log_event(
                "hash_computed",
                logging.DEBUG,
                "Hash computed",
                context,
                file=entry.path,
                hash_prefix=file_hash[:12],
            )
        return FileRecord(hash=file_hash, path=entry.path)

    def _hash_batch(
        self,
        batch: List[FileEntry],
        executor: Optional[ThreadPoolExecutor],
        context: Optional[Dict[str, Any]],
    ) -> Iterator[Optional[FileRecord]]:
        if executor is None:
            for entry in batch:
                yield self._hash_entry(entry, context)
            return
        futures = [executor.submit(self._hash_entry, entry, context) for entry in batch]
        for future in as_completed(futures):
            yield future.result()

    def process_files(
        self,
        files: Iterable[FileEntry],
        ledger_path: Union[str, Path],
        *,
        workers: int = 1,
        context: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Hash ``files`` in batches and stream ``(hash, path)`` rows to a fresh ledger.

        With ``workers`` above one, each batch is hashed on a thread pool while
        this thread stays the only ledger writer.
        """
        if workers < 1:
            raise ValueError("workers must be at least 1")

        ledger = Path(ledger_path)
        ledger.parent.mkdir(parents=True, exist_ok=True)
        start = time.perf_counter()
        summary: Dict[str, Any] = {
            "files_seen": 0,
            "files_hashed": 0,
            "files_skipped": 0,
            "batches": 0,
            "ledger_file": str(ledger),
        }

        executor = ThreadPoolExecutor(max_workers=workers) if workers > 1 else None
        try:
            with ledger.open("w", newline="", encoding="utf-8") as handle:
                writer = csv.writer(handle)
                writer.writerow(LEDGER_HEADER)
                handle.flush()
                for batch in _batched(files, self.batch_size):
                    for record in self._hash_batch(batch, executor, context):
                        if record is None:
                            summary["files_skipped"] += 1
                            continue
                        writer.writerow(record)
                        handle.flush()
                        summary["files_hashed"] += 1
                    summary["files_seen"] += len(batch)
                    summary["batches"] += 1
                    self._log_event(
                        "batch_completed",
                        logging.INFO,
                        "Batch completed",
                        context,
                        batch=summary["batches"],
                        batch_size=len(batch),
                        files_processed=summary["files_seen"],
                        files_hashed=summary["files_hashed"],
                        duration_ms=self._duration_ms(start),
                    )
        finally:
            if executor is not None:
                executor.shutdown(wait=True)

        summary["duration_ms"] = self._duration_ms(start)
        self._log_event(
            "ledger_written",
            logging.INFO,
            "Hash ledger written",
            context,
            **{k: v for k, v in summary.items() if k != "batches"},
        )
        return summary

    @staticmethod
    def read_ledger(ledger_path: Union[str, Path]) -> Iterator[FileRecord]:
        """Yield the records of a ledger file in file order.

        Rows from ledgers written without quoting are tolerated: every field
        after the hash is joined back into the path.
        """
        ledger = Path(ledger_path)
        if not ledger.is_file():
            raise LedgerNotFoundError(ledger)
        with ledger.open("r", newline="", encoding="utf-8") as handle:
            reader = csv.reader(handle)
            for index, row in enumerate(reader):
                if len(row) < 2:
                    continue
                if index == 0 and tuple(cell.strip().upper() for cell in row) == tuple(
                    cell.upper() for cell in LEDGER_HEADER
                ):
                    continue
                yield FileRecord(hash=row[0].strip().upper(), path=",".join(row[1:]))

    def find_duplicates(
        self,
        ledger_path: Union[str, Path],
        report_path: Union[str, Path],
        context: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, List[str]]:
        """Group ledger rows by hash and write groups of two or more to the report."""
        start = time.perf_counter()
        groups: Dict[str, List[str]] = defaultdict(list)
        rows_read = 0
        for record in self.read_ledger(ledger_path):
            groups[record.hash].append(record.path)
            rows_read += 1

        duplicates = {
            hash_value: paths for hash_value, paths in groups.items() if len(paths) > 1
        }
        self._log_event(
            "duplicates_found",
            logging.INFO,
            "Duplicate groups computed",
            context,
            ledger_file=str(ledger_path),
            rows_read=rows_read,
            groups_found=len(duplicates),
        )

        self.write_report(duplicates, report_path, context)
        self._log_event(
            "report_written",
            logging.INFO,
            "Duplicate report written",
            context,
            output_file=str(report_path),
            rows_written=sum(len(paths) for paths in duplicates.values()),
            duration_ms=self._duration_ms(start),
        )
        return duplicates

    def write_report(
        self,
        duplicates: Dict[str, List[str]],
        report_path: Union[str, Path],
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        output_path = Path(report_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with output_path.open("w", newline="", encoding="utf-8") as handle:
                writer = csv.writer(handle, quoting=csv.QUOTE_ALL)
                writer.writerow(REPORT_HEADER)
                for hash_value, paths in duplicates.items():
                    for file_path in paths:
                        writer.writerow([hash_value, file_path])
        except OSError as exc:
            self._log_event(
                "report_failed",
                logging.ERROR,
                "Failed to write duplicate report",
                context,
                output_file=str(output_path),
                exception_type=exc.__class__.__name__,
                exception_msg=str(exc),
            )
            raise

    def run(self, config: ScanConfig) -> Dict[str, Any]:
        """Run the whole pipeline described by ``config``."""
        scan_id = str(uuid.uuid4())
        excluded = normalize_excluded_folders(config.excluded_folders)
        root = Path(config.path).expanduser()
        ledger_path = Path(config.hashed_csv_path).expanduser()
        report_path = Path(config.duplicates_csv_path).expanduser()
        context = self._build_log_context(
            scan_id,
            os.path.abspath(root),
            extra={
                "filter": config.filter,
                "excluded_folders": list(excluded),
                "workers": config.workers,
            },
        )
        self._last_scan_context = dict(context)
        start = time.perf_counter()

        try:
            files = self.walk_files(root, config.filter, excluded, context)
        except InvalidPathError as exc:
            self._log_event(
                "scan_failed",
                logging.ERROR,
                "Scan root is not an existing directory",
                context,
                exception_type=exc.__class__.__name__,
                exception_msg=str(exc),
            )
            raise

        # The run's own output files are never hashed into the ledger.
        outputs = {
            os.path.normcase(os.path.realpath(output)) for output in (ledger_path, report_path)
        }
        files = (
            entry
            for entry in files
            if os.path.normcase(os.path.realpath(entry.path)) not in outputs
        )

        self._log_event("scan_started", logging.INFO, "Scan started", context)
        ledger_summary = self.process_files(
            files, ledger_path, workers=config.workers, context=context
        )
        duplicates = self.find_duplicates(ledger_path, report_path, context)
        stats = self.get_duplicate_stats(duplicates)

        self._log_event(
            "scan_finished",
            logging.INFO,
            "Scan finished",
            context,
            files_processed=ledger_summary["files_seen"],
            files_hashed=ledger_summary["files_hashed"],
            files_skipped=ledger_summary["files_skipped"],
            groups_found=stats["total_duplicate_groups"],
            total_duplicate_files=stats["total_duplicate_files"],
            wasted_size_bytes=stats["wasted_size_bytes"],
            duration_ms=self._duration_ms(start),
        )

        return {
            "scan_id": scan_id,
            "ledger": ledger_summary,
            "duplicates": duplicates,
            "stats": stats,
            "report_file": str(report_path),
        }

    @staticmethod
    def get_duplicate_stats(duplicates: Dict[str, List[str]]) -> Dict[str, Any]:
        total_files = sum(len(files) for files in duplicates.values())
        total_groups = len(duplicates)

        total_size = 0
        wasted_size = 0
        for files in duplicates.values():
            if not files:
                continue
            try:
                file_size = Path(files[0]).stat().st_size
            except OSError:
                continue
            total_size += file_size * len(files)
            wasted_size += file_size * (len(files) - 1)

        return {
            "total_duplicate_groups": total_groups,
            "total_duplicate_files": total_files,
            "wasted_files": total_files - total_groups,
            "total_size_bytes": total_size,
            "wasted_size_bytes": wasted_size,
            "wasted_size_mb": round(wasted_size / (1024 * 1024), 2),
            "wasted_size_gb": round(wasted_size / (1024 * 1024 * 1024), 2),
        }


def run_scan(config: ScanConfig, logger: Optional[logging.Logger] = None) -> Dict[str, Any]:
    return DuplicateScanner.from_config(config, logger=logger).run(config)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python duplicate_scanner.py <directory> [filter]")
        sys.exit(1)

    scan_config = ScanConfig(
        path=sys.argv[1],
        filter=sys.argv[2] if len(sys.argv) > 2 else DEFAULT_FILTER,
    )
    try:
        result = run_scan(scan_config)
    except InvalidPathError as error:
        print(error)
        sys.exit(2)

    stats = result["stats"]
    print(f"Groups: {stats['total_duplicate_groups']}")
    print(f"Duplicate files: {stats['total_duplicate_files']}")
    print(f"Wasted space: {stats['wasted_size_mb']} MB")
    print(f"Report stored in: {result['report_file']}")
