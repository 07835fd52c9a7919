"""Tests for directory traversal with name and folder filters."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from conftest import write_files
from duplicate_scanner import FileEntry, InvalidPathError, normalize_excluded_folders


def _names(entries):
    return sorted(Path(entry.path).name for entry in entries)


class TestWalkFiles:
    def test_recurses_into_subdirectories(self, scanner, tmp_path):
        write_files(tmp_path, {"top.txt": b"1", "a/mid.txt": b"2", "a/b/deep.txt": b"3"})

        entries = list(scanner.walk_files(tmp_path))

        assert _names(entries) == ["deep.txt", "mid.txt", "top.txt"]

    def test_entries_carry_absolute_path_and_directory(self, scanner, tmp_path):
        write_files(tmp_path, {"a/file.bin": b"x"})

        (entry,) = list(scanner.walk_files(tmp_path))

        assert isinstance(entry, FileEntry)
        assert os.path.isabs(entry.path)
        assert entry.directory == os.path.dirname(entry.path)
        assert Path(entry.directory).name == "a"

    def test_name_pattern_applies_to_file_name_only(self, scanner, tmp_path):
        write_files(
            tmp_path,
            {"keep.txt": b"1", "skip.log": b"2", "logs.txt/inner.log": b"3", "x/y.txt": b"4"},
        )

        entries = list(scanner.walk_files(tmp_path, "*.txt"))

        assert _names(entries) == ["keep.txt", "y.txt"]

    def test_excluded_folder_files_are_dropped(self, scanner, tmp_path):
        write_files(
            tmp_path,
            {"keep/a.txt": b"1", "skip/b.txt": b"2", "skip/deeper/c.txt": b"3"},
        )
        excluded = normalize_excluded_folders([str(tmp_path / "skip")])

        entries = list(scanner.walk_files(tmp_path, "*", excluded))

        assert _names(entries) == ["a.txt"]

    def test_excluded_folder_is_still_visited(self, scanner, tmp_path, monkeypatch):
        write_files(tmp_path, {"skip/deeper/c.txt": b"3"})
        excluded = normalize_excluded_folders([str(tmp_path / "skip")])
        visited = []
        real_walk = os.walk

        def recording_walk(top, **kwargs):
            for item in real_walk(top, **kwargs):
                visited.append(item[0])
                yield item

        monkeypatch.setattr("duplicate_scanner.os.walk", recording_walk)

        assert list(scanner.walk_files(tmp_path, "*", excluded)) == []
        assert str(tmp_path / "skip" / "deeper") in visited

    def test_missing_root_fails_before_iteration(self, scanner, tmp_path):
        with pytest.raises(InvalidPathError) as excinfo:
            scanner.walk_files(tmp_path / "missing")

        assert excinfo.value.path.endswith("missing")

    def test_file_as_root_is_rejected(self, scanner, tmp_path):
        target = tmp_path / "plain.txt"
        target.write_text("x")

        with pytest.raises(InvalidPathError):
            scanner.walk_files(target)

    def test_empty_directory(self, scanner, tmp_path):
        assert list(scanner.walk_files(tmp_path)) == []

    def test_unreadable_entry_is_skipped_and_logged(self, scanner, tmp_path, monkeypatch, caplog):
        write_files(tmp_path, {"good/a.txt": b"1"})
        good_dir = str(tmp_path / "good")

        def walk_with_error(top, onerror=None, **kwargs):
            onerror(PermissionError(13, "Permission denied", str(tmp_path / "locked")))
            yield good_dir, [], ["a.txt"]

        monkeypatch.setattr("duplicate_scanner.os.walk", walk_with_error)

        with caplog.at_level(logging.DEBUG, logger="duplicate_scanner"):
            entries = list(scanner.walk_files(tmp_path))

        assert entries == [FileEntry(path=os.path.join(good_dir, "a.txt"), directory=good_dir)]
        errors = [
            record.log_payload
            for record in caplog.records
            if getattr(record, "log_payload", {}).get("event") == "walk_entry_error"
        ]
        assert errors and errors[0]["file"] == str(tmp_path / "locked")
