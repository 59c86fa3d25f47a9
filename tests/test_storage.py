"""
Tests for dictionary file reading and writing.
"""

import logging
import os

import pytest

from wordweave.engine.storage import DictionaryFileReader, DictionaryFileWriter
from wordweave.models import DictionaryFileError


def write_text(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


class TestDictionaryFileReader:
    """Tests for DictionaryFileReader."""

    def test_reads_pairs(self, dictionary_path):
        """Test reading one pair per line."""
        write_text(dictionary_path, "cat feline\nant insect\n")

        assert DictionaryFileReader(dictionary_path).read_all() == [
            ("cat", "feline"),
            ("ant", "insect"),
        ]

    def test_meaning_keeps_inner_spaces(self, dictionary_path):
        """Test everything after the word is the meaning."""
        write_text(dictionary_path, "emu   large flightless bird  \n")

        assert DictionaryFileReader(dictionary_path).read_all() == [
            ("emu", "large flightless bird")
        ]

    def test_skips_blank_lines(self, dictionary_path):
        write_text(dictionary_path, "\ncat feline\n   \n\ndog canine")

        pairs = DictionaryFileReader(dictionary_path).read_all()
        assert [w for w, _ in pairs] == ["cat", "dog"]

    def test_skips_word_without_meaning(self, dictionary_path, caplog):
        """Test malformed lines are skipped with a warning."""
        write_text(dictionary_path, "cat feline\norphan\ndog canine\n")
        reader = DictionaryFileReader(dictionary_path)

        with caplog.at_level(logging.WARNING):
            pairs = reader.read_all()

        assert [w for w, _ in pairs] == ["cat", "dog"]
        assert reader.skipped_lines == 1
        assert "line 2" in caplog.text

    def test_strict_mode_raises(self, dictionary_path):
        write_text(dictionary_path, "cat feline\norphan\n")

        with pytest.raises(DictionaryFileError) as exc_info:
            DictionaryFileReader(dictionary_path, strict=True).read_all()

        assert exc_info.value.line_number == 2

    def test_missing_file_is_empty(self, temp_dir):
        path = os.path.join(temp_dir, "absent.txt")
        assert DictionaryFileReader(path).read_all() == []

    def test_missing_file_not_ok(self, temp_dir):
        path = os.path.join(temp_dir, "absent.txt")
        with pytest.raises(DictionaryFileError):
            DictionaryFileReader(path, missing_ok=False).read_all()

    def test_undecodable_file(self, dictionary_path):
        with open(dictionary_path, "wb") as f:
            f.write(b"cat \xff\xfe\n")

        with pytest.raises(DictionaryFileError):
            DictionaryFileReader(dictionary_path).read_all()


class TestDictionaryFileWriter:
    """Tests for DictionaryFileWriter."""

    def test_writes_one_pair_per_line(self, dictionary_path):
        count = DictionaryFileWriter(dictionary_path).write(
            [("ant", "insect"), ("emu", "large bird")]
        )

        assert count == 2
        with open(dictionary_path, encoding="utf-8") as f:
            assert f.read() == "ant insect\nemu large bird\n"

    def test_overwrites_existing_file(self, dictionary_path):
        write_text(dictionary_path, "old entry\n")

        DictionaryFileWriter(dictionary_path).write([("new", "entry")])

        assert DictionaryFileReader(dictionary_path).read_all() == [("new", "entry")]

    def test_leaves_no_temp_files(self, temp_dir, dictionary_path):
        DictionaryFileWriter(dictionary_path).write([("a", "b")])
        assert os.listdir(temp_dir) == ["Dictionary.txt"]

    def test_failure_keeps_original(self, temp_dir, dictionary_path):
        """Test a failing source leaves the previous file untouched."""
        write_text(dictionary_path, "keep me\n")

        def broken_pairs():
            yield ("new", "entry")
            raise OSError("disk full")

        with pytest.raises(DictionaryFileError):
            DictionaryFileWriter(dictionary_path).write(broken_pairs())

        assert DictionaryFileReader(dictionary_path).read_all() == [("keep", "me")]
        assert os.listdir(temp_dir) == ["Dictionary.txt"]

    def test_missing_directory(self, temp_dir):
        path = os.path.join(temp_dir, "nope", "Dictionary.txt")
        with pytest.raises(DictionaryFileError):
            DictionaryFileWriter(path).write([("a", "b")])

    def test_round_trip(self, dictionary_path, sample_entries):
        DictionaryFileWriter(dictionary_path).write(sorted(sample_entries))
        assert DictionaryFileReader(dictionary_path).read_all() == sorted(sample_entries)
