"""
Unit tests for the file driver and its error reporting.
"""

import pytest

from src.file_reader import (
    DocumentError,
    DocumentNotFoundError,
    DocumentReadError,
    read_document,
    stem_file,
)


class TestReadDocument:

    def test_reads_utf8_text(self, sample_text_file):
        assert read_document(sample_text_file).startswith("Cats, ponies")

    def test_accepts_str_path(self, sample_text_file):
        assert read_document(str(sample_text_file)) == read_document(sample_text_file)

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.txt"

        with pytest.raises(DocumentNotFoundError) as exc_info:
            read_document(path)

        assert str(exc_info.value) == f"File {path} Not Found"
        assert exc_info.value.filename == str(path)

    def test_directory_is_read_error(self, tmp_path):
        with pytest.raises(DocumentReadError) as exc_info:
            read_document(tmp_path)

        assert str(exc_info.value) == f"Error In Reading {tmp_path}"

    def test_file_too_large(self, tmp_path):
        path = tmp_path / "big.txt"
        path.write_text("x" * 100)

        with pytest.raises(DocumentReadError) as exc_info:
            read_document(path, max_size=10)

        assert "too large" in exc_info.value.reason

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(DocumentReadError) as exc_info:
            read_document(path)

        assert "utf-8" in exc_info.value.reason

    def test_other_encoding(self, tmp_path):
        path = tmp_path / "latin.txt"
        path.write_bytes("café".encode("latin-1"))

        assert read_document(path, encoding="latin-1") == "café"

    def test_unknown_encoding(self, sample_text_file):
        with pytest.raises(DocumentReadError) as exc_info:
            read_document(sample_text_file, encoding="no-such-codec")

        assert "Unknown encoding" in exc_info.value.reason

    def test_errors_share_base_class(self):
        assert issubclass(DocumentNotFoundError, DocumentError)
        assert issubclass(DocumentReadError, DocumentError)


class TestStemFile:

    def test_stems_whole_file(self, sample_text_file):
        assert stem_file(sample_text_file) == "cat, poni & cares!\nhop 42 time.\n"

    def test_canonical_variant(self, sample_text_file):
        assert stem_file(sample_text_file, verb_pass=False) == "cat, poni & caress!\nhop 42 time.\n"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("")

        assert stem_file(path) == ""
