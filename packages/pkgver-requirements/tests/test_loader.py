# SPDX-License-Identifier: MIT
"""Unit tests for requirements file loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pkgver_version import parse_version
from pkgver_requirements import (
    Diagnostic,
    RequirementsFileError,
    RequirementsNotAFileError,
    RequirementsNotFoundError,
    RequirementsReadError,
    parse_requirements_file,
    parse_requirements_text,
)


@pytest.fixture
def requirements_path(tmp_path: Path) -> Path:
    """Create a requirements.txt mixing valid and malformed lines."""
    path = tmp_path / "requirements.txt"
    path.write_text(
        "Pygments==2.11.2\n"
        "\n"
        "requests\n"
        "click>=8.1\n"
        "==1.0\n"
        "tomli<=2.0.1\n"
        "broken==not-a-version\n"
    )
    return path


class TestParseRequirementsFile:
    """Tests for parse_requirements_file function."""

    def test_valid_and_malformed_lines(self, requirements_path: Path):
        """Test that valid lines are kept and malformed lines are reported."""
        result = parse_requirements_file(requirements_path)

        assert [r.package for r in result.requirements] == ["Pygments", "click", "tomli"]
        assert [d.line_number for d in result.diagnostics] == [3, 5, 7]
        assert result.has_diagnostics is True

    def test_source_path(self, requirements_path: Path):
        """Test that the source path is recorded."""
        result = parse_requirements_file(str(requirements_path))
        assert result.source_path == requirements_path

    def test_diagnostic_messages(self, requirements_path: Path):
        """Test that diagnostics explain each failure."""
        result = parse_requirements_file(requirements_path)
        messages = [d.message for d in result.diagnostics]
        assert "operator" in messages[0]
        assert "package name" in messages[1]
        assert "Invalid version" in messages[2]

    def test_only_valid_lines(self, tmp_path: Path):
        """Test a clean file has no diagnostics."""
        path = tmp_path / "requirements.txt"
        path.write_text("a==1.0\nb>=2.0\n")
        result = parse_requirements_file(path)
        assert len(result) == 2
        assert result.has_diagnostics is False

    def test_empty_file(self, tmp_path: Path):
        """Test an empty file yields nothing."""
        path = tmp_path / "requirements.txt"
        path.write_text("")
        result = parse_requirements_file(path)
        assert result.requirements == ()
        assert result.diagnostics == ()

    def test_other_file_names_accepted(self, tmp_path: Path):
        """Test that the requirements.txt name is not enforced."""
        path = tmp_path / "deps.in"
        path.write_text("a==1.0\n")
        assert len(parse_requirements_file(path)) == 1

    def test_byte_order_mark(self, tmp_path: Path):
        """Test that a UTF-8 byte order mark is not part of the first package."""
        path = tmp_path / "requirements.txt"
        path.write_bytes("Pygments==2.11.2\nclick>=8.1\n".encode("utf-8-sig"))
        result = parse_requirements_file(path)
        assert [r.package for r in result] == ["Pygments", "click"]
        assert result.get("pygments") is not None

    def test_missing_file(self, tmp_path: Path):
        """Test that a missing path raises."""
        with pytest.raises(RequirementsNotFoundError):
            parse_requirements_file(tmp_path / "missing.txt")

    def test_directory(self, tmp_path: Path):
        """Test that a directory is rejected."""
        with pytest.raises(RequirementsNotAFileError):
            parse_requirements_file(tmp_path)

    def test_undecodable_file(self, tmp_path: Path):
        """Test that a non-UTF-8 file raises a read error."""
        path = tmp_path / "requirements.txt"
        path.write_bytes(b"a==1.0\n\xff\xfe\n")
        with pytest.raises(RequirementsReadError) as exc_info:
            parse_requirements_file(path)
        assert exc_info.value.path == path

    def test_file_errors_are_os_errors(self, tmp_path: Path):
        """Test that file errors can be caught as OSError."""
        with pytest.raises(OSError):
            parse_requirements_file(tmp_path / "missing.txt")
        assert issubclass(RequirementsReadError, RequirementsFileError)


class TestParseRequirementsText:
    """Tests for parse_requirements_text function."""

    def test_crlf_line_endings(self):
        """Test Windows line endings."""
        result = parse_requirements_text("a==1.0\r\nb==2.0\r\n")
        assert [r.package for r in result] == ["a", "b"]

    def test_blank_lines_skipped(self):
        """Test that whitespace-only lines are not diagnostics."""
        result = parse_requirements_text("\n   \n\ta==1.0\n\n")
        assert len(result) == 1
        assert result.diagnostics == ()

    def test_comments(self):
        """Test whole-line and inline comments."""
        result = parse_requirements_text(
            "# pinned for CI\n"
            "a==1.0  # security fix\n"
            "   # indented comment\n"
            "b==2.0#3\n"
        )
        assert [str(r) for r in result] == ["a==1.0"]
        assert result.diagnostics == (Diagnostic(4, result.diagnostics[0].message),)

    def test_line_numbers_count_skipped_lines(self):
        """Test that diagnostics use 1-based physical line numbers."""
        result = parse_requirements_text("\n\n# note\nbad\n")
        assert result.diagnostics[0].line_number == 4
        assert str(result.diagnostics[0]).startswith("line 4: ")

    def test_only_newlines_end_lines(self):
        """Test that form feeds and other separators do not start a new line."""
        result = parse_requirements_text("a==1.0\x0cb==2.0\nbad\n")
        assert [d.line_number for d in result.diagnostics] == [1, 2]

    def test_get_by_normalized_name(self):
        """Test lookup by package name."""
        result = parse_requirements_text("Foo_Bar==1.0\nbaz>=2\n")
        found = result.get("foo-bar")
        assert found is not None
        assert found.version == parse_version("1.0")
        assert result.get("missing") is None

    def test_logs_skipped_lines(self, caplog: pytest.LogCaptureFixture):
        """Test that skipped lines are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="pkgver_requirements.loader"):
            parse_requirements_text("bad\n", "reqs.txt")
        assert "Skipping line 1 of reqs.txt" in caplog.text
