#!/usr/bin/env python3
"""
INDENTDETECT ENGINE & CONFIG SUITE
----------------------------------
File-level edge cases for DetectionEngine:
1. Missing files and directories
2. Empty files
3. Invalid UTF-8 (decoding faults)
4. CRLF line endings
5. Config validation of raw CLI strings

Author: IndentDetect Team
Date: 2026-10-18
"""

import io

import pytest

from indentdetect.core.config import DetectConfig
from indentdetect.core.engine import DetectionEngine, decode_lines
from indentdetect.core.errors import ConfigError
from indentdetect.core.models import OutputFormat


@pytest.fixture
def engine():
    return DetectionEngine(DetectConfig(OutputFormat.GENERIC, 8))


def test_detect_spaces_file(engine, tmp_path):
    target = tmp_path / "module.py"
    target.write_text("import os\n\ndef f():\n    if x:\n        return 1\n")
    report = engine.detect_file(target)
    assert report["success"] is True
    assert report["output"] == "space 4"
    assert report["kind"] == "space"
    assert report["sampled_lines"] == 2


def test_detect_tabs_file(tmp_path):
    target = tmp_path / "main.c"
    target.write_text("int main() {\n\treturn 0;\n}\n")
    report = DetectionEngine(DetectConfig.from_strings("vim", "4")).detect_file(target)
    assert report["output"] == "set noexpandtab tabstop=4 shiftwidth=4"


def test_empty_file_reports_no_indentation(engine, tmp_path):
    target = tmp_path / "empty.txt"
    target.write_text("")
    report = engine.detect_file(target)
    assert report["success"] is False
    assert report["status"] == "NO_INDENTATION"
    assert report["error"] == "No indentation"


def test_missing_file_is_an_io_error(engine, tmp_path):
    report = engine.detect_file(tmp_path / "nope.txt")
    assert report["success"] is False
    assert report["status"] == "IO_ERROR"
    assert "nope.txt" in report["error"]


def test_directory_is_an_io_error(engine, tmp_path):
    report = engine.detect_file(tmp_path)
    assert report["success"] is False
    assert report["status"] == "IO_ERROR"


def test_invalid_utf8_in_sampled_region_fails(engine, tmp_path):
    target = tmp_path / "binary.txt"
    target.write_bytes(b"    ok\n  \xff\xfe bad\n")
    report = engine.detect_file(target)
    assert report["success"] is False
    assert report["status"] == "IO_ERROR"


def test_crlf_line_endings(engine, tmp_path):
    target = tmp_path / "dos.txt"
    target.write_bytes(b"a\r\n  b\r\n    c\r\n")
    assert engine.detect_file(target)["output"] == "space 2"


def test_decode_lines_strips_terminators():
    stream = io.BytesIO(b"a\r\n\tb\nc")
    assert list(decode_lines(stream)) == ["a", "\tb", "c"]


def test_detect_lines_reports_mixed_details(engine):
    report = engine.detect_lines(["\t\t  ", "\t    "])
    assert report["output"] == "tab+space 6 2"
    assert (report["tab_width"], report["space_unit"]) == (6, 2)
    assert report["tabs_observed"] is True
    assert report["space_runs"] == [2, 4]


# --- CONFIG ---

@pytest.mark.parametrize("fmt, width, expected", [
    ("generic", "8", (OutputFormat.GENERIC, 8)),
    ("vim", "2", (OutputFormat.VIM, 2)),
    ("vim", "+4", (OutputFormat.VIM, 4)),
])
def test_config_from_strings(fmt, width, expected):
    config = DetectConfig.from_strings(fmt, width)
    assert (config.output_format, config.default_tab_width) == expected


@pytest.mark.parametrize("fmt, width, message", [
    ("emacs", "4", "Invalid output format"),
    ("VIM", "4", "Invalid output format"),
    ("vim", "four", "Invalid default tab width"),
    ("vim", "-1", "Invalid default tab width"),
    ("vim", "", "Invalid default tab width"),
    ("vim", "4294967296", "Invalid default tab width"),
    ("vim", "0", "Default tab width can't be zero"),
])
def test_config_rejects_bad_values(fmt, width, message):
    with pytest.raises(ConfigError, match=message):
        DetectConfig.from_strings(fmt, width)


def test_dash_reads_standard_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"a\n\tb\n")))
    report = DetectionEngine(DetectConfig(OutputFormat.GENERIC, 4)).detect_file("-")
    assert report["success"] is True
    assert report["file_path"] == "<stdin>"
    assert report["output"] == "tab 4"
