#!/usr/bin/env python3
"""
INDENTDETECT ENGINE - The Orchestrator
--------------------------------------
Opens the line source for a file (or standard input), runs the detection
pipeline over it and reports the outcome as a plain result record.
Failures are returned as values; callers decide how to surface them.

Author: IndentDetect Team
Date: 2026-10-18
"""

import logging
import sys
from pathlib import Path
from typing import Any, BinaryIO, Dict, Iterable, Iterator, Union

from indentdetect.core.config import DetectConfig
from indentdetect.core.errors import IndentDetectError, LineSourceError
from indentdetect.detection.pipeline import DetectionPipeline

logger = logging.getLogger("indentdetect.engine")

STDIN_PATH = "-"


def decode_lines(handle: BinaryIO, encoding: str = "utf-8") -> Iterator[str]:
    """
    Yields the lines of a binary stream, split on '\\n' only and with the
    line terminator ('\\n' or '\\r\\n') removed. Each line is decoded
    strictly, so invalid bytes surface as an error on the line that holds them.
    """
    for raw in handle:
        if raw.endswith(b"\n"):
            raw = raw[:-2] if raw.endswith(b"\r\n") else raw[:-1]
        yield raw.decode(encoding)


class DetectionEngine:
    """
    Principal entry point for detecting the indentation of files.
    """

    def __init__(self, config: DetectConfig):
        self.config = config
        self.pipeline = DetectionPipeline(
            default_tab_width=config.default_tab_width,
            output_format=config.output_format,
        )

    def detect_lines(self, lines: Iterable[str], source: str = "<lines>") -> Dict[str, Any]:
        """Runs detection over an already opened line source."""
        try:
            context = self.pipeline.run(lines)
        except IndentDetectError as e:
            logger.debug(f"Detection failed for {source}: {e}")
            return self._error(source, e.status, str(e))

        collection = context.collection
        descriptor = context.descriptor
        logger.info(f"{source}: {context.output}")
        return {
            "file_path": source,
            "success": True,
            "status": "DETECTED",
            "output": context.output,
            "kind": descriptor.kind.value,
            "tab_width": descriptor.tab_width,
            "space_unit": descriptor.space_unit,
            "tabs_observed": collection.tabs_observed,
            "space_runs": list(collection.space_runs),
            "sampled_lines": collection.sampled_lines,
            "stray_tab_lines": collection.stray_tab_lines,
        }

    def detect_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Detects the indentation of a file. '-' reads standard input.
        The file is closed before this returns, whatever the outcome.
        """
        source = str(path)
        if source == STDIN_PATH:
            return self.detect_lines(decode_lines(sys.stdin.buffer), source="<stdin>")

        try:
            handle = open(Path(path), "rb")
        except OSError as e:
            logger.debug(f"Unable to open {source}: {e}")
            return self._error(source, LineSourceError.status, str(e))

        with handle:
            return self.detect_lines(decode_lines(handle), source=source)

    def _error(self, path: str, status: str, error: str) -> Dict[str, Any]:
        return {
            "file_path": path, "success": False, "status": status,
            "error": error, "output": None,
        }
