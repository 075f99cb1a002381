#!/usr/bin/env python3
"""
INDENTDETECT ERRORS
-------------------
Typed failures raised by the detection stages. The engine turns each of
them into a report value; nothing here is retried.

Author: IndentDetect Team
Date: 2026-10-18
"""


class IndentDetectError(Exception):
    """Base class for every failure the tool reports to the user."""
    status = "FAILED"


class LineSourceError(IndentDetectError):
    """The underlying line source failed while being read."""
    status = "IO_ERROR"


class NoIndentationError(IndentDetectError):
    """Sampling found neither tabs nor spaces at the start of any line."""
    status = "NO_INDENTATION"

    def __init__(self, message: str = "No indentation"):
        super().__init__(message)


class ConfigError(IndentDetectError):
    """Invalid output mode or default tab width."""
    status = "INVALID_CONFIG"
