#!/usr/bin/env python3
"""
INDENTDETECT CONFIG
-------------------
Validated run settings. Raw strings from the command line are parsed here
so that nothing invalid ever reaches the detection pipeline.

Author: IndentDetect Team
Date: 2026-10-18
"""

from dataclasses import dataclass

from indentdetect.core.errors import ConfigError
from indentdetect.core.models import OutputFormat

MAX_TAB_WIDTH = 2**32 - 1


@dataclass(frozen=True)
class DetectConfig:
    output_format: OutputFormat = OutputFormat.GENERIC
    default_tab_width: int = 8

    def __post_init__(self):
        if not isinstance(self.output_format, OutputFormat):
            raise ConfigError("Invalid output format")
        if self.default_tab_width == 0:
            raise ConfigError("Default tab width can't be zero")
        if not 0 < self.default_tab_width <= MAX_TAB_WIDTH:
            raise ConfigError("Invalid default tab width")

    @classmethod
    def from_strings(cls, output_format: str, default_tab_width: str) -> "DetectConfig":
        """
        Builds a config from the FORMAT and DEFTABWIDTH arguments.

        Raises:
            ConfigError: unknown format, a width that is not an unsigned
                integer, or a width of zero.
        """
        try:
            fmt = OutputFormat(output_format)
        except ValueError:
            raise ConfigError("Invalid output format")

        # Unsigned 32-bit decimal with an optional '+'; "-1", " 4", "4.0" are rejected
        digits = default_tab_width[1:] if default_tab_width.startswith("+") else default_tab_width
        if not digits.isascii() or not digits.isdigit():
            raise ConfigError("Invalid default tab width")
        width = int(digits)
        if width > MAX_TAB_WIDTH:
            raise ConfigError("Invalid default tab width")
        if width == 0:
            raise ConfigError("Default tab width can't be zero")

        return cls(output_format=fmt, default_tab_width=width)
