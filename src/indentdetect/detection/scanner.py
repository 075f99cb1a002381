#!/usr/bin/env python3
"""
INDENTDETECT SCANNER - Leading Whitespace Measurement
-----------------------------------------------------
Measures the indentation of a single line as a tab run followed by a
space run. Whatever comes after those two runs is not measured, so a
line such as " \t" counts as one space and nothing else.

Author: IndentDetect Team
Date: 2026-10-18
"""

import re

from indentdetect.core.models import IndentSample


class IndentScanner:
    """
    Splits the leading whitespace of a line into its tab and space runs.
    """

    # Group 1: Tab run, Group 2: Space run, Group 3: Tab right after the spaces
    INDENT_PATTERN = re.compile(r'^(\t*)( *)(\t?)')

    def scan_line(self, line: str) -> IndentSample:
        """Returns the IndentSample for one line. Never fails."""
        tabs, spaces, stray = self.INDENT_PATTERN.match(line).groups()
        return IndentSample(
            tabs=len(tabs),
            spaces=len(spaces),
            stray_tab=bool(spaces and stray),
        )

    @staticmethod
    def qualifies(line: str) -> bool:
        """Only lines opening with a tab or a space are sampled."""
        return line[:1] in ('\t', ' ')
