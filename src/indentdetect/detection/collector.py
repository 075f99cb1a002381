#!/usr/bin/env python3
"""
INDENTDETECT COLLECTOR - Bounded Sampling
-----------------------------------------
Pulls lines from a line source and scans the first SAMPLE_CAP indented
ones. Unindented lines are skipped without using up the budget, and no
line past the cap is ever read from the source.

Author: IndentDetect Team
Date: 2026-10-18
"""

import logging
from typing import Iterable, Optional

from indentdetect.core.errors import LineSourceError
from indentdetect.core.models import CollectionResult
from indentdetect.detection.scanner import IndentScanner

logger = logging.getLogger("indentdetect.collector")

# Maximum number of indented lines inspected per input
SAMPLE_CAP = 100


class SampleCollector:
    """
    Accumulates the tabs-observed flag and the observed space runs.
    All state lives in the CollectionResult built by a single collect() call.
    """

    def __init__(self, scanner: Optional[IndentScanner] = None):
        self.scanner = scanner or IndentScanner()

    def collect(self, lines: Iterable[str]) -> CollectionResult:
        """
        Samples the line source.

        Raises:
            LineSourceError: the source failed while being read. Sampling
                stops at the failing line.
        """
        result = CollectionResult()
        source = iter(lines)

        while result.sampled_lines < SAMPLE_CAP:
            try:
                line = next(source)
            except StopIteration:
                break
            except (OSError, UnicodeError) as e:
                logger.debug(f"Line source failed after {result.sampled_lines} samples: {e}")
                raise LineSourceError(str(e)) from e

            if not self.scanner.qualifies(line):
                continue

            sample = self.scanner.scan_line(line)
            result.sampled_lines += 1
            if sample.tabs > 0:
                result.tabs_observed = True
            if sample.spaces > 0:
                result.space_runs.append(sample.spaces)
            if sample.stray_tab:
                result.stray_tab_lines += 1
                logger.debug(f"Tab after space run not measured: {line.rstrip()!r}")

        logger.debug(
            f"Sampled {result.sampled_lines} lines: tabs={result.tabs_observed}, "
            f"space runs={len(result.space_runs)}"
        )
        return result
