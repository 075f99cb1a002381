#!/usr/bin/env python3
"""
INDENTDETECT INFERENCER - Unit Reduction
----------------------------------------
Reduces the observed space runs to one indent unit (their GCD) and derives
the tab width from the tabs-observed flag.

Author: IndentDetect Team
Date: 2026-10-18
"""

import logging
import math
from functools import reduce
from typing import Iterable, Tuple

from indentdetect.core.models import CollectionResult, IndentDescriptor

logger = logging.getLogger("indentdetect.inferencer")


def space_unit_of(space_runs: Iterable[int]) -> Tuple[int, int]:
    """
    Returns (unit, longest run). The unit is the greatest common divisor of
    all runs; gcd(0, y) == y, so an empty input yields 0 ('no unit').
    """
    runs = list(space_runs)
    unit = reduce(math.gcd, runs, 0)
    return unit, max(runs, default=0)


class UnitInferencer:
    """
    Turns a CollectionResult into an IndentDescriptor.

    The caller must not pass a result with neither tabs nor space runs;
    the pipeline rejects that case with NoIndentationError first.
    """

    def infer(self, collection: CollectionResult, default_tab_width: int) -> IndentDescriptor:
        unit, max_run = space_unit_of(collection.space_runs)

        if collection.tabs_observed and unit == 0:
            tab_width = default_tab_width
        elif collection.tabs_observed:
            # Tabs mixed with spaces: approximates one tab as one unit wider
            # than the deepest space run. Unreliable, but the output of
            # existing editor integrations depends on it.
            tab_width = max_run + unit
            logger.debug(f"Mixed indentation, guessed tab width {tab_width} from max run {max_run}")
        else:
            tab_width = 0

        return IndentDescriptor(tab_width=tab_width, space_unit=unit)
