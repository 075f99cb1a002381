#!/usr/bin/env python3
"""
INDENTDETECT CORE MODELS
------------------------
Defines the data structures handed between the detection stages.
Each model is owned by the stage that builds it until it is passed forward.

Author: IndentDetect Team
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class OutputFormat(Enum):
    """The two recognised rendering modes."""
    GENERIC = "generic"
    VIM = "vim"


class IndentKind(Enum):
    TAB = "tab"
    SPACE = "space"
    TAB_SPACE = "tab+space"


@dataclass(frozen=True)
class IndentSample:
    """
    Leading whitespace of a single line: a tab run followed by a space run.
    """
    tabs: int = 0               # Length of the leading tab run
    spaces: int = 0             # Length of the space run right after the tabs
    stray_tab: bool = False     # A tab follows the space run (not measured)


@dataclass
class CollectionResult:
    """
    Everything the Sample Collector learned from one pass over the input.
    space_runs never holds a zero; lines without spaces are not recorded.
    """
    tabs_observed: bool = False
    space_runs: List[int] = field(default_factory=list)
    sampled_lines: int = 0      # Qualifying (indented) lines that were scanned
    stray_tab_lines: int = 0    # Diagnostics only, never affects inference

    @property
    def is_empty(self) -> bool:
        """True when neither tabs nor spaces were seen."""
        return not self.tabs_observed and not self.space_runs


@dataclass(frozen=True)
class IndentDescriptor:
    """
    The inferred convention. A value of 0 in either slot means
    'not applicable', never a zero width.
    """
    tab_width: int
    space_unit: int

    @property
    def kind(self) -> IndentKind:
        if self.space_unit == 0:
            return IndentKind.TAB
        if self.tab_width == 0:
            return IndentKind.SPACE
        return IndentKind.TAB_SPACE

    def as_tuple(self):
        return self.tab_width, self.space_unit
