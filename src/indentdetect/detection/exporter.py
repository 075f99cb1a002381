#!/usr/bin/env python3
"""
INDENTDETECT EXPORTER - Output Rendering
----------------------------------------
Author: IndentDetect Team
Date: 2026-10-18
"""

from typing import Tuple

from indentdetect.core.models import IndentDescriptor, IndentKind, OutputFormat


class IndentExporter:
    """
    Renders an IndentDescriptor as a single line of text.
    """

    def export(self, descriptor: IndentDescriptor, output_format: OutputFormat) -> str:
        # A descriptor with both slots empty means an upstream stage let an
        # unindented input through.
        assert not (descriptor.tab_width == 0 and descriptor.space_unit == 0)

        if output_format is OutputFormat.VIM:
            return self._vim(descriptor)
        return self._generic(descriptor)

    def _generic(self, descriptor: IndentDescriptor) -> str:
        kind = descriptor.kind
        if kind is IndentKind.TAB:
            count = str(descriptor.tab_width)
        elif kind is IndentKind.SPACE:
            count = str(descriptor.space_unit)
        else:
            count = f"{descriptor.tab_width} {descriptor.space_unit}"
        return f"{kind.value} {count}"

    def vim_settings(self, descriptor: IndentDescriptor) -> Tuple[bool, int, int]:
        """Returns (expandtab, tabstop, shiftwidth)."""
        kind = descriptor.kind
        if kind is IndentKind.TAB:
            return False, descriptor.tab_width, descriptor.tab_width
        if kind is IndentKind.SPACE:
            return True, descriptor.space_unit, descriptor.space_unit
        return False, descriptor.tab_width, descriptor.space_unit

    def _vim(self, descriptor: IndentDescriptor) -> str:
        expandtab, tabstop, shiftwidth = self.vim_settings(descriptor)
        return (
            f"set {'' if expandtab else 'no'}expandtab "
            f"tabstop={tabstop} shiftwidth={shiftwidth}"
        )
