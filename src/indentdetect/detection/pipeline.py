#!/usr/bin/env python3
"""
INDENTDETECT PIPELINE - Stage Coordinator
-----------------------------------------
Runs the detection stages in a fixed order over one line source:

    lines -> SampleCollector -> UnitInferencer -> IndentExporter -> text

Each stage consumes what the previous one produced and nothing is shared
between runs, so running the pipeline twice on the same input gives the
same output.

Author: IndentDetect Team
Date: 2026-10-18
"""

from typing import Iterable

from indentdetect.core.errors import NoIndentationError
from indentdetect.core.models import OutputFormat
from indentdetect.detection.collector import SampleCollector
from indentdetect.detection.context import DetectionContext
from indentdetect.detection.exporter import IndentExporter
from indentdetect.detection.inferencer import UnitInferencer


class DetectionPipeline:
    """
    The Orchestrator: samples, infers and renders in a strictly defined order.
    """

    def __init__(self, default_tab_width: int, output_format: OutputFormat = OutputFormat.GENERIC):
        """
        Args:
            default_tab_width: Tab width reported when only tabs are seen.
                Must already be validated as positive.
            output_format: Rendering mode for the final line.
        """
        self.default_tab_width = default_tab_width
        self.output_format = output_format
        self.collector = SampleCollector()
        self.inferencer = UnitInferencer()
        self.exporter = IndentExporter()

    def run(self, lines: Iterable[str]) -> DetectionContext:
        """
        Raises:
            LineSourceError: the line source failed during sampling.
            NoIndentationError: no sampled line had leading tabs or spaces.
        """
        context = DetectionContext(
            default_tab_width=self.default_tab_width,
            output_format=self.output_format,
        )

        # --- PHASE 1: SAMPLING ---
        context.collection = self.collector.collect(lines)
        if context.collection.is_empty:
            raise NoIndentationError()

        # --- PHASE 2: INFERENCE ---
        context.descriptor = self.inferencer.infer(context.collection, self.default_tab_width)

        # --- PHASE 3: RENDERING ---
        context.output = self.exporter.export(context.descriptor, self.output_format)
        return context
