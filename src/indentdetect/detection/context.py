#!/usr/bin/env python3
"""
INDENTDETECT DETECTION CONTEXT
------------------------------
The record of one detection run. It is created by the DetectionPipeline
and filled in by the Collector, Inferencer and Exporter in that order.

Author: IndentDetect Team
Date: 2026-10-18
"""

from dataclasses import dataclass
from typing import Optional

from indentdetect.core.models import CollectionResult, IndentDescriptor, OutputFormat


@dataclass
class DetectionContext:
    default_tab_width: int                          # Fallback width for tab-only inputs
    output_format: OutputFormat = OutputFormat.GENERIC
    collection: Optional[CollectionResult] = None   # Set after sampling
    descriptor: Optional[IndentDescriptor] = None   # Set after inference
    output: str = ""                                # The rendered line
