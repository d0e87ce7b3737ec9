"""Core processing algorithms for rebarfill.

This module contains the core algorithms for:

- Boundary extraction (entity variants to curve primitives)
- Extents calculation
- Scan-line intersection
- Even-odd bar generation and reporting

The geometry services are stateless and free of drawing I/O; only the
processor touches the drawing.

Key functions:
- compute_extents: Merge primitive bounding boxes
- intersect: Hits between a scan-line and a primitive
- coalesce_hits: Merge hits sharing a location
- format_report: Human-readable run summary
- generate_bars: Extraction through sweep for one entity

Key classes:
- BoundaryExtractor: Converts entity variants to primitives
- ScanlineBarGenerator: Sweeps scan-lines and pairs hits into bars
- BarFillProcessor: End-to-end pipeline with drawing I/O
"""

from rebarfill.core.extents import compute_extents
from rebarfill.core.extractor import BoundaryExtractor
from rebarfill.core.intersection import intersect
from rebarfill.core.processor import BarFillProcessor, generate_bars
from rebarfill.core.report import format_report
from rebarfill.core.scanline import ScanlineBarGenerator, coalesce_hits, scan_line_count

__all__ = [
    # Processor classes
    "BarFillProcessor",
    # Extraction
    "BoundaryExtractor",
    # Sweep
    "ScanlineBarGenerator",
    "coalesce_hits",
    "compute_extents",
    "format_report",
    "generate_bars",
    "intersect",
    "scan_line_count",
]
