"""Drawing I/O layer for rebarfill.

This module handles reading and writing DXF drawings using ezdxf and reading
the selection store. It provides a clean abstraction layer between ezdxf and
the domain models.

Key responsibilities:
- Load DXF drawings and check the active workspace
- Resolve entity handles and convert entities to domain variants
- Explode generic entities into curve primitives
- Write generated bars transactionally
- Read the most recent selection record

Key classes:
- DrawingReader: Load drawings and resolve entities
- DrawingWriter: Save generated bars
- SelectionStore: Read selection records
"""

from rebarfill.io.converter import explode_dxf_entity
from rebarfill.io.reader import DrawingReader, normalize_handle
from rebarfill.io.selection import SelectionStore
from rebarfill.io.writer import DrawingTransaction, DrawingWriter

__all__ = [
    "DrawingReader",
    "DrawingTransaction",
    "DrawingWriter",
    "SelectionStore",
    "explode_dxf_entity",
    "normalize_handle",
]
