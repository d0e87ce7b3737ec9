"""Drawing reader for loading DXF drawings.

This module provides the DrawingReader class for loading drawing files and
resolving entity handles into domain entity variants.
"""

from pathlib import Path

import ezdxf
from ezdxf.document import Drawing
from ezdxf.entities import DXFGraphic

from rebarfill.domain import BoundaryEntity
from rebarfill.exceptions import DrawingLoadError, EntityNotFoundError, InvalidHandleError
from rebarfill.io.converter import dxf_to_entity


def normalize_handle(external_id: str) -> str:
    """Normalize a hexadecimal entity handle.

    Args:
        external_id: Handle string, optionally prefixed with "0x"

    Returns:
        Upper-case handle without leading zeros, as stored by ezdxf

    Raises:
        InvalidHandleError: If external_id is not valid base-16
    """
    try:
        value = int(external_id.strip(), 16)
    except ValueError as e:
        raise InvalidHandleError(external_id) from e
    return f"{value:X}"


class DrawingReader:
    """Loads DXF drawings and resolves entities by handle.

    Example:
        reader = DrawingReader(Path("plan.dxf"))
        reader.load()
        entity = reader.get_entity("2F")
    """

    def __init__(self, drawing_path: Path) -> None:
        """Initialize the drawing reader.

        Args:
            drawing_path: Path to the DXF file
        """
        self._drawing_path = drawing_path
        self._doc: Drawing | None = None

    def load(self) -> None:
        """Load the drawing file.

        Raises:
            DrawingLoadError: If the file is missing or not a valid DXF drawing
        """
        if not self._drawing_path.exists():
            raise DrawingLoadError(str(self._drawing_path), "file not found")

        try:
            self._doc = ezdxf.readfile(str(self._drawing_path))
        except (OSError, ezdxf.DXFStructureError) as e:
            raise DrawingLoadError(str(self._drawing_path), str(e)) from e

    @property
    def document(self) -> Drawing:
        """Return the loaded ezdxf document.

        Raises:
            RuntimeError: If the drawing has not been loaded yet
        """
        if self._doc is None:
            raise RuntimeError("Drawing not loaded. Call load() first.")
        return self._doc

    @property
    def is_model_space_active(self) -> bool:
        """Return True if model space is the active workspace.

        The $TILEMODE header variable is 1 while model space is active and
        0 while a paper space layout is.
        """
        return int(self.document.header.get("$TILEMODE", 1)) == 1

    def get_entity(self, external_id: str) -> BoundaryEntity:
        """Resolve an entity by its hexadecimal handle.

        Args:
            external_id: Entity handle as a hex string

        Returns:
            Entity variant for boundary extraction

        Raises:
            InvalidHandleError: If the handle is not valid hex
            EntityNotFoundError: If no live graphical entity has this handle
            RuntimeError: If the drawing has not been loaded yet
        """
        handle = normalize_handle(external_id)
        entity = self.document.entitydb.get(handle)

        if entity is None or not entity.is_alive or not isinstance(entity, DXFGraphic):
            raise EntityNotFoundError(external_id)

        return dxf_to_entity(entity)

    def __enter__(self) -> "DrawingReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self._doc = None
