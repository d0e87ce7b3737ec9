"""Drawing writer for persisting generated bars.

Bars are staged in a DrawingTransaction and only written into model space
when the transaction block exits without an exception, so a failed run never
leaves a subset of its bars in the drawing.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import structlog
from ezdxf.document import Drawing

from rebarfill.domain import Bar
from rebarfill.exceptions import DrawingSaveError

logger = structlog.get_logger(__name__)


class DrawingTransaction:
    """Collects bars to be written by a DrawingWriter."""

    def __init__(self) -> None:
        self._bars: list[Bar] = []

    def add_bar(self, bar: Bar) -> None:
        """Stage one bar for insertion."""
        self._bars.append(bar)

    @property
    def bars(self) -> list[Bar]:
        return list(self._bars)

    def __len__(self) -> int:
        return len(self._bars)


class DrawingWriter:
    """Writes bars into a drawing's model space.

    Example:
        writer = DrawingWriter(doc, Path("plan-rebar.dxf"))
        with writer.transaction() as tx:
            for bar in bars:
                tx.add_bar(bar)
    """

    def __init__(self, doc: Drawing, output_path: Path, layer: str = "REBAR") -> None:
        """Initialize the drawing writer.

        Args:
            doc: The ezdxf document to modify
            output_path: Path where the drawing will be saved
            layer: Layer receiving the bar lines
        """
        self._doc = doc
        self._output_path = output_path
        self._layer = layer

    @property
    def output_path(self) -> Path:
        return self._output_path

    @contextmanager
    def transaction(self) -> Iterator[DrawingTransaction]:
        """Open a transaction; commit on clean exit, discard on error.

        Yields:
            DrawingTransaction to stage bars in

        Raises:
            DrawingSaveError: If the drawing cannot be written on commit
        """
        tx = DrawingTransaction()
        try:
            yield tx
        except BaseException:
            logger.warning("Transaction aborted, discarding bars", pending=len(tx))
            raise
        self._commit(tx)

    def _commit(self, tx: DrawingTransaction) -> None:
        if self._layer not in self._doc.layers:
            self._doc.layers.add(self._layer)

        msp = self._doc.modelspace()
        added = [
            msp.add_line(bar.start.to_tuple(), bar.end.to_tuple(), dxfattribs={"layer": self._layer})
            for bar in tx.bars
        ]

        saved = False
        try:
            self._doc.saveas(str(self._output_path))
            saved = True
        except OSError as e:
            raise DrawingSaveError(str(self._output_path), str(e)) from e
        finally:
            if not saved:
                for line in added:
                    msp.delete_entity(line)

        logger.info("Transaction committed", bars=len(added), output=str(self._output_path))

    @staticmethod
    def get_output_path(input_path: Path, suffix: str = "-rebar") -> Path:
        """Generate the output path next to the input drawing.

        Converts: plan.dxf -> plan-rebar.dxf

        Args:
            input_path: Original drawing path
            suffix: Text inserted before the extension

        Returns:
            Path with suffix before the extension
        """
        return input_path.parent / f"{input_path.stem}{suffix}{input_path.suffix}"
