"""Bar generation pipeline orchestration.

This module coordinates the full workflow for one invocation: load the
drawing, resolve the selected entity, extract its boundary, sweep bars and
persist them in a single transaction.

Key components:
- generate_bars: Pure geometry pipeline from entity variant to bars
- BarFillProcessor: Main orchestrator class including drawing I/O
"""

import time
from pathlib import Path

from rebarfill.config import RebarFillSettings
from rebarfill.core.extents import compute_extents
from rebarfill.core.extractor import BoundaryExtractor
from rebarfill.core.scanline import BarSink, ScanlineBarGenerator
from rebarfill.domain import BarFillResult, BoundaryEntity
from rebarfill.exceptions import (
    RebarFillError,
    SelectionStoreUnavailableError,
    WrongWorkspaceError,
)
from rebarfill.io import DrawingReader, DrawingWriter, SelectionStore, explode_dxf_entity
from rebarfill.utils import RunLogger, configure_logging


def generate_bars(
    entity: BoundaryEntity,
    extractor: BoundaryExtractor,
    generator: ScanlineBarGenerator,
    sink: BarSink | None = None,
) -> BarFillResult:
    """Run extraction, extents and the scan-line sweep for one entity.

    Args:
        entity: Entity variant enclosing the region
        extractor: Boundary extractor
        generator: Configured scan-line generator
        sink: Optional callable invoked once per bar

    Returns:
        BarFillResult tagged with the entity type and handle

    Raises:
        NoBoundaryFoundError: If the entity yields no boundary curves
    """
    primitives = extractor.extract(entity)
    extents = compute_extents(primitives)
    result = generator.generate(primitives, extents, sink=sink)
    result.entity_type = entity.dxftype
    result.handle = entity.handle
    return result


class BarFillProcessor:
    """Orchestrates bar generation for a selected drawing entity.

    Manages the complete workflow:
    1. Load the drawing and require model space
    2. Determine the entity handle (explicit or from the selection store)
    3. Resolve the entity and extract its boundary
    4. Sweep scan-lines and generate bars
    5. Write all bars in one transaction and save the drawing

    Example:
        settings = RebarFillSettings()
        processor = BarFillProcessor(settings)
        result = processor.process(
            drawing_path=Path("plan.dxf"),
            selection_path=Path("storage/clicks.json"),
        )
    """

    def __init__(self, config: RebarFillSettings, quiet: bool = True) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Settings containing scan, geometry and output config
            quiet: Suppress console logging
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.run_logger = RunLogger(self.logger)
        self.extractor = BoundaryExtractor(explode=explode_dxf_entity)
        self.generator = ScanlineBarGenerator(
            spacing=config.scan.spacing,
            margin=config.scan.margin,
            tolerance=config.geometry.point_tolerance,
        )

    def resolve_handle(self, selection_path: Path | None, handle: str | None) -> str:
        """Pick the entity handle for this run.

        An explicit handle wins; otherwise the last record of the selection
        store is used.

        Raises:
            SelectionStoreUnavailableError: If no store path is given or the
                store cannot be read
            SelectionStoreEmptyError: If the store has no records
            MissingIdentifierError: If the last record has no external id
        """
        if handle is not None:
            self.run_logger.log_selection(handle, source="argument")
            return handle

        if selection_path is None:
            raise SelectionStoreUnavailableError("<none>", "no selection store configured")

        external_id = SelectionStore(selection_path).last_external_id()
        self.run_logger.log_selection(external_id, source=str(selection_path))
        return external_id

    def process(
        self,
        drawing_path: Path,
        selection_path: Path | None = None,
        handle: str | None = None,
        output_path: Path | None = None,
        dry_run: bool = False,
    ) -> BarFillResult:
        """Generate bars for the selected entity of a drawing.

        Args:
            drawing_path: Path to the DXF drawing
            selection_path: Path to the selection store (used without handle)
            handle: Explicit entity handle, bypassing the selection store
            output_path: Path for the modified drawing (auto-generated if None)
            dry_run: Compute bars without writing the drawing

        Returns:
            BarFillResult with bars and aggregates

        Raises:
            RebarFillError: Any failure of the pipeline; nothing is written
        """
        stats = self.run_logger.stats
        stats.start_time = time.time()

        if output_path is None:
            output_path = DrawingWriter.get_output_path(drawing_path, self.config.output.suffix)

        self.logger.info(
            "Starting bar generation",
            input=str(drawing_path),
            output=str(output_path),
            spacing=self.config.scan.spacing,
            margin=self.config.scan.margin,
        )

        try:
            reader = DrawingReader(drawing_path)
            reader.load()

            if not reader.is_model_space_active:
                raise WrongWorkspaceError(str(drawing_path))

            external_id = self.resolve_handle(selection_path, handle)
            entity = reader.get_entity(external_id)
            self.run_logger.log_entity(entity.dxftype, entity.handle)

            if dry_run:
                result = generate_bars(entity, self.extractor, self.generator)
            else:
                writer = DrawingWriter(reader.document, output_path, layer=self.config.output.layer)
                with writer.transaction() as tx:
                    result = generate_bars(entity, self.extractor, self.generator, sink=tx.add_bar)
        except RebarFillError as e:
            self.run_logger.log_failure(e)
            raise

        self.run_logger.log_bars(result.scan_line_count, result.bar_count, result.total_length)
        stats.end_time = time.time()
        return result
