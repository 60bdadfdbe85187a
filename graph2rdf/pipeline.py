"""
Export Pipeline - Page graph to RDF file.

Orchestrates the entire flow: property pages → property catalog →
page selection → triple generation → term typing → serialization.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from graph2rdf.config.settings import Settings, get_settings
from graph2rdf.loaders import GraphDatabase, load_graph
from graph2rdf.selectors import (
    AdditionalPagesSelector,
    BaseSelector,
    ClassInstancesSelector,
    ClassSelector,
    PropertySelector,
)
from graph2rdf.triples import (
    QuadWriter,
    Triple,
    TripleGenerator,
    build_property_catalog,
    to_quad,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXPORT RESULT
# =============================================================================


@dataclass
class ExportResult:
    """Result from a complete export run."""

    # Timing
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None
    duration_seconds: float = 0.0

    # Selection
    pages_loaded: int = 0
    pages_by_selector: dict[str, int] = field(default_factory=dict)
    triples_by_selector: dict[str, int] = field(default_factory=dict)
    catalog_size: int = 0

    # Triples
    triples_generated: int = 0
    triples_written: int = 0

    # Output
    output_file: str | None = None
    format: str | None = None

    def finalize(self) -> None:
        """Mark the export as complete and calculate duration."""
        self.completed_at = datetime.now()
        self.duration_seconds = (self.completed_at - self.started_at).total_seconds()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "timing": {
                "started_at": self.started_at.isoformat(),
                "completed_at": self.completed_at.isoformat() if self.completed_at else None,
                "duration_seconds": round(self.duration_seconds, 2),
            },
            "pages": {
                "loaded": self.pages_loaded,
                "by_selector": self.pages_by_selector,
            },
            "catalog": {
                "entries": self.catalog_size,
            },
            "triples": {
                "generated": self.triples_generated,
                "written": self.triples_written,
                "by_selector": self.triples_by_selector,
            },
            "output": {
                "file": self.output_file,
                "format": self.format,
            },
        }

    def print_summary(self) -> None:
        """Print a summary of the export run."""
        print("\n" + "=" * 60)
        print("📊 EXPORT SUMMARY")
        print("=" * 60)

        print(f"\n⏱️  Duration: {self.duration_seconds:.2f}s")
        print(f"📁 Pages in graph: {self.pages_loaded}")
        for selector, count in self.pages_by_selector.items():
            triples = self.triples_by_selector.get(selector, 0)
            print(f"   • {selector}: {count} pages, {triples} triples")

        print(f"\n📖 Property catalog: {self.catalog_size} entries")
        print(f"🔗 Triples: {self.triples_generated} generated, {self.triples_written} written")

        if self.output_file:
            print(f"\n📤 Output: {self.output_file} ({self.format})")

        print("=" * 60)


# =============================================================================
# PIPELINE
# =============================================================================


class ExportPipeline:
    """
    graph2rdf Pipeline

    Orchestrates:
    1. Selecting property pages and building the property catalog
    2. Selecting additional, class, property and class-instance pages
    3. Generating triples with the completed catalog
    4. Typing triple terms and serializing them

    Usage:
        pipeline = ExportPipeline(settings)
        result = pipeline.execute("graph.ttl")
        result.print_summary()
    """

    def __init__(
        self,
        settings: Settings | None = None,
        db: GraphDatabase | None = None,
        graph_path: str | Path | None = None,
    ):
        """
        Initialize the pipeline.

        Args:
            settings: Configuration settings (uses default if None)
            db: Graph database (loaded from graph_path if None)
            graph_path: Override path of the graph to load
        """
        self.settings = settings or get_settings()
        self.config = self.settings.graph
        self.graph_path = Path(graph_path) if graph_path else self.settings.paths.graph_dir

        self._db = db
        self.selectors: list[BaseSelector] = [
            AdditionalPagesSelector(),
            ClassSelector(),
            PropertySelector(),
            ClassInstancesSelector(),
        ]

        logger.info("Pipeline initialized")
        logger.info("  Base url: %s", self.config.base_url)
        logger.info("  Format: %s", self.config.format)

    @property
    def db(self) -> GraphDatabase:
        """Get or load the graph database."""
        if self._db is None:
            self._db = load_graph(self.graph_path)
        return self._db

    # =========================================================================
    # PIPELINE STAGES
    # =========================================================================

    def create_triples(self, result: ExportResult | None = None) -> list[Triple]:
        """
        Generate the triples of every selected page.

        Property pages are selected first: the catalog built from them
        must be complete before any page is triplified.

        Args:
            result: Optional result to record counts in

        Returns:
            Triples of additional, class, property and class-instance pages
        """
        result = result or ExportResult()
        result.pages_loaded = len(self.db)

        property_selector = next(s for s in self.selectors if isinstance(s, PropertySelector))
        property_records = property_selector.records(self.db, self.config)
        catalog = build_property_catalog(property_records, self.config)
        result.catalog_size = len(catalog)
        generator = TripleGenerator(self.config, catalog)

        triples: list[Triple] = []
        for selector in self.selectors:
            if selector is property_selector:
                records = property_records
            else:
                records = selector.records(self.db, self.config)
            selected = generator.generate(records)

            result.pages_by_selector[selector.name] = len(records)
            result.triples_by_selector[selector.name] = len(selected)
            triples.extend(selected)

        result.triples_generated = len(triples)
        logger.info("Generated %d triples", len(triples))
        return triples

    def emit(self, triples: list[Triple]) -> QuadWriter:
        """
        Type every triple and hand it to a writer.

        Args:
            triples: String triples

        Returns:
            QuadWriter holding the typed quads
        """
        writer = QuadWriter(prefixes=self.config.prefixes, format=self.config.format)
        writer.add_quads(to_quad(triple) for triple in triples)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Graph statistics: %s", writer.get_statistics())
        return writer

    def execute(self, output_path: str | Path) -> ExportResult:
        """
        Execute the complete export.

        Args:
            output_path: File to write the serialized graph to

        Returns:
            ExportResult with run summary
        """
        result = ExportResult(format=self.config.format)

        try:
            logger.info("--- STAGE 1: Selecting pages and generating triples ---")
            triples = self.create_triples(result)

            logger.info("--- STAGE 2: Typing terms ---")
            writer = self.emit(triples)
            result.triples_written = len(writer)

            logger.info("--- STAGE 3: Serializing output ---")
            result.output_file = str(writer.to_file(output_path))

        except Exception as e:
            logger.exception("Export failed: %s", e)
            raise

        finally:
            result.finalize()

        return result


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def export_graph(
    output_path: str | Path,
    settings: Settings | None = None,
    graph_path: str | Path | None = None,
) -> ExportResult:
    """
    Convenience function to run a complete export.

    Args:
        output_path: File to write
        settings: Configuration settings (uses default if None)
        graph_path: Override path of the graph to load

    Returns:
        ExportResult with run summary
    """
    return ExportPipeline(settings=settings, graph_path=graph_path).execute(output_path)
