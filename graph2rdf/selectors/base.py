"""
Base selector class for page set selection.

Provides the common select → normalize → triplify flow for all selectors.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from graph2rdf.config.settings import GraphConfig
from graph2rdf.loaders import GraphDatabase
from graph2rdf.triples import Triple, TripleGenerator, normalize_records

logger = logging.getLogger(__name__)


class BaseSelector(ABC):
    """
    Abstract base class for all page selectors.

    A selector picks a set of pages from the graph database; the shared
    flow turns them into triples with the run's property catalog.
    """

    # Selector name - must be set by subclasses
    name: str

    @abstractmethod
    def select(self, db: GraphDatabase, config: GraphConfig) -> list[dict[str, Any]]:
        """
        Select the raw page records this selector exports.

        Args:
            db: Graph database to query
            config: Graph configuration

        Returns:
            Raw page records
        """

    def records(self, db: GraphDatabase, config: GraphConfig) -> list[dict[str, Any]]:
        """Select pages and normalize them."""
        records = normalize_records(self.select(db, config))
        logger.info("%s: selected %d pages", self.name, len(records))
        return records

    def collect(
        self,
        db: GraphDatabase,
        config: GraphConfig,
        catalog: dict[str, str | None],
    ) -> list[Triple]:
        """
        Select, normalize and triplify this selector's pages.

        Args:
            db: Graph database to query
            config: Graph configuration
            catalog: Completed property catalog

        Returns:
            Triples of all selected pages
        """
        return TripleGenerator(config, catalog).generate(self.records(db, config))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
