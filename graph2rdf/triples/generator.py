"""
Triple Generator - Converts normalized page records to string triples.

Attribute cardinality decides how a value is treated: collections hold
references to other pages and every element becomes a page URI, scalars
are kept as-is. Term typing happens later, in `terms.py`.
"""

import logging
from typing import Any, Iterable

from graph2rdf.config.settings import GraphConfig

from .records import ORIGINAL_NAME
from .uris import page_url, property_url

logger = logging.getLogger(__name__)

Triple = tuple[str, str, Any]

COLLECTION_TYPES = (list, tuple, set, frozenset)


def _elements(value: Any) -> list[Any]:
    """Elements of a collection value, in a stable order."""
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    return list(value)


def triplify(
    record: dict[str, Any],
    config: GraphConfig,
    catalog: dict[str, str | None],
) -> list[Triple]:
    """
    Turn one normalized record into triples.

    Every attribute, the canonical name included, yields one triple per
    value element. An empty collection yields none.

    Args:
        record: Normalized page record
        config: Graph configuration
        catalog: Property catalog for this run

    Returns:
        List of (subject, predicate, object) triples
    """
    subject = page_url(record.get(ORIGINAL_NAME), config)
    triples: list[Triple] = []

    for key, value in record.items():
        predicate = property_url(key, catalog, config)
        if isinstance(value, COLLECTION_TYPES):
            objects = [page_url(element, config) for element in _elements(value)]
        else:
            objects = [value]
        triples.extend((subject, predicate, obj) for obj in objects)

    return triples


class TripleGenerator:
    """
    Generates triples for batches of normalized records.

    Holds the configuration and the property catalog of one run so that
    selectors share a single, complete catalog.
    """

    def __init__(self, config: GraphConfig, catalog: dict[str, str | None]):
        self.config = config
        self.catalog = catalog

    def generate(self, records: Iterable[dict[str, Any]]) -> list[Triple]:
        """
        Generate triples for every record.

        Args:
            records: Normalized page records

        Returns:
            Concatenated triples, record by record
        """
        triples: list[Triple] = []
        count = 0
        for record in records:
            triples.extend(triplify(record, self.config, self.catalog))
            count += 1

        logger.debug("Generated %d triples for %d records", len(triples), count)
        return triples
