"""
Property Catalog - Maps property keys to explicit URIs.

The catalog merges a small set of built-in properties with the property
pages found in the graph. A property page contributes an entry keyed by
its name whose URI is read from the configured url property, e.g. a
`description` page with `url:: https://schema.org/description`.
"""

import logging
from typing import Any, Iterable

from graph2rdf.config.settings import GraphConfig

from .records import ORIGINAL_NAME

logger = logging.getLogger(__name__)


BUILT_IN_PROPERTIES: dict[str, str | None] = {
    ORIGINAL_NAME: "https://schema.org/name",
    "alias": "https://schema.org/sameAs",
}


def property_key(name: Any) -> str:
    """Coerce a property page name to a catalog key."""
    return str(name)


def build_property_catalog(
    property_records: Iterable[dict[str, Any]],
    config: GraphConfig,
    built_ins: dict[str, str | None] | None = None,
) -> dict[str, str | None]:
    """
    Build the property catalog for one export run.

    Args:
        property_records: Normalized records of property pages
        config: Graph configuration (provides the url property)
        built_ins: Built-in overrides (defaults to BUILT_IN_PROPERTIES)

    Returns:
        Mapping of property key to override URI. Property pages are
        applied after the built-ins, so a page named like a built-in
        replaces it.
    """
    catalog = dict(BUILT_IN_PROPERTIES if built_ins is None else built_ins)

    for record in property_records:
        key = property_key(record.get(ORIGINAL_NAME))
        url = record.get(config.url_property)
        if key in catalog:
            logger.debug("Property page '%s' replaces an existing catalog entry", key)
        catalog[key] = None if url is None else str(url)

    logger.info(
        "Property catalog: %d entries (%d with explicit urls)",
        len(catalog),
        sum(1 for url in catalog.values() if url),
    )
    return catalog
