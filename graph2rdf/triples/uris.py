"""
URI construction for pages and properties.
"""

from typing import Any
from urllib.parse import quote

from graph2rdf.config.settings import GraphConfig

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"


def encode_page_name(page_name: Any) -> str:
    """Percent-encode a page name as a single URI component."""
    if page_name is None:
        return ""
    return quote(str(page_name), safe=_URI_COMPONENT_SAFE)


def page_url(page_name: Any, config: GraphConfig) -> str:
    """Return the URI of a page: base url followed by its encoded name."""
    return config.base_url + encode_page_name(page_name)


def property_url(key: str, catalog: dict[str, str | None], config: GraphConfig) -> str:
    """
    Return the URI of a property.

    An override recorded in the catalog always wins; properties without
    one get a generated page URI.
    """
    override = catalog.get(key)
    if override is not None:
        return override
    return page_url(str(key), config)
