"""
Triples Module - Page records to RDF.

Components:
- records.py: Normalizes raw page records
- uris.py: Builds page and property URIs
- catalog.py: Builds the property catalog
- generator.py: Converts records to string triples
- terms.py: Types triple components as URIs or literals
- serializer.py: Serializes quads with rdflib
"""

from .catalog import BUILT_IN_PROPERTIES, build_property_catalog
from .generator import Triple, TripleGenerator, triplify
from .records import ORIGINAL_NAME, normalize_record, normalize_records
from .serializer import FORMATS, QuadWriter
from .terms import to_quad, to_term
from .uris import page_url, property_url

__all__ = [
    # Records
    "ORIGINAL_NAME",
    "normalize_record",
    "normalize_records",
    # URIs
    "page_url",
    "property_url",
    # Catalog
    "BUILT_IN_PROPERTIES",
    "build_property_catalog",
    # Generator
    "Triple",
    "TripleGenerator",
    "triplify",
    # Terms
    "to_quad",
    "to_term",
    # Serializer
    "FORMATS",
    "QuadWriter",
]
