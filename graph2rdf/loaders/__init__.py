"""Loaders package for page graph extraction."""

from .graph_loader import (
    GraphDatabase,
    PageEntity,
    load_graph,
    load_markdown_graph,
    load_page_list,
    parse_page_file,
    parse_property_value,
)

__all__ = [
    "GraphDatabase",
    "PageEntity",
    "load_graph",
    "load_markdown_graph",
    "load_page_list",
    "parse_page_file",
    "parse_property_value",
]
