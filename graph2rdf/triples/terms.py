"""
Term typing for string triples.

Classification is purely prefix based: a string starting with "http" is a
reference, anything else a literal. Literals that happen to start with
"http" become references and URIs of other schemes become literals; a
stricter classifier only needs to replace `to_term`.
"""

from typing import Any

from rdflib import Literal, URIRef
from rdflib.term import Node

REFERENCE_PREFIX = "http"

Quad = tuple[Node, Node, Node]


def display_name(value: Any) -> str:
    """Plain textual form of a value."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def is_reference(value: Any) -> bool:
    """True when `value` is a string starting with the reference prefix."""
    return isinstance(value, str) and value.startswith(REFERENCE_PREFIX)


def to_term(value: Any) -> Node:
    """Convert one triple component to a URIRef or a plain Literal."""
    if is_reference(value):
        return URIRef(value)
    return Literal(display_name(value))


def to_quad(triple: tuple[Any, Any, Any]) -> Quad:
    """Type each component of a triple independently."""
    subject, predicate, obj = triple
    return to_term(subject), to_term(predicate), to_term(obj)
