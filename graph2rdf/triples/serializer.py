"""
Quad Writer - Collects typed quads and serializes them with rdflib.

Supports Turtle, N-Triples, N-Quads, TriG, JSON-LD and RDF/XML output.
All quads go to the default graph.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Any, Iterable

from rdflib import Dataset, Graph, URIRef

from .terms import Quad

logger = logging.getLogger(__name__)


# =============================================================================
# SUPPORTED FORMATS
# =============================================================================

FORMATS = {
    "turtle": {"rdflib": "turtle", "extension": ".ttl", "mime": "text/turtle", "quads": False},
    "ttl": {"rdflib": "turtle", "extension": ".ttl", "mime": "text/turtle", "quads": False},
    "n-triples": {
        "rdflib": "nt",
        "extension": ".nt",
        "mime": "application/n-triples",
        "quads": False,
    },
    "nt": {"rdflib": "nt", "extension": ".nt", "mime": "application/n-triples", "quads": False},
    "n-quads": {
        "rdflib": "nquads",
        "extension": ".nq",
        "mime": "application/n-quads",
        "quads": True,
    },
    "nq": {"rdflib": "nquads", "extension": ".nq", "mime": "application/n-quads", "quads": True},
    "trig": {"rdflib": "trig", "extension": ".trig", "mime": "application/trig", "quads": True},
    "json-ld": {
        "rdflib": "json-ld",
        "extension": ".jsonld",
        "mime": "application/ld+json",
        "quads": False,
    },
    "xml": {"rdflib": "xml", "extension": ".rdf", "mime": "application/rdf+xml", "quads": False},
}


# =============================================================================
# QUAD WRITER
# =============================================================================


class QuadWriter:
    """
    Accepts quads in the default graph and renders them to text.

    Prefixes are bound on the output so Turtle and TriG can compact URIs.
    """

    def __init__(self, prefixes: dict[str, str] | None = None, format: str = "turtle"):
        """
        Initialize the writer.

        Args:
            prefixes: Short name to namespace URI
            format: Output format (see FORMATS)
        """
        format_lower = format.lower()
        if format_lower not in FORMATS:
            raise ValueError(f"Unsupported format: {format}. Supported: {list(FORMATS.keys())}")

        self.format = format_lower
        self.prefixes = dict(prefixes or {})
        self.graph = Graph(bind_namespaces="core")
        self._bind(self.graph)

    def _bind(self, graph: Graph) -> None:
        for prefix, namespace in self.prefixes.items():
            graph.bind(prefix, namespace, override=True, replace=True)

    def add_quad(self, subject, predicate, obj) -> None:
        """Add one quad to the default graph."""
        self.graph.add((subject, predicate, obj))

    def add_quads(self, quads: Iterable[Quad]) -> int:
        """Add quads; returns how many were given."""
        count = 0
        for subject, predicate, obj in quads:
            self.add_quad(subject, predicate, obj)
            count += 1
        return count

    def __len__(self) -> int:
        return len(self.graph)

    def _dataset(self) -> Dataset:
        """Copy the default graph into a Dataset for quad formats."""
        dataset = Dataset()
        self._bind(dataset)
        for triple in self.graph:
            dataset.add(triple)
        return dataset

    def end(self) -> str:
        """
        Serialize everything added so far.

        Returns:
            Serialized payload in the configured format
        """
        fmt = FORMATS[self.format]
        target = self._dataset() if fmt["quads"] else self.graph
        return target.serialize(format=fmt["rdflib"])

    def to_file(self, path: Path | str) -> Path:
        """
        Serialize to a file.

        Args:
            path: Output file path

        Returns:
            The path written
        """
        path = Path(path)
        content = self.end()

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.info("Serialized %d triples to %s (%s)", len(self.graph), path, self.format)
        return path

    def get_statistics(self) -> dict[str, Any]:
        """
        Get statistics about the collected graph.

        Returns:
            Dictionary with graph statistics
        """
        predicates: Counter = Counter()
        subjects = set()
        objects_uris = set()

        for s, p, o in self.graph:
            predicates[str(p)] += 1
            subjects.add(str(s))
            if isinstance(o, URIRef):
                objects_uris.add(str(o))

        namespaces = {prefix: str(uri) for prefix, uri in self.graph.namespaces()}

        return {
            "total_triples": len(self.graph),
            "unique_subjects": len(subjects),
            "unique_predicates": len(predicates),
            "unique_object_uris": len(objects_uris),
            "predicates": dict(predicates.most_common(20)),
            "namespaces": namespaces,
        }
