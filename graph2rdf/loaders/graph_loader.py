"""
Graph Loader - Reads a page graph and answers page selection queries.

This module provides:
- Markdown parsing for Logseq-style page files (`key:: value` properties)
- JSON/YAML loading for exported page lists
- An in-memory GraphDatabase that runs the configured selection queries
"""

import copy
import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable
from urllib.parse import unquote

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from graph2rdf.config.settings import ClassInstancesQuery, PagePropertyQuery

logger = logging.getLogger(__name__)


# Property values split on commas even without [[refs]]
COMMA_SEPARATED_PROPERTIES = {"alias", "tags"}

# Page renames are kept verbatim, refs included
TITLE_PROPERTY = "title"

PROPERTY_LINE = re.compile(r"^\s*(?:-\s+)?([A-Za-z0-9_\-/?!*.]+)::\s*(.*?)\s*$")
PAGE_REF = re.compile(r"\[\[([^\[\]]+)\]\]")
TAG_REF = re.compile(r"(?:^|\s)#(?!\[\[)([^\s#,\[\]]+)")


# =============================================================================
# PYDANTIC MODELS
# =============================================================================


class PageEntity(BaseModel):
    """A page of the graph with its property bag."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(default=None, description="Lower-cased page name")
    original_name: str | None = Field(
        default=None, alias="original-name", description="Page name as written"
    )
    properties: dict[str, Any] = Field(default_factory=dict)
    source_file: str | None = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def _default_name(self) -> "PageEntity":
        if self.name is None and self.original_name is not None:
            self.name = self.original_name.lower()
        return self

    def to_record(self) -> dict[str, Any]:
        """Return a fresh raw record for this page."""
        return {
            "name": self.name,
            "original-name": self.original_name,
            "properties": copy.deepcopy(self.properties),
        }


# =============================================================================
# GRAPH DATABASE
# =============================================================================


def _holds(value: Any, targets: set) -> bool:
    """True when a property value is, or contains, one of `targets`."""
    if isinstance(value, (list, tuple, set, frozenset)):
        return any(element in targets for element in value)
    return value in targets


class GraphDatabase:
    """
    In-memory page graph.

    Query methods return raw records (see PageEntity.to_record), which
    callers may normalize freely.
    """

    def __init__(self, pages: Iterable[PageEntity]):
        self.pages = list(pages)

    def __len__(self) -> int:
        return len(self.pages)

    def pages_with_property(self, key: str, value: Any) -> list[dict[str, Any]]:
        """Pages whose property `key` equals or contains `value`."""
        return self.pages_with_property_in(key, {value})

    def pages_with_property_in(self, key: str, values: set) -> list[dict[str, Any]]:
        """Pages whose property `key` equals or contains any of `values`."""
        return [
            page.to_record()
            for page in self.pages
            if key in page.properties and _holds(page.properties[key], values)
        ]

    def pages_named(self, names: Iterable[str]) -> list[dict[str, Any]]:
        """Pages whose lower-cased name is one of `names`."""
        wanted = set(names)
        return [page.to_record() for page in self.pages if page.name in wanted]

    def run(self, query: PagePropertyQuery | ClassInstancesQuery) -> list[dict[str, Any]]:
        """
        Run a selection query.

        Args:
            query: Property query or class-instances query

        Returns:
            Raw records of the matching pages
        """
        if isinstance(query, PagePropertyQuery):
            return self.pages_with_property(query.property, query.value)

        if isinstance(query, ClassInstancesQuery):
            classes = self.pages_with_property(query.class_property, query.class_value)
            class_names = {
                record["original-name"] for record in classes if record["original-name"]
            }
            return self.pages_with_property_in(query.instance_property, class_names)

        raise TypeError(f"Unsupported query: {query!r}")


# =============================================================================
# MARKDOWN EXTRACTION
# =============================================================================


def _normalize_key(key: str) -> str:
    return key.lower().replace("_", "-")


def parse_property_value(key: str, value: str) -> Any:
    """
    Parse the text of a property value.

    Page references (`[[Page]]`, `#tag`, `#[[Some tag]]`) turn the value
    into a set of page names. `alias` and `tags` are also split on commas.
    Anything else stays a string, and so does a `title` whatever it holds.
    """
    if key == TITLE_PROPERTY:
        return value.strip()

    refs = PAGE_REF.findall(value) + TAG_REF.findall(value)
    if refs:
        return {ref.strip() for ref in refs if ref.strip()}

    if key in COMMA_SEPARATED_PROPERTIES:
        return {part.strip() for part in value.split(",") if part.strip()}

    return value


def page_name_from_file(filepath: Path) -> str:
    """Derive a page name from its file name (`a___b.md` is page `a/b`)."""
    return unquote(filepath.stem).replace("___", "/")


def parse_page_file(filepath: Path) -> PageEntity | None:
    """
    Parse the page properties at the top of a markdown page file.

    Args:
        filepath: Path to the .md file

    Returns:
        PageEntity or None if the file cannot be read
    """
    try:
        text = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Error reading %s: %s", filepath.name, e)
        return None

    properties: dict[str, Any] = {}
    for line in text.splitlines():
        if not line.strip():
            if properties:
                break
            continue
        match = PROPERTY_LINE.match(line)
        if not match:
            break
        key, value = _normalize_key(match.group(1)), match.group(2)
        if value:
            properties[key] = parse_property_value(key, value)

    return PageEntity(
        original_name=properties.get(TITLE_PROPERTY) or page_name_from_file(filepath),
        properties=properties,
        source_file=str(filepath),
    )


def load_markdown_graph(graph_dir: Path) -> list[PageEntity]:
    """Load every page file of a markdown graph directory."""
    pages_dir = graph_dir / "pages" if (graph_dir / "pages").is_dir() else graph_dir
    md_files = sorted(pages_dir.glob("*.md"))
    if not md_files:
        logger.warning("No markdown pages found in %s", pages_dir)
        return []

    logger.info("Found %d page files in %s", len(md_files), pages_dir)

    pages = []
    for filepath in md_files:
        page = parse_page_file(filepath)
        if page:
            pages.append(page)
        else:
            logger.warning("Skipped %s (parsing failed)", filepath.name)
    return pages


def load_page_list(filepath: Path) -> list[PageEntity]:
    """Load pages from a JSON or YAML export: a list or a {"pages": [...]} mapping."""
    with open(filepath, "r", encoding="utf-8") as f:
        if filepath.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if isinstance(data, dict):
        data = data.get("pages", [])
    return [PageEntity.model_validate(item) for item in data or []]


def load_graph(path: Path | str) -> GraphDatabase:
    """
    Load a page graph.

    Args:
        path: Markdown graph directory, or a .json/.yaml/.yml page list

    Returns:
        GraphDatabase over the loaded pages
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Graph not found: {path}")

    if path.is_dir():
        pages = load_markdown_graph(path)
    elif path.suffix.lower() in (".json", ".yaml", ".yml"):
        pages = load_page_list(path)
    else:
        raise ValueError(f"Unsupported graph file: {path}. Expected a directory, .json or .yaml")

    logger.info("Loaded %d pages from %s", len(pages), path)
    return GraphDatabase(pages)
