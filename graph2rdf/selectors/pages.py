"""
Page selectors - The four page sets an export includes.

- AdditionalPagesSelector: pages named in the configuration
- ClassSelector: class pages (default `type:: [[Class]]`)
- PropertySelector: property pages (default `type:: [[Property]]`)
- ClassInstancesSelector: pages typed as one of the class pages
"""

from typing import Any

from graph2rdf.config.settings import GraphConfig
from graph2rdf.loaders import GraphDatabase

from .base import BaseSelector


class AdditionalPagesSelector(BaseSelector):
    """Pages listed in `additional_pages`, matched case-insensitively."""

    name = "additional-pages"

    def select(self, db: GraphDatabase, config: GraphConfig) -> list[dict[str, Any]]:
        return db.pages_named({page.lower() for page in config.additional_pages})


class ClassSelector(BaseSelector):
    """Pages matching `class_query`."""

    name = "classes"

    def select(self, db: GraphDatabase, config: GraphConfig) -> list[dict[str, Any]]:
        return db.run(config.class_query)


class PropertySelector(BaseSelector):
    """Pages matching `property_query`. Their records also feed the property catalog."""

    name = "properties"

    def select(self, db: GraphDatabase, config: GraphConfig) -> list[dict[str, Any]]:
        return db.run(config.property_query)


class ClassInstancesSelector(BaseSelector):
    """Pages whose type names a class page, per `class_instances_query`."""

    name = "class-instances"

    def select(self, db: GraphDatabase, config: GraphConfig) -> list[dict[str, Any]]:
        return db.run(config.class_instances_query)
