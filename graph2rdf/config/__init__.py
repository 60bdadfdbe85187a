"""
graph2rdf - Configuration package.
"""

from .settings import (
    ClassInstancesQuery,
    GraphConfig,
    PagePropertyQuery,
    Settings,
    get_settings,
    load_config,
    reset_settings,
)

__all__ = [
    "ClassInstancesQuery",
    "GraphConfig",
    "PagePropertyQuery",
    "Settings",
    "get_settings",
    "load_config",
    "reset_settings",
]
