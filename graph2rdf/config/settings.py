"""
Configuration management for graph2rdf.
"""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings


class PagePropertyQuery(BaseModel):
    """Selects pages whose property `property` holds `value`.

    Matches a scalar equal to `value` or a collection containing it,
    e.g. `type:: [[Class]]`.
    """

    model_config = ConfigDict(frozen=True)

    property: str = "type"
    value: str


class ClassInstancesQuery(BaseModel):
    """Selects pages typed as a class page.

    A class page is any page whose `class_property` holds `class_value`.
    An instance is any page whose `instance_property` names a class page.
    """

    model_config = ConfigDict(frozen=True)

    class_property: str = "type"
    class_value: str = "Class"
    instance_property: str = "type"


class GraphConfig(BaseModel):
    """Graph-specific export configuration, fixed for the whole run."""

    model_config = ConfigDict(frozen=True)

    # Required: base url for all pages in the graph
    base_url: str
    # Other possible values: n-triples, n-quads, trig, json-ld, xml
    format: str = "turtle"
    # Shortens urls in the output
    prefixes: dict[str, str] = Field(default_factory=lambda: {"schema": "https://schema.org/"})
    # Property used to look up urls of property pages
    url_property: str = "url"
    # Individual pages to always include, e.g. class and property pages
    additional_pages: frozenset[str] = frozenset({"Class", "Property"})
    class_query: PagePropertyQuery = Field(
        default_factory=lambda: PagePropertyQuery(property="type", value="Class")
    )
    property_query: PagePropertyQuery = Field(
        default_factory=lambda: PagePropertyQuery(property="type", value="Property")
    )
    class_instances_query: ClassInstancesQuery = Field(default_factory=ClassInstancesQuery)

    @field_validator("format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        # Deferred: graph2rdf.triples imports this module
        from graph2rdf.triples.serializer import FORMATS

        if value.lower() not in FORMATS:
            raise ValueError(f"Unsupported format: {value}. Supported: {list(FORMATS.keys())}")
        return value.lower()


class PathsConfig(BaseModel):
    """Project paths configuration."""

    graph_dir: Path = Path("./graph")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: Path | None = None


class Settings(BaseSettings):
    """Main configuration class."""

    model_config = ConfigDict(
        env_prefix="GRAPH2RDF_",
        env_nested_delimiter="__",
    )

    graph: GraphConfig
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(
    config_path: str | Path = "config.yaml",
    graph_overrides: dict[str, Any] | None = None,
) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file
        graph_overrides: Values replacing those of the `graph` section

    Returns:
        Settings object with loaded configuration
    """
    config_file = Path(config_path)

    if config_file.exists():
        with open(config_file, "r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f) or {}
    else:
        config_dict = {}

    if graph_overrides:
        config_dict["graph"] = {**config_dict.get("graph", {}), **graph_overrides}

    # Create settings, which will also load from environment variables
    settings = Settings(**config_dict)

    return settings


# Global settings instance
_settings: Settings | None = None


def get_settings(config_path: str | Path = "config.yaml") -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = load_config(config_path)
    return _settings


def reset_settings() -> None:
    """Drop the cached settings instance."""
    global _settings
    _settings = None
