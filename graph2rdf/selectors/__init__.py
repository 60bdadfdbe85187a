"""
Selectors Module - Page set selection strategies.

Each selector runs one query against the graph database:
- AdditionalPagesSelector: Explicitly named pages
- ClassSelector: Class pages
- PropertySelector: Property pages
- ClassInstancesSelector: Instances of class pages
"""

from .base import BaseSelector
from .pages import (
    AdditionalPagesSelector,
    ClassInstancesSelector,
    ClassSelector,
    PropertySelector,
)

__all__ = [
    "BaseSelector",
    "AdditionalPagesSelector",
    "ClassSelector",
    "PropertySelector",
    "ClassInstancesSelector",
]
