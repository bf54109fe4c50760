"""
Property adapters - token tables that give each styling domain its
class names and CSS declarations.

Tables are declarative YAML documents: the built-in library ships with
the package, and a project directory can override any of them by name.
"""

from chuk_css_builders.adapters.base import PairedAdapter, PropertyAdapter, TableAdapter
from chuk_css_builders.adapters.loader import AdapterLoader
from chuk_css_builders.adapters.registry import (
    AdapterRegistry,
    get_adapter,
    get_default_registry,
    reset_default_registry,
    set_default_registry,
)

__all__ = [
    "AdapterLoader",
    "AdapterRegistry",
    "PairedAdapter",
    "PropertyAdapter",
    "TableAdapter",
    "get_adapter",
    "get_default_registry",
    "reset_default_registry",
    "set_default_registry",
]
