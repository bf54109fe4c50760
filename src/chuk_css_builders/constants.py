"""
Constants and enums for the builder system.

No magic strings - use enums for the closed sets builders chain with.
"""

from enum import Enum


class ElementSide(str, Enum):
    """
    Sides a spacing rule can target.

    ALL is the sentinel a fresh spacing rule starts with; choosing a
    specific side narrows it.
    """

    ALL = "all"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"
    HORIZONTAL = "horizontal"  # left + right
    VERTICAL = "vertical"  # top + bottom
    INLINE_START = "inline-start"
    INLINE_END = "inline-end"


class Axis(str, Enum):
    """Axes an overflow rule can target."""

    X = "x"
    Y = "y"


class GlobalKeyword(str, Enum):
    """CSS-wide keywords accepted by every property (style only)."""

    INHERIT = "inherit"
    INITIAL = "initial"
    REVERT = "revert"
    REVERT_LAYER = "revert-layer"
    UNSET = "unset"


class ThemeColor(str, Enum):
    """Bootstrap theme color tokens."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    LIGHT = "light"
    DARK = "dark"
    LINK = "link"
    MUTED = "muted"


class ErrorMessages:
    """Standardized error messages."""

    ADAPTER_NOT_FOUND = "Property adapter '{name}' not found."
    ADAPTER_EXISTS = "Adapter table already exists in project: {name}"
    NO_PROJECT_PATH = "No project path configured"
    UNKNOWN_QUALIFIER = "Default qualifier '{qualifier}' is not declared by adapter '{name}'."
    MISSING_QUALIFIERS = "Adapter '{name}' declares a default qualifier but no qualifiers."
    PAIRED_PARTS = "Paired adapter '{name}' needs both '{first}' and '{second}' tables."
