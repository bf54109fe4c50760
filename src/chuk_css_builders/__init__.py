"""
chuk-css-builders - fluent, breakpoint-aware CSS utility builders.

Chain a value, a breakpoint and a side or axis, then render the result
as Bootstrap-style utility classes or as an inline style string.
"""

from chuk_css_builders.adapters import (
    AdapterLoader,
    AdapterRegistry,
    get_default_registry,
    reset_default_registry,
    set_default_registry,
)
from chuk_css_builders.builders import (
    BackgroundColor,
    Border,
    Color,
    Display,
    Flex,
    FontWeight,
    Gap,
    Interaction,
    Margin,
    Overflow,
    Padding,
    Position,
    PositionOffset,
    TextAlignment,
    Visibility,
    ZIndex,
)
from chuk_css_builders.constants import Axis, ElementSide, GlobalKeyword
from chuk_css_builders.core import Breakpoint, Rule

__version__ = "0.1.0"

__all__ = [
    # Builders
    "BackgroundColor",
    "Border",
    "Color",
    "Display",
    "Flex",
    "FontWeight",
    "Gap",
    "Interaction",
    "Margin",
    "Overflow",
    "Padding",
    "Position",
    "PositionOffset",
    "TextAlignment",
    "Visibility",
    "ZIndex",
    # Core
    "Axis",
    "Breakpoint",
    "ElementSide",
    "GlobalKeyword",
    "Rule",
    # Adapters
    "AdapterLoader",
    "AdapterRegistry",
    "get_default_registry",
    "reset_default_registry",
    "set_default_registry",
]
