"""
Fluent builders - one entry point per styling domain.

Each entry starts a fresh builder on attribute access:

    Color.primary.on_tablet.to_class()      # "text-sm-primary"
    Margin.s3.from_top.from_left.to_class() # "mt-3 ms-3"
    Overflow.hidden.x.to_style()            # "overflow-x: hidden"
"""

from chuk_css_builders.builders.base import (
    BuilderEntry,
    KeywordStyleBuilder,
    RawValueBuilder,
    StyleBuilder,
)
from chuk_css_builders.builders.colors import (
    BackgroundColor,
    BackgroundColorBuilder,
    Color,
    ColorBuilder,
    ThemeColorBuilder,
)
from chuk_css_builders.builders.flex import Flex, FlexBuilder, Gap, GapBuilder
from chuk_css_builders.builders.interaction import Interaction, InteractionBuilder
from chuk_css_builders.builders.layout import (
    Display,
    DisplayBuilder,
    Overflow,
    OverflowBuilder,
    Position,
    PositionBuilder,
    PositionOffset,
    PositionOffsetBuilder,
    Visibility,
    VisibilityBuilder,
    ZIndex,
    ZIndexBuilder,
)
from chuk_css_builders.builders.spacing import (
    Border,
    BorderBuilder,
    Margin,
    MarginBuilder,
    Padding,
    PaddingBuilder,
    SpacingBuilder,
)
from chuk_css_builders.builders.typography import (
    FontWeight,
    FontWeightBuilder,
    TextAlignment,
    TextAlignmentBuilder,
)

__all__ = [
    # Base
    "BuilderEntry",
    "KeywordStyleBuilder",
    "RawValueBuilder",
    "StyleBuilder",
    # Colors
    "BackgroundColor",
    "BackgroundColorBuilder",
    "Color",
    "ColorBuilder",
    "ThemeColorBuilder",
    # Spacing
    "Border",
    "BorderBuilder",
    "Margin",
    "MarginBuilder",
    "Padding",
    "PaddingBuilder",
    "SpacingBuilder",
    # Layout
    "Display",
    "DisplayBuilder",
    "Overflow",
    "OverflowBuilder",
    "Position",
    "PositionBuilder",
    "PositionOffset",
    "PositionOffsetBuilder",
    "Visibility",
    "VisibilityBuilder",
    "ZIndex",
    "ZIndexBuilder",
    # Flex
    "Flex",
    "FlexBuilder",
    "Gap",
    "GapBuilder",
    # Typography
    "FontWeight",
    "FontWeightBuilder",
    "TextAlignment",
    "TextAlignmentBuilder",
    # Interaction
    "Interaction",
    "InteractionBuilder",
]
