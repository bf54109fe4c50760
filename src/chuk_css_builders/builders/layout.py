"""
Layout builders - display, overflow, position, offsets, stacking and visibility.
"""

from __future__ import annotations

from typing import Self

from chuk_css_builders.builders.base import (
    BuilderEntry,
    KeywordStyleBuilder,
    RawValueBuilder,
    StyleBuilder,
)
from chuk_css_builders.constants import Axis


class DisplayBuilder(KeywordStyleBuilder):
    """Display type."""

    adapter_name = "display"

    @property
    def none(self) -> Self:
        return self._chain_value("none")

    @property
    def inline(self) -> Self:
        return self._chain_value("inline")

    @property
    def inline_block(self) -> Self:
        return self._chain_value("inline-block")

    @property
    def block(self) -> Self:
        return self._chain_value("block")

    @property
    def flex(self) -> Self:
        return self._chain_value("flex")

    @property
    def inline_flex(self) -> Self:
        return self._chain_value("inline-flex")

    @property
    def grid(self) -> Self:
        return self._chain_value("grid")

    @property
    def inline_grid(self) -> Self:
        return self._chain_value("inline-grid")

    @property
    def table(self) -> Self:
        return self._chain_value("table")

    @property
    def table_cell(self) -> Self:
        return self._chain_value("table-cell")

    @property
    def table_row(self) -> Self:
        return self._chain_value("table-row")


class OverflowBuilder(KeywordStyleBuilder):
    """
    Overflow behavior.

    ``x`` and ``y`` narrow the preceding rule to one axis, so
    ``Overflow.hidden.x`` renders ``overflow-x-hidden``.
    """

    adapter_name = "overflow"

    @property
    def auto(self) -> Self:
        return self._chain_value("auto")

    @property
    def hidden(self) -> Self:
        return self._chain_value("hidden")

    @property
    def visible(self) -> Self:
        return self._chain_value("visible")

    @property
    def scroll(self) -> Self:
        return self._chain_value("scroll")

    @property
    def x(self) -> Self:
        return self._chain_qualifier(Axis.X.value)

    @property
    def y(self) -> Self:
        return self._chain_qualifier(Axis.Y.value)


class PositionBuilder(KeywordStyleBuilder):
    """Positioning scheme."""

    adapter_name = "position"

    @property
    def static(self) -> Self:
        return self._chain_value("static")

    @property
    def relative(self) -> Self:
        return self._chain_value("relative")

    @property
    def absolute(self) -> Self:
        return self._chain_value("absolute")

    @property
    def fixed(self) -> Self:
        return self._chain_value("fixed")

    @property
    def sticky(self) -> Self:
        return self._chain_value("sticky")


class PositionOffsetBuilder(StyleBuilder):
    """Edge offsets; each call is an (edge, amount) pair."""

    adapter_name = "position_offset"

    def offset(self, edge: str, value: str) -> Self:
        """Append an offset for an edge (top, bottom, start, end)."""
        return self._chain_value(value, edge)

    @property
    def top_0(self) -> Self:
        return self.offset("top", "0")

    @property
    def top_50(self) -> Self:
        return self.offset("top", "50")

    @property
    def top_100(self) -> Self:
        return self.offset("top", "100")

    @property
    def bottom_0(self) -> Self:
        return self.offset("bottom", "0")

    @property
    def bottom_50(self) -> Self:
        return self.offset("bottom", "50")

    @property
    def bottom_100(self) -> Self:
        return self.offset("bottom", "100")

    @property
    def start_0(self) -> Self:
        return self.offset("start", "0")

    @property
    def start_50(self) -> Self:
        return self.offset("start", "50")

    @property
    def start_100(self) -> Self:
        return self.offset("start", "100")

    @property
    def end_0(self) -> Self:
        return self.offset("end", "0")

    @property
    def end_50(self) -> Self:
        return self.offset("end", "50")

    @property
    def end_100(self) -> Self:
        return self.offset("end", "100")


class ZIndexBuilder(RawValueBuilder):
    """Stacking order on the -1..3 utility scale."""

    adapter_name = "z_index"

    def value(self, z: int) -> Self:
        """Append an arbitrary z-index (inline style unless on the scale)."""
        return self._chain_value(str(z))

    @property
    def n1(self) -> Self:
        return self.value(-1)

    @property
    def z0(self) -> Self:
        return self.value(0)

    @property
    def z1(self) -> Self:
        return self.value(1)

    @property
    def z2(self) -> Self:
        return self.value(2)

    @property
    def z3(self) -> Self:
        return self.value(3)


class VisibilityBuilder(KeywordStyleBuilder):
    """Visibility without affecting layout."""

    adapter_name = "visibility"

    @property
    def visible(self) -> Self:
        return self._chain_value("visible")

    @property
    def invisible(self) -> Self:
        return self._chain_value("invisible")


Display: BuilderEntry[DisplayBuilder] = BuilderEntry(DisplayBuilder)
Overflow: BuilderEntry[OverflowBuilder] = BuilderEntry(OverflowBuilder)
Position: BuilderEntry[PositionBuilder] = BuilderEntry(PositionBuilder)
PositionOffset: BuilderEntry[PositionOffsetBuilder] = BuilderEntry(PositionOffsetBuilder)
ZIndex: BuilderEntry[ZIndexBuilder] = BuilderEntry(ZIndexBuilder)
Visibility: BuilderEntry[VisibilityBuilder] = BuilderEntry(VisibilityBuilder)
