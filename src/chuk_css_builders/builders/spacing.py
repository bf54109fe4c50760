"""
Spacing builders - margin, padding and border width.

Sizes follow the 0-5 spacer scale. Side calls narrow the rule they
follow: ``Margin.s3.from_top`` is one rule (top, 3), and
``Margin.s3.from_top.from_left`` is two (top, 3) and (left, 3).
"""

from __future__ import annotations

from typing import Self

from chuk_css_builders.builders.base import BuilderEntry, RawValueBuilder
from chuk_css_builders.constants import ElementSide


class SpacingBuilder(RawValueBuilder):
    """Size + side chaining shared by margin, padding and border."""

    # ----- Sizes -----

    @property
    def s0(self) -> Self:
        return self._chain_value("0")

    @property
    def s1(self) -> Self:
        return self._chain_value("1")

    @property
    def s2(self) -> Self:
        return self._chain_value("2")

    @property
    def s3(self) -> Self:
        return self._chain_value("3")

    @property
    def s4(self) -> Self:
        return self._chain_value("4")

    @property
    def s5(self) -> Self:
        return self._chain_value("5")

    # ----- Sides -----

    def side(self, side: ElementSide | str) -> Self:
        """Narrow the last rule to a side."""
        return self._chain_qualifier(ElementSide(side).value)

    @property
    def from_top(self) -> Self:
        return self.side(ElementSide.TOP)

    @property
    def from_right(self) -> Self:
        return self.side(ElementSide.RIGHT)

    @property
    def from_bottom(self) -> Self:
        return self.side(ElementSide.BOTTOM)

    @property
    def from_left(self) -> Self:
        return self.side(ElementSide.LEFT)

    @property
    def on_x(self) -> Self:
        return self.side(ElementSide.HORIZONTAL)

    @property
    def on_y(self) -> Self:
        return self.side(ElementSide.VERTICAL)

    @property
    def on_all(self) -> Self:
        return self.side(ElementSide.ALL)

    @property
    def from_start(self) -> Self:
        return self.side(ElementSide.INLINE_START)

    @property
    def from_end(self) -> Self:
        return self.side(ElementSide.INLINE_END)


class MarginBuilder(SpacingBuilder):
    """Outer spacing."""

    adapter_name = "margin"

    @property
    def auto(self) -> Self:
        return self._chain_value("auto")


class PaddingBuilder(SpacingBuilder):
    """Inner spacing."""

    adapter_name = "padding"


class BorderBuilder(SpacingBuilder):
    """Border width."""

    adapter_name = "border"


Margin: BuilderEntry[MarginBuilder] = BuilderEntry(MarginBuilder)
Padding: BuilderEntry[PaddingBuilder] = BuilderEntry(PaddingBuilder)
Border: BuilderEntry[BorderBuilder] = BuilderEntry(BorderBuilder)
