"""
Flexbox builders.

Flex rules carry the CSS property as their qualifier, so one builder can
mix direction, wrapping, alignment and growth:

    Flex.row.justify_center.align_items_center.to_class()
    # "flex-row justify-content-center align-items-center"
"""

from __future__ import annotations

from typing import Self

from chuk_css_builders.builders.base import BuilderEntry, RawValueBuilder, StyleBuilder


class FlexBuilder(StyleBuilder):
    """Flex container and item properties."""

    adapter_name = "flex"

    def set(self, css_property: str, value: str) -> Self:
        """
        Append a (property, value) flex rule.

        Values outside a property's token table render as inline style,
        e.g. ``Flex.set("flex-basis", "10rem")``.
        """
        return self._chain_value(value, css_property)

    # ----- Direction -----

    @property
    def row(self) -> Self:
        return self.set("flex-direction", "row")

    @property
    def row_reverse(self) -> Self:
        return self.set("flex-direction", "row-reverse")

    @property
    def column(self) -> Self:
        return self.set("flex-direction", "column")

    @property
    def column_reverse(self) -> Self:
        return self.set("flex-direction", "column-reverse")

    # ----- Wrapping -----

    @property
    def wrap(self) -> Self:
        return self.set("flex-wrap", "wrap")

    @property
    def nowrap(self) -> Self:
        return self.set("flex-wrap", "nowrap")

    @property
    def wrap_reverse(self) -> Self:
        return self.set("flex-wrap", "wrap-reverse")

    # ----- Main axis -----

    @property
    def justify_start(self) -> Self:
        return self.set("justify-content", "start")

    @property
    def justify_end(self) -> Self:
        return self.set("justify-content", "end")

    @property
    def justify_center(self) -> Self:
        return self.set("justify-content", "center")

    @property
    def justify_between(self) -> Self:
        return self.set("justify-content", "between")

    @property
    def justify_around(self) -> Self:
        return self.set("justify-content", "around")

    @property
    def justify_evenly(self) -> Self:
        return self.set("justify-content", "evenly")

    # ----- Cross axis -----

    @property
    def align_items_start(self) -> Self:
        return self.set("align-items", "start")

    @property
    def align_items_end(self) -> Self:
        return self.set("align-items", "end")

    @property
    def align_items_center(self) -> Self:
        return self.set("align-items", "center")

    @property
    def align_items_baseline(self) -> Self:
        return self.set("align-items", "baseline")

    @property
    def align_items_stretch(self) -> Self:
        return self.set("align-items", "stretch")

    @property
    def align_self_center(self) -> Self:
        return self.set("align-self", "center")

    @property
    def align_self_start(self) -> Self:
        return self.set("align-self", "start")

    @property
    def align_self_end(self) -> Self:
        return self.set("align-self", "end")

    # ----- Growth -----

    @property
    def fill(self) -> Self:
        return self.set("flex", "fill")

    @property
    def grow_0(self) -> Self:
        return self.set("flex-grow", "0")

    @property
    def grow_1(self) -> Self:
        return self.set("flex-grow", "1")

    @property
    def shrink_0(self) -> Self:
        return self.set("flex-shrink", "0")

    @property
    def shrink_1(self) -> Self:
        return self.set("flex-shrink", "1")


class GapBuilder(RawValueBuilder):
    """Gap between grid and flex children."""

    adapter_name = "gap"

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


Flex: BuilderEntry[FlexBuilder] = BuilderEntry(FlexBuilder)
Gap: BuilderEntry[GapBuilder] = BuilderEntry(GapBuilder)
