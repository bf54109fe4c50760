"""
Color builders - theme tokens as classes, everything else as inline style.

Theme tokens (primary, danger, ...) map to utility classes and emit no
inline style; keywords and custom values from ``from_css`` emit inline
style and no class.
"""

from __future__ import annotations

from typing import Self

from chuk_css_builders.builders.base import BuilderEntry, KeywordStyleBuilder
from chuk_css_builders.constants import ThemeColor


class ThemeColorBuilder(KeywordStyleBuilder):
    """Shared theme-token chaining for color properties."""

    @property
    def primary(self) -> Self:
        return self._chain_value(ThemeColor.PRIMARY.value)

    @property
    def secondary(self) -> Self:
        return self._chain_value(ThemeColor.SECONDARY.value)

    @property
    def success(self) -> Self:
        return self._chain_value(ThemeColor.SUCCESS.value)

    @property
    def danger(self) -> Self:
        return self._chain_value(ThemeColor.DANGER.value)

    @property
    def warning(self) -> Self:
        return self._chain_value(ThemeColor.WARNING.value)

    @property
    def info(self) -> Self:
        return self._chain_value(ThemeColor.INFO.value)

    @property
    def light(self) -> Self:
        return self._chain_value(ThemeColor.LIGHT.value)

    @property
    def dark(self) -> Self:
        return self._chain_value(ThemeColor.DARK.value)


class ColorBuilder(ThemeColorBuilder):
    """Text color."""

    adapter_name = "color"

    @property
    def link(self) -> Self:
        return self._chain_value(ThemeColor.LINK.value)

    @property
    def muted(self) -> Self:
        return self._chain_value(ThemeColor.MUTED.value)


class BackgroundColorBuilder(ThemeColorBuilder):
    """Background color."""

    adapter_name = "background_color"

    @property
    def body(self) -> Self:
        return self._chain_value("body")

    @property
    def white(self) -> Self:
        return self._chain_value("white")

    @property
    def transparent(self) -> Self:
        return self._chain_value("transparent")


Color: BuilderEntry[ColorBuilder] = BuilderEntry(ColorBuilder)
BackgroundColor: BuilderEntry[BackgroundColorBuilder] = BuilderEntry(BackgroundColorBuilder)
