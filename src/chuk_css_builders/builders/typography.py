"""
Typography builders - font weight and text alignment.
"""

from __future__ import annotations

from typing import Self

from chuk_css_builders.builders.base import BuilderEntry, KeywordStyleBuilder


class FontWeightBuilder(KeywordStyleBuilder):
    """Font weight."""

    adapter_name = "font_weight"

    @property
    def light(self) -> Self:
        return self._chain_value("light")

    @property
    def normal(self) -> Self:
        return self._chain_value("normal")

    @property
    def medium(self) -> Self:
        return self._chain_value("medium")

    @property
    def semibold(self) -> Self:
        return self._chain_value("semibold")

    @property
    def bold(self) -> Self:
        return self._chain_value("bold")

    @property
    def bolder(self) -> Self:
        return self._chain_value("bolder")


class TextAlignmentBuilder(KeywordStyleBuilder):
    """Horizontal text alignment."""

    adapter_name = "text_alignment"

    @property
    def start(self) -> Self:
        return self._chain_value("start")

    @property
    def center(self) -> Self:
        return self._chain_value("center")

    @property
    def end(self) -> Self:
        return self._chain_value("end")


FontWeight: BuilderEntry[FontWeightBuilder] = BuilderEntry(FontWeightBuilder)
TextAlignment: BuilderEntry[TextAlignmentBuilder] = BuilderEntry(TextAlignmentBuilder)
