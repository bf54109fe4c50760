"""
Interaction builder - user-select and pointer-events in one rule.

Each preset sets both fields; a rule renders one class (and one
declaration) per field.
"""

from __future__ import annotations

from typing import Self

from chuk_css_builders.builders.base import BuilderEntry, StyleBuilder


class InteractionBuilder(StyleBuilder):
    """Selection and pointer behavior presets."""

    adapter_name = "interaction"

    def set(self, user_select: str, pointer_events: str) -> Self:
        """Append a (user-select, pointer-events) rule."""
        return self._chain_value(user_select, pointer_events)

    @property
    def none(self) -> Self:
        return self.set("none", "none")

    @property
    def all(self) -> Self:
        return self.set("auto", "auto")

    @property
    def no_select(self) -> Self:
        return self.set("none", "auto")

    @property
    def no_pointer(self) -> Self:
        return self.set("auto", "none")

    @property
    def text(self) -> Self:
        return self.set("text", "auto")

    @property
    def all_text(self) -> Self:
        return self.set("all", "auto")


Interaction: BuilderEntry[InteractionBuilder] = BuilderEntry(InteractionBuilder)
