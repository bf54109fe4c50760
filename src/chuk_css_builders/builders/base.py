"""
Builder base - the chaining state machine shared by every property.

A builder owns one RuleList and changes it through three policies:

- value calls append a fresh rule (``Color.primary.secondary`` is two rules)
- breakpoint calls rescope the last rule (or seed one from the adapter's
  default payload when the list is empty)
- qualifier calls narrow the last rule while it still carries the
  adapter's default qualifier, and append a copy otherwise, so
  ``Margin.s3.from_top.from_left`` becomes two rules, top and left

Rendering is delegated to the pure functions in ``core.renderer``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar, Generic, Self, TypeVar

from chuk_css_builders.adapters.base import PropertyAdapter
from chuk_css_builders.adapters.registry import get_adapter
from chuk_css_builders.constants import GlobalKeyword
from chuk_css_builders.core.breakpoint import Breakpoint
from chuk_css_builders.core.renderer import render, render_classes, render_styles
from chuk_css_builders.core.rules import Rule, RuleList

_UNSET: Any = object()


class StyleBuilder:
    """
    Fluent rule accumulator for one property adapter.

    Subclasses set ``adapter_name`` and expose properties that call the
    ``_chain_*`` helpers. Every chaining call returns the builder itself.
    """

    adapter_name: ClassVar[str]

    def __init__(
        self,
        value: str | None = None,
        breakpoint: Breakpoint | None = None,
        *,
        rules: Iterable[Rule] | None = None,
        adapter: PropertyAdapter | None = None,
    ) -> None:
        """
        Create a builder.

        Args:
            value: Optional seed value for a first rule
            breakpoint: Breakpoint for the seed rule
            rules: Rules to copy into the builder (ignored when empty)
            adapter: Adapter to render with (defaults to ``adapter_name``
                in the default registry)
        """
        self._adapter = adapter
        self._rules = RuleList(rules)
        if value is not None:
            self._rules.append(Rule(value, self.adapter.default_payload[1], breakpoint))

    @property
    def adapter(self) -> PropertyAdapter:
        """The adapter this builder renders with."""
        if self._adapter is None:
            self._adapter = get_adapter(self.adapter_name)
        return self._adapter

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Immutable snapshot of the accumulated rules."""
        return self._rules.snapshot()

    # ----- Transitions -----

    def _chain_value(self, value: str, qualifier: str | None = _UNSET) -> Self:
        """Append a new rule with no breakpoint."""
        if qualifier is _UNSET:
            qualifier = self.adapter.default_payload[1]
        self._rules.append(Rule(value, qualifier, None))
        return self

    def _chain_breakpoint(self, breakpoint: Breakpoint) -> Self:
        """Scope the last rule to a breakpoint, seeding a default rule if empty."""
        if not self._rules:
            value, qualifier = self.adapter.default_payload
            self._rules.append(Rule(value, qualifier, breakpoint))
            return self

        self._rules.replace_last(breakpoint=breakpoint)
        return self

    def _chain_qualifier(self, qualifier: str | None) -> Self:
        """Narrow the last rule to a qualifier, or append a copy if already narrowed."""
        last = self._rules.last
        if last is None:
            self._rules.append(Rule(self.adapter.default_payload[0], qualifier, None))
            return self

        if last.qualifier == self.adapter.default_payload[1]:
            self._rules.replace_last(qualifier=qualifier)
        else:
            self._rules.append(Rule(last.value, qualifier, last.breakpoint))
        return self

    def on(self, breakpoint: Breakpoint | str) -> Self:
        """Scope the last rule to a breakpoint given by enum, name or token."""
        if not isinstance(breakpoint, Breakpoint):
            breakpoint = Breakpoint.parse(breakpoint)
        return self._chain_breakpoint(breakpoint)

    # ----- Breakpoints -----

    @property
    def on_phone(self) -> Self:
        return self._chain_breakpoint(Breakpoint.PHONE)

    @property
    def on_tablet(self) -> Self:
        return self._chain_breakpoint(Breakpoint.TABLET)

    @property
    def on_laptop(self) -> Self:
        return self._chain_breakpoint(Breakpoint.LAPTOP)

    @property
    def on_desktop(self) -> Self:
        return self._chain_breakpoint(Breakpoint.DESKTOP)

    @property
    def on_widescreen(self) -> Self:
        return self._chain_breakpoint(Breakpoint.WIDESCREEN)

    @property
    def on_ultrawide(self) -> Self:
        return self._chain_breakpoint(Breakpoint.ULTRAWIDE)

    # ----- Rendering -----

    def to_class(self) -> str:
        """Render as a space-separated utility class string."""
        return render_classes(self._rules, self.adapter)

    def to_style(self) -> str:
        """Render as an inline style string."""
        return render_styles(self._rules, self.adapter)

    def copy(self) -> Self:
        """Independent builder with the same rules and adapter."""
        return type(self)(rules=self._rules, adapter=self._adapter)

    def __str__(self) -> str:
        return render(self._rules, self.adapter)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._rules)!r})"


class RawValueBuilder(StyleBuilder):
    """Builder whose property accepts arbitrary CSS values."""

    def from_css(self, value: str) -> Self:
        """Append a raw CSS value (rendered as inline style only)."""
        return self._chain_value(value)


class KeywordStyleBuilder(RawValueBuilder):
    """Builder that also accepts the CSS-wide keywords (inline style only)."""

    @property
    def inherit(self) -> Self:
        return self._chain_value(GlobalKeyword.INHERIT.value)

    @property
    def initial(self) -> Self:
        return self._chain_value(GlobalKeyword.INITIAL.value)

    @property
    def revert(self) -> Self:
        return self._chain_value(GlobalKeyword.REVERT.value)

    @property
    def revert_layer(self) -> Self:
        return self._chain_value(GlobalKeyword.REVERT_LAYER.value)

    @property
    def unset(self) -> Self:
        return self._chain_value(GlobalKeyword.UNSET.value)


B = TypeVar("B", bound=StyleBuilder)


class BuilderEntry(Generic[B]):
    """
    Entry point for a builder type.

    Every attribute access starts a fresh builder, so ``Color.primary``
    and ``Color.secondary`` never share rules. Calling the entry creates
    a builder directly (``Color()`` is empty, ``Color("primary")`` seeded).
    """

    def __init__(self, builder_cls: type[B]):
        self._builder_cls = builder_cls

    @property
    def builder_cls(self) -> type[B]:
        return self._builder_cls

    def __call__(self, *args: Any, **kwargs: Any) -> B:
        return self._builder_cls(*args, **kwargs)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._builder_cls(), name)

    def __repr__(self) -> str:
        return f"BuilderEntry({self._builder_cls.__name__})"
