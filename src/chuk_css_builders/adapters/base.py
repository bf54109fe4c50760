"""
Property adapters - the pluggable half of the rendering protocol.

An adapter answers two questions about a rule's payload: which utility
class expresses it, and which CSS declarations express it. Either answer
may be "none", which the renderer treats as "skip this rule in this mode".
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from chuk_css_builders.core.rules import Rule
from chuk_css_builders.models.adapter import AdapterSpec, TokenSpec


class PropertyAdapter(ABC):
    """
    Contract between the renderer and one styling domain.

    Subclasses supply the recognised tokens, the default payload and the
    two lookups. Nothing here raises for unknown payloads; they simply
    have no class (and usually a raw inline style).
    """

    name: str

    @property
    @abstractmethod
    def legal_tokens(self) -> frozenset[str]:
        """Closed set of recognised value tokens."""

    @property
    @abstractmethod
    def default_payload(self) -> tuple[str, str | None]:
        """(value, qualifier) used when a rule must be synthesized."""

    @abstractmethod
    def class_of(self, rule: Rule) -> str | None:
        """Base class name for a rule, or None if it has no class form."""

    @abstractmethod
    def style_of(self, rule: Rule) -> list[str] | None:
        """CSS declarations for a rule, or None if it is class only."""

    def class_names(self, rule: Rule) -> list[str]:
        """All class names a rule contributes (before breakpoint splicing)."""
        name = self.class_of(rule)
        return [name] if name else []

    def is_known(self, value: str) -> bool:
        """Whether a value is one of the recognised tokens."""
        return value in self.legal_tokens

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class TableAdapter(PropertyAdapter):
    """
    Adapter driven by a declarative table.

    Class names are built as ``{class_base}{qualifier infix}-{token class}``
    (just the token class when the prefix is empty). Declarations are
    ``{property}: {token style}`` for every property the qualifier writes
    to, or the token's explicit declaration list.
    """

    def __init__(self, spec: AdapterSpec):
        """
        Initialize the adapter from a table.

        Args:
            spec: Validated adapter table
        """
        self.spec = spec
        self.name = spec.name
        self._tokens = spec.all_tokens()

    @property
    def legal_tokens(self) -> frozenset[str]:
        return self._tokens

    @property
    def default_payload(self) -> tuple[str, str | None]:
        return (self.spec.default_value, self.spec.default_qualifier)

    def lookup(self, rule: Rule) -> TokenSpec | None:
        """Find the token entry for a rule, honouring qualifier tables."""
        return self.spec.token_table(rule.qualifier).get(rule.value)

    def class_of(self, rule: Rule) -> str | None:
        token = self.lookup(rule)
        if token is None or token.class_name is None:
            return None

        qualifier = self.spec.get_qualifier(rule.qualifier)
        prefix = f"{self.spec.class_base}{qualifier.class_infix}"
        if not prefix:
            return token.class_name
        if not token.class_name:
            return prefix
        return f"{prefix}-{token.class_name}"

    def style_of(self, rule: Rule) -> list[str] | None:
        token = self.lookup(rule)

        if token is None:
            # Raw CSS value
            if not self.spec.raw_style or not rule.value:
                return None
            value = rule.value
        elif token.declarations:
            return list(token.declarations)
        elif token.style is None:
            return None
        else:
            value = token.style

        qualifier = self.spec.get_qualifier(rule.qualifier)
        return [f"{prop}: {value}" for prop in qualifier.properties]


class PairedAdapter(PropertyAdapter):
    """
    Adapter combining two tables, one per payload field.

    The rule's value is looked up in the first table and its qualifier in
    the second; each contributes its own class and declaration. Used for
    interaction, where one rule sets both user-select and pointer-events.
    """

    def __init__(self, spec: AdapterSpec, first: TableAdapter, second: TableAdapter):
        """
        Initialize the paired adapter.

        Args:
            spec: The paired table (name, defaults)
            first: Table for the value field
            second: Table for the qualifier field
        """
        self.spec = spec
        self.name = spec.name
        self.first = first
        self.second = second

    @property
    def legal_tokens(self) -> frozenset[str]:
        return self.first.legal_tokens

    @property
    def default_payload(self) -> tuple[str, str | None]:
        return (self.spec.default_value, self.spec.default_qualifier)

    def _split(self, rule: Rule) -> tuple[Rule, Rule]:
        return (
            Rule(rule.value, None, rule.breakpoint),
            Rule(rule.qualifier or "", None, rule.breakpoint),
        )

    def class_of(self, rule: Rule) -> str | None:
        names = self.class_names(rule)
        return names[0] if names else None

    def class_names(self, rule: Rule) -> list[str]:
        first, second = self._split(rule)
        return self.first.class_names(first) + self.second.class_names(second)

    def style_of(self, rule: Rule) -> list[str] | None:
        first, second = self._split(rule)
        declarations = (self.first.style_of(first) or []) + (self.second.style_of(second) or [])
        return declarations or None
