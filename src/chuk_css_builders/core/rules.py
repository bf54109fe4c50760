"""
Rule model - the records a builder accumulates.

A Rule is one (value, qualifier, breakpoint) triple. The qualifier is the
adapter-specific second field of the payload: a side for spacing, an axis
for overflow, a CSS property for flex, or the paired pointer-events token
for interaction. Most adapters leave it at None.

RuleList is the ordered sequence a single builder owns. It only changes
through two transitions, append and replace_last, so every mutation
policy built on top of it stays easy to audit.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from typing import Any

from chuk_css_builders.core.breakpoint import Breakpoint


@dataclass(frozen=True)
class Rule:
    """A single accumulated style rule."""

    value: str
    qualifier: str | None = None
    breakpoint: Breakpoint | None = None

    @property
    def payload(self) -> tuple[str, str | None]:
        """The adapter-facing part of the rule."""
        return (self.value, self.qualifier)


class RuleList:
    """
    Ordered, mutable sequence of rules.

    Insertion order is significant: renderers walk the rules front to
    back and never reorder or deduplicate them.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[Rule] | None = None) -> None:
        self._rules: list[Rule] = list(rules) if rules else []

    @property
    def last(self) -> Rule | None:
        """The most recent rule, or None when empty."""
        return self._rules[-1] if self._rules else None

    def append(self, rule: Rule) -> None:
        """Push a new rule at the end."""
        self._rules.append(rule)

    def replace_last(self, **changes: Any) -> Rule:
        """
        Replace the last rule with a copy carrying the given field changes.

        Args:
            **changes: Rule fields to overwrite (value, qualifier, breakpoint)

        Returns:
            The replacement rule

        Raises:
            IndexError: If the list is empty
        """
        if not self._rules:
            raise IndexError("replace_last on an empty RuleList")

        updated = replace(self._rules[-1], **changes)
        self._rules[-1] = updated
        return updated

    def snapshot(self) -> tuple[Rule, ...]:
        """Immutable view of the current rules."""
        return tuple(self._rules)

    def copy(self) -> RuleList:
        """Independent copy of this list."""
        return RuleList(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __getitem__(self, index: int) -> Rule:
        return self._rules[index]

    def __bool__(self) -> bool:
        return bool(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleList):
            return NotImplemented
        return self._rules == other._rules

    def __repr__(self) -> str:
        return f"RuleList({self._rules!r})"
