"""
Renderer - folds a rule sequence into class or style text.

Both modes walk the rules once, in order. A rule the adapter cannot
express in the current mode contributes nothing to that mode; that is
the normal case for theme tokens in style mode and raw CSS values in
class mode, not an error.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from chuk_css_builders.config import CLASS_SEPARATOR, STYLE_SEPARATOR
from chuk_css_builders.core.breakpoint import breakpoint_token, splice_breakpoint
from chuk_css_builders.core.rules import Rule

if TYPE_CHECKING:
    from chuk_css_builders.adapters.base import PropertyAdapter


def render_classes(rules: Iterable[Rule], adapter: PropertyAdapter) -> str:
    """
    Render rules as a space-separated utility class string.

    Args:
        rules: Rules in insertion order
        adapter: Adapter that maps payloads to class names

    Returns:
        Class names joined by a single space ("" when nothing applies)
    """
    classes: list[str] = []

    for rule in rules:
        names = adapter.class_names(rule)
        if not names:
            continue

        token = breakpoint_token(rule.breakpoint)
        classes.extend(splice_breakpoint(name, token) for name in names)

    return CLASS_SEPARATOR.join(classes)


def render_styles(rules: Iterable[Rule], adapter: PropertyAdapter) -> str:
    """
    Render rules as an inline style string.

    An adapter may return several declarations for one rule (a horizontal
    margin sets both left and right); they are flattened into the same
    sequence.

    Args:
        rules: Rules in insertion order
        adapter: Adapter that maps payloads to CSS declarations

    Returns:
        Declarations joined by "; " ("" when nothing applies)
    """
    declarations: list[str] = []

    for rule in rules:
        styles = adapter.style_of(rule)
        if styles:
            declarations.extend(styles)

    return STYLE_SEPARATOR.join(declarations)


def render(rules: Iterable[Rule], adapter: PropertyAdapter) -> str:
    """Render as classes when any apply, otherwise as inline style."""
    rules = list(rules)
    classes = render_classes(rules, adapter)
    if classes:
        return classes
    return render_styles(rules, adapter)
