"""
Core primitives - the rule accumulation and rendering protocol.

Everything property-specific lives in adapters; this layer only knows:
- Breakpoint: Responsive tiers and their class tokens
- splice_breakpoint: Breakpoint insertion into a class name
- Rule / RuleList: The records a builder accumulates
- render_classes / render_styles / render: The dual-mode fold
"""

from chuk_css_builders.core.breakpoint import Breakpoint, breakpoint_token, splice_breakpoint
from chuk_css_builders.core.renderer import render, render_classes, render_styles
from chuk_css_builders.core.rules import Rule, RuleList

__all__ = [
    # Breakpoints
    "Breakpoint",
    "breakpoint_token",
    "splice_breakpoint",
    # Rules
    "Rule",
    "RuleList",
    # Rendering
    "render",
    "render_classes",
    "render_styles",
]
