"""
Breakpoint primitives - the responsive tiers and the class-name splice.

Breakpoint is a closed set of responsive widths. Each tier maps to the
short token Bootstrap uses as a class infix. Phone is the base tier and
has no token, so a rule scoped to it renders like an unscoped rule.
"""

from __future__ import annotations

from enum import Enum


class Breakpoint(str, Enum):
    """Responsive width tiers, smallest first."""

    PHONE = "phone"  # < 576px
    TABLET = "tablet"  # >= 576px
    LAPTOP = "laptop"  # >= 768px
    DESKTOP = "desktop"  # >= 992px
    WIDESCREEN = "widescreen"  # >= 1200px
    ULTRAWIDE = "ultrawide"  # >= 1400px

    @property
    def token(self) -> str:
        """Class infix for this tier ("" for phone)."""
        return _BREAKPOINT_TOKENS[self]

    @classmethod
    def parse(cls, name: str) -> Breakpoint:
        """Parse a breakpoint from its name ('tablet') or token ('sm')."""
        name = name.strip().lower()

        for member in cls:
            if member.value == name:
                return member

        for member, token in _BREAKPOINT_TOKENS.items():
            if token and token == name:
                return member

        raise ValueError(f"Unknown breakpoint: {name}")


# Token mapping (module level to avoid str-Enum member issues)
_BREAKPOINT_TOKENS: dict[Breakpoint, str] = {
    Breakpoint.PHONE: "",
    Breakpoint.TABLET: "sm",
    Breakpoint.LAPTOP: "md",
    Breakpoint.DESKTOP: "lg",
    Breakpoint.WIDESCREEN: "xl",
    Breakpoint.ULTRAWIDE: "xxl",
}


def breakpoint_token(breakpoint: Breakpoint | None) -> str:
    """Get the class token for a breakpoint, or "" when there is none."""
    if breakpoint is None:
        return ""
    return breakpoint.token


def splice_breakpoint(class_name: str, token: str) -> str:
    """
    Insert a breakpoint token into a utility class name.

    The token goes right after the first hyphen, leaving everything after
    it untouched:

        text-primary + md  -> text-md-primary
        d-inline-flex + md -> d-md-inline-flex

    A class with no hyphen (or only a leading one) gets the token as a
    prefix instead:

        clearfix + md -> md-clearfix

    An empty token leaves the class name unchanged.

    Args:
        class_name: Base utility class name
        token: Breakpoint token (e.g. "sm", "md")

    Returns:
        The responsive class name
    """
    if not token:
        return class_name

    dash = class_name.find("-")
    if dash > 0:
        return f"{class_name[: dash + 1]}{token}-{class_name[dash + 1 :]}"

    return f"{token}-{class_name}"
