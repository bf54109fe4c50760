"""
Pydantic models for the builder system.

This module provides:
- AdapterSpec: A complete property adapter table
- TokenSpec: How one recognised token renders
- QualifierSpec: A side, axis or sub-property that narrows a rule
- AdapterMetadata: Lightweight listing entry
"""

from chuk_css_builders.models.adapter import (
    AdapterMetadata,
    AdapterSpec,
    QualifierSpec,
    TokenSpec,
)

__all__ = [
    "AdapterMetadata",
    "AdapterSpec",
    "QualifierSpec",
    "TokenSpec",
]
