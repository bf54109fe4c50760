"""
Adapter table models - the declarative lookup tables behind each property.

A table says which tokens a property recognises, which utility class
and which CSS value each token maps to, and which qualifiers (sides,
axes, sub-properties) can narrow a rule. Tables are loaded from YAML and
frozen once validated.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from chuk_css_builders.constants import ErrorMessages


class TokenSpec(BaseModel):
    """How one recognised token renders."""

    class_name: str | None = Field(
        default=None,
        alias="class",
        description="Class suffix appended after the prefix (None = no class)",
    )
    style: str | None = Field(
        default=None,
        description="CSS value written for each qualifier property (None = class only)",
    )
    declarations: list[str] | None = Field(
        default=None,
        description="Explicit declarations, used instead of property: style",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def has_style(self) -> bool:
        """Whether this token emits any inline style."""
        return self.style is not None or bool(self.declarations)


class QualifierSpec(BaseModel):
    """A side, axis or sub-property that narrows a rule."""

    class_infix: str = Field(
        default="",
        alias="class",
        description="Text appended to the class base for this qualifier",
    )
    properties: list[str] = Field(
        default_factory=list,
        description="CSS properties a declaration is written for",
    )
    tokens: dict[str, TokenSpec] | None = Field(
        default=None,
        description="Token table replacing the adapter-level one",
    )

    model_config = {"frozen": True, "populate_by_name": True}


class AdapterSpec(BaseModel):
    """
    A complete property adapter table.

    Either a plain table (tokens + optional qualifiers) or a paired
    table that combines two other tables, one per payload field.
    """

    # Metadata
    schema_version: str = Field("adapter/v1", alias="schema")
    name: str = Field(..., description="Adapter name")
    description: str = Field("", description="Adapter description")

    # Class construction
    class_base: str = Field(
        default="",
        description="Class prefix shared by every token (e.g. 'd', 'text', 'm')",
    )

    # Style construction
    css_property: str | None = Field(
        default=None,
        alias="property",
        description="CSS property used when the adapter has no qualifiers",
    )
    raw_style: bool = Field(
        default=True,
        description="Whether unrecognised values render as inline style",
    )

    # Bootstrap payload when a breakpoint or qualifier arrives first
    default_value: str = Field(..., description="Default value token")
    default_qualifier: str | None = Field(
        default=None,
        description="Default (sentinel) qualifier",
    )

    tokens: dict[str, TokenSpec] = Field(default_factory=dict)
    qualifiers: dict[str, QualifierSpec] = Field(default_factory=dict)

    # Paired adapters
    parts: list[str] = Field(
        default_factory=list,
        description="Names of the two tables a paired adapter combines",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @model_validator(mode="after")
    def _check_qualifiers(self) -> AdapterSpec:
        if self.parts or self.default_qualifier is None:
            return self
        if not self.qualifiers:
            raise ValueError(ErrorMessages.MISSING_QUALIFIERS.format(name=self.name))
        if self.default_qualifier not in self.qualifiers:
            raise ValueError(
                ErrorMessages.UNKNOWN_QUALIFIER.format(
                    qualifier=self.default_qualifier, name=self.name
                )
            )
        return self

    @property
    def is_paired(self) -> bool:
        """Whether this table combines two other tables."""
        return len(self.parts) == 2

    def get_qualifier(self, qualifier: str | None) -> QualifierSpec:
        """
        Get the qualifier spec for a rule.

        Adapters without qualifiers get a synthetic one writing to
        ``property``. Unknown qualifiers fall back to the default one.
        """
        if not self.qualifiers:
            return QualifierSpec(properties=[self.css_property] if self.css_property else [])

        if qualifier is not None and qualifier in self.qualifiers:
            return self.qualifiers[qualifier]

        if self.default_qualifier is not None:
            return self.qualifiers[self.default_qualifier]

        return QualifierSpec(properties=[self.css_property] if self.css_property else [])

    def token_table(self, qualifier: str | None) -> dict[str, TokenSpec]:
        """Token table in effect for a qualifier."""
        spec = self.get_qualifier(qualifier)
        if spec.tokens is not None:
            return spec.tokens
        return self.tokens

    def all_tokens(self) -> frozenset[str]:
        """Every token recognised under any qualifier."""
        names = set(self.tokens)
        for spec in self.qualifiers.values():
            if spec.tokens:
                names.update(spec.tokens)
        return frozenset(names)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        result: dict[str, Any] = {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "default_value": self.default_value,
        }
        if self.class_base:
            result["class_base"] = self.class_base
        if self.css_property:
            result["property"] = self.css_property
        if not self.raw_style:
            result["raw_style"] = False
        if self.default_qualifier is not None:
            result["default_qualifier"] = self.default_qualifier
        if self.parts:
            result["parts"] = list(self.parts)
        if self.tokens:
            result["tokens"] = {
                name: token.model_dump(by_alias=True, exclude_none=True)
                for name, token in self.tokens.items()
            }
        if self.qualifiers:
            result["qualifiers"] = {
                name: qualifier.model_dump(by_alias=True, exclude_none=True)
                for name, qualifier in self.qualifiers.items()
            }
        return result


class AdapterMetadata(BaseModel):
    """Lightweight metadata for listing adapters."""

    name: str
    description: str
    tokens: list[str]
    qualifiers: list[str]
    path: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_spec(cls, spec: AdapterSpec, path: str | None = None) -> AdapterMetadata:
        """Create metadata from an adapter table."""
        return cls(
            name=spec.name,
            description=spec.description,
            tokens=sorted(spec.all_tokens()),
            qualifiers=list(spec.qualifiers),
            path=path,
        )
