"""
Adapter loader - discovers and loads adapter tables.

Tables can come from:
1. Built-in library (shipped with package)
2. Project tables (a user directory of overrides)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_css_builders.config import ADAPTER_SCHEMA, LIBRARY_PATH
from chuk_css_builders.constants import ErrorMessages
from chuk_css_builders.models.adapter import AdapterMetadata, AdapterSpec, QualifierSpec, TokenSpec

logger = logging.getLogger(__name__)


class AdapterLoader:
    """
    Discovers and loads adapter tables.

    Tables are loaded from YAML files in the library and project directories.
    Project tables override library tables with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the adapter loader.

        Args:
            library_path: Path to built-in table library
            project_path: Path to project tables directory
        """
        self.library_path = library_path or LIBRARY_PATH
        self.project_path = project_path
        self._cache: dict[str, AdapterSpec] = {}

    def list_adapters(self) -> list[AdapterMetadata]:
        """
        List all available adapter tables.

        Returns tables from both library and project, with project
        tables taking precedence.
        """
        tables: dict[str, AdapterMetadata] = {}

        for base_path in self._search_paths():
            for path in sorted(base_path.glob("*.yaml")):
                spec = self._load_table_file(path)
                if spec:
                    tables[spec.name] = AdapterMetadata.from_spec(spec, path=str(path))

        return sorted(tables.values(), key=lambda m: m.name)

    def load_all(self) -> dict[str, AdapterSpec]:
        """
        Load every available table, keyed by adapter name.

        Project tables replace library tables with the same name.
        """
        specs: dict[str, AdapterSpec] = {}

        for base_path in self._search_paths():
            for path in sorted(base_path.glob("*.yaml")):
                spec = self._load_table_file(path)
                if spec:
                    specs[spec.name] = spec

        self._cache.update(specs)
        logger.debug(f"Loaded {len(specs)} adapter tables")
        return specs

    def get_table(self, name: str) -> AdapterSpec | None:
        """
        Get a table by name.

        Project tables take precedence over library tables.

        Args:
            name: Adapter name

        Returns:
            AdapterSpec if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for base_path in reversed(self._search_paths()):
            table_file = base_path / f"{name}.yaml"
            if table_file.exists():
                spec = self._load_table_file(table_file)
                if spec:
                    self._cache[name] = spec
                    return spec

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library table to the project for customization.

        Args:
            name: Adapter name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(ErrorMessages.ADAPTER_EXISTS.format(name=name))

        dest_file.write_text(library_file.read_text())

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def save_table(self, spec: AdapterSpec) -> Path:
        """
        Write a table to the project directory.

        Args:
            spec: Table to write

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        self.project_path.mkdir(parents=True, exist_ok=True)
        target_path = self.project_path / f"{spec.name}.yaml"

        with open(target_path, "w") as f:
            yaml.safe_dump(spec.to_yaml_dict(), f, default_flow_style=False, sort_keys=False)

        self._cache.pop(spec.name, None)
        return target_path

    def clear_cache(self) -> None:
        """Clear the table cache."""
        self._cache.clear()

    def _search_paths(self) -> list[Path]:
        """Existing table directories, lowest precedence first."""
        paths = []
        if self.library_path.exists():
            paths.append(self.library_path)
        if self.project_path and self.project_path.exists():
            paths.append(self.project_path)
        return paths

    def _load_table_file(self, path: Path) -> AdapterSpec | None:
        """Load a table from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)

            return self._parse_table(data)
        except (OSError, yaml.YAMLError, ValidationError, ValueError, TypeError) as e:
            logger.warning(f"Skipping adapter table {path}: {e}")
            return None

    def _parse_table(self, data: dict[str, Any]) -> AdapterSpec:
        """Parse a table from YAML data."""
        if not isinstance(data, dict):
            raise TypeError("adapter table must be a mapping")

        tokens = self._parse_tokens(data.get("tokens") or {})

        qualifiers = {}
        for name, qdata in (data.get("qualifiers") or {}).items():
            qdata = qdata or {}
            qualifiers[str(name)] = QualifierSpec(
                class_infix=str(qdata.get("class", "") or ""),
                properties=[str(p) for p in qdata.get("properties", [])],
                tokens=self._parse_tokens(qdata["tokens"]) if qdata.get("tokens") else None,
            )

        default_qualifier = data.get("default_qualifier")

        return AdapterSpec(
            schema=data.get("schema", ADAPTER_SCHEMA),
            name=data.get("name", "unknown"),
            description=data.get("description", ""),
            class_base=data.get("class_base", ""),
            css_property=data.get("property"),
            raw_style=data.get("raw_style", True),
            default_value=str(data.get("default_value", "")),
            default_qualifier=str(default_qualifier) if default_qualifier is not None else None,
            tokens=tokens,
            qualifiers=qualifiers,
            parts=data.get("parts", []),
        )

    def _parse_tokens(self, data: dict[Any, Any]) -> dict[str, TokenSpec]:
        """
        Parse a token table.

        YAML turns bare numbers into ints, so keys and values are
        normalized to strings here.
        """
        tokens: dict[str, TokenSpec] = {}
        for name, tdata in data.items():
            tdata = tdata or {}
            class_name = tdata.get("class")
            style = tdata.get("style")
            declarations = tdata.get("declarations")
            tokens[str(name)] = TokenSpec(
                class_name=str(class_name) if class_name is not None else None,
                style=str(style) if style is not None else None,
                declarations=[str(d) for d in declarations] if declarations else None,
            )
        return tokens
