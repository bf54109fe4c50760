"""
Adapter registry - builds runtime adapters from tables and hands them out.

The registry provides access to both the built-in library tables and
project-owned overrides, plus adapters registered in code.
"""

from __future__ import annotations

import logging
from pathlib import Path

from chuk_css_builders import config
from chuk_css_builders.adapters.base import PairedAdapter, PropertyAdapter, TableAdapter
from chuk_css_builders.adapters.loader import AdapterLoader
from chuk_css_builders.constants import ErrorMessages
from chuk_css_builders.models.adapter import AdapterSpec

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """
    Builds and caches property adapters.

    Tables are loaded lazily on first lookup. Paired tables are resolved
    against the other tables in the same registry.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
        loader: AdapterLoader | None = None,
    ):
        """
        Initialize the registry.

        Args:
            library_path: Path to built-in table library
            project_path: Path to project tables (overrides)
            loader: Preconfigured loader (takes precedence over the paths)
        """
        self.loader = loader or AdapterLoader(library_path=library_path, project_path=project_path)
        self._adapters: dict[str, PropertyAdapter] = {}
        self._loaded = False

    def get_adapter(self, name: str) -> PropertyAdapter | None:
        """
        Get an adapter by name.

        Args:
            name: Adapter name (e.g. 'color', 'margin')

        Returns:
            PropertyAdapter or None if not found
        """
        self._ensure_loaded()
        return self._adapters.get(name)

    def require_adapter(self, name: str) -> PropertyAdapter:
        """
        Get an adapter by name, failing loudly when it is missing.

        Raises:
            ValueError: If no adapter has that name
        """
        adapter = self.get_adapter(name)
        if adapter is None:
            raise ValueError(ErrorMessages.ADAPTER_NOT_FOUND.format(name=name))
        return adapter

    def list_adapters(self) -> list[str]:
        """Names of all available adapters."""
        self._ensure_loaded()
        return sorted(self._adapters)

    def register_adapter(self, adapter: PropertyAdapter) -> str:
        """
        Register an adapter programmatically.

        Replaces any adapter already registered under the same name.

        Args:
            adapter: Adapter to register

        Returns:
            The adapter name
        """
        self._ensure_loaded()
        self._adapters[adapter.name] = adapter
        logger.debug(f"Registered adapter '{adapter.name}'")
        return adapter.name

    def register_table(self, spec: AdapterSpec) -> PropertyAdapter:
        """
        Build an adapter from a table and register it.

        Args:
            spec: Validated adapter table

        Returns:
            The registered adapter
        """
        self._ensure_loaded()
        adapter = self._build(spec, {**self._table_specs(), spec.name: spec})
        if adapter is None:
            raise ValueError(
                ErrorMessages.PAIRED_PARTS.format(
                    name=spec.name, first=spec.parts[0], second=spec.parts[1]
                )
            )
        self.register_adapter(adapter)
        return adapter

    def reload(self) -> None:
        """Drop every adapter and reload tables from disk."""
        self.loader.clear_cache()
        self._adapters.clear()
        self._loaded = False

    def _ensure_loaded(self) -> None:
        """Load all tables on first use."""
        if self._loaded:
            return
        self._loaded = True

        specs = self.loader.load_all()
        for spec in specs.values():
            adapter = self._build(spec, specs)
            if adapter is not None:
                self._adapters[spec.name] = adapter

        logger.debug(f"Built {len(self._adapters)} adapters")

    def _table_specs(self) -> dict[str, AdapterSpec]:
        """Specs of table-backed adapters currently registered."""
        return {
            name: adapter.spec
            for name, adapter in self._adapters.items()
            if isinstance(adapter, TableAdapter)
        }

    def _build(self, spec: AdapterSpec, specs: dict[str, AdapterSpec]) -> PropertyAdapter | None:
        """Create the runtime adapter for a table."""
        if not spec.is_paired:
            return TableAdapter(spec)

        first_name, second_name = spec.parts
        first = specs.get(first_name)
        second = specs.get(second_name)
        if first is None or second is None:
            logger.warning(
                ErrorMessages.PAIRED_PARTS.format(
                    name=spec.name, first=first_name, second=second_name
                )
            )
            return None

        return PairedAdapter(spec, TableAdapter(first), TableAdapter(second))


_default_registry: AdapterRegistry | None = None


def get_default_registry() -> AdapterRegistry:
    """The process-wide registry builders resolve their adapters from."""
    global _default_registry
    if _default_registry is None:
        _default_registry = AdapterRegistry(
            library_path=config.LIBRARY_PATH,
            project_path=config.PROJECT_ADAPTERS_DIR,
        )
    return _default_registry


def set_default_registry(registry: AdapterRegistry | None) -> None:
    """Replace the process-wide registry (None resets to the default)."""
    global _default_registry
    _default_registry = registry


def reset_default_registry() -> None:
    """Drop the process-wide registry so the next lookup rebuilds it."""
    set_default_registry(None)


def get_adapter(name: str) -> PropertyAdapter:
    """Look up an adapter in the default registry."""
    return get_default_registry().require_adapter(name)
