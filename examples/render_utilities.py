#!/usr/bin/env python3
"""
Example: Building responsive utility classes and inline styles.

This demonstrates how the fluent builders accumulate rules and render
them either as utility classes or as an inline style string, and how a
project directory can override the built-in adapter tables.

Usage:
    python examples/render_utilities.py
"""

import logging
import tempfile
from pathlib import Path

from chuk_css_builders import (
    AdapterLoader,
    AdapterRegistry,
    Color,
    Display,
    Flex,
    Interaction,
    Margin,
    Overflow,
    Padding,
    set_default_registry,
)


def show(label: str, builder) -> None:
    print(f"  {label}")
    print(f"    class: {builder.to_class()!r}")
    print(f"    style: {builder.to_style()!r}")


def main() -> None:
    """Demonstrate the builders."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    print("CHUK CSS Builders Demo")
    print("=" * 40)
    print()

    print("Theme tokens and raw values:")
    show("Color.primary.on_tablet", Color.primary.on_tablet)
    show('Color.from_css("#ff0000")', Color.from_css("#ff0000"))
    show("Color.primary.from_css(...)", Color.primary.from_css("rebeccapurple").on_laptop)
    print()

    print("Spacing sides:")
    show("Margin.s3.from_top.from_left", Margin.s3.from_top.from_left)
    show("Padding.s2.on_x.on_desktop", Padding.s2.on_x.on_desktop)
    show("Margin.auto.on_x", Margin.auto.on_x)
    print()

    print("Layout:")
    show("Display.none.on_phone.flex.on_laptop", Display.none.on_phone.flex.on_laptop)
    show("Overflow.hidden.x", Overflow.hidden.x)
    show("Flex.column.on_tablet.justify_between", Flex.column.on_tablet.justify_between)
    show("Interaction.no_select", Interaction.no_select)
    print()

    # Project overrides: copy a library table and change its prefix
    with tempfile.TemporaryDirectory() as tmp:
        project = Path(tmp)
        loader = AdapterLoader(project_path=project)
        path = loader.copy_to_project("color")
        path.write_text(path.read_text().replace("class_base: text", "class_base: fg"))

        set_default_registry(AdapterRegistry(project_path=project))
        print(f"With project tables from {project}:")
        show("Color.primary.on_tablet", Color.primary.on_tablet)
        set_default_registry(None)

    print()
    print("Available adapters:")
    for meta in AdapterLoader().list_adapters():
        print(f"  {meta.name}: {meta.description}")


if __name__ == "__main__":
    main()
