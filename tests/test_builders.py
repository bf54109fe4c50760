"""
Tests for the fluent builders.

Tests cover:
- Chaining policies (append, rescope-last, side coalescing)
- Rendering through to_class / to_style / str
- Each builder's tokens, keywords and raw values
- Builder entries, construction and copying
"""

import pytest

from chuk_css_builders import (
    BackgroundColor,
    Border,
    Breakpoint,
    Color,
    Display,
    Flex,
    FontWeight,
    Gap,
    Interaction,
    Margin,
    Overflow,
    Padding,
    Position,
    PositionOffset,
    Rule,
    TextAlignment,
    Visibility,
    ZIndex,
)
from chuk_css_builders.adapters import AdapterRegistry
from chuk_css_builders.builders import (
    ColorBuilder,
    FlexBuilder,
    InteractionBuilder,
    MarginBuilder,
    PositionOffsetBuilder,
)
from chuk_css_builders.models import AdapterSpec, TokenSpec


class TestScenarios:
    """End-to-end chains."""

    def test_color_on_tablet(self):
        """Breakpoint is spliced into the theme class."""
        assert "sm-primary" in Color.primary.on_tablet.to_class()
        assert Color.primary.on_tablet.to_class() == "text-sm-primary"

    def test_raw_color(self):
        """Raw colors are style only."""
        builder = Color.from_css("#ff0000")
        assert builder.to_style() == "color: #ff0000"
        assert builder.to_class() == ""

    def test_overflow_axis(self):
        """An axis narrows the preceding overflow rule."""
        builder = Overflow.hidden.x
        assert builder.to_class() == "overflow-x-hidden"
        assert builder.to_style() == "overflow-x: hidden"
        assert len(builder) == 1

    def test_margin_two_sides(self):
        """A second side call appends a copy with the same size."""
        builder = Margin.s3.from_top.from_left
        assert builder.rules == (Rule("3", "top"), Rule("3", "left"))
        assert builder.to_class() == "mt-3 ms-3"
        assert builder.to_style() == "margin-top: 1rem; margin-left: 1rem"

    def test_margin_sides_without_size(self):
        """Sides before any size use the default size."""
        builder = Margin.from_top.from_left
        assert builder.rules == (Rule("0", "top"), Rule("0", "left"))
        assert builder.to_class() == "mt-0 ms-0"

    def test_empty_builder(self):
        """An empty builder renders empty strings."""
        assert Color().to_class() == ""
        assert Color().to_style() == ""
        assert str(Color()) == ""
        assert len(Margin()) == 0


class TestChaining:
    """Tests for the chaining state machine."""

    def test_values_append(self):
        """Each value call adds a rule in order."""
        builder = Color.primary.secondary.danger
        assert [r.value for r in builder.rules] == ["primary", "secondary", "danger"]
        assert builder.to_class() == "text-primary text-secondary text-danger"

    def test_chaining_returns_same_builder(self):
        """Chaining mutates and returns the same object."""
        builder = Color()
        assert builder.primary is builder
        assert builder.on_tablet is builder
        assert len(builder) == 1

    def test_breakpoint_rescopes_last_rule(self):
        """A breakpoint applies to the most recent rule only."""
        builder = Color.primary.secondary.on_laptop
        assert builder.to_class() == "text-primary text-md-secondary"

    def test_breakpoint_replaces_breakpoint(self):
        """A second breakpoint overrides the first."""
        builder = Color.primary.on_tablet.on_desktop
        assert len(builder) == 1
        assert builder.to_class() == "text-lg-primary"

    def test_breakpoint_on_empty_seeds_default(self):
        """A breakpoint first seeds the adapter default payload."""
        builder = Display.on_laptop
        assert builder.rules == (Rule("block", None, Breakpoint.LAPTOP),)
        assert builder.to_class() == "d-md-block"

    def test_color_default_is_style_only(self):
        """The color default is a keyword, so it has only a style."""
        builder = Color.on_tablet
        assert builder.to_class() == ""
        assert builder.to_style() == "color: inherit"

    def test_phone_breakpoint_has_no_infix(self):
        """Phone is the base tier."""
        assert Color.primary.on_phone.to_class() == "text-primary"
        assert Color.primary.on_phone.rules[0].breakpoint == Breakpoint.PHONE

    def test_all_breakpoints(self):
        """Every tier splices its token."""
        assert Margin.s2.on_tablet.to_class() == "m-sm-2"
        assert Margin.s2.on_laptop.to_class() == "m-md-2"
        assert Margin.s2.on_desktop.to_class() == "m-lg-2"
        assert Margin.s2.on_widescreen.to_class() == "m-xl-2"
        assert Margin.s2.on_ultrawide.to_class() == "m-xxl-2"

    def test_on_accepts_names_and_tokens(self):
        """on() takes the enum, a tier name or a class token."""
        assert Color.primary.on(Breakpoint.TABLET).to_class() == "text-sm-primary"
        assert Color.primary.on("laptop").to_class() == "text-md-primary"
        assert Color.primary.on("xl").to_class() == "text-xl-primary"

    def test_on_unknown_breakpoint(self):
        """on() rejects unknown names."""
        with pytest.raises(ValueError):
            Color.primary.on("huge")

    def test_side_then_breakpoint(self):
        """A breakpoint after a side keeps the side."""
        builder = Margin.s3.from_top.on_tablet
        assert builder.rules == (Rule("3", "top", Breakpoint.TABLET),)
        assert builder.to_class() == "mt-sm-3"

    def test_side_copy_keeps_breakpoint(self):
        """The appended side rule copies the last rule's breakpoint."""
        builder = Padding.s2.on_laptop.from_top.from_bottom
        assert builder.to_class() == "pt-md-2 pb-md-2"

    def test_side_after_new_value(self):
        """A new value resets to the default side, which the next side narrows."""
        builder = Margin.s1.from_top.s2.from_bottom
        assert builder.to_class() == "mt-1 mb-2"

    def test_size_changes_keep_order(self):
        """Rules render in insertion order."""
        assert Margin.s5.s1.to_class() == "m-5 m-1"

    def test_idempotent_rendering(self):
        """Rendering does not change the builder."""
        builder = Margin.s3.from_top.on_tablet.s2.on_x
        first_class = builder.to_class()
        first_style = builder.to_style()
        assert builder.to_class() == first_class
        assert builder.to_style() == first_style
        assert str(builder) == first_class
        assert len(builder) == 2


class TestRendering:
    """Tests for the rendering surface."""

    def test_str_prefers_classes(self):
        """str() gives the class string when any class applies."""
        assert str(Color.primary) == "text-primary"
        assert str(Color.primary.from_css("red")) == "text-primary"

    def test_str_falls_back_to_style(self):
        """str() gives the style string when no class applies."""
        assert str(Color.from_css("red")) == "color: red"

    def test_mixed_modes(self):
        """Each mode keeps only the rules it can express."""
        builder = Color.primary.from_css("red").on_laptop
        assert builder.to_class() == "text-primary"
        assert builder.to_style() == "color: red"

    def test_multi_declaration_side(self):
        """Axis sides write two declarations."""
        assert Margin.s2.on_x.to_style() == "margin-left: 0.5rem; margin-right: 0.5rem"
        assert Padding.s4.on_y.to_class() == "py-4"

    def test_raw_spacing(self):
        """Raw spacing values are style only."""
        builder = Padding.from_css("7px").from_top
        assert builder.to_class() == ""
        assert builder.to_style() == "padding-top: 7px"


class TestConstruction:
    """Tests for builder entries and constructors."""

    def test_entry_starts_fresh_builders(self):
        """Attribute access on an entry never shares rules."""
        first = Color.primary
        second = Color.secondary
        assert first is not second
        assert first.to_class() == "text-primary"
        assert second.to_class() == "text-secondary"

    def test_entry_call(self):
        """Calling an entry creates a builder, optionally seeded."""
        assert isinstance(Color(), ColorBuilder)
        assert Color("primary").to_class() == "text-primary"
        assert Color("primary", Breakpoint.TABLET).to_class() == "text-sm-primary"

    def test_seed_uses_default_qualifier(self):
        """Seeded spacing rules apply to all sides."""
        assert Margin("3").rules == (Rule("3", "all"),)

    def test_from_rules(self):
        """Builders can be created from existing rules."""
        builder = MarginBuilder(rules=[Rule("3", "top"), Rule("2", "left", Breakpoint.TABLET)])
        assert builder.to_class() == "mt-3 ms-sm-2"

    def test_rules_snapshot_is_immutable(self):
        """rules is a tuple detached from the builder."""
        builder = Color.primary
        snapshot = builder.rules
        builder.secondary
        assert isinstance(snapshot, tuple)
        assert len(snapshot) == 1
        assert len(builder.rules) == 2

    def test_copy_is_independent(self):
        """Copies diverge without affecting the original."""
        builder = Margin.s3
        other = builder.copy()
        other.from_top
        assert builder.to_class() == "m-3"
        assert other.to_class() == "mt-3"
        assert isinstance(other, MarginBuilder)

    def test_entry_private_attribute(self):
        """Private names are not forwarded to builders."""
        with pytest.raises(AttributeError):
            Color._rules

    def test_entry_unknown_attribute(self):
        """Unknown chain names raise AttributeError."""
        with pytest.raises(AttributeError):
            Color.nonexistent

    def test_repr(self):
        """Reprs name the builder type."""
        assert repr(Color) == "BuilderEntry(ColorBuilder)"
        assert repr(Color.primary).startswith("ColorBuilder([Rule(value='primary'")

    def test_explicit_adapter(self):
        """A builder can render with an adapter outside the default registry."""
        registry = AdapterRegistry()
        adapter = registry.register_table(
            AdapterSpec(
                name="color",
                class_base="fg",
                css_property="color",
                default_value="inherit",
                tokens={"primary": TokenSpec(class_name="primary")},
            )
        )
        builder = ColorBuilder(adapter=adapter).primary.on_tablet
        assert builder.to_class() == "fg-sm-primary"
        assert Color.primary.to_class() == "text-primary"


class TestKeywords:
    """Tests for CSS-wide keywords."""

    @pytest.mark.parametrize(
        ("chain", "expected"),
        [
            ("inherit", "inherit"),
            ("initial", "initial"),
            ("revert", "revert"),
            ("revert_layer", "revert-layer"),
            ("unset", "unset"),
        ],
    )
    def test_keywords_are_style_only(self, chain, expected):
        """Keywords render as inline style and never as a class."""
        builder = getattr(Display, chain)
        assert builder.to_class() == ""
        assert builder.to_style() == f"display: {expected}"

    def test_color_keyword(self):
        """Color keywords use the color property."""
        assert Color.inherit.to_style() == "color: inherit"
        assert str(Color.unset) == "color: unset"


class TestColors:
    """Tests for color builders."""

    def test_theme_tokens_class_only(self):
        """Theme tokens have no inline style."""
        builder = Color.success.warning.info.light.dark.link.muted
        assert builder.to_style() == ""
        assert builder.to_class() == (
            "text-success text-warning text-info text-light text-dark text-link text-muted"
        )

    def test_background(self):
        """Background colors use the bg prefix and background-color property."""
        assert BackgroundColor.primary.on_laptop.to_class() == "bg-md-primary"
        assert BackgroundColor.body.white.transparent.to_class() == "bg-body bg-white bg-transparent"
        assert BackgroundColor.from_css("#fff").to_style() == "background-color: #fff"


class TestSpacing:
    """Tests for margin, padding and border."""

    def test_every_side(self):
        """Each side maps to its Bootstrap infix."""
        assert Margin.s1.from_top.to_class() == "mt-1"
        assert Margin.s1.from_right.to_class() == "me-1"
        assert Margin.s1.from_bottom.to_class() == "mb-1"
        assert Margin.s1.from_left.to_class() == "ms-1"
        assert Margin.s1.on_x.to_class() == "mx-1"
        assert Margin.s1.on_y.to_class() == "my-1"
        assert Margin.s1.from_start.to_class() == "ms-1"
        assert Margin.s1.from_end.to_class() == "me-1"

    def test_on_all_keeps_default(self):
        """on_all narrows to the sentinel, so the next side still narrows."""
        builder = Margin.s2.on_all.from_top
        assert builder.rules == (Rule("2", "top"),)

    def test_logical_sides_style(self):
        """Start and end use logical properties."""
        assert Padding.s3.from_start.to_style() == "padding-inline-start: 1rem"

    def test_side_by_name(self):
        """side() accepts a side name."""
        assert Margin.s2.side("bottom").to_class() == "mb-2"
        with pytest.raises(ValueError):
            Margin.s2.side("diagonal")

    def test_margin_auto(self):
        """Auto margins have a class and a style."""
        builder = Margin.auto.on_x
        assert builder.to_class() == "mx-auto"
        assert builder.to_style() == "margin-left: auto; margin-right: auto"

    def test_border(self):
        """Border sizes write border widths."""
        assert Border.s1.to_class() == "b-1"
        assert Border.s2.from_top.to_style() == "border-top-width: 2px"

    def test_all_sizes(self):
        """Sizes 0 to 5 follow the spacer scale."""
        builder = Padding.s0.s1.s2.s3.s4.s5
        assert builder.to_class() == "p-0 p-1 p-2 p-3 p-4 p-5"
        assert builder.to_style() == (
            "padding: 0; padding: 0.25rem; padding: 0.5rem; "
            "padding: 1rem; padding: 1.5rem; padding: 3rem"
        )


class TestLayout:
    """Tests for display, overflow, position, offsets, z-index and visibility."""

    def test_display(self):
        """Display tokens keep their hyphens after splicing."""
        assert Display.inline_flex.to_class() == "d-inline-flex"
        assert Display.inline_flex.on_laptop.to_class() == "d-md-inline-flex"
        assert Display.none.to_style() == "display: none"
        assert Display.table_cell.grid.to_class() == "d-table-cell d-grid"

    def test_overflow_unqualified(self):
        """Overflow without an axis covers both."""
        assert Overflow.auto.to_class() == "overflow-auto"
        assert Overflow.scroll.to_style() == "overflow: scroll"

    def test_overflow_both_axes(self):
        """A second axis appends a copy of the narrowed rule."""
        builder = Overflow.hidden.x.y
        assert builder.to_class() == "overflow-x-hidden overflow-y-hidden"
        assert builder.to_style() == "overflow-x: hidden; overflow-y: hidden"

    def test_overflow_axis_first(self):
        """An axis before any value uses the default value."""
        assert Overflow.y.to_class() == "overflow-y-auto"

    def test_overflow_raw(self):
        """Raw overflow values are style only."""
        builder = Overflow.from_css("clip").x
        assert builder.to_class() == ""
        assert builder.to_style() == "overflow-x: clip"

    def test_position(self):
        """Position schemes."""
        assert Position.absolute.to_class() == "position-absolute"
        assert Position.sticky.on_desktop.to_class() == "position-lg-sticky"
        assert Position.relative.to_style() == "position: relative"

    def test_position_offset(self):
        """Offsets pair an edge with an amount."""
        builder = PositionOffset.top_50.start_0
        assert builder.to_class() == "top-50 start-0"
        assert builder.to_style() == "top: 50%; left: 0"
        assert PositionOffset.end_100.bottom_0.to_style() == "right: 100%; bottom: 0"

    def test_position_offset_default(self):
        """A breakpoint first seeds a top offset of zero."""
        assert PositionOffset.on_laptop.to_class() == "top-md-0"

    def test_z_index(self):
        """The utility scale has classes; other values are style only."""
        assert ZIndex.n1.to_class() == "z-n1"
        assert ZIndex.z3.to_style() == "z-index: 3"
        assert ZIndex.value(10).to_class() == ""
        assert ZIndex.value(10).to_style() == "z-index: 10"
        assert ZIndex.from_css("999").to_style() == "z-index: 999"

    def test_z_index_default(self):
        """The z-index default is zero."""
        assert ZIndex.on_tablet.to_class() == "z-sm-0"

    def test_visibility(self):
        """Visibility classes have no prefix, so breakpoints are prepended."""
        assert Visibility.invisible.to_class() == "invisible"
        assert Visibility.invisible.to_style() == "visibility: hidden"
        assert Visibility.visible.on_tablet.to_class() == "sm-visible"


class TestFlex:
    """Tests for flex and gap."""

    def test_container(self):
        """Direction, wrapping and alignment combine in one builder."""
        builder = Flex.row.wrap.justify_center.align_items_center
        assert builder.to_class() == (
            "flex-row flex-wrap justify-content-center align-items-center"
        )
        assert builder.to_style() == (
            "flex-direction: row; flex-wrap: wrap; justify-content: center; align-items: center"
        )

    def test_justify_values(self):
        """Justify tokens map to the space-* values."""
        assert Flex.justify_between.to_style() == "justify-content: space-between"
        assert Flex.justify_start.to_style() == "justify-content: flex-start"

    def test_item(self):
        """Item properties."""
        assert Flex.fill.to_class() == "flex-fill"
        assert Flex.fill.to_style() == "flex: 1 1 auto"
        assert Flex.grow_1.shrink_0.to_class() == "flex-grow-1 flex-shrink-0"
        assert Flex.align_self_end.to_style() == "align-self: flex-end"

    def test_responsive_direction(self):
        """Breakpoints splice after the first hyphen."""
        assert Flex.column.on_laptop.row.on_desktop.to_class() == "flex-md-column flex-lg-row"

    def test_default(self):
        """A breakpoint first seeds a row direction."""
        assert Flex.on_tablet.to_class() == "flex-sm-row"

    def test_set(self):
        """set() takes any property and value."""
        assert Flex.set("flex-direction", "column-reverse").to_class() == "flex-column-reverse"

    def test_raw_values_need_a_property(self):
        """Raw flex values go through set() with an explicit property."""
        builder = Flex.set("flex-basis", "10rem")
        assert builder.to_class() == ""
        assert builder.to_style() == "flex-basis: 10rem"
        assert not hasattr(FlexBuilder, "from_css")
        with pytest.raises(AttributeError):
            Flex.from_css("1 1 0")

    def test_gap(self):
        """Gap sizes."""
        assert Gap.s3.to_class() == "gap-3"
        assert Gap.s3.to_style() == "gap: 1rem"
        assert Gap.from_css("2px").to_style() == "gap: 2px"


class TestTypography:
    """Tests for font weight and text alignment."""

    def test_font_weight(self):
        """Weights map to numeric values."""
        assert FontWeight.bold.to_class() == "fw-bold"
        assert FontWeight.bold.to_style() == "font-weight: 700"
        assert FontWeight.light.on_desktop.to_class() == "fw-lg-light"

    def test_text_alignment(self):
        """Alignment classes share the text prefix."""
        assert TextAlignment.center.on_laptop.to_class() == "text-md-center"
        assert TextAlignment.end.to_style() == "text-align: end"


class TestInteraction:
    """Tests for the interaction builder."""

    @pytest.mark.parametrize(
        ("chain", "classes"),
        [
            ("none", "user-select-none pointer-events-none"),
            ("all", "user-select-auto pointer-events-auto"),
            ("no_select", "user-select-none pointer-events-auto"),
            ("no_pointer", "user-select-auto pointer-events-none"),
            ("text", "user-select-text pointer-events-auto"),
            ("all_text", "user-select-all pointer-events-auto"),
        ],
    )
    def test_presets(self, chain, classes):
        """Each preset sets both fields."""
        assert getattr(Interaction, chain).to_class() == classes

    def test_style(self):
        """Both declarations are written."""
        assert Interaction.no_select.to_style() == "user-select: none; pointer-events: auto"

    def test_rule_payload(self):
        """The pointer-events token is carried as the qualifier."""
        assert Interaction.no_pointer.rules == (Rule("auto", "none"),)

    def test_no_raw_values(self):
        """Interaction only takes presets, so there is no raw entry."""
        assert not hasattr(InteractionBuilder, "from_css")
        with pytest.raises(AttributeError):
            Interaction.from_css("x")


class TestRawValues:
    """Tests for which builders accept raw CSS values."""

    @pytest.mark.parametrize(
        ("entry", "expected"),
        [
            (Color, "color: x"),
            (BackgroundColor, "background-color: x"),
            (Margin, "margin: x"),
            (Padding, "padding: x"),
            (Border, "border-width: x"),
            (Display, "display: x"),
            (Overflow, "overflow: x"),
            (Position, "position: x"),
            (Gap, "gap: x"),
            (ZIndex, "z-index: x"),
            (FontWeight, "font-weight: x"),
            (TextAlignment, "text-align: x"),
            (Visibility, "visibility: x"),
        ],
    )
    def test_from_css(self, entry, expected):
        """Raw values are style only."""
        builder = entry.from_css("x")
        assert builder.to_class() == ""
        assert builder.to_style() == expected

    def test_position_offset_uses_offset(self):
        """Offsets take raw values through offset() with an explicit edge."""
        assert not hasattr(PositionOffsetBuilder, "from_css")
        assert PositionOffset.offset("end", "2px").to_style() == "right: 2px"
