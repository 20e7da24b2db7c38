"""Tests for the CSS-like selector builder."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from selectorkit.errors import DuplicateFragment, OrderingViolation, SelectorError
from selectorkit.selector import FragmentKind, Selector, combine, css_selector_builder

builder = css_selector_builder


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestStringify:
    def test_id_and_classes(self) -> None:
        sel = builder.id("main").class_("container").class_("editable")
        assert sel.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self) -> None:
        sel = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_every_kind_in_order(self) -> None:
        sel = (
            builder.element("div")
            .id("main")
            .class_("box")
            .attr("data-x")
            .pseudo_class("hover")
            .pseudo_element("before")
        )
        assert sel.stringify() == "div#main.box[data-x]:hover::before"

    def test_pseudo_element_alone(self) -> None:
        assert builder.pseudo_element("after").stringify() == "::after"

    def test_repeated_class_attr_and_pseudo_class(self) -> None:
        sel = (
            builder.class_("a")
            .class_("b")
            .attr("x")
            .attr("y")
            .pseudo_class("first-child")
            .pseudo_class("hover")
        )
        assert sel.stringify() == ".a.b[x][y]:first-child:hover"

    def test_stringify_is_idempotent(self) -> None:
        sel = builder.element("p").class_("note")
        assert sel.stringify() == sel.stringify() == "p.note"

    def test_str_matches_stringify(self) -> None:
        sel = builder.element("li").pseudo_class("last-child")
        assert str(sel) == sel.stringify()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------


class TestFacade:
    def test_empty(self) -> None:
        assert builder.stringify() == ""
        assert builder.kind is FragmentKind.NONE

    def test_facade_is_plain_selector(self) -> None:
        assert builder == Selector()

    def test_kind_tracks_last_fragment(self) -> None:
        assert builder.element("a").kind is FragmentKind.ELEMENT
        assert builder.element("a").attr("x").kind is FragmentKind.ATTRIBUTE


# ---------------------------------------------------------------------------
# Immutability
# ---------------------------------------------------------------------------


class TestImmutability:
    def test_receiver_unchanged(self) -> None:
        base = builder.element("a")
        base.class_("x")
        assert base.stringify() == "a"
        assert base.kind is FragmentKind.ELEMENT

    def test_branches_are_independent(self) -> None:
        base = builder.element("a")
        left = base.class_("x")
        right = base.attr("href")
        assert left.stringify() == "a.x"
        assert right.stringify() == "a[href]"

    def test_facade_not_polluted(self) -> None:
        builder.element("div").id("main")
        assert builder.stringify() == ""

    def test_frozen(self) -> None:
        sel = builder.element("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            sel.text = "b"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Duplicates
# ---------------------------------------------------------------------------


class TestDuplicateFragment:
    def test_element_twice(self) -> None:
        with pytest.raises(DuplicateFragment):
            builder.element("a").element("b")

    def test_id_twice(self) -> None:
        with pytest.raises(DuplicateFragment):
            builder.id("a").id("b")

    def test_pseudo_element_twice(self) -> None:
        with pytest.raises(DuplicateFragment):
            builder.pseudo_element("before").pseudo_element("after")

    def test_message(self) -> None:
        with pytest.raises(DuplicateFragment) as exc_info:
            builder.element("a").element("b")
        assert str(exc_info.value) == (
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector"
        )

    def test_records_kind(self) -> None:
        with pytest.raises(DuplicateFragment) as exc_info:
            builder.id("a").id("b")
        assert exc_info.value.kind is FragmentKind.ID


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestOrderingViolation:
    @pytest.mark.parametrize(
        "build",
        [
            lambda: builder.id("x").element("y"),
            lambda: builder.class_("x").id("y"),
            lambda: builder.attr("x").class_("y"),
            lambda: builder.pseudo_class("x").attr("y"),
            lambda: builder.pseudo_element("x").pseudo_class("y"),
            lambda: builder.pseudo_element("x").id("y"),
        ],
    )
    def test_out_of_order(self, build) -> None:
        with pytest.raises(OrderingViolation):
            build()

    def test_message(self) -> None:
        with pytest.raises(OrderingViolation) as exc_info:
            builder.id("x").element("y")
        assert str(exc_info.value) == (
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )

    def test_ordering_checked_before_duplicates(self) -> None:
        # element after class is out of order even though element repeats.
        with pytest.raises(OrderingViolation):
            builder.element("a").class_("x").element("b")

    def test_both_are_selector_errors(self) -> None:
        assert issubclass(OrderingViolation, SelectorError)
        assert issubclass(DuplicateFragment, SelectorError)
        assert issubclass(SelectorError, ValueError)

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="selectorkit.selector.model"):
            with pytest.raises(OrderingViolation):
                builder.id("x").element("y")
        assert "Rejected element after id" in caplog.text


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestCombine:
    def test_adjacent_sibling(self) -> None:
        sel = combine(builder.element("div").id("main"), "+", builder.element("span"))
        assert sel.stringify() == "div#main + span"

    def test_facade_method(self) -> None:
        sel = builder.combine(builder.element("ul"), ">", builder.element("li"))
        assert sel.stringify() == "ul > li"

    def test_nested(self) -> None:
        sel = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert sel.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_combinator_copied_verbatim(self) -> None:
        sel = combine(builder.element("a"), "??", builder.element("b"))
        assert sel.stringify() == "a ?? b"

    def test_combined_resets_kind(self) -> None:
        sel = combine(builder.id("a"), ">", builder.pseudo_element("b"))
        assert sel.kind is FragmentKind.NONE

    def test_fragments_after_combine_start_fresh(self) -> None:
        sel = combine(builder.element("a"), ">", builder.pseudo_element("before"))
        assert sel.element("x").stringify() == "a > ::beforex"

    def test_operands_unchanged(self) -> None:
        left = builder.element("a")
        right = builder.element("b")
        combine(left, "~", right)
        assert left.stringify() == "a"
        assert right.stringify() == "b"


# ---------------------------------------------------------------------------
# FragmentKind
# ---------------------------------------------------------------------------


class TestFragmentKind:
    def test_ranks_follow_declaration_order(self) -> None:
        assert [k.rank for k in FragmentKind] == list(range(7))
        assert FragmentKind.NONE.rank == 0

    def test_unique_kinds(self) -> None:
        unique = {k for k in FragmentKind if k.unique}
        assert unique == {
            FragmentKind.ELEMENT,
            FragmentKind.ID,
            FragmentKind.PSEUDO_ELEMENT,
        }

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (FragmentKind.ELEMENT, "x"),
            (FragmentKind.ID, "#x"),
            (FragmentKind.CLASS, ".x"),
            (FragmentKind.ATTRIBUTE, "[x]"),
            (FragmentKind.PSEUDO_CLASS, ":x"),
            (FragmentKind.PSEUDO_ELEMENT, "::x"),
        ],
    )
    def test_format(self, kind: FragmentKind, expected: str) -> None:
        assert kind.format("x") == expected

    def test_none_cannot_format(self) -> None:
        with pytest.raises(ValueError):
            FragmentKind.NONE.format("x")
