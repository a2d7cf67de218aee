"""Unit tests for numeric, conjunctive, exclude and disjunctive refinements."""

from __future__ import annotations

import pytest

from search_helper.parameters import SearchParameters


@pytest.fixture
def on_page_4() -> SearchParameters:
    return SearchParameters(page=4)


# ---------------------------------------------------------------------------
# Numeric refinements
# ---------------------------------------------------------------------------


class TestNumericRefinements:
    def test_add_and_get(self, on_page_4: SearchParameters) -> None:
        p = on_page_4.add_numeric_refinement("price", ">", 10)
        assert p.get_numeric_refinement("price", ">") == 10
        assert p.numeric_refinements == {"price": {">": 10}}
        assert p.page == 0

    def test_overwrite_same_operator(self) -> None:
        p = (
            SearchParameters()
            .add_numeric_refinement("price", "=", 10)
            .add_numeric_refinement("price", "=", 20)
        )
        assert p.get_numeric_refinement("price", "=") == 20

    def test_several_operators_per_attribute(self) -> None:
        p = (
            SearchParameters()
            .add_numeric_refinement("price", ">=", 10)
            .add_numeric_refinement("price", "<", 100)
        )
        assert p.get_numeric_refinements("price") == {">=": 10, "<": 100}

    def test_get_missing_returns_none(self) -> None:
        p = SearchParameters().add_numeric_refinement("price", ">", 10)
        assert p.get_numeric_refinement("price", "<") is None
        assert p.get_numeric_refinement("rating", ">") is None
        assert p.get_numeric_refinements("rating") == {}

    def test_operator_not_validated(self) -> None:
        p = SearchParameters().add_numeric_refinement("price", "~", 3)
        assert p.get_numeric_refinement("price", "~") == 3

    def test_remove_prunes_attribute(self) -> None:
        p = SearchParameters().add_numeric_refinement("price", ">", 10).set_page(2)
        p = p.remove_numeric_refinement("price", ">")
        assert "price" not in p.numeric_refinements
        assert p.page == 0

    def test_remove_keeps_other_operators(self) -> None:
        p = (
            SearchParameters()
            .add_numeric_refinement("price", ">", 10)
            .add_numeric_refinement("price", "<", 50)
            .remove_numeric_refinement("price", ">")
        )
        assert p.numeric_refinements == {"price": {"<": 50}}

    def test_remove_unknown_attribute_is_noop(self, on_page_4: SearchParameters) -> None:
        p = on_page_4.remove_numeric_refinement("price", ">")
        assert p == on_page_4
        assert p.page == 4

    def test_remove_unknown_operator_on_refined_attribute_resets_page(self) -> None:
        p = SearchParameters().add_numeric_refinement("price", ">", 10).set_page(3)
        p = p.remove_numeric_refinement("price", "<")
        assert p.numeric_refinements == {"price": {">": 10}}
        assert p.page == 0

    def test_clear_one_attribute(self) -> None:
        p = (
            SearchParameters()
            .add_numeric_refinement("price", ">", 10)
            .add_numeric_refinement("rating", ">=", 4)
            ._clear_numeric_refinements("price")
        )
        assert p.numeric_refinements == {"rating": {">=": 4}}

    def test_clear_all(self) -> None:
        p = (
            SearchParameters()
            .add_numeric_refinement("price", ">", 10)
            .add_numeric_refinement("rating", ">=", 4)
            .set_page(2)
            ._clear_numeric_refinements()
        )
        assert p.numeric_refinements == {}
        assert p.page == 2


# ---------------------------------------------------------------------------
# Conjunctive refinements
# ---------------------------------------------------------------------------


class TestFacetRefinements:
    def test_add(self, on_page_4: SearchParameters) -> None:
        p = on_page_4.add_facet_refinement("color", "red")
        assert p.is_facet_refined("color", "red")
        assert p.page == 0

    def test_single_value_overwrite(self) -> None:
        p = (
            SearchParameters()
            .add_facet_refinement("color", "red")
            .add_facet_refinement("color", "blue")
        )
        assert not p.is_facet_refined("color", "red")
        assert p.is_facet_refined("color", "blue")

    def test_remove_clears_whole_facet(self) -> None:
        p = SearchParameters().add_facet_refinement("color", "red").set_page(2)
        p = p.remove_facet_refinement("color")
        assert p.facets_refinements == {}
        assert p.page == 0

    def test_remove_unrefined_still_resets_page(self, on_page_4: SearchParameters) -> None:
        assert on_page_4.remove_facet_refinement("color").page == 0

    def test_is_refined_on_unknown_facet(self) -> None:
        assert not SearchParameters().is_facet_refined("color", None)

    def test_toggle_twice_restores_state(self) -> None:
        base = SearchParameters().add_facet_refinement("brand", "acme")
        toggled = base.toggle_facet_refinement("color", "red")
        assert toggled.is_facet_refined("color", "red")
        back = toggled.toggle_facet_refinement("color", "red")
        assert back.facets_refinements == base.facets_refinements

    def test_toggle_other_value_overwrites(self) -> None:
        p = SearchParameters().add_facet_refinement("color", "red")
        p = p.toggle_facet_refinement("color", "blue")
        assert p.facets_refinements == {"color": "blue"}

    def test_clear_helpers(self) -> None:
        p = (
            SearchParameters()
            .add_facet_refinement("color", "red")
            .add_facet_refinement("brand", "acme")
        )
        assert p._clear_facet_refinements("color").facets_refinements == {"brand": "acme"}
        assert p._clear_facet_refinements().facets_refinements == {}


# ---------------------------------------------------------------------------
# Exclude refinements
# ---------------------------------------------------------------------------


class TestExcludeRefinements:
    def test_add_appends(self, on_page_4: SearchParameters) -> None:
        p = on_page_4.add_exclude_refinement("color", "red").add_exclude_refinement("color", "blue")
        assert p.facets_excludes == {"color": ("red", "blue")}
        assert p.is_exclude_refined("color", "blue")
        assert p.page == 0

    def test_duplicate_appends_are_kept(self) -> None:
        p = (
            SearchParameters()
            .add_exclude_refinement("color", "red")
            .add_exclude_refinement("color", "red")
        )
        assert p.facets_excludes["color"] == ("red", "red")
        p = p.remove_exclude_refinement("color", "red")
        assert p.facets_excludes["color"] == ("red",)
        assert p.is_exclude_refined("color", "red")

    def test_remove_last_value_prunes_key(self) -> None:
        p = SearchParameters().add_exclude_refinement("color", "red").set_page(1)
        p = p.remove_exclude_refinement("color", "red")
        assert "color" not in p.facets_excludes
        assert p.page == 0

    def test_remove_absent_value_from_existing_facet_resets_page(self) -> None:
        p = SearchParameters().add_exclude_refinement("color", "red").set_page(1)
        p = p.remove_exclude_refinement("color", "green")
        assert p.facets_excludes == {"color": ("red",)}
        assert p.page == 0

    def test_remove_on_unknown_facet_is_noop(self, on_page_4: SearchParameters) -> None:
        p = on_page_4.remove_exclude_refinement("color", "red")
        assert p.page == 4
        assert p.facets_excludes == {}

    def test_is_refined_on_unknown_facet(self) -> None:
        assert SearchParameters().is_exclude_refined("color", "red") is False

    def test_toggle_twice_restores_state(self) -> None:
        base = SearchParameters().add_exclude_refinement("color", "blue")
        back = base.toggle_exclude_facet_refinement("color", "red").toggle_exclude_facet_refinement(
            "color", "red"
        )
        assert back.facets_excludes == base.facets_excludes

    def test_clear_helpers(self) -> None:
        p = SearchParameters().add_exclude_refinement("color", "red").add_exclude_refinement("size", "S")
        assert p._clear_exclude_refinements("color").facets_excludes == {"size": ("S",)}
        assert p._clear_exclude_refinements().facets_excludes == {}


# ---------------------------------------------------------------------------
# Disjunctive refinements
# ---------------------------------------------------------------------------


class TestDisjunctiveFacetRefinements:
    def test_add_appends(self, on_page_4: SearchParameters) -> None:
        p = (
            on_page_4.add_disjunctive_facet_refinement("size", "M")
            .add_disjunctive_facet_refinement("size", "L")
        )
        assert p.disjunctive_facets_refinements == {"size": ("M", "L")}
        assert p.is_disjunctive_facet_refined("size", "L")
        assert p.page == 0

    def test_duplicate_appends_are_kept(self) -> None:
        p = (
            SearchParameters()
            .add_disjunctive_facet_refinement("size", "M")
            .add_disjunctive_facet_refinement("size", "M")
        )
        assert p.disjunctive_facets_refinements["size"] == ("M", "M")

    def test_remove_first_occurrence(self) -> None:
        p = SearchParameters(disjunctive_facets_refinements={"size": ["M", "L", "M"]})
        p = p.remove_disjunctive_facet_refinement("size", "M")
        assert p.disjunctive_facets_refinements == {"size": ("L", "M")}

    def test_remove_last_value_prunes_key(self) -> None:
        p = SearchParameters().add_disjunctive_facet_refinement("size", "M")
        p = p.remove_disjunctive_facet_refinement("size", "M")
        assert p.disjunctive_facets_refinements == {}

    def test_remove_on_unknown_facet_is_noop(self, on_page_4: SearchParameters) -> None:
        assert on_page_4.remove_disjunctive_facet_refinement("size", "M").page == 4

    def test_toggle_twice_restores_state(self) -> None:
        base = SearchParameters().add_disjunctive_facet_refinement("size", "S")
        back = base.toggle_disjunctive_facet_refinement("size", "M").toggle_disjunctive_facet_refinement(
            "size", "M"
        )
        assert back.disjunctive_facets_refinements == base.disjunctive_facets_refinements

    def test_toggle_off_existing(self) -> None:
        p = SearchParameters().add_disjunctive_facet_refinement("size", "M")
        assert p.toggle_disjunctive_facet_refinement("size", "M").disjunctive_facets_refinements == {}

    def test_clear_helpers(self) -> None:
        p = SearchParameters(disjunctive_facets_refinements={"size": ["M"], "color": ["red"]})
        assert p._clear_disjunctive_facet_refinements("size").disjunctive_facets_refinements == {
            "color": ("red",)
        }
        assert p._clear_disjunctive_facet_refinements().disjunctive_facets_refinements == {}


# ---------------------------------------------------------------------------
# Bulk clear / inspection
# ---------------------------------------------------------------------------


def _fully_refined() -> SearchParameters:
    return (
        SearchParameters(page=6)
        .add_numeric_refinement("price", ">", 10)
        .add_numeric_refinement("size", "=", 42)
        .add_facet_refinement("brand", "acme")
        .add_facet_refinement("size", "42")
        .add_exclude_refinement("color", "red")
        .add_exclude_refinement("size", "40")
        .add_disjunctive_facet_refinement("size", "44")
        .set_page(6)
    )


class TestClearRefinements:
    def test_clear_all(self) -> None:
        p = _fully_refined().clear_refinements()
        assert p.numeric_refinements == {}
        assert p.facets_refinements == {}
        assert p.facets_excludes == {}
        assert p.disjunctive_facets_refinements == {}
        assert p.page == 0
        assert not p.has_refinements()

    def test_clear_one_attribute(self) -> None:
        p = _fully_refined().clear_refinements("size")
        assert p.numeric_refinements == {"price": {">": 10}}
        assert p.facets_refinements == {"brand": "acme"}
        assert p.facets_excludes == {"color": ("red",)}
        assert p.disjunctive_facets_refinements == {}
        assert p.page == 0
        assert not p.has_refinements("size")
        assert p.has_refinements("brand")

    def test_clear_on_empty_state_resets_page(self) -> None:
        assert SearchParameters(page=9).clear_refinements().page == 0


class TestHasRefinements:
    def test_empty(self) -> None:
        assert SearchParameters().has_refinements() is False

    @pytest.mark.parametrize(
        "build",
        [
            lambda p: p.add_numeric_refinement("a", ">", 1),
            lambda p: p.add_facet_refinement("a", "x"),
            lambda p: p.add_exclude_refinement("a", "x"),
            lambda p: p.add_disjunctive_facet_refinement("a", "x"),
        ],
    )
    def test_each_kind_counts(self, build) -> None:
        p = build(SearchParameters())
        assert p.has_refinements() is True
        assert p.has_refinements("a") is True
        assert p.has_refinements("b") is False


# ---------------------------------------------------------------------------
# Pruning invariant
# ---------------------------------------------------------------------------


class TestPruning:
    def test_no_empty_collections_after_removals(self) -> None:
        p = (
            SearchParameters()
            .add_exclude_refinement("color", "red")
            .add_disjunctive_facet_refinement("size", "M")
            .add_numeric_refinement("price", ">", 1)
            .remove_exclude_refinement("color", "red")
            .remove_disjunctive_facet_refinement("size", "M")
            .remove_numeric_refinement("price", ">")
        )
        for collection in (p.facets_excludes, p.disjunctive_facets_refinements, p.numeric_refinements):
            assert all(len(values) > 0 for values in collection.values())
            assert len(collection) == 0


# ---------------------------------------------------------------------------
# Toggles and the page position
# ---------------------------------------------------------------------------


_TOGGLES = [
    ("toggle_facet_refinement", "is_facet_refined"),
    ("toggle_exclude_facet_refinement", "is_exclude_refined"),
    ("toggle_disjunctive_facet_refinement", "is_disjunctive_facet_refined"),
]


class TestTogglePageReset:
    @pytest.mark.parametrize(("toggle", "is_refined"), _TOGGLES)
    def test_toggle_on_resets_page(self, toggle: str, is_refined: str) -> None:
        p = getattr(SearchParameters(page=3), toggle)("color", "red")
        assert getattr(p, is_refined)("color", "red")
        assert p.page == 0

    @pytest.mark.parametrize(("toggle", "is_refined"), _TOGGLES)
    def test_toggle_off_resets_page(self, toggle: str, is_refined: str) -> None:
        on = getattr(SearchParameters(), toggle)("color", "red").set_page(3)
        assert on.page == 3
        off = getattr(on, toggle)("color", "red")
        assert not getattr(off, is_refined)("color", "red")
        assert off.page == 0


# ---------------------------------------------------------------------------
# Value matching
# ---------------------------------------------------------------------------


class TestStrictValueMatching:
    def test_bool_and_int_are_distinct_disjunctive_values(self) -> None:
        p = SearchParameters().add_disjunctive_facet_refinement("flag", True)
        assert p.is_disjunctive_facet_refined("flag", True)
        assert not p.is_disjunctive_facet_refined("flag", 1)

    def test_int_and_float_are_distinct_exclude_values(self) -> None:
        p = SearchParameters().add_exclude_refinement("size", 1)
        assert not p.is_exclude_refined("size", 1.0)
        assert p.is_exclude_refined("size", 1)

    def test_conjunctive_value_type_matters(self) -> None:
        p = SearchParameters().add_facet_refinement("in_stock", True)
        assert p.is_facet_refined("in_stock", True)
        assert not p.is_facet_refined("in_stock", 1)

    def test_toggle_with_other_type_adds_instead_of_removing(self) -> None:
        p = SearchParameters().add_disjunctive_facet_refinement("flag", True)
        p = p.toggle_disjunctive_facet_refinement("flag", 1)
        assert p.disjunctive_facets_refinements["flag"] == (True, 1)

    def test_remove_skips_values_of_other_types(self) -> None:
        p = SearchParameters(disjunctive_facets_refinements={"n": [1, 1.0]})
        p = p.remove_disjunctive_facet_refinement("n", 1.0)
        assert p.disjunctive_facets_refinements["n"] == (1,)
        assert type(p.disjunctive_facets_refinements["n"][0]) is int
