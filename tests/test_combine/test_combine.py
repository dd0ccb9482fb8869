"""Tests for mixin flattening, style combination, and merging."""

import pytest

from treestyle import StyleNode, StyleRegistry, assign, combine, create, flatten, merge, mixin
from treestyle.errors import CyclicStyleTreeError, InvalidTargetError, MalformedStyleError


@pytest.fixture
def reg() -> StyleRegistry:
    return StyleRegistry()


@pytest.fixture
def styles(reg):
    return create(
        {
            "button": {
                "borderRadius": 3,
                "backgroundColor": "red",
                "pressed": {"backgroundColor": "green"},
            },
            "label": {"color": "white"},
        },
        registry=reg,
    )


# ---------------------------------------------------------------------------
# assign
# ---------------------------------------------------------------------------


class TestAssign:
    def test_left_to_right(self):
        target = {"a": 1}
        result = assign(target, {"a": 2, "b": 2}, {"b": 3})
        assert result is target
        assert target == {"a": 2, "b": 3}

    def test_skips_none_sources(self):
        assert assign({}, None, {"a": 1}, None) == {"a": 1}

    def test_none_target(self):
        with pytest.raises(InvalidTargetError):
            assign(None, {"a": 1})


# ---------------------------------------------------------------------------
# flatten
# ---------------------------------------------------------------------------


class TestFlatten:
    def test_none(self):
        assert flatten(None) == []

    def test_single_without_mixins(self, styles):
        assert flatten(styles["button"]) == [styles["button"]]

    def test_plain_object(self):
        inline = {"opacity": 0}
        result = flatten(inline)
        assert len(result) == 1
        assert result[0] is inline

    def test_list_skips_none_and_false(self, styles):
        result = flatten([styles["button"], None, False, styles["label"]])
        assert result == [styles["button"], styles["label"]]

    def test_empty_style_kept(self, reg):
        tree = create({"empty": {}}, registry=reg)
        assert flatten([tree["empty"]]) == [tree["empty"]]

    def test_mixins_precede_style(self, reg):
        mixins = create({"a": {"top": 1}, "b": {"left": 1}}, registry=reg)
        tree = create({"c": {"mixins": [mixins["a"], mixins["b"]], "color": "red"}}, registry=reg)
        result = flatten(tree["c"])
        assert [s.key for s in result] == ["a", "b", "c"]

    def test_nested_mixins(self, reg):
        base = create({"base": {"margin": 0}}, registry=reg)
        mid = create({"mid": {"mixins": [base["base"]], "padding": 0}}, registry=reg)
        top = create({"top": {"mixins": [mid["mid"]], "color": "red"}}, registry=reg)
        assert [s.key for s in flatten([top["top"]])] == ["base", "mid", "top"]

    def test_list_order_preserved(self, reg):
        mixins = create({"m": {"top": 1}}, registry=reg)
        tree = create({"x": {"left": 1}, "y": {"mixins": [mixins["m"]]}}, registry=reg)
        assert [s.key for s in flatten([tree["x"], tree["y"]])] == ["x", "m", "y"]

    def test_repeated_mixin_allowed(self, reg):
        mixins = create({"m": {"top": 1}}, registry=reg)
        tree = create(
            {"x": {"mixins": [mixins["m"]]}, "y": {"mixins": [mixins["m"]]}}, registry=reg
        )
        assert [s.key for s in flatten([tree["x"], tree["y"]])] == ["m", "x", "m", "y"]

    def test_mixin_cycle(self):
        a = StyleNode({"top": 1})
        b = StyleNode({"left": 1, "mixins": [a]})
        a["mixins"] = [b]
        with pytest.raises(CyclicStyleTreeError):
            flatten(a)

    def test_self_mixin(self):
        a = StyleNode({"top": 1})
        a["mixins"] = [a]
        with pytest.raises(CyclicStyleTreeError):
            flatten([a])

    def test_mixins_not_a_list(self):
        with pytest.raises(MalformedStyleError):
            flatten({"mixins": "clickable", "color": "red"})

    def test_mixins_entry_not_a_style(self):
        with pytest.raises(MalformedStyleError):
            flatten([{"mixins": ["clickable"]}])

    def test_non_mapping_style(self):
        with pytest.raises(MalformedStyleError):
            flatten(42)
        with pytest.raises(MalformedStyleError):
            flatten(["button"])

    def test_mixin_reports_malformed_mixins(self):
        with pytest.raises(MalformedStyleError):
            mixin({"mixins": "clickable", "color": "red"})


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_named_styles_only_class(self, styles):
        assert combine([styles["button"], styles["label"]]) == {"className": "button label"}

    def test_conflict_forced_inline(self, reg):
        tree = create(
            {
                "styleA": {"color": "green", "fontWeight": "bold"},
                "styleB": {"color": "blue", "fontSize": 15},
            },
            registry=reg,
        )
        assert combine([tree["styleB"], tree["styleA"]]) == {
            "className": "style-b style-a",
            "style": {"color": "green"},
        }

    def test_plain_object_inline(self):
        assert combine([{"opacity": 0}]) == {"style": {"opacity": 0}}

    def test_inline_then_named_redeclaration(self, styles):
        result = combine([{"color": "black"}, styles["label"]])
        assert result == {"className": "label", "style": {"color": "white"}}

    def test_later_inline_wins(self):
        assert combine([{"top": 1}, {"top": 2}]) == {"style": {"top": 2}}

    def test_nested_styles_ignored(self, styles):
        # "pressed" is a nested selector, not a property
        assert combine([styles["button"], {"pressed": {"color": "red"}}]) == {
            "className": "button"
        }

    def test_empty(self):
        assert combine([]) == {}


# ---------------------------------------------------------------------------
# mixin
# ---------------------------------------------------------------------------


class TestMixin:
    def test_single_style(self, styles):
        assert mixin(styles["button"], {"label": "Hello"}) == {
            "className": "button",
            "label": "Hello",
        }

    def test_style_list(self, reg):
        tree = create({"button": {"top": 1}, "buttonB": {"left": 1}}, registry=reg)
        assert mixin([tree["button"], tree["buttonB"]], {"label": "Foo"}) == {
            "className": "button button-b",
            "label": "Foo",
        }

    def test_returns_given_props(self, styles):
        props = {"type": "button"}
        assert mixin(styles["button"], props) is props

    def test_new_props_when_omitted(self, styles):
        assert mixin(styles["button"]) == {"className": "button"}

    def test_inline_conflict_resolution(self, reg):
        tree = create(
            {
                "styleA": {"color": "green", "fontWeight": "bold"},
                "styleB": {"color": "blue", "fontSize": 15},
            },
            registry=reg,
        )
        assert mixin([tree["styleB"], tree["styleA"]], {}) == {
            "className": "style-b style-a",
            "style": {"color": "green"},
        }

    def test_plain_object(self):
        assert mixin({"opacity": 0}) == {"style": {"opacity": 0}}

    def test_none(self):
        assert mixin(None) == {}

    def test_none_leaves_props_alone(self):
        assert mixin(None, {"className": "keep"}) == {"className": "keep"}

    def test_none_in_list(self, reg):
        tree = create({"styleA": {}, "styleB": {}}, registry=reg)
        assert mixin([tree["styleA"], None, tree["styleB"]]) == {
            "className": "style-a style-b"
        }

    def test_style_with_inline_extra(self, styles):
        assert mixin([styles["label"], {"width": 120}]) == {
            "className": "label",
            "style": {"width": 120},
        }

    def test_mixin_classes(self, reg):
        mixins = create({"mixinA": {"fontWeight": "bold"}}, registry=reg)
        tree = create({"merged": {"mixins": [mixins["mixinA"]], "color": "green"}}, registry=reg)
        assert mixin(tree["merged"]) == {"className": "mixin-a merged"}

    def test_mixin_conflicts_inline(self, reg):
        mixins = create(
            {
                "mixinA": {"fontSize": 12, "fontWeight": "bold", "backgroundColor": "red"},
                "mixinB": {"fontSize": 13, "color": "green"},
            },
            registry=reg,
        )
        tree = create(
            {"merged": {"mixins": [mixins["mixinA"], mixins["mixinB"]], "fontWeight": "normal"}},
            registry=reg,
        )
        assert mixin(tree["merged"]) == {
            "className": "mixin-a mixin-b merged",
            "style": {"fontSize": 13, "fontWeight": "normal"},
        }

    def test_nested_style_class(self, styles):
        assert mixin(styles["button"]["pressed"]) == {"className": "button-pressed"}


# ---------------------------------------------------------------------------
# merge
# ---------------------------------------------------------------------------


class TestMerge:
    def test_merges_in_order(self):
        assert merge({"fontWeight": "bold", "fontSize": 12}, {"fontSize": 14}, {"color": "green"}) == {
            "fontWeight": "bold",
            "fontSize": 14,
            "color": "green",
        }

    def test_returns_new_plain_dict(self, styles):
        result = merge(styles["label"])
        assert type(result) is dict
        assert result is not styles["label"]
        assert result == {"color": "white"}

    def test_strips_key_and_parent(self, styles):
        result = merge(styles["label"], {"key": "x", "parent": "y"}, {"color": "green"})
        assert result == {"color": "green"}

    def test_result_is_inline(self, styles):
        assert mixin(merge(styles["label"])) == {"style": {"color": "white"}}

    def test_skips_none(self):
        assert merge(None, {"top": 1}) == {"top": 1}

    def test_no_args(self):
        assert merge() == {}
