"""Tests for the selector tokenizer."""

import pytest

from styleripper.errors import ParseError
from styleripper.model.css import (
    ClassSelector,
    Combinator,
    PseudoFunction,
    SimpleSelector,
)
from styleripper.parser.selectors import parse_selector_list, serialize_selector_list


def _components(text: str):
    (selector,) = parse_selector_list(text).selectors
    return selector.components


def _kinds(text: str) -> list[str]:
    return [type(c).__name__ for c in _components(text)]


# ---------------------------------------------------------------------------
# Simple selectors
# ---------------------------------------------------------------------------


class TestClassSelectors:
    def test_single_class(self):
        (component,) = _components(".header")
        assert isinstance(component, ClassSelector)
        assert component.name == "header"

    def test_compound_classes(self):
        names = [c.name for c in _components(".btn.btn-primary")]
        assert names == ["btn", "btn-primary"]

    def test_escaped_class_keeps_escape(self):
        (component,) = _components(r".sm\:flex")
        assert component.name == r"sm\:flex"
        assert component.clean_name == "sm:flex"

    def test_class_followed_by_pseudo(self):
        components = _components(r".hover\:red:hover")
        assert components[0].clean_name == "hover:red"
        assert isinstance(components[1], SimpleSelector)
        assert components[1].text == ":hover"


class TestOtherSelectors:
    def test_type_and_id(self):
        components = _components("div#main")
        assert [c.text for c in components] == ["div", "#main"]

    def test_universal(self):
        assert _components("*")[0].text == "*"

    def test_attribute_with_quoted_bracket(self):
        components = _components('a[title="]"]')
        assert components[1].text == '[title="]"]'

    def test_pseudo_element(self):
        assert _components("p::before")[1].text == "::before"

    def test_non_selector_function_kept_verbatim(self):
        components = _components("li:nth-child(2n + 1)")
        assert isinstance(components[1], SimpleSelector)
        assert components[1].text == ":nth-child(2n + 1)"


# ---------------------------------------------------------------------------
# Combinators and lists
# ---------------------------------------------------------------------------


class TestCombinators:
    def test_descendant(self):
        assert _kinds(".a .b") == ["ClassSelector", "Combinator", "ClassSelector"]
        assert _components(".a .b")[1].value == " "

    def test_child_with_spaces(self):
        components = _components(".a > .b")
        assert len(components) == 3
        assert components[1].value == ">"

    def test_child_without_spaces(self):
        assert _components(".a>.b")[1].value == ">"

    def test_sibling_combinators(self):
        values = [c.value for c in _components("a + b ~ c") if isinstance(c, Combinator)]
        assert values == ["+", "~"]

    def test_surrounding_whitespace_ignored(self):
        assert _kinds("  .a  ") == ["ClassSelector"]


class TestSelectorLists:
    def test_comma_separated(self):
        selector_list = parse_selector_list(".used, .unused")
        assert len(selector_list.selectors) == 2

    def test_empty_text(self):
        assert parse_selector_list("").selectors == []

    def test_selector_function_argument_is_parsed(self):
        components = _components("a:not(.x, .y)")
        function = components[1]
        assert isinstance(function, PseudoFunction)
        assert function.name == ":not"
        assert [s.components[0].name for s in function.argument.selectors] == ["x", "y"]

    def test_commas_inside_functions_do_not_split(self):
        assert len(parse_selector_list(":is(.a, .b) .c, .d").selectors) == 2


class TestErrors:
    def test_unexpected_character(self):
        with pytest.raises(ParseError):
            parse_selector_list(".a { }")

    def test_unbalanced_parenthesis(self):
        with pytest.raises(ParseError):
            parse_selector_list(":not(.a")


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class TestSerialize:
    @pytest.mark.parametrize(
        "source, expected",
        [
            (".a, .b", ".a,.b"),
            (".a > .b", ".a>.b"),
            (".a   .b", ".a .b"),
            ("ul li.item:hover", "ul li.item:hover"),
            ("a:not( .x , .y )", "a:not(.x,.y)"),
            (r".sm\:flex", r".sm\:flex"),
        ],
    )
    def test_compact_output(self, source, expected):
        assert serialize_selector_list(parse_selector_list(source)) == expected
