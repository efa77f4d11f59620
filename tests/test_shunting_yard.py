"""Tests for infix to postfix conversion."""

import pytest

from expression import InvalidSyntaxError, ShuntingYardParser, to_postfix, tokenize


def postfix_text(expression, **kwargs):
    return " ".join(token.text for token in to_postfix(tokenize(expression), **kwargs))


class TestShuntingYard:
    """Operator precedence, parentheses and functions."""

    @pytest.mark.parametrize(
        "expression,expected",
        [
            ("2+3*4", "2 3 4 * +"),
            ("(2+3)*4", "2 3 + 4 *"),
            ("2*3+4", "2 3 * 4 +"),
            ("8-3-2", "8 3 - 2 -"),
            ("log(8,2)", "8 2 log"),
            ("sin(x)*2", "x sin 2 *"),
            ("2*sin(x+1)", "2 x 1 + sin *"),
            ("3*-2", "3 2 unary_minus *"),
            ("-3^2", "3 unary_minus 2 ^"),
        ],
    )
    def test_postfix_order(self, expression, expected) -> None:
        assert postfix_text(expression) == expected

    def test_power_is_left_associative_by_default(self) -> None:
        assert postfix_text("2^3^2") == "2 3 ^ 2 ^"

    def test_power_right_associative_when_requested(self) -> None:
        assert postfix_text("2^3^2", respect_associativity=True) == "2 3 2 ^ ^"

    def test_left_associative_operators_unchanged_when_requested(self) -> None:
        assert postfix_text("8-3-2", respect_associativity=True) == "8 3 - 2 -"

    def test_parentheses_are_not_emitted(self) -> None:
        postfix = ShuntingYardParser().to_postfix(tokenize("((1))"))
        assert [t.text for t in postfix] == ["1"]
        assert isinstance(postfix, tuple)


class TestShuntingYardErrors:
    """Mismatched parentheses and misplaced commas."""

    @pytest.mark.parametrize("expression", ["(2+3", "2+3)", "(2))", "((2)"])
    def test_mismatched_parentheses(self, expression) -> None:
        with pytest.raises(InvalidSyntaxError, match="Mismatched parentheses"):
            postfix_text(expression)

    @pytest.mark.parametrize("expression", ["2,3", "1+2,3"])
    def test_comma_outside_parentheses(self, expression) -> None:
        with pytest.raises(InvalidSyntaxError, match="misplaced comma"):
            postfix_text(expression)
