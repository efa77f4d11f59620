"""Tests for the regex-driven tokenizer."""

import pytest

from expression import InvalidSyntaxError, Token, Tokenizer, TokenType, tokenize


def texts(tokens):
    return [token.text for token in tokens]


def kinds(tokens):
    return [token.type for token in tokens]


class TestToken:
    """Token value object."""

    def test_token_is_immutable(self) -> None:
        token = Token("2", TokenType.LITERAL)
        with pytest.raises(AttributeError):
            token.text = "3"

    def test_equality_and_hash(self) -> None:
        assert Token("+", TokenType.OPERATOR) == Token("+", TokenType.OPERATOR)
        assert Token("+", TokenType.OPERATOR) != Token("+", TokenType.LITERAL)
        assert len({Token("x", TokenType.LITERAL), Token("x", TokenType.LITERAL)}) == 1

    def test_is_variable(self) -> None:
        assert Token("x", TokenType.LITERAL).is_variable
        assert not Token("2", TokenType.LITERAL).is_variable


class TestTokenize:
    """Recognizers and merge by offset."""

    def test_simple_binary_expression(self) -> None:
        tokens = tokenize("2 + 3")
        assert texts(tokens) == ["2", "+", "3"]
        assert kinds(tokens) == [TokenType.LITERAL, TokenType.OPERATOR, TokenType.LITERAL]

    def test_whitespace_is_stripped(self) -> None:
        assert texts(tokenize(" 2 *\t( x - 1 )\n")) == ["2", "*", "(", "x", "-", "1", ")"]

    def test_leading_unary_minus(self) -> None:
        tokens = tokenize("-3+2")
        assert texts(tokens) == ["unary_minus", "3", "+", "2"]
        assert tokens[0].type == TokenType.OPERATOR

    def test_unary_minus_after_operator(self) -> None:
        assert texts(tokenize("3*-2")) == ["3", "*", "unary_minus", "2"]

    def test_unary_minus_before_function_and_paren(self) -> None:
        assert texts(tokenize("2*-sin(x)")) == ["2", "*", "unary_minus", "sin", "(", "x", ")"]
        assert texts(tokenize("-(2+3)"))[0] == "unary_minus"

    def test_binary_minus_after_variable_and_paren(self) -> None:
        assert texts(tokenize("x-1")) == ["x", "-", "1"]
        assert kinds(tokenize("(1)-1"))[3] == TokenType.OPERATOR

    def test_function_and_comma(self) -> None:
        tokens = tokenize("log(8,2)")
        assert kinds(tokens) == [
            TokenType.FUNCTION, TokenType.LEFT_PAREN, TokenType.LITERAL,
            TokenType.COMMA, TokenType.LITERAL, TokenType.RIGHT_PAREN,
        ]

    def test_x_inside_function_name_is_not_variable(self) -> None:
        tokens = tokenize("exp(x)")
        assert texts(tokens) == ["exp", "(", "x", ")"]
        assert [t.is_variable for t in tokens] == [False, False, True, False]

    def test_function_after_left_paren(self) -> None:
        tokens = tokenize("2*(sin(x))")
        assert Token("sin", TokenType.FUNCTION) in tokens

    def test_malformed_decimal_is_one_literal(self) -> None:
        tokens = tokenize("1.2.3")
        assert texts(tokens) == ["1.2.3"]
        assert tokens[0].type == TokenType.LITERAL

    def test_result_is_tuple(self) -> None:
        assert isinstance(tokenize("1+1"), tuple)


class TestTokenizerErrors:
    """Conflicts, unknown characters and empty input."""

    @pytest.mark.parametrize("expression", ["", "   ", None])
    def test_empty_expression(self, expression) -> None:
        with pytest.raises(InvalidSyntaxError):
            tokenize(expression)

    def test_overlapping_tokens_fail_in_strict_mode(self) -> None:
        # 'x' is claimed both as a variable and as a function name
        with pytest.raises(InvalidSyntaxError) as exc_info:
            tokenize("x(2)")
        assert exc_info.value.position == 0

    def test_overlapping_tokens_resolved_by_priority(self) -> None:
        tokens = Tokenizer(conflict_policy="priority").tokenize("x(2)")
        assert tokens[0] == Token("x", TokenType.LITERAL)
        assert texts(tokens) == ["x", "(", "2", ")"]

    def test_unknown_character_rejected(self) -> None:
        with pytest.raises(InvalidSyntaxError) as exc_info:
            tokenize("2a")
        assert exc_info.value.position == 1

    def test_leading_plus_rejected(self) -> None:
        with pytest.raises(InvalidSyntaxError):
            tokenize("+3")

    def test_unknown_characters_can_be_dropped(self) -> None:
        tokens = Tokenizer(reject_unknown_characters=False).tokenize("2a")
        assert texts(tokens) == ["2"]

    def test_unknown_policy(self) -> None:
        with pytest.raises(ValueError):
            Tokenizer(conflict_policy="first")
