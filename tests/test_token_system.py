"""分词器测试"""
import pytest

from config.config import TOKENIZER_CONFIG
from core.token_system import Token, TokenType, tokenize, contains_logical_operators


def texts(tokens):
    return [t.text for t in tokens]


class TestTokenize:
    def test_numbers_and_operators(self):
        assert texts(tokenize("12 + 3")) == ["12", "+", "3"]

    def test_whitespace_is_optional_and_skipped(self):
        assert texts(tokenize("12+3")) == texts(tokenize("  12 \t+  3 "))

    def test_empty_expression(self):
        assert tokenize("") == []
        assert tokenize("   ") == []

    def test_adjacent_numbers_stay_separate(self):
        assert texts(tokenize("1 2")) == ["1", "2"]

    @pytest.mark.parametrize("pair", ["&&", "||", "==", "!="])
    def test_merged_pairs(self, pair):
        assert texts(tokenize(f"1{pair}0")) == ["1", pair, "0"]

    @pytest.mark.parametrize("expression,expected", [
        ("5>=3", ["5", ">", "=", "3"]),
        ("5<=3", ["5", "<", "=", "3"]),
        ("1--2", ["1", "-", "-", "2"]),
        ("1++2", ["1", "+", "+", "2"]),
    ])
    def test_other_pairs_are_not_merged(self, expression, expected):
        assert texts(tokenize(expression)) == expected

    def test_extended_merge_pairs(self):
        tokens = tokenize("5>=3<=4", TOKENIZER_CONFIG["extended_merge_pairs"])
        assert texts(tokens) == ["5", ">=", "3", "<=", "4"]

    def test_minus_is_never_fused_into_number(self):
        assert texts(tokenize("-5")) == ["-", "5"]

    def test_triple_equals(self):
        assert texts(tokenize("1===1")) == ["1", "==", "=", "1"]

    def test_lone_ampersand_at_end(self):
        assert texts(tokenize("1&")) == ["1", "&"]

    def test_token_types(self):
        tokens = tokenize("(1+a)")
        assert [t.type for t in tokens] == [
            TokenType.LEFT_PAREN,
            TokenType.NUMBER,
            TokenType.OPERATOR,
            TokenType.OPERATOR,
            TokenType.RIGHT_PAREN,
        ]

    def test_non_ascii_digit_is_not_a_number(self):
        tokens = tokenize("2²")
        assert tokens[1] == Token(TokenType.OPERATOR, "²")


class TestToken:
    def test_value(self):
        assert Token(TokenType.NUMBER, "0042").value == 42
        assert Token(TokenType.OPERATOR, "+").value is None

    def test_immutable(self):
        token = Token(TokenType.NUMBER, "1")
        with pytest.raises(AttributeError):
            token.text = "2"

    def test_equality_and_hash(self):
        assert Token(TokenType.OPERATOR, "+") == Token(TokenType.OPERATOR, "+")
        assert Token(TokenType.OPERATOR, "+") != Token(TokenType.NUMBER, "1")
        assert len({Token(TokenType.OPERATOR, "+"), Token(TokenType.OPERATOR, "+")}) == 1


class TestContainsLogicalOperators:
    @pytest.mark.parametrize("expression", ["1>0", "1<0", "1==1", "1!=1", "1&&1", "1||0"])
    def test_logical(self, expression):
        assert contains_logical_operators(tokenize(expression))

    def test_arithmetic_only(self):
        assert not contains_logical_operators(tokenize("(1+2)*3-4/5%6^7"))
