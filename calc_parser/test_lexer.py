import pytest

from calc_parser.errors import InvalidNumber, InvalidOperator, LexError, UnknownInput
from calc_parser.lexer import I64_MAX, Lexer, Token, TokenType, tokenize


def test_tokenize_simple_expression():
    tokens = tokenize("1 + 2")
    assert tokens == [Token.number(1), Token.operator('+'), Token.number(2)]
    assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.OPERATOR, TokenType.NUMBER]


def test_tokenize_records_word_positions():
    tokens = tokenize("10  *\t3")
    assert [t.pos for t in tokens] == [0, 1, 2]


def test_token_equality_ignores_position():
    assert Token.number(7, pos=0) == Token.number(7, pos=5)
    assert Token.operator('+', pos=1) != Token.operator('-', pos=1)


def test_token_repr_is_debug_form():
    assert repr(tokenize("12 / 4")) == "[Number(12), Operator('/'), Number(4)]"


@pytest.mark.parametrize("text", ["", "   ", "\t \n"])
def test_tokenize_blank_input(text):
    assert tokenize(text) == []


@pytest.mark.parametrize("word,value", [
    ("0", 0),
    ("007", 7),
    ("42", 42),
    (str(I64_MAX), I64_MAX),
])
def test_tokenize_digit_words(word, value):
    tokens = tokenize(word)
    assert tokens == [Token.number(value)]
    assert isinstance(tokens[0].value, int)


@pytest.mark.parametrize("word,value", [
    ("0" * 30 + "1", 1),
    ("0" * 30, 0),
    ("0" * 10 + str(I64_MAX), I64_MAX),
])
def test_tokenize_leading_zeros_do_not_overflow(word, value):
    assert tokenize(word) == [Token.number(value)]


@pytest.mark.parametrize("word", [
    str(I64_MAX + 1),
    "1" + "0" * 19,
    "9" * 5000,
])
def test_tokenize_overflow_is_invalid_number(word):
    with pytest.raises(InvalidNumber) as e:
        tokenize(f"1 + {word}")
    assert e.value.word == word
    assert "too large" in str(e.value)


@pytest.mark.parametrize("symbol", ['+', '-', '*', '/'])
def test_tokenize_operator_symbols(symbol):
    assert tokenize(symbol) == [Token.operator(symbol)]


@pytest.mark.parametrize("char", ['^', '%', '$', 'x', '(', '²'])
def test_tokenize_unknown_single_char_is_invalid_operator(char):
    with pytest.raises(InvalidOperator) as e:
        tokenize(f"1 {char} 2")
    assert e.value.char == char
    assert str(e.value) == f"invalid operator '{char}'"


@pytest.mark.parametrize("word", ["1+2", "abc", "++", "-5", "12a", "3.14", "١٢"])
def test_tokenize_multi_char_word_is_unknown_input(word):
    with pytest.raises(UnknownInput) as e:
        tokenize(word)
    assert e.value.word == word
    assert str(e.value) == f"unknown input: {word}"


def test_first_error_aborts_tokenization():
    # Both words are bad; the earlier one wins.
    with pytest.raises(UnknownInput):
        tokenize("1 abc $")


def test_lex_errors_share_base_class():
    for text in ["$", "abc", "99999999999999999999"]:
        with pytest.raises(LexError):
            Lexer(text).tokenize()
