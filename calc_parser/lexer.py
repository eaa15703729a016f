"""Tokenizer: splits a line on whitespace and classifies each word."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .errors import InvalidNumber, InvalidOperator, UnknownInput
from .operators import OPERATOR_SYMBOLS

logger = logging.getLogger(__name__)

# Largest literal a token may hold (64-bit signed).
I64_MAX = 2 ** 63 - 1


class TokenType:
    """Enumeration of token types. Values double as names in error messages."""
    NUMBER = 'Number'
    OPERATOR = 'Operator'


@dataclass(frozen=True)
class Token:
    """A number literal or an operator symbol.

    ``pos`` is the index of the whitespace-delimited word the token came from.
    It is only used for diagnostics and is ignored by equality.
    """
    type: str
    value: Union[int, str]
    pos: Optional[int] = field(default=None, compare=False)

    @classmethod
    def number(cls, value: int, pos: Optional[int] = None) -> "Token":
        return cls(TokenType.NUMBER, value, pos)

    @classmethod
    def operator(cls, symbol: str, pos: Optional[int] = None) -> "Token":
        return cls(TokenType.OPERATOR, symbol, pos)

    @property
    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.type == TokenType.OPERATOR

    def __repr__(self) -> str:
        return f"{self.type}({self.value!r})"


class Lexer:
    """Converts an input line into a list of tokens.

    Words are separated by runs of whitespace. A word of ASCII digits is a
    number, a single recognized symbol is an operator, anything else is an
    error. The first bad word aborts tokenization.
    """

    def __init__(self, text: str):
        self.text = text

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        for pos, word in enumerate(self.text.split()):
            tokens.append(self._token_for(word, pos))
        logger.debug(f"Tokenized {self.text!r} into {len(tokens)} tokens")
        return tokens

    def _token_for(self, word: str, pos: int) -> Token:
        if word.isascii() and word.isdigit():
            # Check the length first; int() refuses very long digit strings.
            digits = word.lstrip('0') or '0'
            if len(digits) > len(str(I64_MAX)) or int(digits) > I64_MAX:
                raise InvalidNumber(word)
            return Token.number(int(digits), pos)
        if len(word) == 1:
            if word in OPERATOR_SYMBOLS:
                return Token.operator(word, pos)
            raise InvalidOperator(word)
        raise UnknownInput(word)


def tokenize(line: str) -> List[Token]:
    """Tokenize a single line of input."""
    return Lexer(line).tokenize()
