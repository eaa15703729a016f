"""Precedence-climbing parser turning tokens into an expression tree."""

import logging
from typing import List, Optional, Sequence

from .errors import EndOfInput, UnexpectedToken
from .expression import BinaryOp, Expression, Literal
from .lexer import Token, TokenType, tokenize
from .operators import binding_power, classify

logger = logging.getLogger(__name__)


class Parser:
    """Precedence-climbing parser for ``number (operator number)*`` input.

    Each call to ``parse_expression`` reads a literal and then keeps absorbing
    operators whose right binding power reaches ``min_bp``. The right operand
    of an absorbed operator is parsed with that operator's left binding power
    as the new threshold, so tighter operators end up deeper in the tree.
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens: List[Token] = list(tokens)
        self.pos = 0

    def _current(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def parse(self) -> Expression:
        expr = self.parse_expression(0.0)
        logger.debug(f"Parsed {len(self.tokens)} tokens into {expr!r}")
        return expr

    def parse_expression(self, min_bp: float) -> Expression:
        left: Expression = self._parse_literal()
        while True:
            tok = self._current()
            if tok is None:
                return left
            if not tok.is_operator:
                raise UnexpectedToken(tok)
            kind = classify(tok.value)
            bp = binding_power(kind)
            if bp.right < min_bp:
                # The pending operator to our left binds tighter.
                return left
            self._advance()
            right = self.parse_expression(bp.left)
            left = BinaryOp(kind, left, right)

    def _parse_literal(self) -> Literal:
        tok = self._current()
        if tok is None:
            raise EndOfInput(TokenType.NUMBER)
        if not tok.is_number:
            raise UnexpectedToken(tok)
        self._advance()
        return Literal(tok.value)


def parse(tokens: Sequence[Token]) -> Expression:
    """Build an expression tree from a token sequence."""
    return Parser(tokens).parse()


def parse_line(line: str) -> Expression:
    """Tokenize and parse a single line of input."""
    return parse(tokenize(line))
