"""Exceptions raised while tokenizing and parsing calculator input."""

from typing import Any, Optional


class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass


# --------------------------
# Lexer errors
# --------------------------

class LexError(CalculatorError):
    """Raised when a line cannot be split into tokens."""
    pass


class InvalidNumber(LexError):
    """A digit run whose value does not fit in a 64-bit signed integer."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"number too large to fit in target type: {word}")


class InvalidOperator(LexError):
    """A single character that is not a recognized operator symbol."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"invalid operator '{char}'")


class UnknownInput(LexError):
    """A multi-character word that is neither a number nor an operator."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"unknown input: {word}")


# --------------------------
# Parser errors
# --------------------------

class ExpressionParseError(CalculatorError):
    """Raised when a token sequence does not form a valid expression."""
    pass


class UnexpectedToken(ExpressionParseError):
    """A token of the wrong kind where a number or operator was required."""

    def __init__(self, token: Any):
        self.token = token
        pos: Optional[int] = getattr(token, "pos", None)
        if pos is None:
            super().__init__(f"unexpected token '{token!r}'")
        else:
            super().__init__(f"unexpected token '{token!r}' at position {pos}")


class EndOfInput(ExpressionParseError):
    """The tokens ran out while a token of kind ``expected`` was required."""

    def __init__(self, expected: str):
        self.expected = expected
        super().__init__(f"expected {expected}, reached end of input")


# --------------------------
# Operator errors
# --------------------------

class UnknownOperatorError(CalculatorError):
    """A character that does not name any OperatorKind."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"unknown operator type '{symbol}'")


class UndefinedBindingPowerError(CalculatorError):
    """The operator is recognized but has no precedence assigned yet."""

    def __init__(self, kind: Any):
        self.kind = kind
        super().__init__(f"no binding power defined for operator {kind}")
