"""Tokenizer and precedence-climbing parser for integer arithmetic."""

from .errors import (
    CalculatorError,
    EndOfInput,
    ExpressionParseError,
    InvalidNumber,
    InvalidOperator,
    LexError,
    UndefinedBindingPowerError,
    UnexpectedToken,
    UnknownInput,
    UnknownOperatorError,
)
from .expression import BinaryOp, Expression, Literal
from .lexer import Token, TokenType, tokenize
from .operators import BindingPower, OperatorKind, binding_power, classify
from .parser import parse, parse_line
from .render import print_tree, render

__version__ = "0.1.0"
