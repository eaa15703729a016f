"""Operator kinds, their symbols and their binding powers."""

from enum import Enum
from typing import Dict, NamedTuple

from .errors import UndefinedBindingPowerError, UnknownOperatorError


class OperatorKind(Enum):
    """Closed set of binary operators. Values are the source symbols."""
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    POWER = '^'
    MODULO = '%'

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES: Dict[OperatorKind, str] = {
    OperatorKind.ADD: 'OpAdd',
    OperatorKind.SUBTRACT: 'OpSub',
    OperatorKind.MULTIPLY: 'OpMul',
    OperatorKind.DIVIDE: 'OpDiv',
    OperatorKind.POWER: 'OpPow',
    OperatorKind.MODULO: 'OpMod',
}

# Symbols the lexer turns into operator tokens. '^' and '%' classify but have
# no binding power yet, so the lexer rejects them.
OPERATOR_SYMBOLS = ('+', '-', '*', '/')


def classify(symbol: str) -> OperatorKind:
    """Map a single operator character to its OperatorKind.

    Raises UnknownOperatorError for any character outside ``+ - * / ^ %``.
    """
    try:
        return OperatorKind(symbol)
    except ValueError:
        raise UnknownOperatorError(symbol) from None


# --------------------------
# Binding power
# --------------------------

class BindingPower(NamedTuple):
    """Precedence pair of an operator.

    ``left`` is how tightly a pending operator holds the operand to its right.
    ``right`` is how strongly an incoming operator pulls the operand before it.
    An incoming operator takes the operand when its ``right`` is at least the
    pending operator's ``left``; equal tiers with ``left > right`` therefore
    group from the left, and ``left < right`` groups from the right.
    """
    left: float
    right: float


_BINDING_POWERS: Dict[OperatorKind, BindingPower] = {
    OperatorKind.ADD: BindingPower(1.1, 1.0),
    OperatorKind.SUBTRACT: BindingPower(1.1, 1.0),
    OperatorKind.MULTIPLY: BindingPower(2.1, 2.0),
    # Right-associative, unlike MULTIPLY on the same tier.
    OperatorKind.DIVIDE: BindingPower(2.0, 2.1),
}


def binding_power(kind: OperatorKind) -> BindingPower:
    """Return the binding power of ``kind``.

    Raises UndefinedBindingPowerError for POWER and MODULO, whose precedence
    has not been assigned.
    """
    try:
        return _BINDING_POWERS[kind]
    except KeyError:
        raise UndefinedBindingPowerError(kind) from None
