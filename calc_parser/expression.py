"""Expression tree nodes produced by the parser."""

from dataclasses import dataclass
from typing import Union

from .operators import OperatorKind


@dataclass(frozen=True)
class Literal:
    """Leaf node holding an integer value."""
    value: int

    def __repr__(self) -> str:
        return f"Literal({self.value})"


@dataclass(frozen=True)
class BinaryOp:
    """Interior node applying ``kind`` to two owned subtrees."""
    kind: OperatorKind
    left: "Expression"
    right: "Expression"

    def __repr__(self) -> str:
        return f"BinaryOp({self.kind.name.title()}, {self.left!r}, {self.right!r})"


Expression = Union[Literal, BinaryOp]
