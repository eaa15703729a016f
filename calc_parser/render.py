"""Line-drawing display of expression trees, for debugging."""

import sys
from typing import List, Optional, TextIO

from .expression import BinaryOp, Expression

BRANCH = " ──┬─▶ "
LAST = "        └─▶ "
OPEN = "        │   "
BLANK = "            "


def render(expr: Expression) -> str:
    """Return a line-drawing picture of ``expr``.

    Operators print their display name followed by a branch; the left child
    continues on the same line and the right child goes on the next line.

        OpAdd ──┬─▶ 1
                └─▶ OpMul ──┬─▶ 2
                            └─▶ 3
    """
    out: List[str] = []
    _render_node(expr, out, new_line=False, depth=0, bottom=False)
    out.append("\n")
    return "".join(out)


def _render_node(expr: Expression, out: List[str], new_line: bool, depth: int, bottom: bool) -> None:
    if new_line:
        for i in range(depth):
            if i == depth - 1:
                out.append(LAST)
            elif not bottom:
                out.append(OPEN)
            else:
                out.append(BLANK)

    if isinstance(expr, BinaryOp):
        out.append(f"{expr.kind.display_name}{BRANCH}")
        _render_node(expr.left, out, new_line=False, depth=depth + 1, bottom=False)
        out.append("\n")
        # Below the root, the right spine inherits whether its column is closed.
        _render_node(expr.right, out, new_line=True, depth=depth + 1, bottom=True if depth == 0 else bottom)
    else:
        out.append(str(expr.value))


def print_tree(expr: Expression, file: Optional[TextIO] = None) -> None:
    """Write ``render(expr)`` to ``file`` (stdout by default)."""
    stream = file if file is not None else sys.stdout
    stream.write(render(expr))
