"""
Emphasis Resolver

Collapses a chain of identical emphasis wrappers, e.g. ((dog)) or [[dog]],
into the innermost node and the nesting depth.
"""

from typing import Tuple

import lark

from ..errors import InvalidAst
from ..syntax import Node


def resolve_emphasis(node: lark.Tree) -> Tuple[Node, int]:
    """Walk down same-kind wrappers; return (innermost node, depth)."""
    kind = str(node.data)
    current = node
    depth = 0

    while isinstance(current, lark.Tree) and str(current.data) == kind:
        if not current.children or current.children[0] is None:
            raise InvalidAst.for_node(current)
        current = current.children[0]
        depth += 1

    return current, depth
