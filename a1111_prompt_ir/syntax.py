"""
A1111 Prompt Syntax Tree

Node model for the syntax trees this package compiles. Trees are built by an
external Lark parser: rule nodes are `lark.Tree` and leaves are `lark.Token`.

Rule kinds:
- start, multiple, combination, plain
- emphasized_positive, emphasized_negative, emphasized_weighted
- alternate
- scheduled_to, scheduled_none_to, scheduled_from, scheduled_full
- extra_networks_name, extra_networks

Leaves holding prompt text have the token type PLAIN_TEXT. Literal-bearing
rules (plain, numbers, extra network names) keep their text in their first
child token.
"""

from enum import Enum
from typing import Optional, Union

import lark

from .errors import InvalidAst

# Token type of literal prompt text leaves
PLAIN_TEXT = "PLAIN_TEXT"

Node = Union[lark.Tree, lark.Token]


class ASTKind(str, Enum):
    START = "start"
    MULTIPLE = "multiple"
    COMBINATION = "combination"
    PLAIN = "plain"
    EMPHASIZED_POSITIVE = "emphasized_positive"
    EMPHASIZED_NEGATIVE = "emphasized_negative"
    EMPHASIZED_WEIGHTED = "emphasized_weighted"
    ALTERNATE = "alternate"
    SCHEDULED_TO = "scheduled_to"
    SCHEDULED_NONE_TO = "scheduled_none_to"
    SCHEDULED_FROM = "scheduled_from"
    SCHEDULED_FULL = "scheduled_full"
    EXTRA_NETWORKS_NAME = "extra_networks_name"
    EXTRA_NETWORKS = "extra_networks"


AST_KINDS = frozenset(kind.value for kind in ASTKind)


def kind_of(node) -> Optional[ASTKind]:
    """Return the ASTKind of a rule node, or None for anything outside the set."""
    if not isinstance(node, lark.Tree):
        return None
    name = str(node.data)
    if name not in AST_KINDS:
        return None
    return ASTKind(name)


def is_plain(node) -> bool:
    return kind_of(node) is ASTKind.PLAIN


def leaf_text(node: Node, owner: Optional[Node] = None) -> str:
    """
    Read the literal text carried by a node.

    A token is its own literal. A rule node carries its literal in its first
    child, which must be a token.

    Args:
        node: Token, or rule node wrapping a token
        owner: Node reported in the error when the literal is missing
            (defaults to `node`)

    Raises:
        InvalidAst: If no literal token is found
    """
    if isinstance(node, lark.Token):
        return node.value
    if isinstance(node, lark.Tree) and node.children:
        first = node.children[0]
        if isinstance(first, lark.Token):
            return first.value
    raise InvalidAst.for_node(owner if owner is not None else node)
