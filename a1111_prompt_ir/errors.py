"""
A1111 Prompt IR Errors

A single error kind covers every structural problem found while compiling
a prompt tree. There is no recovery: the whole prompt fails.
"""

from typing import Optional

import lark


class InvalidAst(ValueError):
    """Raised when a syntax tree node cannot be compiled.

    Attributes:
        kind: Rule name (or token type) of the offending node
        type_tag: Secondary type tag, e.g. the Lark token type of a rule name
    """

    def __init__(self, kind: Optional[str], type_tag: Optional[str] = None):
        self.kind = kind
        self.type_tag = type_tag
        super().__init__(f"Invalid AST: {kind} {type_tag or ''}".rstrip())

    @classmethod
    def for_node(cls, node) -> "InvalidAst":
        """Build the error for whatever node was found at the failing position."""
        if isinstance(node, lark.Tree):
            return cls(str(node.data), getattr(node.data, "type", None))
        if isinstance(node, lark.Token):
            return cls(node.type, "token")
        return cls(None, type(node).__name__)
