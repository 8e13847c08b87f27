"""
A1111 Prompt Compiler

Turns a prompt syntax tree into a flat IR list. One method per rule kind,
dispatched top-down by Lark's Interpreter. Each method returns the items
for its subtree and the caller concatenates them.

Kind mapping:
- start / multiple / combination: sequences, spliced in order
- emphasized_positive / emphasized_negative: positive / negative with depth
- emphasized_weighted: weighted, first compiled value only
- alternate: one alternate item holding every option
- scheduled_to / scheduled_none_to: scheduled_to
- scheduled_from / scheduled_full: scheduled_from
- extra_networks_name / extra_networks: passed through with literal args
"""

import logging
from typing import List, Optional

import lark
from lark.visitors import Interpreter

from ..errors import InvalidAst
from ..ir import IRKind, IRNode, ScheduledPair
from ..syntax import AST_KINDS, PLAIN_TEXT, ASTKind, is_plain, leaf_text
from .emphasis import resolve_emphasis
from .merger import merge_combination

logger = logging.getLogger("A1111PromptIR")


class Compiler(Interpreter):
    """Compiles Lark prompt trees into IR.

    Holds no per-compilation state, so one instance can be shared.
    """

    def __init__(self, debug: bool = False):
        self.debug = debug

    def compile(self, tree) -> List[IRNode]:
        """
        Compile a whole prompt tree.

        Args:
            tree: Root node produced by the prompt parser

        Returns:
            IR items in reading order

        Raises:
            InvalidAst: On any structural problem; no partial result is kept
        """
        try:
            result = self.visit(tree)
        except InvalidAst as e:
            logger.warning(f"[A1111 IR] Compilation aborted: {e}")
            raise

        if self.debug:
            kinds = ", ".join(node.kind.value for node in result)
            logger.info(
                f"[A1111 IR] Compiled '{tree.data}' into {len(result)} item(s): [{kinds}]"
            )
        return result

    def visit(self, tree) -> List[IRNode]:
        # getattr dispatch would otherwise reach any attribute named like the rule
        if not isinstance(tree, lark.Tree) or str(tree.data) not in AST_KINDS:
            raise InvalidAst.for_node(tree)
        logger.debug(f"[A1111 IR] visit {tree.data} ({len(tree.children)} children)")
        return super().visit(tree)

    def __default__(self, tree):
        raise InvalidAst.for_node(tree)

    def _compile_all(self, children) -> List[IRNode]:
        result: List[IRNode] = []
        for child in children:
            result.extend(self.visit(child))
        return result

    def _expect_children(self, tree: lark.Tree, count: int) -> list:
        children = tree.children
        if len(children) != count or any(c is None for c in children):
            raise InvalidAst.for_node(tree)
        return children

    # Sequences

    def start(self, tree: lark.Tree) -> List[IRNode]:
        return self._compile_all(tree.children)

    def multiple(self, tree: lark.Tree) -> List[IRNode]:
        result: List[IRNode] = []
        for child in tree.children:
            if is_plain(child):
                result.extend(
                    IRNode(IRKind.TOKEN, leaf.value)
                    for leaf in child.children
                    if isinstance(leaf, lark.Token) and leaf.type == PLAIN_TEXT
                )
            else:
                result.extend(self.visit(child))
        return result

    def combination(self, tree: lark.Tree) -> List[IRNode]:
        return merge_combination(tree.children, self.visit)

    def plain(self, tree: lark.Tree) -> List[IRNode]:
        return [IRNode(IRKind.TOKEN, leaf_text(tree))]

    # Emphasis

    def _emphasis(self, tree: lark.Tree, kind: IRKind) -> List[IRNode]:
        inner, depth = resolve_emphasis(tree)
        # Only the value survives; args of the inner items are dropped
        return [IRNode(kind, node.value, depth) for node in self.visit(inner)]

    def emphasized_positive(self, tree: lark.Tree) -> List[IRNode]:
        return self._emphasis(tree, IRKind.POSITIVE)

    def emphasized_negative(self, tree: lark.Tree) -> List[IRNode]:
        return self._emphasis(tree, IRKind.NEGATIVE)

    def emphasized_weighted(self, tree: lark.Tree) -> List[IRNode]:
        combination, number = self._expect_children(tree, 2)
        compiled = self.visit(combination)
        if not compiled:
            raise InvalidAst.for_node(tree)
        # Items after the first are dropped
        return [IRNode(IRKind.WEIGHTED, compiled[0].value, leaf_text(number, tree))]

    def alternate(self, tree: lark.Tree) -> List[IRNode]:
        return [IRNode(IRKind.ALTERNATE, "", tuple(self._compile_all(tree.children)))]

    # Scheduling

    def _scheduled(self, tree: lark.Tree, kind: IRKind) -> List[IRNode]:
        value, number = self._expect_children(tree, 2)
        when = leaf_text(number, tree)
        return [IRNode(kind, when, tuple(self.visit(value)))]

    def scheduled_to(self, tree: lark.Tree) -> List[IRNode]:
        return self._scheduled(tree, IRKind.SCHEDULED_TO)

    def scheduled_none_to(self, tree: lark.Tree) -> List[IRNode]:
        return self._scheduled(tree, IRKind.SCHEDULED_TO)

    def scheduled_from(self, tree: lark.Tree) -> List[IRNode]:
        return self._scheduled(tree, IRKind.SCHEDULED_FROM)

    def scheduled_full(self, tree: lark.Tree) -> List[IRNode]:
        # Shares the scheduled_from kind; the renderer tells them apart by args
        before, after, number = self._expect_children(tree, 3)
        when = leaf_text(number, tree)
        pair = ScheduledPair(tuple(self.visit(before)), tuple(self.visit(after)))
        return [IRNode(IRKind.SCHEDULED_FROM, when, pair)]

    # Extra networks

    def extra_networks_name(self, tree: lark.Tree) -> List[IRNode]:
        return [IRNode(IRKind.EXTRA_NETWORKS_NAME, leaf_text(tree))]

    def extra_networks(self, tree: lark.Tree) -> List[IRNode]:
        name, args = self._expect_children(tree, 2)
        if not isinstance(args, lark.Tree):
            raise InvalidAst.for_node(tree)
        literals = []
        for arg in args.children:
            if not isinstance(arg, lark.Token):
                raise InvalidAst.for_node(args)
            literals.append(arg.value)
        return [IRNode(IRKind.EXTRA_NETWORKS, leaf_text(name, tree), tuple(literals))]


_UNHANDLED = sorted(kind.value for kind in ASTKind if kind.value not in vars(Compiler))
if _UNHANDLED:
    raise ImportError(f"Compiler has no handler for: {', '.join(_UNHANDLED)}")


# Cached compiler instance
_compiler: Optional[Compiler] = None


def get_compiler() -> Compiler:
    """Get or create cached compiler."""
    global _compiler
    if _compiler is None:
        _compiler = Compiler()
    return _compiler


def reset_compiler():
    """Reset the cached compiler."""
    global _compiler
    _compiler = None


def compile_prompt(tree, debug: bool = False) -> List[IRNode]:
    """Compile a prompt tree with the shared compiler (or a debug one)."""
    compiler = Compiler(debug=True) if debug else get_compiler()
    return compiler.compile(tree)
