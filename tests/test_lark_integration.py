"""Compiles trees produced by a real Lark parser.

The grammar here is a small test fixture covering plain text and bracket
emphasis; it exercises rule names arriving as Lark RULE tokens.
"""

import lark
import pytest

from a1111_prompt_ir import IRKind, IRNode, compile_prompt

GRAMMAR = r"""
start: combination
combination: (plain | emphasized_positive | emphasized_negative)*
plain: PLAIN_TEXT
emphasized_positive: "(" combination ")"
emphasized_negative: "[" combination "]"
PLAIN_TEXT: /[^()\[\]\s]+/
%import common.WS
%ignore WS
"""


@pytest.fixture(scope="module")
def parser():
    return lark.Lark(GRAMMAR, parser="lalr")


def test_plain_runs_and_emphasis(parser):
    tree = parser.parse("red cat (dog) [fog] blue sky")
    assert compile_prompt(tree) == [
        IRNode(IRKind.TOKEN, "red cat"),
        IRNode(IRKind.POSITIVE, "dog", 1),
        IRNode(IRKind.NEGATIVE, "fog", 1),
        IRNode(IRKind.TOKEN, "blue sky"),
    ]


def test_emphasis_spreads_over_inner_items(parser):
    tree = parser.parse("(a [b] c)")
    assert compile_prompt(tree) == [
        IRNode(IRKind.POSITIVE, "a", 1),
        IRNode(IRKind.POSITIVE, "b", 1),
        IRNode(IRKind.POSITIVE, "c", 1),
    ]


def test_empty_prompt(parser):
    assert compile_prompt(parser.parse("")) == []
