"""
A1111 Prompt IR

Compiles A1111-style prompt syntax trees into a flat, typed intermediate
representation for a downstream renderer or tokenizer.

Package Structure:
    syntax.py     - Syntax tree kinds over Lark trees and tokens
    ir.py         - IR item types and dict serialization
    errors.py     - InvalidAst
    compiler/     - Dispatcher, text-run merger and emphasis resolver

Supported Constructs:
- Plain text, combinations and multiples
- Emphasis: positive, negative and weighted
- Alternation
- Scheduling: to, from and full [from:to:when]
- Extra networks with positional arguments
"""

from .compiler import Compiler, compile_prompt, get_compiler, reset_compiler
from .errors import InvalidAst
from .ir import IRKind, IRNode, ScheduledPair, dump_ir
from .syntax import PLAIN_TEXT, ASTKind

__all__ = [
    "ASTKind",
    "PLAIN_TEXT",
    "IRKind",
    "IRNode",
    "ScheduledPair",
    "dump_ir",
    "InvalidAst",
    "Compiler",
    "compile_prompt",
    "get_compiler",
    "reset_compiler",
]
