"""
A1111 Prompt Compiler Package

Contains the tree-to-IR dispatcher and its helpers (text-run merging and
emphasis unwrapping).
"""

from .dispatch import Compiler, compile_prompt, get_compiler, reset_compiler
from .emphasis import resolve_emphasis
from .merger import merge_combination

__all__ = [
    "Compiler",
    "compile_prompt",
    "get_compiler",
    "reset_compiler",
    "resolve_emphasis",
    "merge_combination",
]
