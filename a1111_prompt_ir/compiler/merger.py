"""
Text-Run Merger

Compiles the children of a combination node. Adjacent plain children are
folded into a single token; any other child ends the run and is compiled
in place.

Example:
    combination(plain "red", plain "cat", extra_networks_name "lora1")
    -> token "red cat", extra_networks_name "lora1"
"""

from typing import Callable, Iterable, List, Optional, Tuple

from ..ir import IRKind, IRNode
from ..syntax import Node, is_plain, leaf_text

Run = Optional[Tuple[str, ...]]


def _flush(run: Run, output: List[IRNode]) -> None:
    if run is not None:
        output.append(IRNode(IRKind.TOKEN, " ".join(run).strip()))


def merge_combination(
    children: Iterable[Node], compile_child: Callable[[Node], List[IRNode]]
) -> List[IRNode]:
    """
    Merge runs of plain text and splice everything else.

    Args:
        children: Children of the combination node, in reading order
        compile_child: Compiles a non-plain child

    Returns:
        Compiled items; each merged token is trimmed of outer whitespace

    Raises:
        InvalidAst: If a plain child has no text leaf
    """
    output: List[IRNode] = []
    run: Run = None

    for child in children:
        if is_plain(child):
            text = leaf_text(child)
            run = (text,) if run is None else run + (text,)
            continue

        _flush(run, output)
        run = None
        output.extend(compile_child(child))

    _flush(run, output)
    return output
