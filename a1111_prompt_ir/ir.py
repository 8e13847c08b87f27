"""
A1111 Prompt IR

Flat, typed output of the compiler, handed to a renderer or tokenizer.

Each item has a kind, a string value and kind-dependent args:
- token: literal text, no args
- positive / negative: underlying text, args = nesting depth (int)
- weighted: captured text, args = weight literal (str)
- alternate: empty value, args = tuple of compiled options
- scheduled_to / scheduled_from: step literal, args = tuple of compiled items,
  or a ScheduledPair for [from:to:when]
- extra_networks_name: asset name, no args
- extra_networks: asset name, args = tuple of argument literals
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple, Union


class IRKind(str, Enum):
    TOKEN = "token"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    WEIGHTED = "weighted"
    ALTERNATE = "alternate"
    SCHEDULED_TO = "scheduled_to"
    SCHEDULED_FROM = "scheduled_from"
    EXTRA_NETWORKS_NAME = "extra_networks_name"
    EXTRA_NETWORKS = "extra_networks"


@dataclass(frozen=True)
class ScheduledPair:
    """Both sides of a [from:to:when] schedule."""

    before: Tuple["IRNode", ...]
    after: Tuple["IRNode", ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": [node.to_dict() for node in self.before],
            "to": [node.to_dict() for node in self.after],
        }


IRArgs = Union[None, int, str, Tuple["IRNode", ...], Tuple[str, ...], ScheduledPair]


@dataclass(frozen=True)
class IRNode:
    """One compiled prompt item."""

    kind: IRKind
    value: str
    args: IRArgs = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain dicts and lists for JSON output."""
        data: Dict[str, Any] = {"kind": self.kind.value, "value": self.value}
        if self.args is not None:
            data["args"] = _args_to_json(self.args)
        return data


def _args_to_json(args):
    if isinstance(args, ScheduledPair):
        return args.to_dict()
    if isinstance(args, tuple):
        return [a.to_dict() if isinstance(a, IRNode) else a for a in args]
    return args


def dump_ir(nodes: Iterable[IRNode]) -> List[Dict[str, Any]]:
    """Serialize a compiled sequence for the renderer."""
    return [node.to_dict() for node in nodes]
