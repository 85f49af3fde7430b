"""Tracks shared nodes while unmarshalling so later references can be filled in."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

Setter = Callable[[Any], None]


@dataclass
class _NodeValues:
    value: Any = None
    is_set: bool = False
    pending: list[Setter] = field(default_factory=list)


class UnmarshalSession:
    """Maps node ids to their unmarshalled values and waiting references."""

    def __init__(self) -> None:
        self._nodes: dict[int, _NodeValues] = {}

    def save_node_value(self, node_id: int, value: Any) -> None:
        """Record the value of a node and hand it to every waiting setter."""
        node = self._nodes.setdefault(node_id, _NodeValues())
        node.value = value
        node.is_set = True
        waiting, node.pending = node.pending, []
        for setter in waiting:
            setter(value)

    def set_pointer_value(self, node_id: int, setter: Setter) -> None:
        """Call ``setter`` with the node's value now, or once it is saved."""
        node = self._nodes.setdefault(node_id, _NodeValues())
        if node.is_set:
            setter(node.value)
        else:
            node.pending.append(setter)