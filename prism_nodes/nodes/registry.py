# Node Registry
# Maps node type string -> NodeDef

from typing import Dict, Iterable, List, Optional, Union

from .base import NodeCategory, NodeDef
from .input import input_nodes
from .math import math_nodes
from .pattern import pattern_nodes
from .color import color_nodes
from .output import output_nodes


class NodeRegistry:
    """
    Validated lookup table of node capabilities.

    Registration order is preserved; it drives get_all() and categories().
    """
    def __init__(self, node_defs: Iterable[NodeDef] = ()):
        self._defs: Dict[str, NodeDef] = {}
        for node_def in node_defs:
            self.register(node_def)

    def register(self, node_def: NodeDef) -> None:
        if node_def.type in self._defs:
            raise ValueError(f"Node type already registered: {node_def.type}")
        self._defs[node_def.type] = node_def

    def get(self, node_type: str) -> Optional[NodeDef]:
        return self._defs.get(node_type)

    def has(self, node_type: str) -> bool:
        return node_type in self._defs

    def get_all(self) -> List[NodeDef]:
        return list(self._defs.values())

    def by_category(self, category: Union[NodeCategory, str]) -> List[NodeDef]:
        key = str(category)
        return [d for d in self._defs.values() if str(d.category) == key]

    def categories(self) -> List[str]:
        seen = []
        for node_def in self._defs.values():
            name = str(node_def.category)
            if name not in seen:
                seen.append(name)
        return seen

    def __contains__(self, node_type):
        return self.has(node_type)

    def __len__(self):
        return len(self._defs)


# All available nodes
NODE_REGISTRY = NodeRegistry(
    input_nodes
    + math_nodes
    + pattern_nodes
    + color_nodes
    + output_nodes
)


def get_node_def(node_type: str) -> Optional[NodeDef]:
    """Get node definition for a type, or None if not found."""
    return NODE_REGISTRY.get(node_type)


def has_node_def(node_type: str) -> bool:
    return NODE_REGISTRY.has(node_type)


def get_all_node_defs() -> List[NodeDef]:
    return NODE_REGISTRY.get_all()


def get_nodes_by_category(category: Union[NodeCategory, str]) -> List[NodeDef]:
    return NODE_REGISTRY.by_category(category)


def get_categories() -> List[str]:
    return NODE_REGISTRY.categories()


__all__ = [
    'NodeRegistry', 'NODE_REGISTRY', 'get_node_def', 'has_node_def',
    'get_all_node_defs', 'get_nodes_by_category', 'get_categories',
]
