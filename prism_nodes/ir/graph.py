import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)


@dataclass
class NodeInstance:
    """
    One node placed in the editor.

    `position` is carried for round-tripping only; the compiler never reads it.
    """
    id: str
    type: str
    params: Dict[str, Any] = field(default_factory=dict)
    position: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'NodeInstance':
        return cls(
            id=data['id'],
            type=data['type'],
            params=dict(data.get('params') or {}),
            position=data.get('position'),
        )


@dataclass
class Edge:
    """Directed connection from an output port to an input port."""
    id: str
    source: str
    source_handle: str
    target: str
    target_handle: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Edge':
        # Editor snapshots use camelCase handle keys
        return cls(
            id=data['id'],
            source=data['source'],
            source_handle=data.get('sourceHandle', data.get('source_handle')),
            target=data['target'],
            target_handle=data.get('targetHandle', data.get('target_handle')),
        )


NodeLike = Union[NodeInstance, Mapping[str, Any]]
EdgeLike = Union[Edge, Mapping[str, Any]]


def as_node(node: NodeLike) -> NodeInstance:
    if isinstance(node, NodeInstance):
        return node
    return NodeInstance.from_dict(node)


def as_edge(edge: EdgeLike) -> Edge:
    if isinstance(edge, Edge):
        return edge
    return Edge.from_dict(edge)


class GraphView:
    """
    Read-only view over one node/edge snapshot.

    Built once per compile call. Edges whose endpoints are missing from the
    node list are dropped here, so later stages only see usable edges.
    """
    def __init__(self, nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]):
        self.nodes: List[NodeInstance] = [as_node(n) for n in nodes]
        self._node_map: Dict[str, NodeInstance] = {}
        for node in self.nodes:
            self._node_map[node.id] = node

        self.edges: List[Edge] = [as_edge(e) for e in edges]
        self.usable_edges: List[Edge] = []
        for edge in self.edges:
            if edge.source in self._node_map and edge.target in self._node_map:
                self.usable_edges.append(edge)
            else:
                logger.warning(f"Ignoring dangling edge {edge.id} ({edge.source} -> {edge.target})")

        # (target, target_handle) -> edge. Later edges overwrite earlier ones.
        self._input_index: Dict[Tuple[str, str], Edge] = {}
        for edge in self.usable_edges:
            key = (edge.target, edge.target_handle)
            shadowed = self._input_index.get(key)
            if shadowed is not None:
                logger.warning(
                    f"Input {edge.target}.{edge.target_handle} wired more than once; "
                    f"edge {edge.id} shadows {shadowed.id}"
                )
            self._input_index[key] = edge

    def node(self, node_id: str) -> Optional[NodeInstance]:
        return self._node_map.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._node_map

    def input_connection(self, node_id: str, port_name: str) -> Optional[Edge]:
        """Edge feeding the given input port, or None when unwired."""
        return self._input_index.get((node_id, port_name))

    def __len__(self):
        return len(self.nodes)
