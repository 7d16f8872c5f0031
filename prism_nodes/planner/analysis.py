import logging
from collections import deque
from typing import Dict, Iterable, List, Union

from ..errors import CycleError
from ..ir.graph import EdgeLike, GraphView, NodeInstance, NodeLike

logger = logging.getLogger(__name__)


def get_topological_sort(view: GraphView) -> List[NodeInstance]:
    """
    Returns the nodes of a GraphView in dependency order (Kahn's algorithm).

    An edge source -> target means the source is emitted first. Ready nodes
    are taken in the order they were discovered, seeded in node-list order,
    so the result is deterministic for a given snapshot.

    Raises:
        CycleError: if some nodes can never become ready
    """
    in_degree: Dict[str, int] = {}
    adjacency: Dict[str, List[str]] = {}
    for node in view.nodes:
        in_degree[node.id] = 0
        adjacency[node.id] = []

    for edge in view.usable_edges:
        adjacency[edge.source].append(edge.target)
        in_degree[edge.target] += 1

    queue = deque(node.id for node in view.nodes if in_degree[node.id] == 0)
    order: List[NodeInstance] = []

    while queue:
        node_id = queue.popleft()
        order.append(view.node(node_id))
        for target_id in adjacency[node_id]:
            in_degree[target_id] -= 1
            if in_degree[target_id] == 0:
                queue.append(target_id)

    if len(order) != len(view.nodes):
        logger.debug(f"Sort stalled after {len(order)} of {len(view.nodes)} nodes")
        raise CycleError()

    logger.debug(f"Sorted {len(order)} nodes: {[n.id for n in order]}")
    return order


def topological_sort(nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]) -> List[NodeInstance]:
    """Convenience wrapper over raw node/edge lists."""
    return get_topological_sort(GraphView(nodes, edges))


def has_cycle(nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]) -> bool:
    try:
        topological_sort(nodes, edges)
    except CycleError:
        return True
    return False
