# Type Resolver
# Output kinds come from each node's declared ports; connection rules are a fixed table.

import logging
from typing import Dict, Iterable, Optional

from ..ir.graph import NodeLike, as_node
from ..ir.types import PortType
from ..nodes.registry import NodeRegistry, NODE_REGISTRY

logger = logging.getLogger(__name__)

# (source, target) pairs that connect with a conversion
_CONNECTABLE = {
    (PortType.FLOAT, PortType.VEC2),
    (PortType.FLOAT, PortType.VEC3),
    (PortType.FLOAT, PortType.VEC4),
    (PortType.VEC3, PortType.VEC4),
    (PortType.VEC4, PortType.VEC3),
}


def port_key(node_id: str, port_name: str) -> str:
    return f"{node_id}.{port_name}"


def infer_output_types(nodes: Iterable[NodeLike],
                       registry: Optional[NodeRegistry] = None) -> Dict[str, PortType]:
    """
    Map "nodeId.portName" -> PortType for every declared output.

    Nodes whose type is not registered contribute nothing.
    """
    registry = registry or NODE_REGISTRY
    types: Dict[str, PortType] = {}
    for node in nodes:
        node = as_node(node)
        node_def = registry.get(node.type)
        if node_def is None:
            continue
        for output in node_def.outputs:
            types[port_key(node.id, output.name)] = output.type
    return types


def can_connect(source: PortType, target: PortType) -> bool:
    if source == target:
        return True
    return (source, target) in _CONNECTABLE


def convert(source: PortType, target: PortType, value: str) -> str:
    """
    GLSL expression turning `value` of kind `source` into kind `target`.

    Pairs that cannot connect come back unchanged; the host shader
    compiler reports the mismatch.
    """
    if source == target:
        return value

    # Scalar -> vector: broadcast (vec4 keeps alpha opaque)
    if source == PortType.FLOAT:
        if target == PortType.VEC2:
            return f"vec2({value})"
        if target == PortType.VEC3:
            return f"vec3({value})"
        if target == PortType.VEC4:
            return f"vec4(vec3({value}), 1.0)"

    # Vector (Vec3) -> Color (Vec4) : Append Alpha 1.0
    if source == PortType.VEC3 and target == PortType.VEC4:
        return f"vec4({value}, 1.0)"

    # Color (Vec4) -> Vector (Vec3) : Drop Alpha
    if source == PortType.VEC4 and target == PortType.VEC3:
        return f"{value}.rgb"

    logger.warning(f"No conversion from {source} to {target}; passing '{value}' through")
    return value
