# Output node: the single terminal of a graph

from ..codegen.emitters.output import emit_output
from ..ir.types import PortType
from .base import NodeCategory, NodeDef, PortDef

# Writes vec4(color, alpha) to fragColor; declares no outputs of its own
OutputNode = NodeDef(
    type='output',
    label='Output',
    category=NodeCategory.OUTPUT,
    inputs=(
        PortDef('color', PortType.VEC3),
        PortDef('alpha', PortType.FLOAT, 1),
    ),
    outputs=(),
    params=(),
    emit=emit_output,
)

output_nodes = [
    OutputNode,
]
