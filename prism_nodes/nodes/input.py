# Input nodes: UV, Time, Mouse, Resolution

from ..codegen.emitters.inputs import emit_uv, emit_time, emit_mouse, emit_resolution
from ..ir.types import ParamType, PortType
from .base import NodeCategory, NodeDef, ParamDef, PortDef

# Normalized screen coordinates (0-1)
UVNode = NodeDef(
    type='input_uv',
    label='UV',
    category=NodeCategory.INPUT,
    inputs=(),
    outputs=(
        PortDef('uv', PortType.VEC2),
        PortDef('x', PortType.FLOAT),
        PortDef('y', PortType.FLOAT),
    ),
    params=(),
    emit=emit_uv,
)

# Elapsed time in seconds
TimeNode = NodeDef(
    type='input_time',
    label='Time',
    category=NodeCategory.INPUT,
    inputs=(),
    outputs=(
        PortDef('time', PortType.FLOAT),
        PortDef('sin', PortType.FLOAT),
        PortDef('cos', PortType.FLOAT),
    ),
    params=(
        ParamDef('speed', ParamType.FLOAT, 1.0, min=0.0, max=10.0),
    ),
    emit=emit_time,
)

# Normalized pointer position (0-1)
MouseNode = NodeDef(
    type='input_mouse',
    label='Mouse',
    category=NodeCategory.INPUT,
    inputs=(),
    outputs=(
        PortDef('position', PortType.VEC2),
        PortDef('x', PortType.FLOAT),
        PortDef('y', PortType.FLOAT),
    ),
    params=(),
    emit=emit_mouse,
)

# Canvas size in pixels
ResolutionNode = NodeDef(
    type='input_resolution',
    label='Resolution',
    category=NodeCategory.INPUT,
    inputs=(),
    outputs=(
        PortDef('size', PortType.VEC2),
        PortDef('width', PortType.FLOAT),
        PortDef('height', PortType.FLOAT),
        PortDef('aspect', PortType.FLOAT),
    ),
    params=(),
    emit=emit_resolution,
)

input_nodes = [
    UVNode,
    TimeNode,
    MouseNode,
    ResolutionNode,
]
