# Pattern nodes: Noise, Circle, Checker, Gradient

from ..codegen.emitters.patterns import emit_noise, emit_circle, emit_checker, emit_gradient
from ..ir.types import ParamType, PortType
from .base import NodeCategory, NodeDef, ParamDef, PortDef, SelectOption

NoiseNode = NodeDef(
    type='pattern_noise',
    label='Noise',
    category=NodeCategory.PATTERN,
    inputs=(PortDef('uv', PortType.VEC2),),
    outputs=(PortDef('value', PortType.FLOAT),),
    params=(
        ParamDef('scale', ParamType.FLOAT, 5.0, min=0.1, max=100.0),
        ParamDef('octaves', ParamType.FLOAT, 1.0, min=1.0, max=8.0),
    ),
    emit=emit_noise,
    helpers=('snoise',),
)

CircleNode = NodeDef(
    type='pattern_circle',
    label='Circle',
    category=NodeCategory.PATTERN,
    inputs=(PortDef('uv', PortType.VEC2),),
    outputs=(
        PortDef('value', PortType.FLOAT),
        PortDef('distance', PortType.FLOAT),
    ),
    params=(
        ParamDef('radius', ParamType.FLOAT, 0.3, min=0.0, max=1.0),
        ParamDef('center', ParamType.VEC2, (0.5, 0.5)),
        ParamDef('softness', ParamType.FLOAT, 0.01, min=0.0, max=0.5),
    ),
    emit=emit_circle,
)

CheckerNode = NodeDef(
    type='pattern_checker',
    label='Checker',
    category=NodeCategory.PATTERN,
    inputs=(PortDef('uv', PortType.VEC2),),
    outputs=(PortDef('value', PortType.FLOAT),),
    params=(
        ParamDef('scale', ParamType.FLOAT, 8.0, min=1.0, max=64.0),
    ),
    emit=emit_checker,
)

GradientNode = NodeDef(
    type='pattern_gradient',
    label='Gradient',
    category=NodeCategory.PATTERN,
    inputs=(PortDef('uv', PortType.VEC2),),
    outputs=(PortDef('value', PortType.FLOAT),),
    params=(
        ParamDef('direction', ParamType.SELECT, 'horizontal', options=(
            SelectOption('Horizontal', 'horizontal'),
            SelectOption('Vertical', 'vertical'),
            SelectOption('Diagonal', 'diagonal'),
            SelectOption('Radial', 'radial'),
        )),
    ),
    emit=emit_gradient,
)

pattern_nodes = [
    NoiseNode,
    CircleNode,
    CheckerNode,
    GradientNode,
]
