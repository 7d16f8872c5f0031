# Color nodes: RGB, HSV to RGB, Blend

from ..codegen.emitters.color import emit_rgb, emit_hsv_to_rgb, emit_blend
from ..ir.types import ParamType, PortType
from .base import NodeCategory, NodeDef, ParamDef, PortDef, SelectOption

RGBNode = NodeDef(
    type='color_rgb',
    label='RGB',
    category=NodeCategory.COLOR,
    inputs=(
        PortDef('r', PortType.FLOAT, 1),
        PortDef('g', PortType.FLOAT, 1),
        PortDef('b', PortType.FLOAT, 1),
    ),
    outputs=(PortDef('color', PortType.VEC3),),
    params=(),
    emit=emit_rgb,
)

HSVToRGBNode = NodeDef(
    type='color_hsv_to_rgb',
    label='HSV to RGB',
    category=NodeCategory.COLOR,
    inputs=(
        PortDef('h', PortType.FLOAT, 0),
        PortDef('s', PortType.FLOAT, 1),
        PortDef('v', PortType.FLOAT, 1),
    ),
    outputs=(PortDef('color', PortType.VEC3),),
    params=(),
    emit=emit_hsv_to_rgb,
    helpers=('hsv2rgb',),
)

BlendNode = NodeDef(
    type='color_blend',
    label='Blend',
    category=NodeCategory.COLOR,
    inputs=(
        PortDef('color1', PortType.VEC3),
        PortDef('color2', PortType.VEC3),
        PortDef('factor', PortType.FLOAT, 0.5),
    ),
    outputs=(PortDef('color', PortType.VEC3),),
    params=(
        ParamDef('mode', ParamType.SELECT, 'mix', options=(
            SelectOption('Mix', 'mix'),
            SelectOption('Add', 'add'),
            SelectOption('Multiply', 'multiply'),
            SelectOption('Screen', 'screen'),
            SelectOption('Overlay', 'overlay'),
        )),
    ),
    emit=emit_blend,
)

color_nodes = [
    RGBNode,
    HSVToRGBNode,
    BlendNode,
]
