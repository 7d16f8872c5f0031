# Math nodes: Add, Multiply, Sin, Cos, Mix, Smoothstep, Step, Fract

from ..codegen.emitters.arithmetic import (
    emit_add, emit_multiply, emit_trig, emit_mix,
    emit_smoothstep, emit_step, emit_fract,
)
from ..ir.types import PortType
from .base import NodeCategory, NodeDef, PortDef

_RESULT = (PortDef('result', PortType.FLOAT),)


def _math_node(type, label, inputs, emit):
    return NodeDef(
        type=type,
        label=label,
        category=NodeCategory.MATH,
        inputs=tuple(PortDef(name, PortType.FLOAT, default) for name, default in inputs),
        outputs=_RESULT,
        params=(),
        emit=emit,
    )


AddNode = _math_node('math_add', 'Add', [('a', 0), ('b', 0)], emit_add)
MultiplyNode = _math_node('math_multiply', 'Multiply', [('a', 1), ('b', 1)], emit_multiply)
SinNode = _math_node('math_sin', 'Sin', [('x', 0)],
                     lambda inputs, params: emit_trig('sin', inputs, params))
CosNode = _math_node('math_cos', 'Cos', [('x', 0)],
                     lambda inputs, params: emit_trig('cos', inputs, params))
MixNode = _math_node('math_mix', 'Mix', [('a', 0), ('b', 1), ('t', 0.5)], emit_mix)
SmoothstepNode = _math_node('math_smoothstep', 'Smoothstep',
                            [('edge0', 0), ('edge1', 1), ('x', 0.5)], emit_smoothstep)
StepNode = _math_node('math_step', 'Step', [('edge', 0.5), ('x', 0)], emit_step)
FractNode = _math_node('math_fract', 'Fract', [('x', 0)], emit_fract)

math_nodes = [
    AddNode,
    MultiplyNode,
    SinNode,
    CosNode,
    MixNode,
    SmoothstepNode,
    StepNode,
    FractNode,
]
