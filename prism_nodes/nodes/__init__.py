from .base import FRAG_COLOR_KEY, NodeCategory, NodeDef, ParamDef, PortDef, SelectOption
from .input import UVNode, TimeNode, MouseNode, ResolutionNode
from .math import AddNode, MultiplyNode, SinNode, CosNode, MixNode, SmoothstepNode, StepNode, FractNode
from .pattern import NoiseNode, CircleNode, CheckerNode, GradientNode
from .color import RGBNode, HSVToRGBNode, BlendNode
from .output import OutputNode
from .registry import (
    NodeRegistry, NODE_REGISTRY, get_node_def, has_node_def,
    get_all_node_defs, get_nodes_by_category, get_categories,
)
