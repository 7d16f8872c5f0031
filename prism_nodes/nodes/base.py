import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from ..codegen.emitters.output import FRAG_COLOR_KEY
from ..ir.types import ParamType, ParamValue, PortType, is_number, is_number_vector, is_text

logger = logging.getLogger(__name__)

# Emitter signature: (inputs: name -> GLSL expr, params: name -> value) -> output name -> GLSL expr
EmitFn = Callable[[Dict[str, str], Dict[str, Any]], Dict[str, str]]


class NodeCategory(Enum):
    INPUT = 'input'
    MATH = 'math'
    PATTERN = 'pattern'
    COLOR = 'color'
    OUTPUT = 'output'

    def __str__(self):
        return self.value


_VECTOR_SIZES = {ParamType.VEC2: 2, ParamType.VEC3: 3, ParamType.VEC4: 4}


@dataclass(frozen=True)
class PortDef:
    name: str
    type: PortType
    default: Optional[ParamValue] = None


@dataclass(frozen=True)
class SelectOption:
    label: str
    value: str


@dataclass(frozen=True)
class ParamDef:
    name: str
    type: ParamType
    default: ParamValue
    min: Optional[float] = None
    max: Optional[float] = None
    options: Tuple[SelectOption, ...] = ()

    def accepts(self, value: Any) -> bool:
        """Whether an instance override has the shape this parameter needs."""
        if self.type == ParamType.FLOAT:
            return is_number(value) and math.isfinite(value)
        if self.type == ParamType.SELECT:
            return is_text(value)
        if not is_number_vector(value):
            return False
        # Colors may carry an alpha component
        if self.type == ParamType.COLOR:
            return len(value) >= 3
        return len(value) >= _VECTOR_SIZES[self.type]


@dataclass(frozen=True)
class NodeDef:
    """
    Capability of one node type: port/parameter schema plus a pure emitter.

    The terminal (OUTPUT) category returns FRAG_COLOR_KEY from `emit`
    instead of its declared outputs.
    """
    type: str
    label: str
    category: NodeCategory
    inputs: Tuple[PortDef, ...]
    outputs: Tuple[PortDef, ...]
    params: Tuple[ParamDef, ...]
    emit: EmitFn = field(compare=False)
    helpers: Tuple[str, ...] = ()

    @property
    def is_terminal(self) -> bool:
        return self.category == NodeCategory.OUTPUT

    def input(self, name: str) -> Optional[PortDef]:
        for port in self.inputs:
            if port.name == name:
                return port
        return None

    def output(self, name: str) -> Optional[PortDef]:
        for port in self.outputs:
            if port.name == name:
                return port
        return None

    def resolve_params(self, overrides: Dict[str, Any], node_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Instance overrides merged over schema defaults.

        Missing parameters take their default. An override of the wrong
        shape (including an explicit None) is replaced by the default with
        a warning, so emitters only ever see well-formed values.
        """
        params = dict(overrides or {})
        for param in self.params:
            if param.name not in params:
                params[param.name] = param.default
            elif not param.accepts(params[param.name]):
                logger.warning(
                    f"Node {node_id or self.type}: invalid {param.type} value "
                    f"{params[param.name]!r} for '{param.name}', using {param.default!r}"
                )
                params[param.name] = param.default
        return params
