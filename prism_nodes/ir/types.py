from enum import Enum, auto
from numbers import Real
from typing import Any, Mapping, Sequence, Tuple, Union

# A parameter or default value: Number | NumberVector | Text
Number = Union[int, float]
NumberVector = Tuple[Number, ...]
ParamValue = Union[Number, NumberVector, str]


class PortType(Enum):
    # Scalar
    FLOAT = auto()

    # Vectors
    VEC2 = auto()
    VEC3 = auto()
    VEC4 = auto()

    def is_vector(self):
        return self in {PortType.VEC2, PortType.VEC3, PortType.VEC4}

    def is_scalar(self):
        return self == PortType.FLOAT

    def component_count(self):
        if self == PortType.VEC2: return 2
        if self == PortType.VEC3: return 3
        if self == PortType.VEC4: return 4
        return 1

    def glsl_name(self) -> str:
        """GLSL type keyword (float, vec2, vec3, vec4)."""
        return self.name.lower()

    def default_value(self) -> ParamValue:
        """Zero value of the kind. The 4-vector keeps an opaque alpha."""
        if self == PortType.VEC2: return (0.0, 0.0)
        if self == PortType.VEC3: return (0.0, 0.0, 0.0)
        if self == PortType.VEC4: return (0.0, 0.0, 0.0, 1.0)
        return 0.0

    @classmethod
    def from_name(cls, name: str) -> 'PortType':
        """Parse 'float' / 'vec2' / ... (case-insensitive)."""
        if isinstance(name, PortType):
            return name
        try:
            return cls[str(name).upper()]
        except KeyError:
            raise ValueError(f"Unknown port type: {name!r}") from None

    def __str__(self):
        return self.name.lower()


class ParamType(Enum):
    FLOAT = auto()
    VEC2 = auto()
    VEC3 = auto()
    VEC4 = auto()
    COLOR = auto()
    SELECT = auto()

    @classmethod
    def from_name(cls, name: str) -> 'ParamType':
        if isinstance(name, ParamType):
            return name
        try:
            return cls[str(name).upper()]
        except KeyError:
            raise ValueError(f"Unknown param type: {name!r}") from None

    def __str__(self):
        return self.name.lower()


# =============================================================================
# Value variant checks
# =============================================================================

def is_number(value: Any) -> bool:
    # bool is an int subclass but never a shader number here
    return isinstance(value, Real) and not isinstance(value, bool)


def is_number_vector(value: Any) -> bool:
    return (isinstance(value, (tuple, list))
            and len(value) > 0
            and all(is_number(v) for v in value))


def is_text(value: Any) -> bool:
    return isinstance(value, str)


def is_param_value(value: Any) -> bool:
    return is_number(value) or is_number_vector(value) or is_text(value)


# =============================================================================
# Type guards over plain mappings (editor snapshots)
# =============================================================================

def is_port_type(value: Any) -> bool:
    if isinstance(value, PortType):
        return True
    return isinstance(value, str) and value in {'float', 'vec2', 'vec3', 'vec4'}


def is_port_def(value: Any) -> bool:
    if not isinstance(value, Mapping):
        return False
    return isinstance(value.get('name'), str) and is_port_type(value.get('type'))


def is_param_def(value: Any) -> bool:
    if not isinstance(value, Mapping):
        return False
    valid_types = {'float', 'vec2', 'vec3', 'vec4', 'color', 'select'}
    param_type = value.get('type')
    if isinstance(param_type, ParamType):
        param_type = str(param_type)
    return isinstance(value.get('name'), str) and param_type in valid_types


def is_node_instance(value: Any) -> bool:
    if not isinstance(value, Mapping):
        return False
    position = value.get('position')
    return (
        isinstance(value.get('id'), str)
        and isinstance(value.get('type'), str)
        and isinstance(position, Mapping)
        and is_number(position.get('x'))
        and is_number(position.get('y'))
    )


def is_edge(value: Any) -> bool:
    if not isinstance(value, Mapping):
        return False
    keys: Sequence[str] = ('id', 'source', 'sourceHandle', 'target', 'targetHandle')
    return all(isinstance(value.get(k), str) for k in keys)
