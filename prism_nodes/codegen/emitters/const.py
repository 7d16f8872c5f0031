# Constant formatting utilities for GLSL code generation

from ...ir.types import PortType, is_number


def format_float(value) -> str:
    """Format a number as a GLSL float literal (always carries a decimal point)."""
    s_val = repr(float(value))
    if '.' not in s_val and 'e' not in s_val:
        s_val += ".0"
    return s_val


def format_param(value, digits: int = 4) -> str:
    """Fixed-point rendering for numeric parameters baked into expressions."""
    return f"{float(value):.{digits}f}"


def format_constant(value, dtype: PortType) -> str:
    """Format a Python value as a GLSL literal of the given kind."""
    if value is None:
        value = dtype.default_value()

    # Generic iterables (e.g. numpy-like or generators) become tuples
    if hasattr(value, '__iter__') and not isinstance(value, (str, tuple, list)):
        value = tuple(value)

    if dtype == PortType.FLOAT:
        if isinstance(value, (list, tuple)):
            return format_float(value[0]) if value else "0.0"
        if is_number(value):
            return format_float(value)
        return "0.0"

    count = dtype.component_count()
    type_name = dtype.glsl_name()

    if isinstance(value, (list, tuple)):
        comps = [float(v) for v in value[:count]]
        if len(comps) < count:
            # RGB -> RGBA keeps alpha opaque; anything else pads with zero
            fill = dtype.default_value()
            comps.extend(fill[len(comps):])
        return f"{type_name}({', '.join(format_float(c) for c in comps)})"

    if is_number(value):
        return f"{type_name}({format_float(value)})"

    return format_constant(None, dtype)
