# Math Node Emitters
# Handles: ADD, MULTIPLY, SIN, COS, MIX, SMOOTHSTEP, STEP, FRACT
#
# The engine always supplies every declared input; the fallbacks only
# matter when an emitter is called directly.


def emit_add(inputs, params):
    a = inputs.get('a', '0.0')
    b = inputs.get('b', '0.0')
    return {'result': f"({a} + {b})"}


def emit_multiply(inputs, params):
    a = inputs.get('a', '1.0')
    b = inputs.get('b', '1.0')
    return {'result': f"({a} * {b})"}


def emit_trig(func, inputs, params):
    """sin / cos of a single input."""
    return {'result': f"{func}({inputs.get('x', '0.0')})"}


def emit_mix(inputs, params):
    a = inputs.get('a', '0.0')
    b = inputs.get('b', '1.0')
    t = inputs.get('t', '0.5')
    return {'result': f"mix({a}, {b}, {t})"}


def emit_smoothstep(inputs, params):
    edge0 = inputs.get('edge0', '0.0')
    edge1 = inputs.get('edge1', '1.0')
    x = inputs.get('x', '0.5')
    return {'result': f"smoothstep({edge0}, {edge1}, {x})"}


def emit_step(inputs, params):
    edge = inputs.get('edge', '0.5')
    x = inputs.get('x', '0.0')
    return {'result': f"step({edge}, {x})"}


def emit_fract(inputs, params):
    return {'result': f"fract({inputs.get('x', '0.0')})"}
