# Input Node Emitters
# Handles: UV, TIME, MOUSE, RESOLUTION

from .const import format_param

# Normalized fragment coordinate; the fixed header declares no varyings
FRAG_UV = "(gl_FragCoord.xy / u_resolution)"


def emit_uv(inputs, params):
    return {
        'uv': FRAG_UV,
        'x': f"{FRAG_UV}.x",
        'y': f"{FRAG_UV}.y",
    }


def emit_time(inputs, params):
    """Elapsed seconds, optionally scaled by the `speed` param."""
    speed = params.get('speed', 1.0)
    if speed is None or float(speed) == 1.0:
        time_expr = "u_time"
    else:
        time_expr = f"(u_time * {format_param(speed)})"
    return {
        'time': time_expr,
        'sin': f"sin({time_expr})",
        'cos': f"cos({time_expr})",
    }


def emit_mouse(inputs, params):
    return {
        'position': "u_mouse",
        'x': "u_mouse.x",
        'y': "u_mouse.y",
    }


def emit_resolution(inputs, params):
    return {
        'size': "u_resolution",
        'width': "u_resolution.x",
        'height': "u_resolution.y",
        'aspect': "(u_resolution.x / u_resolution.y)",
    }
