# Color Node Emitters
# Handles: RGB, HSV_TO_RGB, BLEND


def emit_rgb(inputs, params):
    r = inputs.get('r', '1.0')
    g = inputs.get('g', '1.0')
    b = inputs.get('b', '1.0')
    return {'color': f"vec3({r}, {g}, {b})"}


def emit_hsv_to_rgb(inputs, params):
    """Needs the hsv2rgb helper."""
    h = inputs.get('h', '0.0')
    s = inputs.get('s', '1.0')
    v = inputs.get('v', '1.0')
    return {'color': f"hsv2rgb(vec3({h}, {s}, {v}))"}


def emit_blend(inputs, params):
    """Blend two colors by `factor` using the selected mode."""
    c1 = inputs.get('color1', 'vec3(0.0)')
    c2 = inputs.get('color2', 'vec3(1.0)')
    factor = inputs.get('factor', '0.5')
    mode = params.get('mode', 'mix')

    if mode == 'add':
        return {'color': f"({c1} + {c2} * {factor})"}
    if mode == 'multiply':
        return {'color': f"mix({c1}, {c1} * {c2}, {factor})"}
    if mode == 'screen':
        return {'color': f"mix({c1}, vec3(1.0) - (vec3(1.0) - {c1}) * (vec3(1.0) - {c2}), {factor})"}
    if mode == 'overlay':
        return {'color': f"mix({c1}, {c1} * ({c1} + 2.0 * {c2} * (vec3(1.0) - {c1})), {factor})"}
    return {'color': f"mix({c1}, {c2}, {factor})"}
