# Output Node Emitter
# The terminal node returns FRAG_COLOR_KEY; the engine writes it to fragColor.

# Key the terminal node returns instead of a named output
FRAG_COLOR_KEY = "__fragColor"


def emit_output(inputs, params):
    color = inputs.get('color', 'vec3(0.0)')
    alpha = inputs.get('alpha', '1.0')
    return {FRAG_COLOR_KEY: f"vec4({color}, {alpha})"}
