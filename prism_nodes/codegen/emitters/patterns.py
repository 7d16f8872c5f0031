# Pattern Node Emitters
# Handles: NOISE, CIRCLE, CHECKER, GRADIENT

import math

from .const import format_param
from .inputs import FRAG_UV


def emit_noise(inputs, params):
    """Simplex noise; more than one octave switches to fbm (helper: snoise)."""
    uv = inputs.get('uv', FRAG_UV)
    scale = format_param(params.get('scale', 5.0))
    octaves = int(math.floor(float(params.get('octaves', 1.0))))

    if octaves <= 1:
        return {'value': f"snoise({uv} * {scale})"}
    return {'value': f"fbm({uv} * {scale}, {octaves})"}


def emit_circle(inputs, params):
    """Soft-edged disc plus the raw distance to its center."""
    uv = inputs.get('uv', FRAG_UV)
    radius = format_param(params.get('radius', 0.3))
    center = params.get('center', (0.5, 0.5))
    softness = format_param(params.get('softness', 0.01))

    center_vec = f"vec2({format_param(center[0])}, {format_param(center[1])})"
    dist_expr = f"length({uv} - {center_vec})"
    return {
        'value': f"smoothstep({radius} + {softness}, {radius} - {softness}, {dist_expr})",
        'distance': dist_expr,
    }


def emit_checker(inputs, params):
    uv = inputs.get('uv', FRAG_UV)
    scale = format_param(params.get('scale', 8.0))
    return {'value': f"mod(floor({uv}.x * {scale}) + floor({uv}.y * {scale}), 2.0)"}


def emit_gradient(inputs, params):
    uv = inputs.get('uv', FRAG_UV)
    direction = params.get('direction', 'horizontal')

    if direction == 'vertical':
        return {'value': f"{uv}.y"}
    if direction == 'diagonal':
        return {'value': f"({uv}.x + {uv}.y) * 0.5"}
    if direction == 'radial':
        return {'value': f"length({uv} - vec2(0.5))"}
    # horizontal and unknown modes
    return {'value': f"{uv}.x"}
