# Shader GLSL Library Package
# Helper blocks that node emitters can require by name

from .noise import NOISE_2D_GLSL, NOISE_3D_GLSL
from .color import HSV_TO_RGB_GLSL
from .registry import GLSL_HELPERS, get_helper, has_helper, get_helpers_code, dedupe_helpers, is_valid_glsl

__all__ = [
    'NOISE_2D_GLSL',
    'NOISE_3D_GLSL',
    'HSV_TO_RGB_GLSL',
    'GLSL_HELPERS',
    'get_helper',
    'has_helper',
    'get_helpers_code',
    'dedupe_helpers',
    'is_valid_glsl',
]
