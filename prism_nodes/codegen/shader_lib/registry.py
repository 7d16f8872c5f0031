"""
GLSL Helper Registry

Maps helper names (as listed in NodeDef.helpers) to pre-authored GLSL
source blocks. The engine only decides which names are needed and in what
order; the blocks are inserted verbatim, once per name.
"""

import re
from typing import Dict, Iterable, List, Optional

from .noise import NOISE_2D_GLSL, NOISE_3D_GLSL
from .color import HSV_TO_RGB_GLSL

# =============================================================================
# HELPER TABLE
# =============================================================================

GLSL_HELPERS: Dict[str, str] = {
    'snoise': NOISE_2D_GLSL.strip(),    # also provides fbm(vec2, int)
    'noise3d': NOISE_3D_GLSL.strip(),
    'hsv2rgb': HSV_TO_RGB_GLSL.strip(),
}

# return-type name(args) {
_FUNCTION_SIGNATURE = re.compile(r'\b[A-Za-z_]\w*\s+[A-Za-z_]\w*\s*\([^)]*\)\s*\{')


def get_helper(name: str) -> Optional[str]:
    """Source block for a helper name, or None if unknown."""
    return GLSL_HELPERS.get(name)


def has_helper(name: str) -> bool:
    return name in GLSL_HELPERS


def dedupe_helpers(names: Iterable[str]) -> List[str]:
    """Unique names in first-seen order."""
    seen = set()
    ordered = []
    for name in names:
        if name not in seen:
            seen.add(name)
            ordered.append(name)
    return ordered


def get_helpers_code(names: Iterable[str]) -> List[str]:
    """
    Source blocks for the given helper names.

    Args:
        names: Helper names, possibly repeated

    Returns:
        One block per unique name, first-seen order

    Raises:
        KeyError: if a name has no registered block
    """
    return [GLSL_HELPERS[name] for name in dedupe_helpers(names)]


def is_valid_glsl(source: str) -> bool:
    """Cheap shape check: non-empty and containing at least one function definition."""
    if not source or not source.strip():
        return False
    return _FUNCTION_SIGNATURE.search(source) is not None
