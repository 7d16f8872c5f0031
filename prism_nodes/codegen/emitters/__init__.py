# GLSL Emitters Package
# Pure per-node-kind expression builders, wired to node types in prism_nodes.nodes

from .const import format_constant, format_float, format_param

__all__ = ['format_constant', 'format_float', 'format_param']
