"""
Prism Nodes: compiles a node graph into a GLSL ES fragment shader.

    from prism_nodes import compile_graph

    result = compile_graph(nodes, edges)
    if result.success:
        print(result.code)
"""

from .codegen.result import CompiledResult
from .errors import (
    PrismNodesError, CompilationError, NoOutputNodeError,
    CycleError, UnknownNodeTypeError, HelperNotFoundError,
)
from .ir.graph import Edge, GraphView, NodeInstance
from .ir.types import PortType, ParamType
from .planner.analysis import topological_sort
from .planner.graph_compiler import GraphCompiler, compile_graph, generate_glsl
from .planner.type_resolver import can_connect, convert, infer_output_types
from .logger import get_logger, setup_logger

__version__ = "0.1.0"
