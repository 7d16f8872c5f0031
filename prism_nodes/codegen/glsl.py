import logging
from typing import Dict, List, Optional, Tuple

from ..errors import HelperNotFoundError, NoOutputNodeError, UnknownNodeTypeError
from ..ir.graph import GraphView, NodeInstance
from ..ir.types import PortType
from ..nodes.base import FRAG_COLOR_KEY, NodeDef, PortDef
from ..nodes.registry import NodeRegistry, NODE_REGISTRY
from ..planner.analysis import get_topological_sort
from ..planner.type_resolver import convert, infer_output_types, port_key
from .emitters.const import format_constant
from .shader_lib import get_helper

logger = logging.getLogger(__name__)

GLSL_VERSION = "#version 300 es"
PRECISION = "precision highp float;"

# Declared in this order: elapsed time, viewport size, pointer position
UNIFORMS = (
    ('float', 'u_time'),
    ('vec2', 'u_resolution'),
    ('vec2', 'u_mouse'),
)

OUTPUT_VARIABLE = "fragColor"
VAR_PREFIX = "v"
INDENT = "  "


class ShaderGenerator:
    """
    Generates a GLSL ES fragment shader from one graph snapshot.

    A generator is single-use: it owns the variable counter and the
    bindings for exactly one compile call.
    """
    def __init__(self, view: GraphView, registry: Optional[NodeRegistry] = None):
        self.view = view
        self.registry = registry or NODE_REGISTRY

        self._next_var_id = 0
        # "nodeId.port" -> variable name holding that output
        self._bindings: Dict[str, str] = {}
        self._output_types: Dict[str, PortType] = {}
        self._helpers: List[str] = []
        self._statements: List[str] = []
        self._writes: List[str] = []

    def generate(self) -> Tuple[str, List[str]]:
        """
        Returns:
            (shader source, helper names in first-seen order)

        Raises:
            CycleError, NoOutputNodeError, UnknownNodeTypeError, HelperNotFoundError
        """
        # Cycles are reported ahead of a missing output node
        order = get_topological_sort(self.view)
        self._require_output_node()
        self._output_types = infer_output_types(self.view.nodes, self.registry)

        for node in order:
            self._emit_node(node)

        sections = [self._generate_header()]
        if self._helpers:
            sections.append("\n\n".join(get_helper(name) for name in self._helpers))
        sections.append(self._generate_main())

        logger.debug(
            f"Generated shader: {len(self._statements)} declarations, "
            f"{len(self._writes)} output writes, helpers={self._helpers}"
        )
        return "\n\n".join(sections), list(self._helpers)

    def _require_output_node(self):
        for node in self.view.nodes:
            node_def = self.registry.get(node.type)
            if node_def is not None and node_def.is_terminal:
                return
        raise NoOutputNodeError()

    def _generate_header(self) -> str:
        lines = [GLSL_VERSION, PRECISION, ""]
        for type_name, name in UNIFORMS:
            lines.append(f"uniform {type_name} {name};")
        lines.append("")
        lines.append(f"out vec4 {OUTPUT_VARIABLE};")
        return "\n".join(lines)

    def _generate_main(self) -> str:
        lines = ["void main() {"]
        lines.extend(self._statements)
        # Output writes go last so the color write closes the routine
        lines.extend(self._writes)
        lines.append("}")
        return "\n".join(lines)

    def _new_var(self) -> str:
        name = f"{VAR_PREFIX}{self._next_var_id}"
        self._next_var_id += 1
        return name

    def _lookup(self, node: NodeInstance) -> NodeDef:
        node_def = self.registry.get(node.type)
        if node_def is None:
            raise UnknownNodeTypeError(
                f"Unknown node type: {node.type}", node_id=node.id, node_type=node.type
            )
        return node_def

    def _resolve_input(self, node: NodeInstance, port: PortDef) -> str:
        """Wired variable (converted if kinds differ) or the port's default literal."""
        edge = self.view.input_connection(node.id, port.name)
        if edge is not None:
            key = port_key(edge.source, edge.source_handle)
            var = self._bindings.get(key)
            if var is not None:
                source_type = self._output_types.get(key)
                if source_type is not None and source_type != port.type:
                    return convert(source_type, port.type, var)
                return var
        return format_constant(port.default, port.type)

    def _collect_helpers(self, node: NodeInstance, node_def: NodeDef):
        for name in node_def.helpers:
            if name in self._helpers:
                continue
            if get_helper(name) is None:
                raise HelperNotFoundError(
                    f"Unknown shader helper '{name}' required by {node.type}",
                    node_id=node.id, helper_name=name,
                )
            self._helpers.append(name)

    def _emit_node(self, node: NodeInstance):
        node_def = self._lookup(node)
        self._collect_helpers(node, node_def)

        inputs = {port.name: self._resolve_input(node, port) for port in node_def.inputs}
        params = node_def.resolve_params(node.params, node.id)
        outputs = node_def.emit(inputs, params)

        if node_def.is_terminal:
            code = outputs.get(FRAG_COLOR_KEY)
            if code:
                self._writes.append(f"{INDENT}{OUTPUT_VARIABLE} = {code};")
            return

        for output in node_def.outputs:
            code = outputs.get(output.name)
            if not code:
                continue
            var = self._new_var()
            self._statements.append(f"{INDENT}{output.type.glsl_name()} {var} = {code};")
            self._bindings[port_key(node.id, output.name)] = var
