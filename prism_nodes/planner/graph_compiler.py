"""
GraphCompiler - Compiles node graphs to fragment shaders.

compile_graph() is stateless: every call builds its own GraphView and
ShaderGenerator and shares nothing with other calls.

A GraphCompiler instance can additionally remember recent successful
results, for hosts that recompile on every graph mutation without
debouncing.

Caching Strategy:
- Graph hash covers node ids, types and params, and edge endpoints/handles
- Node positions are ignored
- Only successful results are cached; results are immutable
- Cache access is serialized per instance
"""

import hashlib
import json
import logging
import threading
from collections import OrderedDict
from typing import Any, Dict, Iterable, Optional

from ..codegen.glsl import ShaderGenerator
from ..codegen.result import CompiledResult
from ..errors import CompilationError
from ..ir.graph import EdgeLike, GraphView, NodeLike
from ..nodes.registry import NodeRegistry

logger = logging.getLogger(__name__)


def _compile_view(view: GraphView, registry: Optional[NodeRegistry]) -> CompiledResult:
    try:
        code, helpers = ShaderGenerator(view, registry).generate()
    except CompilationError as e:
        logger.info(f"Compile failed: {e}" + (f" (node {e.node_id})" if e.node_id else ""))
        return CompiledResult.failure(str(e), e.node_id)
    return CompiledResult.ok(code, helpers)


def compute_graph_hash(view: GraphView) -> str:
    """
    Hash of everything the generator reads from a snapshot.

    Node and edge order are part of the key: they decide tie-breaks in
    the sort and which duplicate edge wins.
    """
    hasher = hashlib.sha256()

    hasher.update(f"nodes:{len(view.nodes)}".encode())
    for node in view.nodes:
        params = json.dumps(node.params, sort_keys=True, default=repr)
        hasher.update(f"node:{node.id}:{node.type}:{params}".encode())

    hasher.update(f"edges:{len(view.edges)}".encode())
    for edge in view.edges:
        hasher.update(
            f"edge:{edge.source}.{edge.source_handle}->{edge.target}.{edge.target_handle}".encode()
        )

    return hasher.hexdigest()


class ResultCache:
    """
    Bounded map of graph hash -> CompiledResult, evicting the least
    recently used entry. Safe to share between threads.
    """

    def __init__(self, capacity: int = 16):
        self.capacity = max(0, capacity)
        self._entries: "OrderedDict[str, CompiledResult]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def lookup(self, key: str) -> Optional[CompiledResult]:
        with self._lock:
            result = self._entries.get(key)
            if result is None:
                self._misses += 1
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return result

    def store(self, key: str, result: CompiledResult) -> None:
        if not self.capacity:
            return
        with self._lock:
            self._entries[key] = result
            self._entries.move_to_end(key)
            while len(self._entries) > self.capacity:
                self._entries.popitem(last=False)

    def discard(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def reset(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = self._misses = 0

    def stats(self) -> Dict[str, Any]:
        with self._lock:
            lookups = self._hits + self._misses
            return {
                'size': len(self._entries),
                'capacity': self.capacity,
                'hits': self._hits,
                'misses': self._misses,
                'hit_rate': (self._hits / lookups * 100) if lookups else 0,
            }


class GraphCompiler:
    """
    Compiles node/edge snapshots to GLSL, returning a CompiledResult.

    Graph problems never raise out of compile(); they come back as
    success=False with a message and, where possible, the offending node id.

    Example:
        compiler = GraphCompiler()
        result = compiler.compile(nodes, edges)
        if result.success:
            renderer.compile(result.code)
    """

    def __init__(self, cache_capacity: int = 16, registry: Optional[NodeRegistry] = None):
        """
        Args:
            cache_capacity: Maximum number of compiled graphs to remember (0 disables)
            registry: Node capability table (defaults to the built-in catalog)
        """
        self._cache = ResultCache(capacity=cache_capacity)
        self.registry = registry

    def compile(self, nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]) -> CompiledResult:
        view = GraphView(nodes, edges)
        graph_hash = compute_graph_hash(view)

        cached = self._cache.lookup(graph_hash)
        if cached is not None:
            logger.debug(f"Graph compile CACHE HIT (hash={graph_hash[:8]}...)")
            return cached

        logger.debug(f"Graph compile CACHE MISS (hash={graph_hash[:8]}...)")
        result = _compile_view(view, self.registry)
        if result.success:
            self._cache.store(graph_hash, result)
        return result

    def invalidate(self, nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]) -> bool:
        """
        Forget the cached result for a specific snapshot.

        Returns:
            True if an entry was removed, False if not found
        """
        return self._cache.discard(compute_graph_hash(GraphView(nodes, edges)))

    def clear_cache(self) -> None:
        self._cache.reset()
        logger.debug("GraphCompiler cache cleared")

    def stats(self) -> Dict[str, Any]:
        """Return cache statistics."""
        return self._cache.stats()


def compile_graph(nodes: Iterable[NodeLike], edges: Iterable[EdgeLike],
                  registry: Optional[NodeRegistry] = None) -> CompiledResult:
    """
    Compile one snapshot without any caching or shared state.

    Args:
        nodes: NodeInstance objects or editor mappings
        edges: Edge objects or editor mappings
        registry: Node capability table (defaults to the built-in catalog)

    Returns:
        CompiledResult
    """
    return _compile_view(GraphView(nodes, edges), registry)


# Name used by the editor front end
generate_glsl = compile_graph
