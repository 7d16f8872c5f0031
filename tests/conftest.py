"""
Pytest configuration and shared fixtures for Prism Nodes tests.

This file provides:
1. Factories for editor-shaped nodes and edges
2. Shared fixtures for common graphs
3. Helper functions for asserting on generated GLSL

Usage:
    pytest tests/ -v
"""

import pytest


# =============================================================================
# FACTORIES
# =============================================================================

def make_node(node_id, node_type, **params):
    """Editor-shaped node mapping (position is opaque to the compiler)."""
    return {
        'id': node_id,
        'type': node_type,
        'position': {'x': 0, 'y': 0},
        'params': params,
    }


def make_edge(source, source_handle, target, target_handle, edge_id=None):
    """Editor-shaped edge mapping with camelCase handles."""
    return {
        'id': edge_id or f"{source}.{source_handle}->{target}.{target_handle}",
        'source': source,
        'sourceHandle': source_handle,
        'target': target,
        'targetHandle': target_handle,
    }


# =============================================================================
# PYTEST FIXTURES
# =============================================================================

@pytest.fixture
def output_only_graph():
    """
    A lone terminal node with nothing wired.

    Returns:
        (nodes, edges)
    """
    return [make_node('out', 'output')], []


@pytest.fixture
def uv_color_graph():
    """
    UV -> RGB -> Output.

    Structure:
        uv.x -> rgb.r
        uv.y -> rgb.g
        rgb.color -> out.color
    """
    nodes = [
        make_node('out', 'output'),
        make_node('rgb', 'color_rgb'),
        make_node('uv', 'input_uv'),
    ]
    edges = [
        make_edge('uv', 'x', 'rgb', 'r'),
        make_edge('uv', 'y', 'rgb', 'g'),
        make_edge('rgb', 'color', 'out', 'color'),
    ]
    return nodes, edges


@pytest.fixture
def noise_graph():
    """
    UV -> Noise -> HSV to RGB -> Output, plus a second noise node.

    Both noise nodes require the same helper, which must appear once.
    """
    nodes = [
        make_node('uv', 'input_uv'),
        make_node('n1', 'pattern_noise', scale=3.0),
        make_node('n2', 'pattern_noise', octaves=4),
        make_node('hsv', 'color_hsv_to_rgb'),
        make_node('out', 'output'),
    ]
    edges = [
        make_edge('uv', 'uv', 'n1', 'uv'),
        make_edge('uv', 'uv', 'n2', 'uv'),
        make_edge('n1', 'value', 'hsv', 'h'),
        make_edge('n2', 'value', 'hsv', 's'),
        make_edge('hsv', 'color', 'out', 'color'),
    ]
    return nodes, edges


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def main_body(code):
    """Statement lines inside main(), stripped of indentation."""
    start = code.index("void main() {")
    body = code[start:].split("\n")[1:-1]
    return [line.strip() for line in body]


def declaration_index(code, var_expr):
    """Index of the first statement in main() that contains `var_expr`."""
    for i, line in enumerate(main_body(code)):
        if var_expr in line:
            return i
    raise AssertionError(f"'{var_expr}' not found in main():\n{code}")
