"""
Node catalog and emitter tests.

Run with: pytest tests/test_nodes.py -v
"""

import logging

import pytest

from prism_nodes.codegen.emitters import format_constant, format_float, format_param
from prism_nodes.codegen.emitters.color import emit_blend, emit_hsv_to_rgb, emit_rgb
from prism_nodes.codegen.emitters.inputs import FRAG_UV, emit_resolution, emit_time, emit_uv
from prism_nodes.codegen.emitters.output import FRAG_COLOR_KEY, emit_output
from prism_nodes.codegen.emitters.patterns import emit_checker, emit_circle, emit_gradient, emit_noise
from prism_nodes.ir.types import ParamType, PortType
from prism_nodes.nodes import (
    NODE_REGISTRY, NodeCategory, NodeRegistry,
    get_all_node_defs, get_categories, get_node_def, get_nodes_by_category, has_node_def,
)
from prism_nodes.nodes.base import ParamDef
from prism_nodes.nodes.input import TimeNode
from prism_nodes.nodes.pattern import CircleNode, GradientNode, NoiseNode


class TestCatalog:
    def test_node_count(self):
        assert len(get_all_node_defs()) == 20
        assert len(NODE_REGISTRY) == 20

    @pytest.mark.parametrize("category,count", [
        ('input', 4),
        ('math', 8),
        ('pattern', 4),
        ('color', 3),
        ('output', 1),
    ])
    def test_category_sizes(self, category, count):
        assert len(get_nodes_by_category(category)) == count

    def test_category_enum_lookup(self):
        assert get_nodes_by_category(NodeCategory.OUTPUT) == [get_node_def('output')]

    def test_categories_in_registration_order(self):
        assert get_categories() == ['input', 'math', 'pattern', 'color', 'output']

    def test_types_unique(self):
        types = [d.type for d in get_all_node_defs()]
        assert len(types) == len(set(types))

    def test_lookup(self):
        assert has_node_def('math_mix')
        assert 'pattern_noise' in NODE_REGISTRY
        assert get_node_def('nope') is None
        assert not has_node_def('nope')

    def test_single_terminal(self):
        terminals = [d for d in get_all_node_defs() if d.is_terminal]
        assert [d.type for d in terminals] == ['output']
        assert terminals[0].outputs == ()

    def test_helper_requirements(self):
        assert get_node_def('pattern_noise').helpers == ('snoise',)
        assert get_node_def('color_hsv_to_rgb').helpers == ('hsv2rgb',)
        assert get_node_def('math_add').helpers == ()

    def test_port_lookup(self):
        circle = get_node_def('pattern_circle')
        assert circle.input('uv').type == PortType.VEC2
        assert circle.output('distance').type == PortType.FLOAT
        assert circle.input('missing') is None

    def test_math_defaults(self):
        mix = get_node_def('math_mix')
        assert [(p.name, p.default) for p in mix.inputs] == [('a', 0), ('b', 1), ('t', 0.5)]
        assert all(p.type == PortType.FLOAT for p in mix.inputs)

    def test_duplicate_registration_rejected(self):
        registry = NodeRegistry([TimeNode])
        with pytest.raises(ValueError):
            registry.register(TimeNode)


class TestResolveParams:
    def test_defaults_fill_missing(self):
        assert TimeNode.resolve_params({}) == {'speed': 1.0}
        assert TimeNode.resolve_params(None) == {'speed': 1.0}

    def test_explicit_none_replaced_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="prism_nodes"):
            assert TimeNode.resolve_params({'speed': None}, node_id='t1') == {'speed': 1.0}
        assert "t1" in caplog.text

    def test_missing_param_is_silent(self, caplog):
        with caplog.at_level(logging.WARNING, logger="prism_nodes"):
            TimeNode.resolve_params({})
        assert caplog.text == ""

    @pytest.mark.parametrize("node_def,overrides,expected", [
        (CircleNode, {'center': 0.5}, (0.5, 0.5)),
        (CircleNode, {'center': [0.2]}, (0.5, 0.5)),
        (CircleNode, {'center': [0.2, 0.8]}, [0.2, 0.8]),
        (NoiseNode, {'octaves': 'many'}, 1.0),
        (NoiseNode, {'octaves': True}, 1.0),
        (NoiseNode, {'octaves': float('inf')}, 1.0),
        (GradientNode, {'direction': 2}, 'horizontal'),
        (GradientNode, {'direction': 'radial'}, 'radial'),
    ])
    def test_override_shape_checked(self, node_def, overrides, expected):
        name = next(iter(overrides))
        assert node_def.resolve_params(overrides)[name] == expected

    def test_overrides_and_extras_kept(self):
        assert TimeNode.resolve_params({'speed': 3, 'extra': 'x'}) == {'speed': 3, 'extra': 'x'}


class TestConstants:
    def test_float_always_has_point(self):
        assert format_float(1) == "1.0"
        assert format_float(0) == "0.0"
        assert format_float(0.25) == "0.25"
        assert format_float(-2) == "-2.0"

    def test_param_fixed_point(self):
        assert format_param(2) == "2.0000"
        assert format_param(0.01) == "0.0100"

    def test_vectors(self):
        assert format_constant((0.5, 0.5), PortType.VEC2) == "vec2(0.5, 0.5)"
        assert format_constant((1, 0, 0), PortType.VEC4) == "vec4(1.0, 0.0, 0.0, 1.0)"
        assert format_constant(2, PortType.VEC3) == "vec3(2.0)"

    def test_missing_uses_kind_default(self):
        assert format_constant(None, PortType.FLOAT) == "0.0"
        assert format_constant(None, PortType.VEC4) == "vec4(0.0, 0.0, 0.0, 1.0)"
        assert format_constant('text', PortType.VEC2) == "vec2(0.0, 0.0)"


class TestEmitters:
    def test_uv(self):
        out = emit_uv({}, {})
        assert out['uv'] == FRAG_UV
        assert out['x'] == f"{FRAG_UV}.x"

    def test_time_speed(self):
        assert emit_time({}, {'speed': 1.0})['time'] == "u_time"
        out = emit_time({}, {'speed': 2})
        assert out['time'] == "(u_time * 2.0000)"
        assert out['sin'] == "sin((u_time * 2.0000))"

    def test_resolution_aspect(self):
        assert emit_resolution({}, {})['aspect'] == "(u_resolution.x / u_resolution.y)"

    def test_noise_octaves(self):
        assert emit_noise({'uv': 'v0'}, {'scale': 5.0, 'octaves': 1.0}) == {'value': "snoise(v0 * 5.0000)"}
        assert emit_noise({'uv': 'v0'}, {'scale': 3.0, 'octaves': 4.7}) == {'value': "fbm(v0 * 3.0000, 4)"}

    def test_circle(self):
        out = emit_circle({'uv': 'p'}, {'radius': 0.3, 'center': (0.5, 0.5), 'softness': 0.01})
        assert out['distance'] == "length(p - vec2(0.5000, 0.5000))"
        assert out['value'] == "smoothstep(0.3000 + 0.0100, 0.3000 - 0.0100, length(p - vec2(0.5000, 0.5000)))"

    def test_checker(self):
        assert emit_checker({'uv': 'p'}, {'scale': 8.0})['value'] == \
            "mod(floor(p.x * 8.0000) + floor(p.y * 8.0000), 2.0)"

    @pytest.mark.parametrize("direction,expected", [
        ('horizontal', "p.x"),
        ('vertical', "p.y"),
        ('diagonal', "(p.x + p.y) * 0.5"),
        ('radial', "length(p - vec2(0.5))"),
        ('sideways', "p.x"),
    ])
    def test_gradient(self, direction, expected):
        assert emit_gradient({'uv': 'p'}, {'direction': direction}) == {'value': expected}

    def test_colors(self):
        assert emit_rgb({'r': 'a', 'g': 'b', 'b': 'c'}, {}) == {'color': "vec3(a, b, c)"}
        assert emit_hsv_to_rgb({'h': 'h', 's': '1.0', 'v': '1.0'}, {}) == {'color': "hsv2rgb(vec3(h, 1.0, 1.0))"}

    @pytest.mark.parametrize("mode,expected", [
        ('mix', "mix(x, y, f)"),
        ('add', "(x + y * f)"),
        ('multiply', "mix(x, x * y, f)"),
    ])
    def test_blend(self, mode, expected):
        inputs = {'color1': 'x', 'color2': 'y', 'factor': 'f'}
        assert emit_blend(inputs, {'mode': mode}) == {'color': expected}

    def test_output_uses_frag_color_key(self):
        assert emit_output({'color': 'c', 'alpha': '1.0'}, {}) == {FRAG_COLOR_KEY: "vec4(c, 1.0)"}


class TestParamAccepts:
    def test_color_allows_alpha(self):
        tint = ParamDef('tint', ParamType.COLOR, (1.0, 1.0, 1.0))
        assert tint.accepts((1, 0, 0))
        assert tint.accepts((1, 0, 0, 0.5))
        assert not tint.accepts((1, 0))
        assert not tint.accepts('red')

    def test_vectors_need_enough_components(self):
        offset = ParamDef('offset', ParamType.VEC3, (0.0, 0.0, 0.0))
        assert offset.accepts([1, 2, 3])
        assert not offset.accepts([1, 2])
        assert not offset.accepts(1.0)
