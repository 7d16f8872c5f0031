import unittest

from prism_nodes.ir.types import (
    PortType, ParamType,
    is_number, is_number_vector, is_text, is_param_value,
    is_port_type, is_port_def, is_param_def, is_node_instance, is_edge,
)


class TestPortType(unittest.TestCase):
    def test_component_counts(self):
        self.assertEqual(PortType.FLOAT.component_count(), 1)
        self.assertEqual(PortType.VEC2.component_count(), 2)
        self.assertEqual(PortType.VEC3.component_count(), 3)
        self.assertEqual(PortType.VEC4.component_count(), 4)

    def test_scalar_vector(self):
        self.assertTrue(PortType.FLOAT.is_scalar())
        self.assertFalse(PortType.FLOAT.is_vector())
        self.assertTrue(PortType.VEC3.is_vector())

    def test_glsl_names(self):
        self.assertEqual([t.glsl_name() for t in PortType], ['float', 'vec2', 'vec3', 'vec4'])
        self.assertEqual(str(PortType.VEC2), 'vec2')

    def test_default_values(self):
        self.assertEqual(PortType.FLOAT.default_value(), 0.0)
        self.assertEqual(PortType.VEC3.default_value(), (0.0, 0.0, 0.0))
        # Opaque alpha
        self.assertEqual(PortType.VEC4.default_value(), (0.0, 0.0, 0.0, 1.0))

    def test_from_name(self):
        self.assertEqual(PortType.from_name('vec4'), PortType.VEC4)
        self.assertEqual(PortType.from_name('FLOAT'), PortType.FLOAT)
        self.assertIs(PortType.from_name(PortType.VEC2), PortType.VEC2)
        with self.assertRaises(ValueError):
            PortType.from_name('mat4')

    def test_param_type_from_name(self):
        self.assertEqual(ParamType.from_name('select'), ParamType.SELECT)
        self.assertEqual(str(ParamType.COLOR), 'color')
        with self.assertRaises(ValueError):
            ParamType.from_name('bool')


class TestValueChecks(unittest.TestCase):
    def test_numbers(self):
        self.assertTrue(is_number(1))
        self.assertTrue(is_number(0.5))
        self.assertFalse(is_number(True))
        self.assertFalse(is_number("1"))

    def test_vectors(self):
        self.assertTrue(is_number_vector((0.5, 0.5)))
        self.assertTrue(is_number_vector([1, 2, 3]))
        self.assertFalse(is_number_vector(()))
        self.assertFalse(is_number_vector((1, "a")))

    def test_param_values(self):
        self.assertTrue(is_text('mix'))
        self.assertTrue(is_param_value('horizontal'))
        self.assertTrue(is_param_value((1.0, 0.0, 0.0)))
        self.assertFalse(is_param_value(None))
        self.assertFalse(is_param_value({'a': 1}))


class TestGuards(unittest.TestCase):
    def test_port_type(self):
        self.assertTrue(is_port_type('vec3'))
        self.assertTrue(is_port_type(PortType.FLOAT))
        self.assertFalse(is_port_type('color'))
        self.assertFalse(is_port_type(3))

    def test_port_def(self):
        self.assertTrue(is_port_def({'name': 'uv', 'type': 'vec2'}))
        self.assertTrue(is_port_def({'name': 'a', 'type': 'float', 'default': 0}))
        self.assertFalse(is_port_def({'name': 'uv'}))
        self.assertFalse(is_port_def(['uv', 'vec2']))

    def test_param_def(self):
        self.assertTrue(is_param_def({'name': 'mode', 'type': 'select', 'default': 'mix'}))
        self.assertTrue(is_param_def({'name': 'tint', 'type': 'color', 'default': (1, 1, 1)}))
        self.assertTrue(is_param_def({'name': 'speed', 'type': ParamType.FLOAT}))
        self.assertFalse(is_param_def({'name': 'speed', 'type': 'int'}))

    def test_node_instance(self):
        node = {'id': 'n1', 'type': 'math_add', 'position': {'x': 10, 'y': 20.5}, 'params': {}}
        self.assertTrue(is_node_instance(node))
        self.assertFalse(is_node_instance({'id': 'n1', 'type': 'math_add'}))
        self.assertFalse(is_node_instance({'id': 'n1', 'type': 'math_add', 'position': {'x': 0}}))
        self.assertFalse(is_node_instance(None))

    def test_edge(self):
        edge = {'id': 'e1', 'source': 'a', 'sourceHandle': 'result', 'target': 'b', 'targetHandle': 'x'}
        self.assertTrue(is_edge(edge))
        snake = {'id': 'e1', 'source': 'a', 'source_handle': 'result', 'target': 'b', 'target_handle': 'x'}
        self.assertFalse(is_edge(snake))


if __name__ == "__main__":
    unittest.main()
