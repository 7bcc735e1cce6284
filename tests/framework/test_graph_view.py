"""
GraphView Tests
===============

Covers:
1. operand indexing    - data operands in order, control inputs skipped
2. producer lookup     - produced values, graph inputs, dangling references, ports
3. preconditions       - out-of-range indices and foreign operations are fatal
4. configuration       - custom input ops
5. I/O                 - building a view from a saved graph
"""

import os
import tempfile
import unittest

import tensorflow.compat.v1 as tf

from graph_patterns.core import GraphView, PreconditionError, Value
from graph_patterns.config import MatchConfig
from graph_patterns.utils.graph_utils import create_node, create_const_node, save_graph

tf.disable_v2_behavior()


class TestGraphView(unittest.TestCase):
    def create_graph(self, nodes):
        graph_def = tf.GraphDef()
        graph_def.node.extend(nodes)
        return graph_def

    def setUp(self):
        self.graph_def = self.create_graph([
            create_node("Placeholder", "x"),
            create_node("Placeholder", "y"),
            create_const_node("half", value=0.5, dtype="float32", shape=[]),
            create_node("Tanh", "tanh", inputs=["x"]),
            create_node("Split", "split", inputs=["half", "x"]),
            create_node("Mul", "mul", inputs=["half", "tanh", "^y"]),
            create_node("AddN", "addn", inputs=["x", "split:1", "tanh"]),
            create_node("Identity", "dangling", inputs=["missing:0"]),
        ])
        self.view = GraphView(self.graph_def)

    def test_operands_skip_control_inputs(self):
        mul = self.view.node("mul")
        self.assertEqual(self.view.arity(mul), 2)
        self.assertEqual(self.view.operands(mul), (Value("half"), Value("tanh")))

    def test_operand_ports(self):
        addn = self.view.node("addn")
        self.assertEqual(self.view.operand_at(addn, 1), Value("split", 1))
        self.assertEqual(str(self.view.operand_at(addn, 1)), "split:1")
        self.assertEqual(self.view.producer("split:1").name, "split")

    def test_producer_of_produced_value(self):
        producer = self.view.producer(Value("tanh"))
        self.assertEqual(producer.name, "tanh")
        self.assertEqual(self.view.kind_of(producer), "Tanh")
        self.assertFalse(self.view.is_graph_input("tanh:0"))

    def test_placeholder_is_graph_input(self):
        self.assertIsNone(self.view.producer("x"))
        self.assertTrue(self.view.is_graph_input(Value("x")))
        self.assertIn("x", self.view.graph_inputs)

    def test_dangling_reference_is_graph_input(self):
        operand = self.view.operand_at(self.view.node("dangling"), 0)
        self.assertEqual(operand, Value("missing"))
        self.assertIsNone(self.view.producer(operand))

    def test_operand_index_out_of_range_is_fatal(self):
        addn = self.view.node("addn")
        with self.assertRaises(PreconditionError):
            self.view.operand_at(addn, 5)
        with self.assertRaises(PreconditionError):
            self.view.operand_at(addn, -1)

    def test_precondition_error_is_assertion(self):
        self.assertTrue(issubclass(PreconditionError, AssertionError))

    def test_foreign_operation_is_fatal(self):
        stranger = create_node("Mul", "stranger", inputs=["x", "y"])
        with self.assertRaises(PreconditionError):
            self.view.arity(stranger)

    def test_indexes_producers_only(self):
        # Matching is one hop towards producers; no consumer index is built
        self.assertFalse(hasattr(self.view, "consumers"))
        self.assertFalse(hasattr(self.view, "consumers_of"))
        self.assertEqual(set(self.view.nodes), {n.name for n in self.graph_def.node})

    def test_output(self):
        split = self.view.node("split")
        self.assertEqual(self.view.output(split, 1), Value.parse("split:1"))

    def test_view_does_not_modify_graph(self):
        before = self.graph_def.SerializeToString()
        mul = self.view.node("mul")
        self.view.operands(mul)
        self.view.producer("tanh")
        self.assertEqual(self.graph_def.SerializeToString(), before)

    def test_custom_input_ops(self):
        graph_def = self.create_graph([
            create_node("VarHandleOp", "w"),
            create_node("Placeholder", "x"),
            create_node("MatMul", "mm", inputs=["x", "w"]),
        ])
        view = GraphView(graph_def, MatchConfig(input_ops=["VarHandleOp"]))
        self.assertIsNone(view.producer("w"))
        self.assertEqual(view.producer("x").op, "Placeholder")

    def test_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "graphs", "g.pbtxt")
            save_graph(self.graph_def, path)
            view = GraphView.from_file(path)
        self.assertEqual(set(view.nodes), set(self.view.nodes))
        self.assertEqual(view.operands(view.node("mul")), (Value("half"), Value("tanh")))

    def test_from_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            GraphView.from_file("/nonexistent/graph.pb")

    def test_tf_built_graph(self):
        with tf.Graph().as_default():
            x = tf.placeholder(tf.float32, name="x")
            c = tf.constant(0.5, name="c")
            tf.multiply(c, tf.tanh(x, name="t"), name="mul")
            graph_def = tf.get_default_graph().as_graph_def()

        view = GraphView(graph_def)
        mul = view.node("mul")
        self.assertEqual(view.kind_of(mul), "Mul")
        self.assertEqual(view.producer(view.operand_at(mul, 0)).op, "Const")
        self.assertEqual(view.producer(view.operand_at(mul, 1)).op, "Tanh")
        self.assertIsNone(view.producer(view.operand_at(view.node("t"), 0)))


class TestValue(unittest.TestCase):
    def test_parse(self):
        self.assertEqual(Value.parse("a"), Value("a", 0))
        self.assertEqual(Value.parse("a:0"), Value("a", 0))
        self.assertEqual(Value.parse("scope/a:2"), Value("scope/a", 2))

    def test_parse_rejects_control_input(self):
        with self.assertRaises(ValueError):
            Value.parse("^a")

    def test_parse_rejects_malformed_names(self):
        for bad in ["", ":0", "a:", "a:x", "a:-1"]:
            with self.subTest(name=bad):
                with self.assertRaises(ValueError):
                    Value.parse(bad)


if __name__ == "__main__":
    unittest.main()
