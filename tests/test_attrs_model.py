from __future__ import annotations

import unittest

from flowdot.graphs.attrs import AttrSet, Color, Label, PenWidth, Shape, ShapeKind, escape_dot_string
from flowdot.graphs.model import Edge, FlowGraph, IdGenerator, Node


class AttrSetTests(unittest.TestCase):
    def test_first_label_wins(self) -> None:
        attrs = AttrSet()
        self.assertTrue(attrs.insert(Label("first")))
        self.assertFalse(attrs.insert(Label("second")))
        self.assertEqual(attrs.get("label"), Label("first"))
        self.assertEqual(len(attrs), 1)

    def test_constructor_keeps_first_of_each_kind(self) -> None:
        attrs = AttrSet([Label("a"), Shape(ShapeKind.DIAMOND), Label("b"), Shape(ShapeKind.RECTANGLE)])
        self.assertEqual(attrs.as_dict(), {"label": "a", "shape": "diamond"})

    def test_layered_adds_missing_kinds_without_mutating(self) -> None:
        base = AttrSet([Label("a"), Color("blue")])
        layered = base.layered(Color("red"), PenWidth(3))
        self.assertEqual(layered.as_dict(), {"label": "a", "color": "blue", "penwidth": 3})
        self.assertEqual(base.as_dict(), {"label": "a", "color": "blue"})

    def test_iteration_follows_insertion_order(self) -> None:
        attrs = AttrSet([Shape(ShapeKind.RECTANGLE), Label("x"), PenWidth(2)])
        self.assertEqual([a.kind for a in attrs], ["shape", "label", "penwidth"])
        self.assertIn("label", attrs)
        self.assertNotIn("color", attrs)

    def test_as_dot(self) -> None:
        self.assertEqual(Label("go").as_dot(), 'label="go"')
        self.assertEqual(Shape(ShapeKind.DIAMOND).as_dot(), "shape=diamond")
        self.assertEqual(Color("red").as_dot(), "color=red")
        self.assertEqual(PenWidth(3).as_dot(), "penwidth=3")

    def test_escape(self) -> None:
        self.assertEqual(Label('say "hi"').as_dot(), 'label="say \\"hi\\""')
        self.assertEqual(escape_dot_string("a\\b"), "a\\\\b")
        self.assertEqual(escape_dot_string("one\ntwo"), "one\\ntwo")


class GraphModelTests(unittest.TestCase):
    def test_id_generator_is_sequential(self) -> None:
        ids = IdGenerator()
        self.assertEqual([next(ids) for _ in range(3)], ["n0", "n1", "n2"])
        self.assertEqual(ids.next_id(), "n3")

    def test_create_connect_restyle_records(self) -> None:
        g = FlowGraph()
        a = g.create_node(Label("a"))
        b = g.create_node(Label("b"))
        conn = g.connect(Edge(a, "True"), b)
        styled = g.restyle(b, Color("red"))

        self.assertEqual((a.id, b.id), ("n0", "n1"))
        self.assertEqual((conn.source_id, conn.target_id, conn.label), ("n0", "n1", "True"))
        self.assertEqual(g.records, [a, b, conn, styled])
        self.assertEqual(g.node_ids, ["n0", "n1"])
        self.assertEqual(len(g.nodes), 3)
        self.assertEqual(g.final_declaration("n1").attrs.as_dict(), {"label": "b", "color": "red"})
        # the first declaration is untouched
        self.assertEqual(b.attrs.as_dict(), {"label": "b"})

    def test_restyle_cannot_overwrite_label(self) -> None:
        g = FlowGraph()
        n = g.create_node(Label("first"))
        styled = g.restyle(n, Label("second"))
        self.assertEqual(styled.attrs.get("label"), Label("first"))

    def test_edge_labelled(self) -> None:
        n = Node("n7")
        e = Edge(n).labelled("False")
        self.assertEqual((e.source_id, e.label), ("n7", "False"))
        self.assertIsNone(Edge(n).label)


if __name__ == "__main__":
    unittest.main()
