import unittest

from hiccup.builder import h, parse_nodes, parse_vector
from hiccup.nodes import DescriptionError, Element
from hiccup.render import render_to_string


class TagGrammarTest(unittest.TestCase):
    def test_guide_page(self) -> None:
        page = h.html[
            h.head[
                h.meta(name='"author"', content='"Julia Naomi"'),
                h.title["Hiccup guide"],
            ],
            h.body(class_='"amazing hiccup guide"')[
                h.h1(font='"bold"', color='"red"')["Hiccup is the best!"],
                h.p["please lookup clojure's hiccup for better ideas on this macro"],
            ],
        ]
        expected = (
            '<html><head><meta name="author" content="Julia Naomi"/>'
            "<title>Hiccup guide</title></head><body class=\"amazing hiccup guide\">"
            '<h1 font="bold" color="red">Hiccup is the best!</h1>'
            "<p>please lookup clojure's hiccup for better ideas on this macro</p></body></html>"
        )
        self.assertEqual(render_to_string(page), expected)

    def test_shapes(self) -> None:
        self.assertEqual(h.br, Element("br"))
        self.assertIsNone(h.br.children)
        self.assertEqual(h.body[()].children, ())
        self.assertEqual(h.p["hi"].children, ("hi",))
        self.assertEqual(h("my-widget")(**{"data-id": "7"}).attrs, (("data-id", "7"),))

    def test_positional_pairs_keep_duplicates_before_keywords(self) -> None:
        node = h.input(("class", "a"), ("class", "b"), type="text")
        self.assertEqual(node.attrs, (("class", "a"), ("class", "b"), ("type", "text")))

    def test_pair_list_and_mapping_blocks(self) -> None:
        self.assertEqual(h.a([("x", 1), ("y", 2)]).attrs, (("x", 1), ("y", 2)))
        self.assertEqual(h.a({"x": 1}).attrs, (("x", 1),))

    def test_empty_attribute_block_is_no_attributes(self) -> None:
        for node in (h.hr(), h.hr([]), h.hr(()), h.hr({})):
            with self.subTest(node=node):
                self.assertIsNone(node.attrs)
                self.assertEqual(render_to_string(node), "<hr/>")

    def test_attributes_after_children_rejected(self) -> None:
        with self.assertRaises(DescriptionError):
            h.p["x"](class_="c")

    def test_double_blocks_rejected(self) -> None:
        with self.assertRaises(DescriptionError):
            h.p(a="1")(b="2")
        with self.assertRaises(DescriptionError):
            h.p["x"]["y"]

    def test_invalid_names_rejected(self) -> None:
        with self.assertRaises(DescriptionError):
            h("1st")
        with self.assertRaises(DescriptionError):
            h("a b")
        with self.assertRaises(DescriptionError):
            h.a(("bad key", "v"))
        with self.assertRaises(DescriptionError):
            h.a("not-a-pair")

    def test_none_child_rejected(self) -> None:
        with self.assertRaises(DescriptionError):
            h.p[None]

    def test_nested_none_child_rejected(self) -> None:
        with self.assertRaises(DescriptionError):
            Element("p", children=[[None]])
        with self.assertRaises(DescriptionError):
            h.p["a", ("b", [None])]

    def test_generator_children_are_materialized(self) -> None:
        node = h.ul[(h.li[str(i)] for i in range(3))]
        self.assertEqual(render_to_string(node), "<ul><li>0</li><li>1</li><li>2</li></ul>")
        self.assertEqual(
            render_to_string(Element("p", children=(c for c in "ab"))),
            "<p>ab</p>",
        )
        # frozen: a second render sees the same children
        self.assertEqual(render_to_string(node), render_to_string(node))

    def test_private_attributes_are_not_tags(self) -> None:
        with self.assertRaises(AttributeError):
            h._private


class VectorFormTest(unittest.TestCase):
    def test_link(self) -> None:
        node = parse_vector(["a", {"href": '"http://github.com"'}, ["GitHub"]])
        self.assertEqual(render_to_string(node), '<a href="http://github.com">GitHub</a>')

    def test_shapes(self) -> None:
        self.assertEqual(render_to_string(parse_vector(["br"])), "<br/>")
        self.assertEqual(render_to_string(parse_vector(["body", []])), "<body></body>")
        self.assertEqual(
            render_to_string(parse_vector(["meta", (("name", "a"), ("name", "b"))])),
            "<meta name=a name=b/>",
        )

    def test_nested_children(self) -> None:
        nodes = parse_nodes([["p", ["x", ["b", ["y"]], "z"]], ["hr"]])
        self.assertEqual(render_to_string(nodes), "<p>x<b>y</b>z</p><hr/>")

    def test_malformed_vectors(self) -> None:
        for bad in ([], ["p", "text"], ["p", {}, [], []], [1], ["p", [None]]):
            with self.subTest(bad=bad):
                with self.assertRaises(DescriptionError):
                    parse_vector(bad)


if __name__ == "__main__":
    unittest.main()
