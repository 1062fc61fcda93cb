"""Python-side construction of node trees.

Two surfaces are offered:

* ``h`` builds elements with the ``tag(attrs)[children]`` grammar::

      h.html[
          h.head[h.meta(name='"author"', content='"X"'), h.title["T"]],
          h.body(class_='"main"')["Hello"],
      ]

* ``parse_vector`` accepts nested vectors in the style of Clojure's hiccup::

      ["a", {"href": '"http://github.com"'}, ["GitHub"]]

  The optional second item is the attribute block (a mapping, or a tuple of
  ``(key, value)`` pairs when keys repeat) and the optional last item is the
  children list. A vector with no children list is self-closing.

Both raise :class:`~hiccup.nodes.DescriptionError` for malformed input,
before anything is rendered.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Sequence, Tuple

from .nodes import DescriptionError, Element, check_name


class TagFactory:
    """Create bare elements by attribute access or by call."""

    def __getattr__(self, name: str) -> Element:
        if name.startswith("_"):
            raise AttributeError(name)
        return Element(name)

    def __call__(self, name: str) -> Element:
        return Element(name)


h = TagFactory()


def _is_attr_block(value: Any) -> bool:
    return isinstance(value, Mapping) or isinstance(value, tuple)


def parse_vector(vector: Sequence[Any]) -> Element:
    if not isinstance(vector, list) or not vector:
        raise DescriptionError(f"element vector must be a non-empty list, got {vector!r}")
    tag = check_name(vector[0])
    rest = vector[1:]

    attrs: Any = None
    children: Any = None
    if rest and _is_attr_block(rest[0]):
        attrs = rest[0]
        rest = rest[1:]
    if rest:
        if not isinstance(rest[0], list):
            raise DescriptionError(
                f"<{tag}>: expected a children list after the attributes, got {rest[0]!r}"
            )
        children = parse_nodes(rest[0])
        rest = rest[1:]
    if rest:
        raise DescriptionError(f"<{tag}>: unexpected trailing items {rest!r}")
    return Element(tag, attrs, children)


def parse_nodes(items: Sequence[Any]) -> Tuple[Any, ...]:
    """Parse an ordered list of vectors and literals into nodes."""
    nodes: List[Any] = []
    for item in items:
        if isinstance(item, list):
            nodes.append(parse_vector(item))
        elif item is None or isinstance(item, (Mapping, tuple)):
            raise DescriptionError(f"unexpected item in children list: {item!r}")
        else:
            nodes.append(item)
    return tuple(nodes)


__all__ = ["TagFactory", "h", "parse_nodes", "parse_vector"]
