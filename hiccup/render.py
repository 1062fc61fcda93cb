"""Serialize node trees to markup text.

Output shapes, byte for byte:

* ``<tag k=v k2=v2>children</tag>`` for an element with a children block,
* ``<tag k=v/>`` for an element without one (including a bare tag),
* ``str(value)`` for anything else.

Literals and attribute values are written verbatim: nothing is escaped and
attribute values are not quoted, so ``h.a(href='"/x"')`` is how a quoted value
is written. Callers rendering untrusted text must escape it first, or pass
``RenderOptions(escape=True)``.
"""

from __future__ import annotations

import html
from typing import Any, Callable, Iterator, List, Optional, Protocol, Tuple

from .config import DEFAULT_OPTIONS, RenderOptions
from .nodes import DescriptionError, Element, is_sequence


class TextSink(Protocol):
    def write(self, text: str) -> Any: ...


class RenderDepthError(RecursionError):
    """Raised when a tree nests deeper than ``RenderOptions.max_depth``."""

    def __init__(self, tag: str, max_depth: int) -> None:
        super().__init__(f"<{tag}> exceeds the maximum nesting depth of {max_depth}")
        self.tag = tag
        self.max_depth = max_depth


_END = object()


def _sink_writer(sink: Any) -> Callable[[str], Any]:
    write = getattr(sink, "write", None)
    if callable(write):
        return write
    if isinstance(sink, list):
        return sink.append
    raise TypeError(f"sink must have a write() method or be a list, got {type(sink).__name__}")


def _literal(value: Any, escape: bool) -> str:
    if not escape:
        return str(value)
    if hasattr(value, "__html__"):
        return value.__html__()
    return html.escape(str(value), quote=False)


def _attr_value(value: Any, escape: bool) -> str:
    if not escape:
        return str(value)
    if hasattr(value, "__html__"):
        return f'"{value.__html__()}"'
    return f'"{html.escape(str(value), quote=True)}"'


def _open_tag(node: Element, escape: bool) -> str:
    parts = [f"<{node.tag}"]
    for key, value in node.attrs or ():
        parts.append(f" {key}={_attr_value(value, escape)}")
    parts.append("/>" if node.children is None else ">")
    return "".join(parts)


def iter_markup(nodes: Any, options: Optional[RenderOptions] = None) -> Iterator[str]:
    """Yield the rendered pieces of ``nodes`` in document order.

    Walks the tree with an explicit stack; each frame pairs an iterator over
    sibling nodes with the close tag to emit once they are exhausted.
    """
    options = options or DEFAULT_OPTIONS
    escape = options.escape
    max_depth = options.max_depth

    roots = nodes if is_sequence(nodes) else (nodes,)
    stack: List[Tuple[Iterator[Any], Optional[str]]] = [(iter(roots), None)]
    depth = 0
    while stack:
        siblings, close = stack[-1]
        node = next(siblings, _END)
        if node is _END:
            stack.pop()
            if close is not None:
                depth -= 1
                yield close
            continue

        if isinstance(node, Element):
            if max_depth is not None and depth >= max_depth:
                raise RenderDepthError(node.tag, max_depth)
            yield _open_tag(node, escape)
            if node.children is not None:
                depth += 1
                stack.append((iter(node.children), f"</{node.tag}>"))
        elif is_sequence(node):
            stack.append((iter(node), None))
        elif node is None:
            raise DescriptionError("None is not a valid node")
        else:
            yield _literal(node, escape)


def render(sink: TextSink | List[str], nodes: Any, options: Optional[RenderOptions] = None) -> None:
    """Append the markup for ``nodes`` to ``sink``.

    ``nodes`` is a single node or an ordered sequence of nodes; ``None``
    anywhere in it raises :class:`~hiccup.nodes.DescriptionError`. The sink is
    only ever appended to, once per call, after the whole tree has rendered,
    so a call that raises leaves the sink untouched.
    """
    write = _sink_writer(sink)
    text = "".join(iter_markup(nodes, options))
    if text:
        write(text)


def render_to_string(nodes: Any, options: Optional[RenderOptions] = None) -> str:
    return "".join(iter_markup(nodes, options))


__all__ = [
    "RenderDepthError",
    "TextSink",
    "iter_markup",
    "render",
    "render_to_string",
]
