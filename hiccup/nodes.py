"""Node model for markup descriptions."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Tuple, Union

NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_.:-]*\Z")

Attr = Tuple[str, Any]
AttrsLike = Union[Mapping[str, Any], Iterable[Attr]]


class DescriptionError(ValueError):
    """Raised when a node description is malformed."""


def check_name(name: Any, what: str = "tag") -> str:
    if not isinstance(name, str) or not NAME_RE.match(name):
        raise DescriptionError(f"invalid {what} name: {name!r}")
    return name


def normalize_attrs(attrs: AttrsLike | None, *, tag: str = "?") -> Tuple[Attr, ...] | None:
    """Turn a mapping or an iterable of pairs into an ordered tuple of pairs.

    Duplicate keys are kept. An empty block becomes ``None``.
    """
    if attrs is None:
        return None
    if isinstance(attrs, Mapping):
        items: Iterable[Any] = attrs.items()
    elif isinstance(attrs, (str, bytes)) or not isinstance(attrs, Iterable):
        raise DescriptionError(
            f"<{tag}>: attributes must be a mapping or a sequence of pairs, got {type(attrs).__name__}"
        )
    else:
        items = attrs

    pairs = []
    for item in items:
        if isinstance(item, (str, bytes)) or not isinstance(item, (tuple, list)) or len(item) != 2:
            raise DescriptionError(f"<{tag}>: attribute entry must be a (key, value) pair, got {item!r}")
        key, value = item
        pairs.append((check_name(key, "attribute"), value))
    return tuple(pairs) or None


def normalize_children(children: Any, *, tag: str = "?") -> Tuple[Any, ...] | None:
    """Freeze a children block into nested tuples.

    Iterators such as generators are materialized; ``None`` is rejected at any
    level of nesting.
    """
    if children is None:
        return None
    if not is_sequence(children):
        children = (children,)
    return _freeze(children, tag)


def _freeze(items: Iterable[Any], tag: str) -> Tuple[Any, ...]:
    frozen = []
    for child in items:
        if child is None:
            raise DescriptionError(f"<{tag}>: None is not a valid child")
        if is_sequence(child):
            child = _freeze(child, tag)
        frozen.append(child)
    return tuple(frozen)


@dataclass(frozen=True)
class Element:
    """A named markup unit.

    ``attrs is None`` means no attribute block. ``children is None`` means the
    element is self-closing; an empty tuple is a body with nothing in it.
    """

    tag: str
    attrs: Tuple[Attr, ...] | None = None
    children: Tuple[Any, ...] | None = None

    def __post_init__(self) -> None:
        check_name(self.tag)
        object.__setattr__(self, "attrs", normalize_attrs(self.attrs, tag=self.tag))
        object.__setattr__(self, "children", normalize_children(self.children, tag=self.tag))

    @property
    def self_closing(self) -> bool:
        return self.children is None

    # Builder grammar: tag(attrs)[children]

    def __call__(self, *pairs: Any, **attrs: Any) -> "Element":
        if self.children is not None:
            raise DescriptionError(f"<{self.tag}>: attributes must come before the children block")
        if self.attrs is not None:
            raise DescriptionError(f"<{self.tag}>: attribute block given twice")
        collected = []
        for item in pairs:
            if isinstance(item, Mapping):
                collected.extend(item.items())
            elif isinstance(item, (tuple, list)) and (not item or isinstance(item[0], (tuple, list))):
                collected.extend(item)
            else:
                collected.append(item)
        collected.extend((_keyword_name(key), value) for key, value in attrs.items())
        return Element(self.tag, collected, None)

    def __getitem__(self, children: Any) -> "Element":
        if self.children is not None:
            raise DescriptionError(f"<{self.tag}>: children block given twice")
        if not isinstance(children, tuple):
            children = (children,)
        return Element(self.tag, self.attrs, children)


def _keyword_name(key: str) -> str:
    # class_ -> class, data_id stays data_id
    return key[:-1] if key.endswith("_") and len(key) > 1 else key


def is_sequence(value: Any) -> bool:
    # Strings are literals; generators and other iterators are sequences.
    return isinstance(value, (list, tuple, Iterator))


Node = Union[Element, Any]

__all__ = [
    "DescriptionError",
    "Element",
    "Node",
    "check_name",
    "is_sequence",
    "normalize_attrs",
    "normalize_children",
]
