"""Tag balance checks for rendered markup."""

from __future__ import annotations

import re
from typing import List, NamedTuple

TAG_RE = re.compile(
    r"<(/?)([A-Za-z_][A-Za-z0-9_.:-]*)((?:\"[^\"]*\"|'[^']*'|[^<>\"'])*?)(/?)>"
)


class _Open(NamedTuple):
    name: str
    offset: int
    maybe_self_closing: bool


def _ambiguous_slash(attrs: str) -> bool:
    # <a href=/> is either a self-closing tag or an open tag whose unquoted
    # value ends in "/".
    stripped = attrs.rstrip()
    return bool(stripped) and stripped[-1] not in "\"'"


def check_balance(markup: str) -> List[str]:
    """Return a list of balance problems found in ``markup``.

    Open tags are matched against close tags with a stack. Quoted attribute
    values may contain ``<`` or ``>``. A tag ending in ``/>`` right after an
    unquoted value is kept on the stack as a tentative open tag: the next
    close tag with its name closes it, otherwise it counts as self-closing.

    Text that is not a tag is skipped, so a ``<`` inside an unescaped literal
    can produce false reports, as can a tentative tag nested inside an open
    tag of the same name.
    """
    errors: List[str] = []
    stack: List[_Open] = []
    for match in TAG_RE.finditer(markup):
        closing, name, attrs, self_closing = match.groups()
        if self_closing:
            if closing:
                errors.append(f"offset {match.start()}: malformed tag {match.group(0)!r}")
            elif _ambiguous_slash(attrs):
                stack.append(_Open(name, match.start(), True))
            continue
        if not closing:
            stack.append(_Open(name, match.start(), False))
            continue

        while stack and stack[-1].maybe_self_closing and stack[-1].name != name:
            stack.pop()
        if not stack:
            errors.append(f"offset {match.start()}: </{name}> has no matching open tag")
            continue
        opened = stack.pop()
        if opened.name != name:
            errors.append(
                f"offset {match.start()}: </{name}> closes <{opened.name}> opened at offset {opened.offset}"
            )
    for opened in reversed(stack):
        if not opened.maybe_self_closing:
            errors.append(f"offset {opened.offset}: <{opened.name}> is never closed")
    return errors


def is_balanced(markup: str) -> bool:
    return not check_balance(markup)
