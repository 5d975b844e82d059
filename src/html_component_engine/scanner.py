"""Tag scanner — locates ``<Component>`` references in raw HTML text.

The scanner works on text, not a DOM. Two forms are recognised:

Child-bearing:
    ``<Component name="Card" title="Hi">...children...</Component>``

Self-closing:
    ``<Component src="Button" text="Go" />``

Nesting:
    Child-bearing tags all share the ``</Component>`` close tag, so a plain
    non-greedy regex binds an outer component to the first inner close.
    The scanner instead walks open/close tokens with a depth counter and
    pairs each outermost opening tag with its own close::

        <Component name="Box">            depth 1  <- reference starts
          <Component name="Box">inner</Component>   depth 2 -> 1
        </Component>                      depth 0  <- reference ends

    Only outermost references are returned; nested ones are expanded when
    the substituted content is compiled recursively.

Self-closing tags are found as anything between ``<Component`` and ``/>``.
Whether they are well-formed is decided by the attribute parser.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from html_component_engine.attributes import parse_attributes

_TAG_TOKEN_RE = re.compile(r"<Component\b[^>]*>|</Component\s*>")
_CHILDREN_OPEN_RE = re.compile(r'<Component\s+name="([^"]+)"([^>]*)>')
_SELF_CLOSING_RE = re.compile(r"<Component[^>]+/>")


class ReferenceKind(Enum):
    CHILDREN = "children"
    SELF_CLOSING = "self-closing"


class TagSpan(NamedTuple):
    """A raw tag occurrence: ``html[start:end] == source``."""

    start: int
    end: int
    source: str


@dataclass(frozen=True, slots=True)
class ComponentReference:
    """One parsed occurrence of a component tag.

    Attributes:
        kind: Child-bearing or self-closing
        identifier: Component name, possibly a path like ``main/Button``
        props: Attribute mapping (reserved names included)
        start: Offset of the reference in the scanned text
        end: Offset just past the reference
        source: Exact text being replaced
        children: Trimmed markup between open and close tags
    """

    kind: ReferenceKind
    identifier: str
    props: dict[str, str]
    start: int
    end: int
    source: str
    children: str = field(default="")

    @classmethod
    def self_closing(cls, span: TagSpan, props: dict[str, str]) -> ComponentReference:
        return cls(
            kind=ReferenceKind.SELF_CLOSING,
            identifier=props["src"],
            props=props,
            start=span.start,
            end=span.end,
            source=span.source,
        )


def _is_closing(token: str) -> bool:
    return token.startswith("</")


def _is_self_closing(token: str) -> bool:
    return token.endswith("/>")


def _find_matching_close(tokens: list[re.Match[str]], open_index: int) -> re.Match[str] | None:
    """Return the close token that balances ``tokens[open_index]``."""
    depth = 0
    for token in tokens[open_index:]:
        text = token.group(0)
        if _is_closing(text):
            depth -= 1
            if depth == 0:
                return token
        elif not _is_self_closing(text):
            depth += 1
    return None


def scan_children_components(html: str) -> list[ComponentReference]:
    """Find outermost child-bearing references in document order.

    An opening tag that never closes is skipped and left in the text;
    scanning resumes at the next opening tag.
    """
    tokens = list(_TAG_TOKEN_RE.finditer(html))
    references: list[ComponentReference] = []
    consumed = 0

    for index, token in enumerate(tokens):
        if token.start() < consumed:
            continue
        text = token.group(0)
        if _is_closing(text) or _is_self_closing(text):
            continue
        opening = _CHILDREN_OPEN_RE.fullmatch(text)
        if opening is None:
            continue
        close = _find_matching_close(tokens, index)
        if close is None:
            continue

        references.append(
            ComponentReference(
                kind=ReferenceKind.CHILDREN,
                identifier=opening.group(1),
                props=parse_attributes(opening.group(2)),
                start=token.start(),
                end=close.end(),
                source=html[token.start() : close.end()],
                children=html[token.end() : close.start()].strip(),
            )
        )
        consumed = close.end()

    return references


def scan_self_closing_tags(html: str) -> list[TagSpan]:
    """Find every ``<Component ... />`` occurrence in document order."""
    return [TagSpan(m.start(), m.end(), m.group(0)) for m in _SELF_CLOSING_RE.finditer(html)]
