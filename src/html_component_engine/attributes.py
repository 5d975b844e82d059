"""Attribute parsing for ``<Component>`` tags.

Attributes are read with a regex over the raw tag text, not an HTML parser.
Values are taken verbatim between double quotes; entities are not decoded.

Two flavours exist:

- Child-bearing tags accept word-character names only (``title="x"``).
- Self-closing tags also accept hyphens (``data-test="x"``, ``aria-label="x"``).

Duplicate names keep the last value.
"""

from __future__ import annotations

import re

_ATTR_RE = re.compile(r'(\w+)="([^"]*)"')
_HYPHENATED_ATTR_RE = re.compile(r'([\w-]+)="([^"]*)"')
_SELF_CLOSING_TAG_RE = re.compile(r"<Component\s+([^>]+)\s*/>")


def parse_attributes(text: str, *, hyphenated: bool = False) -> dict[str, str]:
    """Extract ``name="value"`` pairs from an attribute region.

    Args:
        text: Raw attribute text, e.g. ``' title="Hi" id="x"'``
        hyphenated: Allow ``-`` in attribute names

    Returns:
        Ordered mapping of attribute name to value (empty if none)

    Example:
        >>> parse_attributes(' title="Hi" id="main"')
        {'title': 'Hi', 'id': 'main'}
    """
    pattern = _HYPHENATED_ATTR_RE if hyphenated else _ATTR_RE
    return {m.group(1): m.group(2) for m in pattern.finditer(text)}


def parse_self_closing_tag(tag: str) -> dict[str, str] | None:
    """Parse a full ``<Component ... />`` tag into its attributes.

    Returns ``None`` when the text does not have the self-closing shape.

    Example:
        >>> parse_self_closing_tag('<Component src="a/b" data-test="x" />')
        {'src': 'a/b', 'data-test': 'x'}
        >>> parse_self_closing_tag('<div />') is None
        True
    """
    match = _SELF_CLOSING_TAG_RE.search(tag)
    if match is None:
        return None
    return parse_attributes(match.group(1), hyphenated=True)
