"""Placeholder binding.

Component markup carries ``{{ name }}`` holes. Binding fills them with
children markup, prop values, and variant classes. Whitespace inside the
braces is insignificant: ``{{name}}``, ``{{ name }}`` and ``{{  name  }}``
are the same placeholder.

Values are inserted literally. A backslash or ``\\1`` in a prop value is
never read as a regex back-reference.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import lru_cache

CHILDREN = "children"
VARIANT_CLASSES = "variantClasses"

# Props that steer resolution rather than fill placeholders
RESERVED_SELF_CLOSING = frozenset({"src", "variant"})

_ANY_PLACEHOLDER_RE = re.compile(r"\{\{\s*\w+\s*\}\}")


@lru_cache(maxsize=256)
def _placeholder_re(name: str) -> re.Pattern[str]:
    return re.compile(r"\{\{\s*" + re.escape(name) + r"\s*\}\}")


def replace_placeholder(content: str, name: str, value: str) -> str:
    """Replace every ``{{ name }}`` in ``content`` with ``value``."""
    return _placeholder_re(name).sub(lambda _m: value, content)


def bind_children(content: str, children: str, props: Mapping[str, str]) -> str:
    """Bind a child-bearing component.

    ``{{ children }}`` is filled first, then each prop. Children are
    spliced verbatim; any components inside them are expanded later by the
    recursive compile.
    """
    content = replace_placeholder(content, CHILDREN, children)
    for key, value in props.items():
        content = replace_placeholder(content, key, value)
    return content


def bind_self_closing(
    content: str,
    props: Mapping[str, str],
    variants: Mapping[str, str],
) -> str:
    """Bind a self-closing component.

    A ``variant`` prop naming an entry of ``variants`` fills
    ``{{ variantClasses }}``. Other props except ``src`` and ``variant``
    fill their own placeholders. Any ``{{ variantClasses }}`` still left
    afterwards becomes an empty string.
    """
    for key, value in props.items():
        if key == "variant" and value in variants:
            content = replace_placeholder(content, VARIANT_CLASSES, variants[value])
        elif key not in RESERVED_SELF_CLOSING:
            content = replace_placeholder(content, key, value)
    return replace_placeholder(content, VARIANT_CLASSES, "")


def clean_unused_placeholders(html: str) -> str:
    """Remove every placeholder that was never bound.

    Example:
        >>> clean_unused_placeholders("<p>{{ title }}{{x}}</p>")
        '<p></p>'
    """
    return _ANY_PLACEHOLDER_RE.sub("", html)
