"""Variant directive extraction.

A component declares named class lists in an HTML comment::

    <!-- variants: primary=btn btn-primary, secondary=btn btn-secondary -->
    <a class="{{ variantClasses }}">{{ text }}</a>

Only the first directive in a piece of markup is read.
"""

from __future__ import annotations

import re

_VARIANTS_RE = re.compile(r"<!--\s*variants:\s*(.+?)\s*-->")


def parse_variants(markup: str) -> dict[str, str]:
    """Return the variant table declared in ``markup``.

    Pairs are split on ``,`` and then on the first ``=`` only, so a class
    value may itself contain ``=``. Entries with an empty name or empty
    classes are dropped.

    Example:
        >>> parse_variants("<!-- variants: primary=btn-primary, ghost=a=b -->")
        {'primary': 'btn-primary', 'ghost': 'a=b'}
        >>> parse_variants("<p>none</p>")
        {}
    """
    match = _VARIANTS_RE.search(markup)
    if match is None:
        return {}

    variants: dict[str, str] = {}
    for pair in match.group(1).split(","):
        name, _, classes = pair.partition("=")
        name = name.strip()
        classes = classes.strip()
        if name and classes:
            variants[name] = classes
    return variants
