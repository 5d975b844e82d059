"""Page discovery and request-path mapping.

Pages are the ``*.html`` files under the pages root, excluding anything
inside a components directory.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from html_component_engine.environment import Environment

logger = logging.getLogger(__name__)

# Requests for these are assets, never pages
ASSET_EXTENSIONS_RE = re.compile(
    r"\.(css|js|png|jpg|jpeg|gif|svg|ico|woff|woff2|ttf|eot|json)$", re.IGNORECASE
)

_INDEX_URLS = frozenset({"/", "/index", "/index.html"})


def discover_pages(root: str | Path, components_dir: str = "components") -> list[str]:
    """Return page paths relative to ``root``, sorted, using ``/`` separators.

    Every directory named ``components_dir`` is skipped, at any depth.
    """
    root = Path(root)
    pages: list[str] = []

    def walk(directory: Path) -> None:
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            logger.warning(f"Could not read directory {directory}: {e}")
            return
        for entry in entries:
            if entry.is_dir():
                if entry.name != components_dir:
                    walk(entry)
            elif entry.suffix == ".html":
                pages.append(entry.relative_to(root).as_posix())

    walk(root)
    return sorted(pages)


def resolve_request_path(env: Environment, url: str) -> str | None:
    """Map a dev-server request URL to a page name, or ``None`` to pass it on.

    Example:
        >>> resolve_request_path(env, "/")
        'index.html'
        >>> resolve_request_path(env, "/about")      # if src/about.html exists
        'about.html'
        >>> resolve_request_path(env, "/styles/main.css") is None
        True
    """
    path = url.split("?", 1)[0].split("#", 1)[0]
    if path.startswith(("/@", "/__")) or ASSET_EXTENSIONS_RE.search(path):
        return None
    if path in _INDEX_URLS:
        return "index.html"
    if path.endswith(".html"):
        return path.lstrip("/")

    candidate = path.lstrip("/") + ".html"
    if env.page_path(candidate).is_file():
        return candidate
    return None
