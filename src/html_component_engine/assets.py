"""CSS and JS inlining for self-contained production pages.

``<link rel="stylesheet" href="...">`` becomes ``<style>`` and
``<script src="..."></script>`` becomes an inline ``<script>``, so a built
page needs no further requests for local assets.

Lookup:
    Absolute references (``/styles/main.css``) try a short list of
    candidate locations under the pages root and project root. Relative
    references resolve against the pages root only.

Guards:
    - ``http://`` and ``https://`` references are never inlined.
    - Scripts whose src contains a dev-client marker (``@vite``) are left
      alone; ``strip_dev_client_scripts()`` removes them from built pages.

A reference that cannot be found or read is logged as a warning and its
tag is left exactly as written.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from html_component_engine.environment.exceptions import AssetNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_DEV_CLIENT_MARKERS = ("@vite",)

_EXTERNAL_PREFIXES = ("http://", "https://")

_STYLESHEET_LINK_RE = re.compile(r"""<link[^>]+rel=["']stylesheet["'][^>]*>""", re.IGNORECASE)
_HREF_RE = re.compile(r"""href=["']([^"']+)["']""")
_SCRIPT_SRC_RE = re.compile(r"""<script[^>]+src=["']([^"']+)["'][^>]*></script>""", re.IGNORECASE)


def is_external(reference: str) -> bool:
    return reference.startswith(_EXTERNAL_PREFIXES)


def stylesheet_candidates(
    href: str, root: Path, project_root: Path, assets_dir: str = "assets"
) -> list[Path]:
    """Candidate files for a stylesheet href, in lookup order."""
    if href.startswith("/"):
        clean = href[1:]
        return [
            root / assets_dir / clean,
            root / clean,
            project_root / "src" / assets_dir / clean,
        ]
    return [root / href]


def script_candidates(
    src: str, root: Path, project_root: Path, assets_dir: str = "assets"
) -> list[Path]:
    """Candidate files for a script src, in lookup order."""
    if src.startswith("/"):
        clean = src[1:]
        return [
            project_root / "src" / assets_dir / clean,
            root / assets_dir / clean,
            root / clean,
        ]
    return [root / src]


def locate_asset(reference: str, candidates: list[Path]) -> Path:
    """Return the first existing candidate.

    Raises:
        AssetNotFoundError: If no candidate is a file
    """
    for path in candidates:
        if path.is_file():
            return path
    raise AssetNotFoundError(reference, [str(p) for p in candidates])


def _read_asset(reference: str, candidates: list[Path]) -> str | None:
    try:
        return locate_asset(reference, candidates).read_text("utf-8")
    except AssetNotFoundError as e:
        logger.warning(str(e))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not inline {reference}: {e}")
    return None


def inline_stylesheets(
    html: str,
    root: str | Path,
    project_root: str | Path | None = None,
    *,
    assets_dir: str = "assets",
) -> str:
    """Replace local stylesheet links with inline ``<style>`` blocks."""
    root = Path(root)
    project_root = Path(project_root) if project_root is not None else root.parent

    def replace(match: re.Match[str]) -> str:
        tag = match.group(0)
        href_match = _HREF_RE.search(tag)
        if href_match is None:
            return tag
        href = href_match.group(1)
        if is_external(href):
            return tag
        css = _read_asset(href, stylesheet_candidates(href, root, project_root, assets_dir))
        if css is None:
            return tag
        return f"<style>\n{css}\n</style>"

    return _STYLESHEET_LINK_RE.sub(replace, html)


def inline_scripts(
    html: str,
    root: str | Path,
    project_root: str | Path | None = None,
    *,
    assets_dir: str = "assets",
    dev_client_markers: Iterable[str] = DEFAULT_DEV_CLIENT_MARKERS,
) -> str:
    """Replace local ``<script src>`` tags with inline ``<script>`` blocks."""
    root = Path(root)
    project_root = Path(project_root) if project_root is not None else root.parent
    markers = tuple(dev_client_markers)

    def replace(match: re.Match[str]) -> str:
        tag, src = match.group(0), match.group(1)
        if is_external(src) or any(marker in src for marker in markers):
            return tag
        js = _read_asset(src, script_candidates(src, root, project_root, assets_dir))
        if js is None:
            return tag
        return f"<script>\n{js}\n</script>"

    return _SCRIPT_SRC_RE.sub(replace, html)


def strip_dev_client_scripts(
    html: str, dev_client_markers: Iterable[str] = DEFAULT_DEV_CLIENT_MARKERS
) -> str:
    """Remove ``<script>`` elements whose opening tag mentions a dev-client marker."""
    for marker in dev_client_markers:
        pattern = re.compile(
            r"<script[^>]*" + re.escape(marker) + r"[^>]*>[\s\S]*?</script>", re.IGNORECASE
        )
        html = pattern.sub("", html)
    return html
