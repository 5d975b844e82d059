"""Site build — compile every page and copy assets to an output directory.

Steps:
    1. Discover pages under the pages root (components excluded).
    2. ``Environment.build_page()`` each one: expand components, inline
       CSS/JS when enabled, clean placeholders, strip dev-client scripts.
    3. Write each page to ``out_dir/<relative path>``.
    4. Copy the assets directory to ``out_dir/<assets_dir>/``.

Page read/write errors propagate; the caller decides how to report them.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from html_component_engine.environment import Environment
from html_component_engine.pages import discover_pages

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    """What a build wrote.

    Attributes:
        out_dir: Output directory
        pages: Page paths written, relative to ``out_dir``
        assets: Asset paths copied, relative to ``out_dir``
    """

    out_dir: Path
    pages: list[str] = field(default_factory=list)
    assets: list[str] = field(default_factory=list)


def copy_assets(env: Environment, out_dir: Path) -> list[str]:
    """Copy every file under the assets root into ``out_dir/<assets_dir>``."""
    assets_root = env.assets_root
    if not assets_root.is_dir():
        logger.info("No assets directory found, skipping asset copy")
        return []

    copied: list[str] = []
    files = sorted(p for p in assets_root.rglob("*") if p.is_file())
    logger.info(f"Copying {len(files)} asset file(s)")
    for path in files:
        relative = (Path(env.assets_dir) / path.relative_to(assets_root)).as_posix()
        target = out_dir / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(path, target)
        copied.append(relative)
    return copied


def build_site(env: Environment, out_dir: str | Path | None = None) -> BuildReport:
    """Build all pages of ``env`` into ``out_dir`` (default ``project_root/dist``)."""
    out = Path(out_dir) if out_dir is not None else env.project_root / "dist"
    report = BuildReport(out_dir=out)

    logger.info(f"Source: {env.root}")
    logger.info(f"Components: {env.components_root}")
    logger.info(f"Assets: {env.assets_root}")

    pages = discover_pages(env.root, env.components_dir)
    logger.info(f"Found {len(pages)} HTML file(s)")

    for page in pages:
        html = env.build_page(page)
        target = out / page
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, "utf-8")
        report.pages.append(page)
        logger.info(f"Compiled: {page}")

    report.assets = copy_assets(env, out)
    return report
