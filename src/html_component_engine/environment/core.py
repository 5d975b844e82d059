"""Environment — explicit configuration for compiling a site.

An Environment bundles what a compile needs to know: where pages live, where
components and assets are looked up, and how builds treat CSS/JS. It is
passed to every operation instead of being captured by a long-lived plugin.

Layout (defaults):
    ```
    project/                  # project_root (defaults to root.parent)
    ├── src/                  # root: pages live here
    │   ├── index.html
    │   ├── components/       # components_dir
    │   │   ├── Card.html
    │   │   └── main/Button.html
    │   └── assets/           # assets_dir
    │       └── styles/main.css
    └── components/           # project-wide fallback components
    ```

Component search order (first hit wins):
    1. ``root/<components_dir>``
    2. ``project_root/src/<components_dir>``
    3. ``project_root/<components_dir>``

Module-level shortcuts ``compile_html``, ``inline_stylesheets`` and
``inline_scripts`` build a default Environment per call.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from html_component_engine import assets
from html_component_engine.binder import clean_unused_placeholders
from html_component_engine.compile_context import DEFAULT_MAX_DEPTH
from html_component_engine.compiler import Compiler
from html_component_engine.environment.providers import ComponentProvider, FileSystemProvider


@dataclass
class Environment:
    """Configuration and entry points for compiling pages.

    Attributes:
        root: Pages root (``src/``)
        project_root: Project root; defaults to ``root.parent``
        components_dir: Components directory name
        assets_dir: Assets directory name
        provider: Component provider; defaults to a FileSystemProvider over
            the search order above
        max_depth: Maximum component nesting depth
        inline_css: Inline local stylesheets in ``build_page()``
        inline_js: Inline local scripts in ``build_page()``
        dev_client_markers: Script src fragments identifying dev-server clients

    Example:
            >>> env = Environment("site/src")
            >>> env.compile('<Component src="Header" title="Home" />')
            '<header><h1>Home</h1></header>'

            >>> env = Environment("site/src", provider=DictProvider({"X": "<i>x</i>"}))
    """

    root: Path
    project_root: Path | None = None
    components_dir: str = "components"
    assets_dir: str = "assets"
    provider: ComponentProvider | None = None
    max_depth: int = DEFAULT_MAX_DEPTH
    inline_css: bool = True
    inline_js: bool = True
    dev_client_markers: tuple[str, ...] = assets.DEFAULT_DEV_CLIENT_MARKERS
    _compiler: Compiler = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        self.project_root = (
            Path(self.project_root) if self.project_root is not None else self.root.parent
        )
        if self.provider is None:
            self.provider = FileSystemProvider(self.search_paths())
        self._compiler = Compiler(self.provider, max_depth=self.max_depth)

    @property
    def components_root(self) -> Path:
        return self.root / self.components_dir

    @property
    def assets_root(self) -> Path:
        return self.root / self.assets_dir

    def search_paths(self) -> list[Path]:
        """Component directories in lookup order."""
        return [
            self.root / self.components_dir,
            self.project_root / "src" / self.components_dir,
            self.project_root / self.components_dir,
        ]

    def page_path(self, page: str | Path) -> Path:
        """Resolve a page name relative to the pages root."""
        path = Path(page)
        return path if path.is_absolute() else self.root / path

    # ─────────────────────────────────────────────────────────────────────
    # Compilation
    # ─────────────────────────────────────────────────────────────────────

    def compile(self, html: str, page: str | None = None) -> str:
        """Expand all components in ``html``. Never raises for template errors."""
        return self._compiler.compile(html, page=page)

    async def compile_async(self, html: str, page: str | None = None) -> str:
        """Async wrapper: runs ``compile()`` in a worker thread."""
        return await asyncio.to_thread(self.compile, html, page)

    def inline_stylesheets(self, html: str) -> str:
        return assets.inline_stylesheets(
            html, self.root, self.project_root, assets_dir=self.assets_dir
        )

    def inline_scripts(self, html: str) -> str:
        return assets.inline_scripts(
            html,
            self.root,
            self.project_root,
            assets_dir=self.assets_dir,
            dev_client_markers=self.dev_client_markers,
        )

    # ─────────────────────────────────────────────────────────────────────
    # Pages
    # ─────────────────────────────────────────────────────────────────────

    def render_page(self, page: str | Path) -> str:
        """Compile a page file for development: expand components, clean placeholders.

        Raises:
            OSError: If the page file cannot be read
        """
        path = self.page_path(page)
        html = path.read_text("utf-8")
        return clean_unused_placeholders(self.compile(html, page=str(page)))

    async def render_page_async(self, page: str | Path) -> str:
        return await asyncio.to_thread(self.render_page, page)

    def build_page(self, page: str | Path) -> str:
        """Compile a page file for production.

        Expands components, inlines CSS/JS when enabled, removes unbound
        placeholders, and strips dev-client scripts.

        Raises:
            OSError: If the page file cannot be read
        """
        path = self.page_path(page)
        html = self.compile(path.read_text("utf-8"), page=str(page))
        if self.inline_css:
            html = self.inline_stylesheets(html)
        if self.inline_js:
            html = self.inline_scripts(html)
        html = clean_unused_placeholders(html)
        return assets.strip_dev_client_scripts(html, self.dev_client_markers)


def compile_html(
    html: str,
    root_dir: str | Path,
    project_root: str | Path | None = None,
) -> str:
    """Expand every ``<Component>`` in ``html`` using files under ``root_dir``.

    Example:
        >>> compile_html('<Component src="Footer" year="2025" />', "site/src")
        '<footer>&copy; 2025</footer>'
    """
    return Environment(root_dir, project_root).compile(html)


def inline_stylesheets(
    html: str,
    root_dir: str | Path,
    project_root: str | Path | None = None,
) -> str:
    return Environment(root_dir, project_root).inline_stylesheets(html)


def inline_scripts(
    html: str,
    root_dir: str | Path,
    project_root: str | Path | None = None,
) -> str:
    return Environment(root_dir, project_root).inline_scripts(html)
