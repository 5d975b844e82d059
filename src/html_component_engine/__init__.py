"""HTML Component Engine — reusable components for static HTML sites.

Expands custom ``<Component>`` tags into plain HTML by textual substitution:
props fill ``{{ name }}`` placeholders, children fill ``{{ children }}``,
variants pick class lists, and components may nest other components.
Production builds can inline local CSS/JS for dependency-free pages.

Quickstart:
    >>> from html_component_engine import Environment, DictProvider
    >>> env = Environment(".", provider=DictProvider({
    ...     "Card": '<div class="card"><h3>{{ title }}</h3>{{ children }}</div>',
    ... }))
    >>> env.compile('<Component name="Card" title="Hi"><p>Body</p></Component>')
    '<div class="card"><h3>Hi</h3><p>Body</p></div>'

File-based components:
    >>> from html_component_engine import compile_html
    >>> compile_html('<Component src="Header" title="My Site" />', "site/src")

Markup:
    ```html
    <Component src="Button" text="Go" variant="primary" />     <!-- self-closing -->
    <Component name="Card" title="T"><p>Z</p></Component>      <!-- with children -->
    <!-- variants: primary=btn-primary, secondary=btn-secondary -->
    ```

Architecture:
HTML → Scanner → Attribute Parser → Provider → Variants → Binder → recursive compile

Pipeline stages:
1. **Scanner**: Finds component references (depth-aware for children)
2. **Attribute Parser**: Reads ``name="value"`` props from the tag
3. **Provider**: Resolves an identifier to markup or a dynamic producer
4. **Binder**: Fills children, props and variant classes into placeholders
5. **Compiler**: Recompiles the bound content until no references remain

Error Handling:
Compilation never raises for template problems. A missing component
renders ``<!-- Component "X" not found -->``, runaway nesting renders a
depth marker, and missing assets leave their tags untouched. Every case
is logged through the ``html_component_engine`` logger.

"""

from html_component_engine.environment import (
    AssetNotFoundError,
    ChoiceProvider,
    ComponentDepthError,
    ComponentNotFoundError,
    ComponentProducerError,
    ComponentProvider,
    ComponentSource,
    DictProvider,
    EngineError,
    Environment,
    ErrorCode,
    FileSystemProvider,
    FunctionProvider,
    compile_html,
    inline_scripts,
    inline_stylesheets,
)
from html_component_engine.attributes import parse_attributes, parse_self_closing_tag
from html_component_engine.binder import clean_unused_placeholders
from html_component_engine.build import BuildReport, build_site
from html_component_engine.compile_context import CompileContext, get_compile_context
from html_component_engine.compiler import Compiler
from html_component_engine.pages import discover_pages, resolve_request_path
from html_component_engine.scanner import ComponentReference, ReferenceKind
from html_component_engine.variants import parse_variants

__version__ = "0.2.0"

__all__ = [
    "AssetNotFoundError",
    "BuildReport",
    "ChoiceProvider",
    "CompileContext",
    "Compiler",
    "ComponentDepthError",
    "ComponentNotFoundError",
    "ComponentProducerError",
    "ComponentProvider",
    "ComponentReference",
    "ComponentSource",
    "DictProvider",
    "EngineError",
    "Environment",
    "ErrorCode",
    "FileSystemProvider",
    "FunctionProvider",
    "ReferenceKind",
    "__version__",
    "build_site",
    "clean_unused_placeholders",
    "compile_html",
    "discover_pages",
    "get_compile_context",
    "inline_scripts",
    "inline_stylesheets",
    "parse_attributes",
    "parse_self_closing_tag",
    "parse_variants",
    "resolve_request_path",
]
