"""Component compiler — expands ``<Component>`` references to a fixed point.

Pipeline per call:
    1. Child-bearing pass: scan ``<Component name="...">...</Component>``,
       resolve, bind ``{{ children }}`` and props, compile the result
       recursively, splice it back.
    2. Self-closing pass over the output of step 1: scan
       ``<Component src="..." />``, resolve, bind variants and props,
       compile recursively, splice back.

Expansion is depth-first and left to right: a component's content is fully
compiled before it replaces its reference, and before the next reference
in the parent is handled.

Failure handling:
    Nothing raises out of ``Compiler.compile()``. Each failure becomes
    visible output or is passed through:

    - missing component or failing producer → ``<!-- Component "X" not found -->``
    - nesting deeper than ``max_depth`` → ``<!-- Component "X" exceeded maximum nesting depth (N) -->``
    - malformed self-closing tag (or no ``src``) → left untouched

StringBuilder Pattern:
    Each pass collects text slices and expansions in a list and joins once,
    splicing by offset instead of searching for the tag text again.
"""

from __future__ import annotations

import logging

from html_component_engine.attributes import parse_self_closing_tag
from html_component_engine.binder import bind_children, bind_self_closing
from html_component_engine.compile_context import (
    DEFAULT_MAX_DEPTH,
    CompileContext,
    compile_context,
    nested_context,
)
from html_component_engine.environment.exceptions import (
    ComponentDepthError,
    ComponentNotFoundError,
    ComponentProducerError,
)
from html_component_engine.environment.providers import ComponentProvider
from html_component_engine.scanner import (
    ComponentReference,
    ReferenceKind,
    scan_children_components,
    scan_self_closing_tags,
)
from html_component_engine.variants import parse_variants

logger = logging.getLogger(__name__)


def not_found_marker(identifier: str) -> str:
    return f'<!-- Component "{identifier}" not found -->'


def depth_marker(identifier: str, max_depth: int) -> str:
    return f'<!-- Component "{identifier}" exceeded maximum nesting depth ({max_depth}) -->'


class Compiler:
    """Expand component references using a provider.

    Stateless between calls; per-compile state lives in a CompileContext.

    Example:
            >>> from html_component_engine import DictProvider
            >>> compiler = Compiler(DictProvider({"Hi": "<b>{{ who }}</b>"}))
            >>> compiler.compile('<Component src="Hi" who="you" />')
            '<b>you</b>'
    """

    __slots__ = ("_max_depth", "_provider")

    def __init__(self, provider: ComponentProvider, max_depth: int = DEFAULT_MAX_DEPTH):
        self._provider = provider
        self._max_depth = max_depth

    @property
    def provider(self) -> ComponentProvider:
        return self._provider

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def compile(self, html: str, page: str | None = None) -> str:
        """Expand every component reference in ``html``."""
        with compile_context(max_depth=self._max_depth, page=page) as ctx:
            return self._compile(html, ctx)

    def _compile(self, html: str, ctx: CompileContext) -> str:
        html = self._expand_children_components(html, ctx)
        return self._expand_self_closing_components(html, ctx)

    def _expand_children_components(self, html: str, ctx: CompileContext) -> str:
        references = scan_children_components(html)
        if not references:
            return html

        buf: list[str] = []
        pos = 0
        for ref in references:
            buf.append(html[pos : ref.start])
            buf.append(self._expand(ref, ctx))
            pos = ref.end
        buf.append(html[pos:])
        return "".join(buf)

    def _expand_self_closing_components(self, html: str, ctx: CompileContext) -> str:
        spans = scan_self_closing_tags(html)
        if not spans:
            return html

        buf: list[str] = []
        pos = 0
        for span in spans:
            buf.append(html[pos : span.start])
            props = parse_self_closing_tag(span.source)
            if not props or "src" not in props:
                logger.debug(f"Skipping malformed component tag: {span.source!r}")
                buf.append(span.source)
            else:
                buf.append(self._expand(ComponentReference.self_closing(span, props), ctx))
            pos = span.end
        buf.append(html[pos:])
        return "".join(buf)

    def _expand(self, ref: ComponentReference, ctx: CompileContext) -> str:
        """Resolve, bind and recursively compile one reference."""
        try:
            ctx.check_depth(ref.identifier)
            content = self._provider.get_source(ref.identifier).render(ref.props)
        except ComponentDepthError as e:
            logger.error(str(e))
            return depth_marker(ref.identifier, e.max_depth)
        except ComponentProducerError as e:
            logger.error(str(e))
            return not_found_marker(ref.identifier)
        except ComponentNotFoundError as e:
            logger.error(str(e))
            return not_found_marker(ref.identifier)

        if ref.kind is ReferenceKind.CHILDREN:
            content = bind_children(content, ref.children, ref.props)
        else:
            content = bind_self_closing(content, ref.props, parse_variants(content))

        child = ctx.child_context(ref.identifier)
        with nested_context(child):
            return self._compile(content, child)
