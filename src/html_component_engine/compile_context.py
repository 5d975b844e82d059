"""CompileContext — per-compile state held in a ContextVar.

Tracks how deep the compiler is in nested component expansion and which
components led there. The state lives outside the HTML being compiled and
outside the Environment, so one Environment can serve concurrent compiles
(threads or tasks) without sharing anything mutable.

Dynamic producers can look at the current state while they run:

    from html_component_engine.compile_context import get_compile_context

    def default(props):
        ctx = get_compile_context()
        return f"<!-- rendered inside {ctx.component_stack if ctx else []} -->"

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field

from html_component_engine.environment.exceptions import ComponentDepthError

# Deep enough for any real component tree while still stopping A → B → A
# cycles early.
DEFAULT_MAX_DEPTH = 50


@dataclass
class CompileContext:
    """Compile-scoped state.

    Attributes:
        depth: Current component nesting depth (0 = page level)
        max_depth: Nesting depth at which expansion stops
        component_stack: Identifiers being expanded, outermost first
        page: Page being compiled, when known (for log messages)
    """

    depth: int = 0
    max_depth: int = DEFAULT_MAX_DEPTH
    component_stack: list[str] = field(default_factory=list)
    page: str | None = None

    def check_depth(self, identifier: str) -> None:
        """Raise ComponentDepthError if expanding ``identifier`` goes too deep."""
        if self.depth >= self.max_depth:
            raise ComponentDepthError(
                identifier,
                self.max_depth,
                stack=[*self.component_stack, identifier],
            )

    def child_context(self, identifier: str) -> CompileContext:
        """Context for compiling the content of ``identifier``."""
        return CompileContext(
            depth=self.depth + 1,
            max_depth=self.max_depth,
            component_stack=[*self.component_stack, identifier],
            page=self.page,
        )


_compile_context: ContextVar[CompileContext | None] = ContextVar(
    "compile_context",
    default=None,
)


def get_compile_context() -> CompileContext | None:
    """Current compile context, or None outside a compile."""
    return _compile_context.get()


@contextmanager
def compile_context(
    max_depth: int = DEFAULT_MAX_DEPTH,
    page: str | None = None,
) -> Iterator[CompileContext]:
    """Set a fresh top-level CompileContext for the duration of the block."""
    ctx = CompileContext(max_depth=max_depth, page=page)
    token: Token[CompileContext | None] = _compile_context.set(ctx)
    try:
        yield ctx
    finally:
        _compile_context.reset(token)


@contextmanager
def nested_context(ctx: CompileContext) -> Iterator[CompileContext]:
    """Make ``ctx`` current while a component's content is compiled."""
    token = _compile_context.set(ctx)
    try:
        yield ctx
    finally:
        _compile_context.reset(token)
