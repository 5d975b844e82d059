"""Exceptions for the component engine.

Exception Hierarchy:
EngineError (base)
├── ComponentNotFoundError     # No provider resolves the identifier
├── ComponentProducerError     # Dynamic producer failed to import or run
├── ComponentDepthError        # Component nesting exceeded max_depth
└── AssetNotFoundError         # CSS/JS inlining cannot locate a file

None of these escape ``compile_html()``. The compiler catches them and
renders a marker comment (components) or leaves the original tag in place
(assets). They surface directly only when a provider or asset lookup is
called on its own.

Example:
    ```
    H-CMP-001: Component "Hedaer" not found
      Searched: src/components, src/components, components
      Hint: Did you mean 'Header'?
      Docs: https://html-component-engine.dev/docs/errors/#h-cmp-001
    ```

"""

from __future__ import annotations

from enum import Enum

from html_component_engine.environment import terminal

_DOCS_BASE = "https://html-component-engine.dev/docs/errors"


class ErrorCode(Enum):
    """Searchable error codes for engine errors.

    Format: H-{CATEGORY}-{NUMBER}
    Categories: CMP (component resolution), AST (asset inlining)
    """

    # Component resolution errors (H-CMP-xxx)
    COMPONENT_NOT_FOUND = "H-CMP-001"
    PRODUCER_ERROR = "H-CMP-002"
    COMPONENT_DEPTH = "H-CMP-003"

    # Asset inlining errors (H-AST-xxx)
    ASSET_NOT_FOUND = "H-AST-001"

    @property
    def docs_url(self) -> str:
        """Documentation URL for this error code."""
        return f"{_DOCS_BASE}/#{self.value.lower()}"

    @property
    def category(self) -> str:
        """Error category ('component' or 'asset')."""
        prefix = self.value.split("-")[1]
        return {"CMP": "component", "AST": "asset"}.get(prefix, "unknown")


class EngineError(Exception):
    """Base exception for all component engine errors.

        >>> try:
        ...     provider.get_source("Card")
        ... except EngineError as e:
        ...     log.error(e.format_compact())

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a short terminal diagnostic with code and docs URL."""
        header = str(self)
        if self.code and self.code.value not in header:
            header = terminal.format_error_header(self.code.value, header)
        parts = [header]
        if self.code:
            parts.append(f"  {terminal.dim_text('Docs:')} {terminal.docs_url(self.code.docs_url)}")
        return "\n".join(parts)


class ComponentNotFoundError(EngineError):
    """No provider could resolve a component identifier.

    Example:
            >>> provider.get_source("Missing")
        ComponentNotFoundError: Component "Missing" not found
    """

    code: ErrorCode | None = ErrorCode.COMPONENT_NOT_FOUND

    def __init__(
        self,
        identifier: str,
        searched: list[str] | None = None,
        available: list[str] | None = None,
    ):
        self.identifier = identifier
        self.searched = searched or []
        self.available = available or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f'Component "{self.identifier}" not found'
        if self.searched:
            msg += f" in: {', '.join(self.searched)}"
        if self.available:
            from difflib import get_close_matches

            matches = get_close_matches(self.identifier, self.available, n=1, cutoff=0.6)
            if matches:
                msg += f". Did you mean '{matches[0]}'?"
        return msg


class ComponentProducerError(EngineError):
    """A dynamic content producer failed to import or raised while running.

    Rendered in the output exactly like a missing component; only the log
    line and the error code tell the two apart.
    """

    code: ErrorCode | None = ErrorCode.PRODUCER_ERROR

    def __init__(self, identifier: str, filename: str | None, cause: BaseException):
        self.identifier = identifier
        self.filename = filename
        self.cause = cause
        location = f" ({filename})" if filename else ""
        super().__init__(
            f'Component "{identifier}" producer failed{location}: '
            f"{type(cause).__name__}: {cause}"
        )


class ComponentDepthError(EngineError):
    """Component nesting went deeper than the configured maximum.

    Usually a component that references itself, directly or through
    another component: A → B → A.
    """

    code: ErrorCode | None = ErrorCode.COMPONENT_DEPTH

    def __init__(self, identifier: str, max_depth: int, stack: list[str] | None = None):
        self.identifier = identifier
        self.max_depth = max_depth
        self.stack = stack or []
        msg = f'Maximum component depth exceeded ({max_depth}) when expanding "{identifier}"'
        if self.stack:
            chain = " → ".join(self.stack[-5:])
            msg += f"\n  Hint: Check for circular components: {chain}"
        super().__init__(msg)


class AssetNotFoundError(EngineError):
    """A stylesheet or script referenced by a page could not be located."""

    code: ErrorCode | None = ErrorCode.ASSET_NOT_FOUND

    def __init__(self, reference: str, candidates: list[str] | None = None):
        self.reference = reference
        self.candidates = candidates or []
        msg = f"Could not find asset file for {reference}"
        if self.candidates:
            msg += f" (tried: {', '.join(self.candidates)})"
        super().__init__(msg)
