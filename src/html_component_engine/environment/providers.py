"""Component providers for the engine environment.

Providers turn a component identifier into a ``ComponentSource``. They
implement ``get_source(identifier)`` and ``list_components()``.

Built-in Providers:
- `FileSystemProvider`: Markup (``.html``) or producer (``.py``) files in ordered directories
- `DictProvider`: In-memory mapping (testing/embedded)
- `FunctionProvider`: Wrap a callable as a provider
- `ChoiceProvider`: Try multiple providers in order

Custom Providers:
Implement the ComponentProvider protocol:
    ```python
    class DatabaseProvider:
        def get_source(self, identifier: str) -> ComponentSource:
            row = db.query("SELECT markup FROM components WHERE name = ?", identifier)
            if not row:
                raise ComponentNotFoundError(identifier)
            return ComponentSource(identifier, markup=row.markup, filename=f"db://{identifier}")

        def list_components(self) -> list[str]:
            return [r.name for r in db.query("SELECT name FROM components")]
    ```

Dynamic Producers:
A ``.py`` component file exports ``default`` (or ``render``). A callable
export is called with the component's props, minus ``src`` and ``name``,
and its return value becomes the component markup:
    ```python
    # components/Greeting.py
    def default(props):
        return f"<p>Hello, {props.get('who', 'world')}!</p>"
    ```
A non-callable export is used as markup after ``str()``. Producer modules
are executed fresh on every resolution; nothing is cached.

"""

from __future__ import annotations

import importlib.util
import logging
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from html_component_engine.environment.exceptions import (
    ComponentNotFoundError,
    ComponentProducerError,
)

logger = logging.getLogger(__name__)

# Props consumed by resolution and never passed to producers
PRODUCER_EXCLUDED_PROPS = frozenset({"src", "name"})

# Module attributes tried, in order, as a producer's primary export
PRODUCER_EXPORTS = ("default", "render")


def normalize_identifier(identifier: str) -> str:
    """Use ``/`` as the only separator in component identifiers."""
    return identifier.replace("\\", "/")


@dataclass(frozen=True, slots=True)
class ComponentSource:
    """Resolved component content, static or dynamic.

    Exactly one of ``markup`` and ``producer`` is meaningful: markup wins
    when both are set.

    Attributes:
        identifier: Identifier as written in the referencing tag
        markup: Static component markup
        producer: Callable taking a props dict, or any value to stringify
        filename: Where the content came from (for diagnostics)
    """

    identifier: str
    markup: str | None = None
    producer: Any = None
    filename: str | None = None

    def render(self, props: Mapping[str, str]) -> str:
        """Produce the component content for one reference.

        Raises:
            ComponentProducerError: If a callable producer raises
        """
        if self.markup is not None:
            return self.markup
        if not callable(self.producer):
            return str(self.producer)

        producer_props = {k: v for k, v in props.items() if k not in PRODUCER_EXCLUDED_PROPS}
        try:
            result = self.producer(producer_props)
        except Exception as e:
            raise ComponentProducerError(self.identifier, self.filename, e) from e
        return "" if result is None else str(result)


class ComponentProvider(Protocol):
    def get_source(self, identifier: str) -> ComponentSource: ...

    def list_components(self) -> list[str]: ...


def _load_producer(identifier: str, path: Path) -> Any | None:
    """Execute a producer module and return its primary export.

    Returns ``None`` if the module defines none of ``PRODUCER_EXPORTS``.
    """
    module_name = "_component_" + "".join(c if c.isalnum() else "_" for c in identifier)
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        return None
    module = importlib.util.module_from_spec(spec)
    # Registered only while executing: dataclasses and typing resolve the
    # module through sys.modules.
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise ComponentProducerError(identifier, str(path), e) from e
    finally:
        sys.modules.pop(module_name, None)

    for attr in PRODUCER_EXPORTS:
        if hasattr(module, attr):
            return getattr(module, attr)
    return None


class FileSystemProvider:
    """Load components from an ordered list of directories.

    For each directory, ``<dir>/<identifier>.html`` is tried first, then
    the producer file ``<dir>/<identifier>.py``. The first hit wins, so
    earlier directories shadow later ones.

    Search Order:
            ```python
            provider = FileSystemProvider([
                "site/src/components",   # local to the pages root
                "site/components",       # project-wide fallback
            ])
            ```

    Example:
            >>> provider = FileSystemProvider("src/components")
            >>> source = provider.get_source("main/Button")
            >>> source.filename
            'src/components/main/Button.html'

    Raises:
        ComponentNotFoundError: If no directory holds the component
        ComponentProducerError: If the only match is a producer that fails to import
    """

    __slots__ = ("_encoding", "_markup_suffix", "_paths", "_producer_suffix")

    def __init__(
        self,
        paths: str | Path | list[str | Path],
        encoding: str = "utf-8",
        markup_suffix: str = ".html",
        producer_suffix: str = ".py",
    ):
        if isinstance(paths, (str, Path)):
            paths = [paths]
        self._paths = [Path(p) for p in paths]
        self._encoding = encoding
        self._markup_suffix = markup_suffix
        self._producer_suffix = producer_suffix

    @property
    def paths(self) -> list[Path]:
        return list(self._paths)

    def get_source(self, identifier: str) -> ComponentSource:
        name = normalize_identifier(identifier)
        producer_error: ComponentProducerError | None = None

        for base in self._paths:
            markup_path = base / f"{name}{self._markup_suffix}"
            if markup_path.is_file():
                try:
                    markup = markup_path.read_text(self._encoding)
                except (OSError, UnicodeDecodeError) as e:
                    logger.warning(f"Could not read component file {markup_path}: {e}")
                else:
                    return ComponentSource(identifier, markup=markup, filename=str(markup_path))

            producer_path = base / f"{name}{self._producer_suffix}"
            if producer_path.is_file():
                try:
                    producer = _load_producer(identifier, producer_path)
                except ComponentProducerError as e:
                    producer_error = producer_error or e
                    continue
                if producer is not None:
                    return ComponentSource(identifier, producer=producer, filename=str(producer_path))

        if producer_error is not None:
            raise producer_error
        raise ComponentNotFoundError(
            identifier,
            searched=[str(p) for p in self._paths],
            available=self.list_components(),
        )

    def list_components(self) -> list[str]:
        """List identifiers of every markup and producer file in the search paths."""
        components: set[str] = set()
        for base in self._paths:
            if not base.is_dir():
                continue
            for suffix in (self._markup_suffix, self._producer_suffix):
                for path in base.rglob(f"*{suffix}"):
                    if "__pycache__" in path.parts or path.name.startswith("__"):
                        continue
                    components.add(path.relative_to(base).with_suffix("").as_posix())
        return sorted(components)


class DictProvider:
    """Serve components from an in-memory mapping.

    String values are markup; anything else is treated as a producer.

    Example:
            >>> provider = DictProvider({
            ...     "Card": "<div class='card'>{{ children }}</div>",
            ...     "Clock": lambda props: f"<time>{props.get('at', 'now')}</time>",
            ... })
            >>> provider.get_source("Card").render({})
            "<div class='card'>{{ children }}</div>"
    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: Mapping[str, Any]):
        self._mapping = {normalize_identifier(k): v for k, v in mapping.items()}

    def get_source(self, identifier: str) -> ComponentSource:
        name = normalize_identifier(identifier)
        if name not in self._mapping:
            raise ComponentNotFoundError(identifier, available=sorted(self._mapping))
        value = self._mapping[name]
        if isinstance(value, str):
            return ComponentSource(identifier, markup=value)
        return ComponentSource(identifier, producer=value, filename="<dict>")

    def list_components(self) -> list[str]:
        return sorted(self._mapping)


class FunctionProvider:
    """Wrap a callable as a component provider.

    The function takes an identifier and returns one of:
        - ``str``: Component markup
        - ``ComponentSource``: Used as-is
        - ``None``: Not found
        - anything else: A producer (called with props when callable)

    An exception raised by the function is reported as a ComponentProducerError.

    Example:
            >>> def lookup(identifier):
            ...     if identifier == "Hello":
            ...         return "<p>Hello {{ who }}</p>"
            ...     return None
            >>> provider = FunctionProvider(lookup)
    """

    __slots__ = ("_load_func",)

    def __init__(self, load_func: Callable[[str], Any]):
        self._load_func = load_func

    def get_source(self, identifier: str) -> ComponentSource:
        try:
            result = self._load_func(normalize_identifier(identifier))
        except Exception as e:
            raise ComponentProducerError(identifier, "<function>", e) from e
        if result is None:
            raise ComponentNotFoundError(identifier)
        if isinstance(result, ComponentSource):
            return result
        if isinstance(result, str):
            return ComponentSource(identifier, markup=result, filename="<function>")
        return ComponentSource(identifier, producer=result, filename="<function>")

    def list_components(self) -> list[str]:
        """FunctionProvider cannot enumerate components."""
        return []


class ChoiceProvider:
    """Try providers in order and return the first resolution.

    Example:
            >>> provider = ChoiceProvider([
            ...     DictProvider({"Header": "<header>Override</header>"}),
            ...     FileSystemProvider("src/components"),
            ... ])
    """

    __slots__ = ("_providers",)

    def __init__(self, providers: list[ComponentProvider]):
        self._providers = providers

    def get_source(self, identifier: str) -> ComponentSource:
        producer_error: ComponentProducerError | None = None
        for provider in self._providers:
            try:
                return provider.get_source(identifier)
            except ComponentProducerError as e:
                producer_error = producer_error or e
            except ComponentNotFoundError:
                continue
        if producer_error is not None:
            raise producer_error
        raise ComponentNotFoundError(identifier, available=self.list_components())

    def list_components(self) -> list[str]:
        components: set[str] = set()
        for provider in self._providers:
            components.update(provider.list_components())
        return sorted(components)
