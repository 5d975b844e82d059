"""Environment, component providers and exceptions."""

from html_component_engine.environment.exceptions import (
    AssetNotFoundError,
    ComponentDepthError,
    ComponentNotFoundError,
    ComponentProducerError,
    EngineError,
    ErrorCode,
)
from html_component_engine.environment.providers import (
    ChoiceProvider,
    ComponentProvider,
    ComponentSource,
    DictProvider,
    FileSystemProvider,
    FunctionProvider,
)
from html_component_engine.environment.core import (
    Environment,
    compile_html,
    inline_scripts,
    inline_stylesheets,
)

__all__ = [
    "AssetNotFoundError",
    "ChoiceProvider",
    "ComponentDepthError",
    "ComponentNotFoundError",
    "ComponentProducerError",
    "ComponentProvider",
    "ComponentSource",
    "DictProvider",
    "EngineError",
    "Environment",
    "ErrorCode",
    "FileSystemProvider",
    "FunctionProvider",
    "compile_html",
    "inline_scripts",
    "inline_stylesheets",
]
