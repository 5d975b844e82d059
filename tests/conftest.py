"""Pytest configuration and fixtures for component engine tests."""

from pathlib import Path

import pytest

from html_component_engine import DictProvider, Environment

COMPONENTS = {
    "Header.html": "<header><h1>{{ title }}</h1><nav>{{ nav }}</nav></header>",
    "Footer.html": "<footer><p>{{ copyright }}</p></footer>",
    "Card.html": "<div>{{ title }}{{ children }}</div>",
    "Box.html": "<section>{{ children }}</section>",
    "Button.html": (
        "<!-- variants: primary=btn-primary -->\n"
        '<a class="{{ variantClasses }}">{{ text }}</a>'
    ),
    "main/Button.html": (
        "<!-- variants: primary=btn-primary, secondary=btn-secondary -->\n"
        '<button class="{{ variantClasses }}">{{ text }}</button>'
    ),
    "Layout.html": '<main><Component src="Header" title="{{ title }}" nav="Home" /></main>',
}


def write(path: Path, content: str) -> Path:
    """Write a file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, "utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project directory with pages root ``src/``, components and assets."""
    root = tmp_path / "src"
    for name, content in COMPONENTS.items():
        write(root / "components" / name, content)
    write(root / "assets" / "styles" / "main.css", "body { margin: 0; }")
    write(root / "assets" / "scripts" / "app.js", 'console.log("hi");')
    return tmp_path


@pytest.fixture
def root(project: Path) -> Path:
    return project / "src"


@pytest.fixture
def env(root: Path) -> Environment:
    """Environment over the fixture project."""
    return Environment(root)


@pytest.fixture
def dict_env(tmp_path: Path) -> Environment:
    """Environment backed by an in-memory provider."""
    provider = DictProvider(
        {
            "Header": "<header><h1>{{ title }}</h1></header>",
            "Card": '<div class="card">{{ title }}{{ children }}</div>',
        }
    )
    return Environment(tmp_path, provider=provider)


def assert_no_components(html: str) -> None:
    """Assert that no raw component tag survived compilation."""
    assert "<Component" not in html, f"Raw component tag left in output:\n{html}"
