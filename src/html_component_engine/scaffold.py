"""Starter project scaffolding for ``html-component-engine init``."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

_INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Home | {name}</title>
  <link rel="stylesheet" href="/assets/styles/main.css">
</head>
<body>
  <Component src="Header" title="{name}" />

  <main class="container">
    <h2>Welcome to {name}</h2>
    <p>This is a sample page using HTML Component Engine.</p>

    <section class="cards">
      <Component name="Card" title="Getting Started">
        <p>Edit <code>src/index.html</code> to modify this page.</p>
        <p>Components are in <code>src/components/</code>.</p>
      </Component>

      <Component name="Card" title="Features">
        <ul>
          <li>Reusable HTML components</li>
          <li>Props and variants support</li>
          <li>Slot-based children</li>
          <li>CSS/JS inlining for production</li>
        </ul>
      </Component>
    </section>

    <Component src="Button" text="Learn More" variant="primary" href="/about" />
  </main>

  <Component src="Footer" year="2025" />
</body>
</html>
"""

_ABOUT_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>About | {name}</title>
  <link rel="stylesheet" href="/assets/styles/main.css">
</head>
<body>
  <Component src="Header" title="{name}" />

  <main class="container">
    <h2>About Us</h2>
    <p>This is the about page.</p>

    <Component name="Card" title="Our Mission">
      <p>Building great websites with simple, reusable HTML components.</p>
    </Component>

    <Component src="Button" text="Go Home" variant="secondary" href="/" />
  </main>

  <Component src="Footer" year="2025" />
</body>
</html>
"""

_HEADER_HTML = """<header class="header">
  <div class="header-content">
    <h1 class="logo">{{ title }}</h1>
    <nav class="nav">
      <a href="/">Home</a>
      <a href="/about">About</a>
    </nav>
  </div>
</header>
"""

_FOOTER_HTML = """<footer class="footer">
  <div class="footer-content">
    <p>&copy; {{ year }} All rights reserved.</p>
  </div>
</footer>
"""

_CARD_HTML = """<div class="card">
  <div class="card-header">
    <h3>{{ title }}</h3>
  </div>
  <div class="card-body">
    {{ children }}
  </div>
</div>
"""

_BUTTON_HTML = """<!-- variants: primary=btn-primary, secondary=btn-secondary, outline=btn-outline -->
<a class="btn {{ variantClasses }}" href="{{ href }}">{{ text }}</a>
"""

_MAIN_CSS = """*, *::before, *::after {
  box-sizing: border-box;
  margin: 0;
  padding: 0;
}

:root {
  --primary-color: #3b82f6;
  --secondary-color: #64748b;
  --text-color: #1e293b;
  --bg-color: #f8fafc;
  --card-bg: #ffffff;
  --border-color: #e2e8f0;
  --radius: 8px;
}

body {
  font-family: system-ui, -apple-system, "Segoe UI", Roboto, sans-serif;
  line-height: 1.6;
  color: var(--text-color);
  background-color: var(--bg-color);
  min-height: 100vh;
  display: flex;
  flex-direction: column;
}

.container { max-width: 1200px; margin: 0 auto; padding: 2rem; flex: 1; }

.header { background: var(--card-bg); border-bottom: 1px solid var(--border-color); padding: 1rem 2rem; }
.header-content { max-width: 1200px; margin: 0 auto; display: flex; justify-content: space-between; align-items: center; }
.logo { font-size: 1.5rem; color: var(--primary-color); }
.nav { display: flex; gap: 1.5rem; }
.nav a { color: var(--text-color); text-decoration: none; font-weight: 500; }

.footer { background: var(--text-color); color: var(--bg-color); padding: 1.5rem 2rem; margin-top: auto; text-align: center; }

.cards { display: grid; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr)); gap: 1.5rem; margin: 2rem 0; }
.card { background: var(--card-bg); border: 1px solid var(--border-color); border-radius: var(--radius); overflow: hidden; }
.card-header { padding: 1rem 1.5rem; border-bottom: 1px solid var(--border-color); background: var(--bg-color); }
.card-body { padding: 1.5rem; }

.btn { display: inline-block; padding: 0.75rem 1.5rem; border-radius: var(--radius); text-decoration: none; font-weight: 500; border: 2px solid transparent; }
.btn-primary { background: var(--primary-color); color: white; }
.btn-secondary { background: var(--secondary-color); color: white; }
.btn-outline { background: transparent; border-color: var(--primary-color); color: var(--primary-color); }
"""

_GITIGNORE = """dist/
__pycache__/
*.log
.DS_Store
"""

_README_MD = """# {name}

A website built with HTML Component Engine.

## Commands

```bash
html-component-engine build          # compile src/ into dist/
html-component-engine render index.html
```

## Component Syntax

Self-closing components:

```html
<Component src="Button" text="Click Me" variant="primary" />
```

Components with children:

```html
<Component name="Card" title="My Card">
  <p>This content goes into {{{{ children }}}}</p>
</Component>
```

Variants:

```html
<!-- variants: primary=btn-primary, secondary=btn-secondary -->
<button class="{{{{ variantClasses }}}}">{{{{ text }}}}</button>
```
"""


def _formatted(template: str) -> Callable[[str], str]:
    return lambda name: template.format(name=name)


def _static(content: str) -> Callable[[str], str]:
    return lambda name: content


# Relative path → content factory taking the project display name
TEMPLATES: dict[str, Callable[[str], str]] = {
    "src/index.html": _formatted(_INDEX_HTML),
    "src/about.html": _formatted(_ABOUT_HTML),
    "src/components/Header.html": _static(_HEADER_HTML),
    "src/components/Footer.html": _static(_FOOTER_HTML),
    "src/components/Card.html": _static(_CARD_HTML),
    "src/components/Button.html": _static(_BUTTON_HTML),
    "src/assets/styles/main.css": _static(_MAIN_CSS),
    ".gitignore": _static(_GITIGNORE),
    "README.md": _formatted(_README_MD),
}


def is_empty_dir(path: Path) -> bool:
    return not path.exists() or (path.is_dir() and not any(path.iterdir()))


def create_project(target: Path, name: str) -> list[str]:
    """Write the starter files into ``target`` and return their relative paths.

    Existing files with the same names are overwritten.
    """
    written: list[str] = []
    for relative, render in TEMPLATES.items():
        path = target / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render(name), "utf-8")
        written.append(relative)
    return written
