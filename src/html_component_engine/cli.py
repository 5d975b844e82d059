"""Command-line interface.

    html-component-engine build [--project DIR] [--src src] [--out dist]
    html-component-engine render PAGE [--project DIR] [--src src]
    html-component-engine init NAME [--force]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from html_component_engine.build import build_site
from html_component_engine.environment import Environment, terminal
from html_component_engine.scaffold import create_project, is_empty_dir


def _environment(args: argparse.Namespace) -> Environment:
    project = Path(args.project).resolve()
    return Environment(
        root=project / args.src,
        project_root=project,
        components_dir=args.components_dir,
        assets_dir=args.assets_dir,
        max_depth=args.max_depth,
        inline_css=not getattr(args, "no_inline_styles", False),
        inline_js=not getattr(args, "no_inline_scripts", False),
    )


def cmd_build(args: argparse.Namespace) -> int:
    env = _environment(args)
    out_dir = Path(args.out)
    if not out_dir.is_absolute():
        out_dir = env.project_root / out_dir

    print(terminal.colorize("HTML Component Engine - Build Started", "cyan", "bold"))
    report = build_site(env, out_dir)
    for page in report.pages:
        print(f"  {terminal.success('✓')} {page}")
    print(
        terminal.success(
            f"Build complete: {len(report.pages)} page(s), {len(report.assets)} asset(s) → {out_dir}"
        )
    )
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    env = _environment(args)
    sys.stdout.write(env.render_page(args.page))
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    target = Path.cwd() if args.name == "." else Path(args.name).resolve()

    if args.name != "." and not args.force and not is_empty_dir(target):
        print(
            terminal.failure(f'Directory "{args.name}" is not empty. Use --force to continue.'),
            file=sys.stderr,
        )
        return 1

    print(terminal.dim_text(f"Creating project in {target}..."))
    for relative in create_project(target, target.name):
        print(f"  {terminal.success('✓')} {relative}")

    print()
    print(terminal.success("Project created successfully!"))
    print(terminal.colorize("Next steps:", "bold"))
    if args.name != ".":
        print(terminal.colorize(f"  cd {args.name}", "cyan"))
    print(terminal.colorize("  html-component-engine build", "cyan"))
    return 0


def _add_project_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--project", default=".", help="Project root (default: current directory)")
    parser.add_argument("--src", default="src", help="Pages directory inside the project")
    parser.add_argument("--components-dir", default="components")
    parser.add_argument("--assets-dir", default="assets")
    parser.add_argument("--max-depth", type=int, default=50, help="Maximum component nesting")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html-component-engine",
        description="Compile HTML pages with reusable <Component> tags",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Compile all pages into an output directory")
    _add_project_options(build)
    build.add_argument("--out", default="dist", help="Output directory (default: dist)")
    build.add_argument("--no-inline-styles", action="store_true")
    build.add_argument("--no-inline-scripts", action="store_true")
    build.set_defaults(func=cmd_build)

    render = subparsers.add_parser("render", help="Compile one page to stdout")
    _add_project_options(render)
    render.add_argument("page", help="Page path relative to the pages directory")
    render.set_defaults(func=cmd_render)

    init = subparsers.add_parser("init", help="Create a new starter project")
    init.add_argument("name", help='Project directory ("." for the current directory)')
    init.add_argument("--force", action="store_true", help="Write into a non-empty directory")
    init.set_defaults(func=cmd_init)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (OSError, UnicodeDecodeError) as e:
        print(terminal.failure(f"Error: {e}"), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
