"""Async compile and page render tests."""

from __future__ import annotations

import asyncio

import pytest

from html_component_engine import DictProvider, Environment

from .conftest import assert_no_components, write


@pytest.mark.asyncio
async def test_compile_async_matches_sync(env: Environment) -> None:
    html = '<Component src="main/Button" variant="secondary" text="Go" />'
    assert await env.compile_async(html) == env.compile(html)


@pytest.mark.asyncio
async def test_render_page_async(env: Environment, root) -> None:
    write(root / "index.html", '<Component name="Card" title="T">{{ gone }}<b>x</b></Component>')
    html = await env.render_page_async("index.html")
    assert html == "<div>T<b>x</b></div>"


@pytest.mark.asyncio
async def test_concurrent_compiles_keep_separate_contexts(tmp_path) -> None:
    def leaf(props):
        return f"<i>{props['n']}</i>"

    env = Environment(
        tmp_path,
        provider=DictProvider(
            {
                "Wrap": '<div><Component src="Leaf" n="{{ n }}" /></div>',
                "Leaf": leaf,
            }
        ),
    )
    results = await asyncio.gather(
        *(env.compile_async(f'<Component src="Wrap" n="{i}" />') for i in range(10))
    )
    assert results == [f"<div><i>{i}</i></div>" for i in range(10)]
    for html in results:
        assert_no_components(html)


@pytest.mark.asyncio
async def test_render_page_async_missing_page(env: Environment) -> None:
    with pytest.raises(OSError):
        await env.render_page_async("missing.html")
