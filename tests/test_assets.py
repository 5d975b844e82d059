"""CSS/JS inlining tests."""

import logging

import pytest

from html_component_engine import AssetNotFoundError, Environment
from html_component_engine.assets import (
    inline_scripts,
    inline_stylesheets,
    locate_asset,
    script_candidates,
    strip_dev_client_scripts,
    stylesheet_candidates,
)

from .conftest import write


class TestCandidates:
    def test_stylesheet_absolute(self, tmp_path) -> None:
        root = tmp_path / "src"
        assert stylesheet_candidates("/styles/a.css", root, tmp_path) == [
            root / "assets" / "styles/a.css",
            root / "styles/a.css",
            tmp_path / "src" / "assets" / "styles/a.css",
        ]

    def test_script_absolute_prefers_project_assets(self, tmp_path) -> None:
        root = tmp_path / "src"
        assert script_candidates("/js/a.js", root, tmp_path)[0] == tmp_path / "src" / "assets" / "js/a.js"

    def test_relative_resolves_against_root(self, tmp_path) -> None:
        assert stylesheet_candidates("a.css", tmp_path, tmp_path.parent) == [tmp_path / "a.css"]
        assert script_candidates("a.js", tmp_path, tmp_path.parent) == [tmp_path / "a.js"]

    def test_locate_asset_raises(self, tmp_path) -> None:
        with pytest.raises(AssetNotFoundError) as exc_info:
            locate_asset("/nope.css", [tmp_path / "nope.css"])
        assert exc_info.value.reference == "/nope.css"
        assert str(tmp_path / "nope.css") in str(exc_info.value)


class TestInlineStylesheets:
    def test_absolute_href(self, root) -> None:
        html = '<head><link rel="stylesheet" href="/styles/main.css"></head>'
        assert inline_stylesheets(html, root) == "<head><style>\nbody { margin: 0; }\n</style></head>"

    def test_relative_href(self, root) -> None:
        html = "<link rel='stylesheet' href='assets/styles/main.css' />"
        assert inline_stylesheets(html, root) == "<style>\nbody { margin: 0; }\n</style>"

    def test_attribute_order_and_case(self, root) -> None:
        for html in (
            '<LINK href="/styles/main.css" REL="stylesheet">',
            '<link data-x="1" rel="stylesheet" href="/styles/main.css">',
        ):
            assert inline_stylesheets(html, root) == "<style>\nbody { margin: 0; }\n</style>"

    @pytest.mark.parametrize(
        "href", ["https://cdn.example.com/a.css", "http://cdn.example.com/a.css"]
    )
    def test_external_untouched(self, root, href) -> None:
        html = f'<link rel="stylesheet" href="{href}">'
        assert inline_stylesheets(html, root) == html

    def test_missing_file_warns_and_keeps_tag(self, root, caplog) -> None:
        html = '<link rel="stylesheet" href="/styles/missing.css">'
        with caplog.at_level(logging.WARNING, logger="html_component_engine.assets"):
            assert inline_stylesheets(html, root) == html
        assert "Could not find asset file for /styles/missing.css" in caplog.text

    def test_no_href_untouched(self, root) -> None:
        html = '<link rel="stylesheet" data-href="x">'
        assert inline_stylesheets(html, root) == html

    def test_other_links_untouched(self, root) -> None:
        html = '<link rel="icon" href="/favicon.ico">'
        assert inline_stylesheets(html, root) == html

    def test_project_src_assets_fallback(self, tmp_path) -> None:
        root = tmp_path / "site"
        write(tmp_path / "src" / "assets" / "theme.css", "p{}")
        html = '<link rel="stylesheet" href="/theme.css">'
        assert inline_stylesheets(html, root, tmp_path) == "<style>\np{}\n</style>"


class TestInlineScripts:
    def test_absolute_src(self, root) -> None:
        html = '<script type="module" src="/scripts/app.js"></script>'
        assert inline_scripts(html, root) == '<script>\nconsole.log("hi");\n</script>'

    def test_relative_src(self, root) -> None:
        html = '<script src="assets/scripts/app.js"></script>'
        assert 'console.log("hi");' in inline_scripts(html, root)

    def test_dev_client_skipped(self, root) -> None:
        html = '<script type="module" src="/@vite/client"></script>'
        assert inline_scripts(html, root) == html

    def test_custom_dev_client_markers(self, root) -> None:
        html = '<script src="/scripts/app.js"></script>'
        assert inline_scripts(html, root, dev_client_markers=("scripts/",)) == html

    def test_external_untouched(self, root) -> None:
        html = '<script src="https://cdn.example.com/lib.js"></script>'
        assert inline_scripts(html, root) == html

    def test_missing_file_warns_and_keeps_tag(self, root, caplog) -> None:
        html = '<script src="/scripts/missing.js"></script>'
        with caplog.at_level(logging.WARNING, logger="html_component_engine.assets"):
            assert inline_scripts(html, root) == html
        assert "/scripts/missing.js" in caplog.text

    def test_inline_script_without_src_untouched(self, root) -> None:
        html = "<script>let a = 1;</script>"
        assert inline_scripts(html, root) == html


class TestStripDevClientScripts:
    def test_removes_vite_client(self) -> None:
        html = '<head><script type="module" src="/@vite/client"></script><title>x</title></head>'
        assert strip_dev_client_scripts(html) == "<head><title>x</title></head>"

    def test_keeps_other_scripts(self) -> None:
        html = '<script src="/app.js"></script><script>go()</script>'
        assert strip_dev_client_scripts(html) == html

    def test_custom_markers(self) -> None:
        html = '<script src="/livereload.js"></script><p></p>'
        assert strip_dev_client_scripts(html, ("livereload",)) == "<p></p>"


class TestUndecodableAssets:
    def test_stylesheet_kept_and_warned(self, root, caplog) -> None:
        (root / "assets" / "x.css").write_bytes(b"body{content:'\xff'}")
        html = '<link rel="stylesheet" href="/x.css">'
        with caplog.at_level(logging.WARNING, logger="html_component_engine.assets"):
            assert inline_stylesheets(html, root) == html
        assert "Could not inline /x.css" in caplog.text

    def test_script_kept_and_warned(self, root, caplog) -> None:
        (root / "assets" / "x.js").write_bytes(b"\xff\xfe")
        html = '<script src="/x.js"></script>'
        with caplog.at_level(logging.WARNING, logger="html_component_engine.assets"):
            assert inline_scripts(html, root) == html
        assert "Could not inline /x.js" in caplog.text

    def test_build_page_survives(self, root) -> None:
        (root / "assets" / "x.css").write_bytes(b"\xff")
        write(root / "index.html", '<link rel="stylesheet" href="/x.css"><Component src="Footer" copyright="c" />')
        html = Environment(root).build_page("index.html")
        assert html == '<link rel="stylesheet" href="/x.css"><footer><p>c</p></footer>'
