"""Tag scanner tests."""

from html_component_engine.scanner import (
    ComponentReference,
    ReferenceKind,
    TagSpan,
    scan_children_components,
    scan_self_closing_tags,
)


class TestScanChildrenComponents:
    def test_single_reference(self) -> None:
        html = '<p>before</p><Component name="Card" title="T">  <p>Z</p>  </Component><p>after</p>'
        [ref] = scan_children_components(html)
        assert ref.kind is ReferenceKind.CHILDREN
        assert ref.identifier == "Card"
        assert ref.props == {"title": "T"}
        assert ref.children == "<p>Z</p>"
        assert html[ref.start : ref.end] == ref.source
        assert ref.source.startswith('<Component name="Card"')
        assert ref.source.endswith("</Component>")

    def test_document_order(self) -> None:
        html = (
            '<Component name="A">1</Component>'
            '<Component name="B">2</Component>'
            '<Component name="C">3</Component>'
        )
        assert [r.identifier for r in scan_children_components(html)] == ["A", "B", "C"]

    def test_same_name_nesting_returns_outer_only(self) -> None:
        html = '<Component name="Box"><Component name="Box">in</Component></Component>'
        [ref] = scan_children_components(html)
        assert ref.children == '<Component name="Box">in</Component>'
        assert ref.end == len(html)

    def test_mixed_nesting(self) -> None:
        html = (
            '<Component name="Outer">'
            '<Component name="Inner">x</Component>'
            '<Component src="Leaf" />'
            "</Component>"
            '<Component name="Next">y</Component>'
        )
        refs = scan_children_components(html)
        assert [r.identifier for r in refs] == ["Outer", "Next"]
        assert refs[0].children == '<Component name="Inner">x</Component><Component src="Leaf" />'

    def test_unclosed_opening_is_skipped(self) -> None:
        html = '<Component name="Open">x <Component name="B">y</Component>'
        [ref] = scan_children_components(html)
        assert ref.identifier == "B"
        assert ref.children == "y"

    def test_self_closing_with_name_is_not_child_bearing(self) -> None:
        assert scan_children_components('<Component name="X" />') == []

    def test_name_must_come_first(self) -> None:
        html = '<Component title="x" name="Card">c</Component>'
        assert scan_children_components(html) == []

    def test_no_references(self) -> None:
        assert scan_children_components("<div><p>plain</p></div>") == []

    def test_multiline_children(self) -> None:
        html = '<Component name="Card">\n  <ul>\n    <li>a</li>\n  </ul>\n</Component>'
        [ref] = scan_children_components(html)
        assert ref.children == "<ul>\n    <li>a</li>\n  </ul>"


class TestScanSelfClosingTags:
    def test_spans_in_order(self) -> None:
        html = '<Component src="A" /> mid <Component src="B" x="1" />'
        spans = scan_self_closing_tags(html)
        assert [s.source for s in spans] == ['<Component src="A" />', '<Component src="B" x="1" />']
        for span in spans:
            assert html[span.start : span.end] == span.source

    def test_no_name_filtering_at_scan_time(self) -> None:
        [span] = scan_self_closing_tags('<Component title="no src" />')
        assert span.source == '<Component title="no src" />'

    def test_children_tags_not_matched(self) -> None:
        assert scan_self_closing_tags('<Component name="Card">x</Component>') == []

    def test_reference_from_span(self) -> None:
        span = TagSpan(0, 21, '<Component src="A" />')
        ref = ComponentReference.self_closing(span, {"src": "A"})
        assert ref.kind is ReferenceKind.SELF_CLOSING
        assert ref.identifier == "A"
        assert ref.children == ""
