"""Tests for text extraction from spans."""

from tagspan import (
    CompositeSpan,
    FocusableLink,
    TextSpan,
    extract_text,
    resolve_spans,
    semantics_text,
)


class TestExtractText:
    def test_empty(self) -> None:
        assert extract_text(()) == ""

    def test_visible_text(self) -> None:
        spans = resolve_spans("<b>Hello</b>, <u>my name is</u><br/><i>George</i>!")
        assert extract_text(spans) == "Hello, my name is\nGeorge!"

    def test_labels_do_not_change_visible_text(self) -> None:
        spans = (TextSpan("Next"), TextSpan(" "), TextSpan(">", semantics_label="and then"))
        assert extract_text(spans) == "Next >"

    def test_composite_child_text(self) -> None:
        spans = (TextSpan("Read "), CompositeSpan(child=FocusableLink("docs")))
        assert extract_text(spans) == "Read docs"


class TestSemanticsText:
    def test_labels_replace_text(self) -> None:
        spans = resolve_spans('<b>Next</b> <span aria-label="and then">></span>')
        assert semantics_text(spans) == "Next and then"

    def test_default_semantics(self) -> None:
        spans = resolve_spans("<b>Hello</b>, <u>my name is</u><br/><i>George</i>!")
        assert semantics_text(spans) == "Hello, my name is\nGeorge!"

    def test_custom_semantics(self) -> None:
        spans = resolve_spans(
            "<b>On Android devices,</b> <u>select Google</u> "
            '<span aria-label="and then">></span> <i>Parental controls</i>'
        )
        assert semantics_text(spans) == (
            "On Android devices, select Google and then Parental controls"
        )

    def test_labels_on_every_builtin(self) -> None:
        spans = resolve_spans(
            '<b aria-label="1">a</b><strong aria-label="2">b</strong>'
            '<i aria-label="3">c</i><em aria-label="4">d</em>'
            '<u aria-label="5">e</u><br aria-label="6"/><span aria-label="7">f</span>'
        )
        assert semantics_text(spans) == "1234567"
        assert extract_text(spans) == "abcde\nf"

    def test_accepts_iterables(self) -> None:
        assert semantics_text(iter([TextSpan("a"), TextSpan("b")])) == "ab"
