"""Tests for the ``a`` tag and focusable links."""

import pytest

from tagspan import (
    CompositeSpan,
    FocusableLink,
    ResolveConfig,
    TaggedText,
    TextSpan,
    TextStyle,
    UnresolvedTagError,
    resolve_spans,
)
from tagspan.builders import create_default_builders, make_link_builder
from tagspan.styles import LINK, PRIMARY_COLOR, FontWeight


class Recorder:
    """Collects hrefs passed to the link callback."""

    def __init__(self) -> None:
        self.hrefs: list[str] = []

    def __call__(self, href: str) -> None:
        self.hrefs.append(href)


class TestLinkAvailability:
    """The ``a`` builder only exists with a callback."""

    def test_without_callback(self) -> None:
        assert "a" not in create_default_builders()
        with pytest.raises(UnresolvedTagError):
            resolve_spans('<a href="http://x">Link</a>')

    def test_with_callback(self) -> None:
        assert "a" in create_default_builders(Recorder())

    def test_custom_a_builder_wins(self) -> None:
        custom = TextSpan("mine")
        spans = resolve_spans(
            '<a href="x">y</a>',
            {"a": lambda text, ctx: custom},
            on_tap_link=Recorder(),
        )
        assert spans == (custom,)


class TestTextLinks:
    """Default strategy: a TextSpan with a tap hook."""

    def test_span_shape(self) -> None:
        spans = resolve_spans('<a href="http://x">Link</a>', on_tap_link=Recorder())

        [span] = spans
        assert isinstance(span, TextSpan)
        assert span.text == "Link"
        assert span.style == LINK
        assert span.style.color == PRIMARY_COLOR

    def test_tap_calls_back_with_href(self) -> None:
        recorder = Recorder()
        [span] = resolve_spans('<a href="http://x">Link</a>', on_tap_link=recorder)

        span.on_tap()
        span.on_tap()
        assert recorder.hrefs == ["http://x", "http://x"]

    def test_resolution_does_not_call_back(self) -> None:
        recorder = Recorder()
        resolve_spans('<a href="http://x">Link</a>', on_tap_link=recorder)
        assert recorder.hrefs == []

    def test_link_style_override(self) -> None:
        link_style = TextStyle(color="teal")
        [span] = resolve_spans(
            '<a href="x">y</a>',
            on_tap_link=Recorder(),
            config=ResolveConfig(link_style=link_style),
        )
        assert span.style == link_style

    def test_missing_href_has_no_tap(self) -> None:
        [span] = resolve_spans("<a>Link</a>", on_tap_link=Recorder())
        assert isinstance(span, TextSpan)
        assert span.on_tap is None
        assert span.style == LINK

    def test_aria_label(self) -> None:
        [span] = resolve_spans(
            '<a href="x" aria-label="Open docs">Docs</a>', on_tap_link=Recorder()
        )
        assert span.semantics_label == "Open docs"
        assert span.reading_text == "Open docs"


class TestFocusableLinks:
    """Focusable strategy: a CompositeSpan around a FocusableLink."""

    def resolve_link(self, content: str, recorder: Recorder, **config: object) -> CompositeSpan:
        [span] = resolve_spans(
            content,
            on_tap_link=recorder,
            config=ResolveConfig(focusable_links=True, **config),
        )
        assert isinstance(span, CompositeSpan)
        return span

    def test_span_shape(self) -> None:
        span = self.resolve_link('<a href="http://x">Link</a>', Recorder())

        assert span.alignment == "middle"
        link = span.child
        assert isinstance(link, FocusableLink)
        assert link.text == "Link"
        assert link.is_link
        assert span.plain_text == "Link"
        assert span.reading_text == "Link"

    def test_enter_activates(self) -> None:
        recorder = Recorder()
        link = self.resolve_link('<a href="http://x">Link</a>', recorder).child

        assert link.handle_key("enter") is True
        assert link.handle_key("Enter") is True
        assert recorder.hrefs == ["http://x", "http://x"]

    def test_other_keys_are_ignored(self) -> None:
        recorder = Recorder()
        link = self.resolve_link('<a href="http://x">Link</a>', recorder).child

        assert link.handle_key("space") is False
        assert link.handle_key("a") is False
        assert recorder.hrefs == []

    def test_tap_activates(self) -> None:
        recorder = Recorder()
        link = self.resolve_link('<a href="http://x">Link</a>', recorder).child

        link.activate()
        assert recorder.hrefs == ["http://x"]

    def test_missing_href_is_inert(self) -> None:
        link = self.resolve_link("<a>Link</a>", Recorder()).child
        assert link.on_activate is None
        assert link.handle_key("enter") is True
        link.activate()

    def test_default_style_is_primary(self) -> None:
        link = self.resolve_link('<a href="x">y</a>', Recorder()).child
        assert link.style == LINK

    def test_ambient_style_gets_primary_color(self) -> None:
        style = TextStyle(font_weight=FontWeight.BOLD, font_size=14.0)
        link = self.resolve_link('<a href="x">y</a>', Recorder(), style=style).child
        assert link.style == style.copy_with(color=PRIMARY_COLOR)

    def test_link_style_wins(self) -> None:
        link_style = TextStyle(color="teal")
        link = self.resolve_link(
            '<a href="x">y</a>',
            Recorder(),
            style=TextStyle(font_size=14.0),
            link_style=link_style,
        ).child
        assert link.style == link_style

    def test_aria_label_on_composite(self) -> None:
        span = self.resolve_link('<a href="x" aria-label="Open">y</a>', Recorder())
        assert span.semantics_label == "Open"
        assert span.reading_text == "Open"


class TestTaggedTextLinks:
    """Link options through TaggedText."""

    def test_focusable_flag(self) -> None:
        recorder = Recorder()
        tagged = TaggedText(
            'Read the <a href="https://example.com">docs</a>.',
            on_tap_link=recorder,
            focusable_links=True,
        )
        assert isinstance(tagged.spans[1], CompositeSpan)
        assert tagged.semantics_label == "Read the docs."

        tagged.spans[1].child.handle_key("enter")
        assert recorder.hrefs == ["https://example.com"]

    def test_make_link_builder_directly(self) -> None:
        recorder = Recorder()
        spans = resolve_spans(
            '<link-to href="x">y</link-to>',
            {"link-to": make_link_builder(recorder)},
        )
        spans[0].on_tap()
        assert recorder.hrefs == ["x"]
