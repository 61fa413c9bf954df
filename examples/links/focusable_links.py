"""Links as text runs or as focusable units activated with Enter."""

from tagspan import TaggedText


def open_url(href: str) -> None:
    print("Opening", href)


content = 'Read the <a href="https://example.com/docs">docs</a> first.'

plain = TaggedText(content, on_tap_link=open_url)
plain.spans[1].on_tap()

focusable = TaggedText(content, on_tap_link=open_url, focusable_links=True)
link = focusable.spans[1].child
print("Handled:", link.handle_key("enter"))
print("Handled:", link.handle_key("space"))
