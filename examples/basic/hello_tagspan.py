"""Style one word of a translated string: no configuration beyond one builder."""

from tagspan import TextStyle, resolve_spans, styled

spans = resolve_spans("Hello, <name>Bob</name>!", {"name": styled(TextStyle(color="teal"))})
for span in spans:
    print(repr(span.text), span.style)
