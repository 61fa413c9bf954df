"""Swap content or builders and only redo the work that changed."""

import logging

from tagspan import TaggedText, TextStyle, styled

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

builders = {"name": styled(TextStyle(color="teal"))}
tagged = TaggedText("Hello, <name>Bob</name>", builders)

print(tagged.update(builders=dict(builders)))  # equal mapping: no work
print(tagged.update(content="Bye, <name>Bob</name>"))
print(tagged.update(builders={"name": styled(TextStyle(color="red"))}))
print([span.style for span in tagged.spans])
