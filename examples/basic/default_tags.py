"""Built-in tags and accessibility labels need no configuration."""

from tagspan import TaggedText

tagged = TaggedText(
    "<b>On Android devices,</b> <u>select Google</u> "
    '<span aria-label="and then">></span> <i>Parental controls</i>'
)

print("Visible:", tagged.plain_text)
print("Read aloud:", tagged.semantics_label)
