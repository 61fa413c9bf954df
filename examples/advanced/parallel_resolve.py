"""Free-threading safe: resolve 1000 strings in parallel with one registry."""

from concurrent.futures import ThreadPoolExecutor

from tagspan import DictDocumentCache, TextStyle, create_registry, parse, resolve, styled

registry = create_registry({"count": styled(TextStyle(font_size=18.0))})
messages = [f"You have <count>{i}</count> new messages" for i in range(1000)]

# Parse once up front; DictDocumentCache is not thread-safe
cache = DictDocumentCache()
documents = [parse(message, cache=cache) for message in messages]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lambda doc: resolve(doc, registry), documents))

print(f"Resolved {len(results)} strings in parallel")
print("Last:", [span.text for span in results[-1]])
