"""Thread safety tests for shared documents, registries and configuration.

Documents and registries are immutable and the active ResolveConfig lives in
a ContextVar. These tests resolve concurrently from many threads to check
that nothing leaks between them.
"""

from concurrent.futures import ThreadPoolExecutor

from tagspan import (
    CompositeSpan,
    ResolveConfig,
    TagContext,
    TextSpan,
    create_registry,
    get_resolve_config,
    parse,
    resolve,
)


class TestConcurrentResolution:
    def test_shared_document_and_registry(self) -> None:
        document = parse("Hello, <name>Bob</name>! <b>Welcome</b>")
        registry = create_registry(
            {"name": lambda text, ctx: TextSpan(text.upper())},
            on_tap_link=lambda href: None,
        )

        def work(_: int) -> tuple:
            return resolve(document, registry)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(work, range(200)))

        assert all(result == results[0] for result in results)
        assert results[0][1] == TextSpan("BOB")

    def test_configs_do_not_leak_between_threads(self) -> None:
        document = parse('<scale/><a href="x">y</a>')

        def build_scale(text: str, context: TagContext) -> TextSpan:
            # Both views of the config must agree inside the builder
            assert get_resolve_config() is context.config
            return TextSpan(str(context.config.text_scale_factor))

        registry = create_registry({"scale": build_scale}, on_tap_link=lambda href: None)

        def work(i: int) -> tuple[int, tuple]:
            config = ResolveConfig(text_scale_factor=float(i), focusable_links=i % 2 == 0)
            return i, resolve(document, registry, config=config)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(work, range(200)))

        for i, spans in results:
            assert spans[0] == TextSpan(str(float(i)))
            assert isinstance(spans[1], CompositeSpan) == (i % 2 == 0)
