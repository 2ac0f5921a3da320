"""Thread safety tests for parsing and rendering.

parse() and render_tokens() keep all state per call, so concurrent use from
many threads must produce exactly the serial results.

These tests use real threading to catch actual concurrency bugs.
"""

from concurrent.futures import ThreadPoolExecutor

from charla import HtmlBuilder, MessageFormatter, RenderContext, parse, render_html, render_tokens

HEX64 = "0123456789abcdef" * 4

MESSAGES = [
    f"msg {i} @{HEX64} https://example.com/{i} #tag{i} :fire:\n`code {i}`" for i in range(200)
]


class TestConcurrentUse:
    def test_parse_matches_serial(self) -> None:
        expected = [parse(m) for m in MESSAGES]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(parse, MESSAGES))

        assert results == expected

    def test_render_html_matches_serial(self) -> None:
        expected = [render_html(m) for m in MESSAGES]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(render_html, MESSAGES))

        assert results == expected

    def test_shared_formatter(self) -> None:
        fmt = MessageFormatter(context=RenderContext(get_peer_name=lambda _: "peer"))
        expected = [fmt(m) for m in MESSAGES]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(fmt, MESSAGES))

        assert results == expected
        assert all(">peer</span>" in html for html in results)

    def test_shared_builder(self) -> None:
        builder = HtmlBuilder()
        node_lists = [render_tokens(parse(m).tokens) for m in MESSAGES]
        expected = [builder.build(nodes) for nodes in node_lists]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(builder.build, node_lists))

        assert results == expected
