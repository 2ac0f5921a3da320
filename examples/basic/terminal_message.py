"""Render a chat message for a terminal, peer names included."""

from charla import MessageFormatter, PlainTextBuilder, RenderContext

peers = {"ab" * 32: "alice"}

fmt = MessageFormatter(
    context=RenderContext(get_peer_name=peers.get),
    builder=PlainTextBuilder(show_hrefs=True),
)
print(fmt("@" + "ab" * 32 + " see https://example.com\n```sh\nls -la\n```"))
