"""Parse and render a chat message with the default options."""

from charla import parse, render_html

result = parse("gm #nostr :coffee: see https://example.com")
print(result.hashtags, result.urls)
print(render_html("gm #nostr :coffee: see https://example.com"))
