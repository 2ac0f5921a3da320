"""Untrusted message pipeline: parse, render, build for HTML and terminal.

Shows what happens to hostile input: markup is escaped, smuggled
``javascript:`` links become flagged text, control characters are dropped.

Run::

    python examples/safety/untrusted_message.py

"""

from charla import PlainTextBuilder, RenderContext, parse, render_html, render_tokens

raw = (
    "<img src=x onerror=alert(1)> check https://example.com/?next=javascript:alert(1)\n"
    "and https://example.com/docs\x07 #security :lock:"
)

print("=== HTML ===")
print(render_html(raw))
print()

ctx = RenderContext(class_names={"unsafe_url": "blocked"})
nodes = render_tokens(parse(raw).tokens, ctx)

print("=== Terminal ===")
print(PlainTextBuilder(show_hrefs=True).build(nodes))
print()

flagged = [node for node in nodes if node.class_name == "blocked"]
print(f"Flagged links: {len(flagged)}")
