"""Tests for token rendering and the HTML builder."""

from charla import (
    Activation,
    ClassNames,
    HtmlBuilder,
    NodeRole,
    RenderContext,
    parse,
    render_html,
    render_tokens,
)

HEX64 = "0123456789abcdef" * 4
DEFAULTS = ClassNames()


def render(source: str, context: RenderContext | None = None) -> tuple:
    return render_tokens(parse(source).tokens, context)


class TestTextNodes:
    """Plain text is escaped and stripped of control characters."""

    def test_escaped(self) -> None:
        (node,) = render("a <b> & 'c'")

        assert node.role is NodeRole.TEXT
        assert node.text == "a &lt;b&gt; &amp; &#x27;c&#x27;"
        assert node.interactive is False

    def test_control_characters_removed(self) -> None:
        (node,) = render("a\x00b\x1b")

        assert node.text == "ab"

    def test_html_without_class_is_bare(self) -> None:
        assert render_html("a <b>") == "a &lt;b&gt;"

    def test_text_class_wraps_span(self) -> None:
        ctx = RenderContext(class_names={"text": "msg"})

        assert render_html("hi", context=ctx) == '<span class="msg">hi</span>'


class TestLinkNodes:
    """Safe URLs become links; activation opens externally or calls back."""

    def test_link(self) -> None:
        (node,) = render("https://example.com/path")

        assert node.role is NodeRole.LINK
        assert node.href == "https://example.com/path"
        assert node.text == "https:&#x2F;&#x2F;example.com&#x2F;path"
        assert node.title == node.text
        assert node.class_name == DEFAULTS.url
        assert node.preview is False
        assert node.activate() is Activation.OPEN_EXTERNAL

    def test_bare_www_href(self) -> None:
        (node,) = render("www.example.com")

        assert node.href == "https://www.example.com/"
        assert node.text == "www.example.com"

    def test_long_url_truncated(self) -> None:
        url = "https://example.com/" + "a" * 60
        (node,) = render(url)

        assert node.text.endswith("...")
        assert node.href == url

    def test_url_callback(self) -> None:
        clicked: list[str] = []
        (node,) = render("https://example.com", RenderContext(on_url_click=clicked.append))

        assert node.activate() is Activation.HANDLED
        assert clicked == ["https://example.com/"]

    def test_preview_flag(self) -> None:
        ctx = RenderContext(show_link_previews=True)
        (node,) = render("https://example.com", ctx)

        assert node.preview is True
        assert 'data-preview="true"' in render_html("https://example.com", context=ctx)

    def test_html(self) -> None:
        html = render_html("https://example.com")

        assert html.startswith('<a href="https://example.com/" target="_blank"')
        assert 'rel="noopener noreferrer"' in html
        assert f'class="{DEFAULTS.url}"' in html
        assert html.endswith(">https:&#x2F;&#x2F;example.com</a>")


class TestMentionNodes:
    """Mentions show a peer name or an abbreviated key."""

    def test_abbreviated_key(self) -> None:
        (node,) = render("@" + HEX64)

        assert node.role is NodeRole.MENTION
        assert node.text == "@01234567..."
        assert node.title == HEX64
        assert node.get_data("pubkey") == HEX64

    def test_peer_name(self) -> None:
        ctx = RenderContext(get_peer_name={HEX64: "alice"}.get)
        (node,) = render("@" + HEX64, ctx)

        assert node.text == "alice"

    def test_peer_name_escaped(self) -> None:
        ctx = RenderContext(get_peer_name=lambda _: "<img src=x>")
        (node,) = render("@" + HEX64, ctx)

        assert node.text == "&lt;img src&#x3D;x&gt;"

    def test_click(self) -> None:
        clicked: list[str] = []
        (node,) = render("@" + HEX64, RenderContext(on_mention_click=clicked.append))

        assert node.activate() is Activation.HANDLED
        assert clicked == [HEX64]

    def test_no_callback_is_inert(self) -> None:
        (node,) = render("@" + HEX64)

        assert node.interactive is False
        assert node.activate() is Activation.NONE

    def test_html(self) -> None:
        html = render_html("@" + HEX64)

        assert html == (
            f'<span class="{DEFAULTS.mention}" title="{HEX64}" '
            f'data-pubkey="{HEX64}">@01234567...</span>'
        )


class TestHashtagNodes:
    def test_hashtag(self) -> None:
        clicked: list[str] = []
        (node,) = render("#nostr", RenderContext(on_hashtag_click=clicked.append))

        assert node.text == "#nostr"
        assert node.get_data("hashtag") == "nostr"
        node.activate()
        assert clicked == ["nostr"]

    def test_html(self) -> None:
        assert render_html("#nostr") == (
            f'<span class="{DEFAULTS.hashtag}" data-hashtag="nostr">#nostr</span>'
        )


class TestNostrEntityNodes:
    """Bare entities are abbreviated by kind."""

    def test_npub(self) -> None:
        npub = "npub1" + "a" * 54 + "wxyz"
        (node,) = render(npub)

        assert node.role is NodeRole.NOSTR_ENTITY
        assert node.text == "npub1aaa...wxyz"
        assert node.get_data("npub") == npub

    def test_npub_peer_name(self) -> None:
        npub = "npub1" + "a" * 58
        (node,) = render(npub, RenderContext(get_peer_name=lambda _: "bob"))

        assert node.text == "bob"

    def test_note(self) -> None:
        (node,) = render("note1" + "b" * 54 + "1234")

        assert node.text == "note1bbb...1234"

    def test_nevent(self) -> None:
        (node,) = render("nevent1qqsxyz0123456789")

        assert node.text == "nevent1qqsxy..."

    def test_click_receives_kind_and_value(self) -> None:
        clicked: list[tuple[str, str]] = []
        ctx = RenderContext(on_nostr_entity_click=lambda kind, value: clicked.append((kind, value)))
        (node,) = render("naddr1qq9xyz", ctx)

        assert node.activate() is Activation.HANDLED
        assert clicked == [("naddr", "naddr1qq9xyz")]


class TestEmojiNodes:
    def test_emoji(self) -> None:
        (node,) = render(":fire:")

        assert node.role is NodeRole.EMOJI
        assert node.text == "\U0001F525"
        assert node.title == ":fire:"
        assert node.label == "fire"

    def test_html(self) -> None:
        assert render_html(":fire:") == (
            '<span class="inline" title=":fire:" role="img" aria-label="fire">\U0001F525</span>'
        )


class TestCodeNodes:
    """Code blocks get a header and numbered lines; inline code is escaped."""

    SOURCE = "```python\nx = 1\nprint(x)\n```"

    def test_block_structure(self) -> None:
        (node,) = render(self.SOURCE)

        assert node.role is NodeRole.CODE_BLOCK
        header, body = node.children
        assert header.role is NodeRole.CODE_HEADER
        assert header.text == "python"
        assert header.copy_text == "x = 1\nprint(x)"
        assert body.role is NodeRole.CODE_BODY
        assert [line.text for line in body.children] == ["x &#x3D; 1", "print(x)"]
        assert [line.get_data("line") for line in body.children] == ["1", "2"]
        assert node.get_data("language") == "python"

    def test_header_without_language(self) -> None:
        (node,) = render("```\nls\n```")

        assert node.children[0].text == "code"
        assert node.data == ()

    def test_block_html(self) -> None:
        html = render_html(self.SOURCE)

        assert html.startswith(f'<div class="{DEFAULTS.code_block}" data-language="python">')
        assert "<span>python</span>" in html
        assert 'title="Copy code" data-code="x = 1\nprint(x)">copy</button>' in html
        assert (
            f'<div class="flex" data-line="1"><span class="{DEFAULTS.code_line_number}">1</span>'
            '<span class="flex-1">x &#x3D; 1</span></div>'
        ) in html
        assert html.endswith("</div></div>")

    def test_copy_button_class(self) -> None:
        html = HtmlBuilder(copy_button_class="btn").build(render(self.SOURCE))

        assert '<button type="button" class="btn" title="Copy code"' in html

    def test_copy_button_carries_escaped_code(self) -> None:
        html = render_html('```html\n<a href="x">&</a>\n```')

        assert 'data-code="&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;">copy</button>' in html

    def test_inline_code(self) -> None:
        (node,) = render("`<b>`")

        assert node.role is NodeRole.INLINE_CODE
        assert node.text == "&lt;b&gt;"
        assert render_html("`<b>`") == f'<code class="{DEFAULTS.inline_code}">&lt;b&gt;</code>'


class TestLineBreaks:
    def test_br(self) -> None:
        assert render_html("a\nb") == "a<br>b"

    def test_shared_node(self) -> None:
        nodes = render("\n\n")

        assert nodes[0] is nodes[1]
        assert nodes[0].role is NodeRole.LINE_BREAK


class TestClassNameOverrides:
    def test_override_applies_to_nodes(self) -> None:
        ctx = RenderContext(class_names={"hashtag": "tag", "emoji": "e"})
        nodes = render("#a :fire:", ctx)

        assert nodes[0].class_name == "tag"
        assert nodes[2].class_name == "e"
