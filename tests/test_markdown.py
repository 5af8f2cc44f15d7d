"""Tests for the guide markdown renderer."""

import pytest

from stack_guides.core.markdown import (
    CodeBlock,
    Heading,
    ListBlock,
    Paragraph,
    Quote,
    RawHtml,
    Rule,
    parse_blocks,
    render_inline,
    render_markdown,
)


class TestBlocks:
    """Block-level structure."""

    def test_heading_then_paragraph_with_emphasis(self):
        html = render_markdown("# Title\n\nSome **bold** and *italic* text.")
        assert html == (
            "<h1>Title</h1>\n"
            "<p>Some <strong>bold</strong> and <em>italic</em> text.</p>"
        )

    @pytest.mark.parametrize("level", range(1, 7))
    def test_heading_levels(self, level):
        html = render_markdown("#" * level + " Heading")
        assert html == f"<h{level}>Heading</h{level}>"

    def test_seven_hashes_is_not_a_heading(self):
        assert render_markdown("####### nope") == "<p>####### nope</p>"

    def test_hash_without_space_is_not_a_heading(self):
        assert render_markdown("#hashtag") == "<p>#hashtag</p>"

    @pytest.mark.parametrize("line", ["---", "***"])
    def test_horizontal_rules(self, line):
        assert render_markdown(f"above\n\n{line}\n\nbelow") == (
            "<p>above</p>\n<hr>\n<p>below</p>"
        )

    def test_quotes_are_line_by_line(self):
        html = render_markdown("> one\n> two")
        assert html == "<blockquote>one</blockquote>\n<blockquote>two</blockquote>"

    def test_unordered_list(self):
        html = render_markdown("- a\n* b\n+ c")
        assert html == "<ul>\n<li>a</li>\n<li>b</li>\n<li>c</li>\n</ul>"

    def test_ordered_list(self):
        html = render_markdown("1. first\n2. second")
        assert html == "<ol>\n<li>first</li>\n<li>second</li>\n</ol>"

    def test_list_kind_follows_first_item(self):
        blocks = parse_blocks("1. first\n- second")
        assert blocks == [ListBlock(True, ("first", "second"))]

    def test_blank_line_splits_lists(self):
        blocks = parse_blocks("- a\n\n1. b")
        assert blocks == [ListBlock(False, ("a",)), ListBlock(True, ("b",))]

    def test_paragraph_lines_joined_with_br(self):
        assert render_markdown("line one\nline two") == "<p>line one<br>line two</p>"

    def test_list_interrupts_paragraph(self):
        blocks = parse_blocks("Intro:\n- a\n- b\nAfter")
        assert blocks == [
            Paragraph(("Intro:",)),
            ListBlock(False, ("a", "b")),
            Paragraph(("After",)),
        ]

    def test_block_order(self):
        text = "# H\n> q\n---\n```\nx\n```\ntext"
        assert [type(b) for b in parse_blocks(text)] == [
            Heading, Quote, Rule, CodeBlock, Paragraph,
        ]

    def test_empty_input(self):
        assert render_markdown("") == ""
        assert render_markdown(None) == ""
        assert render_markdown("\n\n   \n") == ""


class TestCodeBlocks:
    """Fenced code is escaped and never formatted."""

    def test_script_tag_is_escaped(self):
        html = render_markdown("```html\n<script>alert('x')</script>\n```")
        assert html == "<pre><code>&lt;script&gt;alert('x')&lt;/script&gt;\n</code></pre>"
        assert "<script>" not in html

    def test_ampersand_escaped(self):
        assert "a &amp;&amp; b" in render_markdown("```\na && b\n```")

    def test_markdown_inside_fence_is_literal(self):
        html = render_markdown("```\n# not a heading\n**not bold**\n- not a list\n```")
        assert html == (
            "<pre><code># not a heading\n**not bold**\n- not a list\n</code></pre>"
        )

    def test_language_is_recorded(self):
        assert parse_blocks("```python\npass\n```") == [CodeBlock("pass\n", "python")]

    def test_blank_lines_inside_fence_kept(self):
        html = render_markdown("```\na\n\nb\n```")
        assert html == "<pre><code>a\n\nb\n</code></pre>"

    def test_unclosed_fence_is_text(self):
        html = render_markdown("```\nstill text")
        assert html == "<p>```<br>still text</p>"


class TestInline:
    """Inline formatting inside text-bearing blocks."""

    def test_triple_emphasis(self):
        assert render_inline("***both***") == "<strong><em>both</em></strong>"

    def test_underscore_spellings(self):
        assert render_inline("__bold__ and _it_") == "<strong>bold</strong> and <em>it</em>"

    def test_bold_contains_italic(self):
        assert render_inline("**a *b* c**") == "<strong>a <em>b</em> c</strong>"

    def test_snake_case_is_not_emphasis(self):
        assert render_inline("use snake_case_names") == "use snake_case_names"

    def test_spaced_asterisks_are_not_emphasis(self):
        assert render_inline("2 * 3 * 4") == "2 * 3 * 4"

    def test_code_span_protects_markers(self):
        assert render_inline("`**kwargs` and **bold**") == (
            "<code>**kwargs</code> and <strong>bold</strong>"
        )

    def test_link(self):
        assert render_inline("[docs](https://example.com/a_b_c)") == (
            '<a href="https://example.com/a_b_c" target="_blank" '
            'rel="noopener noreferrer">docs</a>'
        )

    def test_link_label_emphasis(self):
        html = render_inline("[**docs**](/x)")
        assert ">" + "<strong>docs</strong></a>" in html

    def test_image(self):
        assert render_inline("![logo](img/logo.png)") == '<img src="img/logo.png" alt="logo">'

    def test_linked_image(self):
        assert render_inline("[![badge](ci.svg)](https://ci.example)") == (
            '<a href="https://ci.example" target="_blank" rel="noopener noreferrer">'
            '<img src="ci.svg" alt="badge"></a>'
        )

    def test_image_with_empty_alt(self):
        assert render_inline("![](a.png)") == '<img src="a.png" alt="">'

    def test_empty_link_label_left_alone(self):
        assert render_inline("[](x)") == "[](x)"

    def test_nul_bytes_are_dropped(self):
        assert render_inline("a\x000\x00b") == "a0b"


class TestParagraphCleanup:
    """Paragraph wrapping rules."""

    def test_lone_image_is_unwrapped(self):
        assert render_markdown("![alt](a.png)") == '<img src="a.png" alt="alt">'

    def test_bold_only_paragraph_stays_wrapped(self):
        assert render_markdown("**Note**") == "<p><strong>Note</strong></p>"

    def test_block_markup_passes_through(self):
        assert render_markdown("<div>raw</div>") == "<div>raw</div>"
        assert parse_blocks("<div>raw</div>") == [RawHtml("<div>raw</div>")]

    def test_inline_markup_passes_through_unescaped(self):
        assert render_markdown("a <b>tag</b>") == "<p>a <b>tag</b></p>"


class TestEscapeMode:
    """escape_html=True escapes all text and re-opens known constructs."""

    def test_text_is_escaped(self):
        html = render_markdown("a <b>tag</b> & **bold**", escape_html=True)
        assert html == "<p>a &lt;b&gt;tag&lt;/b&gt; &amp; <strong>bold</strong></p>"

    def test_block_markup_is_escaped(self):
        assert render_markdown("<div>x</div>", escape_html=True) == (
            "<p>&lt;div&gt;x&lt;/div&gt;</p>"
        )

    def test_attribute_quotes_escaped(self):
        html = render_markdown('[x](/a"b)', escape_html=True)
        assert 'href="/a&quot;b"' in html


class TestDeterminism:
    """Pure, repeatable, idempotent on resolved output."""

    SAMPLE = "# T\n\nText with `code` and [link](/x).\n\n- a\n- b\n\n```\n<x>\n```"

    def test_repeatable(self):
        assert render_markdown(self.SAMPLE) == render_markdown(self.SAMPLE)

    def test_plain_paragraph_rerender_is_stable(self):
        once = render_markdown("Just plain text.")
        assert render_markdown(once) == once

    def test_full_output_rerender_is_stable(self):
        once = render_markdown("# T\n\nplain\n\n---")
        assert render_markdown(once) == once

    @pytest.mark.parametrize(
        "text",
        ["*", "**", "***", "_", "`", "[", "![", "](", "> ", "1.", "```", "\x00", "\r\n\r\n"],
    )
    def test_never_raises(self, text):
        assert isinstance(render_markdown(text), str)
