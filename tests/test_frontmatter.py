"""Tests for frontmatter parsing and re-serialisation."""

import pytest

from stack_guides.core.frontmatter import (
    parse_frontmatter,
    parse_header_block,
    serialize_frontmatter,
)


class TestParseFrontmatter:
    """Splitting a document into header mapping and body."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "# Just a heading\n\nBody.",
            "  ---\nkey: value\n---\n",
            "Intro\n---\nkey: value\n---\n",
        ],
    )
    def test_no_delimiter_returns_input_as_body(self, text):
        assert parse_frontmatter(text) == ({}, text)

    def test_unclosed_header_degrades_to_body(self):
        text = "---\ndescription: oops\n# Heading\n"
        assert parse_frontmatter(text) == ({}, text)

    def test_scalars_booleans_and_lists(self):
        text = (
            "---\n"
            "description: Error handling\n"
            "globs:\n"
            "  - \"src/**/*.ts\"\n"
            "  - 'tests/**/*.ts'\n"
            "  - plain/**\n"
            "alwaysApply: true\n"
            "draft: false\n"
            "---\n"
            "\n\n"
            "# Body\n"
        )
        fm, body = parse_frontmatter(text)
        assert fm == {
            "description": "Error handling",
            "globs": ["src/**/*.ts", "tests/**/*.ts", "plain/**"],
            "alwaysApply": True,
            "draft": False,
        }
        assert body == "# Body\n"

    def test_body_keeps_indentation_of_first_line(self):
        fm, body = parse_frontmatter("---\na: b\n---\n\n    code\n")
        assert fm == {"a": "b"}
        assert body == "    code\n"

    def test_empty_header(self):
        assert parse_frontmatter("---\n---\nbody") == ({}, "body")

    def test_crlf_line_endings(self):
        fm, body = parse_frontmatter("---\r\nkey: value\r\n---\r\nbody\r\n")
        assert fm == {"key": "value"}
        assert body == "body\r\n"

    def test_closing_marker_must_be_alone_on_its_line(self):
        text = "---\ntitle: x\n--- not closing\n---\nbody"
        fm, body = parse_frontmatter(text)
        assert fm == {"title": "x"}
        assert body == "body"

    def test_value_with_colons_kept_whole(self):
        fm, _ = parse_frontmatter("---\nurl: https://example.com:8080/a\n---\n")
        assert fm == {"url": "https://example.com:8080/a"}


class TestHeaderBlockStateMachine:
    """Line-level tolerance of the header decoder."""

    def test_list_item_without_open_key_is_ignored(self):
        assert parse_header_block("- orphan\nkey: value") == {"key": "value"}

    def test_scalar_line_closes_list(self):
        fm = parse_header_block("globs:\n  - a\nname: x\n  - b")
        assert fm == {"globs": ["a"], "name": "x"}

    def test_garbage_line_closes_list_and_is_ignored(self):
        fm = parse_header_block("globs:\n  - a\nnot a key line\n  - b")
        assert fm == {"globs": ["a"]}

    def test_blank_lines_do_not_close_list(self):
        fm = parse_header_block("globs:\n  - a\n\n  - b")
        assert fm == {"globs": ["a", "b"]}

    def test_open_key_without_items_is_empty_list(self):
        assert parse_header_block("globs:") == {"globs": []}

    def test_quoted_literals_stay_strings(self):
        fm = parse_header_block("a: \"true\"\nb: 'false'\nc: true")
        assert fm == {"a": "true", "b": "false", "c": True}

    def test_mismatched_quotes_are_kept(self):
        assert parse_header_block("a: \"half'") == {"a": "\"half'"}

    def test_unknown_keys_preserved_verbatim(self):
        fm = parse_header_block("x-custom_Key: Some Value")
        assert fm == {"x-custom_Key": "Some Value"}

    def test_later_key_overrides_earlier(self):
        assert parse_header_block("a: 1\na: 2") == {"a": "2"}


class TestSerializeFrontmatter:
    """Serialise → parse reproduces equivalent headers and the same body."""

    @pytest.mark.parametrize(
        "frontmatter",
        [
            {},
            {"description": "Plain text"},
            {"alwaysApply": True, "draft": False},
            {"globs": ["b/**", "a/**", "c/*.py"]},
            {"globs": []},
            {"literal": "true", "spaced": "  padded  ", "empty": ""},
            {"quoted": '"already quoted"', "items": ["'x'", ""]},
        ],
    )
    def test_round_trip(self, frontmatter):
        body = "# Title\n\nSome text.\n"
        fm, parsed_body = parse_frontmatter(serialize_frontmatter(frontmatter, body))
        assert fm == frontmatter
        assert parsed_body == body

    def test_list_order_preserved(self):
        text = serialize_frontmatter({"globs": ["z", "a", "m"]})
        fm, _ = parse_frontmatter(text)
        assert fm["globs"] == ["z", "a", "m"]

    def test_layout(self):
        text = serialize_frontmatter({"globs": ["*.py"], "alwaysApply": False}, "body")
        assert text == "---\nglobs:\n  - *.py\nalwaysApply: false\n---\n\nbody"
