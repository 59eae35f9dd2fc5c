"""Tests for the incremental block parser."""

import pytest

from ui_library_assistant.responses.classifier import classify
from ui_library_assistant.responses.models import Block
from ui_library_assistant.responses.parser import (
    finalize_buffer,
    find_closing_brace,
    parse_response,
    parse_stream_chunk,
)


def _feed(chunks):
    """Thread the buffer through successive calls, then flush."""
    blocks = []
    buffer = ""
    for chunk in [*chunks, ""]:
        new_blocks, buffer = parse_stream_chunk(chunk, buffer)
        blocks.extend(new_blocks)
    return blocks, buffer


def _raw(blocks, buffer=""):
    return "".join(b.raw for b in blocks) + buffer


# --- Examples ---

def test_markdown_only():
    blocks, buffer = parse_stream_chunk("Here is some text.")
    assert len(blocks) == 1
    assert blocks[0].type == "markdown"
    assert blocks[0].content == "Here is some text."
    assert buffer == ""


def test_incomplete_json_is_buffered():
    blocks, buffer = parse_stream_chunk('Here is a button:\n\n{\n  "type": "button-group"', "")
    assert len(blocks) == 1
    assert blocks[0].type == "markdown"
    assert blocks[0].content == "Here is a button:"
    assert buffer == '{\n  "type": "button-group"'


def test_buffer_completes_on_next_chunk():
    _, buffer = parse_stream_chunk('Here is a button:\n\n{\n  "type": "button-group"', "")
    blocks, buffer = parse_stream_chunk(',\n  "variants": ["primary"]\n}', buffer)
    assert len(blocks) == 1
    assert blocks[0].type == "json"
    assert blocks[0].content == {"type": "button-group", "variants": ["primary"]}
    assert blocks[0].raw == '{\n  "type": "button-group",\n  "variants": ["primary"]\n}'
    assert buffer == ""


def test_json_without_type_is_markdown():
    blocks, buffer = parse_stream_chunk('Text:\n\n{\n  "not": "a component"\n}', "")
    assert [b.type for b in blocks] == ["markdown", "markdown"]
    assert blocks[1].content == '{\n  "not": "a component"\n}'
    assert buffer == ""


def test_prose_json_prose():
    text = 'Here is a button:\n\n{\n  "type": "button-group",\n  "variants": ["primary"]\n}\n\nThat is all.'
    blocks, buffer = parse_stream_chunk(text)
    assert [b.type for b in blocks] == ["markdown", "json", "markdown"]
    assert blocks[0].content == "Here is a button:"
    assert blocks[2].content == "That is all."
    assert buffer == ""


def test_multiple_json_blocks_in_one_call():
    text = (
        'First:\n\n{"type": "button-group", "variants": ["primary"]}\n\n'
        'Second:\n\n{"type": "list", "items": ["item1"]}'
    )
    blocks, buffer = parse_stream_chunk(text)
    json_blocks = [b for b in blocks if b.is_json]
    assert [b.content["type"] for b in json_blocks] == ["button-group", "list"]
    assert buffer == ""


def test_adjacent_json_blocks_validated_independently():
    blocks, _ = parse_stream_chunk('{"type": "form"}{"no": "type"}{"type": "list"}')
    assert [b.type for b in blocks] == ["json", "markdown", "json"]


def test_nested_structures():
    text = (
        'Complex:\n\n{\n  "type": "chat-examples",\n  "bubbles": [\n'
        '    { "type": "user", "message": "Hello" },\n'
        '    { "type": "assistant", "message": "Hi" }\n  ]\n}'
    )
    blocks, buffer = parse_stream_chunk(text)
    assert len(blocks) == 2
    assert blocks[1].type == "json"
    assert len(blocks[1].content["bubbles"]) == 2
    assert buffer == ""


def test_escaped_quotes():
    text = 'Text:\n\n{\n  "type": "button-group",\n  "text": "Say \\"Hello\\""\n}'
    blocks, buffer = parse_stream_chunk(text)
    assert len(blocks) == 2
    assert blocks[1].content["text"] == 'Say "Hello"'
    assert buffer == ""


def test_braces_inside_strings_ignored():
    text = '{"type": "list", "items": ["a } b", "{ c"]}'
    blocks, buffer = parse_stream_chunk(text)
    assert len(blocks) == 1
    assert blocks[0].content["items"] == ["a } b", "{ c"]
    assert buffer == ""


def test_escaped_backslash_before_quote_closes_string():
    text = '{"type": "list", "path": "C:\\\\"} done'
    blocks, buffer = parse_stream_chunk(text)
    assert [b.type for b in blocks] == ["json", "markdown"]
    assert blocks[0].content["path"] == "C:\\"
    assert buffer == ""


def test_malformed_json_degrades_to_markdown():
    text = 'Text:\n\n{\n  "type": "button-group"\n  "variants": ["primary"]\n}'
    blocks, buffer = parse_stream_chunk(text)
    assert [b.type for b in blocks] == ["markdown", "markdown"]
    assert buffer == ""


def test_non_object_json_is_markdown():
    blocks, _ = parse_stream_chunk("{}")
    assert blocks == [Block(type="markdown", content="{}", raw="{}")]


def test_text_after_incomplete_span_is_not_examined():
    blocks, buffer = parse_stream_chunk('Intro {"type": "form", {"type": "list"} tail')
    assert [b.content for b in blocks] == ["Intro"]
    assert buffer == '{"type": "form", {"type": "list"} tail'


def test_stray_closing_brace_is_prose():
    blocks, buffer = parse_stream_chunk("just } a brace")
    assert blocks[0].content == "just } a brace"
    assert buffer == ""


# --- Flush and idempotence ---

def test_empty_input():
    assert parse_stream_chunk("", "") == ([], "")


def test_repeated_flush_is_idempotent():
    blocks, buffer = parse_stream_chunk("Done.", "")
    assert buffer == ""
    assert parse_stream_chunk("", buffer) == ([], "")
    assert parse_stream_chunk("", "") == ([], "")


def test_flush_keeps_incomplete_span_buffered():
    blocks, buffer = parse_stream_chunk("", '{"type": "list"')
    assert blocks == []
    assert buffer == '{"type": "list"'


def test_none_inputs_treated_as_empty():
    assert parse_stream_chunk(None, None) == ([], "")


# --- Whitespace and losslessness ---

def test_markdown_content_trimmed_raw_exact():
    blocks, _ = parse_stream_chunk("\n\n  Hello  \n\n")
    assert blocks[0].content == "Hello"
    assert blocks[0].raw == "\n\n  Hello  \n\n"


def test_whitespace_after_json_folds_into_json_raw():
    blocks, buffer = parse_stream_chunk('{"type": "form"}\n\n')
    assert len(blocks) == 1
    assert blocks[0].raw == '{"type": "form"}\n\n'
    assert blocks[0].content == {"type": "form"}
    assert buffer == ""


def test_leading_whitespace_folds_into_following_block():
    blocks, buffer = parse_stream_chunk('\n\n{"type": "form"}')
    assert len(blocks) == 1
    assert blocks[0].raw == '\n\n{"type": "form"}'
    assert buffer == ""


def test_whitespace_only_chunk_is_carried():
    blocks, buffer = parse_stream_chunk("\n\n", "")
    assert blocks == []
    assert buffer == "\n\n"
    blocks, buffer = parse_stream_chunk("Next paragraph.", buffer)
    assert blocks[0].content == "Next paragraph."
    assert blocks[0].raw == "\n\nNext paragraph."


@pytest.mark.parametrize(
    "query",
    ["Show me buttons", "show me chat bubbles", "I need a form", "ordered list", ""],
)
def test_lossless_for_every_two_way_cut(query):
    text = classify(query).text
    for cut in range(len(text) + 1):
        blocks, buffer = _feed([text[:cut], text[cut:]])
        assert _raw(blocks, buffer) == text
        assert buffer == ""


@pytest.mark.parametrize("size", [1, 2, 3, 7, 16, 64])
def test_fixed_size_chunks_match_single_pass(size):
    text = classify("show me chat bubbles").text
    chunks = [text[i:i + size] for i in range(0, len(text), size)]
    blocks, buffer = _feed(chunks)
    assert _raw(blocks, buffer) == text
    assert [b.content for b in blocks if b.is_json] == [
        b.content for b in parse_response(text) if b.is_json
    ]


def test_lossless_with_trailing_whitespace_chunk():
    chunks = ['A {"type": "form"}', "\n", "  "]
    blocks, buffer = _feed(chunks)
    assert _raw(blocks, buffer) == "".join(chunks)


# --- Robustness ---

@pytest.mark.parametrize(
    "text",
    [
        "{" * 5000,
        "}" * 5000,
        "{" + "[" * 5000 + "}",
        '{"type": "\u00e9\u4e2d\U0001f600"}',
        '"unterminated { string',
        "\\\\\\{",
    ],
)
def test_never_raises(text):
    blocks, buffer = parse_stream_chunk(text, "")
    assert _raw(blocks, buffer) == text


def test_unicode_content():
    blocks, _ = parse_stream_chunk('Caf\u00e9 {"type": "list", "items": ["\u00fcber"]}')
    assert blocks[0].content == "Caf\u00e9"
    assert blocks[1].content["items"] == ["\u00fcber"]


# --- Helpers ---

def test_find_closing_brace():
    text = 'x {"a": {"b": "}"}} y'
    assert find_closing_brace(text, 2) == text.index("} y")
    assert find_closing_brace("{ unclosed", 0) == -1


def test_finalize_buffer_degrades_to_markdown():
    assert finalize_buffer('{"type": "li') == [
        Block(type="markdown", content='{"type": "li', raw='{"type": "li')
    ]
    assert finalize_buffer("  \n") == []
    assert finalize_buffer("") == []


def test_parse_response_flushes_unclosed_brace():
    blocks = parse_response("Use { to open a block")
    assert [b.content for b in blocks] == ["Use", "{ to open a block"]
