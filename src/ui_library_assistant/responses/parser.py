"""Incremental parser for streamed responses.

Reconstructs markdown and JSON blocks from text delivered as arbitrarily cut
chunks. The parser keeps no state: the caller passes back the buffer returned
by the previous call together with the next chunk, and finally calls with an
empty chunk to flush.
"""

import json

import structlog

from ui_library_assistant.responses.models import Block

logger = structlog.get_logger()


def find_closing_brace(text: str, start: int) -> int:
    """Return the index of the brace closing ``text[start]``, or -1.

    Tracks nesting depth and string literals: braces inside a string are not
    counted, and a quote preceded by an unescaped backslash does not end the
    string.
    """
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _decode_directive(span: str) -> dict | None:
    try:
        value = json.loads(span)
    except (ValueError, RecursionError):
        return None
    if isinstance(value, dict) and "type" in value:
        return value
    return None


class _BlockCollector:
    """Accumulates blocks for one call, folding whitespace-only gaps."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self._pending = ""

    def gap(self, text: str) -> None:
        if not text:
            return
        trimmed = text.strip()
        if trimmed:
            self.blocks.append(Block(type="markdown", content=trimmed, raw=self._take() + text))
        elif self.blocks:
            last = self.blocks[-1]
            self.blocks[-1] = Block(type=last.type, content=last.content, raw=last.raw + text)
        else:
            self._pending += text

    def span(self, text: str) -> None:
        directive = _decode_directive(text)
        raw = self._take() + text
        if directive is not None:
            self.blocks.append(Block(type="json", content=directive, raw=raw))
        else:
            self.blocks.append(Block(type="markdown", content=text, raw=raw))

    def leftover(self) -> str:
        return self._take()

    def _take(self) -> str:
        pending, self._pending = self._pending, ""
        return pending


def parse_stream_chunk(chunk: str, buffer: str = "") -> tuple[list[Block], str]:
    """Parse newly arrived text together with the carried-over buffer.

    Args:
        chunk: Newly arrived text. Empty string forces a final flush.
        buffer: The buffer returned by the previous call ("" on the first).

    Returns:
        Completed blocks in order, and the buffer to pass to the next call.
        Joining every block's ``raw`` with the returned buffer reproduces
        ``buffer + chunk`` exactly.
    """
    text = (buffer or "") + (chunk or "")
    collector = _BlockCollector()
    pos = 0
    carry = ""

    while True:
        start = text.find("{", pos)
        if start == -1:
            collector.gap(text[pos:])
            break
        end = find_closing_brace(text, start)
        collector.gap(text[pos:start])
        if end == -1:
            carry = text[start:]
            break
        collector.span(text[start:end + 1])
        pos = end + 1

    new_buffer = collector.leftover() + carry
    if collector.blocks or new_buffer:
        logger.debug(
            "stream_chunk_parsed",
            block_count=len(collector.blocks),
            json_blocks=sum(1 for b in collector.blocks if b.is_json),
            buffer_length=len(new_buffer),
        )
    return collector.blocks, new_buffer


def finalize_buffer(buffer: str) -> list[Block]:
    """Degrade a buffer left over at end of stream into markdown.

    A brace that never closed is prose, not a directive. A whitespace-only
    buffer produces no block.
    """
    trimmed = buffer.strip()
    if not trimmed:
        return []
    return [Block(type="markdown", content=trimmed, raw=buffer)]


def parse_response(text: str) -> list[Block]:
    """Parse a complete response in one pass, including the final flush."""
    blocks, buffer = parse_stream_chunk(text, "")
    blocks.extend(finalize_buffer(buffer))
    return blocks
