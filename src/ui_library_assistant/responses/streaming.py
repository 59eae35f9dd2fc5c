"""Mock streaming client that replays classified responses chunk by chunk."""

from __future__ import annotations

import asyncio
import re
from collections.abc import AsyncGenerator

import structlog

from ui_library_assistant.config import Settings
from ui_library_assistant.responses.classifier import classify
from ui_library_assistant.responses.models import StreamChunk

logger = structlog.get_logger()

_PARAGRAPH_BREAK = re.compile(r"(\r?\n\r?\n)")


def split_chunks(text: str) -> list[str]:
    """Split text into paragraph chunks that concatenate back to ``text``.

    Each chunk is a paragraph followed by the blank line that ended it, so a
    JSON directive usually arrives as a single chunk.
    """
    if not text:
        return []
    parts = _PARAGRAPH_BREAK.split(text)
    chunks = ["".join(parts[i:i + 2]) for i in range(0, len(parts), 2)]
    return [c for c in chunks if c]


class MockStreamingClient:
    """Stand-in for the assistant backend.

    Classifies the query locally and streams the response text with fixed
    delays to simulate network streaming.
    """

    def __init__(self, settings: Settings) -> None:
        self._initial_delay = settings.stream_initial_delay
        self._chunk_delay = settings.stream_chunk_delay

    async def query_stream(self, user_message: str) -> AsyncGenerator[StreamChunk, None]:
        """Stream the response to ``user_message`` as text chunks.

        The last item is always an empty chunk with ``is_final=True``; the
        caller uses it to flush the parser buffer.
        """
        logger.info("mock_stream_start", message_length=len(user_message or ""))

        if self._initial_delay > 0:
            await asyncio.sleep(self._initial_delay)

        response = classify(user_message)
        chunks = split_chunks(response.text)

        for index, text in enumerate(chunks):
            if index and self._chunk_delay > 0:
                await asyncio.sleep(self._chunk_delay)
            logger.debug("mock_chunk_emit", chunk_number=index, text_length=len(text))
            yield StreamChunk(text=text, index=index)

        yield StreamChunk(text="", index=len(chunks), is_final=True)

        logger.info(
            "mock_stream_complete",
            total_chunks=len(chunks),
            text_length=len(response.text),
        )
