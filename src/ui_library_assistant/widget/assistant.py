"""Chat assistant that owns turn-taking and the transcript."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import structlog
from langchain_core.messages import BaseMessage, HumanMessage

from ui_library_assistant.config import Settings
from ui_library_assistant.responses.models import Block
from ui_library_assistant.responses.parser import finalize_buffer, parse_stream_chunk
from ui_library_assistant.responses.streaming import MockStreamingClient
from ui_library_assistant.widget.history import JsonFileChatHistory, assistant_message

logger = structlog.get_logger()


class InvalidQueryError(ValueError):
    """User input is empty or exceeds the character limit."""


class Assistant:
    """Runs one conversation: sends queries, streams and parses replies.

    One turn is current at a time. A turn abandoned or superseded mid-stream
    keeps the blocks it already yielded but records no assistant message.
    """

    def __init__(
        self,
        settings: Settings,
        client: MockStreamingClient | None = None,
        history: JsonFileChatHistory | None = None,
    ) -> None:
        self._max_query_length = settings.max_query_length
        self._client = client or MockStreamingClient(settings)
        self._history = history if history is not None else JsonFileChatHistory(settings.history_path)
        self._turn = 0
        self._streaming = False

    @property
    def messages(self) -> list[BaseMessage]:
        return self._history.messages

    @property
    def is_streaming(self) -> bool:
        return self._streaming

    def validate(self, user_message: str) -> str:
        """Return the trimmed query, or raise InvalidQueryError."""
        text = (user_message or "").strip()
        if not text:
            raise InvalidQueryError("Message is empty")
        if len(text) > self._max_query_length:
            raise InvalidQueryError(
                f"Message exceeds {self._max_query_length} characters"
            )
        return text

    async def send(self, user_message: str) -> AsyncGenerator[Block, None]:
        """Send a query and yield response blocks as they complete.

        Starting a turn supersedes any turn still in progress: the older
        stream ends the next time it is resumed and records no reply.
        """
        text = self.validate(user_message)

        self._turn += 1
        turn = self._turn
        self._streaming = True
        self._history.add_message(HumanMessage(content=text))
        logger.info("turn_start", turn=turn, message_length=len(text))

        blocks: list[Block] = []
        buffer = ""
        completed = False
        try:
            async for chunk in self._client.query_stream(text):
                if turn != self._turn:
                    break
                new_blocks, buffer = parse_stream_chunk(chunk.text, buffer)
                if chunk.is_final:
                    new_blocks.extend(finalize_buffer(buffer))
                    buffer = ""
                for block in new_blocks:
                    if turn != self._turn:
                        break
                    blocks.append(block)
                    yield block
                if turn != self._turn:
                    break
            else:
                completed = turn == self._turn
        finally:
            current = turn == self._turn
            if current:
                self._streaming = False
            if completed:
                self._history.add_message(assistant_message(blocks))
                logger.info(
                    "turn_complete",
                    turn=turn,
                    block_count=len(blocks),
                    json_blocks=sum(1 for b in blocks if b.is_json),
                )
            else:
                logger.info(
                    "turn_abandoned",
                    turn=turn,
                    block_count=len(blocks),
                    superseded=not current,
                )

    async def ask(self, user_message: str) -> list[Block]:
        """Send a query and collect the whole response."""
        return [block async for block in self.send(user_message)]

    def clear(self) -> None:
        self._history.clear()
        logger.info("history_cleared")
