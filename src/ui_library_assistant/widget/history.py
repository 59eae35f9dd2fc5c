"""Chat transcript persisted to a JSON file."""

import json
from collections.abc import Sequence
from pathlib import Path

import structlog
from langchain_core.chat_history import BaseChatMessageHistory
from langchain_core.messages import (
    AIMessage,
    BaseMessage,
    HumanMessage,
    messages_from_dict,
    messages_to_dict,
)

from ui_library_assistant.responses.models import Block

logger = structlog.get_logger()


def assistant_message(blocks: Sequence[Block]) -> AIMessage:
    """Build the transcript entry for an assistant turn.

    ``content`` holds the concatenated raw text; the parsed blocks travel in
    ``additional_kwargs`` so the transcript can be redrawn without reparsing.
    """
    return AIMessage(
        content="".join(b.raw for b in blocks),
        additional_kwargs={"blocks": [b.to_dict() for b in blocks]},
    )


def message_blocks(message: BaseMessage) -> list[Block]:
    """Blocks stored on an assistant message (empty for user messages)."""
    return [Block.from_dict(b) for b in message.additional_kwargs.get("blocks", [])]


class JsonFileChatHistory(BaseChatMessageHistory):
    """Chat history that mirrors every change to a JSON file.

    Read and write failures are logged and swallowed: the conversation keeps
    going in memory. An empty path disables persistence.
    """

    def __init__(self, path: str = "") -> None:
        self._path = Path(path) if path else None
        self._messages: list[BaseMessage] = self.load()

    @property
    def messages(self) -> list[BaseMessage]:
        return self._messages

    def load(self) -> list[BaseMessage]:
        """Read the stored transcript. Returns [] if missing or unreadable."""
        if self._path is None or not self._path.exists():
            return []
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            messages = messages_from_dict(raw)
        except Exception as e:
            logger.warning("history_load_failed", path=str(self._path), error=str(e))
            return []
        logger.debug("history_loaded", path=str(self._path), message_count=len(messages))
        return messages

    def save(self, messages: Sequence[BaseMessage] | None = None) -> None:
        """Write the transcript (the current one by default)."""
        if messages is not None:
            self._messages = list(messages)
        if self._path is None:
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps(messages_to_dict(self._messages), ensure_ascii=False)
            self._path.write_text(payload, encoding="utf-8")
        except Exception as e:
            logger.warning("history_save_failed", path=str(self._path), error=str(e))

    def add_message(self, message: BaseMessage) -> None:
        self._messages.append(message)
        self.save()

    def add_exchange(self, question: str, blocks: Sequence[Block]) -> None:
        """Store a user question and the assistant blocks answering it."""
        self._messages.append(HumanMessage(content=question))
        self._messages.append(assistant_message(blocks))
        self.save()

    def clear(self) -> None:
        self._messages = []
        if self._path is None:
            return
        try:
            self._path.unlink(missing_ok=True)
        except Exception as e:
            logger.warning("history_clear_failed", path=str(self._path), error=str(e))
