"""Data models for classified responses and parsed stream blocks."""

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class ClassifiedResponse(BaseModel):
    """Full response text for one query, prose with inline JSON directives."""

    model_config = ConfigDict(frozen=True)

    text: str


@dataclass(frozen=True, slots=True)
class Block:
    """A completed span of response text.

    ``content`` is the trimmed prose for markdown blocks and the decoded
    object for json blocks. ``raw`` is always the exact source substring.
    """

    type: Literal["markdown", "json"]
    content: Any
    raw: str

    @property
    def is_json(self) -> bool:
        return self.type == "json"

    def to_dict(self) -> dict:
        return {"type": self.type, "content": self.content, "raw": self.raw}

    @classmethod
    def from_dict(cls, data: dict) -> "Block":
        return cls(type=data["type"], content=data["content"], raw=data["raw"])


@dataclass(slots=True)
class StreamChunk:
    """A single chunk delivered by the streaming driver."""

    text: str
    index: int = 0
    is_final: bool = False
