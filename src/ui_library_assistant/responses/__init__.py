"""Mock response generation and incremental parsing."""

from ui_library_assistant.responses.classifier import Intent, classify, detect_intent
from ui_library_assistant.responses.models import Block, ClassifiedResponse, StreamChunk
from ui_library_assistant.responses.parser import (
    finalize_buffer,
    parse_response,
    parse_stream_chunk,
)
from ui_library_assistant.responses.streaming import MockStreamingClient, split_chunks

__all__ = [
    "Block",
    "ClassifiedResponse",
    "Intent",
    "MockStreamingClient",
    "StreamChunk",
    "classify",
    "detect_intent",
    "finalize_buffer",
    "parse_response",
    "parse_stream_chunk",
    "split_chunks",
]
