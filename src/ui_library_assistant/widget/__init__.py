"""Chat widget collaborators: turn-taking, history and rendering."""

from ui_library_assistant.widget.assistant import Assistant, InvalidQueryError
from ui_library_assistant.widget.history import JsonFileChatHistory

__all__ = ["Assistant", "InvalidQueryError", "JsonFileChatHistory"]
