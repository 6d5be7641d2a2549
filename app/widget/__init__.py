"""Client-side chat widget: persisted conversation, rendering, and transport."""

from .render import markdown_to_html
from .storage import FileStorage, LocalStorage, MemoryStorage, StorageError
from .store import ConversationStore
from .widget import ChatWidget, HttpChatTransport, MessageView

__all__ = [
    "ChatWidget",
    "ConversationStore",
    "FileStorage",
    "HttpChatTransport",
    "LocalStorage",
    "MemoryStorage",
    "MessageView",
    "StorageError",
    "markdown_to_html",
]
