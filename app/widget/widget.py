"""Send/receive orchestration for the website chat widget."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from .render import markdown_to_html, reveal_frames
from .store import ConversationEntry, ConversationStore

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3000/api/chat"

GREETING = (
    "Hello! I'm your Linkwave assistant. I can answer questions about DAS systems, wireless solutions, "
    "and help you book a consultation with our team. How can I help you today?"
)
FALLBACK_MESSAGE = (
    "I apologize, but I'm having trouble connecting right now. Please contact us directly at "
    "1-888-859-2673 or info@linkwavewireless.com for immediate assistance."
)
CTA_PROMPT = "Ready to discuss your wireless needs?"
CTA_BOOKING_URL = "contact_us.html"
CTA_PHONE = "1-888-859-2673"

QUICK_ACTIONS: Dict[str, str] = {
    "What is DAS?": "What is DAS?",
    "Book Consultation": "Book a consultation",
    "Our Services": "Tell me about your services",
}


@dataclass
class RenderedMessage:
    role: str
    html: str
    kind: str = "message"  # message | typing | cta


class MessageView:
    """Ordered record of what the widget currently shows."""

    def __init__(self) -> None:
        self.items: List[RenderedMessage] = []

    def add_message(self, role: str, content: str) -> RenderedMessage:
        item = RenderedMessage(role=role, html=markdown_to_html(content))
        self.items.append(item)
        return item

    def add_typing(self) -> RenderedMessage:
        item = RenderedMessage(role="assistant", html="", kind="typing")
        self.items.append(item)
        return item

    def add_cta(self) -> RenderedMessage:
        html = (
            f"<p>{CTA_PROMPT}</p>"
            f'<a href="{CTA_BOOKING_URL}" class="cta-primary">Book Consultation</a>'
            f'<a href="tel:{CTA_PHONE}" class="cta-secondary">Call Us: {CTA_PHONE}</a>'
        )
        item = RenderedMessage(role="assistant", html=html, kind="cta")
        self.items.append(item)
        return item

    def remove(self, item: RenderedMessage) -> None:
        if item in self.items:
            self.items.remove(item)

    def messages(self) -> List[RenderedMessage]:
        return [item for item in self.items if item.kind == "message"]


class ChatTransport:
    """Base interface for delivering a message to the chat endpoint."""

    async def send(self, message: str, history: List[ConversationEntry]) -> Dict[str, Any]:
        raise NotImplementedError


class HttpChatTransport(ChatTransport):
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ) -> None:
        self.api_url = api_url
        self.client = client
        self.timeout = timeout

    async def send(self, message: str, history: List[ConversationEntry]) -> Dict[str, Any]:
        payload = {"message": message, "conversationHistory": history}
        if self.client is not None:
            response = await self.client.post(self.api_url, json=payload, timeout=self.timeout)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.api_url, json=payload)
        response.raise_for_status()
        return response.json()


class ChatWidget:
    """Conversation view, persisted log, and the request cycle between them."""

    def __init__(
        self,
        store: ConversationStore,
        transport: ChatTransport,
        *,
        view: Optional[MessageView] = None,
        typing_delay: float = 0.02,
        persist_greeting: bool = True,
    ) -> None:
        self.store = store
        self.transport = transport
        self.view = view or MessageView()
        self.typing_delay = typing_delay
        self.persist_greeting = persist_greeting
        self._greeting_pending = False

    def start(self) -> None:
        """Restore the saved log into the view, or greet when there is none."""
        entries = self.store.load()
        for entry in entries:
            if entry["role"] in ("user", "assistant"):
                self.view.add_message(entry["role"], entry["content"])
        if not entries:
            self.view.add_message("assistant", GREETING)
            self._greeting_pending = True

    async def send_message(self, message: str) -> Optional[str]:
        message = message.strip()
        if not message:
            return None

        self.view.add_message("user", message)
        if self._greeting_pending and self.persist_greeting:
            self.store.entries.append({"role": "assistant", "content": GREETING})
        self._greeting_pending = False
        # Persist before the request so a reload never loses a sent message
        self.store.append("user", message)

        typing = self.view.add_typing()
        try:
            data = await self.transport.send(message, self.store.snapshot())
            reply = data["response"]
            consultation_intent = bool(data.get("consultationIntent", False))
            if not isinstance(reply, str):
                raise TypeError("response is not a string")
        except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.error(f"Chatbot error: {exc}")
            self.view.remove(typing)
            self.view.add_message("assistant", FALLBACK_MESSAGE)
            return None

        self.view.remove(typing)
        await self._reveal(reply)
        self.store.append("assistant", reply)

        if consultation_intent:
            self.view.add_cta()
        return reply

    async def quick_action(self, label: str) -> Optional[str]:
        return await self.send_message(QUICK_ACTIONS.get(label, label))

    async def _reveal(self, content: str) -> RenderedMessage:
        item = RenderedMessage(role="assistant", html="")
        self.view.items.append(item)
        if self.typing_delay > 0:
            for frame in reveal_frames(content):
                item.html = frame
                await asyncio.sleep(self.typing_delay)
        item.html = markdown_to_html(content)
        return item
