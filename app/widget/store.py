"""Browser-side conversation log with a 30-day freshness window."""
from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable, Dict, List

from .storage import LocalStorage, StorageError

logger = logging.getLogger(__name__)

HISTORY_KEY = "linkwave_chatbot_history"
TIMESTAMP_KEY = "linkwave_chatbot_timestamp"
HISTORY_EXPIRY_DAYS = 30
MS_PER_DAY = 1000 * 60 * 60 * 24

ConversationEntry = Dict[str, str]


def epoch_millis() -> int:
    return int(time.time() * 1000)


class ConversationStore:
    """Append-only log persisted under two storage keys owned by the widget.

    Freshness is checked only when loading. Any storage failure degrades to
    an empty conversation instead of propagating.
    """

    def __init__(
        self,
        storage: LocalStorage,
        *,
        clock: Callable[[], int] = epoch_millis,
        expiry_days: int = HISTORY_EXPIRY_DAYS,
    ) -> None:
        self.storage = storage
        self.clock = clock
        self.expiry_days = expiry_days
        self.entries: List[ConversationEntry] = []

    def load(self) -> List[ConversationEntry]:
        try:
            stored = self.storage.get_item(HISTORY_KEY)
            timestamp = self.storage.get_item(TIMESTAMP_KEY)
            if stored and timestamp:
                days_since = (self.clock() - int(timestamp)) / MS_PER_DAY
                if days_since < self.expiry_days:
                    self.entries = _parse_entries(stored)
                else:
                    logger.info("Stored conversation expired, clearing")
                    self.clear()
            else:
                self.entries = []
        except (StorageError, ValueError, TypeError) as exc:
            logger.error(f"Error loading chat history: {exc}")
            self.clear()
        return list(self.entries)

    def save(self) -> None:
        try:
            self.storage.set_item(HISTORY_KEY, json.dumps(self.entries, ensure_ascii=False))
            self.storage.set_item(TIMESTAMP_KEY, str(self.clock()))
        except StorageError as exc:
            logger.error(f"Error saving chat history: {exc}")

    def append(self, role: str, content: str) -> None:
        self.entries.append({"role": role, "content": content})
        self.save()

    def clear(self) -> None:
        self.entries = []
        for key in (HISTORY_KEY, TIMESTAMP_KEY):
            try:
                self.storage.remove_item(key)
            except StorageError as exc:
                logger.error(f"Error clearing chat history: {exc}")

    def snapshot(self) -> List[ConversationEntry]:
        return [dict(entry) for entry in self.entries]


def _parse_entries(stored: str) -> List[ConversationEntry]:
    data: Any = json.loads(stored)
    if not isinstance(data, list):
        raise ValueError("Stored conversation is not a list")
    entries: List[ConversationEntry] = []
    for item in data:
        if not isinstance(item, dict) or not isinstance(item.get("role"), str) or not isinstance(item.get("content"), str):
            raise ValueError("Stored conversation entry is malformed")
        entries.append({"role": item["role"], "content": item["content"]})
    return entries
