"""Exceptions raised by the chat pipeline."""
from __future__ import annotations

from typing import List, Optional


class ChatError(Exception):
    """Base class for chat pipeline failures."""


class ValidationError(ChatError):
    """Incoming payload failed validation. ``details`` is safe to show clients."""

    def __init__(self, details: List[str]):
        super().__init__("; ".join(details) or "Invalid request")
        self.details = list(details)


class ProviderError(ChatError):
    """The completion provider failed. Never serialize this to a client."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code or 500


class ProviderTimeoutError(ProviderError, TimeoutError):
    """The completion call exceeded its time budget and was cancelled."""

    def __init__(self, timeout: float):
        super().__init__(f"Completion timed out after {timeout:g}s", status_code=504)
        self.timeout = timeout
