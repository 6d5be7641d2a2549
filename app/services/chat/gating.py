"""Pre-provider gating: decide whether a request needs the completion call at all."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .classifiers import detect_consultation_intent, is_off_topic, is_repeated
from .keywords import DEFAULT_KEYWORDS, KeywordTables
from .models import ChatMessage

logger = logging.getLogger(__name__)

REPEATED_REPLY = (
    "I want to be helpful, but I can't keep repeating the same answer. "
    "Could you rephrase or ask a different question about DAS, wireless coverage, or the Linkwave website?"
)
OFF_TOPIC_REPLY = (
    "I'm here to help with DAS, wireless coverage, and Linkwave services. "
    "If you have a question about those topics or the website, I'd be happy to help."
)


class GatingDecision(str, Enum):
    SHORT_CIRCUIT_REPEATED = "short_circuit_repeated"
    SHORT_CIRCUIT_OFF_TOPIC = "short_circuit_off_topic"
    PROCEED = "proceed"


@dataclass(frozen=True)
class GatingOutcome:
    decision: GatingDecision
    consultation_intent: bool
    reply: Optional[str] = None

    @property
    def short_circuited(self) -> bool:
        return self.decision is not GatingDecision.PROCEED


def evaluate_gating(
    message: str,
    history: Sequence[ChatMessage],
    keywords: KeywordTables = DEFAULT_KEYWORDS,
) -> GatingOutcome:
    """Run the classifiers in precedence order.

    The repeated-question check wins outright. Consultation intent is only
    computed afterwards and lets a message through even when it looks
    off-topic.
    """
    if is_repeated(message, history):
        logger.info("Short-circuiting repeated question")
        return GatingOutcome(GatingDecision.SHORT_CIRCUIT_REPEATED, False, REPEATED_REPLY)

    consultation_intent = detect_consultation_intent(message, history, keywords)

    if not consultation_intent and is_off_topic(message, history, keywords):
        logger.info("Short-circuiting off-topic message")
        return GatingOutcome(GatingDecision.SHORT_CIRCUIT_OFF_TOPIC, False, OFF_TOPIC_REPLY)

    return GatingOutcome(GatingDecision.PROCEED, consultation_intent)
