"""Keyword and pattern tables consumed by the text classifiers."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Tuple

CONSULTATION_KEYWORDS: Tuple[str, ...] = (
    "consultation", "consult", "meeting", "discuss", "talk", "speak",
    "quote", "pricing", "cost", "price", "estimate", "project",
    "book", "schedule", "appointment", "contact", "reach out",
    "interested", "learn more", "details",
)

DOMAIN_KEYWORDS: Tuple[str, ...] = (
    "das", "distributed antenna", "in-building", "signal", "coverage",
    "carrier", "cellular", "5g", "lte", "public safety", "radio",
    "wifi", "wireless", "linkwave", "network", "installation",
    "design", "testing", "maintenance", "deployment", "building",
    "tunnel", "transit", "hospital", "stadium", "campus", "office",
    "rf", "antenna", "website", "services", "careers", "projects",
    "team", "faq", "learn", "company",
)

GREETING_PATTERN = re.compile(r"^(hi|hello|hey|good\s*(morning|afternoon|evening))\b", re.IGNORECASE)
META_REQUEST_PATTERN = re.compile(r"^(list|summarize|summary|bullet|outline)", re.IGNORECASE)


@dataclass(frozen=True)
class KeywordTables:
    """Bundle of match tables; swap in a smaller one to test classifiers in isolation."""

    consultation: Tuple[str, ...] = CONSULTATION_KEYWORDS
    domain: Tuple[str, ...] = DOMAIN_KEYWORDS
    greeting: re.Pattern = field(default=GREETING_PATTERN)
    meta_request: re.Pattern = field(default=META_REQUEST_PATTERN)


DEFAULT_KEYWORDS = KeywordTables()
