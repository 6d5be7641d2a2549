"""Text transforms applied to raw completion output."""
from __future__ import annotations

import re
from typing import Iterable, List, Tuple

DEFAULT_LIST_LIMIT = 3

CONSULTATION_CTA = 'Please click the "Book Consultation" button below to connect with our team.'
CTA_THANKS_PREFIX = "Thanks for your interest."

# Phrases that mean the text already points the user at the booking button.
CTA_REFERENCE_PHRASES: Tuple[str, ...] = (
    "book consultation",
    "consultation button",
    "button below",
)

_SPACING_RE = re.compile(r"([.!?])([A-Za-z])")
_TOKEN_RE = re.compile(r"\S+")
_ADDRESS_TOKEN_RE = re.compile(r"@|://|^www\.", re.IGNORECASE)
_NUMBERED_ITEM_RE = re.compile(r"^(\s*)(\*\*)?(\d+)([.)])(\*\*)?\s+(.*)$")
_LIST_ITEM_RE = re.compile(r"^\s*(\d+[.)]|[-*•])\s+")

_PHONE_RE = re.compile(r"(?<!\w)(?:\+?\d{1,3}[-. ]?)?\(?\d{3}\)?[-. ]?\d{3}[-. ]?\d{4}(?!\w)")
_EMAIL_RE = re.compile(r"\b[\w.+-]+@(?:[A-Za-z0-9-]+\.)+(?:[a-z]{2,}|[A-Z]{2,})\b")
_OR_CALL_RE = re.compile(r"\bor\s+you\s+can\s+call\b(?:\s+us\b)?(?:\s+directly)?(?:\s+at\b)?", re.IGNORECASE)
_CALL_PHRASE_RE = re.compile(
    r"\b(?:call|phone)\s+(?:us\b(?:\s+directly)?(?:\s+at\b)?|(?:directly\s+)?at\b)",
    re.IGNORECASE,
)
_MULTI_SPACE_RE = re.compile(r"[ \t]{2,}")
_SPACE_BEFORE_PUNCT_RE = re.compile(r"[ \t]+([,.!?])")

_QUOTED_BUTTON = r'(?:the\s+)?["“]?Book Consultation["”]?\s+button'
_BUTTON_REFERENCE_FIXES: Tuple[Tuple[re.Pattern, str], ...] = (
    # "button on our website" / "button at the top of the page" -> "button below"
    (
        re.compile(
            r"\bbutton\s+(?:on|at)\s+(?:the\s+(?:top|bottom)\s+of\s+)?(?:our|the|this)\s+"
            r"(?:website|site|web\s*page|page|homepage|contact\s+page)\b",
            re.IGNORECASE,
        ),
        "button below",
    ),
    # "visit our contact page" -> use the in-chat button
    (
        re.compile(
            r"\b(?:visit|go\s+to|head\s+to|navigate\s+to|check\s+out)\s+(?:our|the)\s+"
            r"(?:contact(?:\s+us)?|consultation|booking)\s+page\b",
            re.IGNORECASE,
        ),
        'click the "Book Consultation" button below',
    ),
    # "on our website, click the Book Consultation button" -> "click the ... button below"
    (
        re.compile(
            r"\b(?:on|at)\s+(?:our|the)\s+(?:website|site)\s*,?\s*(click\s+" + _QUOTED_BUTTON + r")(?!\s+below)",
            re.IGNORECASE,
        ),
        r"\1 below",
    ),
)


def fix_spacing(text: str) -> str:
    """Insert a missing space after sentence punctuation: ``foo.Bar`` -> ``foo. Bar``.

    Tokens that look like email addresses or URLs are left untouched.
    """

    def _fix(match: re.Match) -> str:
        token = match.group(0)
        if _ADDRESS_TOKEN_RE.search(token):
            return token
        return _SPACING_RE.sub(r"\1 \2", token)

    return _TOKEN_RE.sub(_fix, text)


def fix_numbered_lists(text: str) -> str:
    """Renumber ordered-list lines from 1; a blank line starts a new list."""
    lines = text.split("\n")
    num = 1
    for i, line in enumerate(lines):
        match = _NUMBERED_ITEM_RE.match(line)
        if match:
            indent, content = match.group(1), match.group(6)
            lines[i] = f"{indent}{num}. {content}"
            num += 1
        elif line.strip() == "":
            num = 1
    return "\n".join(lines)


def limit_list(text: str, max_items: int = DEFAULT_LIST_LIMIT) -> str:
    """Keep only the first ``max_items`` lines of each contiguous list run."""
    result: List[str] = []
    count = 0
    for line in text.split("\n"):
        if _LIST_ITEM_RE.match(line):
            count += 1
            if count <= max_items:
                result.append(line)
        else:
            count = 0
            result.append(line)
    return "\n".join(result)


def remove_contact_info(text: str) -> str:
    """Strip phone numbers, emails, and "call us at" phrasing, then tidy spacing."""
    cleaned = _PHONE_RE.sub("", text)
    cleaned = _EMAIL_RE.sub("", cleaned)
    cleaned = _OR_CALL_RE.sub("", cleaned)
    cleaned = _CALL_PHRASE_RE.sub("", cleaned)
    cleaned = _MULTI_SPACE_RE.sub(" ", cleaned)
    cleaned = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", cleaned)
    lines = [line.rstrip() for line in cleaned.split("\n")]
    return "\n".join(lines).strip()


def _keep_leading_case(replacement: str):
    def _sub(match: re.Match) -> str:
        new = match.expand(replacement)
        if match.group(0)[:1].isupper():
            return new[:1].upper() + new[1:]
        return new

    return _sub


def fix_button_references(text: str) -> str:
    """Point button mentions at the chat widget rather than a website page."""
    for pattern, replacement in _BUTTON_REFERENCE_FIXES:
        text = pattern.sub(_keep_leading_case(replacement), text)
    return text


def references_cta(text: str, phrases: Iterable[str] = CTA_REFERENCE_PHRASES) -> bool:
    lower = text.lower()
    return any(phrase in lower for phrase in phrases)


def append_consultation_cta(text: str, cta: str = CONSULTATION_CTA) -> str:
    base = (text or "").strip()
    if not base:
        return f"{CTA_THANKS_PREFIX} {cta}"
    if references_cta(base):
        return base
    return f"{base}\n\n{cta}"
