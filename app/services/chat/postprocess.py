"""Ordered normalization of completion text before it reaches the widget."""
from __future__ import annotations

from .normalizers import (
    DEFAULT_LIST_LIMIT,
    append_consultation_cta,
    fix_button_references,
    fix_numbered_lists,
    fix_spacing,
    limit_list,
    remove_contact_info,
)


def post_process(text: str, consultation_intent: bool, *, max_list_items: int = DEFAULT_LIST_LIMIT) -> str:
    response = fix_spacing(text or "")
    response = fix_numbered_lists(response)
    response = limit_list(response, max_list_items)

    if consultation_intent:
        response = remove_contact_info(response)
        response = fix_button_references(response)
        response = append_consultation_cta(response)
    else:
        response = fix_button_references(response)

    return response
