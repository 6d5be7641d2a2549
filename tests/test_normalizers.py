import re

from app.services.chat.normalizers import (
    CONSULTATION_CTA,
    append_consultation_cta,
    fix_button_references,
    fix_numbered_lists,
    fix_spacing,
    limit_list,
    remove_contact_info,
)
from app.services.chat.postprocess import post_process

PHONE_SHAPE = re.compile(r"\d{3}[-. )]+\d{3}[-. ]\d{4}")


def test_fix_spacing_inserts_space_after_sentence_punctuation():
    assert fix_spacing("foo.Bar") == "foo. Bar"
    assert fix_spacing("Great!Next?Yes") == "Great! Next? Yes"
    assert fix_spacing("version 3.5 works") == "version 3.5 works"


def test_fix_numbered_lists_restarts_after_blank_line():
    assert fix_numbered_lists("5. a\n7. b\n\n3. c") == "1. a\n2. b\n\n1. c"


def test_fix_numbered_lists_normalizes_markers():
    text = "**1.** Bold start\n1) second\n  9. indented"
    assert fix_numbered_lists(text) == "1. Bold start\n2. second\n  3. indented"


def test_fix_numbered_lists_leaves_prose_alone():
    text = "Intro line\nNo list here."
    assert fix_numbered_lists(text) == text


def test_limit_list_caps_each_run_at_three_items():
    text = "1. a\n2. b\n3. c\n4. d\n\n- x\n- y\n- z\n- w\nend"
    assert limit_list(text) == "1. a\n2. b\n3. c\n\n- x\n- y\n- z\nend"


def test_limit_list_non_list_line_starts_new_run():
    text = "- a\n- b\n- c\nMore options:\n- d\n- e"
    assert limit_list(text) == text


def test_limit_list_caps_dot_bullets():
    text = "Options:\n• a\n• b\n• c\n• d\n• e"
    assert limit_list(text) == "Options:\n• a\n• b\n• c"


def test_limit_list_passes_plain_text_through():
    text = "First paragraph.\n\nSecond paragraph."
    assert limit_list(text) == text


def test_remove_contact_info_strips_phone_and_email():
    text = "Call us at 1-888-859-2673 or email info@linkwavewireless.com."
    cleaned = remove_contact_info(text)
    assert "@" not in cleaned
    assert not PHONE_SHAPE.search(cleaned)
    assert "  " not in cleaned
    assert " ." not in cleaned


def test_remove_contact_info_keeps_word_glued_to_email():
    cleaned = remove_contact_info("Write to info@linkwavewireless.com.Thanks for asking.")
    assert "@" not in cleaned
    assert "Thanks for asking." in cleaned


def test_remove_contact_info_handles_other_phone_formats():
    cleaned = remove_contact_info("Reach us at (555) 123-4567, or you can call anytime.")
    assert "555" not in cleaned
    assert "you can call" not in cleaned
    assert cleaned == "Reach us at, anytime."


def test_remove_contact_info_keeps_line_structure():
    text = "1. Survey\n2. Design\n3. Install"
    assert remove_contact_info(text) == text


def test_fix_button_references_points_at_widget():
    text = 'Click the "Book Consultation" button on our website to get started.'
    assert fix_button_references(text) == 'Click the "Book Consultation" button below to get started.'


def test_fix_button_references_rewrites_contact_page():
    assert fix_button_references("Please visit our contact page.") == (
        'Please click the "Book Consultation" button below.'
    )


def test_append_cta_to_plain_text():
    assert append_consultation_cta("DAS helps.") == f"DAS helps.\n\n{CONSULTATION_CTA}"


def test_append_cta_skips_when_button_already_referenced():
    text = "Use the book consultation button to set a time."
    assert append_consultation_cta(text) == text


def test_append_cta_on_empty_text_thanks_user():
    assert append_consultation_cta("   ") == f"Thanks for your interest. {CONSULTATION_CTA}"


def test_post_process_consultation_path():
    raw = "Pricing varies.Call us at 1-888-859-2673.\n1. a\n1. b\n1. c\n1. d"
    result = post_process(raw, consultation_intent=True)
    assert result.endswith(CONSULTATION_CTA)
    assert not PHONE_SHAPE.search(result)
    assert "1. a\n2. b\n3. c" in result
    assert "d" not in result.split("\n")


def test_post_process_without_consultation_keeps_contact_info():
    raw = "Email info@linkwavewireless.com.See the button on our website."
    result = post_process(raw, consultation_intent=False)
    assert "info@linkwavewireless.com" in result
    assert "button below" in result
    assert CONSULTATION_CTA not in result


def test_fix_spacing_leaves_addresses_intact():
    text = "Write to info@linkwavewireless.com or see https://linkwave.example/faq.Thanks"
    assert fix_spacing(text) == text


def test_fix_button_references_moves_website_button_into_chat():
    text = 'On our website, click the "Book Consultation" button.'
    assert fix_button_references(text) == 'Click the "Book Consultation" button below.'


def test_fix_button_references_keeps_lowercase_mid_sentence():
    text = 'For pricing, on our website, click the "Book Consultation" button.'
    assert fix_button_references(text) == 'For pricing, click the "Book Consultation" button below.'
