"""Map free-text queries to mock responses with inline component directives."""

from enum import Enum

import structlog

from ui_library_assistant.responses import templates
from ui_library_assistant.responses.matching import (
    contains_any,
    has_substring,
    has_word,
    normalize,
)
from ui_library_assistant.responses.models import ClassifiedResponse

logger = structlog.get_logger()

MAX_QUERY_CHARACTERS = 200

BUTTON_KEYWORDS = ("button", "btn", "buttons", "press", "click")
CHAT_KEYWORDS = ("chat", "bubble", "bubbles", "message", "messages", "conversation")
FORM_KEYWORDS = ("form", "input", "field", "fields", "submit", "textfield", "text input")
LIST_KEYWORDS = ("list", "lists", "item", "items", "ordered", "unordered", "bullet")
EXAMPLE_KEYWORDS = ("example", "demo", "show", "display", "give", "render")
GENERIC_UI_KEYWORDS = ("component", "ui", "something", "cool", "feature", "element")
QUESTION_KEYWORDS = ("what", "how", "can", "could", "would", "do you have", "available")
GREETING_KEYWORDS = (
    "hi", "hello", "hey", "greetings", "good morning", "good afternoon", "good evening",
)

# Substring guards that must be present before list/chat intents are considered
_EXPLICIT_LIST = ("list", "item", "ordered", "unordered", "bullet", "numbered")
_EXPLICIT_CHAT = ("chat", "bubble", "message", "conversation")
_ORDERED_MARKERS = ("ordered", "numbered", "ol")
_UNORDERED_MARKERS = ("unordered", "ul", "bullet")

_SHORT_GREETING_LENGTH = 20


class Intent(str, Enum):
    HELP = "help"
    BUTTON = "button"
    LIST = "list"
    CHAT = "chat"
    FORM = "form"
    QUESTION = "question"
    GENERIC = "generic"
    FALLBACK = "fallback"


def parse_button_variants(query: str) -> list[str]:
    """Extract requested button variants, in canonical order.

    "all" together with "button" or "variant" selects every variant. Otherwise
    variants named as whole words are returned; none named means all.
    """
    if "all" in query and ("button" in query or "variant" in query):
        return list(templates.BUTTON_VARIANTS)

    requested = [v for v in templates.BUTTON_VARIANTS if has_word(query, v)]
    return requested or list(templates.BUTTON_VARIANTS)


def _button_response(query: str) -> str:
    variants = parse_button_variants(query)
    literal = templates.button_group_literal(variants)
    if len(variants) == 1:
        return templates.SINGLE_BUTTON_TEMPLATE.format(variant=variants[0], literal=literal)
    if len(variants) == len(templates.BUTTON_VARIANTS):
        return templates.ALL_BUTTONS_TEMPLATE.format(literal=literal)
    return templates.SOME_BUTTONS_TEMPLATE.format(
        literal=literal, variant_list=", ".join(variants)
    )


def _list_response(query: str) -> str:
    is_ordered = has_substring(query, _ORDERED_MARKERS)
    is_unordered = has_substring(query, _UNORDERED_MARKERS)
    ordered = False if is_unordered else is_ordered
    return templates.LIST_TEMPLATE.format(
        kind="ordered" if ordered else "unordered",
        literal=templates.list_literal(ordered),
    )


def _question_response(query: str) -> str:
    literal = templates.button_group_literal(templates.DEFAULT_DEMO_VARIANTS)
    if "component" in query or "available" in query or ("what" in query and "have" in query):
        return templates.AVAILABLE_COMPONENTS_TEMPLATE.format(literal=literal)
    return templates.QUESTION_EXAMPLE_TEMPLATE.format(literal=literal)


def _has_family_intent(query: str, explicit: tuple[str, ...], keywords: tuple[str, ...]) -> bool:
    # Generic words like "show" alone never trigger a component family
    if not has_substring(query, explicit):
        return False
    return (
        contains_any(query, keywords)
        or contains_any(query, EXAMPLE_KEYWORDS)
        or "show" in query
        or "display" in query
    )


def detect_intent(query: str) -> Intent:
    """Resolve the intent of a normalized query. First match wins."""
    if not query:
        return Intent.HELP

    if contains_any(query, BUTTON_KEYWORDS) or (
        contains_any(query, EXAMPLE_KEYWORDS) and contains_any(query, BUTTON_KEYWORDS)
    ):
        return Intent.BUTTON

    if has_substring(query, GREETING_KEYWORDS) and len(query) < _SHORT_GREETING_LENGTH:
        return Intent.FALLBACK

    if _has_family_intent(query, _EXPLICIT_LIST, LIST_KEYWORDS):
        return Intent.LIST

    if _has_family_intent(query, _EXPLICIT_CHAT, CHAT_KEYWORDS):
        return Intent.CHAT

    if contains_any(query, FORM_KEYWORDS) or (
        contains_any(query, EXAMPLE_KEYWORDS) and contains_any(query, FORM_KEYWORDS)
    ):
        return Intent.FORM

    if contains_any(query, QUESTION_KEYWORDS):
        return Intent.QUESTION

    if contains_any(query, EXAMPLE_KEYWORDS) or contains_any(query, GENERIC_UI_KEYWORDS):
        return Intent.GENERIC

    return Intent.FALLBACK


def classify(query: str) -> ClassifiedResponse:
    """Build the mock response for a user query.

    Never raises. Queries longer than 200 characters are truncated, not
    rejected, and the result depends only on the query text.
    """
    if not isinstance(query, str):
        query = ""
    normalized = normalize(query[:MAX_QUERY_CHARACTERS])
    intent = detect_intent(normalized)

    if intent is Intent.BUTTON:
        text = _button_response(normalized)
    elif intent is Intent.LIST:
        text = _list_response(normalized)
    elif intent is Intent.CHAT:
        text = templates.CHAT_EXAMPLES_TEXT
    elif intent is Intent.FORM:
        text = templates.FORM_TEXT
    elif intent is Intent.QUESTION:
        text = _question_response(normalized)
    elif intent is Intent.GENERIC:
        text = templates.GENERIC_EXAMPLE_TEMPLATE.format(
            literal=templates.button_group_literal(templates.DEFAULT_DEMO_VARIANTS)
        )
    else:
        text = templates.HELP_TEXT

    logger.debug("query_classified", intent=intent.value, query_length=len(normalized))
    return ClassifiedResponse(text=text)
