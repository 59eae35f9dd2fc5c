"""Dispatch parsed blocks to a renderer, and interactive widget handlers."""

import json
from collections.abc import Iterable
from typing import Literal, Protocol

import structlog

from ui_library_assistant.responses.models import Block
from ui_library_assistant.widget.components import (
    ButtonGroup,
    ChatExamples,
    Component,
    Form,
    ListComponent,
    to_component,
)

logger = structlog.get_logger()

NotificationLevel = Literal["info", "success", "warning", "error"]


class Notifier(Protocol):
    """Channel for short user-facing notifications (toasts)."""

    def notify(self, message: str, level: NotificationLevel = "info") -> None: ...


class Renderer(Protocol):
    """Draws markdown text and each supported component."""

    def render_markdown(self, text: str) -> None: ...

    def render_button_group(self, component: ButtonGroup) -> None: ...

    def render_chat_examples(self, component: ChatExamples) -> None: ...

    def render_form(self, component: Form) -> None: ...

    def render_list(self, component: ListComponent) -> None: ...


def render_component(component: Component, renderer: Renderer) -> bool:
    """Render one component. Returns False for unknown components."""
    if isinstance(component, ButtonGroup):
        renderer.render_button_group(component)
    elif isinstance(component, ChatExamples):
        renderer.render_chat_examples(component)
    elif isinstance(component, Form):
        renderer.render_form(component)
    elif isinstance(component, ListComponent):
        renderer.render_list(component)
    else:
        logger.debug("component_skipped", component_type=component.type)
        return False
    return True


def render_blocks(blocks: Iterable[Block], renderer: Renderer) -> int:
    """Render blocks in order. Returns the number of blocks drawn."""
    drawn = 0
    for block in blocks:
        if block.is_json:
            if render_component(to_component(block.content), renderer):
                drawn += 1
        else:
            renderer.render_markdown(block.content)
            drawn += 1
    return drawn


def on_button_click(notifier: Notifier, variant: str, text: str) -> None:
    variant_name = variant[:1].upper() + variant[1:]
    notifier.notify(f'Clicked: {variant_name} Button - "{text}"', "info")


def on_form_submit(notifier: Notifier, form_data: dict) -> None:
    payload = json.dumps(form_data, separators=(",", ":"), ensure_ascii=False)
    notifier.notify(f"Form submitted with: {payload}", "success")


class TextRenderer:
    """Renders blocks as plain text, e.g. for logs or a terminal transcript."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def render_markdown(self, text: str) -> None:
        self.parts.append(text)

    def render_button_group(self, component: ButtonGroup) -> None:
        self.parts.append(" ".join(f"[{label}]" for _, label in component.buttons()))

    def render_chat_examples(self, component: ChatExamples) -> None:
        self.parts.append("\n".join(f"{b.type}: {b.message}" for b in component.bubbles))

    def render_form(self, component: Form) -> None:
        lines = [
            f"{f.label or f.name}: <{f.input_type}> {f.display_placeholder}"
            for f in component.fields
        ]
        lines.append(f"[{component.submit_text}]")
        self.parts.append("\n".join(lines))

    def render_list(self, component: ListComponent) -> None:
        if component.ordered:
            lines = [f"{n}. {t}" for n, t in enumerate(component.item_texts(), start=1)]
        else:
            lines = [f"- {t}" for t in component.item_texts()]
        self.parts.append("\n".join(lines))

    def text(self) -> str:
        return "\n\n".join(self.parts)


def format_blocks(blocks: Iterable[Block]) -> str:
    """Render blocks to a plain-text transcript entry."""
    renderer = TextRenderer()
    render_blocks(blocks, renderer)
    return renderer.text()
