"""Component directive models keyed by the ``type`` discriminator."""

from typing import Any, Literal

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = structlog.get_logger()


class _Directive(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ButtonGroup(_Directive):
    """Row of buttons, one per variant."""

    type: Literal["button-group"] = "button-group"
    variants: list[str] = Field(default_factory=list)

    def buttons(self) -> list[tuple[str, str]]:
        """(variant, label) pairs. The label is the capitalized variant."""
        return [(v, v[:1].upper() + v[1:]) for v in self.variants]


class ChatBubble(BaseModel):
    type: str = "user"
    message: str = ""


class ChatExamples(_Directive):
    """Sample chat bubbles for each message role."""

    type: Literal["chat-examples"] = "chat-examples"
    bubbles: list[ChatBubble] = Field(default_factory=list)


class FormField(BaseModel):
    name: str
    label: str | None = None
    placeholder: str | None = None
    type: str | None = None

    @property
    def display_placeholder(self) -> str:
        return self.placeholder or self.label or "Enter value..."

    @property
    def input_type(self) -> str:
        return self.type or "text"


class Form(_Directive):
    """Input fields with a submit button."""

    type: Literal["form"] = "form"
    fields: list[FormField] = Field(default_factory=list)
    submit_text: str = Field("Submit", alias="submitText")


class ListItem(BaseModel):
    text: str


class ListComponent(_Directive):
    """Ordered or unordered list."""

    type: Literal["list"] = "list"
    items: list[str | ListItem] = Field(default_factory=list)
    ordered: bool = False
    style: str = "default"

    def item_texts(self) -> list[str]:
        return [i if isinstance(i, str) else i.text for i in self.items]


class UnknownComponent(_Directive):
    """Any directive the widget cannot draw. Rendered as nothing."""

    type: str = ""
    data: dict = Field(default_factory=dict)


Component = ButtonGroup | ChatExamples | Form | ListComponent | UnknownComponent

COMPONENT_TYPES: dict[str, type[_Directive]] = {
    "button-group": ButtonGroup,
    "chat-examples": ChatExamples,
    "form": Form,
    "list": ListComponent,
}


def to_component(data: Any) -> Component:
    """Map a decoded directive to its component model.

    Total: unknown tags and payloads that fail validation become
    UnknownComponent.
    """
    if not isinstance(data, dict):
        return UnknownComponent()

    tag = data.get("type")
    model = COMPONENT_TYPES.get(tag) if isinstance(tag, str) else None
    if model is None:
        return UnknownComponent(type=tag if isinstance(tag, str) else "", data=data)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.warning("component_invalid", component_type=tag, error_count=e.error_count())
        return UnknownComponent(type=tag, data=data)
