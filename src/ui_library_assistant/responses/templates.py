"""Response templates for the mock assistant.

Each component directive is embedded as a pretty-printed JSON object literal
inside the prose. Consumers key off the ``type`` field.
"""

import json

BUTTON_VARIANTS = ("primary", "secondary", "ghost", "danger", "outline")
DEFAULT_DEMO_VARIANTS = ("primary", "secondary", "ghost")

HELP_TEXT = """\
I'm a UI librarian assistant! I can help you explore component libraries.

Try asking me for:
- Button examples
- Forms with input fields
- Lists (ordered or unordered)
- Chat bubbles
- UI component examples

I'll render interactive components based on your queries!"""


def button_group_literal(variants) -> str:
    """Render a button-group directive with the variants inline."""
    return (
        "{\n"
        '  "type": "button-group",\n'
        f'  "variants": {json.dumps(list(variants))}\n'
        "}"
    )


SINGLE_BUTTON_TEMPLATE = (
    "Here's the {variant} button:\n\n{literal}\n\n"
    "This is the {variant} button variant."
)

ALL_BUTTONS_TEMPLATE = (
    "Here are all available button variants:\n\n{literal}\n\n"
    "Each button variant serves a different purpose in your UI."
)

SOME_BUTTONS_TEMPLATE = (
    "Here are the requested button variants:\n\n{literal}\n\n"
    "These buttons ({variant_list}) demonstrate different styles and use cases."
)


def list_literal(ordered: bool) -> str:
    return (
        "{\n"
        '  "type": "list",\n'
        '  "items": [\n'
        '    "First item in the list",\n'
        '    "Second item with more details",\n'
        '    "Third item demonstrating list structure"\n'
        "  ],\n"
        f'  "ordered": {json.dumps(ordered)},\n'
        '  "style": "default"\n'
        "}"
    )


LIST_TEMPLATE = (
    "Here's an example {kind} list:\n\n{literal}\n\n"
    "Lists are great for displaying structured information."
)

CHAT_EXAMPLES_TEXT = """\
Here are variations of chat bubbles:

{
  "type": "chat-examples",
  "bubbles": [
    { "type": "user", "message": "This is a user message" },
    { "type": "assistant", "message": "This is an assistant message" },
    { "type": "system", "message": "This is a system message" }
  ]
}

These demonstrate different message types in a chat interface."""

FORM_TEXT = """\
Here's an example form with input fields:

{
  "type": "form",
  "fields": [
    { "name": "name", "label": "Name", "placeholder": "Enter your name", "type": "text" },
    { "name": "email", "label": "Email", "placeholder": "Enter your email", "type": "email" },
    { "name": "age", "label": "Age", "placeholder": "Enter your age", "type": "number" }
  ],
  "submitText": "Submit"
}

This form demonstrates input fields with labels and a submit button."""

AVAILABLE_COMPONENTS_TEMPLATE = """\
I can show you various UI components! Here's a button example:

{literal}

You can also ask for:
- Forms with input fields
- Lists (ordered or unordered)
- Chat bubbles
- More button variations

Just ask and I'll render them for you!"""

QUESTION_EXAMPLE_TEMPLATE = (
    "Here's a UI component example:\n\n{literal}\n\n"
    "Try asking for forms, lists, or chat bubbles too!"
)

GENERIC_EXAMPLE_TEMPLATE = (
    "Here's a UI component example:\n\n{literal}\n\n"
    "You can also ask for forms, lists, or chat bubbles!"
)
