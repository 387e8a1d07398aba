"""Item list handlers that adapt to whether the device has a screen."""

from __future__ import annotations

from typing import Optional

from voice_skill_engine.adapters.handler_input import validator_for
from voice_skill_engine.core.config import config
from voice_skill_engine.core.models import HandlerInput, Response
from voice_skill_engine.services.predicates import LIST_TOKEN_DELIMITER
from voice_skill_engine.services.request_dispatcher import RequestHandler
from voice_skill_engine.services.response_builder import ResponseBuilder

SHOW_ITEMS_INTENT = "ShowItemsIntent"
SELECT_ITEM_INTENT = "SelectItemIntent"
DISPLAY_INTERFACE = "Display"
ITEM_TOKEN = "item"
ITEM_SLOT = "item"
SELECTED_ITEM_ATTRIBUTE = "selected_item"

ITEMS = ("apples", "bananas", "cherries")


def item_token(index: int) -> str:
    """Return the list token for the 1-based ``index``, e.g. ``item-2``."""
    return f"{ITEM_TOKEN}{LIST_TOKEN_DELIMITER}{index}"


def resolve_item(choice: Optional[str]) -> Optional[str]:
    """Map a 1-based position or an item name to an item, if it exists."""
    if not choice:
        return None
    choice = choice.strip().lower()
    if choice.isdigit():
        position = int(choice)
        if 1 <= position <= len(ITEMS):
            return ITEMS[position - 1]
        return None
    return choice if choice in ITEMS else None


class ShowItemsOnDisplayHandler(RequestHandler):
    def can_handle(self, handler_input: HandlerInput) -> bool:
        return (
            validator_for(handler_input)
            .is_intent(SHOW_ITEMS_INTENT)
            .does_support(DISPLAY_INTERFACE)
            .can_handle()
        )

    def handle(self, handler_input: HandlerInput) -> Response:
        content = "\n".join(f"{item_token(i)}: {item}" for i, item in enumerate(ITEMS, start=1))
        return (
            ResponseBuilder()
            .speak("Here are the items. Select one on the screen.")
            .with_simple_card(config.SKILL_NAME, content)
            .ask(config.REPROMPT_TEXT)
            .get_response()
        )


class ReadItemsAloudHandler(RequestHandler):
    """Voice-only devices hear the list and pick by name or number."""

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return (
            validator_for(handler_input)
            .is_intent(SHOW_ITEMS_INTENT)
            .does_not_support(DISPLAY_INTERFACE)
            .can_handle()
        )

    def handle(self, handler_input: HandlerInput) -> Response:
        spoken = ", ".join(f"{i}, {item}" for i, item in enumerate(ITEMS, start=1))
        return (
            ResponseBuilder()
            .speak(f"The items are: {spoken}. Which one would you like?")
            .ask("Say the number or the name of an item.")
            .get_response()
        )


class ItemSelectedHandler(RequestHandler):
    """Accept a touch selection from the list or a spoken choice."""

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return (
            validator_for(handler_input)
            .is_list_select(ITEM_TOKEN)
            .or_()
            .is_intent(SELECT_ITEM_INTENT)
            .has_slots([ITEM_SLOT])
            .can_handle()
        )

    def handle(self, handler_input: HandlerInput) -> Response:
        request = handler_input.request
        if request.token:
            choice: Optional[str] = request.token.partition(LIST_TOKEN_DELIMITER)[2]
        else:
            slots = request.intent.slots if request.intent else None
            slot = slots.get(ITEM_SLOT) if slots else None
            choice = slot.value if slot else None

        item = resolve_item(choice)
        if item is None:
            return (
                ResponseBuilder()
                .speak("Sorry, I couldn't find that item.")
                .ask("Say the number or the name of an item.")
                .get_response()
            )

        handler_input.attributes_manager.session_attributes[SELECTED_ITEM_ATTRIBUTE] = item
        text = f"You picked {item}."
        builder = ResponseBuilder().speak(text).with_simple_card(config.SKILL_NAME, text)
        return builder.get_response()


__all__ = [
    "ITEMS",
    "ItemSelectedHandler",
    "ReadItemsAloudHandler",
    "ShowItemsOnDisplayHandler",
    "item_token",
    "resolve_item",
]
