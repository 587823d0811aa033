"""
input_map.py: Normalizes raw pygame events into the game's logical actions.
"""

from enum import Enum, auto
from typing import Optional, Sequence

import pygame

from .game_state import Intent

PRIMARY_KEYS = (pygame.K_SPACE, pygame.K_UP)
MENU_KEYS = (pygame.K_m, pygame.K_ESCAPE)


class Action(Enum):
    """What a raw input meant, before any game state is considered."""
    PRIMARY = auto()
    MENU = auto()       # Menu key or button; opens or closes depending on the menu
    QUIT = auto()


def normalize_event(event: pygame.event.Event,
                    menu_button: Optional[pygame.Rect] = None,
                    chrome: Sequence[pygame.Rect] = ()) -> Optional[Action]:
    """
    Maps one event to an Action, or None when the event means nothing to the game.
    Pointer presses on UI chrome never count as a primary action.
    """
    if event.type == pygame.QUIT:
        return Action.QUIT

    if event.type == pygame.KEYDOWN:
        if event.key in PRIMARY_KEYS:
            return Action.PRIMARY
        if event.key in MENU_KEYS:
            return Action.MENU
        return None

    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if menu_button is not None and menu_button.collidepoint(event.pos):
            return Action.MENU
        if any(rect.collidepoint(event.pos) for rect in chrome):
            return None
        return Action.PRIMARY

    return None


def intent_for(action: Optional[Action], menu_open: bool) -> Optional[Intent]:
    """The state machine intent an action queues; None for actions the client handles."""
    if action is Action.PRIMARY:
        return Intent.PRIMARY
    if action is Action.MENU:
        return Intent.CLOSE_MENU if menu_open else Intent.OPEN_MENU
    return None
