"""Game engine: cards, deck, state and rules."""

from unolite.engine.card import CONCRETE_COLORS, Card, Color, Value
from unolite.engine.deck import Deck, EmptyDeckError, create_deck
from unolite.engine.game_state import GameState
from unolite.engine.rules import (
    HAND_SIZE,
    Action,
    PlayCard,
    DrawCard,
    legal_indices,
    apply_action,
    init_game,
)

__all__ = [
    "CONCRETE_COLORS",
    "Card",
    "Color",
    "Value",
    "Deck",
    "EmptyDeckError",
    "create_deck",
    "GameState",
    "HAND_SIZE",
    "Action",
    "PlayCard",
    "DrawCard",
    "legal_indices",
    "apply_action",
    "init_game",
]
