"""Game rules: setup, legal plays and state transitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Sequence, Union

from unolite.engine.card import CONCRETE_COLORS, Card, Color, Value
from unolite.engine.deck import Deck
from unolite.engine.game_state import GameState

if TYPE_CHECKING:
    from unolite.agent.protocol import PlayerProtocol

HAND_SIZE = 5
MIN_PLAYERS = 2
DRAW_TWO_PENALTY = 2
DRAW_FOUR_PENALTY = 4


@dataclass
class PlayCard:
    """Action: play the card at `index` in the current player's hand."""

    index: int


@dataclass
class DrawCard:
    """Action: draw one card instead of playing."""

    pass


Action = Union[PlayCard, DrawCard]


def legal_indices(hand: Sequence[Card], active_card: Card) -> List[int]:
    """Indices of the cards in hand that can be played on the active card."""
    return [i for i, card in enumerate(hand) if card.can_play_on(active_card)]


def init_game(players: List["PlayerProtocol"], deck: Deck) -> GameState:
    """Deal HAND_SIZE cards to each player in seat order, then turn up the active card.

    A wild starting card is colored by the first player.
    """
    if len(players) < MIN_PLAYERS:
        raise ValueError(f"Need at least {MIN_PLAYERS} players, got {len(players)}")
    names = [p.name for p in players]
    if len(set(names)) != len(names):
        raise ValueError(f"Player names must be unique: {names}")

    for player in players:
        player.draw_cards(deck, HAND_SIZE)

    active = deck.draw()
    state = GameState(deck=deck, players=list(players), active_card=active)
    if active.is_wild:
        first = state.current_player
        color = _replacement_color(first)
        state.active_card = active.with_color(color)
        state.record(f"Starting card is {active}; {first.name} chose {color.value}")
    else:
        state.record(f"Starting card is {active}")
    return state


def _replacement_color(player: "PlayerProtocol") -> Color:
    color = player.choose_replacement_color()
    if color not in CONCRETE_COLORS:
        raise ValueError(f"{player.name} chose an invalid color: {color!r}")
    return color


def apply_action(state: GameState, action: Action) -> GameState:
    """Apply the current player's action to the state and return it.

    Raises:
        ValueError: the action names a card that is missing or cannot be played.
        EmptyDeckError: a draw was needed but the deck is empty.
    """
    if state.winner is not None:
        return state

    player = state.current_player

    if isinstance(action, DrawCard):
        player.draw_cards(state.deck)
        state.record(f"{player.name} drew a card")
        state.advance()
        return state

    hand = player.hand
    if not 0 <= action.index < len(hand):
        raise ValueError(f"{player.name} has no card at index {action.index}")
    card = hand[action.index]
    if not card.can_play_on(state.active_card):
        raise ValueError(f"{card} cannot be played on {state.active_card}")

    hand.pop(action.index)
    action_desc = f"{player.name} played {card}"
    if card.is_wild:
        color = _replacement_color(player)
        card = card.with_color(color)
        action_desc += f" (chose {color.value})"
    state.active_card = card

    # Check win before any effect is resolved
    if not hand:
        state.winner = player.name
        state.record(f"{action_desc} and WON!")
        return state
    state.record(action_desc)

    if card.value is Value.DRAW_FOUR:
        _penalize(state, state.following_player(), DRAW_FOUR_PENALTY)
    elif card.value is Value.REVERSE:
        state.direction = -state.direction
    elif card.value is Value.BLOCK:
        skipped = state.following_player()
        state.advance()
        state.record(f"{skipped.name} is blocked")
    elif card.value is Value.DRAW_TWO:
        _penalize(state, state.following_player(), DRAW_TWO_PENALTY)

    state.advance()
    return state


def _penalize(state: GameState, target: "PlayerProtocol", count: int) -> None:
    target.draw_cards(state.deck, count)
    state.record(f"{target.name} drew {count} cards")
