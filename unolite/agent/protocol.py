"""Player protocol - interface that human and automated players implement."""

from typing import List, Protocol

from unolite.engine import Action, Card, Color, Deck


class PlayerProtocol(Protocol):
    """Interface for players seated at a game."""

    name: str
    hand: List[Card]

    def draw_cards(self, deck: Deck, count: int = 1) -> None:
        """Draw count cards from the deck into the hand."""
        ...

    def decide_turn(self, active_card: Card) -> Action:
        """Choose what to do against the active card.

        Args:
            active_card: The card the play is judged against.

        Returns:
            DrawCard() to draw, or PlayCard(index) where
            hand[index].can_play_on(active_card) is True.
        """
        ...

    def choose_replacement_color(self) -> Color:
        """Pick the color for a wild card just played.

        Returns:
            One of Red, Pink, Purple, Yellow. Never Color.NONE.
        """
        ...
