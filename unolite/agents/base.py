"""Hand handling shared by all players."""

from typing import List

from unolite.engine import Card, Deck


class BasePlayer:
    """A named seat with a hand of cards."""

    def __init__(self, name: str):
        self.name = name
        self.hand: List[Card] = []

    def draw_cards(self, deck: Deck, count: int = 1) -> None:
        """Draw cards one at a time.

        An EmptyDeckError part way through leaves the cards already drawn
        in hand.
        """
        for _ in range(count):
            self.hand.append(deck.draw())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, cards={len(self.hand)})"
