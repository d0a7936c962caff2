"""Deck creation, shuffling and drawing."""

import random
from typing import Iterable, List, Optional

from unolite.engine.card import (
    CONCRETE_COLORS,
    NUMBER_VALUES,
    SPECIAL_VALUES,
    Card,
    Color,
    Value,
)

NUMBER_COPIES = 2
DRAW_FOUR_COUNT = 4
COLOR_CHANGE_COUNT = 2


class EmptyDeckError(IndexError):
    """Raised when drawing from a deck with no cards left."""


class Deck:
    """Ordered stack of cards. The top of the deck is the last element.

    There is no discard pile to reshuffle from, so once created the deck
    only ever shrinks.
    """

    def __init__(
        self,
        cards: Optional[Iterable[Card]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.cards: List[Card] = list(cards) if cards is not None else []
        # random.Random() seeds itself from os.urandom
        self._rng = rng if rng is not None else random.Random()

    def initialize(self) -> None:
        """Build the full 90-card set.

        - 4 colors x two of each 1-9: 72 cards
        - 4 colors x one Reverse, Draw Two, Block: 12 cards
        - 4 Draw Four, 2 Color Change (no color): 6 cards
        """
        self.cards.clear()
        for color in CONCRETE_COLORS:
            for value in NUMBER_VALUES:
                for _ in range(NUMBER_COPIES):
                    self.cards.append(Card(color=color, value=value))
            for value in SPECIAL_VALUES:
                self.cards.append(Card(color=color, value=value))

        for _ in range(DRAW_FOUR_COUNT):
            self.cards.append(Card(color=Color.NONE, value=Value.DRAW_FOUR))
        for _ in range(COLOR_CHANGE_COUNT):
            self.cards.append(Card(color=Color.NONE, value=Value.COLOR_CHANGE))

    def shuffle(self) -> None:
        """Shuffle the deck in place."""
        self._rng.shuffle(self.cards)

    def draw(self) -> Card:
        """Remove and return the top card."""
        if not self.cards:
            raise EmptyDeckError("Cannot draw from an empty deck")
        return self.cards.pop()

    def peek(self) -> Card:
        """Return the top card without removing it."""
        if not self.cards:
            raise EmptyDeckError("Cannot peek at an empty deck")
        return self.cards[-1]

    def is_empty(self) -> bool:
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)


def create_deck(
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Deck:
    """Create a full, shuffled deck.

    Pass a seed (or a ready-made rng) for a reproducible order.
    """
    if rng is None and seed is not None:
        rng = random.Random(seed)
    deck = Deck(rng=rng)
    deck.initialize()
    deck.shuffle()
    return deck
