"""Automated player with a simple greedy policy."""

from collections import Counter

from unolite.agents.base import BasePlayer
from unolite.engine import CONCRETE_COLORS, Action, Card, Color
from unolite.engine.rules import DrawCard, PlayCard, legal_indices


class AutoPlayer(BasePlayer):
    """Plays the first legal card in hand order, otherwise draws.

    Wild cards are colored with the color it holds most of; ties go to the
    earliest of Red, Pink, Purple, Yellow.
    """

    def decide_turn(self, active_card: Card) -> Action:
        playable = legal_indices(self.hand, active_card)
        if playable:
            return PlayCard(index=playable[0])
        return DrawCard()

    def choose_replacement_color(self) -> Color:
        counts = Counter(card.color for card in self.hand)
        # max() keeps the first of equal counts
        return max(CONCRETE_COLORS, key=lambda color: counts[color])
