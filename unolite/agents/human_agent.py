"""Human player - reads decisions from the terminal."""

from typing import Callable

from unolite.agents.base import BasePlayer
from unolite.engine import CONCRETE_COLORS, Action, Card, Color
from unolite.engine.rules import DrawCard, PlayCard

COLOR_MENU = ",".join(f"{i}={c.value.title()}" for i, c in enumerate(CONCRETE_COLORS))


class HumanPlayer(BasePlayer):
    """Player that prompts a human for input.

    `read` and `write` default to input() and print(); tests swap in
    scripted versions.
    """

    def __init__(
        self,
        name: str = "You",
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        super().__init__(name)
        self._read = read
        self._write = write

    def show_hand(self) -> None:
        self._write(f"{self.name}'s hand:")
        for i, card in enumerate(self.hand, start=1):
            self._write(f"  {i}. {card}")

    def decide_turn(self, active_card: Card) -> Action:
        while True:
            self.show_hand()
            self._write(f"Top card: {active_card}")
            raw = self._read("Enter card number to play or 0 to draw: ").strip()
            try:
                choice = int(raw)
            except ValueError:
                self._write("Invalid input. Try again.")
                continue
            if choice == 0:
                return DrawCard()
            if not 1 <= choice <= len(self.hand):
                self._write("Invalid card number. Try again.")
                continue
            if self.hand[choice - 1].can_play_on(active_card):
                return PlayCard(index=choice - 1)
            self._write("Cannot play that card. Try again.")

    def choose_replacement_color(self) -> Color:
        while True:
            raw = self._read(f"Choose a color ({COLOR_MENU}): ").strip()
            try:
                idx = int(raw)
            except ValueError:
                idx = -1
            if 0 <= idx < len(CONCRETE_COLORS):
                return CONCRETE_COLORS[idx]
            self._write("Invalid choice. Try again.")
