"""Game state for a single round."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from unolite.engine.card import Card
from unolite.engine.deck import Deck

if TYPE_CHECKING:
    from unolite.agent.protocol import PlayerProtocol


@dataclass
class GameState:
    """Mutable game state, owned by the turn loop."""

    deck: Deck
    players: List["PlayerProtocol"]
    active_card: Card
    current: int = 0
    direction: int = 1  # 1 = seat order, -1 = reversed
    winner: Optional[str] = None
    history: List[str] = field(default_factory=list)  # Log of events

    @property
    def current_player(self) -> "PlayerProtocol":
        return self.players[self.current]

    def step(self, steps: int = 1) -> int:
        """Seat index `steps` places from the current one in the current direction."""
        return (self.current + steps * self.direction) % len(self.players)

    def following_player(self) -> "PlayerProtocol":
        """The player immediately after the current one."""
        return self.players[self.step()]

    def advance(self, steps: int = 1) -> None:
        self.current = self.step(steps)

    def record(self, event: str) -> None:
        self.history.append(event)
