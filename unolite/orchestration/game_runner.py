"""Single game runner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional

from unolite.engine import (
    Deck,
    GameState,
    apply_action,
    create_deck,
    init_game,
)

if TYPE_CHECKING:
    from unolite.agent.protocol import PlayerProtocol


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: str
    num_turns: int
    player_names: tuple[str, ...]
    history: tuple[str, ...]


class GameRunner:
    """Runs a single game to completion.

    There is no turn cap: every turn takes a card out of the deck or out of
    play, so the game ends in a win or an EmptyDeckError, which propagates.
    """

    def __init__(
        self,
        players: List["PlayerProtocol"],
        seed: Optional[int] = None,
        deck: Optional[Deck] = None,
        echo: Optional[Callable[[str], None]] = None,
    ):
        self._players = players
        self._seed = seed
        self._deck = deck
        self._echo = echo
        self._seen = 0
        self.last_state: Optional[GameState] = None

    def _emit(self, message: str) -> None:
        if self._echo is not None:
            self._echo(message)

    def _flush_history(self, state: GameState) -> None:
        for event in state.history[self._seen:]:
            self._emit(event)
        self._seen = len(state.history)

    def run(self) -> GameResult:
        """Run the game and return the result."""
        deck = self._deck if self._deck is not None else create_deck(seed=self._seed)
        self._seen = 0
        state = init_game(self._players, deck)
        self.last_state = state
        self._flush_history(state)
        num_turns = 0

        while state.winner is None:
            player = state.current_player
            self._emit(f"\n{player.name}'s turn.")
            action = player.decide_turn(state.active_card)
            try:
                state = apply_action(state, action)
            finally:
                self._flush_history(state)
            num_turns += 1

        return GameResult(
            winner=state.winner,
            num_turns=num_turns,
            player_names=tuple(p.name for p in self._players),
            history=tuple(state.history),
        )
