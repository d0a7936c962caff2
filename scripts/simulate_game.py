"""Simulate a game between automated players."""

import sys

from unolite.agents import AutoPlayer
from unolite.engine import EmptyDeckError
from unolite.orchestration.game_runner import GameRunner


def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 42
    players = [AutoPlayer("AI-1"), AutoPlayer("AI-2"), AutoPlayer("AI-3")]

    runner = GameRunner(players, seed=seed, echo=lambda event: print(f"> {event.strip()}"))
    try:
        result = runner.run()
    except EmptyDeckError as e:
        print(f"Deck exhausted after {len(runner.last_state.history)} events: {e}")
        return 1

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")
    for p in players:
        print(f"  {p.name}: {len(p.hand)} cards left")
    return 0


if __name__ == "__main__":
    sys.exit(main())
