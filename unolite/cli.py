"""CLI entry point."""

from __future__ import annotations

from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Shedding card game with human and automated players")


def _parse_players(player_specs: str) -> list["PlayerProtocol"]:
    from unolite.agent.protocol import PlayerProtocol
    from unolite.agents.auto_agent import AutoPlayer
    from unolite.agents.human_agent import HumanPlayer

    parts = [s.strip().lower() for s in player_specs.split(",") if s.strip()]
    players: list[PlayerProtocol] = []
    humans = autos = 0
    for kind in parts:
        if kind == "human":
            humans += 1
            players.append(HumanPlayer(name="You" if humans == 1 else f"You-{humans}"))
        elif kind == "auto":
            autos += 1
            players.append(AutoPlayer(name=f"AI-{autos}"))
        else:
            raise typer.BadParameter(f"Unknown player type: {kind}. Use 'human' or 'auto'.")
    if len(players) < 2:
        raise typer.BadParameter("At least 2 players are required.")
    return players


@app.callback()
def main() -> None:
    """Shedding card game with human and automated players."""


@app.command()
def play(
    players: str = typer.Option(
        "human,auto,auto",
        "--players",
        "-p",
        envvar="UNOLITE_PLAYERS",
        help="Comma-separated seats in turn order: human or auto (e.g. human,auto,auto)",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        "-s",
        envvar="UNOLITE_SEED",
        help="Random seed for the shuffle",
    ),
) -> None:
    """Play a single game."""
    from unolite.engine import EmptyDeckError
    from unolite.orchestration.game_runner import GameRunner

    seats = _parse_players(players)
    runner = GameRunner(seats, seed=seed, echo=typer.echo)
    try:
        result = runner.run()
    except EmptyDeckError as e:
        typer.echo(f"Deck exhausted: {e}. The game cannot continue.", err=True)
        raise typer.Exit(code=1)
    except EOFError:
        raise typer.Abort()
    typer.echo(f"\n{result.winner} wins!")
    typer.echo(f"Turns: {result.num_turns}")


if __name__ == "__main__":
    app()
