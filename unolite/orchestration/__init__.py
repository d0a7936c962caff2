"""Game orchestration."""

from unolite.orchestration.game_runner import GameResult, GameRunner

__all__ = ["GameResult", "GameRunner"]
