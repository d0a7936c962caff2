"""Built-in players."""

from unolite.agents.auto_agent import AutoPlayer
from unolite.agents.base import BasePlayer
from unolite.agents.human_agent import HumanPlayer

__all__ = ["AutoPlayer", "BasePlayer", "HumanPlayer"]
