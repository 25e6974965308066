"""Terminal front end driving a round of war."""

from .game_ui import GameUI

__all__ = ["GameUI"]
