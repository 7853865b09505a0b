from enum import Enum
from typing import Optional

from core.prompt_manager import FINISHED
from models.Player import Player


class ViewType(Enum):
    HOME = "home"
    PLAYER_SETUP = "player_setup"
    GAMEPLAY = "gameplay"


class Game:
    def __init__(self, chat_id):
        self.chat_id = chat_id
        self.view = ViewType.HOME

        self.player_names = []        # names entered during setup, in entry order
        self.players = []             # [Player], fixed once gameplay starts
        self.pool = None              # PromptPool for the running session
        self.current_index = 0
        self.current_prompt = None

    @property
    def current_player(self) -> Optional[Player]:
        if not self.players:
            return None
        return self.players[self.current_index]

    @property
    def is_finished(self):
        return self.current_prompt == FINISHED

    def start(self, pool):
        """Seat the entered players and reveal the first prompt to player 0."""
        if len(self.player_names) < 2:
            raise ValueError("a gameplay session needs at least two players")

        self.players = [Player(idx, name) for idx, name in enumerate(self.player_names)]
        self.pool = pool
        self.current_index = 0
        self.current_prompt = pool.draw()
        self.view = ViewType.GAMEPLAY

    def advance(self):
        """Draw the next prompt and pass the turn to the next player."""
        self.current_prompt = self.pool.draw()
        self.current_index = (self.current_index + 1) % len(self.players)
        return self.current_prompt

    def reset(self):
        self.view = ViewType.HOME
        self.player_names = []
        self.players = []
        self.pool = None
        self.current_index = 0
        self.current_prompt = None
