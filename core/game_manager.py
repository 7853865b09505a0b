import logging

from models.Game import Game, ViewType
from core.player_manager import PlayerManager
from core.prompt_manager import PromptPool

logger = logging.getLogger(__name__)


class GameManager:
    def __init__(self, prompts):
        self.prompts = list(prompts)  # catalog every new session draws from
        self.active_games = {}  # {chat_id: Game}

    # -------------------------
    # Game lifecycle
    # -------------------------
    def create_game(self, chat_id):
        if chat_id in self.active_games:
            return None
        game = Game(chat_id)
        self.active_games[chat_id] = game
        logger.info("Created game for chat %s", chat_id)
        return game

    def get_game(self, chat_id) -> Game:
        return self.active_games.get(chat_id)

    def get_or_create_game(self, chat_id) -> Game:
        return self.get_game(chat_id) or self.create_game(chat_id)

    def stop_game(self, chat_id):
        if chat_id in self.active_games:
            del self.active_games[chat_id]
            logger.info("Stopped game for chat %s", chat_id)
            return True
        return False

    # -------------------------
    # Navigation
    # -------------------------
    def open_setup(self, chat_id):
        game = self.get_or_create_game(chat_id)
        if game.view == ViewType.GAMEPLAY:
            return None
        game.view = ViewType.PLAYER_SETUP
        return game

    def start_gameplay(self, chat_id):
        """Begin a fresh session with its own prompt pool. None if setup isn't ready."""
        game = self.get_game(chat_id)
        if not game or game.view != ViewType.PLAYER_SETUP:
            return None
        if not PlayerManager.can_start(game):
            return None

        game.start(PromptPool(self.prompts))
        logger.info(
            "Gameplay started in chat %s with %d players and %d prompts",
            chat_id, len(game.players), len(game.pool)
        )
        return game

    def next_mate(self, chat_id):
        game = self.get_game(chat_id)
        if not game or game.view != ViewType.GAMEPLAY:
            return None
        game.advance()
        return game

    def go_home(self, chat_id):
        game = self.get_or_create_game(chat_id)
        game.reset()
        return game
