from config import MAX_PLAYERS, MIN_PLAYERS
from utils.helpers import clean_name


class PlayerManager:
    @staticmethod
    def add_player(game, name):
        """Add a mate to the setup roster. Returns the stored name, or None if rejected."""
        name = clean_name(name)
        if not name:
            return None
        if len(game.player_names) >= MAX_PLAYERS:
            return None
        if name.casefold() in (n.casefold() for n in game.player_names):
            return None
        game.player_names.append(name)
        return name

    @staticmethod
    def remove_player(game, name):
        name = clean_name(name).casefold()
        for idx, existing in enumerate(game.player_names):
            if existing.casefold() == name:
                del game.player_names[idx]
                return True
        return False

    @staticmethod
    def is_full(game):
        return len(game.player_names) >= MAX_PLAYERS

    @staticmethod
    def can_start(game):
        return len([n for n in game.player_names if n]) >= MIN_PLAYERS
