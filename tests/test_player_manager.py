from config import MAX_PLAYERS
from core.player_manager import PlayerManager
from models.Game import Game


def test_add_player_cleans_name():
    game = Game(chat_id=1)

    assert PlayerManager.add_player(game, "  Mary   Jane ") == "Mary Jane"
    assert game.player_names == ["Mary Jane"]


def test_blank_names_are_rejected():
    game = Game(chat_id=1)

    assert PlayerManager.add_player(game, "   ") is None
    assert PlayerManager.add_player(game, "") is None
    assert game.player_names == []


def test_duplicate_names_are_rejected_case_insensitively():
    game = Game(chat_id=1)
    PlayerManager.add_player(game, "Alice")

    assert PlayerManager.add_player(game, "alice") is None
    assert game.player_names == ["Alice"]


def test_table_is_capped():
    game = Game(chat_id=1)
    for i in range(MAX_PLAYERS):
        assert PlayerManager.add_player(game, f"mate {i}")

    assert PlayerManager.is_full(game)
    assert PlayerManager.add_player(game, "one too many") is None
    assert len(game.player_names) == MAX_PLAYERS


def test_remove_player():
    game = Game(chat_id=1)
    PlayerManager.add_player(game, "Alice")
    PlayerManager.add_player(game, "Bob")

    assert PlayerManager.remove_player(game, "ALICE")
    assert game.player_names == ["Bob"]
    assert not PlayerManager.remove_player(game, "Carol")


def test_can_start_needs_two_names():
    game = Game(chat_id=1)
    assert not PlayerManager.can_start(game)

    PlayerManager.add_player(game, "Alice")
    assert not PlayerManager.can_start(game)

    PlayerManager.add_player(game, "Bob")
    assert PlayerManager.can_start(game)
