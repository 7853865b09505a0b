from core.game_manager import GameManager
from core.player_manager import PlayerManager
from core.prompt_manager import FINISHED
from models.Game import ViewType

CHAT = 100


def ready_manager(names=("Alice", "Bob"), prompts=("A", "B", "C")):
    manager = GameManager(prompts)
    game = manager.open_setup(CHAT)
    for name in names:
        PlayerManager.add_player(game, name)
    return manager


def test_create_game_once_per_chat():
    manager = GameManager(["A"])

    assert manager.create_game(CHAT) is not None
    assert manager.create_game(CHAT) is None
    assert manager.get_or_create_game(CHAT) is manager.get_game(CHAT)


def test_stop_game():
    manager = GameManager(["A"])
    manager.create_game(CHAT)

    assert manager.stop_game(CHAT)
    assert manager.get_game(CHAT) is None
    assert not manager.stop_game(CHAT)


def test_open_setup_from_home():
    manager = GameManager(["A"])

    game = manager.open_setup(CHAT)

    assert game.view == ViewType.PLAYER_SETUP


def test_open_setup_refused_during_gameplay():
    manager = ready_manager()
    manager.start_gameplay(CHAT)

    assert manager.open_setup(CHAT) is None
    assert manager.get_game(CHAT).view == ViewType.GAMEPLAY


def test_start_gameplay_needs_two_players():
    manager = ready_manager(names=("Alice",))

    assert manager.start_gameplay(CHAT) is None
    assert manager.get_game(CHAT).view == ViewType.PLAYER_SETUP


def test_start_gameplay_outside_setup_is_refused():
    manager = GameManager(["A"])
    manager.create_game(CHAT)

    assert manager.start_gameplay(CHAT) is None
    assert manager.start_gameplay(999) is None


def test_each_session_gets_a_fresh_pool():
    manager = ready_manager(prompts=("A", "B"))
    first = manager.start_gameplay(CHAT)
    first.advance()
    assert first.advance() == FINISHED

    manager.go_home(CHAT)
    game = manager.open_setup(CHAT)
    PlayerManager.add_player(game, "Carol")
    PlayerManager.add_player(game, "Dave")
    second = manager.start_gameplay(CHAT)

    assert second.pool.remaining == 1
    assert second.current_prompt in {"A", "B"}


def test_next_mate_only_during_gameplay():
    manager = ready_manager()
    assert manager.next_mate(CHAT) is None

    manager.start_gameplay(CHAT)
    game = manager.next_mate(CHAT)

    assert game.current_index == 1
    assert game.current_player.name == "Bob"


def test_go_home_discards_session():
    manager = ready_manager()
    manager.start_gameplay(CHAT)

    game = manager.go_home(CHAT)

    assert game.view == ViewType.HOME
    assert game.pool is None
    assert game.player_names == []
    assert manager.next_mate(CHAT) is None
