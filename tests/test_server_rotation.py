from score.components.game_options import GameOptions
from score.events.bus import EventBus, EVENT_TOKEN_CHANGED
from score.game import create_game
from tests.helpers import capture


def _game(options: GameOptions | None = None, **kwargs):
    bus = EventBus()
    game = create_game(bus, options, with_announcers=False, **kwargs)
    return bus, game


def _server_id(game) -> int:
    return game.server.current().id


def test_first_server_defaults_to_first_player():
    _, game = _game()
    assert _server_id(game) == 0


def test_first_server_can_be_chosen():
    _, game = _game(first_server=1)
    assert _server_id(game) == 1


def test_serve_passes_every_two_points():
    _, game = _game()
    servers = []
    for _ in range(5):
        game.scoring.award_point(0)
        servers.append(_server_id(game))
    assert servers == [0, 1, 1, 0, 0]


def test_serve_passes_every_point_at_deuce():
    _, game = _game()
    for _ in range(10):
        game.scoring.award_point(0)
        game.scoring.award_point(1)
    assert game.scores == [10, 10]
    assert _server_id(game) == 0

    game.scoring.award_point(0)
    assert _server_id(game) == 1
    game.scoring.award_point(1)
    assert _server_id(game) == 0


def test_undoing_point_passes_serve_back():
    _, game = _game()
    game.scoring.award_point(0)
    game.scoring.award_point(1)
    assert _server_id(game) == 1

    game.scoring.remove_point(1)
    assert _server_id(game) == 0
    game.scoring.remove_point(0)
    assert _server_id(game) == 0


def test_server_changes_are_announced_on_bus():
    bus, game = _game()
    changes = capture(bus, EVENT_TOKEN_CHANGED)
    game.scoring.award_point(0)
    game.scoring.award_point(0)
    assert [(c["token"], c["new_holder"].id) for c in changes] == [("server", 1)]


def test_new_game_opens_with_next_player():
    _, game = _game()
    for _ in range(11):
        game.scoring.award_point(0)
    game.scoring.new_game()
    assert _server_id(game) == 1

    for _ in range(11):
        game.scoring.award_point(1)
    game.match.new_match()
    assert _server_id(game) == 0


def test_doubles_rotate_through_all_four_players():
    _, game = _game(player_names=["Ann", "Bob", "Cat", "Dan"])
    servers = []
    for _ in range(4):
        game.scoring.award_point(0)
        game.scoring.award_point(1)
        servers.append(game.server.current().name)
    assert servers == ["Bob", "Cat", "Dan", "Ann"]


def test_serve_interval_option():
    _, game = _game(options=GameOptions(game_length=21, serve_interval=5))
    for _ in range(4):
        game.scoring.award_point(0)
    assert _server_id(game) == 0
    game.scoring.award_point(1)
    assert _server_id(game) == 1
