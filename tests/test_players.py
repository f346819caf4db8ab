from score.components.player import Player, Players


def test_from_names_assigns_positional_ids():
    players = Players.from_names(["Ann", "Bob", "Cat"])
    assert [p.id for p in players] == [0, 1, 2]
    assert players[1] == Player(id=1, name="Bob")
    assert len(players) == 3


def test_default_names_are_one_based():
    players = Players.default()
    assert [p.name for p in players] == ["Player 1", "Player 2"]


def test_players_are_a_read_only_sequence():
    players = Players.default(3)
    assert players[-1].id == 2
    assert players.index(players[1]) == 1
    assert players[0] in players
