from score.events.bus import EventBus, EVENT_GAME_STARTED
from score.rules.win_game_by_two import game_winner
from score.rules.win_match_best_of import match_winner


class ScoresFeature:
    """Point keeping for the current game.

    Points are refused once the game or the match is decided; call new_game()
    (or MatchFeature.new_match()) to carry on.
    """

    def __init__(self, game, event_bus: EventBus):
        self.game = game
        self.event_bus = event_bus

    def game_decided(self) -> bool:
        options = self.game.options
        return game_winner(self.game.scores, options.game_length, options.win_by) is not None

    def match_decided(self) -> bool:
        return match_winner(self.game.games, self.game.options.match_length) is not None

    def award_point(self, player_index: int) -> bool:
        if self.game_decided() or self.match_decided():
            return False
        self.game.scores[player_index] += 1
        return True

    def remove_point(self, player_index: int) -> bool:
        """Undo a point. Allowed after the game was decided so a mistaken winner can be taken back."""
        if self.game.scores[player_index] == 0:
            return False
        self.game.scores[player_index] -= 1
        return True

    def new_game(self) -> bool:
        if self.match_decided():
            return False
        self.game.scores.reset()
        self.event_bus.emit(EVENT_GAME_STARTED)
        return True
