from typing import Optional, Sequence

from score.events.bus import EventBus, EVENT_SCORE_CHANGED
from score.rules.win_game_by_two import game_winner, is_game_point
from score.rules.win_match_best_of import match_winner


class ScoreCaller:
    """Calls the score after every point, like an umpire.

    Scores are read in player order: "5 3", or "4 all" when level. A player one
    point from the game gets ", game point Player 1" appended, or match point
    when that game would also take the match. Nothing is called on the
    winning point or when a point is taken back.
    """

    def __init__(self, game, event_bus: EventBus):
        self.game = game
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_score_changed)

    def on_score_changed(self, sender, **payload):
        values = payload.get("values")
        if values is None or payload.get("current") != payload.get("previous", 0) + 1:
            return
        options = self.game.options
        if game_winner(values, options.game_length, options.win_by) is not None:
            return
        self.game.talker.say(self.call(values))

    def call(self, scores: Sequence[int]) -> str:
        if len(scores) > 1 and len(set(scores)) == 1:
            text = f"{scores[0]} all"
        else:
            text = " ".join(str(score) for score in scores)
        leader = self._game_point_for(scores)
        if leader is None:
            return text
        games = list(self.game.games)
        games[leader] += 1
        kind = "match point" if match_winner(games, self.game.options.match_length) is not None else "game point"
        return f"{text}, {kind} {self.game.player_name(leader)}"

    def _game_point_for(self, scores: Sequence[int]) -> Optional[int]:
        options = self.game.options
        for index in range(len(scores)):
            if is_game_point(scores, index, options.game_length, options.win_by):
                return index
        return None
