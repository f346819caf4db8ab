from score.events.bus import EventBus, EVENT_GAME_FINALIZED
from score.rules.win_match_best_of import match_winner


class GameWinnerAnnouncer:
    """Says who won the game.

    Stays quiet when the same game decided the match, leaving that to the
    match announcer, except in single game matches where the game is the match.
    """

    def __init__(self, game, event_bus: EventBus):
        self.game = game
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_GAME_FINALIZED, self.on_game_finalized)

    def on_game_finalized(self, sender, **payload):
        winner = payload.get("winner")
        if winner is None:
            return
        match_length = self.game.options.match_length
        games = payload.get("games", self.game.games.snapshot())
        if match_length != 1 and match_winner(games, match_length) is not None:
            return
        self.game.talker.say(f"{self.game.player_name(winner)} has won the game")
