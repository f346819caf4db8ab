from score.events.bus import EventBus, EVENT_MATCH_WON


class MatchWinnerAnnouncer:
    """Says who won the match; single game matches are covered by the game announcer."""

    def __init__(self, game, event_bus: EventBus):
        self.game = game
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MATCH_WON, self.on_match_won)

    def on_match_won(self, sender, **payload):
        winner = payload.get("winner")
        if winner is None or self.game.options.match_length == 1:
            return
        self.game.talker.say(f"{self.game.player_name(winner)} has won the match")
