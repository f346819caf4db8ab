from score.events.bus import EventBus, EVENT_GAME_REVOKED, EVENT_GAME_WON, EVENT_MATCH_STARTED


class MatchFeature:
    """Counts games won per player across a match."""

    def __init__(self, game, event_bus: EventBus):
        self.game = game
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_GAME_WON, self.on_game_won)
        self.event_bus.subscribe(EVENT_GAME_REVOKED, self.on_game_revoked)

    def on_game_won(self, sender, **payload):
        winner = payload.get("winner")
        if winner is None:
            return
        self.game.games[winner] += 1

    def on_game_revoked(self, sender, **payload):
        winner = payload.get("winner")
        if winner is None or self.game.games[winner] == 0:
            return
        self.game.games[winner] -= 1

    def new_match(self) -> None:
        self.game.scores.reset()
        self.game.games.reset()
        self.event_bus.emit(EVENT_MATCH_STARTED)
