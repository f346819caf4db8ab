from typing import Optional, Sequence

from score.components.player import Player
from score.components.token import Token
from score.components.token_ring import TokenRing
from score.constants import SERVER_TOKEN
from score.events.bus import EventBus, EVENT_GAME_STARTED, EVENT_MATCH_STARTED, EVENT_SCORE_CHANGED


class ServerFeature:
    """Tracks who serves by passing a server token around the players.

    The serve passes every ``serve_interval`` points, and every point once all
    players reach deuce. Undoing a point that passed the serve passes it back.
    Each new game opens with the player after the previous game's opener.
    """

    def __init__(self, game, event_bus: EventBus, *, first_server: Optional[int] = None):
        self.game = game
        self.event_bus = event_bus
        self.token = Token(SERVER_TOKEN, event_bus)
        self.ring = TokenRing(game.players, self.token)
        if first_server is None:
            self.ring.next()
        else:
            self.token.assign(game.players[first_server])
        self.match_opener = self.token.current_holder()
        self.game_opener = self.match_opener
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_score_changed)
        self.event_bus.subscribe(EVENT_GAME_STARTED, self.on_game_started)
        self.event_bus.subscribe(EVENT_MATCH_STARTED, self.on_match_started)

    def current(self) -> Optional[Player]:
        return self.token.current_holder()

    def serve_passes_after(self, scores: Sequence[int]) -> bool:
        """True when the point that produced ``scores`` ends a service turn."""
        options = self.game.options
        if scores and all(score >= options.game_length - 1 for score in scores):
            return True
        return sum(scores) % options.serve_interval == 0

    def on_score_changed(self, sender, **payload):
        values = payload.get("values")
        index = payload.get("player_index")
        previous = payload.get("previous", 0)
        current = payload.get("current", 0)
        if values is None or index is None:
            return
        # Only single point steps move the serve; bulk corrections leave it alone.
        if current == previous + 1:
            if self.serve_passes_after(values):
                self.ring.next()
        elif current == previous - 1:
            before = list(values)
            before[index] = previous
            if self.serve_passes_after(before):
                self.ring.previous()

    def on_game_started(self, sender, **payload):
        self.token.assign(self.game_opener)
        self.ring.next()
        self.game_opener = self.token.current_holder()

    def on_match_started(self, sender, **payload):
        self.token.assign(self.match_opener)
        self.game_opener = self.match_opener
