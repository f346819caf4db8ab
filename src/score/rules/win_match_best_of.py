import logging
from typing import Optional, Sequence

from score.events.bus import EventBus, EVENT_GAMES_CHANGED, EVENT_MATCH_REVOKED, EVENT_MATCH_WON

logger = logging.getLogger(__name__)


def match_winner(games: Sequence[int], match_length: int) -> Optional[int]:
    """Return the index of the player who took a majority of match_length games."""
    needed = match_length // 2 + 1
    for index, won in enumerate(games):
        if won >= needed:
            return index
    return None


class WinMatchBestOfRule:
    """Emits EVENT_MATCH_WON / EVENT_MATCH_REVOKED when the games tally crosses the best-of line."""

    def __init__(self, game, event_bus: EventBus):
        self.game = game
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_GAMES_CHANGED, self.on_games_changed)

    def on_games_changed(self, sender, **payload):
        values = payload.get("values")
        index = payload.get("player_index")
        if values is None or index is None:
            return
        before = list(values)
        before[index] = payload.get("previous", 0)
        match_length = self.game.options.match_length
        winner_before = match_winner(before, match_length)
        winner_after = match_winner(values, match_length)
        if winner_before == winner_after:
            return
        if winner_before is not None:
            logger.debug("match win for player %d revoked at %s", winner_before, values)
            self.event_bus.emit(EVENT_MATCH_REVOKED, winner=winner_before, games=tuple(before))
        if winner_after is not None:
            logger.debug("player %d won the match %s", winner_after, values)
            self.event_bus.emit(EVENT_MATCH_WON, winner=winner_after, games=tuple(values))
