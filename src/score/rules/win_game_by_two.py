import logging
from typing import Optional, Sequence

from score.events.bus import (
    EventBus,
    EVENT_GAME_FINALIZED,
    EVENT_GAME_REVOKED,
    EVENT_GAME_WON,
    EVENT_SCORE_CHANGED,
)

logger = logging.getLogger(__name__)


def game_winner(scores: Sequence[int], game_length: int, win_by: int = 2) -> Optional[int]:
    """Return the index of the player who has won the game, if any.

    A player wins once they reach game_length with a lead of at least win_by
    over every other player.
    """
    for index, score in enumerate(scores):
        if score < game_length:
            continue
        best_other = max((s for i, s in enumerate(scores) if i != index), default=0)
        if score - best_other >= win_by:
            return index
    return None


def is_game_point(scores: Sequence[int], player_index: int, game_length: int, win_by: int = 2) -> bool:
    """True when one more point for player_index would win the game."""
    if game_winner(scores, game_length, win_by) is not None:
        return False
    after = list(scores)
    after[player_index] += 1
    return game_winner(after, game_length, win_by) == player_index


class WinGameByTwoRule:
    """Decides games from score changes.

    On the score change that produces a winner, emits EVENT_GAME_WON so state
    features can react, then EVENT_GAME_FINALIZED carrying the games tally as
    it stands after those reactions. A score change that takes the winner
    away again (an undone point) emits EVENT_GAME_REVOKED.
    """

    def __init__(self, game, event_bus: EventBus):
        self.game = game
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_score_changed)

    def on_score_changed(self, sender, **payload):
        values = payload.get("values")
        index = payload.get("player_index")
        if values is None or index is None:
            return
        before = list(values)
        before[index] = payload.get("previous", 0)
        options = self.game.options
        winner_before = game_winner(before, options.game_length, options.win_by)
        winner_after = game_winner(values, options.game_length, options.win_by)
        if winner_before == winner_after:
            return
        if winner_before is not None:
            logger.debug("game win for player %d revoked at %s", winner_before, values)
            self.event_bus.emit(EVENT_GAME_REVOKED, winner=winner_before, scores=tuple(before))
        if winner_after is not None:
            logger.debug("player %d won the game %s", winner_after, values)
            self.event_bus.emit(EVENT_GAME_WON, winner=winner_after, scores=tuple(values))
            self.event_bus.emit(
                EVENT_GAME_FINALIZED,
                winner=winner_after,
                scores=tuple(values),
                games=self.game.games.snapshot(),
            )
