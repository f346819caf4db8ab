from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of features nobody else holds on to.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# TOKENS
# ============================================================================
EVENT_TOKEN_CHANGED = "token_changed"    # payload: token=str, previous_holder=Player|None, new_holder=Player|None


# ============================================================================
# SCORES & GAMES
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"    # payload: player_index=int, previous=int, current=int, values=tuple[int,...]
EVENT_SCORES_RESET = "scores_reset"      # payload: values=tuple[int,...]
EVENT_GAMES_CHANGED = "games_changed"    # payload: player_index=int, previous=int, current=int, values=tuple[int,...]
EVENT_GAMES_RESET = "games_reset"        # payload: values=tuple[int,...]


# ============================================================================
# GAME & MATCH FLOW
# ============================================================================
EVENT_GAME_STARTED = "game_started"          # payload: None
EVENT_GAME_WON = "game_won"                  # payload: winner=int, scores=tuple[int,...]
EVENT_GAME_FINALIZED = "game_finalized"      # payload: winner=int, scores=tuple[int,...], games=tuple[int,...]
EVENT_GAME_REVOKED = "game_revoked"          # payload: winner=int, scores=tuple[int,...]
EVENT_MATCH_STARTED = "match_started"        # payload: None
EVENT_MATCH_WON = "match_won"                # payload: winner=int, games=tuple[int,...]
EVENT_MATCH_REVOKED = "match_revoked"        # payload: winner=int, games=tuple[int,...]
