import logging
from typing import Optional

from score.components.player import Player
from score.events.bus import EventBus, EVENT_TOKEN_CHANGED

logger = logging.getLogger(__name__)


class Token:
    """Mutable slot referencing at most one player (server, dealer, ...).

    When an event bus is attached, EVENT_TOKEN_CHANGED is emitted every time the
    holder actually changes. Assigning the current holder again is silent.
    """

    def __init__(self, name: str = "token", event_bus: Optional[EventBus] = None, holder: Optional[Player] = None):
        self.name = name
        self.event_bus = event_bus
        self._holder = holder

    def current_holder(self) -> Optional[Player]:
        return self._holder

    def is_assigned(self) -> bool:
        return self._holder is not None

    def assign(self, player: Optional[Player]) -> None:
        previous = self._holder
        if previous == player:
            return
        self._holder = player
        logger.debug("token %s passed from %s to %s", self.name, previous, player)
        if self.event_bus is not None:
            self.event_bus.emit(
                EVENT_TOKEN_CHANGED,
                token=self.name,
                previous_holder=previous,
                new_holder=player,
            )

    def clear(self) -> None:
        self.assign(None)

    def __repr__(self) -> str:
        return f"Token(name={self.name!r}, holder={self._holder!r})"
