from __future__ import annotations

from typing import Iterable

from score.components.game_options import GameOptions
from score.components.player import Players
from score.events.bus import EventBus
from score.game import Game


class RecordingTalker:
    """Talker that keeps every announcement in order."""

    def __init__(self):
        self.lines: list[str] = []

    def say(self, text: str) -> None:
        self.lines.append(text)

    def clear(self) -> None:
        self.lines.clear()


def capture(bus: EventBus, name: str) -> list[dict]:
    """Subscribe to ``name`` and return the list every payload is appended to."""

    received: list[dict] = []

    def handler(sender, **payload):
        received.append(payload)

    bus.subscribe(name, handler)
    return received


def make_game(
    bus: EventBus,
    options: GameOptions | None = None,
    *,
    player_names: Iterable[str] | None = None,
) -> Game:
    """Bare game state with a recording talker and nothing attached."""

    players = Players.from_names(player_names) if player_names is not None else None
    return Game(bus, options=options, players=players, talker=RecordingTalker())
