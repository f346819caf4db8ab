from dataclasses import dataclass, fields
from typing import Any, Mapping

from score.constants import GAME_LENGTH, MATCH_LENGTH, SERVE_INTERVAL, WIN_BY
from score.errors import GameOptionsError

# Keys used by the browser version of the score keeper.
_CAMEL_CASE_KEYS = {
    "gameLength": "game_length",
    "matchLength": "match_length",
    "winBy": "win_by",
    "serveInterval": "serve_interval",
}


@dataclass
class GameOptions:
    """Per-game configuration shared by rules and features.

    Mutable on purpose: rules read the values when an event fires, so a change
    made after setup applies to the next point. Every assignment, including
    the ones made by __init__, is checked and a bad value leaves the previous
    one in place.
    """
    game_length: int = GAME_LENGTH
    match_length: int = MATCH_LENGTH
    win_by: int = WIN_BY
    serve_interval: int = SERVE_INTERVAL

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _OPTION_NAMES:
            _check_option(name, value)
        super().__setattr__(name, value)

    def validate(self) -> None:
        for f in fields(self):
            _check_option(f.name, getattr(self, f.name))

    @property
    def games_to_win(self) -> int:
        return self.match_length // 2 + 1

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "GameOptions":
        """Build options from snake_case or camelCase keys; missing keys use defaults."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in config.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                raise GameOptionsError(f"unknown game option {key!r}")
            values[name] = value
        return cls(**values)


_OPTION_NAMES = frozenset(f.name for f in fields(GameOptions))


def _check_option(name: str, value: Any) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise GameOptionsError(f"{name} must be a positive integer, got {value!r}")
