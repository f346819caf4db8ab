from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, overload

from score.constants import PLAYER_COUNT, PLAYER_NAME_TEMPLATE


@dataclass(frozen=True, slots=True)
class Player:
    """A participant identified by its zero-based position in Players."""
    id: int
    name: str


class Players(Sequence):
    """Ordered, fixed-size list of players.

    Player ids are expected to match their positions; from_names guarantees it,
    direct construction leaves it to the caller.
    """

    def __init__(self, players: Iterable[Player] = ()):
        self._players: Tuple[Player, ...] = tuple(players)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "Players":
        return cls(Player(id=index, name=name) for index, name in enumerate(names))

    @classmethod
    def default(cls, count: int = PLAYER_COUNT) -> "Players":
        return cls.from_names(PLAYER_NAME_TEMPLATE.format(number=n + 1) for n in range(count))

    @overload
    def __getitem__(self, index: int) -> Player: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Player, ...]: ...

    def __getitem__(self, index):
        return self._players[index]

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __repr__(self) -> str:
        return f"Players({list(self._players)!r})"
