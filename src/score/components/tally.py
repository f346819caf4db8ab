from typing import Iterator, List, Tuple

from score.events.bus import EventBus


class Tally:
    """Per-player counters that announce every change on the event bus.

    Item assignment emits ``changed_event`` with player_index, previous,
    current and a snapshot of all values; reset() emits ``reset_event``.
    """

    def __init__(self, event_bus: EventBus, size: int, changed_event: str, reset_event: str):
        self.event_bus = event_bus
        self.changed_event = changed_event
        self.reset_event = reset_event
        self._values: List[int] = [0] * size

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    def __setitem__(self, index: int, value: int) -> None:
        if value < 0:
            raise ValueError(f"tally values cannot be negative, got {value}")
        previous = self._values[index]
        if previous == value:
            return
        self._values[index] = value
        self.event_bus.emit(
            self.changed_event,
            player_index=index % len(self._values),
            previous=previous,
            current=value,
            values=self.snapshot(),
        )

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __eq__(self, other) -> bool:
        if isinstance(other, Tally):
            return self._values == other._values
        if isinstance(other, (list, tuple)):
            return self._values == list(other)
        return NotImplemented

    def snapshot(self) -> Tuple[int, ...]:
        return tuple(self._values)

    def total(self) -> int:
        return sum(self._values)

    def reset(self) -> None:
        self._values = [0] * len(self._values)
        self.event_bus.emit(self.reset_event, values=self.snapshot())

    def __repr__(self) -> str:
        return f"Tally({self._values!r})"
