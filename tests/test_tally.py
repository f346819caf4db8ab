import pytest

from score.components.tally import Tally
from score.events.bus import EventBus, EVENT_SCORE_CHANGED, EVENT_SCORES_RESET
from tests.helpers import capture


def _scores(bus: EventBus, size: int = 2) -> Tally:
    return Tally(bus, size, EVENT_SCORE_CHANGED, EVENT_SCORES_RESET)


def test_assignment_emits_change_with_snapshot():
    bus = EventBus()
    scores = _scores(bus)
    changes = capture(bus, EVENT_SCORE_CHANGED)

    scores[1] = 4

    assert scores == [0, 4]
    assert changes == [{"player_index": 1, "previous": 0, "current": 4, "values": (0, 4)}]


def test_augmented_assignment_counts_up():
    bus = EventBus()
    scores = _scores(bus)
    scores[0] += 1
    scores[0] += 1
    assert scores[0] == 2
    assert scores.total() == 2


def test_unchanged_value_is_silent():
    bus = EventBus()
    scores = _scores(bus)
    changes = capture(bus, EVENT_SCORE_CHANGED)
    scores[0] = 0
    assert changes == []


def test_negative_index_reports_player_position():
    bus = EventBus()
    scores = _scores(bus, 3)
    changes = capture(bus, EVENT_SCORE_CHANGED)
    scores[-1] = 2
    assert changes[0]["player_index"] == 2


def test_negative_value_rejected():
    bus = EventBus()
    scores = _scores(bus)
    with pytest.raises(ValueError):
        scores[0] = -1
    assert scores == [0, 0]


def test_out_of_range_index_raises():
    bus = EventBus()
    scores = _scores(bus)
    with pytest.raises(IndexError):
        scores[2] = 1


def test_reset_zeroes_and_emits_single_event():
    bus = EventBus()
    scores = _scores(bus)
    scores[0] = 3
    scores[1] = 5
    changes = capture(bus, EVENT_SCORE_CHANGED)
    resets = capture(bus, EVENT_SCORES_RESET)

    scores.reset()

    assert scores == (0, 0)
    assert changes == []
    assert resets == [{"values": (0, 0)}]
