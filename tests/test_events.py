import dataclasses

import pytest

from events import AnswerResult, DeadlinePenalty, EventBus, RoundWon, TurnAdvanced


def test_events_are_frozen():
    event = DeadlinePenalty(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.remaining_health = 5


def test_bus_keeps_a_log_in_order(bus):
    bus.publish(TurnAdvanced(0))
    bus.publish(AnswerResult(0, True))
    bus.publish(RoundWon(None))
    assert bus.history == [TurnAdvanced(0), AnswerResult(0, True), RoundWon(None)]
    assert bus.of_type(RoundWon) == [RoundWon(None)]
    assert bus.of_type(TurnAdvanced, AnswerResult) == bus.history[:2]


def test_listeners_called_in_subscription_order():
    bus = EventBus()
    calls = []
    first = lambda e: calls.append(("first", e))
    second = lambda e: calls.append(("second", e))
    bus.subscribe(first)
    bus.subscribe(second)
    bus.publish(TurnAdvanced(3))
    assert calls == [("first", TurnAdvanced(3)), ("second", TurnAdvanced(3))]
    bus.unsubscribe(first)
    bus.publish(TurnAdvanced(4))
    assert calls[-1] == ("second", TurnAdvanced(4))
    assert len(calls) == 3


def test_listener_errors_propagate(bus):
    def broken(event):
        raise RuntimeError("boom")
    bus.subscribe(broken)
    with pytest.raises(RuntimeError):
        bus.publish(TurnAdvanced(0))
