"""Shared fixtures: a controllable millisecond clock and scripted randomness."""

from __future__ import annotations

import pytest

from colour_task.core.slide_state_machine import SlideStateMachine


class FakeClock:
    """Millisecond time source that only moves when told to."""

    def __init__(self, start_ms: float = 1_000.0) -> None:
        self.now_ms = start_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms

    def advance_seconds(self, seconds: float) -> None:
        self.now_ms += seconds * 1000


class ScriptedRandom:
    """Returns queued draws in order, then ``fallback`` forever."""

    def __init__(self, *values: float, fallback: float = 0.9) -> None:
        self._values = list(values)
        self._fallback = fallback
        self.draws = 0

    def queue(self, *values: float) -> None:
        self._values.extend(values)

    def random(self) -> float:
        self.draws += 1
        if self._values:
            return self._values.pop(0)
        return self._fallback


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def saved_logs() -> list:
    return []


@pytest.fixture
def machine(clock: FakeClock, rng: ScriptedRandom, saved_logs: list) -> SlideStateMachine:
    return SlideStateMachine(time_source=clock, rng=rng, log_sink=saved_logs.append)


@pytest.fixture
def started(machine: SlideStateMachine) -> SlideStateMachine:
    machine.start()
    return machine


def finish_transition(machine: SlideStateMachine, clock: FakeClock) -> None:
    """Let the transition window elapse and process it."""
    clock.advance(100)
    assert machine.tick()
