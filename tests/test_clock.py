from __future__ import annotations

import pygame
import pytest

from tapsnake import clock as clock_mod
from tapsnake.clock import TICK_EVENT, ManualClock, PygameClock


@pytest.fixture
def timer_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(clock_mod.pygame.time, "set_timer", lambda event, ms: calls.append((event, ms)))
    return calls


def test_pygame_clock_restart_disarms_first(timer_calls) -> None:
    clock = PygameClock(200)
    clock.restart()
    assert clock.running
    assert timer_calls == [(TICK_EVENT, 0), (TICK_EVENT, 200)]


def test_pygame_clock_stop(timer_calls) -> None:
    clock = PygameClock(150)
    clock.restart()
    clock.stop()
    assert not clock.running
    assert timer_calls[-1] == (TICK_EVENT, 0)


def test_pygame_clock_rejects_bad_interval() -> None:
    with pytest.raises(ValueError):
        PygameClock(0)


def test_manual_clock_counts() -> None:
    clock = ManualClock()
    clock.restart()
    clock.restart()
    assert clock.running
    assert clock.restarts == 2
    clock.stop()
    assert not clock.running


def test_pygame_clock_posts_real_tick_events() -> None:
    pygame.init()
    pygame.display.set_mode((10, 10))
    clock = PygameClock(10)
    try:
        pygame.event.clear()
        clock.restart()
        deadline = pygame.time.get_ticks() + 2000
        got = False
        while not got and pygame.time.get_ticks() < deadline:
            got = any(e.type == TICK_EVENT for e in pygame.event.get())
            pygame.time.wait(5)
        assert got

        clock.stop()
        pygame.time.wait(30)
        pygame.event.clear()
        pygame.time.wait(50)
        assert not any(e.type == TICK_EVENT for e in pygame.event.get())
    finally:
        clock.stop()
        pygame.quit()
