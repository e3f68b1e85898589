# clock.py
from __future__ import annotations
from typing import Protocol

import pygame  # type: ignore

# Posted on the pygame event queue once per tick
TICK_EVENT = pygame.USEREVENT + 1


class Clock(Protocol):
    running: bool

    def restart(self) -> None: ...

    def stop(self) -> None: ...


class PygameClock:
    """
    Repeating timer built on pygame.time.set_timer.

    Ticks arrive as TICK_EVENT on the same queue as input events, so the
    game is only ever touched from the main loop. pygame keeps at most one
    timer per event type, and restart() disarms it first anyway.
    """

    def __init__(self, interval_ms: int, event_type: int = TICK_EVENT):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.event_type = event_type
        self.running = False

    def restart(self) -> None:
        self.stop()
        pygame.time.set_timer(self.event_type, self.interval_ms)
        self.running = True

    def stop(self) -> None:
        pygame.time.set_timer(self.event_type, 0)
        self.running = False


class ManualClock:
    """Clock that never fires by itself; the caller drives ticks."""

    def __init__(self):
        self.running = False
        self.restarts = 0
        self.stops = 0

    def restart(self) -> None:
        self.stop()
        self.running = True
        self.restarts += 1

    def stop(self) -> None:
        self.running = False
        self.stops += 1
