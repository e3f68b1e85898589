# session.py
from __future__ import annotations

from .clock import Clock
from .controls import direction_from_tap
from .game import Direction, GameState, Phase


class Session:
    """
    One play session: a GameState plus the clock that drives it.

    Every call is expected from a single event loop, so ticks and input
    never interleave.
    """

    def __init__(self, state: GameState, clock: Clock, cell_size: int, debug: bool = False):
        self.state = state
        self.clock = clock
        self.cell_size = cell_size
        self.debug = debug

    @property
    def running(self) -> bool:
        return self.state.phase is Phase.RUNNING

    def start(self) -> None:
        """(Re)start a round and re-arm the clock."""
        self.state.reset()
        self.clock.restart()
        if self.debug:
            print(f"[GAME] Started at {self.state.head}, food={self.state.food}")
        # a 1x1 board has no room for food
        self._stop_if_finished()

    def on_tick(self) -> None:
        if not self.running:
            return
        score_before = self.state.score
        self.state.tick()
        if self.debug and self.state.score != score_before:
            print(f"[GAME] Ate food, score={self.state.score} best={self.state.high_score}")
        self._stop_if_finished()

    def on_tap(self, x: float, y: float) -> None:
        if not self.running:
            self.start()
            return
        requested = direction_from_tap(x, y, self.state.head, self.cell_size, self.state.direction)
        if requested is not None:
            self.on_direction(requested)

    def on_direction(self, direction: Direction) -> None:
        if self.state.set_direction(direction) and self.debug:
            print(f"[GAME] Direction -> {direction.name}")

    def _stop_if_finished(self) -> None:
        if self.running or not self.clock.running:
            return
        self.clock.stop()
        if self.debug:
            print(f"[GAME] {self.state.phase.name}: score={self.state.score} best={self.state.high_score}")
