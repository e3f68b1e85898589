# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterator, List, Optional, Tuple
import random

import numpy as np  # type: ignore

from .config import HIGH_SCORE_KEY, TOP_MARGIN_CELLS, WALL_CELLS
from .store import MemoryStore, PersistentStore

Cell = Tuple[int, int]


# ---------- Enums ----------
class Direction(Enum):
    """Grid step (dx, dy); y grows downward."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    def step(self, cell: Cell) -> Cell:
        dx, dy = self.value
        return (cell[0] + dx, cell[1] + dy)


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"
    WON = "won"          # board filled, nowhere left to put food


class Tile(IntEnum):
    EMPTY = 0
    BODY = 1
    HEAD = 2
    FOOD = 3


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.opposite is b


# ---------- Geometry ----------
@dataclass(frozen=True)
class PlayableRegion:
    """Inclusive cell bounds inside the walls and below the score bar."""
    min_x: int
    max_x: int
    min_y: int
    max_y: int

    def __post_init__(self):
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(f"Empty playable region: {self}")

    @classmethod
    def from_viewport(
        cls,
        width: int,
        height: int,
        cell_size: int,
        wall_cells: int = WALL_CELLS,
        top_margin_cells: int = TOP_MARGIN_CELLS,
    ) -> "PlayableRegion":
        return cls(
            min_x=wall_cells,
            max_x=width // cell_size - wall_cells - 1,
            min_y=top_margin_cells,
            max_y=height // cell_size - wall_cells - 1,
        )

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    @property
    def size(self) -> int:
        return self.width * self.height

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def cells(self) -> Iterator[Cell]:
        for y in range(self.min_y, self.max_y + 1):
            for x in range(self.min_x, self.max_x + 1):
                yield (x, y)


def default_start(region: PlayableRegion) -> Cell:
    """Fifth column, second row of the region, clamped for tiny boards."""
    return (min(region.min_x + 4, region.max_x), min(region.min_y + 1, region.max_y))


# ---------- Snapshot (what the renderer reads) ----------
@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    score: int
    high_score: int
    phase: Phase
    direction: Direction
    region: PlayableRegion

    def to_grid(self) -> np.ndarray:
        """
        Occupancy grid of the playable region, shape (height, width),
        indexed [y - min_y, x - min_x] with Tile values.
        """
        r = self.region
        grid = np.full((r.height, r.width), Tile.EMPTY, dtype=np.int8)
        for x, y in self.snake[1:]:
            grid[y - r.min_y, x - r.min_x] = Tile.BODY
        if self.snake:
            hx, hy = self.snake[0]
            grid[hy - r.min_y, hx - r.min_x] = Tile.HEAD
        if self.food is not None:
            fx, fy = self.food
            grid[fy - r.min_y, fx - r.min_x] = Tile.FOOD
        return grid


# ---------- State ----------
@dataclass
class GameState:
    """
    Snake simulation advanced in discrete ticks.

    Timing is not handled here: a clock calls tick() at a fixed interval and
    input calls set_direction(). Both are no-ops unless phase is RUNNING.
    """
    region: PlayableRegion
    store: PersistentStore = field(default_factory=MemoryStore)
    start: Optional[Cell] = None     # None -> derived from the region
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self):
        if self.start is None:
            self.start = default_start(self.region)
        if not self.region.contains(self.start):
            raise ValueError(f"Start cell {self.start} is outside {self.region}")
        self.snake: List[Cell] = [self.start]   # head at index 0
        self.direction = Direction.RIGHT
        self.heading = Direction.RIGHT      # direction of the last move
        self.food: Optional[Cell] = None
        self.score = 0
        self.high_score = max(0, self.store.get(HIGH_SCORE_KEY, 0))
        self.phase = Phase.NOT_STARTED

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def reset(self) -> None:
        """Start (or restart) a round. The high score carries over."""
        self.snake = [self.start]
        self.direction = Direction.RIGHT
        self.heading = Direction.RIGHT
        self.score = 0
        self.phase = Phase.RUNNING
        self.spawn_food()

    def set_direction(self, requested: Direction) -> bool:
        """Steer the snake; a 180° turn is ignored. Returns True if accepted."""
        if self.phase is not Phase.RUNNING:
            return False
        # the last move counts too, or two turns in one tick could reverse
        if is_opposite(requested, self.direction) or is_opposite(requested, self.heading):
            return False
        self.direction = requested
        return True

    def tick(self) -> bool:
        """
        Advance the game by one cell.
        Returns True if still running afterwards, False otherwise.
        """
        if self.phase is not Phase.RUNNING:
            return False

        new_head = self.direction.step(self.head)

        # Wall or self collision; the snake is left as it was
        if not self.region.contains(new_head) or new_head in self.snake:
            self.phase = Phase.GAME_OVER
            return False

        self.heading = self.direction
        self.snake.insert(0, new_head)
        if new_head == self.food:
            self.score += 1
            if self.score > self.high_score:
                self.high_score = self.score
                self.store.set(HIGH_SCORE_KEY, self.high_score)
            self.spawn_food()
        else:
            self.snake.pop()
        return self.phase is Phase.RUNNING

    def spawn_food(self) -> Optional[Cell]:
        """
        Place food on a uniformly random free cell.
        With no free cell left the round is won and food is cleared.
        """
        occupied = set(self.snake)
        free = [c for c in self.region.cells() if c not in occupied]
        if not free:
            self.food = None
            self.phase = Phase.WON
            return None
        self.food = self.rng.choice(free)
        return self.food

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            phase=self.phase,
            direction=self.direction,
            region=self.region,
        )
