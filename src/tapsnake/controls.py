# controls.py
from typing import Optional

import pygame  # type: ignore

from .game import Cell, Direction

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}


def direction_from_tap(
    x: float,
    y: float,
    head: Cell,
    cell_size: int,
    current: Direction,
) -> Optional[Direction]:
    """
    Turn a tap (in pixels) into a direction relative to the head's cell.

    Vertical intent wins over horizontal: above the head -> UP, below -> DOWN,
    then left -> LEFT, right -> RIGHT. A candidate that would reverse the
    snake is skipped so the next axis gets a chance. Taps on the head itself
    resolve to None.
    """
    hx, hy = head
    if current is not Direction.DOWN and y < hy * cell_size:
        return Direction.UP
    if current is not Direction.UP and y > (hy + 1) * cell_size:
        return Direction.DOWN
    if current is not Direction.RIGHT and x < hx * cell_size:
        return Direction.LEFT
    if current is not Direction.LEFT and x > (hx + 1) * cell_size:
        return Direction.RIGHT
    return None


def direction_from_key(key: int) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key)
