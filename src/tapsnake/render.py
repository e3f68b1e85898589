# render.py
from typing import Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import BG, TOP_BAR, WALL, DIVIDER, SNAKE, HEAD, FOOD, TEXT
from .game import Phase, Snapshot, Tile

TILE_COLORS = {
    Tile.BODY: SNAKE,
    Tile.HEAD: HEAD,
    Tile.FOOD: FOOD,
}

OVERLAY_TEXT = {
    Phase.NOT_STARTED: "Tap to start",
    Phase.GAME_OVER: "Game over - tap to restart",
    Phase.WON: "You win! - tap to restart",
}

# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, cell_size: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * cell_size, gy * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect)

# ---------- Draw ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, cell_size: int) -> None:
    width, height = screen.get_size()
    region = snap.region
    bar_h = region.min_y * cell_size
    wall_w = region.min_x * cell_size
    floor_y = (region.max_y + 1) * cell_size
    right_x = (region.max_x + 1) * cell_size

    # top bar + background
    screen.fill(BG)
    pygame.draw.rect(screen, TOP_BAR, pygame.Rect(0, 0, width, bar_h))

    # scores
    score_txt = font.render(f"Score: {snap.score}", True, TEXT)
    best_txt = font.render(f"Best: {snap.high_score}", True, TEXT)
    text_y = (bar_h - score_txt.get_height()) // 2
    screen.blit(score_txt, (16, text_y))
    screen.blit(best_txt, (width - best_txt.get_width() - 16, text_y))

    pygame.draw.line(screen, DIVIDER, (0, bar_h), (width, bar_h), 3)

    # walls: left, right, bottom
    pygame.draw.rect(screen, WALL, pygame.Rect(0, bar_h, wall_w, height - bar_h))
    pygame.draw.rect(screen, WALL, pygame.Rect(right_x, bar_h, width - right_x, height - bar_h))
    pygame.draw.rect(screen, WALL, pygame.Rect(0, floor_y, width, height - floor_y))

    # snake + food, one pass over the occupied tiles
    grid = snap.to_grid()
    for row, col in np.argwhere(grid != Tile.EMPTY):
        color = TILE_COLORS[Tile(int(grid[row, col]))]
        draw_cell(screen, region.min_x + int(col), region.min_y + int(row), cell_size, color)

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    """Dim the board and show a hint whenever the game is not running."""
    message = OVERLAY_TEXT.get(snap.phase)
    if message is None:
        return
    width, height = screen.get_size()

    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    title = font.render(message, True, TEXT)
    sco = font.render(f"Score: {snap.score}   Best: {snap.high_score}", True, TEXT)
    screen.blit(title, title.get_rect(center=(width // 2, height // 2 - 16)))
    screen.blit(sco, sco.get_rect(center=(width // 2, height // 2 + 20)))
