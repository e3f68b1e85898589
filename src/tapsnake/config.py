from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Window & grid -----
CELL_SIZE = 30
WIDTH, HEIGHT = 600, 780
WALL_CELLS = 1          # walls on the left, right and bottom
TOP_MARGIN_CELLS = 3    # score bar height

# ----- Colors -----
BG      = (191, 130, 55)
TOP_BAR = (16, 35, 43)
WALL    = (255, 173, 74)
DIVIDER = (255, 255, 255)
SNAKE   = (0, 0, 0)
HEAD    = (40, 40, 40)
FOOD    = (220, 30, 30)
TEXT    = (255, 255, 255)

# ----- Persistence -----
HIGH_SCORE_KEY = "HIGHEST_SCORE"
SCORES_FILE = "~/.tapsnake/scores.json"

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None          # None -> fresh food layout each run
    tick_ms: int = 200
    cell_size: int = CELL_SIZE
    start_cell: Optional[Tuple[int, int]] = None   # None -> derived from the region
    scores_file: str = SCORES_FILE

    def __post_init__(self):
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")

CFG = Config()
