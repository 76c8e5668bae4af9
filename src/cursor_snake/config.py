from dataclasses import dataclass
from typing import Optional

# ----- Board -----
GRID_SIZE = 20
CELL_SIZE = 20
BOARD_SIZE = GRID_SIZE * CELL_SIZE

# ----- Window layout -----
HEADER_H = 64                      # title + score strip above the board
BOARD_MARGIN = 24                  # strip left, right and below the board; the pointer can leave the board there
BUTTON_W, BUTTON_H = 180, 48

# ----- Colors -----
BG         = (240, 240, 240)
BOARD_BG   = (34, 34, 34)
HEAD       = (0, 128, 0)
BODY       = (144, 238, 144)
FOOD       = (255, 0, 0)
TEXT       = (20, 20, 24)
WHITE      = (255, 255, 255)
BUTTON     = (230, 230, 230)
BUTTON_TXT = (20, 20, 24)
START_DIM  = (0, 0, 0, 128)        # RGBA
OVER_DIM   = (0, 0, 0, 178)

# ----- Gameplay -----
INITIAL_SNAKE_LENGTH = 5
SPACING = 10                       # path entries between body segments
SPEED = 5.0                        # pixels per tick
COUNTDOWN_FROM = 3
COUNTDOWN_STEP_MS = 1000

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    grid_size: int = GRID_SIZE
    cell_size: int = CELL_SIZE
    initial_length: int = INITIAL_SNAKE_LENGTH
    spacing: int = SPACING
    speed: float = SPEED
    countdown_from: int = COUNTDOWN_FROM
    fps: int = 60
    bound_path: bool = False       # drop path entries that can no longer be sampled

    def __post_init__(self):
        for name in ("grid_size", "cell_size", "initial_length", "spacing", "countdown_from", "fps"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.speed <= 0:
            raise ValueError(f"speed must be positive, got {self.speed!r}")

    @property
    def board_size(self) -> int:
        return self.grid_size * self.cell_size

CFG = Config()
