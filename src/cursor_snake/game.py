# game.py
from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import pygame # type: ignore

from .config import (
    CFG, Config,
    HEADER_H, BOARD_MARGIN, BUTTON_W, BUTTON_H, COUNTDOWN_STEP_MS,
    BG, BOARD_BG, HEAD, BODY, FOOD, TEXT, WHITE, BUTTON, BUTTON_TXT,
    START_DIM, OVER_DIM,
)
from .motion import (
    Point,
    advance_head, check_bounds, check_food_collision,
    sample_segments, spawn_food, trim_path,
)

logger = logging.getLogger(__name__)

# Fired once per second while the start countdown runs
COUNTDOWN_EVENT = pygame.USEREVENT + 1


class Phase(enum.Enum):
    """Session phase: NOT_STARTED -> COUNTDOWN -> PLAYING -> GAME_OVER, back to NOT_STARTED on reset."""

    NOT_STARTED = "not-started"
    COUNTDOWN = "countdown"
    PLAYING = "playing"
    GAME_OVER = "game-over"


# ---------- State ----------
@dataclass
class GameState:
    path: List[Point]              # head history, newest last
    target: Optional[Point]        # last pointer position (board-local)
    snake_length: int
    food: Point
    countdown: Optional[int]       # None = not started, >0 counting, 0 = playing
    game_over: bool
    cfg: Config = field(default_factory=Config)
    rng: random.Random = field(default_factory=random.Random)

    @property
    def phase(self) -> Phase:
        if self.game_over:
            return Phase.GAME_OVER
        if self.countdown is None:
            return Phase.NOT_STARTED
        if self.countdown > 0:
            return Phase.COUNTDOWN
        return Phase.PLAYING

    @property
    def head(self) -> Optional[Point]:
        return self.path[-1] if self.path else None

    @property
    def score(self) -> int:
        return self.snake_length - self.cfg.initial_length

    @property
    def board_size(self) -> int:
        return self.cfg.board_size


def new_game_state(cfg: Config = CFG, rng: Optional[random.Random] = None) -> GameState:
    rng = rng or random.Random(cfg.seed)
    return GameState(
        path=[],
        target=None,
        snake_length=cfg.initial_length,
        food=spawn_food(rng, cfg.grid_size, cfg.cell_size),
        countdown=None,
        game_over=False,
        cfg=cfg,
        rng=rng,
    )


# ---------- Commands ----------
def _clear_session(state: GameState) -> None:
    state.game_over = False
    state.snake_length = state.cfg.initial_length
    state.path = []
    state.food = spawn_food(state.rng, state.cfg.grid_size, state.cfg.cell_size)
    state.target = None


def start_game(state: GameState) -> None:
    """Reset everything and begin the countdown."""
    _clear_session(state)
    state.countdown = state.cfg.countdown_from
    logger.info("Game started, countdown from %d", state.countdown)


def reset_game(state: GameState) -> None:
    """Back to the start prompt, no countdown."""
    _clear_session(state)
    state.countdown = None
    logger.info("Game reset")


def tick_countdown(state: GameState) -> Phase:
    """One second of countdown. Does nothing unless counting."""
    if state.phase is Phase.COUNTDOWN:
        state.countdown -= 1
        if state.countdown == 0:
            logger.info("Countdown finished, playing")
    return state.phase


# ---------- Update ----------
def set_target(state: GameState, x: float, y: float) -> bool:
    """
    Record a pointer position. Ignored unless playing.
    The first position on the board also seeds the path so the head appears under the pointer;
    off-board positions before that are ignored. Afterwards the target may lie off the board,
    which is how the head gets steered into the wall.
    """
    if state.phase is not Phase.PLAYING:
        return False
    if not state.path and not check_bounds((x, y), state.board_size):
        return False

    state.target = (x, y)
    if not state.path:
        state.path = [(x, y)]
        check_food(state)
    return True


def check_food(state: GameState) -> bool:
    """Grow and move the food if the head is on it. At most one growth per call."""
    head = state.head
    if head is None:
        return False
    if not check_food_collision(head, state.food, state.cfg.cell_size):
        return False

    state.snake_length += 1
    state.food = spawn_food(state.rng, state.cfg.grid_size, state.cfg.cell_size)
    logger.debug("Food eaten, length=%d, next food at %s", state.snake_length, state.food)
    return True


def step_game(state: GameState) -> bool:
    """
    Advance the game by one frame.
    - No-op while not playing or before the first pointer move.
    - Leaving the board ends the game and freezes the path.
    Returns False once the game is over.
    """
    if state.game_over:
        return False
    if state.phase is not Phase.PLAYING or state.target is None:
        return True

    new_head = advance_head(state.path, state.target, state.cfg.speed)

    # Wall collision
    if not check_bounds(new_head, state.board_size):
        state.game_over = True
        logger.info("Game over at (%.1f, %.1f), score %d", new_head[0], new_head[1], state.score)
        return False

    state.path.append(new_head)
    if state.cfg.bound_path:
        state.path = trim_path(state.path, state.snake_length, state.cfg.spacing)

    check_food(state)
    return True


def snake_segments(state: GameState) -> List[Point]:
    return sample_segments(state.path, state.snake_length, state.cfg.spacing)


# ---------- Layout ----------
@dataclass
class Layout:
    width: int
    height: int
    board: pygame.Rect
    button: pygame.Rect

    def to_board(self, pos: Tuple[int, int]) -> Point:
        return (float(pos[0] - self.board.x), float(pos[1] - self.board.y))


def make_layout(cfg: Config = CFG) -> Layout:
    size = cfg.board_size
    board = pygame.Rect(BOARD_MARGIN, HEADER_H, size, size)
    button = pygame.Rect(0, 0, BUTTON_W, BUTTON_H)
    button.center = (board.centerx, board.centery + BUTTON_H)
    return Layout(width=size + 2 * BOARD_MARGIN, height=HEADER_H + size + BOARD_MARGIN, board=board, button=button)


# ---------- Input ----------
def arm_countdown_timer() -> None:
    pygame.time.set_timer(COUNTDOWN_EVENT, COUNTDOWN_STEP_MS)


def cancel_countdown_timer() -> None:
    pygame.time.set_timer(COUNTDOWN_EVENT, 0)


def handle_input(state: GameState, layout: Layout) -> bool:
    """Process events: pointer steering, overlay buttons, countdown ticks. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.MOUSEMOTION:
            # anywhere in the window: header and margins lie past the board edges
            x, y = layout.to_board(event.pos)
            set_target(state, x, y)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if not layout.button.collidepoint(event.pos):
                continue
            if state.phase is Phase.NOT_STARTED:
                start_game(state)
                arm_countdown_timer()
            elif state.phase is Phase.GAME_OVER:
                reset_game(state)
                cancel_countdown_timer()

        elif event.type == COUNTDOWN_EVENT:
            if tick_countdown(state) is not Phase.COUNTDOWN:
                cancel_countdown_timer()
    return True


# ---------- Draw ----------
def _draw_cell_circle(surface: pygame.Surface, pos: Point, size: int, color: Tuple[int, int, int]) -> None:
    # pos is the top-left corner of the cell-sized disc
    center = (int(round(pos[0] + size / 2)), int(round(pos[1] + size / 2)))
    pygame.draw.circle(surface, color, center, size // 2)


def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState, layout: Layout) -> None:
    screen.fill(BG)

    # header
    title = font.render("Snake Game", True, TEXT)
    score = font.render(f"Score: {state.score}", True, TEXT)
    screen.blit(title, title.get_rect(midtop=(layout.width // 2, 6)))
    screen.blit(score, score.get_rect(midbottom=(layout.width // 2, HEADER_H - 6)))

    # board, drawn on its own surface so pieces past the edge are clipped
    board = pygame.Surface(layout.board.size)
    board.fill(BOARD_BG)
    size = state.cfg.cell_size

    segments = snake_segments(state)
    for i in range(len(segments) - 1, -1, -1):
        _draw_cell_circle(board, segments[i], size, HEAD if i == 0 else BODY)
    _draw_cell_circle(board, state.food, size, FOOD)

    screen.blit(board, layout.board.topleft)


def _draw_button(screen: pygame.Surface, font: pygame.font.Font, rect: pygame.Rect, label: str) -> None:
    pygame.draw.rect(screen, BUTTON, rect, border_radius=6)
    txt = font.render(label, True, BUTTON_TXT)
    screen.blit(txt, txt.get_rect(center=rect.center))


def draw_overlay(screen: pygame.Surface, fonts: Dict[str, pygame.font.Font], state: GameState, layout: Layout) -> None:
    """Start prompt, countdown number or game-over panel depending on phase."""
    phase = state.phase
    cx, cy = layout.board.center

    if phase is Phase.COUNTDOWN:
        num = fonts["big"].render(str(state.countdown), True, WHITE)
        screen.blit(num, num.get_rect(center=(cx, cy)))
        return

    if phase is Phase.PLAYING:
        return

    overlay = pygame.Surface(layout.board.size, pygame.SRCALPHA)
    if phase is Phase.NOT_STARTED:
        overlay.fill(START_DIM)
        screen.blit(overlay, layout.board.topleft)
        msg = fonts["text"].render('Click "Start Game" to begin', True, WHITE)
        screen.blit(msg, msg.get_rect(center=(cx, cy - 24)))
        _draw_button(screen, fonts["text"], layout.button, "Start Game")
    else:
        overlay.fill(OVER_DIM)
        screen.blit(overlay, layout.board.topleft)
        title = fonts["title"].render("Game Over!", True, WHITE)
        sco = fonts["text"].render(f"Score: {state.score}", True, WHITE)
        screen.blit(title, title.get_rect(center=(cx, cy - 40)))
        screen.blit(sco, sco.get_rect(center=(cx, cy)))
        _draw_button(screen, fonts["text"], layout.button, "Play Again")
