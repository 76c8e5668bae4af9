# motion.py
from __future__ import annotations

import math
import random
from typing import List, Optional, Sequence, Tuple

import numpy as np  # type: ignore

Point = Tuple[float, float]

ORIGIN: Point = (0.0, 0.0)


def advance_head(path: Sequence[Point], target: Point, speed: float) -> Point:
    """
    Seek one tick toward target.
    - Empty path: snap to target (first pointer event starts the motion).
    - Farther than `speed`: move exactly `speed` px along head -> target.
    - Otherwise: land on target, no overshoot.
    """
    if not path:
        return target

    hx, hy = path[-1]
    dx = target[0] - hx
    dy = target[1] - hy
    distance = math.hypot(dx, dy)
    if distance > speed:
        return (hx + dx / distance * speed, hy + dy / distance * speed)
    return target


def check_bounds(point: Point, board_size: float) -> bool:
    """True if point lies on the board, edges included."""
    x, y = point
    return 0 <= x <= board_size and 0 <= y <= board_size


def sample_segments(path: Sequence[Point], count: int, stride: int) -> List[Point]:
    """
    Body positions read off the head history: segment i is the head as it
    was i * stride ticks ago, clamped to the oldest entry. Segment 0 is the head.
    """
    if count <= 0:
        return []
    if not path:
        return [ORIGIN] * count

    idx = np.maximum(len(path) - 1 - np.arange(count) * stride, 0)
    return [path[i] for i in idx.tolist()]


def check_food_collision(head: Point, food: Point, cell_size: float) -> bool:
    return abs(head[0] - food[0]) < cell_size and abs(head[1] - food[1]) < cell_size


def spawn_food(rng: Optional[random.Random], grid_size: int, cell_size: int) -> Point:
    # No exclusion of the body: food may land under the snake.
    rng = rng or random
    return (
        float(rng.randrange(grid_size) * cell_size),
        float(rng.randrange(grid_size) * cell_size),
    )


def trim_path(path: List[Point], snake_length: int, stride: int) -> List[Point]:
    """Drop entries older than the oldest one sample_segments can reach after one more growth."""
    keep = snake_length * stride + 1
    if len(path) <= keep:
        return path
    return path[-keep:]
