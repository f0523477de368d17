from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Tuple

Direction = Tuple[int, int]
Point = Tuple[int, int]

UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)

HEAD = 0
INITIAL_LENGTH = 3
START_MARGIN = 5
MAX_QUEUED = 3

REASON_WALL = "wall"
REASON_SELF = "self"
REASON_CLEARED = "cleared"


def is_reverse(current: Direction, proposed: Direction) -> bool:
    """Return True when proposed points straight back along current."""
    return proposed[0] == -current[0] and proposed[1] == -current[1]


def next_direction(current: Direction, queued: Deque[Direction]) -> Direction:
    """Return the next direction, ensuring reverse turns are ignored."""
    if not queued:
        return current
    proposed = queued.popleft()
    if is_reverse(current, proposed):
        return current
    return proposed


def random_start(width: int, height: int, rng: random.Random) -> List[Point]:
    """Return a fresh snake heading right, head first."""
    if width - START_MARGIN - 1 > START_MARGIN:
        start_x = rng.randrange(START_MARGIN, width - START_MARGIN - 1)
    else:
        start_x = max(INITIAL_LENGTH - 1, width // 2)
    if height - START_MARGIN - 1 > START_MARGIN:
        start_y = rng.randrange(START_MARGIN, height - START_MARGIN - 1)
    else:
        start_y = height // 2
    return [(start_x - offset, start_y) for offset in range(INITIAL_LENGTH)]


def create_food(snake: List[Point], width: int, height: int, rng: random.Random) -> Optional[Point]:
    """Return a random grid cell that does not overlap with the snake."""
    occupied = set(snake)
    available = [(x, y) for y in range(height) for x in range(width) if (x, y) not in occupied]
    if not available:
        return None
    return rng.choice(available)


@dataclass
class SnakeBoard:
    """Grid state for one run: snake cells, pending turns and the food cell."""

    width: int
    height: int
    snake: List[Point] = field(default_factory=list)
    direction: Direction = RIGHT
    direction_queue: Deque[Direction] = field(default_factory=deque)
    food: Optional[Point] = None
    game_over: bool = False
    reason: str = ""
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def new(cls, width: int, height: int, rng: Optional[random.Random] = None) -> "SnakeBoard":
        board = cls(width=width, height=height, rng=rng or random.Random())
        board.reset()
        return board

    @property
    def head(self) -> Point:
        return self.snake[HEAD]

    @property
    def score(self) -> int:
        return len(self.snake) - INITIAL_LENGTH

    def reset(self) -> None:
        """Start a new run on the same board."""
        self.snake = random_start(self.width, self.height, self.rng)
        self.direction = RIGHT
        self.direction_queue.clear()
        self.food = create_food(self.snake, self.width, self.height, self.rng)
        self.game_over = False
        self.reason = ""

    def queue_direction(self, direction: Direction) -> None:
        if self.game_over or len(self.direction_queue) >= MAX_QUEUED:
            return
        self.direction_queue.append(direction)

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point[0] < self.width and 0 <= point[1] < self.height

    def tick(self) -> bool:
        """Advance the snake one cell. Returns False once the run has ended."""
        if self.game_over:
            return False

        self.direction = next_direction(self.direction, self.direction_queue)
        head_x, head_y = self.head
        new_head = (head_x + self.direction[0], head_y + self.direction[1])

        if not self.in_bounds(new_head):
            return self._end(REASON_WALL)

        eating = new_head == self.food
        # The tail cell is vacated this tick unless the snake grows.
        body = self.snake if eating else self.snake[:-1]
        if new_head in body:
            return self._end(REASON_SELF)

        self.snake.insert(HEAD, new_head)
        if eating:
            self.food = create_food(self.snake, self.width, self.height, self.rng)
            if self.food is None:
                return self._end(REASON_CLEARED)
        else:
            self.snake.pop()
        return True

    def _end(self, reason: str) -> bool:
        self.game_over = True
        self.reason = reason
        self.direction_queue.clear()
        return False
