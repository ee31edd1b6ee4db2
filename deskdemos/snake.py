"""The snake and its food on a wrapping 200 by 200 field of 10-unit tiles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

TILE_SIZE = 10
SNAKE_SIZE = 10
FOOD_RADIUS = 3
FIELD_LIMIT = 100
"""The field spans -FIELD_LIMIT..FIELD_LIMIT on both axes; leaving it wraps around."""

INITIAL_GROWTH = 7
SPEED = 3
"""The snake moves once every SPEED ticks."""


class Direction(Enum):
    NO_MOVE = "none"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    MOVE_UP = "up"
    MOVE_DOWN = "down"


@dataclass(eq=False)
class Food:
    """A round piece of food whose tile has its top-left corner at (x, y)."""

    x: float
    y: float

    def bounding_rect(self) -> tuple[float, float, float, float]:
        """Area the food may paint, relative to its position: (x, y, width, height)."""
        return (-TILE_SIZE, -TILE_SIZE, TILE_SIZE * 2, TILE_SIZE * 2)

    def contains(self, x: float, y: float) -> bool:
        """Whether a field point lies on the food's disc."""
        cx = self.x + TILE_SIZE // 2
        cy = self.y + TILE_SIZE // 2
        return (x - cx) ** 2 + (y - cy) ** 2 <= FOOD_RADIUS**2


class _Controller(Protocol):
    def foods_at(self, x: float, y: float) -> list[Food]: ...

    def snake_ate_food(self, snake: "Snake", food: Food) -> None: ...

    def snake_ate_itself(self, snake: "Snake") -> None: ...


def _moved(head: tuple[float, float], direction: Direction) -> tuple[float, float]:
    x, y = head
    if direction is Direction.MOVE_LEFT:
        x -= SNAKE_SIZE
        if x < -FIELD_LIMIT:
            x = FIELD_LIMIT
    elif direction is Direction.MOVE_RIGHT:
        x += SNAKE_SIZE
        if x > FIELD_LIMIT:
            x = -FIELD_LIMIT
    elif direction is Direction.MOVE_UP:
        y -= SNAKE_SIZE
        if y < -FIELD_LIMIT:
            y = FIELD_LIMIT
    elif direction is Direction.MOVE_DOWN:
        y += SNAKE_SIZE
        if y > FIELD_LIMIT:
            y = -FIELD_LIMIT
    return (x, y)


class Snake:
    """A snake that grows from its head and reports what it runs into to its controller."""

    def __init__(self, controller: _Controller) -> None:
        self.head: tuple[float, float] = (0, 0)
        self.pos: tuple[float, float] = (0, 0)
        self.growing = INITIAL_GROWTH
        self.speed = SPEED
        self.tail: list[tuple[float, float]] = []
        self.tick_counter = 0
        self.direction = Direction.NO_MOVE
        self._controller = controller

    def set_move_direction(self, direction: Direction) -> None:
        self.direction = direction

    def advance(self, step: int) -> None:
        """Move one tile every `speed` calls with a non-zero step, then check collisions."""
        if not step:
            return
        counter = self.tick_counter
        self.tick_counter += 1
        if counter % self.speed != 0:
            return
        if self.direction is Direction.NO_MOVE:
            return

        if self.growing > 0:
            self.tail.append(self.head)
            self.growing -= 1
        else:
            self.tail.pop(0)
            self.tail.append(self.head)

        self.head = _moved(self.head, self.direction)
        self.pos = self.head
        self._handle_collisions()

    def _handle_collisions(self) -> None:
        hit: list[Food] = []
        for x, y in self.cells():
            for food in self._controller.foods_at(x, y):
                if all(food is not seen for seen in hit):
                    hit.append(food)
        for food in hit:
            self._controller.snake_ate_food(self, food)
            self.growing += 1

        if self.head in self.tail:
            self._controller.snake_ate_itself(self)

    def bounding_rect(self) -> tuple[float, float, float, float]:
        """Rectangle around head and tail relative to the snake's position: (x, y, width, height)."""
        xs = [self.head[0], *(x for x, _ in self.tail)]
        ys = [self.head[1], *(y for _, y in self.tail)]
        left = min(xs) - self.pos[0]
        top = min(ys) - self.pos[1]
        right = max(xs) - self.pos[0]
        bottom = max(ys) - self.pos[1]
        return (left, top, right - left + SNAKE_SIZE, bottom - top + SNAKE_SIZE)

    def cells(self) -> list[tuple[float, float]]:
        """Top-left field corners of every tile the snake covers, head first."""
        return [self.pos, *self.tail]

    def contains(self, x: float, y: float) -> bool:
        """Whether a field point lies on any of the snake's tiles."""
        return any(
            cx <= x < cx + SNAKE_SIZE and cy <= y < cy + SNAKE_SIZE for cx, cy in self.cells()
        )