"""Game loop for the snake: keys, food placement and restarting after a crash."""

from __future__ import annotations

import random
from enum import Enum
from typing import Any

from deskdemos.snake import FOOD_RADIUS, SNAKE_SIZE, TILE_SIZE, Direction, Food, Snake

TICK_INTERVAL_MS = 1000 // 33
SCENE_RECT = (-100, -100, 200, 200)
"""Visible field as (x, y, width, height)."""

FIRST_FOOD = (0, -50)


class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


_KEY_DIRECTIONS = {
    Key.LEFT: Direction.MOVE_LEFT,
    Key.RIGHT: Direction.MOVE_RIGHT,
    Key.UP: Direction.MOVE_UP,
    Key.DOWN: Direction.MOVE_DOWN,
}


def _food_hits_tile(food: Food, x: float, y: float) -> bool:
    cx = food.x + TILE_SIZE // 2
    cy = food.y + TILE_SIZE // 2
    nearest_x = min(max(cx, x), x + SNAKE_SIZE)
    nearest_y = min(max(cy, y), y + SNAKE_SIZE)
    return (cx - nearest_x) ** 2 + (cy - nearest_y) ** 2 < FOOD_RADIUS**2


class GameController:
    """Owns the snake and the food; `tick` advances the game by one timer step."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self.foods: list[Food] = []
        self.snake = Snake(self)
        self.foods.append(Food(*FIRST_FOOD))
        self.running = False
        self.wall_hits = 0
        self._game_over_pending = False
        self.resume()

    def snake_ate_food(self, snake: Snake, food: Food) -> None:
        self.foods = [item for item in self.foods if item is not food]
        self.add_new_food()

    def snake_hit_wall(self, snake: Snake, wall: Any) -> None:
        """Walls are harmless to the snake; the collision is only counted."""
        self.wall_hits += 1

    def snake_ate_itself(self, snake: Snake) -> None:
        """Schedule a restart once the current tick has finished."""
        self._game_over_pending = True

    def handle_key_pressed(self, key: Any) -> None:
        """Steer the snake with an arrow key; other keys are ignored."""
        direction = _KEY_DIRECTIONS.get(key) if isinstance(key, Key) else None
        if direction is not None:
            self.snake.set_move_direction(direction)

    def add_new_food(self) -> Food:
        """Place food on a random tile of the 0..90 grid that the snake does not cover."""
        half = TILE_SIZE // 2
        while True:
            x = self._rng.randrange(100) // 10 * 10
            y = self._rng.randrange(100) // 10 * 10
            if not self.snake.contains(x + half, y + half):
                break
        food = Food(x, y)
        self.foods.append(food)
        return food

    def game_over(self) -> None:
        """Clear the field and start over with a fresh snake and one piece of food."""
        self.foods.clear()
        self.snake = Snake(self)
        self.add_new_food()

    def pause(self) -> None:
        self.running = False

    def resume(self) -> None:
        self.running = True

    def tick(self) -> bool:
        """Advance the game one timer step; False when paused."""
        if not self.running:
            return False
        self.snake.advance(0)
        self.snake.advance(1)
        if self._game_over_pending:
            self._game_over_pending = False
            self.game_over()
        return True

    def foods_at(self, x: float, y: float) -> list[Food]:
        """Food that overlaps the snake tile whose top-left corner is (x, y)."""
        return [food for food in self.foods if _food_hits_tile(food, x, y)]