import random

from deskdemos.game import FIRST_FOOD, GameController, Key
from deskdemos.snake import INITIAL_GROWTH, SNAKE_SIZE, TILE_SIZE, Direction, Food


def _game():
    return GameController(random.Random(7))


def _tick_moves(game, count):
    for _ in range(count * game.snake.speed):
        game.tick()


def test_starts_running_with_first_food():
    game = _game()
    assert game.running
    assert [(food.x, food.y) for food in game.foods] == [FIRST_FOOD]
    assert game.snake.head == (0, 0)


def test_arrow_keys_steer():
    game = _game()
    game.handle_key_pressed(Key.UP)
    assert game.snake.direction is Direction.MOVE_UP
    game.handle_key_pressed("space")
    assert game.snake.direction is Direction.MOVE_UP
    game.handle_key_pressed(Key.LEFT)
    assert game.snake.direction is Direction.MOVE_LEFT


def test_tick_moves_snake():
    game = _game()
    game.handle_key_pressed(Key.RIGHT)
    assert game.tick() is True
    assert game.snake.head == (SNAKE_SIZE, 0)


def test_pause_stops_and_resume_restarts():
    game = _game()
    game.handle_key_pressed(Key.RIGHT)
    game.pause()
    assert game.tick() is False
    assert game.snake.head == (0, 0)
    game.resume()
    assert game.tick() is True
    assert game.snake.head == (SNAKE_SIZE, 0)


def test_foods_at_matches_tile():
    game = _game()
    (food,) = game.foods
    assert game.foods_at(*FIRST_FOOD) == [food]
    assert game.foods_at(0, 0) == []


def test_eating_replaces_food_and_grows():
    game = _game()
    target = Food(SNAKE_SIZE, 0)
    game.foods = [target]
    game.handle_key_pressed(Key.RIGHT)
    game.tick()
    assert all(food is not target for food in game.foods)
    assert len(game.foods) == 1
    assert game.snake.growing == INITIAL_GROWTH
    (new_food,) = game.foods
    assert not game.snake.contains(new_food.x + TILE_SIZE // 2, new_food.y + TILE_SIZE // 2)


def test_snake_ate_food_removes_only_that_food():
    game = _game()
    (first,) = game.foods
    game.snake_ate_food(game.snake, first)
    assert len(game.foods) == 1
    assert game.foods[0] is not first


def test_new_food_on_grid_and_off_snake():
    game = _game()
    game.handle_key_pressed(Key.RIGHT)
    _tick_moves(game, 3)
    game.foods.clear()
    for _ in range(50):
        food = game.add_new_food()
        assert food.x in range(0, 100, 10)
        assert food.y in range(0, 100, 10)
        assert not game.snake.contains(food.x + TILE_SIZE // 2, food.y + TILE_SIZE // 2)
    assert len(game.foods) == 50


def test_running_into_itself_restarts():
    game = _game()
    old = game.snake
    old.tail = [(SNAKE_SIZE, 0)]
    game.handle_key_pressed(Key.RIGHT)
    game.tick()
    assert game.snake is not old
    assert game.snake.head == (0, 0)
    assert game.snake.tail == []
    assert len(game.foods) == 1


def test_hitting_wall_changes_nothing():
    game = _game()
    foods = list(game.foods)
    game.snake_hit_wall(game.snake, None)
    assert game.foods == foods
    assert game.snake.head == (0, 0)