import dataclasses

import pytest

from snake_world.food import Food, FoodKind, Position


def test_bomb_attributes():
    food = Food(FoodKind.BOMB, Position(5, 5))
    assert food.meals == -10
    assert food.symbol == "💣"
    assert food.color == (0, 0, 0)
    assert food.pos == Position(5, 5)

@pytest.mark.parametrize("kind,meals,symbol,color", [
    (FoodKind.CHERRY, 1, "🍒", (255, 0, 0)),
    (FoodKind.MOUSE, 2, "🐁", (50, 60, 70)),
    (FoodKind.BOMB, -10, "💣", (0, 0, 0)),
])
def test_attributes_follow_kind(kind, meals, symbol, color):
    food = Food(kind, Position(0, 0))
    assert (food.meals, food.symbol, food.color) == (meals, symbol, color)

def test_exactly_three_kinds():
    assert [k.name for k in FoodKind] == ["CHERRY", "MOUSE", "BOMB"]

def test_food_is_immutable():
    food = Food(FoodKind.CHERRY, Position(1, 2))
    with pytest.raises(dataclasses.FrozenInstanceError):
        food.pos = Position(3, 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        food.pos.x = 9
