import numpy as np

from snake_world.level import Level
from snake_world.main import parse_args, spawn_foods, run_terminal


def test_spawn_foods_caps_at_max_food():
    level = Level(21, 11, rng=np.random.default_rng(3))
    foods = spawn_foods(level, 10)
    assert len(foods) == level.max_food
    assert len({f.pos for f in foods}) == len(foods)
    assert foods is level.food_vec

def test_spawn_foods_respects_existing_food():
    level = Level(21, 11, rng=np.random.default_rng(3))
    spawn_foods(level, 3)
    spawn_foods(level, 3)
    assert len(level.food_vec) == level.max_food

def test_spawn_foods_limited_by_free_cells():
    level = Level(1, 1, rng=np.random.default_rng(0))
    assert len(spawn_foods(level, 4)) == 1

def test_parse_args():
    cfg = parse_args(["--width", "10", "--height", "8", "--seed", "5", "--foods", "2", "--debug"])
    assert (cfg.width, cfg.height, cfg.seed, cfg.foods) == (10, 8, 5, 2)
    assert cfg.backend == "terminal"
    assert cfg.debug

def test_run_terminal_reports_foods(capsys):
    cfg = parse_args(["--seed", "1", "--foods", "2"])
    level = Level(cfg.width, cfg.height, rng=np.random.default_rng(cfg.seed))
    run_terminal(level, cfg)
    out = capsys.readouterr().out
    assert "\x1b[2J" in out
    assert len(level.food_vec) == 2
    for food in level.food_vec:
        assert food.kind.name in out
