import pygame
import pytest

from tilerunner.state import GameState
from tilerunner.world import (
    World,
    check_aabb,
    check_bottom,
    check_left,
    check_right,
    check_top,
)

SHEETS = {
    "OverWorld.png": (128, 64),
    "player-idle.png": (64, 16),
    "player-right.png": (80, 16),
    "player-left.png": (80, 16),
    "spider-sprites-left.png": (64, 16),
    "spider-sprites-right.png": (64, 16),
    "Object-Items.png": (64, 16),
    "coins.png": (112, 16),
    "coins2.png": (64, 16),
    "Platform.png": (48, 16),
    "items.png": (64, 16),
}


@pytest.fixture
def assets(tmp_path):
    pygame.init()
    for name, size in SHEETS.items():
        surface = pygame.Surface(size)
        surface.fill((10, 20, 30))
        pygame.image.save(surface, str(tmp_path / name))
    line = ",".join(["05"] * 30) + "\n"
    for number in range(1, 5):
        (tmp_path / f"level{number}.map").write_text(line * 10, encoding="ascii")
    return tmp_path


@pytest.fixture
def world(assets):
    return World(GameState(), assets)


def test_aabb_overlap_and_touching_edges():
    assert check_aabb(0, 0, 10, 10, 5, 5, 10, 10) is True
    assert check_aabb(0, 0, 10, 10, 10, 0, 10, 10) is False
    assert check_aabb(0, 0, 10, 10, 0, 10, 10, 10) is False


def test_side_checks():
    assert check_top(5, 0, 10) is True
    assert check_top(10, 0, 10) is False
    assert check_bottom(0, 10, 5) is True
    assert check_bottom(0, 10, 10) is False
    assert check_right(0, 10, 5) is True
    assert check_right(0, 10, 10) is False
    assert check_left(5, 0, 10) is True
    assert check_left(10, 0, 10) is False


def test_fresh_world_has_no_coins(world):
    assert world.coins() == []


def test_setup_level_one_places_entities(world):
    world.setup_level(1)
    assert (world.player.pos_x, world.player.pos_y) == (10, 300)
    assert world.spider.pos_x == 400
    assert len(world.coins()) == 6
    assert world.coin17.pos_x == 340
    assert world.coin17.animated is True
    assert world.current_level == 1


def test_setup_level_two_keeps_earlier_coins(world):
    world.setup_level(1)
    first_coin = world.coin17
    world.setup_level(2)
    assert world.coin17 is first_coin
    assert world.coin515.pos_x == 720
    assert world.moving_floor.velocity == 50.0
    assert world.player.pos_y == 339


def test_setup_level_four_moving_floor(world):
    world.setup_level(4)
    assert world.moving_floor.pos_x == 600
    assert world.spider.pos_x == 1000
    assert world.coins() == []


def test_setup_unknown_level_raises(world):
    with pytest.raises(ValueError):
        world.setup_level(5)


def test_box_is_created_once(world):
    first = world.box("tile27")
    assert world.box("tile27") is first
    assert world.box("tile54") is not first


def test_reset_coins(world):
    world.setup_level(1)
    for coin in world.coins():
        coin.collected = True
    world.reset_coins()
    assert all(not coin.collected for coin in world.coins())


def test_enemy_walks_toward_player_on_left(world):
    world.setup_level(1)
    world.state.delta_time = 1.0
    before = world.spider.x
    world.enemy_ai()
    assert world.spider.x < before
    assert world.spider.walking_right is False


def test_enemy_walks_toward_player_on_right(world):
    world.setup_level(1)
    world.state.delta_time = 1.0
    world.player.x = 900.0
    before = world.spider.x
    world.enemy_ai()
    assert world.spider.x > before
    assert world.spider.walking_right is True


def test_enemy_stops_at_left_edge_and_starts_chasing(world):
    world.setup_level(1)
    world.state.delta_time = 1.0
    world.spider_chases_player = False
    world.spider.x = 0.5
    world.player.x = 0.0
    world.enemy_ai()
    assert world.spider.x == 0.0
    assert world.spider_chases_player is True


def test_player_left_of_tile_box_starts_chase(world):
    world.setup_level(1)
    world.spider_chases_player = False
    world.spider.x = 500.0
    world.box("player").set(10, 300, 48, 48)
    world.box("tile715").set(720, 336, 48, 48)
    world.enemy_ai()
    assert world.spider_chases_player is True