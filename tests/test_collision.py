import pygame
import pytest

from tilerunner.collision import DEBUG_COLOR, CollisionBox
from tilerunner.enemy import Enemy
from tilerunner.level import Level
from tilerunner.objects import GameObject
from tilerunner.player import Player
from tilerunner.state import GameState


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


@pytest.fixture
def state():
    return GameState(delta_time=0.02)


@pytest.fixture
def assets(tmp_path):
    pygame.image.save(pygame.Surface((128, 64)), str(tmp_path / "OverWorld.png"))
    pygame.image.save(pygame.Surface((64, 16)), str(tmp_path / "player.png"))
    pygame.image.save(pygame.Surface((64, 16)), str(tmp_path / "spider.png"))
    rows = "\n".join(",".join(["05"] * 30) for _ in range(10))
    (tmp_path / "level1.map").write_text(rows)
    return tmp_path


@pytest.fixture
def level(state, assets):
    return Level(state, 16, "OverWorld.png", assets_dir=assets)


def make_player(state, assets, x, y):
    return Player(state, (x, y), (3.0, 3.0), assets / "player.png", 16, 16, 0, 0, 4)


def tile_box(level, row, col):
    box = CollisionBox()
    box.init_from_tile(level, row, col)
    return box


def test_overlaps_and_touching_edges():
    a = CollisionBox(0, 0, 10, 10)
    assert a.overlaps(CollisionBox(5, 5, 10, 10))
    assert not a.overlaps(CollisionBox(10, 0, 10, 10))
    assert not a.overlaps(CollisionBox(0, 10, 10, 10))


@pytest.mark.parametrize(
    "other",
    [CollisionBox(5, 5, 10, 10), CollisionBox(30, 30, 4, 4), CollisionBox(-3, 2, 5, 5)],
)
def test_overlaps_is_symmetric(other):
    a = CollisionBox(0, 0, 10, 10)
    assert a.overlaps(other) == other.overlaps(a)


def test_side_checks_follow_overlap():
    a = CollisionBox(0, 0, 10, 10)
    b = CollisionBox(5, 5, 10, 10)
    assert a.overlaps(b)
    assert all([a.top_collision(b), a.bottom_collision(b), a.left_collision(b), a.right_collision(b)])


def test_set_converts_to_int():
    box = CollisionBox()
    box.set(1.0, 2.0, 3.0, 4.0)
    assert (box.x, box.y, box.width, box.height) == (1, 2, 3, 4)


def test_init_from_tile_with_offsets(level):
    box = CollisionBox()
    box.init_from_tile(level, 2, 7, 5, 20)
    assert box.x == level.tile_x(2, 7) + 5
    assert box.y == level.tile_y(2, 7) + 20
    assert box.width == level.tile_width(2, 7)
    assert box.height == level.tile_height(2, 7)


def test_init_from_player_enemy_and_object(state, assets):
    player = make_player(state, assets, 10.7, 300.2)
    box = CollisionBox()
    box.init_from_player(player)
    assert (box.x, box.y, box.width, box.height) == (
        player.pos_x, player.pos_y, player.width, player.height)

    enemy = Enemy(state, (400.0, 355.0), (2.0, 2.0), assets / "spider.png", 32, 16, 0, 0, 2)
    box.init_from_enemy(enemy)
    assert (box.x, box.y, box.width, box.height) == (
        enemy.pos_x, enemy.pos_y, enemy.width, enemy.height)

    obj = GameObject(state, (60, 70), (2.0, 2.0), 16, 16)
    box.init_from_object(obj)
    assert (box.x, box.y, box.width, box.height) == (obj.pos_x, obj.pos_y, obj.width, obj.height)


def test_player_on_top_places_player_on_tile(state, assets, level):
    tile = tile_box(level, 2, 7)
    player = make_player(state, assets, level.tile_x(2, 7), level.tile_y(2, 7) + 10)
    state.player_on_air = True
    state.fall_from_sky = True
    box = CollisionBox()
    box.init_from_player(player)
    box.player_on_top(tile, player, level, 2, 7)
    assert player.y == level.tile_y(2, 7) - player.height
    assert state.player_on_air is False
    assert state.fall_from_sky is False
    assert state.player_on_top_of_block is False


def test_player_on_top_without_contact_changes_nothing(state, assets, level):
    tile = tile_box(level, 2, 7)
    player = make_player(state, assets, 0.0, 400.0)
    state.player_on_air = True
    box = CollisionBox()
    box.init_from_player(player)
    box.player_on_top(tile, player, level, 2, 7)
    assert player.y == 400.0
    assert state.player_on_air is True


def test_player_to_left_and_right(state, assets, level):
    tile = tile_box(level, 7, 15)
    player = make_player(state, assets, level.tile_x(7, 15) - 10, level.tile_y(7, 15))
    box = CollisionBox()
    box.init_from_player(player)
    box.player_to_left(tile, player, level, 7, 15)
    assert player.x == level.tile_x(7, 15) - level.tile_width(7, 15)

    player.x = float(level.tile_x(7, 15) + 10)
    box.init_from_player(player)
    box.player_to_right(tile, player, level, 7, 15)
    assert player.x == level.tile_x(7, 15) + tile.width


def test_player_to_left_ignored_when_on_block(state, assets, level):
    tile = tile_box(level, 7, 15)
    start = float(level.tile_x(7, 15) - 10)
    player = make_player(state, assets, start, level.tile_y(7, 15))
    state.player_on_top_of_block = True
    box = CollisionBox()
    box.init_from_player(player)
    box.player_to_left(tile, player, level, 7, 15)
    assert player.x == start


def test_player_to_left_stop_records_old_position(state, assets, level):
    tile = tile_box(level, 6, 6)
    player = make_player(state, assets, level.tile_x(6, 6) + 5, level.tile_y(6, 6))
    box = CollisionBox()
    box.init_from_player(player)
    box.player_to_left_stop(tile, player)
    assert state.player_old_x == player.pos_x
    assert player.x == level.tile_x(6, 6) + 5


def test_hit_block_for_item_releases_item(state, assets, level):
    bottom = CollisionBox()
    bottom.init_from_tile(level, 5, 4, 5, 20)
    player = make_player(state, assets, level.tile_x(5, 4), level.tile_y(5, 4) + 30)
    item = GameObject(state, (0, 0), (3.0, 3.0), 16, 16)
    sound = FakeSound()
    box = CollisionBox()
    box.init_from_player(player)
    box.hit_block_for_item(bottom, item, level, sound, 5, 4)
    assert item.appears is True
    assert (item.x, item.y) == (level.tile_x(4, 4), level.tile_y(4, 4))
    assert bottom.hit is True
    assert sound.plays == 1
    assert level.tiles[5][4].src.topleft == (2 * level.tile_size, 0)


def test_hit_block_does_not_move_item_already_out(state, assets, level):
    bottom = CollisionBox()
    bottom.init_from_tile(level, 5, 4, 5, 20)
    player = make_player(state, assets, level.tile_x(5, 4), level.tile_y(5, 4) + 30)
    item = GameObject(state, (77, 88), (3.0, 3.0), 16, 16)
    item.appears = True
    box = CollisionBox()
    box.init_from_player(player)
    box.hit_block_for_item(bottom, item, level, None, 5, 4)
    assert (item.x, item.y) == (77.0, 88.0)
    assert bottom.hit is True


def test_player_on_object(state, assets):
    floor = GameObject(state, (400, 380), (3.0, 3.0), 48, 16)
    floor_box = CollisionBox()
    floor_box.init_from_object(floor)
    player = make_player(state, assets, 410.0, 370.0)
    state.player_on_air = True
    box = CollisionBox()
    box.init_from_player(player)
    box.player_on_object(floor_box, player, floor)
    assert player.y == floor.pos_y - box.height
    assert state.player_on_air is False


def test_collect_item_counts_once(state, assets):
    coin = GameObject(state, (340, 60), (2.0, 2.0), 16, 16)
    coin_box = CollisionBox()
    coin_box.init_from_object(coin)
    player = make_player(state, assets, 340.0, 60.0)
    box = CollisionBox()
    box.init_from_player(player)
    sound = FakeSound()
    box.collect_item(coin_box, coin, state, sound)
    box.collect_item(coin_box, coin, state, sound)
    assert coin.collected is True
    assert state.total_score == 1
    assert sound.plays == 1


def test_collect_item_missing_leaves_score(state):
    coin = GameObject(state, (340, 60), (2.0, 2.0), 16, 16)
    coin_box = CollisionBox()
    coin_box.init_from_object(coin)
    far = CollisionBox(0, 500, 10, 10)
    far.collect_item(coin_box, coin, state, None)
    assert state.total_score == 0
    assert coin.collected is False


def test_no_jump(state):
    box = CollisionBox(0, 0, 10, 10)
    box.no_jump(CollisionBox(100, 100, 10, 10), state)
    assert state.jump_key_pressed is False
    box.no_jump(CollisionBox(0, 5, 10, 10), state)
    assert state.jump_key_pressed is True


def test_jump_restriction_toggle(state):
    box = CollisionBox(0, 0, 10, 10)
    other = CollisionBox(5, 5, 10, 10)
    box.jump_restriction(other, state)
    assert state.collided_with_object is True
    box.release_jump_restriction(other, state)
    assert state.collided_with_object is False


def test_stop_free_fall(state):
    state.fall_from_sky = True
    CollisionBox(0, 0, 10, 10).stop_free_fall(CollisionBox(5, 5, 10, 10), state)
    assert state.fall_from_sky is False


def test_falling_death(state, assets):
    player = make_player(state, assets, 10.0, 300.0)
    box = CollisionBox()
    box.init_from_player(player)
    box.falling_death(CollisionBox(10, 300, 48, 48), player)
    assert state.fall_from_sky is True
    assert player.y > 300.0


def test_object_to_right_and_left(state, level):
    floor = GameObject(state, (level.tile_x(8, 7) + 10, level.tile_y(8, 7)), (3.0, 3.0), 48, 16)
    tile = tile_box(level, 8, 7)
    box = CollisionBox()
    box.init_from_object(floor)
    box.object_to_right(tile, floor, level, 8, 7)
    assert floor.x == level.tile_x(8, 7) + level.tile_width(8, 7)
    assert state.moving_floor_to_left is False

    floor.x = float(level.tile_x(8, 14) - 10)
    floor.y = float(level.tile_y(8, 14))
    tile = tile_box(level, 8, 14)
    box.init_from_object(floor)
    box.object_to_left(tile, floor, level, 8, 14)
    assert floor.x == level.tile_x(8, 14) - floor.width
    assert state.moving_floor_to_left is True


def test_enemy_to_left_and_right(state, assets, level):
    enemy = Enemy(state, (level.tile_x(7, 15) - 10, level.tile_y(7, 15)), (2.0, 2.0),
                  assets / "spider.png", 32, 16, 0, 0, 2)
    tile = tile_box(level, 7, 15)
    box = CollisionBox()
    box.init_from_enemy(enemy)
    box.enemy_to_left(tile, enemy, level, 7, 15)
    assert enemy.x == level.tile_x(7, 15) - enemy.width

    enemy.x = float(level.tile_x(7, 15) + 10)
    box.init_from_enemy(enemy)
    box.enemy_to_right(tile, enemy, level, 7, 15)
    assert enemy.x == level.tile_x(7, 15) + level.tile_width(7, 15)


def test_render_draws_outline():
    surface = pygame.Surface((50, 50))
    CollisionBox(5, 5, 10, 10).render(surface)
    assert surface.get_at((5, 5)) == pygame.Color(*DEBUG_COLOR)
    assert surface.get_at((10, 10)) == pygame.Color(0, 0, 0)