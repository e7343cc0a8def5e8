"""Per-stage collision set-up and the collision responses run every frame."""

from __future__ import annotations

from .collision import CollisionBox
from .world import COIN_NAMES, World

BOTTOM_OFFSET_X = 5
BOTTOM_OFFSET_Y = 20
BOTTOM_SHRINK = 1.3
LEFT_EDGE_OFFSET_X = -2
EDGE_DROP_Y = 10
NARROW_SHRINK = 1.2


def _tile_name(row: int, col: int, suffix: str = "") -> str:
    return f"tile{row}{col}{suffix}"


def _tile_box(world: World, row: int, col: int, offset_x: int = 0,
              suffix: str = "") -> CollisionBox:
    box = world.box(_tile_name(row, col, suffix))
    box.init_from_tile(world.level, row, col, offset_x)
    return box


def _tiles(world: World, *cells) -> None:
    """Cover each (row, col) or (row, col, offset_x) cell with its own box."""
    for cell in cells:
        _tile_box(world, *cell)


def _bottom_box(world: World, row: int, col: int) -> CollisionBox:
    """A smaller box inside the lower part of a block, used to bump it from below."""
    box = world.box(_tile_name(row, col, "_bottom"))
    box.init_from_tile(world.level, row, col, BOTTOM_OFFSET_X, BOTTOM_OFFSET_Y)
    box.height = int(box.height / BOTTOM_SHRINK)
    box.width = int(box.width / BOTTOM_SHRINK)
    return box


def _left_edge_box(world: World, row: int, col: int) -> CollisionBox:
    """A box just left of a tile, lowered so standing on the tile does not touch it."""
    box = _tile_box(world, row, col, LEFT_EDGE_OFFSET_X, "_left")
    box.y = world.level.tile_y(row, col) + EDGE_DROP_Y
    return box


def _setup_entities(world: World, with_floor: bool = False) -> None:
    world.box("player").init_from_player(world.player)
    world.box("spider").init_from_enemy(world.spider)
    if with_floor:
        world.box("moving_floor").init_from_object(world.moving_floor)
    for name in COIN_NAMES:
        coin = getattr(world, name)
        if coin is not None:
            world.box(name).init_from_object(coin)


def _collect_coins(world: World) -> None:
    player_box = world.box("player")
    for name in COIN_NAMES:
        coin = getattr(world, name)
        if coin is not None:
            player_box.collect_item(world.box(name), coin, world.state, world.coin_sound)


def setup_stage_one(world: World) -> None:
    """Place the collision boxes of the first stage."""
    _setup_entities(world)
    _tiles(world, (2, 7))
    _bottom_box(world, 2, 7)
    _tiles(world, (4, 7), (5, 4))
    _bottom_box(world, 5, 4)
    _tiles(world, (5, 7))
    _bottom_box(world, 5, 7)
    _tiles(world, (7, 3, -10), (7, 4), (7, 5, 40), (7, 7), (7, 8, 40), (5, 10))
    _bottom_box(world, 5, 10)
    _tiles(world, (6, 15), (6, 16), (7, 10), (7, 11, 20), (7, 15), (7, 16))


def stage_one(world: World) -> None:
    """Run the collision responses of the first stage."""
    setup_stage_one(world)
    b = world.box
    p = b("player")
    player, level, state, bump = world.player, world.level, world.state, world.bump_sound

    p.player_on_top(b("tile27"), player, level, 2, 7)
    p.hit_block_for_item(b("tile27_bottom"), world.green_mushroom, level, bump, 2, 7)
    p.jump_restriction(b("tile47"), state)
    p.player_on_top(b("tile54"), player, level, 5, 4)
    p.hit_block_for_item(b("tile54_bottom"), world.mushroom, level, bump, 5, 4)
    p.player_on_top(b("tile57"), player, level, 5, 7)
    p.hit_block_for_item(b("tile57_bottom"), world.red_mushroom, level, bump, 5, 7)
    p.player_on_top(b("tile510"), player, level, 5, 10)
    p.hit_block_for_item(b("tile510_bottom"), world.mushroom_green, level, bump, 5, 10)
    p.release_jump_restriction(b("tile73"), state)
    p.jump_restriction(b("tile74"), state)
    p.release_jump_restriction(b("tile75"), state)
    p.jump_restriction(b("tile77"), state)
    p.release_jump_restriction(b("tile78"), state)
    p.player_on_top(b("tile615"), player, level, 6, 15)
    p.player_on_top(b("tile616"), player, level, 6, 16)
    p.jump_restriction(b("tile710"), state)
    p.release_jump_restriction(b("tile711"), state)
    p.player_to_left(b("tile715"), player, level, 7, 15)
    b("spider").enemy_to_left(b("tile715"), world.spider, level, 7, 15)
    p.player_to_right(b("tile716"), player, level, 7, 16)
    _collect_coins(world)


def setup_stage_two(world: World) -> None:
    """Place the collision boxes of the second stage."""
    _setup_entities(world, with_floor=True)
    _tiles(world, (5, 5))
    _bottom_box(world, 5, 5)
    _tiles(world, (7, 4, -10), (7, 0), (7, 5), (7, 7), (7, 8), (7, 6, 25),
           (8, 6), (8, 7), (8, 8, 25), (8, 9), (2, 16))
    _bottom_box(world, 2, 16)
    _tiles(world, (4, 14), (4, 16), (4, 18), (5, 15), (5, 16))
    _bottom_box(world, 5, 16)
    _tiles(world, (5, 17), (6, 17), (7, 14, -10), (7, 15), (7, 17), (7, 18, 25),
           (8, 10), (8, 11), (8, 12), (8, 13), (8, 14))


def stage_two(world: World) -> None:
    """Run the collision responses of the second stage."""
    setup_stage_two(world)
    b = world.box
    p = b("player")
    floor_box = b("moving_floor")
    player, level, state, bump = world.player, world.level, world.state, world.bump_sound
    floor = world.moving_floor

    p.player_on_top(b("tile55"), player, level, 5, 5)
    p.hit_block_for_item(b("tile55_bottom"), world.mushroom, level, bump, 5, 5)
    p.stop_free_fall(b("tile70"), state)
    p.release_jump_restriction(b("tile74"), state)
    p.jump_restriction(b("tile75"), state)
    p.release_jump_restriction(b("tile76"), state)
    p.stop_free_fall(b("tile77"), state)
    b("spider").enemy_to_left(b("tile78"), world.spider, level, 7, 8)
    p.stop_free_fall(b("tile86"), state)
    floor_box.object_to_right(b("tile87"), floor, level, 8, 7)
    p.stop_free_fall(b("tile87"), state)
    p.falling_death(b("tile88"), player)
    p.falling_death(b("tile89"), player)
    p.player_on_top(b("tile216"), player, level, 2, 16)
    p.hit_block_for_item(b("tile216_bottom"), world.green_mushroom, level, bump, 2, 16)
    p.release_jump_restriction(b("tile414"), state)
    p.jump_restriction(b("tile416"), state)
    p.release_jump_restriction(b("tile418"), state)
    p.player_on_top(b("tile515"), player, level, 5, 15)
    p.player_on_top(b("tile516"), player, level, 5, 16)
    p.hit_block_for_item(b("tile516_bottom"), world.red_mushroom, level, bump, 5, 16)
    p.player_on_top(b("tile517"), player, level, 5, 17)
    p.release_jump_restriction(b("tile714"), state)
    p.jump_restriction(b("tile715"), state)
    p.jump_restriction(b("tile717"), state)
    p.release_jump_restriction(b("tile718"), state)
    for col in (10, 11, 12, 13):
        p.falling_death(b(_tile_name(8, col)), player)
    p.stop_free_fall(b("tile814"), state)
    p.player_on_object(floor_box, player, floor)
    floor_box.object_to_left(b("tile814"), floor, level, 8, 14)
    _collect_coins(world)


def setup_stage_three(world: World) -> None:
    """Place the collision boxes of the third stage."""
    _setup_entities(world, with_floor=True)
    _tiles(world, (3, 9))
    _bottom_box(world, 3, 9)
    _tiles(world, (4, 9), (5, 7), (5, 9), (6, 4), (6, 5), (6, 8), (6, 9), (7, 4),
           (7, 5), (7, 8), (7, 9), (8, 9), (4, 17), (6, 15), (6, 16), (7, 15),
           (7, 16), (7, 24), (8, 10), (8, 11), (8, 12), (8, 13), (8, 14))


def stage_three(world: World) -> None:
    """Run the collision responses of the third stage."""
    setup_stage_three(world)
    b = world.box
    p = b("player")
    floor_box = b("moving_floor")
    player, level, state = world.player, world.level, world.state
    floor = world.moving_floor

    p.player_on_top(b("tile39"), player, level, 3, 9)
    p.hit_block_for_item(b("tile39_bottom"), world.red_mushroom, level,
                         world.bump_sound, 3, 9)
    floor_box.object_to_right(b("tile49"), floor, level, 4, 9)
    p.release_jump_restriction(b("tile57"), state)
    p.jump_restriction(b("tile59"), state)
    for row, col in ((6, 4), (6, 5), (6, 8), (6, 9)):
        p.player_on_top(b(_tile_name(row, col)), player, level, row, col)
    p.player_to_left(b("tile74"), player, level, 7, 4)
    p.player_to_right(b("tile75"), player, level, 7, 5)
    p.player_to_left(b("tile78"), player, level, 7, 8)
    p.player_to_right(b("tile79"), player, level, 7, 9)
    p.stop_free_fall(b("tile89"), state)
    floor_box.object_to_left(b("tile417"), floor, level, 4, 17)
    p.player_on_object(floor_box, player, floor)
    p.player_on_top(b("tile615"), player, level, 6, 15)
    p.player_on_top(b("tile616"), player, level, 6, 16)
    p.player_to_left(b("tile715"), player, level, 7, 15)
    b("spider").enemy_to_right(b("tile716"), world.spider, level, 7, 16)
    p.player_to_right(b("tile716"), player, level, 7, 16)
    p.release_jump_restriction(b("tile724"), state)
    for col in (10, 11, 12, 13, 14):
        p.falling_death(b(_tile_name(8, col)), player)
    _collect_coins(world)


def setup_stage_four(world: World) -> None:
    """Place the collision boxes of the fourth stage."""
    _setup_entities(world)
    for row, col in ((3, 9), (4, 8), (5, 7), (6, 6)):
        _tile_box(world, row, col)
        _left_edge_box(world, row, col)
    _tiles(world, (7, 5), (8, 4, 30), (2, 10, 8))
    _left_edge_box(world, 2, 10)
    _tiles(world, (2, 11), (3, 11), (4, 11), (5, 11), (6, 11), (7, 11))
    narrow = _tile_box(world, 7, 17, 8)
    narrow.width = int(narrow.width / NARROW_SHRINK)
    _left_edge_box(world, 7, 17)
    right = _tile_box(world, 7, 17, 0, "_right")
    right.y = world.level.tile_y(7, 17) + EDGE_DROP_Y


def stage_four(world: World) -> None:
    """Run the collision responses of the fourth stage."""
    setup_stage_four(world)
    b = world.box
    p = b("player")
    player, level = world.player, world.level

    for row, col in ((3, 9), (4, 8), (5, 7), (6, 6), (2, 10)):
        p.player_to_left(b(_tile_name(row, col, "_left")), player, level, row, col)
    b("spider").enemy_to_right(b("tile717_right"), world.spider, level, 7, 17)
    for row, col in ((3, 9), (4, 8), (5, 7), (6, 6)):
        p.player_on_top(b(_tile_name(row, col)), player, level, row, col)
    p.player_to_left_stop(b("tile66"), player)
    p.player_on_top(b("tile75"), player, level, 7, 5)
    p.falling_death(b("tile84"), player)
    p.player_on_top(b("tile210"), player, level, 2, 10)
    p.player_on_top(b("tile211"), player, level, 2, 11)
    for row in (3, 4, 5, 6, 7):
        p.player_to_right(b(_tile_name(row, 11)), player, level, row, 11)
    p.player_on_top(b("tile717"), player, level, 7, 17)
    p.player_to_left(b("tile717_left"), player, level, 7, 17)