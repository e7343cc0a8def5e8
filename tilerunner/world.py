"""The entities of a running game and the stage set-ups that create them."""

from __future__ import annotations

from pathlib import Path

from .collision import CollisionBox
from .enemy import Enemy
from .level import Level
from .objects import GameObject
from .player import Player
from .state import GameState

TILE_SIZE = 16
TILESET = "OverWorld.png"
MOVING_FLOOR_VELOCITY = 50.0
COIN_NAMES = ("coin17", "coin44", "coin47", "coin71", "coin410", "coin515")


def check_aabb(ax, ay, aw, ah, bx, by, bw, bh) -> bool:
    """True when box A and box B overlap."""
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def check_top(ay, by, bh) -> bool:
    return ay < by + bh


def check_bottom(ay, ah, by) -> bool:
    return ay + ah > by


def check_right(ax, aw, bx) -> bool:
    return ax + aw > bx


def check_left(ax, bx, bw) -> bool:
    return ax < bx + bw


class World:
    """Holds the player, the map, the enemy, the items and their collision boxes.

    Entities that a stage does not create are kept from the stage before, so
    coins of the first stage remain known after moving on.
    """

    def __init__(self, state: GameState, assets_dir="assets"):
        self.state = state
        self.assets_dir = Path(assets_dir)
        self.current_level = 0

        self.player: Player | None = None
        self.level: Level | None = None
        self.spider: Enemy | None = None
        self.moving_floor: GameObject | None = None
        self.star: GameObject | None = None

        self.coin17: GameObject | None = None
        self.coin44: GameObject | None = None
        self.coin47: GameObject | None = None
        self.coin71: GameObject | None = None
        self.coin410: GameObject | None = None
        self.coin515: GameObject | None = None

        self.mushroom: GameObject | None = None
        self.green_mushroom: GameObject | None = None
        self.red_mushroom: GameObject | None = None
        self.mushroom_green: GameObject | None = None

        self.jump_sound = None
        self.bump_sound = None
        self.coin_sound = None

        self.spider_chases_player = True
        self._boxes: dict[str, CollisionBox] = {}

    def _asset(self, name: str) -> Path:
        return self.assets_dir / name

    def _player(self, position) -> Player:
        return Player(self.state, position, (3.0, 3.0), self._asset("player-idle.png"),
                      16, 16, 0, 0, 4)

    def _spider(self, position, frames) -> Enemy:
        spider = Enemy(self.state, position, (2.0, 2.0),
                       self._asset("spider-sprites-left.png"), 32, 16, 0, 0, frames)
        spider.set_texture_walk_right(self._asset("spider-sprites-right.png"), 32, 16, 0, 0)
        return spider

    def _item(self, position, scale, sheet, src_x, src_y=0) -> GameObject:
        return GameObject(self.state, position, scale, 16, 16, self._asset(sheet),
                          src_x, src_y)

    def _coin(self, position, sheet, frames) -> GameObject:
        return GameObject(self.state, position, (2.0, 2.0), 16, 16, self._asset(sheet),
                          0, 0, frames, True)

    def _mushroom(self, src_x) -> GameObject:
        return self._item((0, 0), (3.0, 3.0), "Object-Items.png", src_x)

    def _moving_floor(self, position) -> GameObject:
        floor = GameObject(self.state, position, (3.0, 3.0), 48, 16,
                           self._asset("Platform.png"), 0, 0)
        floor.velocity = MOVING_FLOOR_VELOCITY
        return floor

    def setup_level(self, number: int) -> None:
        """Create the entities of stage ``number`` (1 to 4)."""
        if number not in (1, 2, 3, 4):
            raise ValueError(f"no stage numbered {number}")
        level = Level(self.state, TILE_SIZE, TILESET, self.assets_dir)

        if number == 1:
            self.player = self._player((10.0, 300.0))
            self.level = level
            self.spider = self._spider((400.0, 355.0), 2)
            self.star = self._item((60, 60), (2.0, 2.0), "Object-Items.png", 3)
            self.coin17 = self._coin((340, 60), "coins.png", 7)
            self.coin44 = self._coin((200, 200), "coins.png", 7)
            self.coin47 = self._coin((340, 200), "coins.png", 7)
            self.coin71 = self._coin((30, 250), "coins2.png", 4)
            self.coin410 = self._coin((490, 200), "coins.png", 7)
            self.coin515 = self._coin((740, 250), "coins2.png", 4)
            self.mushroom = self._mushroom(0)
            self.green_mushroom = self._mushroom(1)
            self.red_mushroom = self._mushroom(0)
            self.mushroom_green = self._mushroom(1)
        elif number == 2:
            self.player = self._player((10.0, 339.0))
            self.level = level
            self.spider = self._spider((340.0, 355.0), 3)
            self.coin515 = self._coin((720, 210), "coins2.png", 4)
            self.mushroom = self._mushroom(0)
            self.green_mushroom = self._mushroom(1)
            self.red_mushroom = self._mushroom(0)
            self.moving_floor = self._moving_floor((400, 380))
            self.star = self._item((60, 60), (2.0, 2.0), "items.png", 48)
        elif number == 3:
            self.player = self._player((10.0, 339.0))
            self.level = level
            self.spider = self._spider((800.0, 355.0), 3)
            self.red_mushroom = self._mushroom(0)
            self.mushroom_green = self._mushroom(1)
            self.moving_floor = self._moving_floor((500, 200))
            self.star = self._item((200.0, 10.0), (2.0, 2.0), "items.png", 48)
        else:
            self.player = self._player((10.0, 339.0))
            self.level = level
            self.spider = self._spider((1000.0, 355.0), 3)
            self.moving_floor = self._moving_floor((600, 200))
            self.star = self._item((200.0, 10.0), (2.0, 2.0), "items.png", 48)

        self.current_level = number

    def box(self, name: str) -> CollisionBox:
        """Return the collision box called ``name``, creating it on first use."""
        try:
            return self._boxes[name]
        except KeyError:
            box = self._boxes[name] = CollisionBox()
            return box

    def coins(self) -> list[GameObject]:
        """The coins that exist, in a fixed order."""
        return [coin for coin in (getattr(self, name) for name in COIN_NAMES)
                if coin is not None]

    def reset_coins(self) -> None:
        """Make every coin collectable again."""
        for coin in self.coins():
            coin.collected = False

    def enemy_ai(self) -> None:
        """Walk the spider toward the player, or to the left edge until it chases."""
        player, spider = self.player, self.spider
        if player.pos_x < spider.pos_x and self.spider_chases_player:
            spider.move_left()
        if player.pos_x > spider.pos_x and self.spider_chases_player:
            spider.move_right()
        if not self.spider_chases_player:
            spider.move_left()
            if spider.pos_x < 0:
                spider.x = 0.0
                self.spider_chases_player = True
        if self.box("player").x < self.box("tile715").x:
            self.spider_chases_player = True
        spider.update()