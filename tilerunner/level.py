"""Tile maps: parsing map files and answering questions about tile positions."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

from .state import GameState
from .textures import Flip, draw, load_texture

MAP_ROWS = 10
MAP_COLS = 30
TILE_SCALE = 3.0
_CELL_CHARS = 3
_LEVEL_FOUR_OFFSET_X = 10


@dataclass
class Tile:
    """A map cell: the sprite-sheet region and where it is drawn."""

    src: pygame.Rect
    dest: pygame.Rect


def _digit(ch: str) -> int:
    return int(ch) if ch in "0123456789" else 0


def parse_map(text, tile_size, tile_scale=TILE_SCALE, rows=MAP_ROWS, cols=MAP_COLS):
    """Parse map text into a grid of tiles.

    Each cell is two characters, the sheet row and the sheet column, followed
    by one separator character.
    """
    text = text.replace("\r\n", "\n")
    needed = rows * cols * _CELL_CHARS - 1
    if len(text) < needed:
        raise ValueError(f"map holds {len(text)} characters, {needed} needed")
    size = int(tile_size * tile_scale)
    step = tile_scale * tile_size
    codes = [text[i:i + 2] for i in range(0, rows * cols * _CELL_CHARS, _CELL_CHARS)]
    grid: list[list[Tile]] = [[] for _ in range(rows)]
    for index, code in enumerate(codes):
        row, col = divmod(index, cols)
        src = pygame.Rect(
            _digit(code[1]) * tile_size, _digit(code[0]) * tile_size, tile_size, tile_size
        )
        dest = pygame.Rect(int(col * step), int(row * step), size, size)
        grid[row].append(Tile(src, dest))
    return grid


class Level:
    """The tile map of the current stage."""

    def __init__(self, state: GameState, tile_size=16, filename="OverWorld.png",
                 assets_dir="assets"):
        self.state = state
        self.tile_size = tile_size
        self.tile_scale = TILE_SCALE
        self.rows = MAP_ROWS
        self.cols = MAP_COLS
        self.assets_dir = Path(assets_dir)
        self.texture = load_texture(self.assets_dir / filename)
        self.tiles: list[list[Tile]] = []
        self._collided = False
        self.load_from_file()

    def load_map(self, path) -> None:
        """Replace the tiles with those of the map file at ``path``."""
        text = Path(path).read_text(encoding="ascii", errors="replace")
        self.tiles = parse_map(text, self.tile_size, self.tile_scale, self.rows, self.cols)

    def load_from_file(self) -> None:
        """Load the first map and record the map's size in pixels."""
        self.load_map(self.assets_dir / "level1.map")
        self.state.map_width = int(self.cols * self.tile_size * self.tile_scale)
        self.state.map_height = int(self.rows * self.tile_size * self.tile_scale)

    def set_next_level(self, number: int) -> None:
        """Load map ``number`` (1 to 4)."""
        if number not in (1, 2, 3, 4):
            raise ValueError(f"no map numbered {number}")
        self.load_map(self.assets_dir / f"level{number}.map")
        if number == 4:
            self.tiles[6][16].dest.x += _LEVEL_FOUR_OFFSET_X

    def update(self) -> None:
        """Load the map that follows from the state's finished-map flags."""
        s = self.state
        if s.finished_map1 and not s.finished_map2:
            self.set_next_level(2)
        if s.finished_map1 and s.finished_map2 and not s.finished_map3:
            self.set_next_level(3)
        if s.finished_map1 and s.finished_map2 and s.finished_map3 and not s.finished_map4:
            self.set_next_level(4)
        if not s.finished_map1 and s.finished_map4:
            self.set_next_level(1)

    def render(self, surface) -> None:
        for row in self.tiles:
            for tile in row:
                draw(surface, self.texture, tile.src, tile.dest, Flip.NONE)

    def _tile(self, row: int, col: int) -> Tile:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"tile ({row}, {col}) is outside the map")
        return self.tiles[row][col]

    def set_tile_texture_to_block_hit(self, row: int, col: int) -> None:
        """Show the tile at (row, col) as an already-hit block."""
        src = self._tile(row, col).src
        src.x = 2 * self.tile_size
        src.y = 0

    def tile_x(self, row: int, col: int) -> int:
        return self._tile(row, col).dest.x

    def tile_y(self, row: int, col: int) -> int:
        return self._tile(row, col).dest.y

    def tile_width(self, row: int, col: int) -> int:
        return self._tile(row, col).dest.width

    def tile_height(self, row: int, col: int) -> int:
        return self._tile(row, col).dest.height

    def mark_collided(self, row: int, col: int, collided: bool) -> None:
        """Set the level-wide collision flag; the cell must lie on the map."""
        self._tile(row, col)
        self._collided = collided

    def is_collided(self, row: int, col: int) -> bool:
        """Return the level-wide collision flag; the cell must lie on the map."""
        self._tile(row, col)
        return self._collided