"""Walking enemies that follow the player."""

from __future__ import annotations

import pygame

from .state import GameState
from .textures import Flip, draw, load_texture

ENEMY_VELOCITY_X = 10.0
ANIMATION_FPS = 60


class Enemy:
    """An animated enemy with separate sprite sheets for each walking direction."""

    def __init__(self, state: GameState, position, scale, filename, tile_width=16,
                 tile_height=16, src_x=0, src_y=0, frames=1):
        self.state = state
        self.x, self.y = (float(v) for v in position)
        self.scale = tuple(float(v) for v in scale)
        self.texture = load_texture(filename)
        self.walk_right_texture = None
        self.sheet_width, self.sheet_height = self.texture.get_size()
        self.src = pygame.Rect(src_x * tile_width, src_y, tile_width, tile_height)
        self.width = int(tile_width * self.scale[0])
        self.height = int(tile_height * self.scale[1])
        self.dest = pygame.Rect(int(self.x), int(self.y), self.width, self.height)
        self.flip = Flip.NONE
        self.velocity_x = ENEMY_VELOCITY_X
        self.frames = frames
        self.frame_time = 0
        self.start_time = pygame.time.get_ticks()
        self.walking_right = False

    @property
    def pos_x(self) -> int:
        return int(self.x)

    @property
    def pos_y(self) -> int:
        return int(self.y)

    def update(self) -> None:
        self.dest.x = int(self.x)
        self.dest.y = int(self.y)
        self.animate()

    def render(self, surface) -> None:
        texture = self.walk_right_texture if self.walking_right else self.texture
        draw(surface, texture, self.src, self.dest, self.flip)

    def animate(self) -> None:
        """Count frames and step to the next sprite when the count comes round."""
        self.frame_time += 1
        if ANIMATION_FPS // self.frame_time == self.frames:
            self.frame_time = 0
            self.src.x += self.src.width
            if self.src.x >= self.sheet_width:
                self.src.x = 0

    def set_texture_walk_right(self, filename, tile_width, tile_height, src_x, src_y) -> None:
        self.walk_right_texture = load_texture(filename)
        self.src = pygame.Rect(src_x * tile_width, src_y, tile_width, tile_height)

    def move_right(self) -> None:
        self.walking_right = True
        self.x += self.velocity_x * self.state.delta_time

    def move_left(self) -> None:
        self.walking_right = False
        self.x -= self.velocity_x * self.state.delta_time

    def chase(self, player_x) -> None:
        """Step toward the player's horizontal position."""
        if player_x < self.x:
            self.move_left()
            self.update()
        if player_x > self.x:
            self.move_right()
            self.update()

    def fall(self, velocity: float) -> None:
        self.y += velocity * self.state.delta_time