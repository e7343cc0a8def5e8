"""Items and platforms: coins, mushrooms, stars and moving floors."""

from __future__ import annotations

import pygame

from .state import GameState
from .textures import Flip, draw, load_texture

OBJECT_VELOCITY_X = 10.0
OBJECT_GRAVITY = 20.0
ANIMATION_FPS = 60
PLAIN_COLOR = (0, 0, 255)


class GameObject:
    """A world object, drawn from a sprite sheet or, without one, as a blue box."""

    def __init__(self, state: GameState, position, scale, tile_width, tile_height,
                 filename=None, src_x=0, src_y=0, frames=1, animated=False):
        self.state = state
        self.x, self.y = (float(v) for v in position)
        self.scale = tuple(float(v) for v in scale)
        self.width = int(tile_width * self.scale[0])
        self.height = int(tile_height * self.scale[1])
        self.dest = pygame.Rect(int(self.x), int(self.y), self.width, self.height)
        self.flip = Flip.NONE
        if filename is None:
            self.texture = None
            self.draw_texture = False
            self.sheet_width = self.sheet_height = 0
            self.src = pygame.Rect(0, 0, tile_width, tile_height)
        else:
            self.texture = load_texture(filename)
            self.draw_texture = True
            self.sheet_width, self.sheet_height = self.texture.get_size()
            self.src = pygame.Rect(
                src_x * tile_width, src_y * tile_height, tile_width, tile_height
            )
        self.velocity = OBJECT_VELOCITY_X
        self.gravity_strength = OBJECT_GRAVITY
        self.frames = frames
        self.frame_time = 0
        self.animated = animated
        self.start_time = pygame.time.get_ticks()
        self.collected = False
        self.on_air = False
        self.gravity_applied = False
        self.on_ground = False
        self.appears = False

    @property
    def pos_x(self) -> int:
        return int(self.x)

    @property
    def pos_y(self) -> int:
        return int(self.y)

    def update(self) -> None:
        """Move the drawn box, animate, apply gravity and stop at the ground."""
        self.dest.x = int(self.x)
        self.dest.y = int(self.y)
        if self.animated:
            self.animate()
        if self.gravity_applied:
            self.gravity()
        ground = self.state.ground_position
        if self.y >= ground:
            self.y = ground
            self.on_ground = True
        else:
            self.on_ground = False

    def render(self, surface) -> None:
        if self.draw_texture:
            draw(surface, self.texture, self.src, self.dest, self.flip)
        else:
            surface.fill(PLAIN_COLOR, self.dest)

    def set_texture(self, filename, tile_width, tile_height, src_x, src_y,
                    flip=Flip.NONE) -> None:
        self.texture = load_texture(filename)
        self.src = pygame.Rect(src_x, src_y, tile_width, tile_height)
        self.flip = flip

    def animate(self) -> None:
        """Count frames and step to the next sprite when the count comes round."""
        self.frame_time += 1
        if ANIMATION_FPS // self.frame_time == self.frames:
            self.frame_time = 0
            self.src.x += self.src.width
            if self.src.x >= self.sheet_width:
                self.src.x = 0

    def move_left(self) -> None:
        self.x -= self.velocity * self.state.delta_time

    def move_right(self) -> None:
        self.x += self.velocity * self.state.delta_time

    def gravity(self) -> None:
        if not self.on_ground:
            self.y += self.gravity_strength * self.state.delta_time

    def fall(self, velocity: float) -> None:
        self.y += velocity * self.state.delta_time