"""The player character: movement, jumping, gravity and sprite animation."""

from __future__ import annotations

import pygame

from .state import GameState
from .textures import Flip, draw, load_texture

ORIGINAL_VELOCITY = 100.0
MAX_JUMP = -7000.0
RESTRICTED_JUMP = -3000.0
SPRINT_VELOCITY = 400.0
ACCELERATION_X = 90.0
FRICTION = 0.02
GRAVITY = 250.0
FRAME_SPEED = 10
MOVE_UP_SPEED = 300.0
LEFT_BOUNDARY_RESET = 3
TOP_BOUNDARY_RESET = 10
BOTTOM_BOUNDARY_MARGIN = 10


class Player:
    """The character the user controls."""

    def __init__(self, state: GameState, position, scale, filename, tile_width=16,
                 tile_height=16, src_x=0, src_y=0, frames=1):
        self.state = state
        self.x, self.y = (float(v) for v in position)
        self.scale = tuple(float(v) for v in scale)
        self.texture = load_texture(filename)
        self.src = pygame.Rect(src_x, src_y, tile_width, tile_height)
        self.dest = pygame.Rect(
            int(self.x), int(self.y),
            int(tile_width * self.scale[0]), int(tile_height * self.scale[1]),
        )
        self.original_tile_width = tile_width
        self.width = int(tile_width * self.scale[0])
        self.height = int(tile_height * self.scale[1])
        self.flip = Flip.NONE
        self.velocity_x = ORIGINAL_VELOCITY
        self.jump_velocity = MAX_JUMP
        self.frames = frames
        self.current_frame = 0
        self.start_time = pygame.time.get_ticks()
        self.falling_animation = False

    @property
    def pos_x(self) -> int:
        return int(self.x)

    @property
    def pos_y(self) -> int:
        return int(self.y)

    def animate(self, ticks=None) -> None:
        """Pick the sprite frame for the time ``ticks`` (milliseconds)."""
        if ticks is None:
            ticks = pygame.time.get_ticks()
        self.current_frame = ((ticks - self.start_time) * FRAME_SPEED // 1000) % self.frames
        self.src.x = self.current_frame * self.src.width

    def update(self) -> None:
        """Advance one frame: walk, keep inside the window, apply gravity."""
        s = self.state
        self.animate()
        if s.right_key_pressed and not s.fall_from_sky and self.velocity_x != 0:
            self.move_right()
            self.x += self.velocity_x * s.delta_time
        if s.left_key_pressed and not s.fall_from_sky and self.velocity_x != 0:
            self.move_left()
            self.x -= self.velocity_x * s.delta_time

        self.dest.x = int(self.x)
        self.dest.y = int(self.y)

        if self.x < 0:
            self.x = LEFT_BOUNDARY_RESET
        if self.y < 0:
            self.y = TOP_BOUNDARY_RESET
        if self.y > s.window_height:
            self.y = s.window_height - BOTTOM_BOUNDARY_MARGIN

        self.gravity()

        if not s.fall_from_sky and self.y >= s.ground_position:
            self.y = s.ground_position
            s.player_on_air = False

    def render(self, surface) -> None:
        draw(surface, self.texture, self.src, self.dest, self.flip)

    def set_texture(self, filename, tile_width, tile_height, src_x, src_y, frames=None,
                    flip=Flip.NONE) -> None:
        """Switch to another sprite sheet; the frame count stays as it was."""
        self.texture = load_texture(filename)
        self.src = pygame.Rect(src_x, src_y, tile_width, tile_height)
        self.flip = flip

    def gravity(self) -> None:
        s = self.state
        if not s.fall_from_sky and self.y < s.ground_position:
            self.y += GRAVITY * s.delta_time

    def stop(self) -> None:
        self.velocity_x = 0.0

    def move_right(self) -> None:
        self.velocity_x += ACCELERATION_X * self.state.delta_time - FRICTION * self.velocity_x

    def move_left(self) -> None:
        self.velocity_x -= ACCELERATION_X * self.state.delta_time + FRICTION * self.velocity_x

    def sprint(self) -> None:
        self.velocity_x = SPRINT_VELOCITY

    def reset_velocity(self) -> None:
        """Return to walking speed unless the sprint key is held."""
        if not self.state.sprint_pressed:
            self.velocity_x = ORIGINAL_VELOCITY

    def jump(self) -> None:
        """Jump; the jump is lower while something is overhead."""
        if self.state.collided_with_object:
            self.jump_velocity = RESTRICTED_JUMP
        else:
            self.jump_velocity = MAX_JUMP
        self.y += self.jump_velocity * self.state.delta_time

    def fall(self, velocity: float) -> None:
        self.y += velocity * self.state.delta_time * 2

    def move_up(self) -> None:
        self.y -= MOVE_UP_SPEED * self.state.delta_time

    def move_down(self) -> None:
        self.velocity_x = 0.0