"""Axis-aligned collision boxes and the responses the game applies on contact."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

DEBUG_COLOR = (255, 0, 0)


def _play(sound) -> None:
    if sound is not None:
        sound.play()


@dataclass
class CollisionBox:
    """A rectangle used to test contact between entities and tiles."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    hit: bool = False

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def set(self, x, y, width, height) -> None:
        self.x = int(x)
        self.y = int(y)
        self.width = int(width)
        self.height = int(height)

    def init_from_tile(self, level, row, col, offset_x=0, offset_y=0) -> None:
        """Cover the tile at (row, col), shifted by the given offsets."""
        self.set(
            level.tile_x(row, col) + offset_x,
            level.tile_y(row, col) + offset_y,
            level.tile_width(row, col),
            level.tile_height(row, col),
        )

    def init_from_player(self, player) -> None:
        self.set(player.pos_x, player.pos_y, player.width, player.height)

    def init_from_object(self, obj) -> None:
        self.set(obj.pos_x, obj.pos_y, obj.width, obj.height)

    def init_from_enemy(self, enemy) -> None:
        self.set(enemy.pos_x, enemy.pos_y, enemy.width, enemy.height)

    def overlaps(self, other: CollisionBox) -> bool:
        """True when the two boxes share some area (touching edges do not count)."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def top_collision(self, other: CollisionBox) -> bool:
        return self.y < other.y + other.height

    def bottom_collision(self, other: CollisionBox) -> bool:
        return self.y + self.height > other.y

    def left_collision(self, other: CollisionBox) -> bool:
        return self.x < other.x + other.width

    def right_collision(self, other: CollisionBox) -> bool:
        return self.x + self.width > other.x

    def render(self, surface) -> None:
        """Draw the box outline for debugging."""
        pygame.draw.rect(surface, DEBUG_COLOR, self.rect, 1)

    def player_on_top(self, other, player, level, row, col) -> None:
        """Stand the player on the tile when this (player) box touches it."""
        state = player.state
        if self.overlaps(other) and self.top_collision(other):
            player.y = float(level.tile_y(row, col) - player.height)
            state.player_on_air = False
            state.fall_from_sky = False
            state.player_on_top_of_block = True
        state.player_on_top_of_block = False

    def player_to_left(self, other, player, level, row, col) -> None:
        """Push the player back to the left side of the tile."""
        if (
            self.overlaps(other)
            and not player.state.player_on_top_of_block
            and self.left_collision(other)
        ):
            player.x = float(level.tile_x(row, col) - level.tile_width(row, col))

    def player_to_right(self, other, player, level, row, col) -> None:
        """Push the player to the right side of the tile."""
        if self.overlaps(other) and self.right_collision(other):
            player.x = float(level.tile_x(row, col) + other.width)

    def player_to_left_stop(self, other, player) -> None:
        """Keep the player where it stands when it runs into the tile."""
        state = player.state
        state.player_old_x = player.pos_x
        if self.overlaps(other) and self.left_collision(other):
            player.x = float(state.player_old_x)

    def hit_block_for_item(self, other, obj, level, sound, row, col) -> None:
        """Bump a block from below, releasing its item on the tile above."""
        if self.overlaps(other) and self.bottom_collision(other):
            level.set_tile_texture_to_block_hit(row, col)
            _play(sound)
            if not obj.appears:
                obj.x = float(level.tile_x(row - 1, col))
                obj.y = float(level.tile_y(row - 1, col))
                obj.appears = True
            other.hit = True

    def player_on_object(self, other, player, obj) -> None:
        """Stand the player on top of an object such as a moving floor."""
        if self.overlaps(other) and self.top_collision(other):
            player.y = float(obj.pos_y - self.height)
            player.state.player_on_air = False
            player.state.fall_from_sky = False

    def collect_item(self, other, obj, state, sound) -> None:
        """Collect the object once, adding a point to the score."""
        if self.overlaps(other) and self.bottom_collision(other) and not obj.collected:
            _play(sound)
            obj.collected = True
            state.total_score += 1

    def no_jump(self, other, state) -> None:
        """Block jumping when the box just below this one meets ``other``."""
        bottom = self.y + self.height
        if (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and bottom < other.y + other.height
            and bottom + self.height > other.y
        ):
            state.jump_key_pressed = True

    def jump_restriction(self, other, state) -> None:
        """Lower the jump while something is overhead."""
        if self.overlaps(other):
            state.collided_with_object = True

    def release_jump_restriction(self, other, state) -> None:
        """Allow the normal jump again."""
        if self.overlaps(other):
            state.collided_with_object = False

    def stop_free_fall(self, other, state) -> None:
        if self.overlaps(other):
            state.fall_from_sky = False

    def falling_death(self, other, player) -> None:
        """Send the player falling through a gap."""
        if self.overlaps(other):
            player.state.fall_from_sky = True
            player.fall(player.state.gravity_death_falling)

    def object_to_right(self, other, obj, level, row, col) -> None:
        """Stop an object at the tile's right side and send it right."""
        if self.overlaps(other) and self.right_collision(other):
            obj.x = float(level.tile_x(row, col) + level.tile_width(row, col))
            obj.state.moving_floor_to_left = False

    def object_to_left(self, other, obj, level, row, col) -> None:
        """Stop an object at the tile's left side and send it left."""
        if self.overlaps(other) and self.left_collision(other):
            obj.x = float(level.tile_x(row, col) - obj.width)
            obj.state.moving_floor_to_left = True

    def enemy_to_left(self, other, enemy, level, row, col) -> None:
        if self.overlaps(other) and self.left_collision(other):
            enemy.x = float(level.tile_x(row, col) - enemy.width)

    def enemy_to_right(self, other, enemy, level, row, col) -> None:
        if self.overlaps(other) and self.right_collision(other):
            enemy.x = float(level.tile_x(row, col) + level.tile_width(row, col))