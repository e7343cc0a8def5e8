"""Turning key presses into player movement, jumps and sprints."""

from __future__ import annotations

from pathlib import Path

import pygame

from .textures import Flip


def _held(pressed, key) -> bool:
    return bool(pressed[key])


class Keyboard:
    """Applies keyboard events to the player and the shared state."""

    def __init__(self, assets_dir="assets"):
        self.assets_dir = Path(assets_dir)

    def _asset(self, name: str) -> Path:
        return self.assets_dir / name

    def _can_jump(self, state) -> bool:
        return not state.fall_from_sky and not state.player_on_air and not state.jump_key_pressed

    def handle_event(self, event, pressed, player, jump_sound=None) -> None:
        """Handle one event; ``pressed`` maps key codes to their held state."""
        state = player.state
        right_sheet = self._asset("player-right.png")
        left_sheet = self._asset("player-left.png")

        if event.type == pygame.KEYDOWN:
            space = _held(pressed, pygame.K_SPACE)
            right = _held(pressed, pygame.K_RIGHT)
            left = _held(pressed, pygame.K_LEFT)

            if space and right and self._can_jump(state):
                player.jump()
                state.jump_key_pressed = True
                player.move_right()
                self._play(jump_sound)
                if state.right_key_pressed:
                    player.set_texture(right_sheet, 16, 16, 32, 0, 5, Flip.NONE)
                state.player_on_air = True

            if space and left and self._can_jump(state):
                player.jump()
                state.jump_key_pressed = True
                player.move_left()
                self._play(jump_sound)
                if state.left_key_pressed:
                    player.set_texture(left_sheet, 16, 16, 1, 0, 5, Flip.NONE)
                state.player_on_air = True

            if space and self._can_jump(state):
                player.jump()
                state.jump_key_pressed = True
                self._play(jump_sound)
                if state.right_key_pressed:
                    player.set_texture(right_sheet, 16, 16, 32, 0, 5, Flip.NONE)
                if state.left_key_pressed:
                    player.set_texture(left_sheet, 16, 16, 32, 0, 5, Flip.NONE)
                state.player_on_air = True

            if right and not state.fall_from_sky:
                player.reset_velocity()
                player.move_right()
                player.set_texture(right_sheet, 16, 16, 0, 0, 5, Flip.NONE)
                state.right_key_pressed = True

            if left and not state.fall_from_sky:
                player.reset_velocity()
                player.move_left()
                player.set_texture(left_sheet, 16, 16, 0, 0, 5, Flip.NONE)
                state.left_key_pressed = True

        key = getattr(event, "key", None)

        if event.type == pygame.KEYUP:
            if key == pygame.K_LEFT:
                state.left_key_pressed = False
            elif key in (pygame.K_RIGHT, pygame.K_SPACE):
                if key == pygame.K_RIGHT:
                    state.right_key_pressed = False
                state.jump_key_pressed = False
            elif key == pygame.K_z:
                state.sprint_pressed = False
                player.reset_velocity()

        if event.type == pygame.KEYDOWN:
            if key == pygame.K_z:
                if not state.player_on_air and not state.fall_from_sky and not state.sprint_pressed:
                    state.sprint_pressed = True
                    player.sprint()
            elif key == pygame.K_DOWN:
                if not state.fall_from_sky:
                    player.move_down()

    @staticmethod
    def _play(sound) -> None:
        if sound is not None:
            sound.play()