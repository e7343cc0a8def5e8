"""Shared game state: timing, window size, score and the player/world flags."""

from __future__ import annotations

from dataclasses import dataclass

FPS = 60
MILLISECS_PER_FRAME = 1000 // FPS
SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 700
GROUND_POSITION = 340


@dataclass
class GameState:
    """Mutable state shared by every entity of a running game."""

    delta_time: float = 0.0
    gravity_death_falling: float = 50.0
    window_width: int = SCREEN_WIDTH
    window_height: int = SCREEN_HEIGHT
    map_width: int = 0
    map_height: int = 0
    player_old_x: int = 0
    total_score: int = 0
    ground_position: int = GROUND_POSITION

    finished_map1: bool = False
    finished_map2: bool = False
    finished_map3: bool = False
    finished_map4: bool = False

    jump_key_pressed: bool = False
    player_on_air: bool = False
    fall_from_sky: bool = False
    collided_with_object: bool = False
    sprint_pressed: bool = False
    left_key_pressed: bool = False
    right_key_pressed: bool = False
    player_idle: bool = False
    player_on_top_of_block: bool = False
    moving_floor_to_left: bool = True

    def reset_map_progress(self) -> None:
        """Forget which maps were finished, so play starts again on map one."""
        self.finished_map1 = False
        self.finished_map2 = False
        self.finished_map3 = False
        self.finished_map4 = False