# tilerunner

Building blocks for a small tile-based side-scrolling platformer drawn with
`pygame`: a tile map, collision boxes and their responses, a player that walks,
jumps and sprints, a spider that chases the player, coins, mushrooms, stars and
moving floors, and the set-up of four stages.

## Installing

```
pip install .
```

This installs `pygame` as well.

## Modules

- `tilerunner.state`: `GameState`, the flags and counters the entities share
  (frame time, window size, score, which maps are finished, whether the player
  is in the air, falling, sprinting, and so on). `reset_map_progress()` clears
  the finished-map flags. The module also holds `FPS`, `MILLISECS_PER_FRAME`,
  `SCREEN_WIDTH`, `SCREEN_HEIGHT` and `GROUND_POSITION`.
- `tilerunner.textures`: `load_texture(filename)` loads an image into a
  surface and raises `TextureError` when it cannot; `draw(surface, texture,
  src, dest, flip)` copies a region of a sprite sheet, scaled to `dest` and
  mirrored according to `Flip`.
- `tilerunner.level`: `parse_map` and `Level`, described below.
- `tilerunner.player`: `Player`, with `update()`, `jump()`, `sprint()`,
  `move_left()`, `move_right()`, `fall()`, `gravity()`, `animate()` and more.
- `tilerunner.enemy`: `Enemy`, a walker with a sheet for each direction and
  `chase(player_x)`.
- `tilerunner.objects`: `GameObject`, for coins, mushrooms, stars and moving
  floors; drawn from a sprite sheet or, without one, as a blue box.
- `tilerunner.collision`: `CollisionBox`, an axis-aligned box with
  `overlaps()`, the side tests `top_collision()`, `bottom_collision()`,
  `left_collision()` and `right_collision()`, and the responses the stages use
  (`player_on_top`, `hit_block_for_item`, `collect_item`, `falling_death`,
  `jump_restriction`, `object_to_left`, `enemy_to_right`, ...).
- `tilerunner.keyboard`: `Keyboard.handle_event(event, pressed, player,
  jump_sound)` applies one `pygame` key event to the player and the state:
  Left / Right walk, Space jumps (with an arrow key, in that direction),
  Z sprints while on the ground, Down stops moving.
- `tilerunner.world`: `World` holds the player, the map, the spider, the items
  and named collision boxes. `setup_level(number)` creates the entities of
  stage 1 to 4, `box(name)` returns a collision box by name, `coins()` and
  `reset_coins()` work on the coins, and `enemy_ai()` moves the spider. The
  plain functions `check_aabb`, `check_top`, `check_bottom`, `check_left` and
  `check_right` test overlaps on raw coordinates.
- `tilerunner.stages`: `setup_stage_one(world)` to `setup_stage_four(world)`
  place each stage's collision boxes, and `stage_one(world)` to
  `stage_four(world)` run that stage's collision responses for one frame.

## Map format

A stage map is 10 rows of 30 tiles. Each tile has two digits, the row and the
column of its image in the tile sheet, and one separator character after it.
`tilerunner.level.parse_map` turns such text into tile rectangles and raises
`ValueError` when the text is too short. `tilerunner.level.Level` reads
`level1.map` to `level4.map` from its assets directory and switches between
them with `set_next_level(number)` or, following the state's finished-map
flags, `update()`.

## Assets

The entities load their images from an assets directory (by default
`assets`): `OverWorld.png`, `player-idle.png`, `player-left.png`,
`player-right.png`, `spider-sprites-left.png`, `spider-sprites-right.png`,
`Object-Items.png`, `items.png`, `coins.png`, `coins2.png` and `Platform.png`,
along with the four map files.

## What is not included

The package has no command to start a game and no window of its own. It
opens no display, runs no event loop, keeps no frame timing, loads no sounds
or music and draws no score text. A program that uses it creates the
`GameState` and `World`, sets `state.delta_time` each frame, passes events to
`Keyboard.handle_event`, calls the stage functions and the entities'
`update()` methods, and draws with their `render(surface)` methods.

## Running the tests

```
pip install .[test]
pytest
```