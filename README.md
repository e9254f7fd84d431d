# slugrace

A small race you can bet on. Slugcats are let loose from a starting gate,
bounce around the map with pixel-perfect collisions against the walls and
against each other, and the first one to touch the food wins.

## Installing

```
pip install .
```

## Running

Start the race from a directory that holds a `map.txt` file and a `DATA`
directory:

```
slugrace
```

Options:

| Option | Default | Meaning |
|--------|---------|---------|
| `--data-dir` | `DATA` | directory holding the game assets |
| `--map-file` | `map.txt` | file naming the map to race on |

The map file holds the name of the map; line breaks in it are ignored. The
name must match a directory under `<data dir>/maps/`, otherwise the command
stops with `FileNotFoundError`.

### Data layout

```
DATA/
  icon.png
  maps/<map name>/bg.png          background image
  maps/<map name>/col_map.png     collision map (opaque pixels are walls)
  maps/<map name>/food.png        the finish line
  maps/<map name>/metadata.json   {"food_spawn_pos": [x, y], "gate_spawn_pos": [x, y]}
  racers/sprites/*.png            one sprite per racer; the file name is the racer's name
  racers/win/_default.png         shown when the race is won
  racers/win/<racer name>.png     optional racer-specific win screen
  music/race/*.mp3                one track is picked at random for the race
  music/win/*.mp3                 one track is picked at random for the win screen
  sfx/win.wav, sfx/applause.wav, sfx/countdown.wav
```

A pixel counts as solid when its alpha is above 64, in both racer sprites
and the collision map. The collision map should be the size of the window
(1024×768). A spawn position that is missing or not a list of at least two
entries falls back to `(0, 0)`; a non-numeric coordinate counts as `0`.

Racers are drawn at a quarter of their sprite size and lined up to the
right of the gate position in file-name order; the food is drawn at 0.08 of
its image size.

### Controls

| Key | Action |
|-----|--------|
| Q or Escape | quit |
| D   | show or hide the frame rate and mouse position |
| R   | end the race straight away |

The race starts after a three-second countdown ("PLACE YOUR BETS!"). When a
racer reaches the food the race music stops and the win sound plays; once it
has finished, the win screen is shown with the winner's name, the applause
plays and the win track loops.

## Using the pieces

The game logic is usable on its own:

- `slugrace.timer.Timer` counts down by the frame time given to `tick`;
  `seconds_remaining()` never goes below zero and `is_done()` is true once
  the time has run out.
- `slugrace.masks.texture_to_collision_mask(texture, scale)` turns a pygame
  surface, resized by `scale`, into a row-major list of booleans.
- `slugrace.entity.Slugcat.update` moves a racer one step, bouncing off the
  collision mask, the screen edges and the other racers' `CollisionData`
  (taken with `Entity.to_collision_data`). Pass `rng=random.Random(seed)` to
  `Slugcat` for repeatable speeds.
- `slugrace.entity.Food.update` returns the name of the first racer whose
  bounding box overlaps the food, or `None` when nobody does.
- `slugrace.gamemap.load_map` and `parse_spawn_pos` read a map directory;
  `slugrace.utils` has `load_slugcats`, `get_music_name`,
  `get_map_name_from_file` and `list_files_with_extension`.
- `slugrace.rendersystem.Viewport` opens the window (at most 300 FPS) and
  loads images; it is a context manager that closes the window on exit.
- `slugrace.game.win_image_path` picks the winner's win image or the default.

## Tests

```
pip install ".[test]"
pytest
```