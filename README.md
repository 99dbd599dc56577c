# bombhunter

A small arcade game built on pygame. You fly across the top of the screen
and drop bombs on the enemies that pass below. You have sixty seconds to
score as many points as you can.

## Installing

```
pip install .
```

To also install what the tests need:

```
pip install ".[test]"
```

## Playing

Start the game from the directory that holds the `Resource/` folder with
the images, sounds and the high-score file:

```
bombhunter
```

The high score is read from `Resource/dat/High_Score.csv` by default. Another
file can be given with:

```
bombhunter --high-score path/to/High_Score.csv
```

The file must exist when the game starts; it holds a single number followed
by a comma, for example `0,`. If the file or any image or sound cannot be
loaded, the message is printed to standard error and the command exits
with status 1.

Controls:

| Key         | Action                          |
|-------------|---------------------------------|
| Left/Right  | Move the player                 |
| Z           | Drop a bomb                     |
| Space       | Play again after time runs out  |
| Esc         | Quit                            |

Bombs fall from the player and explode when they touch an enemy or reach
the ground. A bomb that touches the player while it is moving is pushed in
that direction. Box enemies fire bullets at the player.

## Scoring

- Box and winged enemies give 10 points.
- Gold enemies give 100 points.
- Hitting a harpy takes away 20 points.
- Getting hit by an enemy bullet takes away 20 points.

The score never goes below zero. When time runs out you get a rating:
Perfect from 1500 points, Good from 1000, OK from 500, and Bad below
that. A new high score is written back to the high-score file.

## What is not included

The package holds only the game code. The images, sounds and the
high-score file under `Resource/` are not shipped with it and must be
supplied separately.

## Layout

- `bombhunter.vector2d`: the `Vector2D` type used for positions and sizes.
- `bombhunter.input_control`: `InputControl` tracks key presses from frame to frame; `Key` names the keys the game uses.
- `bombhunter.resource_manager`: `ResourceManager` loads each image and sound once and caches it; `ResourceError` is raised when a file cannot be loaded.
- `bombhunter.game_object`: the `GameObject` base class, `ObjectType` and `draw_rotated`.
- `bombhunter.player`, `bombhunter.bomb`, `bombhunter.enemy`, `bombhunter.enemy_bullet`: the game objects.
- `bombhunter.score`, `bombhunter.time_up`, `bombhunter.fly_text`: the score display, the end-of-round rating (`evaluate`) and the points shown when an enemy is hit.
- `bombhunter.scene`: `Scene` runs one round; `boxes_overlap` is its hit test.
- `bombhunter.app`: `main()` opens the window and runs the game loop.