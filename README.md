# termvaders

A small Space Invaders style shooter that you play in a text terminal.

The playing field is 36 columns wide and 20 rows high. You are the `@` on the bottom row. You can move it left and right and fire `*` bullets upward. Each frame shows a status line with your score and your remaining lives.

## Installation

```
pip install .
```

## Playing

Start the game:

```
termvaders
```

The command takes no options except `--help`. It reads commands from standard input. Type a letter and press Enter. Blank characters are ignored, and a line may hold more than one command.

| Key | Action     |
|-----|------------|
| `a` | move left  |
| `d` | move right |
| `w` | shoot      |
| `s` | stop       |

The field is drawn again before each command is read. The game ends on `s`, at the end of input, or when you have no lives left. It then clears the screen and prints your final score.

## What the game does not have

The field has no invaders. Nothing shoots at you and nothing can be hit, so the score stays at 0 and you keep all three lives. Bullets fly up to the top row and disappear there.

## Using it from Python

The game is `termvaders.game.Game`.

- `Game.run_manual_input(input_stream, out)` plays the command-by-command mode described above. It reads from `input_stream` and writes frames to `out`. Both default to standard input and standard output.
- `Game.run(key_source, out, sleep)` plays the timed mode. On every tick it calls `key_source(key)` to ask whether each key is pressed, then waits `tick_speed` milliseconds through `sleep`. The keys are upper-case `A`, `D` and `W`, and `S` stops the game. A shot is allowed only once the reload counter has run down, and the counter then starts again at `reload_time`. The digits `1` to `5` set the tick speed to 200, 100, 50, 1 or 0 ms. The digits `6` to `0` set the reload time to 10, 8, 5, 3 or 0 ticks. By default `key_source` is `termvaders.keys.is_key_pressed`, and that reads one character from standard input on every check.
- `Game.update(out)` advances one tick and writes the frame.
- `Game.render()` and `str(game)` return the current frame as text. The text starts with a cursor-home escape sequence.

The objects on the field are in `termvaders.entities`:

- `GameObject` is the base class.
- `Bullet` moves one row per `update()`, in the direction given by `Direction.UP` or `Direction.DOWN`.
- `Player` has `go_left`, `go_right`, `shoot`, `lose_life`, `add_score` and `tick_reload`.

`termvaders.keys` provides `read_key(stream)` and `is_key_pressed(key, stream)`. When the stream is a terminal that supports it, line buffering and echo are turned off while the key is read.

## Running the tests

```
pip install .[test]
pytest
```