# brickbreaker

A small brick-breaking arcade game. You steer a paddle along the bottom of the
playfield, launch a ball and bounce it into walls of bricks until every brick
is gone. Three levels are played in order. Scores are kept on a scoreboard
between sessions.

## Installing

```
pip install .
```

The game draws its window with `pygame`, which is installed along with the
package. To run the tests:

```
pip install .[test]
pytest
```

## Playing

Start the game from the directory that holds the `assets/` folder:

```
brickbreaker
```

The game reads its sprites and font from `assets/sprites/`, its levels from
`assets/maps/1`, `assets/maps/2` and `assets/maps/3`, and keeps the scoreboard
in `assets/scoreboard`. If the scoreboard file does not exist yet, it is
written when the game closes.

The window is 416 x 480 game pixels, drawn at twice that size when the display
is large enough and at normal size otherwise; a display smaller than that is
reported as not supported. The game runs at one frame every 16 milliseconds.
Closing the window ends the game, and so does Ctrl+C. If the game cannot start
(for example because the font or a level file is missing), the error is
printed and the command exits with status 1.

### Controls

| Key      | Action                                           |
|----------|--------------------------------------------------|
| `W`, `S` | move up and down in the main menu                |
| `Enter`  | confirm a menu item, or leave the score screens  |
| `A`, `D` | move the paddle left and right                   |
| `Space`  | launch a ball, or release a caught ball          |
| `Escape` | leave the current screen, or quit from the menu  |

The main menu offers NEW GAME, SCOREBOARD and QUIT. The scoreboard screen
lists the stored scores, highest first. When a game ends, a game-over screen
shows the scores, your score, and a "NEW HIGHSCORE" notice when your score
equals the best one.

### Bricks and bonuses

Blue bricks take one hit, green bricks two and gold bricks three. Each
destroyed brick is worth 250 points. The ball speeds up a little with every
brick it hits. A destroyed brick drops a falling bonus one time in four, with
at most four bonuses falling at once. Catch a bonus with the paddle to get its
effect:

- yellow: a wider paddle
- red: a faster paddle
- blue: the paddle catches the ball; press `Space` to release it
- gray: an extra life, and the paddle returns to normal

Only one paddle effect is active at a time. You start with one life. Losing a
ball costs a life and removes any active effect. The game ends when you have
no lives left and no ball in play, or when you clear the last level.

## Level files

A level is a plain text file of up to 18 rows with up to 13 digits in each row;
each whitespace-separated word is one row. Each digit is one tile:

- `0` is empty
- `1`, `2` and `3` are bricks that take that many hits

Rows and columns beyond those limits are ignored with a logged warning. Any
character that is not a digit raises `brickbreaker.level.LevelError`, and so
does a level without bricks or a file that cannot be opened.

`brickbreaker.level.parse_level(text, source)` turns level text into a grid of
tile numbers, `brickbreaker.level.build_bricks(grid)` places the bricks, and
`brickbreaker.level.Level(filename)` does both for a file.

## Scoreboard file

The scoreboard is a text file with one score per line, highest first. Entries
that do not start with a whole number, or that are negative, are skipped with
a logged warning when the file is loaded. A score of zero is never added.
`brickbreaker.scoreboard.Scoreboard` reads the file when created and writes it
back when used as a context manager and the `with` block ends.

## Using the pieces

The game logic does not need a window. `brickbreaker.game.Game` takes level
files and an optional `random.Random`, and `Game.update(scoreboard, keyboard)`
advances it one tick, with `brickbreaker.keyboard.Keyboard` fed the keys
(`brickbreaker.keyboard.Key`) held down each frame. `Game.render` and the
screens in `brickbreaker.screens` draw through any object with `render` and
`render_text` methods; `brickbreaker.graphics.Graphics` is the `pygame`
window that does this on screen. `brickbreaker.app.Application.step(keyboard,
graphics)` runs one frame of the screen stack.

## What is not included

The package does not ship the sprites, the font or the level files. The
`brickbreaker` command needs an `assets/` folder laid out as described above
in the directory it is started from.