# snakegame

A snake game for the terminal, built on `curses`. Each level is a JSON "card"
that gives the size of the field and where its walls are. A `levels.json`
index lists the levels, and each level has its own high-score table. A level
editor in the terminal draws new cards.

## Installing

```
pip install .
```

The package needs only the standard library. Its front end uses `curses`, so it
runs where Python ships `curses`, such as Linux and macOS.

## Playing

```
snakegame
```

To use a different data directory:

```
snakegame --data-dir path/to/data
```

If you leave out `--data-dir`, the game uses `../data`, relative to the
directory you start it from.

The main menu has four entries: **Play**, **Scores**, **Create level** and
**Exit**. Move through a menu with the up and down arrows or `j`/`k`. Enter
chooses an entry, and `q` or Esc goes back.

### Game screen

| Key            | Action                                   |
|----------------|------------------------------------------|
| Enter          | start                                    |
| space          | pause / resume                           |
| arrows or wasd | steer                                    |
| `r`            | restart the level                        |
| `l`            | go back to the level list                |
| `q`            | go back to the main menu                 |

`r`, `l` and `q` ask for confirmation first, because the game in progress is not
kept. The snake moves one cell every 200 ms. It can turn left or right, but a
request to reverse direction is ignored. Each piece of food scores one point
and lengthens the snake by one cell.

The game ends when the snake leaves the field, runs into a wall or runs into its
own body. Its score is then shown at its place in the level's score table, and
you can type a name to save it there. Esc skips saving. After that the level
starts again.

### Level editor

| Key    | Action                                    |
|--------|-------------------------------------------|
| arrows | move the cursor                           |
| space  | paint the cell under the cursor           |
| `d`    | brush: draw walls                         |
| `w`    | brush: wash walls away                    |
| `n`    | set the level name                        |
| `r`    | set the number of rows                    |
| `c`    | set the number of columns                 |
| `s`    | save                                      |
| `N`    | start a new, empty level                  |
| `q`    | leave the editor                          |

A level is saved as `card_level<name>.json`. If you give no name, the name
`безымянный` is used. If a card with that name already exists, the editor asks
whether to overwrite it:

- Yes: the card is replaced and the level's score table is emptied.
- No: `_copy` is added to the name until the name is free, and the level is
  saved under that name.

Before `N` or `q` discards a level that has a size or a name, the editor offers
to save it.

## Data directory

- `levels.json`: `{"level": ["1", "2", ...]}`. Each entry `"<n>"` names the
  level `level<n>`.
- `card_level<n>.json`: the card for one level:

  ```json
  {
      "col_card": 20,
      "row_card": 15,
      "wall": [{"col": 0, "row": 0}, {"col": 1, "row": 0}]
  }
  ```

- `scores_level<n>.json`: `{"players": [{"name": "...", "score": 12}, ...]}`,
  highest score first. A new score goes in front of the first entry it equals
  or beats. An empty file counts as an empty table.

**Play** offers only the listed levels whose card file exists. **Scores** offers
every listed level.

## Using it as a library

- `snakegame.direction.Direction`: the headings `UP`, `RIGHT`, `DOWN` and
  `LEFT`, with `clockwise()`, `counterclockwise()` and `delta()`.
- `snakegame.snake.Snake`: the snake's cells from tail to head, with `reset`,
  `kill`, `step` and `drop_tail`.
- `snakegame.board.Level`: a card. `Level.load` reads one from a file, and
  `from_dict` / `to_dict` convert it to and from its JSON form.
- `snakegame.board.Board`: a level in play. Build it with `Board(level, rng)` or
  `Board.from_file(path, rng)`. `turn(direction)` moves the snake one step and
  returns a `TurnResult`: `MOVED`, `ATE` or `DIED`. `cell(row, col)` returns a
  `CellType`.
- `snakegame.game.GameSession`: start, pause, steering, ticks and the score, on
  top of a board.
- `snakegame.editor.LevelEditor`: paints walls with a `Brush` onto a resizable
  grid, and `to_level()` turns the grid into a `Level`.
- `snakegame.store.DataStore`: file paths, the level index (`listed_levels`,
  `playable_levels`) and `save_level`.
- `snakegame.scores.ScoreTable`: `load`, `open_or_create`, `insertion_row`,
  `insert` and `save` for `ScoreEntry` rows.
- `snakegame.app.render_board(board)`: the board as lines of text. `#` is a
  wall, `o` the snake, `@` its head, `*` food and `.` an empty cell.

## What it does not do

- It has no graphical window. The game runs only in a terminal.
- The level editor cannot open an existing card for editing. It only creates
  new cards.
- Saving a card does not add its name to `levels.json`. To make a new level
  playable, add the name to the index yourself.