"""Terminal front end: menus, the game screen, score tables and the level editor."""

from __future__ import annotations

import argparse
import curses
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .board import Board, CellType
from .direction import Direction
from .editor import Brush, LevelEditor
from .game import TICK_MS, GameSession
from .scores import ScoreEntry, ScoreTable
from .store import DEFAULT_LEVEL_NAME, DataStore

GLYPHS = {
    CellType.EMPTY: ".",
    CellType.WALL: "#",
    CellType.SNAKE: "o",
    CellType.SNAKE_HEAD: "@",
    CellType.FOOD: "*",
}

_ENTER = (10, 13, curses.KEY_ENTER)
_ESCAPE = 27
_BACKSPACE = (8, 127, curses.KEY_BACKSPACE)

_STEER = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_RIGHT: Direction.RIGHT,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    ord("w"): Direction.UP,
    ord("d"): Direction.RIGHT,
    ord("s"): Direction.DOWN,
    ord("a"): Direction.LEFT,
}

_MOVE = {
    curses.KEY_UP: (-1, 0),
    curses.KEY_DOWN: (1, 0),
    curses.KEY_LEFT: (0, -1),
    curses.KEY_RIGHT: (0, 1),
}

_PLAY_HELP = "Enter: start  space: pause  arrows/wasd: steer  r: restart  l: levels  q: menu"
_EDIT_HELP = (
    "arrows: move  space: paint  d: draw  w: wash  n: name  r: rows  c: cols  "
    "s: save  N: new  q: quit"
)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snakegame", description="Play snake in the terminal.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="directory holding level maps and score tables (default: ../data)",
    )
    return parser.parse_args(argv)


def render_board(board: Board) -> list[str]:
    """The board as text, one string per row."""
    return [
        "".join(GLYPHS[board.cell(row, col)] for col in range(board.cols))
        for row in range(board.rows)
    ]


def _draw(stdscr: Any, lines: Sequence[str]) -> None:
    stdscr.clear()
    height, width = stdscr.getmaxyx()
    for y, line in enumerate(list(lines)[: max(height - 1, 0)]):
        try:
            stdscr.addstr(y, 0, line[: max(width - 1, 0)])
        except curses.error:
            pass
    stdscr.refresh()


def _message(stdscr: Any, lines: Sequence[str]) -> None:
    stdscr.timeout(-1)
    _draw(stdscr, [*lines, "", "Press any key"])
    stdscr.getch()


def _confirm(stdscr: Any, question: str) -> bool:
    stdscr.timeout(-1)
    _draw(stdscr, [question, "", "y: yes   n: no"])
    return stdscr.getch() in (ord("y"), ord("Y"))


def _menu(stdscr: Any, title: str, options: Sequence[str]) -> int | None:
    selected = 0
    stdscr.timeout(-1)
    while True:
        lines = [title, ""]
        lines += [f"{'>' if i == selected else ' '} {option}" for i, option in enumerate(options)]
        lines += ["", "Enter: choose   q: back"]
        _draw(stdscr, lines)
        key = stdscr.getch()
        if key in (curses.KEY_UP, ord("k")) and options:
            selected = (selected - 1) % len(options)
        elif key in (curses.KEY_DOWN, ord("j")) and options:
            selected = (selected + 1) % len(options)
        elif key in _ENTER and options:
            return selected
        elif key in (ord("q"), _ESCAPE):
            return None


def _prompt(stdscr: Any, header: Sequence[str], label: str) -> str | None:
    text = ""
    stdscr.timeout(-1)
    while True:
        _draw(stdscr, [*header, "", f"{label}: {text}_", "", "Enter: accept   Esc: cancel"])
        key = stdscr.getch()
        if key in _ENTER:
            return text
        if key == _ESCAPE:
            return None
        if key in _BACKSPACE:
            text = text[:-1]
        elif 32 <= key < 127:
            text += chr(key)


def _record(stdscr: Any, store: DataStore, name: str, score: int) -> None:
    path = store.scores_path(name)
    try:
        table = ScoreTable.open_or_create(path)
    except ValueError:
        table = ScoreTable()
    row = table.insertion_row(score)
    entries = list(table)
    lines = [f"Game over on {name}. Score: {score}", ""]
    lines += [f"{entry.score:>6}  {entry.name}" for entry in entries[:row]]
    lines.append(f"{score:>6}  <you>")
    lines += [f"{entry.score:>6}  {entry.name}" for entry in entries[row:]]
    player = _prompt(stdscr, lines, "Your name")
    if player is None:
        return
    table.insert(row, ScoreEntry(player, score))
    table.save(path)


def _play(stdscr: Any, store: DataStore, name: str, board: Board) -> bool:
    """Run one level; True means go back to the level list, False to the main menu."""
    session = GameSession(board)
    period = TICK_MS / 1000
    next_tick: float | None = None
    while True:
        _draw(stdscr, [f"Level: {name}    Score: {session.score}", "", *render_board(board), "", _PLAY_HELP])
        if session.running:
            now = time.monotonic()
            if next_tick is None:
                next_tick = now + period
            stdscr.timeout(max(0, int((next_tick - now) * 1000)))
        else:
            next_tick = None
            stdscr.timeout(-1)

        key = stdscr.getch()
        if key in _STEER:
            session.steer(_STEER[key])
        elif key in _ENTER:
            session.start()
        elif key == ord(" "):
            if session.running:
                session.pause()
            else:
                session.start()
        elif key in (ord("q"), ord("l"), ord("r")):
            was_running = session.running
            session.pause()
            next_tick = None
            if _confirm(stdscr, "The game will not be saved. Continue?"):
                if key == ord("r"):
                    session.restart()
                    continue
                return key == ord("l")
            if was_running:
                session.start()
            continue

        if session.running and next_tick is not None and time.monotonic() >= next_tick:
            next_tick += period
            session.tick()
            if session.game_over:
                _record(stdscr, store, name, session.score)
                session.restart()


def _levels_screen(stdscr: Any, store: DataStore) -> None:
    try:
        names = store.playable_levels()
    except ValueError as exc:
        _message(stdscr, [str(exc)])
        return
    if not names:
        _message(stdscr, [f"No playable levels in {store.root}"])
        return
    while True:
        choice = _menu(stdscr, "Choose a level", names)
        if choice is None:
            return
        name = names[choice]
        try:
            board = Board.from_file(store.card_path(name))
        except (OSError, ValueError) as exc:
            _message(stdscr, [f"Cannot open {name}: {exc}"])
            continue
        if not _play(stdscr, store, name, board):
            return


def _scores_screen(stdscr: Any, store: DataStore) -> None:
    try:
        names = store.listed_levels()
    except ValueError as exc:
        _message(stdscr, [str(exc)])
        return
    if not names:
        _message(stdscr, [f"No levels listed in {store.root}"])
        return
    while True:
        choice = _menu(stdscr, "Scores", names)
        if choice is None:
            return
        name = names[choice]
        try:
            table = ScoreTable.load(store.scores_path(name))
        except FileNotFoundError:
            _message(stdscr, [f"No scores for {name} yet"])
            continue
        except ValueError as exc:
            _message(stdscr, [str(exc)])
            continue
        rows = [f"{entry.score:>6}  {entry.name}" for entry in table]
        _message(stdscr, [f"Scores: {name}", "", *rows])


def _ask_number(stdscr: Any, header: Sequence[str], label: str, current: int) -> int:
    text = _prompt(stdscr, header, label)
    if text is None:
        return current
    try:
        value = int(text)
    except ValueError:
        return current
    return value if value >= 0 else current


def _save_level(stdscr: Any, store: DataStore, editor: LevelEditor) -> None:
    name = editor.name or DEFAULT_LEVEL_NAME
    overwrite = False
    if store.card_path(f"level{name}").exists():
        overwrite = _confirm(stdscr, "A level with this name already exists. Overwrite it?")
    try:
        path = store.save_level(editor.name, editor.to_level(), overwrite)
    except OSError as exc:
        _message(stdscr, [f"Cannot save: {exc}"])
        return
    _message(stdscr, [f"Saved to {path}"])


def _check_save(stdscr: Any, store: DataStore, editor: LevelEditor) -> None:
    if editor.is_dirty and _confirm(stdscr, "Save current changes?"):
        _save_level(stdscr, store, editor)


def _editor_lines(editor: LevelEditor, cursor: tuple[int, int]) -> list[str]:
    lines = [
        f"Name: {editor.name or DEFAULT_LEVEL_NAME}  Size: {editor.rows}x{editor.cols}  "
        f"Brush: {editor.brush.value}",
        "",
    ]
    for row in range(editor.rows):
        cells = []
        for col in range(editor.cols):
            wall = editor.is_wall(row, col)
            if (row, col) == cursor:
                cells.append("X" if wall else "+")
            else:
                cells.append("#" if wall else ".")
        lines.append("".join(cells))
    lines += ["", _EDIT_HELP]
    return lines


def _editor_screen(stdscr: Any, store: DataStore) -> None:
    editor = LevelEditor()
    row = col = 0
    stdscr.timeout(-1)
    while True:
        row = min(row, max(editor.rows - 1, 0))
        col = min(col, max(editor.cols - 1, 0))
        header = _editor_lines(editor, (row, col))
        _draw(stdscr, header)
        key = stdscr.getch()
        if key in _MOVE:
            dr, dc = _MOVE[key]
            row = max(0, min(row + dr, editor.rows - 1))
            col = max(0, min(col + dc, editor.cols - 1))
        elif key == ord(" "):
            if editor.rows and editor.cols:
                editor.paint(row, col, row, col)
        elif key == ord("d"):
            editor.brush = Brush.DRAW
        elif key == ord("w"):
            editor.brush = Brush.WASH
        elif key == ord("n"):
            name = _prompt(stdscr, header, "Level name")
            if name is not None:
                editor.name = name
        elif key == ord("r"):
            editor.resize(_ask_number(stdscr, header, "Rows", editor.rows), editor.cols)
        elif key == ord("c"):
            editor.resize(editor.rows, _ask_number(stdscr, header, "Columns", editor.cols))
        elif key == ord("s"):
            _save_level(stdscr, store, editor)
        elif key == ord("N"):
            _check_save(stdscr, store, editor)
            editor.reset()
            row = col = 0
        elif key in (ord("q"), _ESCAPE):
            _check_save(stdscr, store, editor)
            return


def run(stdscr: Any, store: DataStore) -> None:
    """The main menu loop; returns when the player chooses to exit."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    actions = [
        ("Play", _levels_screen),
        ("Scores", _scores_screen),
        ("Create level", _editor_screen),
    ]
    while True:
        choice = _menu(stdscr, "Snake", [label for label, _ in actions] + ["Exit"])
        if choice is None or choice == len(actions):
            return
        actions[choice][1](stdscr, store)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    store = DataStore(args.data_dir)
    curses.wrapper(run, store)
    return 0