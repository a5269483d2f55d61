#!/usr/bin/env python3
"""
Minesweeper - command line driver.

Usage:
    python main.py [-x WIDTH] [-y HEIGHT] [-m MINES] [--seed N]

Commands (one per line on stdin):
    o X Y     open cell
    f X Y     cycle flag
    c X Y     clear flag
    s         surrender
    u / r     undo / redo
    n         new game
    w|h|m +|- change width, height or mines and restart
    p +|-     change mines by one percent and restart
    q         quit
"""
import argparse
import logging
import sys
from typing import Optional

from src.minesweeper import (
    Action,
    BoardConfig,
    ClearFlag,
    FlagCell,
    IncrementMines,
    IncrementMinesPercent,
    Minesweeper,
    OpenCell,
    Redo,
    ResizeH,
    ResizeV,
    Restart,
    Sign,
    Surrender,
    Undo,
    WinState,
)

CELL_COMMANDS = {"o": OpenCell, "f": FlagCell, "c": ClearFlag}
SIMPLE_COMMANDS = {"s": Surrender, "u": Undo, "r": Redo, "n": Restart}
RESTART_CHANGES = {
    "w": ResizeH,
    "h": ResizeV,
    "m": IncrementMines,
    "p": IncrementMinesPercent,
}
SIGNS = {"+": Sign.POSITIVE, "-": Sign.NEGATIVE}


def parse_command(line: str) -> Optional[Action]:
    """
    Translate one input line into an engine action.

    Raises:
        ValueError: If the line is not a valid command.
    """
    parts = line.split()
    if not parts:
        return None
    name, args = parts[0].lower(), parts[1:]

    if name in CELL_COMMANDS:
        if len(args) != 2:
            raise ValueError(f"'{name}' expects X and Y")
        x, y = int(args[0]), int(args[1])
        if x < 0 or y < 0:
            raise ValueError("Coordinates cannot be negative")
        return CELL_COMMANDS[name]((x, y))
    if name in SIMPLE_COMMANDS and not args:
        return SIMPLE_COMMANDS[name]()
    if name in RESTART_CHANGES and len(args) == 1 and args[0] in SIGNS:
        return Restart(RESTART_CHANGES[name](SIGNS[args[0]]))
    raise ValueError(f"Unknown command: {line.strip()}")


def print_board(game: Minesweeper) -> None:
    """Print the status line and board snapshot."""
    board = game.board
    print(
        f"{game.title} {board.win_state.name} | "
        f"Mines left: {board.remaining_mines:>{game.mines_digits}}"
    )
    print(game, end="")
    if board.win_state == WinState.WON:
        print("*** WIN! ***")
    elif board.win_state == WinState.LOST:
        print("*** LOST ***")


def play(game: Minesweeper) -> None:
    """Read commands from stdin until EOF or 'q'."""
    print_board(game)
    for line in sys.stdin:
        if line.strip().lower() == "q":
            break
        try:
            action = parse_command(line)
        except ValueError as error:
            print(f"Error: {error}", file=sys.stderr)
            continue
        if action is None:
            continue
        game.submit(action)
        if game.update():
            print_board(game)


def main() -> None:
    """Parse arguments and start a game."""
    parser = argparse.ArgumentParser(description="Command line minesweeper")
    parser.add_argument(
        "-x", "--width", type=int, default=32, help="Board width"
    )
    parser.add_argument(
        "-y", "--height", type=int, default=16, help="Board height"
    )
    parser.add_argument(
        "-m", "--mines", type=int, default=100, help="Number of mines"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    parser.add_argument(
        "--no-flag-cap",
        action="store_true",
        help="Allow more flags than there are mines",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    # BoardConfig rejects these outright; the engine clamps the rest
    width = max(args.width, 1)
    height = max(args.height, 1)
    mines = min(max(args.mines, 0), width * height - 1)
    config = BoardConfig(width, height, mines, cap_flags=not args.no_flag_cap)

    play(Minesweeper(config, seed=args.seed))


if __name__ == "__main__":
    main()
