"""
CLI Module - Command-line front end for the puzzle box engine.

Prints the daily or a practice puzzle, solves a share code, or checks a
move sequence.

Example:
    python main.py daily
    python main.py practice --difficulty hard --show-solution
    python main.py solve 1010100011111
    python main.py play 1010100011111 1-4
"""

import sys
import logging
import argparse
import random
from datetime import datetime, timezone
from typing import List, Optional

from termcolor import colored

from .engine import (
    Color,
    GridState,
    MoveSequence,
    parse_tile_numbers,
    tile_numbers,
)
from .puzzles import (
    Puzzle,
    daily_puzzle_for_number,
    decode,
    get_tier_names,
    practice_puzzle,
    puzzle_number,
    time_until_next_puzzle,
)
from .settings import load_settings, save_settings


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNSOLVED = 1
EXIT_BAD_INPUT = 2

# Terminal styling per tile color
_STYLES = {
    Color.GRAY: ("dark_grey", None),
    Color.WHITE: ("white", None),
    Color.YELLOW: ("yellow", None),
    Color.PURPLE: ("magenta", None),
    Color.GREEN: ("green", None),
    Color.PINK: ("light_magenta", None),
    Color.ORANGE: ("light_red", None),
    Color.BLACK: ("black", "on_light_grey"),
    Color.RED: ("red", None),
    Color.BLUE: ("blue", None),
}


def configure_logging(debug: bool) -> None:
    """Configure root logging for console output."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def color_text(color: Color, text: Optional[str] = None) -> str:
    """Color label (or text) styled for the terminal."""
    fg, bg = _STYLES[color]
    return colored(text if text is not None else color.label, fg, bg)


def format_moves(moves: MoveSequence) -> str:
    """Hyphen-joined 1-based tile numbers, e.g. '1-4-7'."""
    return "-".join(str(n) for n in tile_numbers(moves))


def format_grid(grid: GridState) -> str:
    """Grid as three lines of numbered, colored tiles."""
    lines = []
    for r, row in enumerate(grid.cells):
        tiles = []
        for c, cell in enumerate(row):
            tile = r * 3 + c + 1
            tiles.append(f"{tile} " + color_text(cell, f"{cell.value:<6}"))
        lines.append("  " + "  ".join(tiles))
    return "\n".join(lines)


def format_puzzle(puzzle: Puzzle, title: str, show_solution: bool = False) -> str:
    """Multi-line description of a puzzle."""
    corners = puzzle.target_corners
    optimal = puzzle.optimal_moves
    lines = [
        f"{title} ({puzzle.difficulty or 'custom'})"
        + (f" - optimal {optimal} moves" if optimal is not None else " - no known solution"),
        format_grid(puzzle.grid),
        "Target corners: "
        + " ".join(
            f"{label}={color_text(color)}"
            for label, color in zip(("TL", "TR", "BL", "BR"), corners.as_tuple())
        ),
        f"Code: {puzzle.share_code}",
    ]
    if show_solution and puzzle.solution is not None:
        lines.append(f"Solution: {format_moves(puzzle.solution) or '(already solved)'}")
    return "\n".join(lines)


class Application:
    """
    Command dispatcher.

    Holds the loaded settings and maps each sub-command to a handler
    returning an exit code.
    """

    def __init__(self, settings: dict, settings_path: Optional[str] = None):
        self.settings = settings
        self.settings_path = settings_path

    def run(self, args: argparse.Namespace) -> int:
        handler = getattr(self, f"_cmd_{args.command}")
        try:
            return handler(args)
        except ValueError as e:
            logger.error(f"Invalid input: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_BAD_INPUT

    @property
    def max_states(self) -> int:
        return int(self.settings.get("solver_max_states", 50000))

    def _cmd_daily(self, args: argparse.Namespace) -> int:
        """Print the daily puzzle for today, a date, or an ordinal."""
        if args.number is not None:
            number = args.number
        elif args.date:
            moment = datetime.strptime(args.date, "%Y-%m-%d").replace(tzinfo=timezone.utc)
            number = puzzle_number(moment)
        else:
            number = puzzle_number()
        if number < 1:
            raise ValueError(f"Puzzle numbers start at 1, got {number}")

        puzzle = daily_puzzle_for_number(number, max_states=self.max_states)
        print(format_puzzle(puzzle, f"Daily #{number}", show_solution=args.show_solution))

        if args.number is None and not args.date:
            remaining = time_until_next_puzzle()
            hours, rest = divmod(int(remaining.total_seconds()), 3600)
            print(f"Next puzzle in {hours}h {rest // 60:02d}m")
        return EXIT_OK

    def _cmd_practice(self, args: argparse.Namespace) -> int:
        """Print a practice puzzle."""
        difficulty = args.difficulty or self.settings.get("practice_difficulty", "medium")
        rng = random.Random(args.seed) if args.seed is not None else None
        puzzle = practice_puzzle(difficulty, rng=rng, max_states=self.max_states)
        print(format_puzzle(puzzle, "Practice", show_solution=args.show_solution))

        if args.save:
            self.settings["practice_difficulty"] = difficulty
            save_settings(self.settings, self.settings_path)
            logger.info(f"Saved practice difficulty: {difficulty}")
        return EXIT_OK

    def _decode(self, code: str, max_moves: int) -> Optional[Puzzle]:
        # decode() rejects padded codes
        puzzle = decode(code.strip(), max_moves=max_moves)
        if puzzle is None:
            print(f"Error: invalid puzzle code {code!r}", file=sys.stderr)
        return puzzle

    def _cmd_solve(self, args: argparse.Namespace) -> int:
        """Decode a share code and print its shortest solution."""
        if args.max_moves is not None:
            max_moves = args.max_moves
        else:
            max_moves = int(self.settings.get("decode_max_moves", 20))
        puzzle = self._decode(args.code, max_moves)
        if puzzle is None:
            return EXIT_BAD_INPUT

        print(format_puzzle(puzzle, "Puzzle", show_solution=True))
        if puzzle.solution is None:
            print(f"No solution within {max_moves} moves")
            return EXIT_UNSOLVED
        return EXIT_OK

    def _cmd_play(self, args: argparse.Namespace) -> int:
        """Replay a move sequence on a share code and report the outcome."""
        puzzle = self._decode(args.code, int(self.settings.get("decode_max_moves", 20)))
        if puzzle is None:
            return EXIT_BAD_INPUT

        moves = parse_tile_numbers(args.moves)
        final = puzzle.grid
        for step, move in enumerate(moves, 1):
            # Gray tiles are disabled in play
            if not final.get_cell(move.row, move.col).is_actionable:
                raise ValueError(f"Tile {move.tile_number} is gray and cannot be clicked")
            after = final.apply_move(move)
            changed = ", ".join(str(r * 3 + c + 1) for r, c in final.diff(after))
            print(f"{step}. tile {move.tile_number}: changed {changed or 'nothing'}")
            final = after
        print(format_grid(final))

        if not final.is_solved(puzzle.target_corners):
            print(f"Not solved after {len(moves)} moves")
            return EXIT_UNSOLVED

        verdict = "Perfect!" if puzzle.is_perfect(len(moves)) else "Solved!"
        optimal = puzzle.optimal_moves
        print(f"{verdict} {len(moves)} moves (optimal: {optimal})")
        return EXIT_OK


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Morabox - Mora Jai puzzle box simulator and solver"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Settings file (default: config.json)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    daily = sub.add_parser("daily", help="Show the daily puzzle")
    daily.add_argument("--date", help="UTC date as YYYY-MM-DD (default: today)")
    daily.add_argument("--number", type=int, help="Puzzle number instead of a date")
    daily.add_argument("--show-solution", action="store_true", help="Print the solution")

    practice = sub.add_parser("practice", help="Generate a practice puzzle")
    practice.add_argument("--difficulty", choices=get_tier_names(), help="Difficulty tier")
    practice.add_argument("--seed", type=int, help="Seed for a reproducible puzzle")
    practice.add_argument("--show-solution", action="store_true", help="Print the solution")
    practice.add_argument("--save", action="store_true",
                          help="Remember the difficulty as the practice default")

    solve = sub.add_parser("solve", help="Solve a 13-digit share code")
    solve.add_argument("code", help="Share code")
    solve.add_argument("--max-moves", type=int, help="Search depth (default: 20)")

    play = sub.add_parser("play", help="Check a move sequence against a share code")
    play.add_argument("code", help="Share code")
    play.add_argument("moves", help="Hyphen-joined tile numbers, e.g. 1-4-7")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the Morabox command line."""
    args = parse_args(argv)
    settings = load_settings(args.config)
    configure_logging(args.debug or settings.get("debug_enabled", False))

    application = Application(settings, settings_path=args.config)
    return application.run(args)
