"""SPRD map generator CLI entry point.

Provides subcommands for generating a single board as JSON and for summarizing
generation metrics across many runs. Accepts tunables via flags and MAPGEN_*
environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import sys
from contextlib import redirect_stdout
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()
# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def _load_version() -> str:
    try:
        with open("VERSION", "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def _add_board_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--rows", type=int, default=10, help="Grid rows (default: 10)")
    p.add_argument("--columns", type=int, default=10, help="Grid columns (default: 10)")
    p.add_argument("--players", type=int, default=2, help="Number of players to seat (default: 2)")
    p.add_argument("--hole-chance", dest="hole_chance", type=int, default=None, help="Percent chance a cell becomes a hole")
    p.add_argument("--link-chance", dest="link_chance", type=int, default=None, help="Percent chance of each initial link")
    p.add_argument("--no-amplify", dest="amplify", action="store_false", help="Skip the capacity amplification stage")


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    SPRD Map Generator

    Generate hex-offset territory boards: randomized links, holes, guaranteed
    connectivity, seeded players and boosted capacities. Tunables can be given
    as CLI flags or MAPGEN_* environment variables; CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          MAPGEN_HOLE_CHANCE       Percent chance per cell to become a hole (default: 15)
          MAPGEN_LINK_CHANCE       Percent chance per initial link (default: 65)
          MAPGEN_AMPLIFY_POWER     Enable capacity amplification (default: 1)
          MAPGEN_SEED              Fixed seed for reproducible boards
          MAPGEN_LOG_LEVEL         debug | info | warn | error (default: info)

        Examples:
          # Medium board for three players
          python run.py generate --rows 10 --columns 10 --players 3

          # Reproducible, uncompressed, pretty printed
          python run.py generate --seed 42 --no-compress --pretty

          # Metric averages over 200 runs
          python run.py stats --rows 12 --columns 12 --players 4 --runs 200
        """
    )

    parser = argparse.ArgumentParser(
        prog="sprd-mapgen",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"SPRD Map Generator {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate one board and print it as JSON",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    _add_board_args(gen_parser)
    gen_parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible board")
    gen_parser.add_argument("--no-compress", dest="compress", action="store_false", help="Emit full 9-field cells")
    gen_parser.add_argument("--pretty", action="store_true", help="One row per line")
    gen_parser.set_defaults(command="generate")

    stats_parser = subparsers.add_parser(
        "stats",
        help="Generate many boards and print aggregate metrics",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    _add_board_args(stats_parser)
    stats_parser.add_argument("--runs", type=int, default=100, help="Number of boards to generate (default: 100)")
    stats_parser.add_argument("--seed", type=int, default=None, help="First seed; run i uses seed+i")
    stats_parser.set_defaults(command="stats")

    # If no subcommand provided, default to generate
    if not any(a in ("generate", "stats") for a in argv):
        argv = list(argv) + ["generate"]

    return parser.parse_args(argv)


def _board_options(args: argparse.Namespace) -> dict:
    opts = {"rows": args.rows, "columns": args.columns, "players": args.players}
    if args.hole_chance is not None:
        opts["hole_chance"] = args.hole_chance
    if args.link_chance is not None:
        opts["link_chance"] = args.link_chance
    if not args.amplify:
        opts["amplify_power"] = False
    return opts


def _render_rows(rows, pretty: bool) -> str:
    if not pretty:
        return json.dumps(rows, separators=(",", ":"))
    body = ",\n".join("  " + json.dumps(r, separators=(",", ":")) for r in rows)
    return "[\n" + body + "\n]"


def run_generate(args: argparse.Namespace) -> int:
    from sprd.board import Board

    opts = _board_options(args)
    if args.seed is not None:
        opts["seed"] = args.seed
    # Log lines go to stderr so stdout carries only the board JSON
    with redirect_stdout(sys.stderr):
        board = Board(**opts)
    print(_render_rows(board.to_rows(compress=args.compress), args.pretty))
    return 0


def run_stats(args: argparse.Namespace) -> int:
    from sprd.board import Board

    opts = _board_options(args)
    totals: dict = {}
    for i in range(args.runs):
        if args.seed is not None:
            opts["seed"] = args.seed + i
        with redirect_stdout(sys.stderr):
            board = Board(**opts)
        for key, val in board.metrics.items():
            if isinstance(val, (int, float)) and not isinstance(val, bool):
                totals[key] = totals.get(key, 0) + val
        totals["holes"] = totals.get("holes", 0) + board.hole_count()

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [divider, f"  {label('Runs:'):20} {value(args.runs)}", divider]
    runs = max(args.runs, 1)
    for key in sorted(totals):
        lines.append(f"  {label(key + ':'):20} {value(round(totals[key] / runs, 3))}")
    lines.append(divider)
    print("\n".join(lines))
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "generate").lower()
    try:
        if mode == "stats":
            return run_stats(args)
        return run_generate(args)
    except ValueError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2


def _entry() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(_entry())
