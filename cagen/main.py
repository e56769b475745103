#!/usr/bin/env python3
"""CLI for the elementary cellular automaton generator."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .animation import AnimationConfig, Ticker
from .automaton import Rule
from .board import ScrollingBoard
from .visualize import grid_to_text, render_rule


def positive_int(text: str) -> int:
    """argparse type for sizes: whole numbers of at least 1."""
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"{value} must be at least 1")
    return value


def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"{value} must not be negative")
    return value


def parse_rule(text: Optional[str]) -> Rule:
    """Turn the RULE argument into a Rule, or report the problem and exit."""
    if text is None:
        print("Please supply a rule.")
        sys.exit(1)
    try:
        return Rule.from_string(text)
    except ValueError as e:
        print(e)
        sys.exit(1)


def cmd_run(args):
    """Animate a rule in the terminal."""
    rule = parse_rule(args.rule)

    # Imported here so the other commands work where curses is unavailable
    from .terminal import run_curses

    config = AnimationConfig(frame_period=args.frame_period / 1000.0)
    stats_path = Path(args.stats) if args.stats else None
    shown = run_curses(rule, config=config, stats_path=stats_path)

    print(f"{rule.to_string()}: {shown} generations scrolled")
    if stats_path is not None:
        print(f"Stats written to: {stats_path}")


def cmd_info(args):
    """Show how a rule maps neighborhoods to cell states."""
    rule = parse_rule(args.rule)
    top, bottom = rule.wolfram_table()

    print(f"rule: {rule.number}")
    print(f"bits: {rule.bits()}")
    print("Wolfram table:")
    print(f"  {top}")
    print(f"  {bottom}")
    print(f"Lambda parameter: {rule.lambda_parameter():.4f}")


def cmd_print(args):
    """Print the window as text, then keep scrolling it for --steps generations."""
    rule = parse_rule(args.rule)
    board = ScrollingBoard(width=args.width, height=args.height, rule=rule)
    print(grid_to_text(board.grid))

    ticker = Ticker(1.0 / args.fps) if args.fps else None
    for _ in range(args.steps):
        if ticker is not None:
            ticker.wait()
        board.step()
        print(grid_to_text(board.newest_row[None, :]))


def cmd_render(args):
    """Save the initial window of a rule as PNG."""
    rule = parse_rule(args.rule)

    print(f"Rendering rule: {rule.to_string()}")
    print(f"  Size: {args.width}x{args.height}")

    path = render_rule(
        rule,
        width=args.width,
        height=args.height,
        output_path=args.output,
        cell_size=args.cell_size,
    )
    print(f"\nSaved: {path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Elementary cellular automaton generator - scroll a Wolfram rule through your terminal"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    rule_help = "Rule number 0-255 (e.g., 30, R110, 0b11111010)"

    # Run command
    run_parser = subparsers.add_parser("run", help="Animate a rule full-screen (q quits)")
    run_parser.add_argument("rule", nargs="?", default=None, help=rule_help)
    run_parser.add_argument("--frame-period", type=float, default=100, help="Milliseconds between generations")
    run_parser.add_argument("--stats", type=str, default=None, help="Write tick stats to this CSV file")
    run_parser.set_defaults(func=cmd_run)

    # Info command
    info_parser = subparsers.add_parser("info", help="Show a rule's lookup table")
    info_parser.add_argument("rule", nargs="?", default=None, help=rule_help)
    info_parser.set_defaults(func=cmd_info)

    # Print command
    print_parser = subparsers.add_parser("print", help="Print generations as text")
    print_parser.add_argument("rule", nargs="?", default=None, help=rule_help)
    print_parser.add_argument("--width", type=positive_int, default=80, help="Cells per row")
    print_parser.add_argument("--height", type=positive_int, default=40, help="Rows in the window")
    print_parser.add_argument("--steps", type=non_negative_int, default=0, help="Extra generations to print after the window")
    print_parser.add_argument("--fps", type=float, default=None, help="Pace extra generations at this rate")
    print_parser.set_defaults(func=cmd_print)

    # Render command
    render_parser = subparsers.add_parser("render", help="Save a rule's window as PNG")
    render_parser.add_argument("rule", nargs="?", default=None, help=rule_help)
    render_parser.add_argument("--width", type=positive_int, default=80, help="Cells per row")
    render_parser.add_argument("--height", type=positive_int, default=40, help="Rows in the window")
    render_parser.add_argument("--cell-size", type=positive_int, default=4, help="Cell size in pixels")
    render_parser.add_argument("-o", "--output", type=str, default=None, help="Output PNG file")
    render_parser.set_defaults(func=cmd_render)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
