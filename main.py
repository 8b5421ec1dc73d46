#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--lang ID] [--difficulty KEY] [--seed N]
    python main.py languages
    python main.py difficulties
"""
import argparse
import logging
import sys
from pathlib import Path

# Add src to path so the game runs from a checkout
sys.path.insert(0, str(Path(__file__).parent / "src"))

import numpy as np

from game import Difficulty
from localization import LANGUAGES, get_language
from ui import ConsoleGame, MinesweeperApp


def play(args: argparse.Namespace) -> None:
    """Start an interactive game in the terminal."""
    app = MinesweeperApp(
        difficulty=args.difficulty or Difficulty.EASY,
        rng=np.random.default_rng(args.seed),
    )

    # --lang skips the language menu; with --difficulty too, play starts
    # right away. --difficulty alone becomes the menu's default choice.
    if args.lang:
        app.select_language(args.lang)
        if args.difficulty:
            app.select_difficulty(args.difficulty)

    ConsoleGame(app).run()


def languages(args: argparse.Namespace) -> None:
    """List the available languages."""
    for language in LANGUAGES:
        print(f"{language.id:<6} {language.flag} {language.name}")


def difficulties(args: argparse.Namespace) -> None:
    """List the difficulty presets."""
    language = get_language(args.lang or "en")
    print(f"{'Key':<8} {'Name':<12} {'Board':<8} {'Mines':>5}")
    print("-" * 36)
    for difficulty in Difficulty:
        config = difficulty.config
        print(
            f"{difficulty.value:<8} {language.difficulty_name(difficulty):<12} "
            f"{config.size}x{config.size:<5} {config.num_mines:>5}"
        )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--lang", default=None, help="Language id (skips the language menu)"
    )
    play_parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=None,
        help="Difficulty (preselected; with --lang, skips the difficulty menu)",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )

    # Listing commands
    subparsers.add_parser("languages", help="List available languages")
    diff_parser = subparsers.add_parser(
        "difficulties", help="List difficulty presets"
    )
    diff_parser.add_argument(
        "--lang", default=None, help="Language id for difficulty names"
    )

    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        if args.command == "play":
            play(args)
        elif args.command == "languages":
            languages(args)
        elif args.command == "difficulties":
            difficulties(args)
        else:
            parser.print_help()
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
