"""
Play Bullet Dodge in a window.

    python -m game.dodge
    python -m game.dodge --manual-difficulty --difficulty 4 --no-sound
"""

import argparse

from .config import DEFAULT_BEST_FILE, GAME_CONFIG
from .controller import DodgeGame
from .ports import JsonFileStore
from .utils import clamp


def main():
    parser = argparse.ArgumentParser(description="Dodge the bullets for as long as you can")
    parser.add_argument(
        "--width",
        type=int,
        default=GAME_CONFIG["width"],
        help=f"Window width in pixels (default: {GAME_CONFIG['width']})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=GAME_CONFIG["height"],
        help=f"Window height in pixels (default: {GAME_CONFIG['height']})",
    )
    parser.add_argument(
        "--best-file",
        type=str,
        default=DEFAULT_BEST_FILE,
        help=f"JSON file holding the best score (default: {DEFAULT_BEST_FILE})",
    )
    parser.add_argument(
        "--no-sound",
        action="store_true",
        help="Start with sound effects off",
    )
    parser.add_argument(
        "--manual-difficulty",
        action="store_true",
        help="Start with automatic difficulty off",
    )
    parser.add_argument(
        "--difficulty",
        type=float,
        default=None,
        help="Starting difficulty (default: 1.0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for projectile spawning",
    )
    parser.add_argument(
        "--verbose",
        type=int,
        default=0,
        help="Print game events to the console (default: 0)",
    )

    args = parser.parse_args()

    config = dict(GAME_CONFIG)
    config["width"] = args.width
    config["height"] = args.height
    if args.difficulty is not None:
        config["initial_difficulty"] = clamp(
            args.difficulty, config["min_difficulty"], config["max_difficulty"]
        )

    # Needs a display
    from .audio import PygletTone
    from .window import run_game

    game = DodgeGame(
        store=JsonFileStore(args.best_file, verbose=args.verbose),
        tone=PygletTone(),
        seed=args.seed,
        verbose=args.verbose,
        sound_on=not args.no_sound,
        auto_difficulty=not args.manual_difficulty,
        **config,
    )
    run_game(game)


if __name__ == "__main__":
    main()
