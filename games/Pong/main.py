#!/usr/bin/env python3
"""Pong - Standalone Entry Point.

Run this to play with the mouse.

Usage:
    python main.py
    python main.py --difficulty hard
    python main.py --seed 42 --log-level DEBUG
"""

import argparse
import os
import sys
from typing import List, Optional

# Add project root to path for imports
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pygame

from rally.games.input import InputManager
from rally.games.input.sources import MouseInputSource
from rally.logging import configure_logging, get_logger
from games.Pong.config import FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from games.Pong.game_mode import PongMode

log = get_logger('pong_main')

DIFFICULTY_KEYS = {
    pygame.K_1: 'easy',
    pygame.K_2: 'medium',
    pygame.K_3: 'hard',
}


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser from the game's argument definitions."""
    parser = argparse.ArgumentParser(description="Pong - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=SCREEN_WIDTH, help='Screen width')
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT, help='Screen height')

    for arg_def in PongMode.get_arguments():
        kwargs = {k: arg_def[k] for k in ('type', 'default', 'help', 'choices', 'action') if k in arg_def}
        if 'action' in kwargs:
            kwargs.pop('type', None)  # action and type are mutually exclusive
        parser.add_argument(arg_def['name'], **kwargs)

    return parser


def handle_key(game: PongMode, key: int) -> bool:
    """Apply a keyboard shortcut.

    Returns:
        False if the game should quit
    """
    if key == pygame.K_ESCAPE:
        return False
    if key in DIFFICULTY_KEYS and game.execute_action(f'start_{DIFFICULTY_KEYS[key]}'):
        return True
    if key == pygame.K_p:
        if not game.execute_action('pause'):
            game.execute_action('resume')
    elif key == pygame.K_r:
        game.reset()
    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Run Pong standalone."""
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    pygame.init()
    pygame.font.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Pong")

    game = PongMode(
        difficulty=args.difficulty,
        seed=args.seed,
        skin=args.skin,
        width=args.width,
        height=args.height,
    )
    input_manager = InputManager(MouseInputSource())

    print("\n" + "=" * 50)
    print("PONG")
    print("=" * 50)
    print("Controls:")
    print("  - Move the mouse to move your paddle")
    print("  - Click a difficulty (or press 1/2/3) to start")
    print("  - P to pause, R to return to the menu")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    clock = pygame.time.Clock()
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # Mouse events become InputEvents, everything else is re-posted
        input_manager.update(dt)
        game.handle_input(input_manager.get_events())

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                running = handle_key(game, event.key)

        game.update(dt)

        game.render(screen)
        pygame.display.flip()

    log.info("Final score %d (%s)", game.get_score(), game.state.value)
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
