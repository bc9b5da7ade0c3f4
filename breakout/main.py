#!/usr/bin/env python3
"""Breakout - Standalone Entry Point.

Usage:
    python -m breakout.main
    python -m breakout.main --fps 30
    python -m breakout.main --log-level DEBUG
"""

import argparse
import sys

import pygame

from breakout.config import DEFAULT_CONFIG, DEFAULT_FPS
from breakout.game.skins import SKINS
from breakout.game_mode import BreakoutMode
from breakout.input.sources.pygame_source import PygameInputSource
from breakout.logging import configure_logging, get_logger

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description=f"{BreakoutMode.NAME} {BreakoutMode.VERSION} - {BreakoutMode.DESCRIPTION}"
    )
    parser.add_argument('--fps', type=int, default=DEFAULT_FPS,
                        help='Frame rate cap (default: %(default)s)')
    parser.add_argument('--skin', type=str, default='classic',
                        choices=list(SKINS),
                        help='Visual skin')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
                        help='Default log level (overrides BREAKOUT_LOG_LEVEL)')
    return parser


def main(argv=None) -> int:
    """Run Breakout standalone."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    pygame.init()
    pygame.font.init()

    config = DEFAULT_CONFIG
    screen = pygame.display.set_mode((config.field_width, config.field_height))
    pygame.display.set_caption(BreakoutMode.NAME)

    game = BreakoutMode(skin=args.skin, config=config)
    source = PygameInputSource()

    log.info("Controls: arrows or mouse to move, space to restart, ESC to quit")

    clock = pygame.time.Clock()
    while True:
        dt = clock.tick(args.fps) / 1000.0

        source.update(dt)
        if source.quit_requested:
            break

        game.handle_input(source.poll_events())
        game.update(dt)

        game.render(screen)
        pygame.display.flip()

    log.info("Final score: %d", game.get_score())
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
