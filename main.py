"""
Growing Maze - reach the exit and the maze grows by one row and column
"""

import argparse
import logging
import sys

import pygame

from config import GAME_TITLE, GAME_VERSION, DEFAULT_LOG_LEVEL
from game.controls import Direction, direction_from_drag, direction_from_keys
from game.game_state import GameState
from game.layout import Layout
from game.renderer import Renderer
from maze.generator import MazeGenerator
from utils.constants import (
    FPS, PANEL_H, START_COLS, START_ROWS,
    WINDOW_WIDTH, WINDOW_HEIGHT, MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT,
    PLAYER_MOVE_COOLDOWN_MS
)


logger = logging.getLogger(__name__)

KEY_BINDINGS = [
    ((pygame.K_UP, pygame.K_w), Direction.UP),
    ((pygame.K_RIGHT, pygame.K_d), Direction.RIGHT),
    ((pygame.K_DOWN, pygame.K_s), Direction.DOWN),
    ((pygame.K_LEFT, pygame.K_a), Direction.LEFT),
]


class MazeGame:
    """
    Main game class
    """
    def __init__(self, cols=START_COLS, rows=START_ROWS, seed=None):
        pygame.init()

        self.state = GameState(cols, rows, generator=MazeGenerator(seed=seed))
        self.layout = Layout()
        self.renderer = Renderer(self.layout, pygame.font.SysFont("consolas", 18))

        self.screen = None
        self.screen_w = WINDOW_WIDTH
        self.screen_h = WINDOW_HEIGHT
        self._create_screen(self.screen_w, self.screen_h)

        self.clock = pygame.time.Clock()
        self.running = True

        # Movement cooldown for held keys
        self.move_cooldown_ms = PLAYER_MOVE_COOLDOWN_MS
        self.last_move_time = 0

        # Drag state
        self.dragging = False
        self.show_solution = False

    def _create_screen(self, width, height):
        """Create or resize screen and refit the layout"""
        self.screen_w = max(MIN_WINDOW_WIDTH, width)
        self.screen_h = max(MIN_WINDOW_HEIGHT, height)
        self.screen = pygame.display.set_mode((self.screen_w, self.screen_h), pygame.RESIZABLE)
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")
        self._fit_layout()

    def _fit_layout(self):
        cell_size = self.layout.fit(
            self.screen_w, self.screen_h - PANEL_H,
            self.state.cols, self.state.rows, offset_y=PANEL_H
        )
        logger.debug("Layout %dx%d: cell size %.1f", self.state.cols, self.state.rows, cell_size)

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.VIDEORESIZE:
                self._create_screen(event.w, event.h)
                continue

            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.dragging = True
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.dragging = False
            elif event.type == pygame.MOUSEMOTION and self.dragging:
                self._handle_drag(*event.pos)

            if event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key):
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_r:
            self.state.restart()
        elif key == pygame.K_h:
            self.show_solution = not self.show_solution

    def _handle_drag(self, x, y):
        px, py = self.state.player
        center_x, center_y = self.layout.cell_center(px, py)
        direction = direction_from_drag(x, y, center_x, center_y, self.layout.cell_size)
        if direction is not None:
            self._move(direction)

    def _handle_player_movement(self):
        """Handle held movement keys"""
        now = pygame.time.get_ticks()
        if (now - self.last_move_time) < self.move_cooldown_ms:
            return

        direction = direction_from_keys(pygame.key.get_pressed(), KEY_BINDINGS)
        if direction is not None:
            self._move(direction)
            self.last_move_time = now

    def _move(self, direction):
        level = self.state.level
        self.state.request_move(direction)
        if self.state.level != level:
            # Maze grew, cells must shrink to fit
            self._fit_layout()

    def render(self):
        solution = self.state.solution() if self.show_solution else None
        self.renderer.render(self.screen, self.state, solution)
        pygame.display.flip()

    def run(self):
        """Main game loop"""
        while self.running:
            self.clock.tick(FPS)

            self.handle_events()
            self._handle_player_movement()
            self.render()

        pygame.quit()


def positive_int(value):
    """argparse type for sizes >= 1"""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def create_parser():
    parser = argparse.ArgumentParser(
        description=f"{GAME_TITLE}: reach the exit to grow the maze",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('--columns', type=positive_int, default=START_COLS,
                        help='Starting number of maze columns')
    parser.add_argument('--rows', type=positive_int, default=START_ROWS,
                        help='Starting number of maze rows')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible mazes')
    parser.add_argument('--log-level', default=DEFAULT_LOG_LEVEL,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging verbosity')
    parser.add_argument('--version', action='version', version=f"%(prog)s {GAME_VERSION}")
    return parser


def main(argv=None):
    """Entry point"""
    args = create_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting %s %s (%dx%d, seed=%s)",
                GAME_TITLE, GAME_VERSION, args.columns, args.rows, args.seed)

    game = MazeGame(args.columns, args.rows, seed=args.seed)
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
