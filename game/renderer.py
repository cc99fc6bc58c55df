"""
2D Renderer - draws maze walls, player, exit and the status panel
"""

import pygame

from utils.constants import TOP, RIGHT, BOTTOM, LEFT, WALL_THICK, PANEL_H
from utils.colors import (
    COLOR_BG, COLOR_MAZE_BG, COLOR_PANEL_BG, COLOR_WALL, COLOR_TEXT,
    COLOR_TEXT_HIGHLIGHT, COLOR_PLAYER, COLOR_GOAL, COLOR_SOLUTION
)


class Renderer:
    """
    Draws a GameState onto a pygame surface using a Layout
    """
    def __init__(self, layout, font=None):
        """
        Args:
            layout: Layout with the current cell geometry
            font: pygame.font.Font for the status panel (panel text skipped if None)
        """
        self.layout = layout
        self.font = font

    def render(self, screen, state, solution=None):
        """Draw one full frame"""
        screen.fill(COLOR_BG)
        width, height = screen.get_size()
        pygame.draw.rect(screen, COLOR_MAZE_BG, (0, PANEL_H, width, height - PANEL_H))

        if solution:
            for x, y in solution:
                self.draw_cell(screen, x, y, COLOR_SOLUTION, pad_ratio=0.35)

        ex, ey = state.exit
        self.draw_cell(screen, ex, ey, COLOR_GOAL)
        px, py = state.player
        self.draw_cell(screen, px, py, COLOR_PLAYER)

        self.draw_maze(screen, state.grid)
        self.draw_panel(screen, state)

    def draw_maze(self, screen, grid):
        """Draw maze walls"""
        size = self.layout.cell_size
        thick = max(1, min(WALL_THICK, int(size // 8)))

        for y in range(grid.rows):
            for x in range(grid.cols):
                w = grid.walls[grid.idx(x, y)]
                x0, y0 = self.layout.cell_origin(x, y)
                x1 = x0 + size
                y1 = y0 + size

                if w & TOP:
                    pygame.draw.line(screen, COLOR_WALL, (x0, y0), (x1, y0), thick)
                if w & RIGHT:
                    pygame.draw.line(screen, COLOR_WALL, (x1, y0), (x1, y1), thick)
                if w & BOTTOM:
                    pygame.draw.line(screen, COLOR_WALL, (x0, y1), (x1, y1), thick)
                if w & LEFT:
                    pygame.draw.line(screen, COLOR_WALL, (x0, y0), (x0, y1), thick)

    def draw_cell(self, screen, x, y, color, pad_ratio=0.1):
        """Draw filled cell"""
        rect = pygame.Rect(*[round(v) for v in self.layout.cell_rect(x, y, pad_ratio)])
        pygame.draw.rect(screen, color, rect, border_radius=max(2, rect.width // 6))

    def draw_panel(self, screen, state):
        """Draw status panel at the top of the window"""
        width = screen.get_width()
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, 0, width, PANEL_H))
        if self.font is None:
            return

        info = f"Maze {state.cols}x{state.rows} | Moves: {state.moves} | R: new maze | H: hint"
        screen.blit(self.font.render(info, True, COLOR_TEXT), (12, PANEL_H // 2 - 9))

        level_text = self.font.render(f"Level {state.level + 1}", True, COLOR_TEXT_HIGHLIGHT)
        screen.blit(level_text, (width - level_text.get_width() - 12, PANEL_H // 2 - 9))
