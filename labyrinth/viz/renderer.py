import logging

import pygame

from labyrinth.algo.base import StepResult
from labyrinth.core.grid import BOTTOM, LEFT, RIGHT, TOP, CellState, Grid
from labyrinth.core.traversal import PlaySession

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: TOP,
    pygame.K_RIGHT: RIGHT,
    pygame.K_DOWN: BOTTOM,
    pygame.K_LEFT: LEFT,
}


class Renderer:
    COLOR_BG = (120, 120, 120)
    COLOR_WALL = (0, 0, 0)
    COLOR_VISITED = (255, 255, 255)
    COLOR_FRONTIER = (170, 190, 220)
    COLOR_GOAL = (83, 247, 43)
    COLOR_TOKEN = (255, 0, 0)
    COLOR_TEXT = (255, 255, 255)

    def __init__(self, grid: Grid, generator=None, width=900, height=900, steps_per_frame=1, fps=60):
        self.grid = grid
        self.generator = generator
        self.session = PlaySession(grid)
        self.screen_width = width
        self.screen_height = height
        self.steps_per_frame = max(1, steps_per_frame)
        self.fps = fps

        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator is None or generator.complete

    def fit_to_screen(self):
        """Auto-adjust cell size and offset to fit the entire grid on screen with padding."""
        padding = 40
        hud = 60
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2) - hud

        self.cell_size = max(1.0, min(available_w / self.grid.columns, available_h / self.grid.rows))

        total_maze_w = self.grid.columns * self.cell_size
        total_maze_h = self.grid.rows * self.cell_size

        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = hud + (self.screen_height - hud - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Labyrinth - {self.grid.rows}x{self.grid.columns}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 18)
        self.fit_to_screen()

    def handle_key(self, key) -> bool:
        """
        Applies a key press to the play session.
        Returns True if the token moved or was reset.
        """
        if key == pygame.K_r:
            self.session.reset()
            return True

        # Token stays put while the maze is still being carved
        if not self.gen_finished:
            return False

        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return False
        return self.session.move(direction)

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                self.fit_to_screen()

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                else:
                    self.handle_key(event.key)

    def step_generator(self):
        if self.gen_finished:
            return
        for _ in range(self.steps_per_frame):
            if self.generator.step() is StepResult.COMPLETE:
                self.gen_finished = True
                logger.info("Generation finished in %d steps", self.generator.step_count)
                break

    def cell_rect(self, row, col):
        px = int(col * self.cell_size + self.offset_x)
        py = int(row * self.cell_size + self.offset_y)
        size = int(self.cell_size) + 1
        return px, py, size

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)

        # 1. Backgrounds
        for cell in self.grid:
            px, py, size = self.cell_rect(cell.row, cell.col)
            if cell.is_goal:
                color = self.COLOR_GOAL
            elif cell.state is CellState.VISITED:
                color = self.COLOR_VISITED
            elif cell.state is CellState.FRONTIER:
                color = self.COLOR_FRONTIER
            else:
                continue
            pygame.draw.rect(self.surface, color, (px, py, size, size))

        # 2. Walls
        line_width = 2 if self.cell_size > 6 else 1
        for cell in self.grid:
            px, py, size = self.cell_rect(cell.row, cell.col)
            if cell.top:
                pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px + size, py), line_width)
            if cell.right:
                pygame.draw.line(self.surface, self.COLOR_WALL, (px + size, py), (px + size, py + size), line_width)
            if cell.bottom:
                pygame.draw.line(self.surface, self.COLOR_WALL, (px, py + size), (px + size, py + size), line_width)
            if cell.left:
                pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px, py + size), line_width)

        # 3. Token
        token = self.session.position
        px, py, size = self.cell_rect(token.row, token.col)
        radius = max(1, int(self.cell_size / 3))
        pygame.draw.circle(self.surface, self.COLOR_TOKEN, (px + size // 2, py + size // 2), radius)

    def draw_hud(self):
        status = "Done" if self.gen_finished else self.generator.status()
        info = [
            f"Size: {self.grid.rows}x{self.grid.columns}  Status: {status}  Steps: {self.session.steps}",
            self.session.message() or "Arrow keys move, R resets, Esc quits",
        ]
        for i, text in enumerate(info):
            lbl = self.font.render(text, True, self.COLOR_TEXT)
            self.surface.blit(lbl, (10, 10 + i * 22))

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.step_generator()

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            self.clock.tick(self.fps)

        pygame.quit()
