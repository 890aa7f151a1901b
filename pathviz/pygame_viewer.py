# pathviz/pygame_viewer.py (interactive A* stepper)
from __future__ import annotations
import logging
import math
from typing import Dict, Tuple
import pygame

from .types import Coord
from .config import VisualizerConfig
from .controller import CellMark, RunState, Visualizer
from .viz import Colors, cell_color

logger = logging.getLogger(__name__)

STATUS_H = 48  # two text lines: hints, then the legend

def cell_at(pos: Tuple[int, int], cell: int) -> Coord:
    """Pixel position -> (row, col); may be out of bounds."""
    x, y = pos
    return (y // cell, x // cell)

def score_label(value: float) -> str:
    if value == math.inf:
        return "∞"
    return str(int(value))

def cell_caption(node, show_scores: bool):
    """Caption for the start and finish cells; None once their g/h/f labels are shown."""
    if not (node.is_start or node.is_finish):
        return None
    if show_scores and node.f_score != math.inf:
        return None
    return "Start" if node.is_start else "End"

def legend_text() -> str:
    return ("green start  red end  dark wall  light green open  cyan closed  "
            "yellow path   labels: g top left, h top right, f = g + h centre")

def status_text(vis: Visualizer, speed_ms: int) -> str:
    if vis.state is RunState.FINISHED:
        outcome = f"path cost {len(vis.path) - 1}" if vis.reached else "no path"
        return f"finished: {outcome}   [space] run again  [c] clear  [r] reset"
    hint = {
        RunState.IDLE: "draw walls, [space] play  [n] step  [g] random walls",
        RunState.RUNNING: "[space] pause",
        RunState.PAUSED: "[space] resume  [n] step",
    }[vis.state]
    return f"{vis.state.value}  {speed_ms} ms/step   {hint}"

class Viewer:
    def __init__(self, vis: Visualizer, fullscreen: bool = False):
        self.vis = vis
        cfg = vis.config
        self.cell = cfg.cell_size
        self.fps = cfg.fps
        self.step_interval_ms = cfg.step_interval_ms
        self.path_interval_ms = cfg.path_interval_ms
        self.show_grid = True
        self.show_scores = self.cell >= 32

        self._step_timer = 0.0
        self._path_timer = 0.0
        self._path_revealed = 0

        self.fullscreen = fullscreen
        self._recreate_display()
        pygame.display.set_caption("A* Pathfinding Visualizer")
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.SysFont(None, max(12, self.cell // 3))
        self.font_big = pygame.font.SysFont(None, max(14, self.cell // 2))
        self.font_status = pygame.font.SysFont(None, 20)

    # ----------------- display / fullscreen -----------------
    def _recreate_display(self) -> None:
        g = self.vis.grid
        W, H = g.cols * self.cell, g.rows * self.cell + STATUS_H
        flags = pygame.SCALED | (pygame.FULLSCREEN if self.fullscreen else 0)
        self.screen = pygame.display.set_mode((W, H), flags)

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen
        self._recreate_display()

    def _restart_animation(self) -> None:
        self._step_timer = 0.0
        self._path_timer = 0.0
        self._path_revealed = 0

    # ----------------- draw -----------------
    def _draw_scores(self, rect: pygame.Rect, g: float, h: float, f: float) -> None:
        scr = self.screen
        pad = 3
        gs = self.font_small.render(score_label(g), True, Colors.TEXT)
        hs = self.font_small.render(score_label(h), True, Colors.TEXT)
        fs = self.font_big.render(score_label(f), True, Colors.TEXT)
        scr.blit(gs, (rect.x + pad, rect.y + pad))
        scr.blit(hs, (rect.right - hs.get_width() - pad, rect.y + pad))
        scr.blit(fs, fs.get_rect(center=(rect.centerx, rect.centery + pad)))

    def draw(self) -> None:
        vis, cell = self.vis, self.cell
        grid = vis.grid
        scr = self.screen
        scr.fill(Colors.BG)

        path_index: Dict[Coord, int] = {s: i for i, s in enumerate(vis.path)}
        marks = dict(vis.marks)
        for s, i in path_index.items():
            if i >= self._path_revealed:
                marks[s] = CellMark.VISITED

        for node in grid:
            r, c = node.coord
            rect = pygame.Rect(c * cell, r * cell, cell, cell)
            scr.fill(cell_color(grid, (r, c), marks), rect)
            label = cell_caption(node, self.show_scores)
            if label:
                txt = self.font_small.render(label, True, Colors.FLOOR)
                scr.blit(txt, txt.get_rect(center=rect.center))
            if self.show_scores and node.f_score != math.inf and not node.is_wall:
                self._draw_scores(rect, node.g_score, node.h_score, node.f_score)

        if self.show_grid:
            for i in range(grid.cols + 1):
                pygame.draw.line(scr, Colors.GRID, (i * cell, 0), (i * cell, grid.rows * cell))
            for i in range(grid.rows + 1):
                pygame.draw.line(scr, Colors.GRID, (0, i * cell), (grid.cols * cell, i * cell))

        top = grid.rows * cell + 4
        msg = self.font_status.render(status_text(vis, self.step_interval_ms), True, Colors.FLOOR)
        scr.blit(msg, (6, top))
        legend = self.font_status.render(legend_text(), True, Colors.GRID_TEXT)
        scr.blit(legend, (6, top + msg.get_height() + 4))
        pygame.display.flip()

    # ----------------- input -----------------
    def _on_key(self, event) -> bool:
        vis = self.vis
        if event.key == pygame.K_ESCAPE:
            return False
        elif event.key == pygame.K_SPACE:
            if vis.state is RunState.FINISHED:
                self._restart_animation()
            vis.toggle_play()
        elif event.key in (pygame.K_n, pygame.K_RIGHT):
            vis.step()
        elif event.key == pygame.K_c:
            vis.clear()
            self._restart_animation()
        elif event.key == pygame.K_r:
            vis.reset()
            self._restart_animation()
        elif event.key == pygame.K_g:
            vis.randomize_walls()
        elif event.key == pygame.K_PAGEUP:
            self.step_interval_ms = max(self.step_interval_ms // 2, 1)
        elif event.key == pygame.K_PAGEDOWN:
            self.step_interval_ms = min(self.step_interval_ms * 2, 2000)
        elif event.key == pygame.K_h:
            self.show_grid = not self.show_grid
        elif event.key == pygame.K_s:
            self.show_scores = not self.show_scores
        elif (event.key == pygame.K_RETURN and (event.mod & pygame.KMOD_ALT)) or event.key == pygame.K_F11:
            self.toggle_fullscreen()
        return True

    # ----------------- loop -----------------
    def run(self) -> None:
        running = True
        while running:
            dt_ms = self.clock.tick(self.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not self._on_key(event):
                        running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.vis.begin_paint(cell_at(event.pos, self.cell))
                elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
                    self.vis.drag_paint(cell_at(event.pos, self.cell))
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    self.vis.end_paint()
                elif event.type == pygame.WINDOWLEAVE:
                    self.vis.end_paint()

            if self.vis.state is RunState.RUNNING:
                self._step_timer += dt_ms
                while self._step_timer >= self.step_interval_ms and self.vis.state is RunState.RUNNING:
                    self.vis.tick()
                    self._step_timer -= self.step_interval_ms
            elif self._path_revealed < len(self.vis.path):
                self._path_timer += dt_ms
                while self._path_timer >= self.path_interval_ms and self._path_revealed < len(self.vis.path):
                    self._path_revealed += 1
                    self._path_timer -= self.path_interval_ms

            self.draw()

def run_viewer(config: VisualizerConfig, fullscreen: bool = False) -> None:
    vis = Visualizer(config)
    logger.info("opening %dx%d viewer", config.rows, config.cols)
    pygame.init()
    try:
        Viewer(vis, fullscreen=fullscreen).run()
    finally:
        pygame.quit()
