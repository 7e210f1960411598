"""
Rendering for the board, the active piece and the side panel.

Every frame the whole surface is cleared and redrawn: background and panel
come from a pre-rendered static surface, filled cells are blitted from one
cached white cell sprite, text surfaces are cached until their value changes.
"""
from __future__ import annotations
import pygame
from typing import Optional
from tetris_layout import Dims, BUTTONS

BG = (0, 0, 0)
CELL_FILL = (255, 255, 255)
CELL_EDGE = (0, 0, 0)
PANEL = (21, 25, 53)
PANEL_EDGE = (50, 60, 100)
TEXT = (200, 210, 240)
LABELS = {"start": "Start", "stop": "Stop", "restart": "Restart"}

class RenderAssets:
    """Holds the pre-rendered pieces and draws frames onto ``screen``."""
    def __init__(self, dims: Dims, font: pygame.font.Font, screen: pygame.Surface, timer_display=None):
        self.dims = dims
        self.font = font
        self.screen = screen
        self.timer_display = timer_display
        self._timer_text: Optional[str] = None
        self._timer_surf: Optional[pygame.Surface] = None
        self._make_static()
        self._make_cell()

    # ---------- Static background (panel + buttons) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        panel_rect = pygame.Rect(d.panel_x - d.margin, 0, d.panel_w + 2 * d.margin, d.total_h)
        pygame.draw.rect(self.bg, PANEL, panel_rect)
        pygame.draw.line(self.bg, PANEL_EDGE, (d.board_w, 0), (d.board_w, d.total_h))
        self.bg.blit(self.font.render("Time", True, TEXT), (d.panel_x + 12, d.panel_y + 12))
        for name in BUTTONS:
            rect = pygame.Rect(d.buttons[name])
            pygame.draw.rect(self.bg, (15, 18, 40), rect)
            pygame.draw.rect(self.bg, PANEL_EDGE, rect, 1)
            label = self.font.render(LABELS[name], True, TEXT)
            self.bg.blit(label, label.get_rect(center=rect.center))
        y = d.buttons[BUTTONS[-1]][1] + 60
        for line in ("←/→ Move", "↓ Drop one", "↑ Rotate", "S/X/R Start/Stop/Restart"):
            self.bg.blit(self.font.render(line, True, (165, 175, 215)), (d.panel_x + 12, y))
            y += 20

    # ---------- Cell sprite: white square with an outline ----------
    def _make_cell(self):
        c = self.dims.cell
        self.cell_surf = pygame.Surface((c, c))
        self.cell_surf.fill(CELL_FILL)
        pygame.draw.rect(self.cell_surf, CELL_EDGE, (0, 0, c, c), 1)

    def draw_cell(self, col: int, row: int):
        if row < 0: return
        c = self.dims.cell
        self.screen.blit(self.cell_surf, (col * c, row * c))

    def draw_timer(self):
        if self.timer_display is None:
            return
        text = self.timer_display.text
        if text != self._timer_text:
            self._timer_text = text
            self._timer_surf = self.font.render(text, True, (230, 240, 255))
        self.screen.blit(self._timer_surf, self.dims.timer_pos)

    def draw(self, frame):
        self.screen.blit(self.bg, (0, 0))
        for r, row in enumerate(frame.board):
            for c, v in enumerate(row):
                if v:
                    self.draw_cell(c, r)
        for r, row in enumerate(frame.shape):
            for c, v in enumerate(row):
                if v:
                    self.draw_cell(frame.x + c, frame.y + r)
        self.draw_timer()
