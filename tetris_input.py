"""Keyboard / mouse to game actions"""
import logging
import pygame
from tetris_layout import Dims, button_at

log = logging.getLogger(__name__)

KEY_ACTIONS = {
    pygame.K_LEFT: "move_left",
    pygame.K_RIGHT: "move_right",
    pygame.K_DOWN: "soft_drop",
    pygame.K_UP: "rotate",
    pygame.K_s: "start",
    pygame.K_x: "stop",
    pygame.K_r: "restart",
}

class InputMapper:
    def __init__(self, game, dims: Dims):
        self.game = game
        self.dims = dims

    def action_for(self, event):
        if event.type == pygame.KEYDOWN:
            return KEY_ACTIONS.get(event.key)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return button_at(self.dims, event.pos)
        return None

    def handle(self, event) -> bool:
        """Dispatch one event; False if it maps to nothing."""
        action = self.action_for(event)
        if action is None:
            return False
        if action in ("start", "stop", "restart"):
            log.debug("lifecycle command: %s", action)
        getattr(self.game, action)()
        return True
