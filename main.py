import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import InputMapper
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_scheduler import FrameScheduler
from tetris_timer import TimerDisplay

log = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=getattr(logging, str(CONFIG["LOG_LEVEL"]).upper(), logging.INFO),
                        format='%(asctime)s - %(name)s - %(message)s')
    pygame.init()

    dims = compute_dims()
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 24)

    timer_display = TimerDisplay()
    render = RenderAssets(dims, font, screen, timer_display)
    frames = FrameScheduler()
    game = Game(renderer=render, timer_display=timer_display, frames=frames)
    inputs = InputMapper(game, dims)
    clock = pygame.time.Clock()

    # Idle screen until the first Start/Restart
    render.screen.blit(render.bg, (0, 0))
    render.draw_timer()
    pygame.display.flip()

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                game.stop()
                log.info("quit")
                pygame.quit(); sys.exit()
            if game.clock_timer.handle_event(event):
                continue
            inputs.handle(event)

        # paused or not started: nothing pending, last picture stays up
        if frames.run_pending(pygame.time.get_ticks()):
            pygame.display.flip()
        clock.tick(CONFIG["TARGET_FPS"])


if __name__ == '__main__':
    main()
