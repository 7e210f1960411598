import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from tetris_shapes import SHAPES


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


class FixedRng:
    """Always picks the same shape from the catalog."""
    def __init__(self, name):
        self.shape = SHAPES[name]

    def choice(self, seq):
        assert self.shape in seq
        return self.shape


class FakeTimer:
    def __init__(self):
        self.active = False
        self.starts = 0
        self.cancels = 0

    def start(self):
        self.active = True
        self.starts += 1

    def cancel(self):
        if self.active:
            self.cancels += 1
        self.active = False


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def draw(self, frame):
        self.frames.append(frame)


@pytest.fixture
def clock():
    return FakeClock(1000)


@pytest.fixture
def pygame_init():
    import pygame
    pygame.init()
    yield pygame
    pygame.quit()
