"""Top-level application: initializes pygame, manages views, and runs the game loop."""

from __future__ import annotations

import pygame

from combobeat.config import COMMAND_BUFFER_CAPACITY, COMMAND_WINDOW_MS, FPS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from combobeat.key_input import KeyboardInput
from combobeat.views.base import ViewContext, ViewManager
from combobeat.views.stage_view import StageView


class App:
    def __init__(
        self,
        capacity: int = COMMAND_BUFFER_CAPACITY,
        window_ms: float = COMMAND_WINDOW_MS,
        overwrite_on_full: bool = True,
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self._keyboard_input = KeyboardInput()

        context = ViewContext(
            screen_size=(WINDOW_WIDTH, WINDOW_HEIGHT),
            keyboard_input=self._keyboard_input,
            capacity=capacity,
            window_ms=window_ms,
            overwrite_on_full=overwrite_on_full,
        )

        self.views = ViewManager(context)
        self.views.register(StageView)
        self.views.push("stage")

    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                else:
                    self._keyboard_input.feed_event(event)
                    if not self.views.handle_event(event):
                        running = False
            if running:
                if not self.views.update(dt):
                    running = False
            self.views.draw(self.screen)
            pygame.display.flip()

        self._cleanup()
        pygame.quit()

    def _cleanup(self) -> None:
        while self.views.active_view:
            self.views.pop()
        self._keyboard_input.close()
