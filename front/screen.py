from abc import ABC, abstractmethod
import logging

import pygame
import pygame_gui

from config import QUIT_BUTTON_SIZE, FRAMERATE


class Screen(ABC):
    """Abstract class for all screens in the game.

    Owns the frame loop: once per frame it drains the event queue,
    then calls `update` and draws the UI on top.
    """
    def __init__(self,
            surface: pygame.Surface,
            framerate: int = FRAMERATE,
        ):
        self.surface = surface
        self.framerate = framerate
        self.window_size = self.surface.get_rect().size
        self.manager = pygame_gui.UIManager(self.window_size)
        self.clock = pygame.time.Clock()
        self.is_running = True

        # adding the quit button
        self.quit_button = pygame_gui.elements.UIButton(
            relative_rect=self.get_quit_button_rect(),
            text='x',
            manager=self.manager
        )

    def get_quit_button_rect(self) -> pygame.Rect:
        quit_button_rect = pygame.Rect(0, 0, 0, 0)
        quit_button_rect.size = QUIT_BUTTON_SIZE
        quit_button_rect.topright = self.surface.get_rect().topright
        return quit_button_rect

    @abstractmethod
    def process_event(self, event: pygame.event.Event):
        ...

    @abstractmethod
    def update(self, time_delta: float):
        ...

    def on_resize(self, width: int, height: int):
        """Called after the window was resized and `self.surface` points to the new display surface."""

    def process_ui_event(self, event: pygame.event.Event):
        if event.type == pygame.QUIT:
            self.is_running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.is_running = False
        elif event.type == pygame.VIDEORESIZE:
            self.surface = pygame.display.get_surface()
            self.window_size = self.surface.get_rect().size
            self.manager.set_window_resolution(self.window_size)
            self.quit_button.set_relative_position(self.get_quit_button_rect().topleft)
            self.on_resize(*self.window_size)
        elif event.type == pygame_gui.UI_BUTTON_PRESSED:
            if event.ui_element == self.quit_button:
                self.is_running = False
                logging.debug('Quit button pressed')
        self.manager.process_events(event)

    def run(self):
        while self.is_running:
            time_delta = self.clock.tick(self.framerate)/1000.0

            for event in pygame.event.get():
                self.process_ui_event(event)
                self.process_event(event)
            self.manager.update(time_delta)
            self.update(time_delta)
            self.manager.draw_ui(self.surface)
            pygame.display.update()
