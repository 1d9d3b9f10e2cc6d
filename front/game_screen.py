import logging

import pygame
from pygame import Vector2

from src.game import Game
from front.screen import Screen
from front.render_manager import RenderManager
from config.settings import Settings


class GameScreen(Screen):
    def __init__(self, surface: pygame.Surface, settings: Settings):
        super().__init__(surface, framerate=settings.framerate)
        self.settings = settings
        self.debug = settings.show_debug
        self.game = Game(*self.surface.get_size())
        self.render_manager = RenderManager(surface=surface, game=self.game, debug=self.debug)

    def process_ui_event(self, event: pygame.event.Event):
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_F1:
                self.toggle_debug()
            elif event.key == pygame.K_F2:
                logging.debug(f'--- debug info ---\n{self.game.get_info()}')
        super().process_ui_event(event)

    def process_event(self, event: pygame.event.Event):
        if event.type == pygame.KEYDOWN:
            self.game.input_state.press(pygame.key.name(event.key))
        elif event.type == pygame.KEYUP:
            self.game.input_state.release(pygame.key.name(event.key))
        elif event.type == pygame.WINDOWFOCUSLOST:
            # key-up events are not delivered to an unfocused window
            self.game.input_state.release_all()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1 and not self.quit_button.hovered:
                self.game.player_try_shooting(Vector2(event.pos))

    def on_resize(self, width: int, height: int):
        self.game.resize(width, height)
        self.render_manager.set_surface(self.surface)

    def update(self, time_delta: float):
        self.game.update()
        self.render()

    def render(self):
        self.render_manager.render()

    def toggle_debug(self):
        self.debug = not self.debug
        self.render_manager.set_debug(self.debug)
