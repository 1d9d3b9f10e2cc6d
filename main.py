import logging

import pygame

from config import setup_logging
from config.settings import Settings
from front.game_screen import GameScreen


def main():
    settings = Settings.load()
    setup_logging(settings.log_level)
    pygame.init()
    pygame.display.set_caption('Canvas Arena')
    surface = pygame.display.set_mode(settings.get_window_size(), pygame.RESIZABLE)
    game_screen = GameScreen(surface, settings)
    logging.info('Player initialised, entering the frame loop')
    game_screen.run()
    logging.info('Frame loop finished')
    pygame.quit()


if __name__ == '__main__':
    main()
