from .screen import Screen
from .game_screen import GameScreen
from .render_manager import RenderManager, health_bar_color
from .utils import Label, TextBox
