from .game import Game
from .input_state import InputState, KEY_BINDINGS
from .entities.entity import Entity
from .entities.player import Player
from .entities.projectile import Projectile
from .entities.particle import Particle, shot_particles
from .utils import Slider, EntityType, Action, ShootingDirectionUndefined
