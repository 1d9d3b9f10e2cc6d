from .utils import Slider, hsl_color, normalize_or_none, vector_from_angle, random_in_cone
from .enums import EntityType, Action
from .exceptions import ShootingDirectionUndefined
