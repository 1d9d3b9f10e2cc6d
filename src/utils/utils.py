import math
import random

from pygame import Color, Vector2


def vector_from_angle(angle: float, length: float = 1.) -> Vector2:
    """Vector of the given length pointing at `angle` radians."""
    return Vector2(math.cos(angle), math.sin(angle)) * length


def random_in_cone(direction: Vector2, spread: float, length: float = 1.) -> Vector2:
    """
    Random vector of the given length whose angle deviates from `direction`
    by at most `spread` radians to either side.
    """
    angle = math.atan2(direction.y, direction.x) + random.uniform(-spread, spread)
    return vector_from_angle(angle, length)


def normalize_or_none(v: Vector2) -> Vector2 | None:
    """Unit vector along `v`; None for the zero vector."""
    if v.magnitude_squared() == 0.:
        return None
    return v.normalize()


def hsl_color(hue: float, saturation: float = 100., lightness: float = 50., alpha: float = 100.) -> Color:
    """Build a color from HSL; saturation, lightness and alpha are percentages."""
    color = Color(0, 0, 0)
    color.hsla = (hue % 360., saturation, lightness, alpha)
    return color


class Slider:
    def __init__(self, max_value: float, current_value: float | None = None):
        self.max_value = max_value
        self.current_value = current_value if current_value is not None else max_value

    def get_value(self) -> float:
        return self.current_value

    def get_percent_full(self) -> float:
        return self.current_value / self.max_value

    def change(self, delta: float) -> float:
        """Change the current value by delta. Return by how much it actually changed."""
        cache_current_value = self.current_value
        self.current_value += delta
        self.current_value = min(self.current_value, self.max_value)
        self.current_value = max(self.current_value, 0)
        return self.current_value - cache_current_value

    def __repr__(self) -> str:
        return f'Slider({self})'

    def __str__(self) -> str:
        return f'{self.current_value:.0f}/{self.max_value:.0f}'
