from pygame import Vector2, Color, Rect

from src.entities.entity import Entity
from src.entities.projectile import Projectile
from src.entities.particle import Particle, shot_particles
from src.input_state import InputState
from src.utils.enums import Action, EntityType
from src.utils.exceptions import ShootingDirectionUndefined
from src.utils.utils import Slider, normalize_or_none

from config import (PLAYER_SIZE, PLAYER_SPEED, PLAYER_MAX_HEALTH, PLAYER_DEFAULT_DIRECTION,
    DIAGONAL_FACTOR, PLAYER_COLOR_HEX)


# checked in this order; a later key overrides the facing direction set by an earlier one
DIRECTION_ACTIONS = (
    (Action.UP, Vector2(0., -1.)),
    (Action.DOWN, Vector2(0., 1.)),
    (Action.LEFT, Vector2(-1., 0.)),
    (Action.RIGHT, Vector2(1., 0.)),
)


class Player(Entity):
    def __init__(self, pos: Vector2, bounds: tuple[float, float],
            size: tuple[float, float] = PLAYER_SIZE, speed: float = PLAYER_SPEED):
        self.width, self.height = size
        super().__init__(
            pos=pos,
            type=EntityType.PLAYER,
            size=max(self.width, self.height) / 2,
            color=Color(PLAYER_COLOR_HEX),
        )
        self.speed = speed
        self.bounds = bounds
        self.health = Slider(PLAYER_MAX_HEALTH)
        self.is_moving = False
        self.move_direction = Vector2()
        self.last_direction = Vector2(PLAYER_DEFAULT_DIRECTION)
        self.clamp_to_bounds()

    def steer(self, input_state: InputState):
        """Recompute the movement direction from the keys currently held."""
        direction = Vector2()
        self.is_moving = False
        for action, axis in DIRECTION_ACTIONS:
            if input_state.is_action_pressed(action):
                direction += axis
                self.last_direction = axis.copy()
                self.is_moving = True
        if direction.x != 0. and direction.y != 0.:
            direction *= DIAGONAL_FACTOR
        self.move_direction = direction
        self.vel = self.move_direction * self.speed

    def update(self):
        super().update()
        self.clamp_to_bounds()

    def set_bounds(self, width: float, height: float):
        self.bounds = (width, height)
        self.clamp_to_bounds()

    def clamp_to_bounds(self):
        width, height = self.bounds
        half_w, half_h = self.width / 2, self.height / 2
        self.pos.x = max(half_w, min(width - half_w, self.pos.x))
        self.pos.y = max(half_h, min(height - half_h, self.pos.y))

    def shoot(self, target: Vector2) -> tuple[Projectile, list[Particle]]:
        direction = normalize_or_none(target - self.pos)
        if direction is None:
            raise ShootingDirectionUndefined('target coincides with the player')
        return self.get_projectile(direction), shot_particles(self.pos, direction)

    def get_projectile(self, direction: Vector2) -> Projectile:
        return Projectile.aimed(self.pos, direction)

    def get_rect(self) -> Rect:
        rect = Rect(0, 0, self.width, self.height)
        rect.center = (round(self.pos.x), round(self.pos.y))
        return rect

    def get_health(self) -> Slider: return self.health

    def get_speed(self) -> float: return self.speed

    def get_last_direction(self) -> Vector2: return self.last_direction

    def set_pos(self, set_to: Vector2) -> None:
        self.pos = set_to
        self.clamp_to_bounds()

    def __repr__(self) -> str:
        def pretty_vector2(v: Vector2) -> str:
            return f'({v.x:.2f}, {v.y:.2f})'
        return f'Player(pos={pretty_vector2(self.pos)}; move_direction={pretty_vector2(self.move_direction)}; last_direction={pretty_vector2(self.last_direction)}; speed={self.speed:.2f}; health={self.health})'
