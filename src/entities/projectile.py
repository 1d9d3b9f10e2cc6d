from pygame import Vector2, Color

from src.entities.entity import Entity
from src.utils.enums import EntityType
from config import (
    PROJECTILE_RADIUS,
    PROJECTILE_SPEED,
    PROJECTILE_LIFETIME,
    PROJECTILE_COLOR_HEX,
)


PROJECTILE_COLOR = Color(PROJECTILE_COLOR_HEX)


class Projectile(Entity):
    def __init__(
        self,
        pos: Vector2,
        vel: Vector2,
        size: float = PROJECTILE_RADIUS,
        lifetime: int = PROJECTILE_LIFETIME,
        color: Color | None = None,
    ):
        super().__init__(
            pos=pos,
            type=EntityType.PROJECTILE,
            size=size,
            vel=vel,
            color=color if color is not None else Color(PROJECTILE_COLOR),
            lifetime=lifetime,
        )

    @classmethod
    def aimed(cls, pos: Vector2, direction: Vector2, speed: float = PROJECTILE_SPEED) -> 'Projectile':
        """A projectile leaving `pos` along the unit vector `direction`."""
        return cls(pos=pos.copy(), vel=direction * speed)

    def update(self):
        super().update()

    def is_out_of_bounds(self, width: float, height: float) -> bool:
        """True once the whole circle has left the screen."""
        r = self.size
        return (
            self.pos.x < -r
            or self.pos.x > width + r
            or self.pos.y < -r
            or self.pos.y > height + r
        )

    def get_trail_pos(self) -> Vector2:
        """Where the projectile was one frame ago."""
        return self.pos - self.vel
