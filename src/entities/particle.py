import random

from pygame import Vector2, Color

from src.entities.entity import Entity
from src.utils.enums import EntityType
from src.utils.utils import hsl_color, random_in_cone
from config import (
    PARTICLES_PER_SHOT,
    PARTICLE_SPREAD,
    PARTICLE_SPEED_RANGE,
    PARTICLE_RADIUS_RANGE,
    PARTICLE_LIFETIME_RANGE,
    PARTICLE_HUE_RANGE,
    PARTICLE_SHRINK_FACTOR,
)


class Particle(Entity):
    """Purely decorative; shrinks a little every frame until its life runs out."""

    def __init__(
        self,
        pos: Vector2,
        vel: Vector2,
        size: float,
        color: Color,
        lifetime: int,
        shrink_factor: float = PARTICLE_SHRINK_FACTOR,
    ):
        super().__init__(
            pos=pos,
            type=EntityType.PARTICLE,
            size=size,
            vel=vel,
            color=color,
            lifetime=lifetime,
        )
        self.shrink_factor = shrink_factor

    def update(self):
        if not self._is_alive:
            return
        super().update()
        self.size *= self.shrink_factor


def shot_particles(pos: Vector2, direction: Vector2, n: int = PARTICLES_PER_SHOT) -> list[Particle]:
    """The muzzle flash burst: `n` particles flying roughly along `direction`."""
    return [
        Particle(
            pos=pos.copy(),
            vel=random_in_cone(direction, PARTICLE_SPREAD, random.uniform(*PARTICLE_SPEED_RANGE)),
            size=random.uniform(*PARTICLE_RADIUS_RANGE),
            color=hsl_color(random.uniform(*PARTICLE_HUE_RANGE), 100., 60.),
            lifetime=random.randrange(*PARTICLE_LIFETIME_RANGE),
        )
        for _ in range(n)
    ]
