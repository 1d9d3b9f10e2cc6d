from typing import Generator, Iterable
import logging

from pygame import Vector2

from src.entities.entity import Entity
from src.entities.player import Player
from src.entities.projectile import Projectile
from src.entities.particle import Particle
from src.input_state import InputState
from src.utils.enums import Action
from src.utils.exceptions import ShootingDirectionUndefined


class Game:
    """
    The whole simulation: the player, the projectile and particle stores
    and the keyboard state they are driven by.

    Everything is measured in frames; `update` advances the world by exactly one.
    """

    def __init__(self, width: float, height: float, input_state: InputState | None = None) -> None:
        self.width = width
        self.height = height
        self.frame = 0
        self.input_state = input_state if input_state is not None else InputState()

        # entities:
        self.player = Player(Vector2(width / 2, height / 2), bounds=(width, height))
        self.e_projectiles: list[Projectile] = []
        self.e_particles: list[Particle] = []
        logging.info(f'Game started on a {width}x{height} canvas')

    def all_entities_iter(
        self,
        with_player: bool = True,
        include_dead: bool = False,
    ) -> Generator[Entity, None, None]:
        yield from self.projectiles(include_dead)
        yield from self.particles(include_dead)
        if with_player:
            yield self.player

    def projectiles(
        self, include_dead: bool = False
    ) -> Generator[Projectile, None, None]:
        yield from (ent for ent in self.e_projectiles if include_dead or ent.is_alive())

    def particles(
        self, include_dead: bool = False
    ) -> Generator[Particle, None, None]:
        yield from (ent for ent in self.e_particles if include_dead or ent.is_alive())

    def update(self) -> None:
        self.player.steer(self.input_state)
        self.player.update()
        for projectile in self.e_projectiles:
            projectile.update()
            if projectile.is_out_of_bounds(self.width, self.height):
                projectile.kill()
        for particle in self.e_particles:
            particle.update()
        if self.input_state.is_action_pressed(Action.SPECIAL):
            self.special_ability()
        self.remove_dead_entities()
        self.frame += 1

    def special_ability(self) -> None:
        """Called every frame the special key is held. No ability is bound yet."""

    def player_try_shooting(self, target: Vector2) -> bool:
        """Shoot towards `target`. Returns whether anything was fired."""
        try:
            projectile, particles = self.player.shoot(Vector2(target))
        except ShootingDirectionUndefined as e:
            logging.debug(f'Shot refused: {e}')
            return False
        self.add_projectile(projectile)
        self.add_particles(particles)
        return True

    def add_projectile(self, projectile: Projectile) -> None:
        self.e_projectiles.append(projectile)

    def add_particles(self, particles: Iterable[Particle]) -> None:
        self.e_particles.extend(particles)

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.player.set_bounds(width, height)
        logging.info(f'Canvas resized to {width}x{height}; player at {self.player.get_pos()}')

    def remove_dead_entities(self):
        """
        Remove all dead entities.
        Filters the stores in place, so outside references to them stay valid.
        """
        self.e_projectiles[:] = list(self.projectiles())
        self.e_particles[:] = list(self.particles())

    def get_info(self) -> dict:
        return {
            "frame": self.frame,
            "canvas": (self.width, self.height),
            "player": repr(self.player),
            "projectiles": len(self.e_projectiles),
            "particles": len(self.e_particles),
            "input": repr(self.input_state),
        }
