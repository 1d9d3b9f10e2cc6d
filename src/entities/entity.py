from abc import ABC, abstractmethod
import math

import pygame
from pygame import Vector2, Color

from src.utils.enums import EntityType


class Entity(ABC):
    """
    Abstract class for all entities in the game.

    Entities move in straight lines: every frame the velocity is added to
    the position as is, so `vel` is measured in pixels per frame.
    """

    def __init__(
        self,
        pos: Vector2,
        type: EntityType,
        size: float,  # model's circle's radius
        vel: Vector2 | None = None,  # pixels per frame
        color: pygame.Color | None = None,
        lifetime: float = math.inf,  # frames
    ):
        self.pos = pos
        self.type = type
        self.size = size
        self.vel = vel if vel is not None else Vector2()
        self.color = color if color is not None else Color("white")
        self.life = lifetime
        self._is_alive = True

    @abstractmethod
    def update(self):
        """
        Update the entity. This is called every frame.
        """
        if not self.is_alive():
            return
        self.pos += self.vel
        self.life -= 1
        if self.life <= 0:
            self.kill()

    def get_pos(self) -> Vector2:
        return self.pos

    def get_vel(self) -> Vector2:
        return self.vel

    def get_size(self) -> float:
        return self.size

    def get_color(self) -> pygame.Color:
        return self.color

    def get_life(self) -> float:
        return self.life

    def is_alive(self) -> bool:
        return self._is_alive

    def kill(self):
        self._is_alive = False

    def __str__(self) -> str:
        return f"{self.type.name.title()}(pos={self.pos})"
