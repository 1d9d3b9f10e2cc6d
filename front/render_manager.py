import math

import pygame
from pygame import Color, Vector2

from src.game import Game
from src.entities.player import Player
from src.entities.projectile import Projectile
from src.entities.particle import Particle
from front.utils import Label, TextBox, draw_translucent_circle, draw_translucent_rect, with_alpha
from config import (
    BACKGROUND_COLOR_HEX,
    PLAYER_DETAIL_COLOR_HEX,
    PLAYER_INDICATOR_COLOR_HEX,
    HEALTH_HIGH_COLOR_HEX,
    HEALTH_MEDIUM_COLOR_HEX,
    HEALTH_LOW_COLOR_HEX,
    GRID_SPACING,
    GRID_ALPHA,
    TRAIL_COLOR_HEX,
    TRAIL_RADIUS_MULT,
    TRAIL_ALPHA,
    PLAYER_DETAIL_INSET,
    PLAYER_INDICATOR_RADIUS,
    PLAYER_INDICATOR_OFFSET,
    PLAYER_BOB_AMPLITUDE,
    PLAYER_BOB_PERIOD_DIVISOR,
    HEALTH_BAR_POS,
    HEALTH_BAR_SIZE,
    HEALTH_BAR_BORDER,
    HEALTH_TEXT_SIZE,
    DEBUG_TEXT_SIZE,
    DEBUG_LINE_OFFSETS,
    BM,
)


BG_COLOR = Color(BACKGROUND_COLOR_HEX)
WHITE = Color("white")
PLAYER_DETAIL_COLOR = Color(PLAYER_DETAIL_COLOR_HEX)
PLAYER_INDICATOR_COLOR = Color(PLAYER_INDICATOR_COLOR_HEX)
HEALTH_HIGH = Color(HEALTH_HIGH_COLOR_HEX)
HEALTH_MEDIUM = Color(HEALTH_MEDIUM_COLOR_HEX)
HEALTH_LOW = Color(HEALTH_LOW_COLOR_HEX)
HEALTH_TRACK = Color(0, 0, 0, 128)
GRID_COLOR = Color(255, 255, 255, GRID_ALPHA)
TRAIL_COLOR = with_alpha(Color(TRAIL_COLOR_HEX), TRAIL_ALPHA)


def health_bar_color(percent: float) -> Color:
    if percent > 0.5:
        return HEALTH_HIGH
    if percent > 0.25:
        return HEALTH_MEDIUM
    return HEALTH_LOW


def player_bob_offset(player: Player, now_ms: int) -> float:
    """Vertical wobble of a walking player; zero while standing still."""
    if not player.is_moving:
        return 0.
    return math.sin(now_ms / PLAYER_BOB_PERIOD_DIVISOR) * PLAYER_BOB_AMPLITUDE


class RenderManager:
    """
    Draws the game state onto the surface, back to front:
    background, grid, projectiles, particles, player, health bar, debug info.
    Never modifies the game.
    """

    def __init__(self, surface: pygame.Surface, game: Game, debug: bool = True):
        self.surface = surface
        self.debug = debug
        self.game = game
        self.grid: pygame.Surface | None = None
        self.health_label = Label(
            "",
            self.surface,
            Vector2(HEALTH_BAR_POS[0], HEALTH_BAR_POS[1] + HEALTH_BAR_SIZE[1] + BM / 2),
            font_size=HEALTH_TEXT_SIZE,
        )
        self.debug_textbox = TextBox(
            [""] * len(DEBUG_LINE_OFFSETS),
            Vector2(),
            self.surface,
            line_height=DEBUG_LINE_OFFSETS[0] - DEBUG_LINE_OFFSETS[1],
            font_size=DEBUG_TEXT_SIZE,
        )
        self.on_resize()

    def set_surface(self, surface: pygame.Surface):
        self.surface = surface
        self.health_label.surface = surface
        self.debug_textbox.surface = surface
        self.on_resize()

    def on_resize(self):
        self.grid = None
        height = self.surface.get_height()
        self.debug_textbox.rebuild(Vector2(BM, height - DEBUG_LINE_OFFSETS[0] - DEBUG_TEXT_SIZE))

    def set_debug(self, debug: bool):
        self.debug = debug

    def render(self, now_ms: int | None = None):
        if now_ms is None:
            now_ms = pygame.time.get_ticks()
        self.surface.fill(BG_COLOR)
        self.draw_grid()
        for projectile in self.game.projectiles():
            self.draw_projectile(projectile)
        for particle in self.game.particles():
            self.draw_particle(particle)
        self.draw_player(now_ms)
        self.draw_health_bar()
        if self.debug:
            self.draw_debug_info()

    def get_grid(self) -> pygame.Surface:
        size = self.surface.get_size()
        if self.grid is None or self.grid.get_size() != size:
            width, height = size
            self.grid = pygame.Surface(size, pygame.SRCALPHA)
            for x in range(0, width, GRID_SPACING):
                pygame.draw.line(self.grid, GRID_COLOR, (x, 0), (x, height))
            for y in range(0, height, GRID_SPACING):
                pygame.draw.line(self.grid, GRID_COLOR, (0, y), (width, y))
        return self.grid

    def draw_grid(self):
        self.surface.blit(self.get_grid(), (0, 0))

    def draw_projectile(self, projectile: Projectile):
        pygame.draw.circle(
            self.surface,
            projectile.get_color(),
            projectile.get_pos(),
            projectile.get_size(),
        )
        draw_translucent_circle(
            self.surface,
            TRAIL_COLOR,
            projectile.get_trail_pos(),
            projectile.get_size() * TRAIL_RADIUS_MULT,
        )

    def draw_particle(self, particle: Particle):
        pygame.draw.circle(
            self.surface,
            particle.get_color(),
            particle.get_pos(),
            particle.get_size(),
        )

    def draw_player(self, now_ms: int):
        player = self.game.player
        bob = player_bob_offset(player, now_ms)
        center = player.get_pos() + Vector2(0., bob)
        body = player.get_rect().move(0, round(bob))
        pygame.draw.rect(self.surface, player.get_color(), body)
        pygame.draw.rect(
            self.surface,
            PLAYER_DETAIL_COLOR,
            body.inflate(-2 * PLAYER_DETAIL_INSET, -2 * PLAYER_DETAIL_INSET),
        )
        direction = player.get_last_direction()
        indicator = center + Vector2(
            direction.x * (player.width / 2 + PLAYER_INDICATOR_OFFSET),
            direction.y * (player.height / 2 + PLAYER_INDICATOR_OFFSET),
        )
        pygame.draw.circle(self.surface, PLAYER_INDICATOR_COLOR, indicator, PLAYER_INDICATOR_RADIUS)

    def draw_health_bar(self):
        health = self.game.player.get_health()
        percent = health.get_percent_full()
        track = pygame.Rect(*HEALTH_BAR_POS, *HEALTH_BAR_SIZE)
        draw_translucent_rect(self.surface, HEALTH_TRACK, track)
        filled = track.copy()
        filled.width = round(track.width * percent)
        if filled.width > 0:
            pygame.draw.rect(self.surface, health_bar_color(percent), filled)
        pygame.draw.rect(self.surface, WHITE, track, width=HEALTH_BAR_BORDER)
        self.health_label.set_text(f"Health: {health}")
        self.health_label.update()

    def debug_lines(self) -> list[str]:
        pos = self.game.player.get_pos()
        return [
            f"Position: ({round(pos.x)}, {round(pos.y)})",
            f"Projectiles: {len(self.game.e_projectiles)}",
            f"Particles: {len(self.game.e_particles)}",
        ]

    def draw_debug_info(self):
        self.debug_textbox.set_lines(self.debug_lines())
        self.debug_textbox.update()
