import math

import pygame
from pygame import Color, Vector2, freetype


freetype.init()
FONTS: dict[int, freetype.Font] = {}


def get_font(size: int) -> freetype.Font:
    """pygame's bundled default font at the given size; cached."""
    if size not in FONTS:
        FONTS[size] = freetype.Font(None, size)
    return FONTS[size]


def with_alpha(color: Color, alpha: int) -> Color:
    return Color(color.r, color.g, color.b, alpha)


CIRCLES: dict[tuple[float, tuple[int, int, int, int]], pygame.Surface] = {}


def get_translucent_circle(color: Color, radius: float) -> pygame.Surface:
    """A circle drawn on its own per-pixel-alpha surface; cached by radius and color."""
    key = (radius, tuple(color))
    if key not in CIRCLES:
        r = math.ceil(radius) + 1
        scratch = pygame.Surface((2 * r, 2 * r), pygame.SRCALPHA)
        pygame.draw.circle(scratch, color, (r, r), radius)
        CIRCLES[key] = scratch
    return CIRCLES[key]


def draw_translucent_circle(surface: pygame.Surface, color: Color, center: Vector2, radius: float):
    """pygame.draw ignores alpha on opaque surfaces, so blit a prepared alpha circle instead."""
    circle = get_translucent_circle(color, radius)
    half = circle.get_width() // 2
    surface.blit(circle, (center.x - half, center.y - half))


def draw_translucent_rect(surface: pygame.Surface, color: Color, rect: pygame.Rect):
    scratch = pygame.Surface(rect.size, pygame.SRCALPHA)
    scratch.fill(color)
    surface.blit(scratch, rect.topleft)


class Label:
    def __init__(self,
            text: str,
            surface: pygame.Surface,
            position: Vector2,
            color: Color = Color('white'),
            font_size: int = 14
        ):
        self.font = get_font(font_size)
        self.text = text
        self.surface = surface
        self.color = color
        self.position = position

    def get_rect(self) -> pygame.Rect:
        rect = self.font.get_rect(self.text or ' ')
        rect.topleft = (round(self.position.x), round(self.position.y))
        return rect

    def draw(self):
        self.font.render_to(self.surface, self.get_rect(), self.text, self.color)

    def update(self):
        self.draw()

    def set_text(self, text: str):
        self.text = text


class TextBox:
    """A column of labels stacked `line_height` pixels apart."""

    def __init__(self,
            text_lines: list[str],
            position: Vector2,
            surface: pygame.Surface,
            line_height: int = 20,
            font_size: int = 12,
        ):
        self.labels: list[Label]
        self.text_lines = text_lines
        self.surface = surface
        self.line_height = line_height
        self.font_size = font_size
        self.rebuild(position)

    def rebuild(self, top_left: Vector2):
        self.position = Vector2(top_left)
        self.labels = [
            Label(text, self.surface, self.position + Vector2(0, i * self.line_height), font_size=self.font_size)
            for i, text in enumerate(self.text_lines)
        ]

    def update(self):
        for label in self.labels:
            label.update()

    def set_lines(self, text_lines: list[str]):
        assert len(text_lines) == len(self.labels), f'{len(text_lines)=} != {len(self.labels)=}'
        self.text_lines = text_lines
        for label, text in zip(self.labels, self.text_lines):
            label.set_text(text)
