import math
from dataclasses import dataclass

import pygame

from .constants import BLACK, BLUE, HEIGHT, RED, WHITE, WIDTH

# pygame takes C ints; vector lines can point far off screen
_COORD_LIMIT = 1 << 15


@dataclass
class RenderContext:
    """Where and how entities are drawn. The arena origin sits at the center of the surface."""
    surface: pygame.Surface
    width: int = WIDTH
    height: int = HEIGHT
    background: tuple = WHITE
    position_color: tuple = BLACK
    velocity_color: tuple = RED
    acceleration_color: tuple = BLUE

    def to_screen(self, x, y):
        sx = max(-_COORD_LIMIT, min(_COORD_LIMIT, self.width / 2 + x))
        sy = max(-_COORD_LIMIT, min(_COORD_LIMIT, self.height / 2 + y))
        return (int(math.floor(sx + 0.5)), int(math.floor(sy + 0.5)))


def draw_position(ctx, entity):
    # diameter grows with sqrt(mass); always at least one pixel
    diameter = max(1.0, math.sqrt(entity.mass))
    radius = max(1, int(math.floor(diameter / 2 + 0.5)))
    pygame.draw.circle(ctx.surface, ctx.position_color,
                       ctx.to_screen(entity.position.x, entity.position.y), radius)


def draw_velocity(ctx, entity):
    end = entity.position.add(entity.velocity)
    pygame.draw.line(ctx.surface, ctx.velocity_color,
                     ctx.to_screen(entity.position.x, entity.position.y),
                     ctx.to_screen(end.x, end.y), 1)


def draw_acceleration(ctx, entity):
    end = entity.position.add(entity.acceleration)
    pygame.draw.line(ctx.surface, ctx.acceleration_color,
                     ctx.to_screen(entity.position.x, entity.position.y),
                     ctx.to_screen(end.x, end.y), 1)


def draw_entities(ctx, entities, clear=True):
    """Draw positions in black, velocities in red and accelerations in blue."""
    if clear:
        ctx.surface.fill(ctx.background)
    for entity in entities:
        draw_position(ctx, entity)
        draw_velocity(ctx, entity)
        draw_acceleration(ctx, entity)
