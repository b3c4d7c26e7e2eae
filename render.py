import math
import pygame

from config import (
    BLUE,
    BLUE_BOT,
    DEAD,
    GREEN,
    GREY,
    PARTICIPANT_RADIUS,
    RED,
    WHITE,
    YELLOW,
)
from entities import Kind


def load_sprites():
    """Load optional sprites used by the game."""
    sprites = {}
    try:
        sprites["bomb"] = pygame.image.load("assets/bomb.png").convert_alpha()
    except (pygame.error, FileNotFoundError):
        sprites["bomb"] = None
    return sprites


def seat_positions(count, center, radius, start_angle=0.0):
    """Spread ``count`` seats evenly on a circle, clockwise from ``start_angle`` degrees."""
    if count <= 0:
        return []
    step = 360.0 / count
    cx, cy = center
    seats = []
    for i in range(count):
        a = math.radians(start_angle + i * step)
        seats.append((cx + radius * math.cos(a), cy + radius * math.sin(a)))
    return seats


def draw_participants(surface, views, seats, current_id, font):
    """Draw every participant at its seat with a health bar and a name label.

    ``views`` and ``seats`` are matched by position; eliminated participants
    are drawn greyed out.
    """
    r = PARTICIPANT_RADIUS
    for view, (x, y) in zip(views, seats):
        if not view.alive:
            col = DEAD
        elif view.kind is Kind.HUMAN:
            col = BLUE
        else:
            col = BLUE_BOT
        pos = (int(x), int(y))
        pygame.draw.circle(surface, col, pos, r)
        if view.id == current_id:
            pygame.draw.circle(surface, YELLOW, pos, r + 4, 3)
        if view.alive:
            frac = view.health / view.max_health
            pygame.draw.rect(surface, (40, 40, 40), (x - 30, y - r - 14, 60, 8))
            pygame.draw.rect(surface, GREEN if frac > 0.34 else RED, (x - 30, y - r - 14, 60 * frac, 8))
        status = "" if view.alive else " (OUT)"
        label = font.render(view.name + status, True, GREY)
        surface.blit(label, (x - label.get_width() / 2, y + r + 4))


def draw_bomb(surface, pos, fuse_seconds, fuse_elapsed, sprites):
    """Draw the bomb icon or a fallback circle at ``pos``.

    A ring around the bomb shows the fraction of the fuse left to burn.
    """
    pos = (int(pos[0]), int(pos[1]))
    icon = sprites.get("bomb")
    if icon:
        rect = icon.get_rect(center=pos)
        surface.blit(icon, rect)
    else:
        pygame.draw.circle(surface, (30, 30, 30), pos, 22)
        pygame.draw.circle(surface, WHITE, pos, 22, 2)

    remaining = max(0.0, fuse_seconds - fuse_elapsed)
    frac = remaining / fuse_seconds if fuse_seconds else 0
    radius = 34
    rect = pygame.Rect(0, 0, radius * 2, radius * 2)
    rect.center = pos
    start_angle = -math.pi / 2
    end_angle = start_angle + 2 * math.pi * frac
    pygame.draw.arc(surface, (255, 60, 60), rect, start_angle, end_angle, 4)
