"""Turning textures into per-pixel collision masks."""

from __future__ import annotations

import pygame

# Pixels more opaque than this (about 25 %) are solid.
ALPHA_THRESHOLD = 64


def _resize(surface: pygame.Surface, size: tuple[int, int]) -> pygame.Surface:
    if surface.get_bitsize() in (24, 32):
        return pygame.transform.smoothscale(surface, size)
    return pygame.transform.scale(surface, size)


def texture_to_collision_mask(texture: pygame.Surface, scale: float) -> list[bool]:
    """Return a row-major list of solid flags for ``texture`` resized by ``scale``."""
    if scale < 0:
        raise ValueError(f"scale must not be negative, got {scale}")
    width = int(texture.get_width() * scale)
    height = int(texture.get_height() * scale)
    if width == 0 or height == 0:
        return []
    if (width, height) != texture.get_size():
        texture = _resize(texture, (width, height))
    alpha = pygame.image.tobytes(texture, "RGBA")[3::4]
    return [value > ALPHA_THRESHOLD for value in alpha]