"""Moving sprites with pixel-perfect collision: slugcats and the food they race to."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional, Sequence

import pygame

from .enums import AxisDirection
from .masks import texture_to_collision_mask

MIN_SPEED = 50
MAX_SPEED = 150
DEFAULT_POSITION = (300.0, 200.0)


def _signum(value: float) -> float:
    if math.isnan(value):
        return value
    return math.copysign(1.0, value)


@dataclass(frozen=True, eq=False)
class CollisionData:
    """A snapshot of an entity's collision shape, taken before a frame's updates."""

    position: pygame.Vector2
    width: int
    height: int
    mask: tuple[bool, ...]
    name: str


class Entity:
    """A textured sprite with a position, a speed and a collision mask.

    Choose ``scale`` so that the scaled width and height are whole numbers.
    """

    def __init__(
        self,
        texture: pygame.Surface,
        scale: float,
        position: Optional[Sequence[float]] = None,
    ) -> None:
        self.texture = texture
        self.scale = scale
        self._width = int(texture.get_width() * scale)
        self._height = int(texture.get_height() * scale)
        self._mask = tuple(texture_to_collision_mask(texture, scale))
        self._solid = [
            (index % self._width, index // self._width)
            for index, solid in enumerate(self._mask)
            if solid
        ]
        self.position = pygame.Vector2(position if position is not None else DEFAULT_POSITION)
        self.speed = pygame.Vector2(MIN_SPEED, MIN_SPEED)
        self._sprite: Optional[pygame.Surface] = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def mask(self) -> tuple[bool, ...]:
        return self._mask

    def to_collision_data(self, name: str) -> CollisionData:
        """Snapshot this entity's shape under ``name``."""
        return CollisionData(
            position=pygame.Vector2(self.position),
            width=self._width,
            height=self._height,
            mask=self._mask,
            name=name,
        )

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the scaled texture at the entity's position."""
        if self._sprite is None:
            size = (self._width, self._height)
            if size == self.texture.get_size():
                self._sprite = self.texture
            else:
                self._sprite = pygame.transform.scale(self.texture, size)
        surface.blit(self._sprite, (self.position.x, self.position.y))


class Slugcat(Entity):
    """A racer that bounces around the map at random speeds."""

    def __init__(
        self,
        name: str,
        texture: pygame.Surface,
        scale: float,
        position: Sequence[float],
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(texture, scale, position)
        self.name = name
        self._rng = rng if rng is not None else random.Random()
        self.speed = pygame.Vector2(self._random_speed(), self._random_speed())
        if self._rng.random() < 0.5:
            self.speed.x = -self.speed.x
        if self._rng.random() < 0.5:
            self.speed.y = -self.speed.y

    def _random_speed(self) -> float:
        return float(self._rng.randrange(MIN_SPEED, MAX_SPEED))

    def _bounce(self, component: float) -> float:
        return -_signum(component) * self._random_speed()

    def check_collision(
        self,
        direction: AxisDirection,
        dest: pygame.Vector2,
        mask_width: int,
        mask_height: int,
        map_mask: Sequence[bool],
        other_slugcats: Sequence[CollisionData],
    ) -> bool:
        """True if moving to ``dest`` along ``direction`` hits the map or another slugcat."""
        for x, y in self._solid:
            if direction is AxisDirection.X:
                px, py = dest.x + x, self.position.y + y
            else:
                px, py = self.position.x + x, dest.y + y

            if (
                0.0 <= px < mask_width
                and 0.0 <= py < mask_height
                and map_mask[math.floor(py) * mask_width + math.floor(px)]
            ):
                return True

            for other in other_slugcats:
                if other.name == self.name:
                    continue
                dx = math.floor(px - other.position.x)
                dy = math.floor(py - other.position.y)
                if not (0 <= dx < other.width and 0 <= dy < other.height):
                    continue
                if other.mask[dy * other.width + dx]:
                    return True
        return False

    def update(
        self,
        screen_width: int,
        screen_height: int,
        delta_time: float,
        map_mask: Sequence[bool],
        other_slugcats: Sequence[CollisionData],
    ) -> None:
        """Move one frame, bouncing off the map, other slugcats and the screen edges.

        The map mask is assumed to be the same size as the screen.
        """
        dest = pygame.Vector2(
            self.position.x + self.speed.x * delta_time,
            self.position.y + self.speed.y * delta_time,
        )

        if self.check_collision(
            AxisDirection.X, dest, screen_width, screen_height, map_mask, other_slugcats
        ):
            self.speed.x = self._bounce(self.speed.x)
        else:
            self.position.x = dest.x

        if self.check_collision(
            AxisDirection.Y, dest, screen_width, screen_height, map_mask, other_slugcats
        ):
            self.speed.y = self._bounce(self.speed.y)
        else:
            self.position.y = dest.y

        if self.position.x < 0.0 or self.position.x + self._width > screen_width:
            self.speed.x = self._bounce(self.speed.x)
        if self.position.y < 0.0 or self.position.y + self._height > screen_height:
            self.speed.y = self._bounce(self.speed.y)


class Food(Entity):
    """The goal: the first slugcat to touch it wins."""

    def __init__(self, texture: pygame.Surface, scale: float, position: Sequence[float]) -> None:
        super().__init__(texture, scale, position)

    def update(self, slugcats: Sequence[Slugcat]) -> Optional[str]:
        """Name of the first slugcat whose bounding box overlaps the food, else None."""
        fx, fy = self.position.x, self.position.y
        fw, fh = self.width, self.height
        for slugcat in slugcats:
            sx, sy = slugcat.position.x, slugcat.position.y
            if (
                sx < fx + fw
                and sx + slugcat.width > fx
                and sy < fy + fh
                and sy + slugcat.height > fy
            ):
                return slugcat.name
        return None