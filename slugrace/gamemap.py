"""Loading a race map: background, collision map, spawn points and food."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Protocol, Union

import pygame

from .entity import Food
from .masks import texture_to_collision_mask

FOOD_SCALE = 0.08


class _ImageLoader(Protocol):
    def load_image(self, filename: Union[str, Path]) -> pygame.Surface: ...


@dataclass
class Map:
    """Everything a race needs from one map directory."""

    map_name: str
    background: pygame.Surface
    col_map: list[bool]
    food_spawn_pos: pygame.Vector2
    gate_spawn_pos: pygame.Vector2
    food: Food


def _as_number(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return 0.0


def parse_spawn_pos(metadata: Mapping[str, Any], key: str) -> pygame.Vector2:
    """Read ``[x, y]`` under ``key``; missing or malformed entries give the origin."""
    value = metadata.get(key)
    if not isinstance(value, list) or len(value) < 2:
        return pygame.Vector2(0.0, 0.0)
    return pygame.Vector2(_as_number(value[0]), _as_number(value[1]))


def load_map(
    map_name: str, viewport: _ImageLoader, data_dir: Union[str, Path] = "DATA"
) -> Map:
    """Load the map called ``map_name`` from ``data_dir/maps``."""
    directory = Path(data_dir) / "maps" / map_name

    background = viewport.load_image(directory / "bg.png")
    col_map_texture = viewport.load_image(directory / "col_map.png")
    col_map = texture_to_collision_mask(col_map_texture, 1.0)

    metadata = json.loads((directory / "metadata.json").read_text(encoding="utf-8"))
    if not isinstance(metadata, dict):
        raise ValueError(f"Map metadata in {directory} must be a JSON object")

    food_spawn_pos = parse_spawn_pos(metadata, "food_spawn_pos")
    gate_spawn_pos = parse_spawn_pos(metadata, "gate_spawn_pos")

    food = Food(viewport.load_image(directory / "food.png"), FOOD_SCALE, food_spawn_pos)

    return Map(
        map_name=map_name,
        background=background,
        col_map=col_map,
        food_spawn_pos=food_spawn_pos,
        gate_spawn_pos=gate_spawn_pos,
        food=food,
    )