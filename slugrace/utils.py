"""Asset discovery: racers, music tracks and the selected map."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Any, Optional, Protocol, Sequence, Union

import pygame

from .entity import Slugcat
from .enums import GameState

SLUGCAT_SCALE = 0.25
SLUGCAT_SPACING = 10


class _ImageLoader(Protocol):
    def load_image(self, filename: Union[str, Path]) -> pygame.Surface: ...


def list_files_with_extension(directory: Union[str, Path], extension: str) -> list[str]:
    """Names of entries in ``directory`` whose extension matches, ignoring case, sorted."""
    wanted = extension.lstrip(".").lower()
    return sorted(
        entry.name
        for entry in Path(directory).iterdir()
        if entry.suffix and entry.suffix[1:].lower() == wanted
    )


def load_slugcats(
    viewport: _ImageLoader,
    gate_spawn_pos: Sequence[float],
    data_dir: Union[str, Path] = "DATA",
) -> list[Slugcat]:
    """Create one slugcat per sprite, lined up from the gate with a little padding."""
    sprite_dir = Path(data_dir) / "racers" / "sprites"
    gate = pygame.Vector2(gate_spawn_pos)
    slugcats = []
    for counter, filename in enumerate(list_files_with_extension(sprite_dir, "png")):
        name = filename[: -len(".png")] if filename.endswith(".png") else filename
        texture = viewport.load_image(sprite_dir / filename)
        offset = counter * (texture.get_width() + SLUGCAT_SPACING) * SLUGCAT_SCALE
        slugcats.append(Slugcat(name, texture, SLUGCAT_SCALE, (gate.x + offset, gate.y)))
    return slugcats


def get_music_name(
    state: GameState,
    data_dir: Union[str, Path] = "DATA",
    rng: Optional[Any] = None,
) -> str:
    """Path of a randomly chosen mp3 for the race or the win screen."""
    chooser = rng if rng is not None else random.Random()
    subdir = "win" if state is GameState.WIN else "race"
    directory = Path(data_dir) / "music" / subdir
    tracks = list_files_with_extension(directory, "mp3")
    if not tracks:
        raise FileNotFoundError(f"No .mp3 tracks in {directory}")
    return str(directory / chooser.choice(tracks))


def get_map_name_from_file(
    path: Union[str, Path] = "map.txt", data_dir: Union[str, Path] = "DATA"
) -> str:
    """Read the map name from ``path`` and check that the map exists."""
    map_name = Path(path).read_text(encoding="utf-8").replace("\n", "").replace("\r", "")
    if not (Path(data_dir) / "maps" / map_name).exists():
        raise FileNotFoundError(f"'{map_name}': map does not exist!")
    return map_name