"""The game window: display setup, frame pacing and texture loading."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import pygame

MAX_FPS_LIMIT = 300


class Viewport:
    """Owns the display surface and the frame clock."""

    def __init__(self, title: str, screen_width: int, screen_height: int, maxfps: int) -> None:
        if maxfps > MAX_FPS_LIMIT:
            raise ValueError(f"Max FPS must be equal to or less than {MAX_FPS_LIMIT}")
        pygame.display.init()
        self.screen: pygame.Surface = pygame.display.set_mode((screen_width, screen_height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.maxfps = maxfps
        self.width = screen_width
        self.height = screen_height

    def __enter__(self) -> "Viewport":
        return self

    def __exit__(self, *exc_info: object) -> Optional[bool]:
        self.close()
        return None

    def change_title(self, new_title: str) -> None:
        """Set the window caption."""
        pygame.display.set_caption(new_title)

    def mouse_position(self) -> pygame.Vector2:
        """Current mouse position in window coordinates."""
        return pygame.Vector2(pygame.mouse.get_pos())

    def load_image(self, filename: Union[str, Path]) -> pygame.Surface:
        """Load an image file as a surface with per-pixel alpha."""
        path = Path(filename)
        if not path.is_file():
            raise FileNotFoundError(f"Failed to load texture: {path}")
        return pygame.image.load(str(path)).convert_alpha()

    def close(self) -> None:
        """Close the window."""
        pygame.display.quit()