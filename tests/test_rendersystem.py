import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from slugrace.rendersystem import Viewport


@pytest.fixture
def viewport():
    view = Viewport("SRT (idling)", 64, 48, 60)
    yield view
    view.close()


def test_screen_has_requested_size(viewport):
    assert viewport.screen.get_size() == (64, 48)
    assert (viewport.width, viewport.height) == (64, 48)


def test_initial_title():
    with Viewport("SRT (idling)", 32, 24, 60) as view:
        assert view.screen.get_size() == (32, 24)
        assert pygame.display.get_caption()[0] == "SRT (idling)"


def test_change_title(viewport):
    viewport.change_title("SRT (forest)")
    assert pygame.display.get_caption()[0] == "SRT (forest)"
    assert viewport.screen.get_size() == (64, 48)


def test_fps_above_limit_is_rejected():
    with pytest.raises(ValueError):
        Viewport("t", 32, 32, 301)


def test_fps_at_limit_is_accepted():
    with Viewport("t", 32, 32, 300) as view:
        assert view.maxfps == 300


def test_load_missing_image_raises(viewport, tmp_path):
    with pytest.raises(FileNotFoundError):
        viewport.load_image(tmp_path / "missing.png")


def test_load_image_keeps_size_and_alpha(viewport, tmp_path):
    source = pygame.Surface((6, 4), pygame.SRCALPHA)
    source.fill((255, 0, 0, 0))
    source.set_at((2, 1), (0, 255, 0, 255))
    path = tmp_path / "sprite.png"
    pygame.image.save(source, str(path))

    loaded = viewport.load_image(str(path))
    assert loaded.get_size() == (6, 4)
    assert loaded.get_at((2, 1)).a == 255
    assert loaded.get_at((0, 0)).a == 0


def test_close_shuts_display():
    with Viewport("t", 16, 16, 30) as view:
        assert view.screen.get_size() == (16, 16)
        assert pygame.display.get_init() is True
    assert pygame.display.get_init() is False