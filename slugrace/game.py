"""The race itself: window, audio, the countdown, the race and the win screen."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from .entity import Slugcat
from .enums import GameEvent, GameState
from .gamemap import Map, load_map
from .rendersystem import Viewport
from .timer import Timer
from .utils import get_map_name_from_file, get_music_name, load_slugcats

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
MAXFPS = 75
COUNTDOWN_SECONDS = 3.0
DEFAULT_WIN_IMAGE = "_default.png"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
LIGHTGREEN = (0, 228, 48)
LIME = (0, 158, 47)


def win_image_path(data_dir: Union[str, Path], winner: Optional[str]) -> Path:
    """The winner's own win image if it exists, otherwise the default one."""
    directory = Path(data_dir) / "racers" / "win"
    if winner:
        candidate = directory / f"{winner}.png"
        if candidate.exists():
            return candidate
    return directory / DEFAULT_WIN_IMAGE


class _TextRenderer:
    """Draws text at a given pixel height, caching one font per size."""

    def __init__(self) -> None:
        pygame.font.init()
        self._fonts: dict[int, pygame.font.Font] = {}

    def draw(
        self,
        surface: pygame.Surface,
        text: str,
        x: int,
        y: int,
        size: int,
        color: tuple[int, int, int],
    ) -> None:
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        surface.blit(font.render(text, True, color), (x, y))


class _Race:
    """Mutable state of one running race."""

    def __init__(
        self,
        viewport: Viewport,
        game_map: Map,
        slugcats: list[Slugcat],
        data_dir: Path,
        race_track: str,
        win_track: str,
    ) -> None:
        self.viewport = viewport
        self.map = game_map
        self.slugcats = slugcats
        self.data_dir = data_dir
        self.race_track = race_track
        self.win_track = win_track

        sfx_dir = data_dir / "sfx"
        self.win_sfx = pygame.mixer.Sound(str(sfx_dir / "win.wav"))
        self.applause_sfx = pygame.mixer.Sound(str(sfx_dir / "applause.wav"))
        self.countdown_sfx = pygame.mixer.Sound(str(sfx_dir / "countdown.wav"))

        self.win_image = viewport.load_image(win_image_path(data_dir, None))
        self.text = _TextRenderer()

        self.state = GameState.IN_RACE
        self.event = GameEvent.NONE
        self.slugcats_should_move = False
        self.show_debug = False
        self.winner: Optional[str] = None
        self.race_won = False
        self.timer = Timer()
        self.timer.set(COUNTDOWN_SECONDS)

    def _handle_input(self) -> bool:
        """Process window events; False once the game should close."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type != pygame.KEYDOWN:
                continue
            if event.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
            if event.key == pygame.K_d:
                self.show_debug = not self.show_debug
            elif event.key == pygame.K_r:
                self.event = GameEvent.RACE_WON
                self.race_won = True
        return True

    def _handle_event(self) -> None:
        if self.event is GameEvent.RACE_WON:
            self.slugcats_should_move = False
            pygame.mixer.music.stop()
            self.win_image = self.viewport.load_image(win_image_path(self.data_dir, self.winner))
            self.win_sfx.play()
        elif self.event is GameEvent.UNLEASH_SLUGCATS:
            self.slugcats_should_move = True
            pygame.mixer.music.load(self.race_track)
            pygame.mixer.music.play(loops=-1)
        self.event = GameEvent.NONE

    def _race_frame(self, screen: pygame.Surface, delta_time: float) -> None:
        if self.race_won and self.win_sfx.get_num_channels() == 0:
            pygame.mixer.music.load(self.win_track)
            pygame.mixer.music.play(loops=-1)
            self.applause_sfx.play()
            self.state = GameState.WIN

        screen.blit(self.map.background, (0, 0))

        snapshot = [slugcat.to_collision_data(slugcat.name) for slugcat in self.slugcats]
        if self.slugcats_should_move:
            for slugcat in self.slugcats:
                slugcat.update(
                    SCREEN_WIDTH, SCREEN_HEIGHT, delta_time, self.map.col_map, snapshot
                )

        for slugcat in self.slugcats:
            slugcat.draw(screen)

        if not self.race_won:
            winner = self.map.food.update(self.slugcats)
            if winner is not None:
                self.winner = winner
                self.event = GameEvent.RACE_WON
                self.race_won = True

        self.map.food.draw(screen)

        remaining = self.timer.seconds_remaining()
        if remaining > 0.0:
            self.text.draw(
                screen, f"PLACE YOUR BETS! {remaining:.2f}", 100, SCREEN_HEIGHT // 2, 48, WHITE
            )
        elif not self.slugcats_should_move and not self.race_won:
            self.event = GameEvent.UNLEASH_SLUGCATS

    def _win_frame(self, screen: pygame.Surface) -> None:
        screen.blit(self.win_image, (0, 0))
        self.text.draw(screen, self.winner or "", 10, SCREEN_HEIGHT - 100, 100, BLACK)

    def _debug_overlay(self, screen: pygame.Surface, mouse: pygame.Vector2) -> None:
        self.text.draw(screen, f"{round(self.viewport.clock.get_fps())} FPS", 0, 0, 20, LIME)
        self.text.draw(
            screen, f"MOUSE POS: ({mouse.x}, {mouse.y})", 0, 20, 20, LIGHTGREEN
        )

    def run(self) -> None:
        self.countdown_sfx.play()
        delta_time = 0.0
        screen = self.viewport.screen
        while True:
            mouse = self.viewport.mouse_position()
            self.timer.tick(delta_time)

            if not self._handle_input():
                break
            self._handle_event()

            screen.fill(BLACK)
            if self.state is GameState.IN_RACE:
                self._race_frame(screen, delta_time)
            else:
                self._win_frame(screen)

            if self.show_debug:
                self._debug_overlay(screen, mouse)

            pygame.display.flip()
            delta_time = self.viewport.clock.tick(self.viewport.maxfps) / 1000.0


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="slugrace", description="Watch slugcats race to the food.")
    parser.add_argument("--data-dir", default="DATA", help="directory holding the game assets")
    parser.add_argument("--map-file", default="map.txt", help="file naming the map to race on")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the race until the window is closed."""
    args = _parse_args(argv)
    data_dir = Path(args.data_dir)

    map_name = get_map_name_from_file(args.map_file, data_dir)
    race_track = get_music_name(GameState.IN_RACE, data_dir)
    win_track = get_music_name(GameState.WIN, data_dir)

    pygame.mixer.init()
    try:
        with Viewport("SRT (idling)", SCREEN_WIDTH, SCREEN_HEIGHT, MAXFPS) as viewport:
            game_map = load_map(map_name, viewport, data_dir)
            slugcats = load_slugcats(viewport, game_map.gate_spawn_pos, data_dir)
            pygame.display.set_icon(viewport.load_image(data_dir / "icon.png"))

            race = _Race(viewport, game_map, slugcats, data_dir, race_track, win_track)
            viewport.change_title(f"SRT ({game_map.map_name})")
            race.run()
    finally:
        pygame.mixer.quit()
    return 0