from pathlib import Path

import pytest

from slugrace.game import DEFAULT_WIN_IMAGE, main, win_image_path


def _win_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "racers" / "win"
    directory.mkdir(parents=True)
    return directory


def test_win_image_path_uses_winner_image_when_present(tmp_path):
    directory = _win_dir(tmp_path)
    (directory / "survivor.png").write_bytes(b"")
    assert win_image_path(tmp_path, "survivor") == directory / "survivor.png"


def test_win_image_path_falls_back_to_default(tmp_path):
    directory = _win_dir(tmp_path)
    assert win_image_path(tmp_path, "monk") == directory / DEFAULT_WIN_IMAGE


def test_win_image_path_without_winner_is_default(tmp_path):
    directory = _win_dir(tmp_path)
    (directory / "hunter.png").write_bytes(b"")
    result = win_image_path(tmp_path, None)
    assert result.name == "_default.png"
    assert result.parent == directory


def test_win_image_path_accepts_string_data_dir(tmp_path):
    directory = _win_dir(tmp_path)
    (directory / "gourmand.png").write_bytes(b"")
    assert win_image_path(str(tmp_path), "gourmand") == directory / "gourmand.png"


def test_main_missing_map_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["--data-dir", str(tmp_path), "--map-file", str(tmp_path / "absent.txt")])


def test_main_unknown_map_raises(tmp_path):
    map_file = tmp_path / "map.txt"
    map_file.write_text("nowhere\n", encoding="utf-8")
    with pytest.raises(FileNotFoundError, match="map does not exist"):
        main(["--data-dir", str(tmp_path), "--map-file", str(map_file)])


def test_main_without_music_raises(tmp_path):
    (tmp_path / "maps" / "outskirts").mkdir(parents=True)
    (tmp_path / "music" / "race").mkdir(parents=True)
    map_file = tmp_path / "map.txt"
    map_file.write_text("outskirts\r\n", encoding="utf-8")
    with pytest.raises(FileNotFoundError, match="mp3"):
        main(["--data-dir", str(tmp_path), "--map-file", str(map_file)])