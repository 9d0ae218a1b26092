from __future__ import annotations

import json
from pathlib import Path

import pytest
from PIL import Image

from rastershapes import __version__, cli
from rastershapes.settings.store import SettingsStore


def test_parse_args_defaults_are_unset() -> None:
    args = cli.parse_args([])
    assert args.width is None
    assert args.scene is None
    assert args.log_level == "INFO"
    assert args.save_settings is False


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--version"]) == 0
    assert __version__ in capsys.readouterr().out


def test_random_scene_run(settings_home, tmp_path: Path) -> None:
    out = tmp_path / "random.png"
    argv = [
        "--width", "64", "--height", "48",
        "--scene", "random",
        "--points", "5", "--lines", "2", "--rectangles", "1",
        "--triangles", "1", "--circles", "2",
        "--seed", "3",
        "-o", str(out),
    ]
    assert cli.main(argv) == 0
    with Image.open(out) as img:
        assert img.size == (64, 48)
        colors = img.convert("RGBA").getcolors(64 * 48)
    assert len(colors) > 1


def test_same_seed_same_image(settings_home, tmp_path: Path) -> None:
    images = []
    for name in ("a.png", "b.png"):
        out = tmp_path / name
        cli.main(["--width", "80", "--height", "80", "--seed", "42", "-o", str(out)])
        with Image.open(out) as img:
            images.append(img.convert("RGBA").tobytes())
    assert images[0] == images[1]


def test_invalid_size_exits_2(settings_home, tmp_path: Path) -> None:
    assert cli.main(["--width", "1", "-o", str(tmp_path / "x.png")]) == 2
    assert not (tmp_path / "x.png").exists()


def test_save_settings(settings_home, tmp_path: Path) -> None:
    out = tmp_path / "s.png"
    argv = ["--width", "40", "--height", "30", "--save-settings", "-o", str(out)]
    assert cli.main(argv) == 0
    data = json.loads(SettingsStore.settings_path().read_text())
    assert data["width"] == 40
    assert data["output"] == str(out)


def test_render_returns_write_count(settings_home, tmp_path: Path) -> None:
    from rastershapes.config import make_config

    args = cli.parse_args(
        ["--scene", "random", "--points", "3", "--lines", "0", "--rectangles", "0",
         "--triangles", "0", "--circles", "0", "--width", "10", "--height", "10",
         "-o", str(tmp_path / "p.png")]
    )
    assert cli.render(make_config(args=args)) == 3


def test_missing_pygame_exits_2(
    settings_home, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    from rastershapes.platform.display import pygame_backend

    monkeypatch.setattr(pygame_backend, "pg", None)
    out = tmp_path / "pg.png"
    argv = ["--backend", "pygame", "--width", "10", "--height", "10", "-o", str(out)]
    assert cli.main(argv) == 2
    assert not out.exists()
