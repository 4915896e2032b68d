from flask import Flask

import gallery_server


def test_parse_args_positional_port():
    args = gallery_server.parse_args(["9001", "--max-images", "6"])

    assert args.port == 9001
    assert args.max_images == 6
    assert args.image_dir is None


def test_main_exits_when_image_dir_unreadable(tmp_path, monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    calls = []
    monkeypatch.setattr(Flask, "run", lambda self, **kwargs: calls.append(kwargs))

    status = gallery_server.main(["--image-dir", str(tmp_path / "missing")])

    assert status == 1
    assert calls == []


def test_main_runs_app_with_overrides(tmp_path, monkeypatch):
    folder = tmp_path / "images"
    folder.mkdir()
    calls = []
    monkeypatch.setattr(Flask, "run", lambda self, **kwargs: calls.append(kwargs))

    status = gallery_server.main(["9123", "--host", "127.0.0.1", "--image-dir", str(folder)])

    assert status == 0
    assert calls == [{"host": "127.0.0.1", "port": 9123, "debug": False}]
