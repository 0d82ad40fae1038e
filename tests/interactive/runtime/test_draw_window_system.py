"""DrawWindowSystem のキー操作・再描画・録画制御に関するテスト群（ウィンドウは偽物に差し替える）。"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pyglet
import pytest

pyglet.options["headless"] = True

from pyglet.window import key  # noqa: E402

from seedsketch.api.session import SketchSession  # noqa: E402
from seedsketch.core.primitives.line import line  # noqa: E402
from seedsketch.core.scene import Scene  # noqa: E402
from seedsketch.core.sketch import FrameContext, Sketch  # noqa: E402
from seedsketch.core.sketch_config import SketchConfig  # noqa: E402
from seedsketch.interactive.runtime import draw_window_system  # noqa: E402
from seedsketch.interactive.runtime.draw_window_system import DrawWindowSystem  # noqa: E402


class _FakeWindow:
    def __init__(self, canvas_size: tuple[int, int], caption: str) -> None:
        self.canvas_size = canvas_size
        self.caption = caption
        self.handlers: dict[str, object] = {}
        self.closed = False

    def push_handlers(self, **handlers: object) -> None:
        self.handlers.update(handlers)

    def clear(self) -> None:
        pass

    def close(self) -> None:
        self.closed = True

    def press(self, symbol: int) -> None:
        self.handlers["on_key_press"](symbol, 0)


class _FakeImage:
    def __init__(self, pixels: np.ndarray) -> None:
        self.pixels = pixels

    def blit(self, x: float, y: float) -> None:
        pass


class _FakeRecording:
    def __init__(self, *, size: tuple[int, int], fps: float) -> None:
        self.size = size
        self.fps = fps
        self.path: Path | None = None
        self.frames: list[np.ndarray] = []
        self.saved: list[Path] = []

    @property
    def is_recording(self) -> bool:
        return self.path is not None

    @property
    def frames_written(self) -> int:
        return len(self.frames)

    def start(self, output_path: Path) -> None:
        self.path = Path(output_path)
        self.frames = []

    def write_frame(self, pixels: np.ndarray) -> None:
        self.frames.append(pixels)

    def stop(self) -> Path | None:
        path = self.path
        self.path = None
        if path is not None:
            self.saved.append(path)
        return path


@pytest.fixture
def fake_gui(monkeypatch: pytest.MonkeyPatch, runtime_dirs: tuple[Path, Path]) -> Path:
    monkeypatch.setattr(draw_window_system, "create_draw_window", lambda size, *, caption: _FakeWindow(size, caption))
    monkeypatch.setattr(draw_window_system, "pixels_to_image", _FakeImage)
    monkeypatch.setattr(draw_window_system, "VideoRecordingSystem", _FakeRecording)
    return runtime_dirs[0]


def _make_system(**config_kwargs) -> tuple[DrawWindowSystem, SketchSession, list[tuple[str, int]]]:
    rendered: list[tuple[str, int]] = []

    def draw(ctx: FrameContext) -> Scene:
        rendered.append((ctx.config.seed, ctx.frame_count))
        x = ctx.rng.rand_between(0, ctx.width)
        return Scene.build((ctx.width, ctx.height), 0, line(x1=x, y1=0, x2=x, y2=ctx.height))

    cfg = SketchConfig(name="demo", seed="a", width=12, height=8, fps=10, **config_kwargs)
    sketch = Sketch(name="demo", param_sets=[cfg], default_param_set="demo", draw=draw)
    session = SketchSession(sketch)
    return DrawWindowSystem(session), session, rendered


def test_static_sketch_redraws_only_when_requested(fake_gui: Path) -> None:
    """静止スケッチは初回とキー操作の後だけ描く。"""
    system, session, rendered = _make_system()
    assert system.window.caption == "seedsketch: demo"
    assert system.window.canvas_size == (12, 8)

    for _ in range(3):
        system.draw_frame()
    assert rendered == [("a", 1)]

    system.window.press(key.A)
    system.draw_frame()
    assert len(rendered) == 1

    system.window.press(key.RIGHT)
    system.draw_frame()
    assert rendered == [("a", 1), ("a", 1)]
    assert session.frame_count == 1


def test_keys_route_to_seed_history(fake_gui: Path) -> None:
    system, session, rendered = _make_system()
    system.draw_frame()

    system.window.press(key.N)
    new = session.seed
    assert new != "a"
    assert session.history.seeds == ("a", new)
    system.draw_frame()
    assert rendered[-1] == (new, 1)

    system.window.press(key.LEFT)
    system.window.press(key.DOWN)
    assert session.seed == "a"
    system.window.press(key.UP)
    assert session.seed == new


def test_save_key_writes_still_and_config(fake_gui: Path) -> None:
    system, _, _ = _make_system()
    system.draw_frame()

    system.window.press(key.S)

    assert len(list((fake_gui / "png").glob("demo-a-*.png"))) == 1
    assert len(list((fake_gui / "png").glob("demo-a-*-config.json"))) == 1


def test_animated_sketch_advances_every_frame(fake_gui: Path) -> None:
    system, session, rendered = _make_system(is_animated=True)

    for _ in range(3):
        system.draw_frame()

    assert rendered == [("a", 1), ("a", 2), ("a", 3)]
    assert session.frame_count == 4


def test_v_toggles_recording(fake_gui: Path) -> None:
    system, _, _ = _make_system(is_animated=True)
    recording = system._recording

    system.window.press(key.V)
    assert recording.is_recording
    for _ in range(3):
        system.draw_frame()
    assert recording.frames_written == 3

    system.window.press(key.V)
    assert recording.is_recording is False
    (video,) = recording.saved
    assert video.parent == fake_gui / "video"
    assert video.suffix == ".mp4"
    assert video.with_name(f"{video.stem}-config.json").is_file()


def test_auto_recording_stops_after_duration(fake_gui: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """export_video のセットは起動直後から録画し、duration フレームで止まる。"""
    system, session, rendered = _make_system(export_video=True, duration=2, video_format="webm")
    recording = system._recording

    for _ in range(4):
        system.draw_frame()

    assert recording.is_recording is False
    assert [p.suffix for p in recording.saved] == [".webm"]
    assert len(rendered) == 2
    assert session.frame_count == 2
    assert "Recording complete." in capsys.readouterr().out


def test_keys_redraw_after_auto_recording_finished(fake_gui: Path) -> None:
    """録画完了後もキー操作のシード変更は画面に反映され、フレームは進まない。"""
    system, session, rendered = _make_system(export_video=True, duration=2)
    for _ in range(3):
        system.draw_frame()

    system.window.press(key.N)
    for _ in range(3):
        system.draw_frame()

    assert rendered[-1] == (session.seed, 2)
    assert len(rendered) == 3
    assert len(system._recording.saved) == 1

    system.window.press(key.LEFT)
    system.draw_frame()
    assert rendered[-1] == ("a", 2)


def test_key_errors_are_reported_without_stopping(fake_gui: Path, capsys: pytest.CaptureFixture[str]) -> None:
    system, _, _ = _make_system(render_as_vector=True)

    system.window.press(key.V)

    assert system._recording.is_recording is False
    assert "Failed to handle key 'v'" in capsys.readouterr().out


def test_close_stops_recording_and_window(fake_gui: Path) -> None:
    system, _, _ = _make_system(is_animated=True)
    system.window.press(key.V)
    system.draw_frame()

    system.close()

    assert system._recording.is_recording is False
    assert len(system._recording.saved) == 1
    assert system.window.closed
