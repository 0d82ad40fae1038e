# どこで: `src/seedsketch/export/video.py`。
# 何を: ffmpeg に raw RGB フレームを流し、mp4/webm 動画として保存する録画器を提供する。
# なぜ: アニメーションするパラメータセットを、固定 fps の動画として残せるようにするため。

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

import numpy as np

from seedsketch.core.sketch_config import VIDEO_FORMATS

_logger = logging.getLogger(__name__)

_CODEC_ARGS: dict[str, tuple[str, ...]] = {
    "mp4": ("-c:v", "libx264", "-pix_fmt", "yuv420p"),
    "webm": ("-c:v", "libvpx-vp9", "-pix_fmt", "yuv420p", "-b:v", "0", "-crf", "30"),
}


def _video_format(output_path: Path) -> str:
    fmt = output_path.suffix.lower().lstrip(".")
    if fmt not in VIDEO_FORMATS:
        raise ValueError(f"未対応の動画フォーマット: {output_path.suffix!r}")
    return fmt


def _ffmpeg_command(
    *,
    output_path: Path,
    size: tuple[int, int],
    fps: float,
) -> list[str]:
    width, height = size
    return [
        "ffmpeg",
        "-hide_banner",
        "-loglevel",
        "error",
        "-y",
        "-f",
        "rawvideo",
        "-pix_fmt",
        "rgb24",
        "-video_size",
        f"{int(width)}x{int(height)}",
        "-framerate",
        str(float(fps)),
        "-i",
        "-",
        "-an",
        *_CODEC_ARGS[_video_format(output_path)],
        str(output_path),
    ]


class VideoRecorder:
    """raw RGB フレーム列を動画へ保存する録画器。

    Notes
    -----
    with 文で使うと、抜けるときに close() する。
    """

    def __init__(
        self,
        *,
        output_path: Path,
        size: tuple[int, int],
        fps: float,
    ) -> None:
        """録画器を初期化して ffmpeg を起動する。"""

        _output_path = Path(output_path)

        _fps = float(fps)
        if _fps <= 0:
            raise ValueError("fps は正の値である必要がある")

        width, height = size
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError("size は正の (width, height) である必要がある")

        cmd = _ffmpeg_command(output_path=_output_path, size=size, fps=_fps)
        _output_path.parent.mkdir(parents=True, exist_ok=True)

        self.path = _output_path
        self.size = (int(width), int(height))
        self.fps = _fps
        self.frames_written = 0
        self._frame_bytes = self.size[0] * self.size[1] * 3
        self._proc: subprocess.Popen[bytes] | None = None

        try:
            self._proc = subprocess.Popen(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise RuntimeError("ffmpeg が見つかりません（PATH を確認してください）") from e

        if self._proc.stdin is None:
            raise RuntimeError("ffmpeg stdin pipe の作成に失敗しました")
        _logger.info("Recording %s (%dx%d @ %s fps)", self.path, self.size[0], self.size[1], self.fps)

    @property
    def is_open(self) -> bool:
        return self._proc is not None

    def write_frame_rgb24(self, frame: bytes) -> None:
        """1 フレーム分の RGB24 バイト列を書き込む。"""

        proc = self._proc
        if proc is None:
            raise RuntimeError("録画は終了しています")
        if len(frame) != self._frame_bytes:
            raise ValueError(
                f"frame bytes が想定サイズと一致しません: got={len(frame)}, expected={self._frame_bytes}"
            )
        stdin = proc.stdin
        if stdin is None:
            raise RuntimeError("ffmpeg stdin pipe が閉じられています")
        stdin.write(frame)
        self.frames_written += 1

    def write_frame(self, pixels: np.ndarray) -> None:
        """uint8 shape (H, W, 3) の画素配列を 1 フレームとして書き込む。"""

        arr = np.asarray(pixels)
        expected = (self.size[1], self.size[0], 3)
        if arr.shape != expected:
            raise ValueError(f"frame shape が想定と一致しません: got={arr.shape}, expected={expected}")
        self.write_frame_rgb24(np.ascontiguousarray(arr, dtype=np.uint8).tobytes())

    def close(self) -> None:
        """録画を終了し、ffmpeg を待つ。"""

        proc = self._proc
        if proc is None:
            return

        try:
            # communicate() は stdin を flush してから close する。
            _stdout, stderr = proc.communicate(input=b"")
        finally:
            self._proc = None

        if proc.returncode != 0:
            details = ""
            if stderr:
                details = stderr.decode("utf-8", errors="replace").strip()
            raise RuntimeError(
                f"ffmpeg が失敗しました (code={proc.returncode}). {details}".strip()
            )
        _logger.info("Recorded %d frames: %s", self.frames_written, self.path)

    def __enter__(self) -> "VideoRecorder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["VideoRecorder"]
