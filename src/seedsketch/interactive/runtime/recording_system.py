# どこで: `src/seedsketch/interactive/runtime/recording_system.py`。
# 何を: プレビュー中の録画の開始/停止/フレーム書き込みを担当する。
# なぜ: DrawWindowSystem の状態変数群を分離し、責務を明確化するため。

from __future__ import annotations

from pathlib import Path

import numpy as np

from seedsketch.export.video import VideoRecorder


class VideoRecordingSystem:
    """動画録画の最小ステートマシン。"""

    def __init__(self, *, size: tuple[int, int], fps: float) -> None:
        self._size = (int(size[0]), int(size[1]))
        self._fps = float(fps)
        self._recorder: VideoRecorder | None = None

    @property
    def is_recording(self) -> bool:
        """録画中なら True を返す。"""

        return self._recorder is not None

    @property
    def frames_written(self) -> int:
        """現在の録画で書き込んだフレーム数を返す。録画していなければ 0。"""

        recorder = self._recorder
        return 0 if recorder is None else int(recorder.frames_written)

    def start(self, output_path: Path) -> None:
        """録画を開始する。"""

        if self._recorder is not None:
            return
        if self._fps <= 0:
            raise ValueError("録画には fps > 0 が必要です")

        self._recorder = VideoRecorder(output_path=Path(output_path), size=self._size, fps=self._fps)
        print(f"Started video recording: {output_path} (fps={self._fps:g})")

    def write_frame(self, pixels: np.ndarray) -> None:
        """画素配列を 1 フレームとして書き込む。録画中でなければ何もしない。"""

        recorder = self._recorder
        if recorder is None:
            return
        recorder.write_frame(pixels)

    def stop(self) -> Path | None:
        """録画を終了し、保存先パスを返す。録画していなければ None。"""

        recorder = self._recorder
        if recorder is None:
            return None

        self._recorder = None
        frames = int(recorder.frames_written)
        seconds = frames / float(self._fps)
        recorder.close()
        print(f"Saved video: {recorder.path} (frames={frames}, seconds={seconds:.3f})")
        return recorder.path


__all__ = ["VideoRecordingSystem"]
