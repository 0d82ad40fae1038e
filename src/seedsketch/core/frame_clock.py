# どこで: `src/seedsketch/core/frame_clock.py`。
# 何を: draw に渡すフレーム番号（1 始まり）と、そのフレームの時刻を管理する。
# なぜ: プレビュー・静止画出力・動画出力で同じフレーム進行規則を使うため。

from __future__ import annotations


class FrameClock:
    """固定 fps のフレーム時計。

    Notes
    -----
    `frame_count` は最初の描画で 1。`t` は `(frame_count - 1) / fps` 秒。
    """

    def __init__(self, *, fps: float, frame_count: int = 1) -> None:
        _fps = float(fps)
        if _fps <= 0:
            raise ValueError("fps は正の値である必要がある")
        if int(frame_count) < 1:
            raise ValueError("frame_count は 1 以上である必要がある")
        self._fps = _fps
        self._frame_count = int(frame_count)

    @property
    def fps(self) -> float:
        """fps を返す。"""

        return float(self._fps)

    @property
    def frame_count(self) -> int:
        """現在のフレーム番号（1-based）を返す。"""

        return int(self._frame_count)

    def t(self) -> float:
        """現在のフレーム時刻（秒）を返す。"""

        return float(self._frame_count - 1) / float(self._fps)

    def tick(self) -> None:
        """フレームを 1 つ進める。"""

        self._frame_count += 1

    def reset(self, frame_count: int = 1) -> None:
        """フレーム番号を指定値に戻す。"""

        if int(frame_count) < 1:
            raise ValueError("frame_count は 1 以上である必要がある")
        self._frame_count = int(frame_count)


__all__ = ["FrameClock"]
