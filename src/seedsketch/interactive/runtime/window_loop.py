# どこで: `src/seedsketch/interactive/runtime/window_loop.py`。
# 何を: pyglet のウィンドウを `pyglet.app.run()` で回す最小ランナーを提供する。
# なぜ: OS 依存のイベント配送を pyglet に任せ、手動 `dispatch_events()` 由来の入力取りこぼしを避けるため。

from __future__ import annotations

from typing import Any, Callable

import pyglet


class WindowLoop:
    """1 つのウィンドウを固定 fps で描き続ける。

    `draw_frame()` は back buffer へ描画するだけにし、`flip()` は pyglet が行う。
    """

    def __init__(
        self,
        window: Any,
        draw_frame: Callable[[], None],
        *,
        fps: float,
    ) -> None:
        """ループを初期化する。

        Parameters
        ----------
        window : pyglet.window.Window
            描画先ウィンドウ。
        draw_frame : Callable[[], None]
            1 フレーム分の描画処理。
        fps : float
            目標フレームレート。`<=0` の場合はスロットリングしない。
        """

        self._window = window
        self._draw_frame = draw_frame
        self._fps = float(fps)

    def run(self) -> None:
        """ウィンドウが閉じられるまでループを実行する。"""

        window = self._window

        def request_exit(*_: object) -> None:
            pyglet.app.exit()

        window.push_handlers(on_close=request_exit)
        window.push_handlers(on_draw=self._draw_frame)

        def draw_all(dt: float) -> None:
            # 閉じられたウィンドウへ draw すると例外になり得る。
            if window not in pyglet.app.windows:
                return
            window.draw(dt)

        if self._fps <= 0:
            pyglet.clock.schedule(draw_all)
        else:
            pyglet.clock.schedule_interval(draw_all, 1.0 / float(self._fps))

        try:
            pyglet.app.run(interval=None)
        finally:
            pyglet.clock.unschedule(draw_all)


__all__ = ["WindowLoop"]
