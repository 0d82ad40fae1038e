"""
どこで: `src/seedsketch/api/session.py`。
何を: 1 つのスケッチ実行（シード履歴・乱数・フレーム番号・最後の描画結果）を保持する `SketchSession`。
なぜ: キー操作とファイル出力の振る舞いを、ウィンドウやイベントループから切り離して扱うため。
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from seedsketch.core.frame_clock import FrameClock
from seedsketch.core.output_paths import output_path
from seedsketch.core.rng import SketchRandom
from seedsketch.core.rng import new_seed as _generate_seed
from seedsketch.core.scene import Scene
from seedsketch.core.seed_history import SeedHistory
from seedsketch.core.sketch import FrameContext, Sketch
from seedsketch.core.sketch_config import SketchConfig
from seedsketch.export.config import save_config
from seedsketch.export.image import export_image

_logger = logging.getLogger(__name__)

STILL_FORMATS = ("png", "jpg", "jpeg", "svg")

# キー名 -> 操作名。
_KEY_ACTIONS = {
    "s": "save",
    "n": "new_seed",
    "right": "next_seed",
    "up": "next_seed",
    "left": "previous_seed",
    "down": "previous_seed",
}


class SketchSession:
    """スケッチ 1 本分の実行状態。

    Parameters
    ----------
    sketch : Sketch
        実行するスケッチ。
    config : SketchConfig or None, optional
        使うパラメータセット。None ならスケッチ既定のセット。
    assets : Mapping[str, Any] or None, optional
        preload 済みの素材。None なら `sketch.preload` を実行して読み込む。

    Notes
    -----
    静止スケッチ（`is_animated=False` かつ録画なし）は、render のたびに現在のシードで
    乱数を初期化し直すので、同じシードなら何度描いても同じ絵になる。
    アニメーションするスケッチはシード変更時だけ初期化し、フレーム間で乱数列が進む。
    """

    def __init__(
        self,
        sketch: Sketch,
        config: SketchConfig | None = None,
        *,
        assets: Mapping[str, Any] | None = None,
    ) -> None:
        cfg = sketch.config() if config is None else config
        self._sketch = sketch
        self._config = cfg
        self._history: SeedHistory[str] = SeedHistory(cfg.seed)
        self._rng = SketchRandom(cfg.seed)
        self._clock = FrameClock(fps=cfg.fps)
        self._assets = dict(sketch.load_assets(cfg) if assets is None else assets)
        self._last_scene: Scene | None = None

    @property
    def sketch(self) -> Sketch:
        return self._sketch

    @property
    def config(self) -> SketchConfig:
        """現在のシードを反映したパラメータセットを返す。"""
        return self._config

    @property
    def seed(self) -> str:
        return self._config.seed

    @property
    def history(self) -> SeedHistory[str]:
        return self._history

    @property
    def frame_count(self) -> int:
        return self._clock.frame_count

    @property
    def last_scene(self) -> Scene | None:
        return self._last_scene

    @property
    def reseeds_every_frame(self) -> bool:
        """render のたびに乱数を初期化し直すなら True。"""
        return not self._config.is_animated and not self._config.should_export_video

    def render(self) -> Scene:
        """現在のフレームを描いて Scene を返す。"""

        if self.reseeds_every_frame:
            self._rng.reset(self.seed)
        ctx = FrameContext(
            config=self._config,
            frame_count=self._clock.frame_count,
            rng=self._rng,
            assets=self._assets,
        )
        scene = self._sketch.draw(ctx)
        if not isinstance(scene, Scene):
            raise TypeError(f"draw は Scene を返す必要がある: got={type(scene)!r}")
        self._last_scene = scene
        return scene

    def advance_frame(self) -> None:
        """フレーム番号を 1 つ進める。"""
        self._clock.tick()

    def seek(self, frame_count: int) -> Scene:
        """フレーム 1 から順に描き進め、frame_count 番目のフレームを返す。

        アニメーションは乱数列がフレーム間で続くため、途中のフレームも描く必要がある。
        """

        target = int(frame_count)
        if target < 1:
            raise ValueError(f"frame_count は 1 以上である必要がある: got={frame_count}")
        self._clock.reset()
        self._rng.reset(self.seed)
        while self._clock.frame_count < target:
            self.render()
            self._clock.tick()
        return self.render()

    def _apply_seed(self, seed: str) -> None:
        self._config = self._config.with_seed(seed)
        self._rng.reset(seed)
        _logger.info("seed: %s", seed)

    def new_seed(self) -> str:
        """新しいシードを生成して履歴に追加し、適用する。"""

        seed = _generate_seed()
        self._history.append(seed)
        self._apply_seed(seed)
        return seed

    def next_seed(self) -> str:
        """履歴の次のシードへ進めて適用する。末尾では末尾のまま。"""

        seed = self._history.advance()
        if seed is not None:
            self._apply_seed(seed)
        return self.seed

    def previous_seed(self) -> str:
        """履歴の前のシードへ戻して適用する。先頭では先頭のまま。"""

        seed = self._history.retreat()
        if seed is not None:
            self._apply_seed(seed)
        return self.seed

    def handle_key(self, name: str) -> bool:
        """キー名に対応する操作を実行する。

        Parameters
        ----------
        name : str
            ``"s"``, ``"n"``, ``"right"``, ``"up"``, ``"left"``, ``"down"``（大文字小文字は区別しない）。

        Returns
        -------
        bool
            再描画が必要なら True。未知のキーは何もせず False。
        """

        action = _KEY_ACTIONS.get(str(name).lower())
        if action is None:
            return False
        if action == "save":
            self.save()
            return False
        getattr(self, action)()
        return True

    def save(self, fmt: str = "png", *, now: datetime | None = None) -> list[Path]:
        """最後に描いたフレームを画像として保存し、設定 JSON も書き出す。

        Parameters
        ----------
        fmt : str, optional
            ``"png"`` / ``"jpg"`` / ``"jpeg"`` / ``"svg"``。`render_as_vector` のセットでは常に svg。
        now : datetime or None, optional
            ファイル名に使う時刻。None なら現在時刻。

        Returns
        -------
        list[Path]
            [画像パス, 設定 JSON パス]。
        """

        ext = str(fmt).lower().lstrip(".")
        if ext not in STILL_FORMATS:
            raise ValueError(f"未対応の画像フォーマット: {fmt!r}")
        if self._config.render_as_vector:
            ext = "svg"

        scene = self._last_scene if self._last_scene is not None else self.render()
        stamp = datetime.now(timezone.utc) if now is None else now
        image_path = output_path(kind=ext, ext=ext, config=self._config, seed=self.seed, now=stamp)
        export_image(scene, image_path)
        print(f"Saved {ext.upper()}: {image_path}")

        config_path = save_config(self._config, image_path.with_name(f"{image_path.stem}-config.json"))
        print(f"Saved config: {config_path}")
        return [image_path, config_path]


__all__ = ["STILL_FORMATS", "SketchSession"]
