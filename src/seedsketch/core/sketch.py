"""
どこで: `src/seedsketch/core/sketch.py`。
何を: スケッチ定義 `Sketch` と、draw に 1 フレームごとに渡す `FrameContext` を定義する。
なぜ: 描画関数が共有状態を参照せず、設定・フレーム番号・乱数・素材を引数で受け取るようにするため。
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from seedsketch.core.rng import SketchRandom
from seedsketch.core.scene import Scene
from seedsketch.core.sketch_config import SketchConfig, select_config


@dataclass(frozen=True, slots=True)
class FrameContext:
    """draw 呼び出し 1 回分の入力。

    Parameters
    ----------
    config : SketchConfig
        選択されたパラメータセット。
    frame_count : int
        フレーム番号（1-based）。
    rng : SketchRandom
        現在のシードで初期化済みの乱数源。
    assets : Mapping[str, Any]
        preload で読み込んだ素材。
    """

    config: SketchConfig
    frame_count: int
    rng: SketchRandom
    assets: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if int(self.frame_count) < 1:
            raise ValueError(f"frame_count は 1 以上である必要がある: got={self.frame_count}")
        object.__setattr__(self, "frame_count", int(self.frame_count))
        object.__setattr__(self, "assets", MappingProxyType(dict(self.assets)))

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height


DrawFunc = Callable[[FrameContext], Scene]
PreloadFunc = Callable[[SketchConfig], Mapping[str, Any]]


@dataclass(frozen=True, slots=True)
class Sketch:
    """名前付きのスケッチ定義。

    Parameters
    ----------
    name : str
        スケッチ名（CLI の引数）。
    param_sets : Sequence[SketchConfig]
        選択可能なパラメータセット。
    default_param_set : str
        明示指定がないときに使うパラメータセット名。
    draw : Callable[[FrameContext], Scene]
        1 フレームを描く関数。
    preload : Callable[[SketchConfig], Mapping[str, Any]] or None
        描画前に 1 回だけ素材を読み込む関数。
    """

    name: str
    param_sets: tuple[SketchConfig, ...]
    default_param_set: str
    draw: DrawFunc
    preload: PreloadFunc | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "param_sets", tuple(self.param_sets))
        if not self.param_sets:
            raise ValueError(f"sketch '{self.name}' にパラメータセットがない")
        if self.default_param_set not in self.param_set_names:
            raise ValueError(
                f"sketch '{self.name}' の default_param_set が見つからない: {self.default_param_set!r}"
            )

    @property
    def param_set_names(self) -> tuple[str, ...]:
        return tuple(cfg.name for cfg in self.param_sets)

    def config(self, *, name: str | None = None, index: int | None = None) -> SketchConfig:
        """パラメータセットを名前か番号で選ぶ。未指定なら既定のセット。"""

        return select_config(
            self.param_sets,
            name=name,
            index=index,
            default=self.default_param_set,
        )

    def load_assets(self, config: SketchConfig) -> Mapping[str, Any]:
        """preload があれば実行して素材を返す。"""

        if self.preload is None:
            return {}
        return dict(self.preload(config))


__all__ = ["DrawFunc", "FrameContext", "PreloadFunc", "Sketch"]
