"""
どこで: `src/seedsketch/core/sketch_config.py`。
何を: スケッチのパラメータセット（名前付き SketchConfig）と、その明示的な選択・YAML 読み込みを提供する。
なぜ: 「配列の最後が勝つ」暗黙規則をやめ、起動時に名前か番号で 1 つを選べるようにするため。
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any

VIDEO_FORMATS = ("mp4", "webm")

_FIELD_NAMES = (
    "name",
    "seed",
    "width",
    "height",
    "fps",
    "duration",
    "export_video",
    "is_animated",
    "render_as_vector",
    "video_format",
)


@dataclass(frozen=True, slots=True)
class SketchConfig:
    """1 つのパラメータセット。

    Parameters
    ----------
    name : str
        パラメータセット名。出力ファイル名の先頭にも使う。
    seed : str
        初期シード。
    width, height : int
        キャンバス寸法 [px]。
    fps : float
        フレームレート。
    duration : int
        録画するフレーム数。
    export_video : bool
        True なら起動直後から録画し、duration フレームで止める。
    is_animated : bool
        False なら要求があったときだけ再描画する。
    render_as_vector : bool
        True なら保存を SVG で行い、動画は出力しない。
    video_format : str
        ``"mp4"`` か ``"webm"``。
    params : Mapping[str, Any]
        スケッチ固有の追加パラメータ。
    """

    name: str
    seed: str
    width: int = 540
    height: int = 540
    fps: float = 30.0
    duration: int = 300
    export_video: bool = False
    is_animated: bool = False
    render_as_vector: bool = False
    video_format: str = "mp4"
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not str(self.name).strip():
            raise ValueError("name は空でない必要がある")
        if int(self.width) <= 0 or int(self.height) <= 0:
            raise ValueError(
                f"width/height は正の値である必要がある: got=({self.width}, {self.height})"
            )
        if float(self.fps) <= 0:
            raise ValueError(f"fps は正の値である必要がある: got={self.fps}")
        if int(self.duration) < 0:
            raise ValueError(f"duration は 0 以上である必要がある: got={self.duration}")
        fmt = str(self.video_format).lower().lstrip(".")
        if fmt not in VIDEO_FORMATS:
            raise ValueError(f"未対応の video_format: {self.video_format!r}")

        object.__setattr__(self, "seed", str(self.seed))
        object.__setattr__(self, "width", int(self.width))
        object.__setattr__(self, "height", int(self.height))
        object.__setattr__(self, "fps", float(self.fps))
        object.__setattr__(self, "duration", int(self.duration))
        object.__setattr__(self, "video_format", fmt)
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @property
    def canvas_size(self) -> tuple[int, int]:
        """(width, height) を返す。"""

        return self.width, self.height

    @property
    def should_export_video(self) -> bool:
        """動画を出力すべきなら True。ベクター出力時は常に False。"""

        return bool(self.export_video) and not bool(self.render_as_vector)

    def param(self, key: str, default: Any = None) -> Any:
        """スケッチ固有パラメータを返す。"""

        return self.params.get(key, default)

    def with_seed(self, seed: str) -> "SketchConfig":
        """シードだけを差し替えたコピーを返す。"""

        return replace(self, seed=str(seed))

    def to_dict(self) -> dict[str, Any]:
        """JSON に書き出せる dict を返す。"""

        out: dict[str, Any] = {name: getattr(self, name) for name in _FIELD_NAMES}
        for key, value in self.params.items():
            out[str(key)] = _jsonable(value)
        return out


def _jsonable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def config_from_mapping(data: Mapping[str, Any]) -> SketchConfig:
    """mapping から SketchConfig を組み立てる。未知のキーは params に入れる。"""

    if "name" not in data or "seed" not in data:
        raise ValueError(f"パラメータセットには name と seed が必要: got={sorted(data)!r}")
    known: dict[str, Any] = {}
    params: dict[str, Any] = dict(data.get("params") or {})
    for key, value in data.items():
        if key == "params":
            continue
        if key in _FIELD_NAMES:
            known[key] = value
        else:
            params[str(key)] = value
    return SketchConfig(**known, params=params)


def select_config(
    param_sets: Sequence[SketchConfig],
    *,
    name: str | None = None,
    index: int | None = None,
    default: str | None = None,
) -> SketchConfig:
    """パラメータセットを名前か番号で 1 つ選ぶ。

    Parameters
    ----------
    param_sets : Sequence[SketchConfig]
        候補。
    name : str or None
        選択するセット名。
    index : int or None
        選択するセット番号（負数は末尾から）。
    default : str or None
        name/index が共に None の場合に使うセット名。

    Raises
    ------
    ValueError
        name と index が同時に指定された場合、または候補が空の場合。
    KeyError
        名前が見つからない場合。
    IndexError
        番号が範囲外の場合。
    """

    if not param_sets:
        raise ValueError("パラメータセットが空")
    if name is not None and index is not None:
        raise ValueError("name と index は同時に指定できない")

    if index is not None:
        return param_sets[int(index)]

    target = name if name is not None else default
    if target is None:
        raise ValueError("name/index/default のいずれかが必要")
    for cfg in param_sets:
        if cfg.name == target:
            return cfg
    names = ", ".join(cfg.name for cfg in param_sets)
    raise KeyError(f"未知のパラメータセット: {target!r} (候補: {names})")


def load_param_sets(path: str | Path) -> list[SketchConfig]:
    """YAML ファイルからパラメータセットの列を読み込む。

    YAML はパラメータセット mapping の list、または ``param_sets:`` キーにその list を持つ mapping。
    """

    import yaml  # type: ignore[import-untyped]

    _path = Path(path)
    text = _path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"パラメータセット YAML の読み込みに失敗しました: {_path}") from exc

    if isinstance(data, Mapping):
        data = data.get("param_sets")
    if not isinstance(data, list):
        raise ValueError(f"パラメータセット YAML は list である必要があります: {_path}")

    out: list[SketchConfig] = []
    for item in data:
        if not isinstance(item, Mapping):
            raise ValueError(f"パラメータセットは mapping である必要があります: got={item!r}")
        out.append(config_from_mapping(item))
    return out


__all__ = [
    "SketchConfig",
    "VIDEO_FORMATS",
    "config_from_mapping",
    "load_param_sets",
    "select_config",
]
