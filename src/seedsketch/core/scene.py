"""
どこで: `src/seedsketch/core/scene.py`。
何を: 1 フレーム分の描画結果 Scene と、draw の戻り値を描画要素列に正規化するヘルパを提供する。
なぜ: プレビュー・画像出力・SVG 出力・動画出力の全経路で共通のシーン表現を使えるようにするため。
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias

from seedsketch.core.shape import Bitmap, Shape
from seedsketch.core.style import RGB255, parse_color

SceneItem: TypeAlias = Shape | Bitmap | Sequence["SceneItem"] | None
Drawable: TypeAlias = Shape | Bitmap


def normalize_items(items: SceneItem) -> list[Drawable]:
    """Shape/Bitmap/ネスト列を描画順を保った一次元リストにフラット化する。

    Notes
    -----
    None は「何も描かない」として読み飛ばす。

    Raises
    ------
    TypeError
        未対応の型が含まれる場合。
    """

    result: list[Drawable] = []

    def _walk(item: SceneItem) -> None:
        if item is None:
            return
        if isinstance(item, (Shape, Bitmap)):
            result.append(item)
            return
        if isinstance(item, Sequence) and not isinstance(item, (str, bytes)):
            for child in item:
                _walk(child)
            return
        raise TypeError(f"normalize_items で処理できない型: {type(item)!r}")

    _walk(items)
    return result


@dataclass(frozen=True, slots=True)
class Scene:
    """キャンバス寸法・背景色・描画要素列からなる 1 フレーム。"""

    width: int
    height: int
    background: RGB255
    items: tuple[Drawable, ...] = ()

    def __post_init__(self) -> None:
        if int(self.width) <= 0 or int(self.height) <= 0:
            raise ValueError("Scene の width/height は正の値である必要がある")
        object.__setattr__(self, "width", int(self.width))
        object.__setattr__(self, "height", int(self.height))
        object.__setattr__(self, "background", parse_color(self.background))
        object.__setattr__(self, "items", tuple(normalize_items(list(self.items))))

    @classmethod
    def build(
        cls,
        size: tuple[int, int],
        background: object,
        *items: SceneItem,
    ) -> "Scene":
        """寸法・背景色・任意のネスト列から Scene を組み立てる。"""

        w, h = size
        return cls(
            width=int(w),
            height=int(h),
            background=parse_color(background),
            items=tuple(normalize_items(list(items))),
        )

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) を返す。"""
        return self.width, self.height

    @property
    def shapes(self) -> list[Shape]:
        """Shape だけを描画順に返す。"""
        return [item for item in self.items if isinstance(item, Shape)]


__all__ = ["Drawable", "Scene", "SceneItem", "normalize_items"]
