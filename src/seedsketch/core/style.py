"""
どこで: `src/seedsketch/core/style.py`。
何を: 色の正規化ユーティリティと、描画スタイル（塗り・線）の不変データクラスを定義する。
なぜ: 「現在の前景色/背景色」のような共有可変状態を持たず、スタイルを呼び出しごとに明示的に渡すため。
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

RGB255 = tuple[int, int, int]

STROKE_CAPS = ("butt", "round", "square")
STROKE_JOINS = ("miter", "round", "bevel")


def _clamp255(v: float) -> int:
    iv = int(round(float(v)))
    return 0 if iv < 0 else 255 if iv > 255 else iv


def parse_color(value: object) -> RGB255:
    """色指定を RGB255 タプルに正規化して返す。

    Parameters
    ----------
    value : object
        ``"#rgb"`` / ``"#rrggbb"`` の 16 進文字列、グレー値 int (0..255)、
        または ``(r, g, b)`` の 3 要素シーケンス。

    Returns
    -------
    tuple[int, int, int]
        0..255 clamp 済みの RGB。

    Raises
    ------
    ValueError
        解釈できない値の場合。
    """

    if isinstance(value, str):
        text = value.strip()
        if text.startswith("#"):
            text = text[1:]
        if len(text) == 3:
            text = "".join(ch * 2 for ch in text)
        if len(text) != 6:
            raise ValueError(f"16 進カラーは #rgb か #rrggbb である必要がある: {value!r}")
        try:
            r, g, b = (int(text[i : i + 2], 16) for i in (0, 2, 4))
        except ValueError as exc:
            raise ValueError(f"16 進カラーとして解釈できない: {value!r}") from exc
        return r, g, b

    if isinstance(value, bool):
        raise ValueError(f"色として解釈できない: {value!r}")
    if isinstance(value, (int, float)):
        g = _clamp255(value)
        return g, g, g

    if isinstance(value, Sequence) and len(value) == 3:
        try:
            return _clamp255(value[0]), _clamp255(value[1]), _clamp255(value[2])  # type: ignore[arg-type]
        except (TypeError, ValueError) as exc:
            raise ValueError(f"rgb は数値である必要がある: {value!r}") from exc

    raise ValueError(f"色として解釈できない: {value!r}")


def rgb255_to_hex(rgb: RGB255) -> str:
    """RGB255 を #RRGGBB に変換して返す。"""

    r, g, b = rgb
    return f"#{_clamp255(r):02X}{_clamp255(g):02X}{_clamp255(b):02X}"


def rgb255_to_rgb01(rgb: RGB255) -> tuple[float, float, float]:
    """0..255 int の RGB を 0..1 float の RGB に変換して返す。"""

    r, g, b = rgb
    return float(r) / 255.0, float(g) / 255.0, float(b) / 255.0


@dataclass(frozen=True, slots=True)
class Style:
    """1 回の描画呼び出しに使うスタイル。

    Parameters
    ----------
    fill : RGB255 or None
        塗り色。None なら塗らない。
    stroke : RGB255 or None
        線色。None なら線を描かない。
    stroke_weight : float
        線幅 [px]。
    stroke_cap : str
        線端形状。``"butt"`` / ``"round"`` / ``"square"``。
    stroke_join : str
        折れ線の角の形状。``"miter"`` / ``"round"`` / ``"bevel"``。
    """

    fill: RGB255 | None = None
    stroke: RGB255 | None = (0, 0, 0)
    stroke_weight: float = 1.0
    stroke_cap: str = "round"
    stroke_join: str = "round"

    def __post_init__(self) -> None:
        if self.fill is not None:
            object.__setattr__(self, "fill", parse_color(self.fill))
        if self.stroke is not None:
            object.__setattr__(self, "stroke", parse_color(self.stroke))
        weight = float(self.stroke_weight)
        if weight < 0:
            raise ValueError(f"stroke_weight は 0 以上である必要がある: got={weight}")
        object.__setattr__(self, "stroke_weight", weight)
        if self.stroke_cap not in STROKE_CAPS:
            raise ValueError(f"未対応の stroke_cap: {self.stroke_cap!r}")
        if self.stroke_join not in STROKE_JOINS:
            raise ValueError(f"未対応の stroke_join: {self.stroke_join!r}")

    @classmethod
    def filled(cls, color: object) -> "Style":
        """線なし・塗りのみのスタイルを返す。"""

        return cls(fill=parse_color(color), stroke=None)

    @classmethod
    def outline(
        cls,
        color: object,
        weight: float = 1.0,
        *,
        cap: str = "round",
        join: str = "round",
    ) -> "Style":
        """塗りなし・線のみのスタイルを返す。"""

        return cls(fill=None, stroke=parse_color(color), stroke_weight=weight, stroke_cap=cap, stroke_join=join)

    @property
    def visible(self) -> bool:
        """塗りか線のどちらかが描かれるなら True。"""

        return self.fill is not None or (self.stroke is not None and self.stroke_weight > 0)


__all__ = [
    "RGB255",
    "STROKE_CAPS",
    "STROKE_JOINS",
    "Style",
    "parse_color",
    "rgb255_to_hex",
    "rgb255_to_rgb01",
]
