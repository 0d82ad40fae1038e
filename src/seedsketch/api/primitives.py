# どこで: `src/seedsketch/api/primitives.py`。
# 何を: 登録済みプリミティブから Shape を生成する公開名前空間 G を提供する。
# なぜ: スケッチ側が `G.line(...)` のように短く書けるようにするため。

from __future__ import annotations

from typing import Any, Callable

from seedsketch.core.primitive_registry import primitive_registry
from seedsketch.core.shape import Shape

# primitive 実装モジュールをインポートしてレジストリに登録させる。
from seedsketch.core.primitives import ellipse as _primitive_ellipse  # noqa: F401
from seedsketch.core.primitives import line as _primitive_line  # noqa: F401
from seedsketch.core.primitives import polygon as _primitive_polygon  # noqa: F401
from seedsketch.core.primitives import rect as _primitive_rect  # noqa: F401


class PrimitiveNamespace:
    """Shape を生成する名前空間。

    Attributes
    ----------
    <name> : Callable[..., Shape]
        登録済み primitive 名ごとのファクトリ。
        例: G.rect(x=0, y=0, w=10, style=Style.filled("#fff")) -> Shape
    """

    def __getattr__(self, name: str) -> Callable[..., Shape]:
        """primitive 名に対応する Shape ファクトリを返す。

        Raises
        ------
        AttributeError
            未登録の primitive 名が指定された場合。
        """
        if name.startswith("_"):
            raise AttributeError(name)

        if name not in primitive_registry:
            raise AttributeError(f"未登録の primitive: {name!r}")

        func = primitive_registry.get(name)

        def factory(**params: Any) -> Shape:
            return func(**params)

        factory.__name__ = name
        factory.__doc__ = func.__doc__
        return factory

    def __dir__(self) -> list[str]:
        return sorted(name for name, _ in primitive_registry.items())


G = PrimitiveNamespace()
"""primitive 用の公開名前空間インスタンス。"""

__all__ = ["G", "PrimitiveNamespace"]
