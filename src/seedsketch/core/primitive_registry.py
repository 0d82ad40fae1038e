# src/seedsketch/core/primitive_registry.py
# 描画プリミティブ（Shape 生成関数）のレジストリ。
# op 名から Shape 生成関数を引けるようにする。

from __future__ import annotations

import inspect
from collections.abc import ItemsView
from typing import Any, Callable

from seedsketch.core.shape import Shape

PrimitiveFunc = Callable[..., Shape]


class PrimitiveRegistry:
    """プリミティブ名と Shape 生成関数を対応付けるレジストリ。

    Notes
    -----
    登録された関数はキーワード専用引数を取り、``style`` を受け取って Shape を返す想定。
    """

    def __init__(self) -> None:
        """空のレジストリを初期化する。"""
        self._items: dict[str, PrimitiveFunc] = {}
        self._param_order: dict[str, tuple[str, ...]] = {}

    def _register(
        self,
        name: str,
        func: PrimitiveFunc,
        *,
        overwrite: bool = True,
    ) -> None:
        """プリミティブを登録する（内部用）。

        Notes
        -----
        登録は `@primitive` デコレータ経由に統一する。
        """
        if not overwrite and name in self._items:
            raise ValueError(f"primitive '{name}' は既に登録されている")
        self._items[name] = func
        sig = inspect.signature(func)
        self._param_order[name] = tuple(
            p for p in sig.parameters if p != "style"
        )

    def get(self, name: str) -> PrimitiveFunc:
        """op 名に対応するプリミティブを取得する。

        Raises
        ------
        KeyError
            未登録の op 名が指定された場合。
        """
        return self._items[name]

    def __contains__(self, name: object) -> bool:
        """指定された名前が登録済みかどうかを返す。"""
        return name in self._items

    def __getitem__(self, name: str) -> PrimitiveFunc:
        """辞書風にプリミティブを取得するショートカット。"""
        return self.get(name)

    def items(self) -> ItemsView[str, PrimitiveFunc]:
        """登録済みエントリの (name, func) ビューを返す。"""
        return self._items.items()

    def get_param_order(self, name: str) -> tuple[str, ...]:
        """op 名に対応する引数順序（style を除く）を返す。"""
        return tuple(self._param_order.get(name, ()))


primitive_registry = PrimitiveRegistry()
"""グローバルなプリミティブレジストリインスタンス。"""


def primitive(
    func: Callable[..., Shape] | None = None,
    *,
    overwrite: bool = True,
):
    """グローバルプリミティブレジストリ用デコレータ。

    関数名をそのまま op 名として登録する。

    Examples
    --------
    @primitive
    def line(*, x1, y1, x2, y2, style=Style()):
        ...
    """

    def decorator(f: Callable[..., Shape]) -> Callable[..., Shape]:
        sig = inspect.signature(f)
        positional = [
            p.name
            for p in sig.parameters.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        ]
        if positional:
            raise ValueError(
                f"primitive '{f.__name__}' の引数はキーワード専用である必要がある: {positional!r}"
            )
        if "style" not in sig.parameters:
            raise ValueError(f"primitive '{f.__name__}' は style 引数を持つ必要がある")
        primitive_registry._register(f.__name__, f, overwrite=overwrite)
        return f

    if func is None:
        return decorator
    return decorator(func)


def call_primitive(name: str, **params: Any) -> Shape:
    """登録済みプリミティブを名前で呼び出す。"""
    return primitive_registry.get(name)(**params)


__all__ = ["PrimitiveRegistry", "call_primitive", "primitive", "primitive_registry"]
