"""
どこで: `src/seedsketch/core/rng.py`。
何を: シード文字列から決定的に初期化される乱数源と、スケッチ用の乱数ヘルパを提供する。
なぜ: 同じシードで同じ絵を再現し、シード履歴から過去の描画を呼び戻せるようにするため。
"""

from __future__ import annotations

import base64
import os
from collections.abc import Sequence
from hashlib import blake2b
from typing import TypeVar

import numpy as np

T = TypeVar("T")

SEED_LENGTH = 32


def seed_to_entropy(seed: object) -> int:
    """シード値を numpy の SeedSequence 用エントロピー整数に変換する。

    Notes
    -----
    `str(seed)` の UTF-8 を blake2b で 128bit に要約する。Python の `hash()` と違い、
    プロセスを跨いでも同じ値になる。
    """

    h = blake2b(digest_size=16)
    h.update(b"seedsketch:")
    h.update(str(seed).encode("utf-8"))
    return int.from_bytes(h.digest(), "big")


def new_seed(length: int = SEED_LENGTH) -> str:
    """新しいシード文字列を生成して返す。

    OS の乱数から URL セーフな base64 文字列を作り、`length` 文字に切り詰める。
    """

    n = int(length)
    if n <= 0:
        raise ValueError("length は正の値である必要がある")
    raw = os.urandom(n)
    text = base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")
    return text[:n]


class SketchRandom:
    """シードで再初期化できるスケッチ用乱数源。"""

    def __init__(self, seed: object) -> None:
        self._seed = seed
        self._gen = np.random.default_rng(seed_to_entropy(seed))

    @property
    def seed(self) -> object:
        """最後に適用したシードを返す。"""

        return self._seed

    @property
    def generator(self) -> np.random.Generator:
        """内部の numpy Generator を返す。"""

        return self._gen

    def reset(self, seed: object) -> None:
        """シードを適用し直し、乱数列を先頭から再開する。"""

        self._seed = seed
        self._gen = np.random.default_rng(seed_to_entropy(seed))

    def random(self) -> float:
        """[0, 1) の一様乱数を返す。"""

        return float(self._gen.random())

    def rand_between(self, lo: float, hi: float, integer: bool = False) -> float | int:
        """[lo, hi) の一様乱数を返す。`integer=True` なら [lo, hi] の整数を返す。"""

        if integer:
            lo_i, hi_i = int(lo), int(hi)
            if hi_i < lo_i:
                lo_i, hi_i = hi_i, lo_i
            return int(self._gen.integers(lo_i, hi_i + 1))
        return float(lo) + (float(hi) - float(lo)) * self.random()

    def rand_boolean(self, p: float = 0.5) -> bool:
        """確率 `p` で True を返す。"""

        return self.random() < float(p)

    def rand_int(self, n: int) -> int:
        """[0, n) の整数を返す。"""

        if int(n) <= 0:
            raise ValueError("n は正の値である必要がある")
        return int(self._gen.integers(0, int(n)))

    def pick(self, items: Sequence[T]) -> T:
        """列から 1 要素を一様に選んで返す。"""

        if len(items) == 0:
            raise ValueError("空の列からは選べない")
        return items[self.rand_int(len(items))]


__all__ = ["SEED_LENGTH", "SketchRandom", "new_seed", "seed_to_entropy"]
