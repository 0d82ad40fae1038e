# どこで: `src/seedsketch/core/seed_history.py`。
# 何を: 使用したシード値の履歴と、履歴上を前後に移動するカーソルを提供する。
# なぜ: N キーで生成したシードを矢印キーで辿り、過去の描画を再現できるようにするため。

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Generic, TypeVar

_logger = logging.getLogger(__name__)

S = TypeVar("S")


class SeedHistory(Generic[S]):
    """追記のみのシード列と、読み出し位置（cursor）を持つ履歴。

    Parameters
    ----------
    initial_seed : S or None, optional
        初期シード。None の場合は空の履歴から始める。

    Notes
    -----
    - 列は末尾への追加と末尾要素の削除のみで変化する。
    - 非空のとき cursor は常に ``[0, len-1]`` に収まる。空のときは 0 に留める。
    - 境界での移動はクランプし、例外は送出しない。
    """

    def __init__(self, initial_seed: S | None = None) -> None:
        self._seeds: list[S] = []
        self._cursor = 0
        if initial_seed is not None:
            self.append(initial_seed)

    @property
    def cursor(self) -> int:
        """現在のカーソル位置を返す。"""

        return self._cursor

    @property
    def current(self) -> S | None:
        """カーソル位置のシードを返す。空なら None。"""

        if not self._seeds:
            return None
        return self._seeds[self._cursor]

    @property
    def seeds(self) -> tuple[S, ...]:
        """履歴のスナップショットを返す。"""

        return tuple(self._seeds)

    def __len__(self) -> int:
        return len(self._seeds)

    def __iter__(self) -> Iterator[S]:
        return iter(tuple(self._seeds))

    def append(self, seed: S) -> None:
        """シードを末尾に追加し、cursor を追加した要素へ移す。"""

        self._seeds.append(seed)
        self._cursor = len(self._seeds) - 1

    def remove_last(self) -> None:
        """最後に追加したシードを取り除く。空の場合は何もしない。"""

        if self._seeds:
            self._seeds.pop()
        self._cursor = max(len(self._seeds) - 1, 0)

    def advance(self) -> S | None:
        """cursor を 1 つ末尾側へ進め、その位置のシードを返す。"""

        self._cursor = max(min(self._cursor + 1, len(self._seeds) - 1), 0)
        _logger.debug("seed history advance: cursor=%d len=%d", self._cursor, len(self._seeds))
        return self.current

    def retreat(self) -> S | None:
        """cursor を 1 つ先頭側へ戻し、その位置のシードを返す。"""

        self._cursor = max(self._cursor - 1, 0)
        _logger.debug("seed history retreat: cursor=%d len=%d", self._cursor, len(self._seeds))
        return self.current

    def __repr__(self) -> str:
        return f"SeedHistory(cursor={self._cursor}, seeds={self._seeds!r})"


__all__ = ["SeedHistory"]
