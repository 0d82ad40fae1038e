# どこで: `src/seedsketch/interactive/runtime/__init__.py`。
# 何を: interactive 実行時の「ループ/サブシステム」実装をまとめるパッケージ定義。
# なぜ: `src/seedsketch/api/runner.py` を薄く保ち、ウィンドウ・録画の責務を分けるため。

from __future__ import annotations

__all__ = []
