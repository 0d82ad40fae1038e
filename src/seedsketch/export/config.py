# どこで: `src/seedsketch/export/config.py`。
# 何を: 出力した画像・動画と同じ名前で、使ったパラメータセットを JSON に書き出す。
# なぜ: 保存した 1 枚を、同じシードと設定から後で描き直せるようにするため。

from __future__ import annotations

import json
from pathlib import Path

from seedsketch.core.sketch_config import SketchConfig


def save_config(config: SketchConfig, path: str | Path) -> Path:
    """config を JSON として保存し、保存先パスを返す。"""

    _path = Path(path)
    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        json.dump(config.to_dict(), f, ensure_ascii=False, indent=2)
        f.write("\n")
    return _path


__all__ = ["save_config"]
