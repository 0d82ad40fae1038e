# どこで: `src/seedsketch/core/output_paths.py`。
# 何を: パラメータセット名・シード・時刻から、出力ファイルの保存先パスを決める。
# なぜ: `output/{kind}/` 配下に、どのシードで描いたかが分かる名前で保存するため。

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import quote

from seedsketch.core.runtime_config import output_root_dir
from seedsketch.core.sketch_config import SketchConfig

# encodeURIComponent と同じく、英数字と -_.!~*'() だけを残す。
_SEED_SAFE_CHARS = "-_.!~*'()"


def encode_seed(seed: str) -> str:
    """シード文字列をファイル名の一部として使える形にパーセントエンコードして返す。"""

    return quote(str(seed), safe=_SEED_SAFE_CHARS)


def timestamp_text(now: datetime | None = None) -> str:
    """UTC の ISO 8601 時刻（ミリ秒まで）を、`:` を `-` に置き換えて返す。"""

    dt = datetime.now(timezone.utc) if now is None else now
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    text = dt.strftime("%Y-%m-%dT%H:%M:%S") + f".{dt.microsecond // 1000:03d}Z"
    return text.replace(":", "-")


def output_stem(config: SketchConfig, seed: str, *, now: datetime | None = None) -> str:
    """`{name}-{seed}-{timestamp}` 形式のファイル名（拡張子なし）を返す。"""

    return f"{config.name}-{encode_seed(seed)}-{timestamp_text(now)}"


def output_path(
    *,
    kind: str,
    ext: str,
    config: SketchConfig,
    seed: str,
    now: datetime | None = None,
) -> Path:
    """出力ファイルの保存先パス `output_root/{kind}/{stem}.{ext}` を返す。"""

    ext_norm = str(ext).lstrip(".").strip()
    if not ext_norm:
        raise ValueError("ext は空でない必要がある")
    return output_root_dir() / str(kind) / f"{output_stem(config, seed, now=now)}.{ext_norm}"


__all__ = ["encode_seed", "output_path", "output_stem", "timestamp_text"]
