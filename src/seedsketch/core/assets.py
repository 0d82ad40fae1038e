# どこで: `src/seedsketch/core/assets.py`。
# 何を: スケッチが preload で使う入力画像の探索と読み込み（Pillow）を提供する。
# なぜ: 画像の置き場所を runtime config の `paths.input_dir` で切り替えられるようにするため。

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np
from PIL import Image

from seedsketch.core.runtime_config import input_root_dir

_logger = logging.getLogger(__name__)


def resolve_input_path(path: str | Path) -> Path:
    """入力ファイルのパスを返す。相対パスは `paths.input_dir` 基準で解決する。"""

    p = Path(str(path)).expanduser()
    if p.is_absolute():
        return p
    return input_root_dir() / p


def load_image(path: str | Path) -> np.ndarray:
    """画像を読み込み、uint8 shape (H, W, 3) の RGB 配列で返す。

    Raises
    ------
    FileNotFoundError
        ファイルが存在しない場合。
    """

    p = resolve_input_path(path)
    if not p.is_file():
        raise FileNotFoundError(f"入力画像が見つかりません: {p}")
    with Image.open(p) as im:
        rgb = im.convert("RGB")
        pixels = np.asarray(rgb, dtype=np.uint8).copy()
    _logger.debug("Loaded image: %s (%dx%d)", p, pixels.shape[1], pixels.shape[0])
    return pixels


def load_images(paths: Sequence[str | Path]) -> tuple[np.ndarray, ...]:
    """画像を順に読み込んで返す。"""

    return tuple(load_image(p) for p in paths)


__all__ = ["load_image", "load_images", "resolve_input_path"]
