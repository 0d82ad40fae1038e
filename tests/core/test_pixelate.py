"""ブロック化フィルタと行グリッチに関するテスト群。"""

from __future__ import annotations

import numpy as np
import pytest

from seedsketch.core.pixelate import lowres_block_size, pixelate, row_block_sizes, row_glitch


def _ramp(h: int, w: int) -> np.ndarray:
    return np.arange(h * w, dtype=np.int32).reshape(h, w)


def test_pixelate_block_one_is_identity() -> None:
    """block_size=1 では元画像と同じ。"""
    img = _ramp(5, 7)

    np.testing.assert_array_equal(pixelate(img, 1), img)


def test_pixelate_uses_block_centre_sample() -> None:
    """各ブロックは中央画素の値で塗られる。"""
    img = _ramp(4, 4)
    out = pixelate(img, 2)

    expected = np.array(
        [
            [5, 5, 7, 7],
            [5, 5, 7, 7],
            [13, 13, 15, 15],
            [13, 13, 15, 15],
        ]
    )
    np.testing.assert_array_equal(out, expected)


def test_pixelate_clamps_samples_inside_image() -> None:
    """画像より大きいブロックでも画像内の画素を採る。"""
    img = _ramp(4, 4)

    assert np.all(pixelate(img, 64) == img[3, 3])


def test_pixelate_keeps_shape_and_dtype_for_rgb() -> None:
    """RGB 画像でも shape/dtype を保ち、入力を書き換えない。"""
    img = np.random.default_rng(0).integers(0, 256, size=(9, 11, 3), dtype=np.uint8)
    before = img.copy()
    out = pixelate(img, 4)

    assert out.shape == img.shape
    assert out.dtype == np.uint8
    np.testing.assert_array_equal(img, before)


def test_pixelate_rejects_bad_input() -> None:
    """block_size < 1 や空画像は ValueError。"""
    with pytest.raises(ValueError):
        pixelate(_ramp(2, 2), 0)
    with pytest.raises(ValueError):
        pixelate(np.zeros((0, 3)), 2)


def test_lowres_block_size_sweeps_powers_of_two() -> None:
    """1..64 の 2 の冪を往復し、frame 0 で最大になる。"""
    sizes = [lowres_block_size(fc) for fc in range(46)]

    assert sizes[0] == 64
    assert set(sizes) == {1, 2, 4, 8, 16, 32, 64}
    assert lowres_block_size(45) == 64
    assert [lowres_block_size(fc) for fc in (1, 11, 12, 22, 23)] == [32, 8, 4, 1, 1]


def test_row_block_sizes_stay_in_range() -> None:
    """行ごとのブロックサイズは 8..24。"""
    sizes = row_block_sizes(400, 7)

    assert sizes.shape == (400,)
    assert sizes.min() >= 8
    assert sizes.max() <= 24


def test_row_glitch_blacks_out_border_and_snaps_rows() -> None:
    """外周 1px は 0、内側は y - y % block の行から採る。"""
    h, w = 40, 6
    img = np.repeat(np.arange(1, h + 1, dtype=np.int32)[:, None], w, axis=1)
    out = row_glitch(img, 3)
    blocks = row_block_sizes(h, 3)

    assert np.all(out[0] == 0)
    assert np.all(out[-1] == 0)
    assert np.all(out[:, 0] == 0)
    assert np.all(out[:, -1] == 0)
    for y in range(1, h - 1):
        src = y - y % blocks[y]
        assert np.all(out[y, 1:-1] == img[src, 1:-1])


def test_row_glitch_tiny_image_is_black() -> None:
    """内側を持たない画像はすべて 0。"""
    out = row_glitch(np.full((2, 5, 3), 200, dtype=np.uint8), 1)

    assert out.shape == (2, 5, 3)
    assert not out.any()
