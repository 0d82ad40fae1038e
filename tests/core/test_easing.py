"""補間・イージング関数に関するテスト群。"""

from __future__ import annotations

import pytest

from seedsketch.core.easing import ease_in_out_back, lerp, smoothstep


def test_lerp_endpoints_and_midpoint() -> None:
    assert lerp(2.0, 6.0, 0.0) == 2.0
    assert lerp(2.0, 6.0, 1.0) == 6.0
    assert lerp(2.0, 6.0, 0.5) == 4.0


def test_smoothstep_is_clamped() -> None:
    """[0, 1] の外は端の値に張り付く。"""
    assert smoothstep(-1.0) == 0.0
    assert smoothstep(0.5) == 0.5
    assert smoothstep(2.0) == 1.0


def test_ease_in_out_back_fixed_points_and_overshoot() -> None:
    """0, 0.5, 1 を通り、途中で範囲外にはみ出す。"""
    assert ease_in_out_back(0.0) == pytest.approx(0.0)
    assert ease_in_out_back(0.5) == pytest.approx(0.5)
    assert ease_in_out_back(1.0) == pytest.approx(1.0)
    assert ease_in_out_back(0.1) < 0.0
    assert ease_in_out_back(0.9) > 1.0
