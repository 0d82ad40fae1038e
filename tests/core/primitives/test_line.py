"""line プリミティブの線分形状に関するテスト群。"""

from __future__ import annotations

import numpy as np

from seedsketch.core.primitive_registry import call_primitive, primitive_registry
from seedsketch.core.primitives.line import line
from seedsketch.core.style import Style


def test_line_has_two_vertices_and_is_open() -> None:
    """2 端点の開いたポリラインになる。"""
    shape = line(x1=1.0, y1=2.0, x2=3.0, y2=4.0)

    assert shape.n_vertices == 2
    assert shape.closed is False
    np.testing.assert_allclose(shape.coords, [[1.0, 2.0], [3.0, 4.0]], rtol=0.0, atol=1e-6)


def test_line_keeps_given_style() -> None:
    """style がそのまま Shape に渡る。"""
    style = Style.outline("#ff0000", 3.0, cap="butt")
    shape = line(x1=0, y1=0, x2=10, y2=0, style=style)

    assert shape.style is style


def test_line_is_registered_by_function_name() -> None:
    """関数名がそのまま op 名として登録される。"""
    assert "line" in primitive_registry
    assert primitive_registry.get_param_order("line") == ("x1", "y1", "x2", "y2")

    shape = call_primitive("line", x1=0, y1=0, x2=5, y2=5)
    assert shape.n_vertices == 2
