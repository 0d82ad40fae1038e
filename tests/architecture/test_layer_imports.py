"""依存境界（core/export/sketches と GUI 層）の破りを検出するテスト。"""

from __future__ import annotations

import ast
from importlib.util import resolve_name
from pathlib import Path

_SRC = Path(__file__).resolve().parents[2] / "src"
_PKG = _SRC / "seedsketch"


def _module_name(path: Path) -> str:
    parts = list(path.relative_to(_SRC).with_suffix("").parts)
    if parts[-1] == "__init__":
        parts = parts[:-1]
    return ".".join(parts)


def _imported_modules(path: Path) -> set[str]:
    """ファイル内の import 先モジュール名（相対 import は絶対名に解決）を返す。"""
    current = _module_name(path)
    package = current if path.name == "__init__.py" else current.rpartition(".")[0]
    found: set[str] = set()
    for node in ast.walk(ast.parse(path.read_text(encoding="utf-8"))):
        if isinstance(node, ast.Import):
            found.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            base = resolve_name("." * node.level + (node.module or ""), package) if node.level else node.module
            if base is None:
                continue
            found.add(base)
            found.update(f"{base}.{alias.name}" for alias in node.names if alias.name != "*")
    return found


def _violations(layer: str, forbidden: tuple[str, ...]) -> list[str]:
    out: list[str] = []
    for path in sorted((_PKG / layer).rglob("*.py")):
        bad = sorted(m for m in _imported_modules(path) if m.startswith(forbidden))
        if bad:
            out.append(f"{path.relative_to(_SRC)}: {', '.join(bad)}")
    return out


def test_core_does_not_depend_on_outer_layers() -> None:
    assert _violations(
        "core",
        ("seedsketch.api", "seedsketch.export", "seedsketch.interactive", "seedsketch.sketches", "pyglet"),
    ) == []


def test_export_does_not_depend_on_gui() -> None:
    assert _violations("export", ("seedsketch.api", "seedsketch.interactive", "pyglet")) == []


def test_sketches_only_use_primitive_namespace_from_api() -> None:
    """スケッチは G 以外の api（セッション・ランナー）と GUI 層に依存しない。"""
    forbidden = ("seedsketch.api.session", "seedsketch.api.runner", "seedsketch.api.export", "seedsketch.interactive", "pyglet")
    assert _violations("sketches", forbidden) == []


def test_relative_imports_are_resolved() -> None:
    assert "seedsketch.core.scene" in _imported_modules(_PKG / "core" / "sketch.py")
    assert "seedsketch.sketches.lines" in _imported_modules(_PKG / "sketches" / "__init__.py")
