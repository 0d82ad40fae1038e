"""SketchConfig とパラメータセット選択に関するテスト群。"""

from __future__ import annotations

from pathlib import Path

import pytest

from seedsketch.core.sketch_config import (
    SketchConfig,
    config_from_mapping,
    load_param_sets,
    select_config,
)


def _sets() -> list[SketchConfig]:
    return [
        SketchConfig(name="first", seed="a"),
        SketchConfig(name="second", seed="b", is_animated=True),
        SketchConfig(name="third", seed="c", export_video=True),
    ]


def test_defaults_and_normalisation() -> None:
    """既定値が入り、数値と video_format は正規化される。"""
    cfg = SketchConfig(name="x", seed=123, width="800", fps=8, video_format=".WEBM")  # type: ignore[arg-type]

    assert cfg.seed == "123"
    assert cfg.canvas_size == (800, 540)
    assert cfg.fps == 8.0
    assert cfg.duration == 300
    assert cfg.video_format == "webm"
    assert cfg.is_animated is False


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": " "},
        {"width": 0},
        {"height": -1},
        {"fps": 0},
        {"duration": -1},
        {"video_format": "gif"},
    ],
)
def test_invalid_values_raise(kwargs: dict) -> None:
    """不正な値は ValueError。"""
    base = {"name": "x", "seed": "s"}
    base.update(kwargs)
    with pytest.raises(ValueError):
        SketchConfig(**base)


def test_vector_rendering_disables_video_export() -> None:
    """render_as_vector なら export_video でも動画を出さない。"""
    assert SketchConfig(name="v", seed="s", export_video=True).should_export_video is True
    assert (
        SketchConfig(name="v", seed="s", export_video=True, render_as_vector=True).should_export_video
        is False
    )


def test_params_are_read_only_and_with_seed_copies() -> None:
    """params は読み取り専用で、with_seed は他の値を保ったコピーを返す。"""
    cfg = SketchConfig(name="p", seed="s", params={"k": 1})

    with pytest.raises(TypeError):
        cfg.params["k"] = 2  # type: ignore[index]

    other = cfg.with_seed("t")
    assert other.seed == "t"
    assert other.param("k") == 1
    assert cfg.seed == "s"
    assert cfg.param("missing", "fallback") == "fallback"


def test_to_dict_flattens_params() -> None:
    """to_dict は既知フィールドと params を 1 つの dict にまとめる。"""
    cfg = SketchConfig(name="d", seed="s", params={"colours": ("#000", "#fff")})
    out = cfg.to_dict()

    assert out["name"] == "d"
    assert out["seed"] == "s"
    assert out["video_format"] == "mp4"
    assert out["colours"] == ["#000", "#fff"]


def test_select_by_name_index_and_default() -> None:
    """名前・番号・既定名で 1 つ選べる。"""
    sets = _sets()

    assert select_config(sets, name="second").name == "second"
    assert select_config(sets, index=0).name == "first"
    assert select_config(sets, index=-1).name == "third"
    assert select_config(sets, default="third").name == "third"


def test_select_errors() -> None:
    """未知の名前は KeyError、範囲外は IndexError、同時指定は ValueError。"""
    sets = _sets()

    with pytest.raises(KeyError):
        select_config(sets, name="missing")
    with pytest.raises(IndexError):
        select_config(sets, index=10)
    with pytest.raises(ValueError):
        select_config(sets, name="first", index=0)
    with pytest.raises(ValueError):
        select_config([], name="first")


def test_config_from_mapping_routes_unknown_keys_to_params() -> None:
    """未知のキーは params に入る。"""
    cfg = config_from_mapping({"name": "m", "seed": "s", "fps": 16, "steps": 15, "params": {"a": 1}})

    assert cfg.fps == 16.0
    assert cfg.param("steps") == 15
    assert cfg.param("a") == 1

    with pytest.raises(ValueError):
        config_from_mapping({"name": "no-seed"})


def test_load_param_sets_from_yaml(tmp_path: Path) -> None:
    """YAML の list と param_sets キーの両形式を読める。"""
    as_list = tmp_path / "list.yaml"
    as_list.write_text("- name: a\n  seed: x\n- name: b\n  seed: y\n  is_animated: true\n", encoding="utf-8")
    as_key = tmp_path / "key.yaml"
    as_key.write_text("param_sets:\n  - name: c\n    seed: z\n    colour: '#123456'\n", encoding="utf-8")

    loaded = load_param_sets(as_list)
    assert [cfg.name for cfg in loaded] == ["a", "b"]
    assert loaded[1].is_animated is True

    keyed = load_param_sets(as_key)
    assert keyed[0].param("colour") == "#123456"


def test_load_param_sets_rejects_non_list(tmp_path: Path) -> None:
    """list でない YAML は ValueError。"""
    bad = tmp_path / "bad.yaml"
    bad.write_text("name: a\nseed: x\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_param_sets(bad)
