from pathlib import Path

import pytest

from seedsketch.core.runtime_config import set_config_path


@pytest.fixture(autouse=True)
def _reset_runtime_config():
    set_config_path(None)
    yield
    set_config_path(None)


@pytest.fixture
def runtime_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    """config 探索を tmp_path に閉じ込め、出力先と入力先を tmp_path 配下に向ける。"""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))

    output_dir = tmp_path / "out"
    input_dir = tmp_path / "img"
    input_dir.mkdir()
    config = tmp_path / ".seedsketch" / "config.yaml"
    config.parent.mkdir(parents=True, exist_ok=True)
    config.write_text(
        f'paths:\n  output_dir: "{output_dir.as_posix()}"\n  input_dir: "{input_dir.as_posix()}"\n'
        "export:\n  png:\n    scale: 1.0\n",
        encoding="utf-8",
    )
    return output_dir, input_dir
