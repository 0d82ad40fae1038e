# どこで: `src/seedsketch/__main__.py`。
# 何を: `python -m seedsketch <sketch>` のコマンドラインエントリポイント。
# なぜ: スケッチ名とパラメータセットを指定して、プレビューまたはヘッドレス出力を起動するため。

from __future__ import annotations

import argparse
import logging
import sys

EXPORT_FORMATS = ("png", "jpg", "svg", "video")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="seedsketch")
    p.add_argument("sketch", nargs="?", help="スケッチ名（--list で一覧）")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--config", dest="config_name", default=None, help="パラメータセット名")
    group.add_argument("--index", dest="config_index", type=int, default=None, help="パラメータセット番号")
    p.add_argument("--seed", default=None, help="初期シード（省略時はパラメータセットのシード）")
    p.add_argument(
        "--export",
        choices=EXPORT_FORMATS,
        default=None,
        help="ウィンドウを開かずに書き出す形式",
    )
    p.add_argument("--frame", type=int, default=1, help="静止画として書き出すフレーム番号（1 始まり）")
    p.add_argument("--runtime-config", default=None, help="config.yaml のパス")
    p.add_argument("--list", action="store_true", help="スケッチとパラメータセットを一覧表示する")
    p.add_argument("--verbose", action="store_true", help="DEBUG ログを出す")
    return p.parse_args(argv)


def _print_sketches() -> None:
    from seedsketch.sketches import SKETCHES

    for name in sorted(SKETCHES):
        sketch = SKETCHES[name]
        print(name)
        for i, cfg in enumerate(sketch.param_sets):
            marker = "*" if cfg.name == sketch.default_param_set else " "
            print(f"  {marker} [{i}] {cfg.name}")


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        _print_sketches()
        return 0
    if not args.sketch:
        print("sketch を指定してください（--list で一覧）", file=sys.stderr)
        return 2

    from seedsketch.core.runtime_config import set_config_path
    from seedsketch.sketches import get_sketch

    try:
        sketch = get_sketch(args.sketch)
        config = sketch.config(name=args.config_name, index=args.config_index)
    except (KeyError, IndexError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if args.seed is not None:
        config = config.with_seed(args.seed)

    if args.export is None:
        from seedsketch.api import run

        run(sketch, config_name=config.name, seed=config.seed, config_path=args.runtime_config)
        return 0

    from seedsketch.api.export import export_still, render_video
    from seedsketch.api.session import SketchSession

    set_config_path(args.runtime_config)
    session = SketchSession(sketch, config)
    if args.export == "video":
        render_video(session)
    else:
        export_still(session, args.export, frame=args.frame)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
