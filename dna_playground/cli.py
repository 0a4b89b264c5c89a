"""Command line interface for the DNA Playground."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterable

from .config import EditorConfig, load_config
from .scenes import scene_description, scene_elements, scene_names
from .viewport import ViewState

logger = logging.getLogger(__name__)

COMMANDS = ("run", "list-scenes", "render")


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{level_name}'")
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _load(args: argparse.Namespace) -> EditorConfig:
    config = load_config(args.config)
    _configure_logging(args.log_level or config.log_level)
    return config


def _cmd_run(args: argparse.Namespace) -> None:
    config = _load(args)
    from .app import main as run_app

    code = run_app(config)
    if code:
        raise SystemExit(code)


def _cmd_list_scenes(_args: argparse.Namespace) -> None:
    for name in scene_names():
        print(f"{name}: {scene_description(name)}")


def _cmd_render(args: argparse.Namespace) -> None:
    config = _load(args)
    elements = scene_elements(args.scene)
    view = ViewState(
        zoom=args.zoom,
        width=args.width or config.canvas_width,
        height=args.height or config.canvas_height,
    )
    # Offscreen platform lets the renderer run on machines without a display.
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtGui import QGuiApplication

    from .rendering import render_image

    app = QGuiApplication.instance() or QGuiApplication([])  # noqa: F841 - keeps fonts available
    image = render_image(
        elements,
        view.width,
        view.height,
        zoom=view.zoom,
        background=config.background,
        text_color=config.text_color,
    )
    output = Path(args.output or config.export_filename)
    if output.parent and not output.parent.exists():
        output.parent.mkdir(parents=True, exist_ok=True)
    if not image.save(str(output), "PNG"):
        raise RuntimeError(f"Could not write {output}")
    logger.info("Rendered scene '%s' with %d elements to %s", args.scene, len(elements), output)
    print(f"Wrote {output}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dna-playground",
        description="Interactive DNA structure diagram editor",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="Path to a JSON settings file")
    common.add_argument("--log-level", dest="log_level", help="Logging level (DEBUG, INFO, WARNING, ...)")

    sub = parser.add_subparsers(dest="command")

    runner = sub.add_parser("run", parents=[common], help="Open the editor window (default)")
    runner.set_defaults(func=_cmd_run)

    lister = sub.add_parser("list-scenes", help="List the canonical demo scenes")
    lister.set_defaults(func=_cmd_list_scenes)

    render = sub.add_parser("render", parents=[common], help="Render a demo scene to PNG without a window")
    render.add_argument("--scene", default="base-pair", choices=scene_names(), help="Scene to render")
    render.add_argument("--output", help="Output PNG path (defaults to the configured export filename)")
    render.add_argument("--zoom", type=float, default=1.0, help="Zoom factor, clamped to 0.5-2.0")
    render.add_argument("--width", type=int, help="Image width in pixels")
    render.add_argument("--height", type=int, help="Image height in pixels")
    render.set_defaults(func=_cmd_render)

    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    argv = list(argv) if argv is not None else sys.argv[1:]
    if not argv or argv[0] not in COMMANDS + ("-h", "--help"):
        argv = ["run", *argv]
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - CLI guard
        parser.error(str(exc))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
