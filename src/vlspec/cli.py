from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from .builder import VegaLite
from .config import ConfigError, SpecSettings
from .core.constants import DEFAULT_CELL_HEIGHT, DEFAULT_CELL_WIDTH
from .core.serde import load_document


def _number(text: str) -> int | float:
    """Parse a CLI number, keeping integers integral ("300" -> 300, "0.5" -> 0.5)."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None


def _optional_number(text: str) -> int | float | None:
    """Like `_number`, but "none" leaves the field out of the cell mapping."""
    if text.strip().lower() == "none":
        return None
    return _number(text)


def _number_list(text: str) -> list[int | float]:
    """Parse a comma-separated dash array such as "4,2"."""
    return [_number(part.strip()) for part in text.split(",") if part.strip()]


def _add_io_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--spec", type=str, default="", help="Input JSON spec (default: stdin).")
    p.add_argument("--out", type=str, default="", help="Write the result here (default: stdout).")
    p.add_argument("--config", type=str, default=None, help="Settings TOML (default: search cwd).")


def _add_cell_args(p: argparse.ArgumentParser, *, with_facet: bool) -> None:
    p.add_argument(
        "--width", type=_optional_number, default=DEFAULT_CELL_WIDTH, help='Cell width ("none" to omit).'
    )
    p.add_argument(
        "--height", type=_optional_number, default=DEFAULT_CELL_HEIGHT, help='Cell height ("none" to omit).'
    )
    p.add_argument(
        "--clip",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Clip the view (default: --no-clip).",
    )
    p.add_argument(
        "--omit-clip", dest="clip", action="store_const", const=None, help="Leave clip out."
    )
    p.add_argument("--fill", type=str, default=None, help="Fill color.")
    p.add_argument("--fill-opacity", type=_number, default=None, help="Fill opacity 0.0-1.0.")
    p.add_argument("--stroke", type=str, default=None, help="Stroke color.")
    p.add_argument("--stroke-opacity", type=_number, default=None, help="Stroke opacity 0.0-1.0.")
    p.add_argument("--stroke-width", type=_number, default=None, help="Stroke width in pixels.")
    p.add_argument(
        "--stroke-dash", type=_number_list, default=None, help='Dash array, e.g. "4,2".'
    )
    p.add_argument(
        "--stroke-dash-offset", type=_number, default=None, help="Dash offset in pixels."
    )
    if with_facet:
        p.add_argument("--facet", action="store_true", help="Write config.facet.cell.")


def _cell_kwargs(args: argparse.Namespace) -> dict[str, Any]:
    return {
        "width": args.width,
        "height": args.height,
        "clip": args.clip,
        "fill": args.fill,
        "fill_opacity": args.fill_opacity,
        "stroke": args.stroke,
        "stroke_opacity": args.stroke_opacity,
        "stroke_width": args.stroke_width,
        "stroke_dash": args.stroke_dash,
        "stroke_dash_offset": args.stroke_dash_offset,
    }


def _load(args: argparse.Namespace) -> VegaLite:
    """Read the input spec from --spec or stdin; empty input starts a new spec."""
    settings = SpecSettings.load(args.config)
    text = Path(args.spec).read_text(encoding="utf-8") if args.spec else sys.stdin.read()
    if not text.strip():
        return VegaLite(settings=settings)
    return VegaLite(load_document(text), settings=settings)


def _emit(vl: VegaLite, out: str) -> None:
    text = vl.to_json()
    if out:
        Path(out).write_text(text + "\n", encoding="utf-8")
        print(f"[INFO] Wrote spec to {out}", file=sys.stderr)
    else:
        print(text)


def _run(
    prog: str,
    description: str,
    argv: list[str],
    add_args: Callable[[argparse.ArgumentParser], None],
    apply: Callable[[VegaLite, argparse.Namespace], VegaLite],
) -> int:
    p = argparse.ArgumentParser(prog=prog, description=description)
    add_args(p)
    _add_io_args(p)
    args = p.parse_args(argv)

    try:
        _emit(apply(_load(args), args), args.out)
    except (ValueError, ConfigError, OSError) as e:
        print(f"[ERROR] {prog}: {e}", file=sys.stderr)
        return 2
    return 0


def _cmd_cell(argv: list[str]) -> int:
    return _run(
        "cell",
        "Replace config.cell (or config.facet.cell with --facet).",
        argv,
        lambda p: _add_cell_args(p, with_facet=True),
        lambda vl, a: vl.configure_cell(**_cell_kwargs(a), facet=a.facet),
    )


def _cmd_cell_size(argv: list[str]) -> int:
    def add(p: argparse.ArgumentParser) -> None:
        p.add_argument("--width", type=_number, default=DEFAULT_CELL_WIDTH, help="Cell width.")
        p.add_argument("--height", type=_number, default=DEFAULT_CELL_HEIGHT, help="Cell height.")
        p.add_argument("--facet", action="store_true", help="Size facet cells instead.")

    return _run(
        "cell-size",
        "Set the cell width and height.",
        argv,
        add,
        lambda vl, a: vl.cell_size(a.width, a.height, facet=a.facet),
    )


def _cmd_facet_cell(argv: list[str]) -> int:
    return _run(
        "facet-cell",
        "Replace config.facet.cell.",
        argv,
        lambda p: _add_cell_args(p, with_facet=False),
        lambda vl, a: vl.facet_cell(**_cell_kwargs(a)),
    )


def _cmd_facet_grid(argv: list[str]) -> int:
    def add(p: argparse.ArgumentParser) -> None:
        p.add_argument("--grid-color", type=str, default=None, help="Grid color.")
        p.add_argument("--grid-opacity", type=_number, default=None, help="Grid opacity 0.0-1.0.")
        p.add_argument("--grid-offset", type=_number, default=None, help="Grid offset in pixels.")

    return _run(
        "facet-grid",
        "Merge grid styling into config.facet.grid.",
        argv,
        add,
        lambda vl, a: vl.grid_facet(a.grid_color, a.grid_opacity, a.grid_offset),
    )


_COMMANDS: dict[str, Callable[[list[str]], int]] = {
    "cell": _cmd_cell,
    "cell-size": _cmd_cell_size,
    "facet-cell": _cmd_facet_cell,
    "facet-grid": _cmd_facet_grid,
}


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="vlspec", description="Vega-Lite cell and facet config CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)
    for name in _COMMANDS:
        sub.add_parser(name)
    return p


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        build_argparser().print_help()
        return
    cmd, rest = argv[0], argv[1:]
    handler = _COMMANDS.get(cmd)
    if handler is None:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        code = 2
    else:
        code = handler(rest)
    raise SystemExit(code)


if __name__ == "__main__":
    main()
