"""Command line interface for miter cut lists."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Iterable, List

from miter_sketch.dimensions import DrawingConfig
from miter_sketch.segments import Segment

from .cutlist import build_cut_list, canonical_frames, format_cut_list, load_sketch, total_length


def _config_from_args(args: argparse.Namespace) -> DrawingConfig:
    return DrawingConfig(
        thickness=args.thickness,
        unit=args.unit,
        metric_sub_unit=args.sub_unit,
        precision=args.precision,
    )


def _load_segments(args: argparse.Namespace, config: DrawingConfig) -> List[Segment]:
    if args.sketch:
        return load_sketch(Path(args.sketch))
    bank = canonical_frames(config)
    if args.frame not in bank:
        raise ValueError(f"Frame '{args.frame}' not found. Use 'list-frames' to inspect options.")
    return bank[args.frame]


def _cmd_list_frames(_args: argparse.Namespace) -> None:
    bank = canonical_frames(DrawingConfig())
    print("Available frames:")
    for name, segments in bank.items():
        print(f"  - {name} (boards={len(segments)})")


def _cmd_cutlist(args: argparse.Namespace) -> None:
    config = _config_from_args(args)
    segments = _load_segments(args, config)
    reports = build_cut_list(segments, config)
    if args.json:
        print(json.dumps([r.asdict() for r in reports], indent=2))
        return
    print(format_cut_list(reports))
    print(f"total outside length: {total_length(segments, config)}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mitercruncher",
        description="Miter saw settings and cut lists for board frames",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list-frames", help="List bundled demo frames")
    list_parser.set_defaults(func=_cmd_list_frames)

    cut = sub.add_parser("cutlist", help="Print lengths and saw angles for every board")
    source = cut.add_mutually_exclusive_group(required=True)
    source.add_argument("--frame", help="Name of a bundled demo frame")
    source.add_argument("--sketch", help="Path to a JSON sketch file")
    cut.add_argument("--unit", default="metric", choices=["metric", "imperial"], help="Display unit system")
    cut.add_argument("--sub-unit", dest="sub_unit", default="cm", choices=["cm", "mm"], help="Metric display unit")
    cut.add_argument("--precision", type=int, default=0, choices=[0, 1, 2], help="Angle decimals")
    cut.add_argument("--thickness", type=float, default=12.0, help="Default board thickness in mm")
    cut.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    cut.set_defaults(func=_cmd_cutlist)

    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
