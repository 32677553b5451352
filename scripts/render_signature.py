#!/usr/bin/env python3
"""Render recorded signature strokes to a trimmed PNG.

Replays each stroke through the signature pad exactly as live pointer input
would arrive (down, moves, up), rasterizes the smoothed path and crops the
result to its content. The PNG has a transparent background.

Usage:
    python render_signature.py <strokes.json> <output.png> [--width 600] [--height 200]

The strokes.json format is either a list of strokes or {"strokes": [...]},
where each stroke is a list of [x, y] samples:
{
    "strokes": [
        [[10, 50], [20, 48], [35, 52]],     # a drag
        [[80, 40]]                          # a tap (dot)
    ]
}
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from sigpad import SignaturePad, SignaturePadError, StrokeStyle, find_bounding_box
from sigpad.geometry import DEFAULT_THICKNESS
from sigpad.stroke import DEFAULT_TOUCH_SLOP

logger = logging.getLogger("render_signature")


def load_strokes(strokes_path):
    """Read strokes from a JSON file. Returns a list of point lists."""
    with open(strokes_path) as f:
        data = json.load(f)
    strokes = data.get("strokes", []) if isinstance(data, dict) else data
    if not isinstance(strokes, list):
        raise ValueError("strokes must be a list of point lists")
    for i, stroke in enumerate(strokes):
        if not isinstance(stroke, list):
            raise ValueError(f"stroke {i} must be a list of [x, y] points, got {type(stroke).__name__}")
    return strokes


def replay_strokes(pad, strokes):
    """Feed recorded strokes into a pad as pointer events."""
    for stroke in strokes:
        if not stroke:
            continue
        pad.start_stroke(stroke[0])
        for point in stroke[1:]:
            pad.extend_stroke(point)
        pad.end_stroke()


def render_signature(strokes, output_path, width=600, height=200,
                     color="black", thickness=DEFAULT_THICKNESS,
                     slop=DEFAULT_TOUCH_SLOP, trim_blank_space=True):
    """Render strokes to output_path. Returns a JSON-serialisable report."""
    style = StrokeStyle(color=color, thickness=thickness)
    with SignaturePad(style=style, slop=slop) as pad:
        replay_strokes(pad, strokes)
        bitmap = pad.render_to_bitmap(width, height)
        bbox = find_bounding_box(bitmap)
        exported = pad.export_trimmed_async(bitmap, trim_blank_space).result()

    if exported is None:
        return {"status": "blank", "segments": len(pad.get_current_path())}

    exported.save(output_path, "PNG")
    logger.debug("saved %dx%d signature to %s", exported.width, exported.height, output_path)
    return {
        "status": "saved",
        "path": str(output_path),
        "width": exported.width,
        "height": exported.height,
        "bbox": list(bbox) if bbox else None,
        "trimmed": trim_blank_space,
        "segments": len(pad.get_current_path()),
    }


def main():
    parser = argparse.ArgumentParser(description="Render recorded signature strokes to PNG")
    parser.add_argument("strokes", help="Strokes JSON path")
    parser.add_argument("output", help="Output PNG path")
    parser.add_argument("--width", type=int, default=600, help="Canvas width (default: 600)")
    parser.add_argument("--height", type=int, default=200, help="Canvas height (default: 200)")
    parser.add_argument("--color", default="black", help="Stroke color (default: black)")
    parser.add_argument("--thickness", type=float, default=DEFAULT_THICKNESS,
                        help=f"Stroke thickness in pixels (default: {DEFAULT_THICKNESS:g})")
    parser.add_argument("--slop", type=float, default=DEFAULT_TOUCH_SLOP,
                        help=f"Drag threshold in pixels (default: {DEFAULT_TOUCH_SLOP:g})")
    parser.add_argument("--no-trim", action="store_true", help="Keep the full canvas")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    parser.add_argument("--verbose", action="store_true", help="Debug logging on stderr")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not Path(args.strokes).exists():
        print(json.dumps({"error": f"Strokes file not found: {args.strokes}"}), file=sys.stderr)
        sys.exit(1)

    try:
        strokes = load_strokes(args.strokes)
        result = render_signature(
            strokes, args.output, args.width, args.height,
            color=args.color, thickness=args.thickness, slop=args.slop,
            trim_blank_space=not args.no_trim,
        )
    except (SignaturePadError, ValueError, OSError) as exc:
        print(json.dumps({"error": str(exc), "type": type(exc).__name__}), file=sys.stderr)
        sys.exit(1)

    indent = 2 if args.pretty else None
    print(json.dumps(result, indent=indent))
    if result["status"] != "saved":
        sys.exit(1)


if __name__ == "__main__":
    main()
