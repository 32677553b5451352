#!/usr/bin/env python3
"""Capture a handwritten signature via a GUI drawing canvas.

Opens a tkinter window where the user draws their signature with the mouse.
Pointer events go straight into a SignaturePad, and the canvas shows the
smoothed segments the pad produces. The result is saved as a PNG with a
transparent background, cropped to the signature.

Usage:
    python capture_signature.py <output.png> [--width 600] [--height 200]

The user can:
  - Draw with mouse (click-and-drag), or click for a dot
  - Click "Clear" to start over
  - Click "Done" to save and exit
  - Close the window to cancel (exits with code 1)
"""

import argparse
import json
import logging
import sys
import tkinter as tk

from sigpad import LineTo, MoveTo, QuadraticTo, SignaturePad, StrokeStyle
from sigpad.geometry import DEFAULT_THICKNESS, segment_end
from sigpad.rasterize import flatten_quadratic

logger = logging.getLogger("capture_signature")


def _to_hex(color):
    return "#%02x%02x%02x" % tuple(color[:3])


def draw_segments(canvas, segments, style, pen):
    """Draw freshly emitted path segments on a tk canvas.

    pen is a one-item list holding the current pen position.
    """
    fill = _to_hex(style.color)
    width = max(1, round(style.thickness))
    for segment in segments:
        if isinstance(segment, MoveTo):
            pen[0] = segment.point
            continue
        start = pen[0]
        if isinstance(segment, QuadraticTo):
            points = [start] + flatten_quadratic(start, segment.control, segment.end)
        else:
            points = [start, segment.point]
        if isinstance(segment, LineTo) and segment.point == start:
            r = width / 2
            canvas.create_oval(start.x - r, start.y - r, start.x + r, start.y + r,
                               fill=fill, outline=fill)
        else:
            canvas.create_line(*[c for p in points for c in p], fill=fill, width=width,
                               capstyle=tk.ROUND, joinstyle=tk.ROUND)
        pen[0] = segment_end(segment)


def capture_signature(output_path: str, width: int = 600, height: int = 200,
                      thickness: float = DEFAULT_THICKNESS) -> bool:
    """Open a signature capture window. Returns True if signature was saved."""
    result = {"saved": False}
    pad = SignaturePad(style=StrokeStyle(thickness=thickness))
    pen = [None]

    root = tk.Tk()
    root.title("Sign here")
    root.resizable(False, False)

    # White canvas for visual drawing
    canvas = tk.Canvas(root, width=width, height=height, bg="white",
                       cursor="pencil", highlightthickness=1, highlightbackground="#999")
    canvas.pack(padx=10, pady=(10, 5))

    def feed(segments_before):
        path = pad.get_current_path()
        draw_segments(canvas, path[segments_before:], pad.style, pen)

    def on_press(event):
        before = len(pad.get_current_path())
        pad.start_stroke((event.x, event.y))
        feed(before)

    def on_drag(event):
        before = len(pad.get_current_path())
        pad.extend_stroke((event.x, event.y))
        feed(before)

    def on_release(event):
        before = len(pad.get_current_path())
        pad.end_stroke()
        feed(before)

    def clear():
        canvas.delete("all")
        pad.clear()
        pen[0] = None

    def done():
        if pad.is_empty():
            return
        bitmap = pad.render_to_bitmap(width, height)
        trimmed = pad.export_trimmed(bitmap)
        (trimmed or bitmap).save(output_path, "PNG")
        result["saved"] = True
        root.destroy()

    def cancel():
        pad.cancel_stroke()
        root.destroy()

    canvas.bind("<ButtonPress-1>", on_press)
    canvas.bind("<B1-Motion>", on_drag)
    canvas.bind("<ButtonRelease-1>", on_release)

    # Buttons
    btn_frame = tk.Frame(root)
    btn_frame.pack(pady=(5, 10))

    tk.Button(btn_frame, text="Clear", command=clear, width=10).pack(side=tk.LEFT, padx=5)
    tk.Button(btn_frame, text="Done", command=done, width=10).pack(side=tk.LEFT, padx=5)
    tk.Button(btn_frame, text="Cancel", command=cancel, width=10).pack(side=tk.LEFT, padx=5)

    tk.Label(root, text="Draw your signature above, then click Done",
             fg="#666", font=("Helvetica", 11)).pack(pady=(0, 8))

    root.protocol("WM_DELETE_WINDOW", cancel)
    root.mainloop()
    pad.close()

    return result["saved"]


def main():
    parser = argparse.ArgumentParser(description="Capture a handwritten signature")
    parser.add_argument("output", help="Output PNG path")
    parser.add_argument("--width", type=int, default=600, help="Canvas width (default: 600)")
    parser.add_argument("--height", type=int, default=200, help="Canvas height (default: 200)")
    parser.add_argument("--thickness", type=float, default=DEFAULT_THICKNESS,
                        help=f"Stroke thickness in pixels (default: {DEFAULT_THICKNESS:g})")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    saved = capture_signature(args.output, args.width, args.height, args.thickness)
    if saved:
        print(json.dumps({"status": "saved", "path": args.output}))
    else:
        print(json.dumps({"status": "cancelled"}))
        sys.exit(1)


if __name__ == "__main__":
    main()
