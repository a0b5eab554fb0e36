"""Render a snowflake chart to an SVG or PNG file.

Usage:
    python render_snowflake.py --scores 3 7 5 7 1 -o snowflake.svg
    python render_snowflake.py --scores 3 7 5 7 1 --focus past -o past.png --ratio 2
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from snowchart.engine.config import RenderConfig
from snowchart.engine.context import ORDERED_KEYS, Frame, Mode, ScoreSet
from snowchart.engine.scene import render_frame
from snowchart.svg.rasterizer import svg_to_png

logger = logging.getLogger("render_snowflake")

BG = "#0b101b"


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument(
        "--scores", type=int, nargs=len(ORDERED_KEYS), default=[3, 7, 5, 7, 1],
        metavar="N", help="Scores 0-7 in order: " + ", ".join(k.value for k in ORDERED_KEYS),
    )
    parser.add_argument("--focus", choices=[k.value for k in ORDERED_KEYS], help="Render in focus mode")
    parser.add_argument("--hover", type=int, choices=range(len(ORDERED_KEYS)), help="Hovered slice index")
    parser.add_argument("--size", type=float, default=400.0, help="Canvas width and height")
    parser.add_argument("--ratio", type=float, default=1.0, help="Device pixel ratio for PNG output")
    parser.add_argument("--labels", action="store_true", help="Draw axis labels")
    parser.add_argument("-o", "--output", type=Path, default=Path("snowflake.svg"))
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    frame = Frame(
        scores=ScoreSet(tuple(args.scores)),
        mode=Mode.focused(args.focus) if args.focus else Mode.overview(),
        hover_index=args.hover,
        width=args.size,
        height=args.size,
        pixel_ratio=args.ratio,
    )
    rendered = render_frame(frame, RenderConfig(draw_labels=args.labels, background=BG))

    if args.output.suffix.lower() == ".png":
        args.output.write_bytes(svg_to_png(rendered.svg))
    else:
        args.output.write_text(rendered.svg, encoding="utf-8")

    logger.info("Wrote %s (color %s)", args.output, rendered.scene.color.css)


if __name__ == "__main__":
    main()
