"""SVG -> pixels via CairoSVG."""

from __future__ import annotations

import io
import logging

import cairosvg
import numpy as np
from numpy.typing import NDArray
from PIL import Image

logger = logging.getLogger(__name__)


def svg_to_png(svg: str, width: int | None = None, height: int | None = None) -> bytes:
    """Render SVG markup to PNG bytes. Size defaults to the document's width/height."""
    try:
        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=width,
            output_height=height,
        )
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise


def rasterize_svg(svg: str, width: int | None = None, height: int | None = None) -> NDArray[np.uint8]:
    """Render SVG markup to an RGBA array of shape (H, W, 4)."""
    png_data = svg_to_png(svg, width, height)
    return np.array(Image.open(io.BytesIO(png_data)).convert("RGBA"))
