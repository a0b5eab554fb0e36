"""Write SVG markup from recorded element definitions."""

from __future__ import annotations

import html
from typing import Any

from snowchart.utils.math_helpers import format_number

_RESERVED = ("tag", "children", "text")


def _attr_value(value: Any) -> str:
    if isinstance(value, float):
        return format_number(value)
    return html.escape(str(value), quote=True)


def _serialize_element(elem: dict[str, Any], indent: str) -> list[str]:
    tag = elem.get("tag", "path")
    attrs = {k: v for k, v in elem.items() if k not in _RESERVED}
    attr_str = " ".join(f'{k}="{_attr_value(v)}"' for k, v in attrs.items())
    open_tag = f"<{tag} {attr_str}" if attr_str else f"<{tag}"

    children = elem.get("children") or []
    text = elem.get("text")
    if text is not None:
        return [f"{indent}{open_tag}>{html.escape(str(text))}</{tag}>"]
    if not children:
        return [f"{indent}{open_tag} />"]

    lines = [f"{indent}{open_tag}>"]
    for child in children:
        lines.extend(_serialize_element(child, indent + "  "))
    lines.append(f"{indent}</{tag}>")
    return lines


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 400.0,
    canvas_h: float = 400.0,
    title: str = "",
    description: str = "",
    defs: list[dict[str, Any]] | None = None,
    pixel_w: float | None = None,
    pixel_h: float | None = None,
) -> str:
    """Generate SVG markup. ``canvas_*`` is the viewBox, ``pixel_*`` the output size."""
    width = format_number(pixel_w if pixel_w is not None else canvas_w)
    height = format_number(pixel_h if pixel_h is not None else canvas_h)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {format_number(canvas_w)} {format_number(canvas_h)}"'
        f' width="{width}" height="{height}"'
        ' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{html.escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{html.escape(description)}</desc>")

    if defs:
        lines.append("  <defs>")
        for elem in defs:
            lines.extend(_serialize_element(elem, "    "))
        lines.append("  </defs>")

    for elem in elements:
        lines.extend(_serialize_element(elem, "  "))

    lines.append("</svg>")
    return "\n".join(lines)
