from __future__ import annotations

import io
import math

from PIL import Image, ImageDraw, ImageFont

from ..core.constants import CHART_HEIGHT, CHART_INNER_RATIO, CHART_WIDTH
from ..core.enums import AttendanceState
from .chart import ChartData

SLICE_COLORS = {
    AttendanceState.PRESENT: "#22c55e",
    AttendanceState.ABSENT: "#ef4444",
}
BACKGROUND = "white"
LABEL_COLOR = "#111827"


def _draw_centered(draw: ImageDraw.ImageDraw, xy: tuple[float, float], text: str, *, font, fill) -> None:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x = xy[0] - (right - left) / 2 - left
    y = xy[1] - (bottom - top) / 2 - top
    draw.text((x, y), text, font=font, fill=fill)


def render_donut(chart: ChartData, *, width: int = CHART_WIDTH, height: int = CHART_HEIGHT) -> Image.Image:
    """Donut chart: slices clockwise from 12 o'clock, slice values, centre label."""
    img = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    cx, cy = width / 2, height / 2
    outer = min(width, height) / 2 - 10
    inner = outer * CHART_INNER_RATIO
    box = (cx - outer, cy - outer, cx + outer, cy + outer)

    total = sum(s.value for s in chart.series)
    label_points = []
    start = -90.0
    for s in chart.series:
        sweep = 360.0 * s.value / total
        end = start + sweep
        draw.pieslice(box, start=start, end=end, fill=SLICE_COLORS[s.label])
        mid = math.radians(start + sweep / 2)
        r = (outer + inner) / 2
        label_points.append(((cx + r * math.cos(mid), cy + r * math.sin(mid)), str(s.value)))
        start = end

    draw.ellipse((cx - inner, cy - inner, cx + inner, cy + inner), fill=BACKGROUND)

    for point, text in label_points:
        _draw_centered(draw, point, text, font=font, fill="white")
    _draw_centered(draw, (cx, cy), chart.center_label, font=font, fill=LABEL_COLOR)
    return img


def render_donut_png(chart: ChartData, **kwargs) -> bytes:
    buf = io.BytesIO()
    render_donut(chart, **kwargs).save(buf, format="PNG")
    return buf.getvalue()
