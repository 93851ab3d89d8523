# weatherdash/services/charts.py
from datetime import datetime
from typing import List, Sequence, Tuple

from weatherdash.schemas.dashboard import ChartData, ChartPoint

# SVG canvas used by the device page (viewBox="0 0 400 120")
CHART_WIDTH = 400.0
CHART_HEIGHT = 120.0
CHART_PADDING = 10.0

DEFAULT_LIMIT = 24


def format_point_time(ts: datetime) -> str:
    # "Jan 2 15:04"
    return f"{ts:%b} {ts.day} {ts:%H:%M}"


def _x_for(i: int, n: int) -> float:
    inner_width = CHART_WIDTH - 2 * CHART_PADDING
    if n == 1:
        # a single reading sits in the middle of the canvas
        return CHART_PADDING + inner_width / 2
    return CHART_PADDING + (i / (n - 1)) * inner_width


def _y_for(value: float, plot_min: float, plot_max: float) -> float:
    normalized = (value - plot_min) / (plot_max - plot_min)
    return CHART_HEIGHT - CHART_PADDING - normalized * (CHART_HEIGHT - 2 * CHART_PADDING)


def _coord(x: float, y: float) -> str:
    return f"{x:.1f},{y:.1f}"


def build_chart(series: Sequence[Tuple[float, datetime]], limit: int = DEFAULT_LIMIT) -> ChartData:
    """
    Turns the most recent readings of one device+parameter into SVG geometry.

    `series` arrives newest-first (that is how the readings query orders it);
    the points of the result are chronological, oldest first.

    The value range is padded by 10% on each side (1.0 when every value is
    equal) before scaling, but `min`/`max` in the result are the real,
    unpadded bounds of the series. The padded ones are in `plot_min`/`plot_max`.
    """
    recent = list(series[:limit])
    if not recent:
        return ChartData()

    # 1) chronological order
    recent.reverse()
    values = [float(value) for value, _ in recent]

    # 2) bounds + padding
    min_val = min(values)
    max_val = max(values)
    padding = (max_val - min_val) * 0.1
    if padding == 0:
        padding = 1.0
    plot_min = min_val - padding
    plot_max = max_val + padding

    # 3) normalize to canvas coordinates
    n = len(recent)
    points: List[ChartPoint] = []
    for i, (value, ts) in enumerate(recent):
        points.append(
            ChartPoint(
                value=float(value),
                timestamp=ts,
                x=_x_for(i, n),
                y=_y_for(float(value), plot_min, plot_max),
                formatted_time=format_point_time(ts),
            )
        )

    # 4) paths
    baseline = CHART_HEIGHT - CHART_PADDING
    first, last = points[0], points[-1]

    line_path = "M" + _coord(first.x, first.y)
    area_path = "M" + _coord(first.x, baseline) + "L" + _coord(first.x, first.y)
    for p in points[1:]:
        segment = "L" + _coord(p.x, p.y)
        line_path += segment
        area_path += segment
    area_path += "L" + _coord(last.x, baseline) + "Z"

    return ChartData(
        points=points,
        min=min_val,
        max=max_val,
        plot_min=plot_min,
        plot_max=plot_max,
        line_path=line_path,
        area_path=area_path,
    )
