"""Oscilloscope screen drawing: grid, waveform trace and measurement labels."""

from dataclasses import dataclass
from typing import List, Sequence

from scopekit.framebuffer import FrameBuffer, Rectangle, color_translate

PIXELS_PER_DIV = 20
Y_MID = 64
X_MID = 64
GRID_EXTENT = 128
"""Far end passed for every grid line; drawing is clipped to the screen."""

CLR_BLACK = 0x000000
CLR_BLUE = 0x0000FF
CLR_YELLOW = 0xFFFF00
CLR_WHITE = 0xFFFFFF

VOLTAGE_SCALE_LABELS = ("100 mV", "200 mV", "500 mV", "1 V", "2 V")
TIME_SCALE_LABELS = (
    "100 ms", "50 ms", "20 ms", "10 ms", "5 ms", "2 ms",
    "1 ms", "500 us", "200 us", "100 us", "50 us", "20 us",
)

TRIGGER_LABEL_POS = (5, 107)
VOLTS_LABEL_POS = (15, 10)
TIME_LABEL_POS = (80, 10)
CPU_LABEL_POS = (5, 117)


@dataclass(frozen=True)
class TextLabel:
    """A string to be drawn at a screen position."""

    text: str
    x: int
    y: int
    color: int = CLR_WHITE
    opaque: bool = True


def _hline(display: FrameBuffer, x1: int, x2: int, y: int, value: int) -> None:
    if not 0 <= y < display.height:
        return
    if x1 > x2:
        x1, x2 = x2, x1
    x1 = max(x1, 0)
    x2 = min(x2, display.width - 1)
    if x1 <= x2:
        display.line_draw_h(x1, x2, y, value)


def _vline(display: FrameBuffer, x: int, y1: int, y2: int, value: int) -> None:
    if not 0 <= x < display.width:
        return
    if y1 > y2:
        y1, y2 = y2, y1
    y1 = max(y1, 0)
    y2 = min(y2, display.height - 1)
    if y1 <= y2:
        display.line_draw_v(x, y1, y2, value)


def draw_grid(display: FrameBuffer) -> None:
    """Clear the screen to black and draw the blue division grid."""
    display.rect_fill(
        Rectangle(0, 0, display.width - 1, display.height - 1),
        color_translate(CLR_BLACK),
    )
    blue = color_translate(CLR_BLUE)
    for k in range(-4, 5):
        _hline(display, 0, GRID_EXTENT, Y_MID + k * PIXELS_PER_DIV, blue)
    for k in range(-4, 5):
        _vline(display, X_MID + k * PIXELS_PER_DIV, 0, GRID_EXTENT, blue)


def draw_line(display: FrameBuffer, x0: int, y0: int, x1: int, y1: int, value: int) -> None:
    """Draw a straight line between two points in a native colour, clipped to the screen."""
    if y0 == y1:
        _hline(display, x0, x1, y0, value)
        return
    if x0 == x1:
        _vline(display, x0, y0, y1, value)
        return

    steep = abs(y1 - y0) > abs(x1 - x0)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    dy = abs(y1 - y0)
    error = -(dx // 2)
    ystep = 1 if y0 < y1 else -1
    y = y0
    for x in range(x0, x1 + 1):
        px, py = (y, x) if steep else (x, y)
        if 0 <= px < display.width and 0 <= py < display.height:
            display.pixel_draw(px, py, value)
        error += dy
        if error > 0:
            y += ystep
            error -= dx


def _lookup(labels: Sequence[str], index: int, what: str) -> str:
    if not 0 <= index < len(labels):
        raise ValueError(f"invalid {what} setting: {index}")
    return labels[index]


def measurement_labels(settings, cpu_load: float) -> List[TextLabel]:
    """Return the trigger, scale and CPU load labels for the current settings."""
    labels: List[TextLabel] = []
    if settings.trigger_type == 0:
        labels.append(TextLabel("/ Trigger", *TRIGGER_LABEL_POS))
    elif settings.trigger_type == 1:
        labels.append(TextLabel("\\ Trigger", *TRIGGER_LABEL_POS))
    labels.append(TextLabel(
        _lookup(VOLTAGE_SCALE_LABELS, settings.volts_per_div, "volts per division"),
        *VOLTS_LABEL_POS,
    ))
    labels.append(TextLabel(
        _lookup(TIME_SCALE_LABELS, settings.time_scale, "time per division"),
        *TIME_LABEL_POS,
    ))
    labels.append(TextLabel(f"CPU Load: {cpu_load * 100:.2f}%", *CPU_LABEL_POS))
    return labels


def plot_data(display: FrameBuffer, data: Sequence[int], settings, cpu_load: float) -> List[TextLabel]:
    """Draw the grid and the yellow trace through ``data``; return the labels to show."""
    draw_grid(display)
    yellow = color_translate(CLR_YELLOW)
    points = list(data)
    for x, (prev, cur) in enumerate(zip(points, points[1:]), start=1):
        draw_line(display, x - 1, prev, x, cur, yellow)
    return measurement_labels(settings, cpu_load)