"""Layout and rendering logic for the widget preview - pure functions for testability."""
from typing import List, Union
from weather_data import DisplayModel, StatusDisplay
from widget_canvas import WidgetCanvas, hex_to_rgb

WHITE = (255, 255, 255)
LABEL_GREY = (221, 221, 221)
TIME_GREY = (234, 234, 234)
ERROR_RED = (255, 59, 48)
STATUS_BACKGROUND = ("#1c1c1e", "#1c1c1e")

# Short glyphs stand in for the platform icon set on the preview
ICON_GLYPHS = {
    "storm": "STRM",
    "snow": "SNOW",
    "rain": "RAIN",
    "fog": "FOG",
    "overcast": "OVC",
    "cloud-day": "CLD",
    "cloud-night": "CLD",
    "clear-day": "SUN",
    "clear-night": "MOON",
}

# Rough advance per character at size 12, used to place right-aligned text
CHAR_WIDTH = 7


class DrawOp:
    """Represents a drawing operation (for testing/layout calculation)."""
    def __init__(self, op_type: str, **kwargs):
        self.op_type = op_type
        self.kwargs = kwargs

    def __repr__(self):
        return f"DrawOp({self.op_type!r}, {self.kwargs!r})"


def _text(x: int, y: int, text: str, color=WHITE, size: int = 12) -> DrawOp:
    return DrawOp("text", x=x, y=y, text=text, color=color, size=size)


def calculate_layout(
    model: Union[DisplayModel, StatusDisplay],
    width: int = 329,
    height: int = 155
) -> List[DrawOp]:
    """
    Calculate layout operations for a display model.

    This is a pure function that returns drawing operations,
    making it easy to test without actual rendering.

    Args:
        model: DisplayModel or StatusDisplay to lay out
        width: Canvas width
        height: Canvas height

    Returns:
        List of DrawOp objects representing what to draw
    """
    pad_x = 16
    if isinstance(model, StatusDisplay):
        ops = [DrawOp("gradient", top=hex_to_rgb(STATUS_BACKGROUND[0]),
                      bottom=hex_to_rgb(STATUS_BACKGROUND[1]))]
        ops.append(_text(pad_x, 16, model.title, ERROR_RED, 16))
        if model.message:
            ops.append(_text(pad_x, 40, model.message, WHITE, 12))
        return ops

    top, bottom = model.color_scheme.colors
    ops = [DrawOp("gradient", top=hex_to_rgb(top), bottom=hex_to_rgb(bottom))]

    # Header: location left, update time right
    ops.append(_text(pad_x, 12, model.location_label, WHITE, 13))
    time_x = max(pad_x, width - pad_x - len(model.updated_label) * CHAR_WIDTH)
    ops.append(_text(time_x, 12, model.updated_label, TIME_GREY, 11))

    # Icon glyph and big temperature
    ops.append(_text(pad_x, 38, ICON_GLYPHS.get(model.icon, "?"), WHITE, 16))
    ops.append(_text(pad_x + 50, 30, model.temperature, WHITE, 32))
    ops.append(_text(pad_x, 70, model.condition, WHITE, 14))

    # Detail row: Feels / Hum / Wind in three columns
    column = (width - 2 * pad_x) // 3
    for i, (label, value) in enumerate((
        ("Feels", model.feels_like),
        ("Hum", model.humidity),
        ("Wind", model.wind),
    )):
        x = pad_x + i * column
        ops.append(_text(x, 92, label, LABEL_GREY, 10))
        ops.append(_text(x, 104, value, WHITE, 12))

    # Forecast mini-row
    if model.days:
        slot = (width - 2 * pad_x) // len(model.days)
        for i, day in enumerate(model.days):
            x = pad_x + i * slot
            ops.append(_text(x, 122, f"{ICON_GLYPHS.get(day.icon, '?')} {day.label}", WHITE, 9))
            ops.append(_text(x, 134, day.temperatures, WHITE, 9))

    return ops


def render_display(canvas: WidgetCanvas, model: Union[DisplayModel, StatusDisplay]) -> List[DrawOp]:
    """
    Render a display model onto a canvas.

    Args:
        canvas: WidgetCanvas instance (PNG or fake)
        model: Model to draw

    Returns:
        The executed drawing operations
    """
    canvas.clear()
    ops = calculate_layout(model, canvas.width, canvas.height)
    for op in ops:
        if op.op_type == "gradient":
            canvas.fill_gradient(op.kwargs["top"], op.kwargs["bottom"])
        elif op.op_type == "text":
            canvas.draw_text(
                op.kwargs["x"],
                op.kwargs["y"],
                op.kwargs["text"],
                op.kwargs["color"],
                op.kwargs["size"]
            )
    return ops
