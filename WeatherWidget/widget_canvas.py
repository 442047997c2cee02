"""Canvas abstraction for the widget preview - swaps the PNG backend for an in-memory one in tests."""
from abc import ABC, abstractmethod
from typing import List, Tuple

from PIL import Image, ImageDraw, ImageFont

RGB = Tuple[int, int, int]


def hex_to_rgb(color: str) -> RGB:
    """Convert "#rrggbb" to an (r, g, b) tuple."""
    value = color.lstrip("#")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


def blend(top: RGB, bottom: RGB, ratio: float) -> RGB:
    return tuple(int(round(a + (b - a) * ratio)) for a, b in zip(top, bottom))


class WidgetCanvas(ABC):
    """Abstract drawing surface."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Get canvas width in pixels."""
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        """Get canvas height in pixels."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear the entire canvas (set all pixels to black)."""
        pass

    @abstractmethod
    def fill_gradient(self, top: RGB, bottom: RGB) -> None:
        """
        Fill the canvas with a vertical two-color gradient.

        Args:
            top: Color of the first row
            bottom: Color of the last row
        """
        pass

    @abstractmethod
    def draw_text(self, x: int, y: int, text: str, color: RGB, size: int = 12) -> None:
        """
        Draw text with its top-left corner at (x, y).

        Args:
            x: X position
            y: Y position
            text: Text to draw
            color: Text color
            size: Nominal font size in pixels
        """
        pass


class FakeCanvas(WidgetCanvas):
    """
    Fake canvas for testing - fills pixels in memory and records text.

    Useful for unit tests and development without Pillow output.
    """

    def __init__(self, width: int = 329, height: int = 155):
        self._width = width
        self._height = height
        self._pixels = [[(0, 0, 0) for _ in range(width)] for _ in range(height)]
        self.texts: List[Tuple[int, int, str, RGB, int]] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self) -> None:
        self._pixels = [[(0, 0, 0) for _ in range(self._width)]
                        for _ in range(self._height)]
        self.texts = []

    def fill_gradient(self, top: RGB, bottom: RGB) -> None:
        steps = max(self._height - 1, 1)
        self._pixels = [[blend(top, bottom, y / steps)] * self._width
                        for y in range(self._height)]

    def draw_text(self, x: int, y: int, text: str, color: RGB, size: int = 12) -> None:
        self.texts.append((x, y, text, color, size))

    def get_pixel(self, x: int, y: int) -> RGB:
        """Get pixel color at given coordinates (for testing)."""
        if 0 <= x < self._width and 0 <= y < self._height:
            return self._pixels[y][x]
        return (0, 0, 0)

    def text_lines(self) -> List[str]:
        """All drawn strings in drawing order (for testing)."""
        return [entry[2] for entry in self.texts]


class PILCanvas(WidgetCanvas):
    """
    Pillow-based canvas for rendering to PNG images.

    Drawing happens at 1x; save() scales the result up.
    """

    def __init__(self, width: int = 329, height: int = 155, scale: int = 2):
        self._width = width
        self._height = height
        self._scale = scale
        self._image = Image.new("RGB", (width, height), (0, 0, 0))
        self._draw = ImageDraw.Draw(self._image)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self) -> None:
        self._image = Image.new("RGB", (self._width, self._height), (0, 0, 0))
        self._draw = ImageDraw.Draw(self._image)

    def fill_gradient(self, top: RGB, bottom: RGB) -> None:
        steps = max(self._height - 1, 1)
        for y in range(self._height):
            self._draw.line([(0, y), (self._width - 1, y)], fill=blend(top, bottom, y / steps))

    def draw_text(self, x: int, y: int, text: str, color: RGB, size: int = 12) -> None:
        try:
            font = ImageFont.truetype("DejaVuSans.ttf", size)
        except OSError:
            font = ImageFont.load_default()
        self._draw.text((x, y), text, fill=color, font=font)

    def save(self, filename: str) -> None:
        """
        Save canvas to PNG file (scaled up for visibility).

        Args:
            filename: Output filename (e.g., "widget.png")
        """
        if self._scale > 1:
            scaled = self._image.resize(
                (self._width * self._scale, self._height * self._scale),
                Image.NEAREST
            )
            scaled.save(filename)
        else:
            self._image.save(filename)

    def get_image(self):
        """Get the PIL Image object (for advanced usage)."""
        return self._image
