"""In-memory 16-bit frame buffer for a 128x128 panel and its drawing primitives."""

from dataclasses import dataclass
from typing import Iterator, List, Sequence

LCD_VERTICAL_MAX = 128
LCD_HORIZONTAL_MAX = 128

CMD_NOP = 0x00
CMD_SWRESET = 0x01
CMD_RDDID = 0x04
CMD_RDDST = 0x09
CMD_SLPIN = 0x10
CMD_SLPOUT = 0x11
CMD_PTLON = 0x12
CMD_NORON = 0x13
CMD_INVOFF = 0x20
CMD_INVON = 0x21
CMD_GAMSET = 0x26
CMD_DISPOFF = 0x28
CMD_DISPON = 0x29
CMD_CASET = 0x2A
CMD_RASET = 0x2B
CMD_RAMWR = 0x2C
CMD_RGBSET = 0x2D
CMD_RAMRD = 0x2E
CMD_PTLAR = 0x30
CMD_MADCTL = 0x36
CMD_COLMOD = 0x3A
CMD_SETPWCTR = 0xB1
CMD_SETDISPL = 0xB2
CMD_FRMCTR3 = 0xB3
CMD_SETCYC = 0xB4
CMD_SETBGP = 0xB5
CMD_SETVCOM = 0xB6
CMD_SETSTBA = 0xC0
CMD_SETID = 0xC3
CMD_GETHID = 0xD0
CMD_SETGAMMA = 0xE0

MADCTL_MY = 0x80
MADCTL_MX = 0x40
MADCTL_MV = 0x20
MADCTL_ML = 0x10
MADCTL_BGR = 0x08
MADCTL_MH = 0x04


@dataclass(frozen=True)
class Rectangle:
    """An inclusive rectangle: both minimum and maximum edges are drawn."""

    x_min: int
    y_min: int
    x_max: int
    y_max: int


def color_translate(value: int) -> int:
    """Convert a 24-bit 0xRRGGBB colour to byte-swapped RGB565."""
    rgb565 = (
        ((value & 0x00F80000) >> 8)
        | ((value & 0x0000FC00) >> 5)
        | ((value & 0x000000F8) >> 3)
    )
    return (rgb565 >> 8) | ((rgb565 << 8) & 0xFF00)


class FrameBuffer:
    """Row-major buffer of 16-bit native pixel values, initially all zero."""

    def __init__(self, width: int = LCD_HORIZONTAL_MAX, height: int = LCD_VERTICAL_MAX) -> None:
        if width < 1 or height < 1:
            raise ValueError("frame buffer dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels: List[int] = [0] * (width * height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        return y * self.width + x

    def __getitem__(self, position) -> int:
        x, y = position
        return self._pixels[self._offset(x, y)]

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._pixels))

    def __len__(self) -> int:
        return len(self._pixels)

    @property
    def rows(self) -> List[List[int]]:
        """A copy of the buffer as a list of rows."""
        w = self.width
        return [self._pixels[y * w:(y + 1) * w] for y in range(self.height)]

    def pixel_draw(self, x: int, y: int, value: int) -> None:
        """Set one pixel to a native colour value."""
        self._pixels[self._offset(x, y)] = value & 0xFFFF

    def pixel_draw_multiple(
        self,
        x: int,
        y: int,
        x0: int,
        count: int,
        bpp: int,
        data: Sequence[int],
        palette: Sequence[int],
    ) -> None:
        """Draw ``count`` consecutive pixels starting at (x, y) from packed image data.

        For 1 bit per pixel the palette holds native colours and ``x0`` is the
        first bit (0..7, most significant first).  For 4 and 8 bits per pixel
        the palette holds 24-bit RGB colours; for 4 bits ``x0`` odd starts at
        the low nibble of the first byte.  For 16 bits per pixel ``data`` holds
        little-endian native values and the palette is unused.  Pixels past the
        end of a row continue on the next row.
        """
        if count < 0:
            raise ValueError("pixel count must not be negative")
        start = self._offset(x, y)
        colors = list(self._decode(x0, count, bpp, data, palette))
        end = start + len(colors)
        if end > len(self._pixels):
            raise IndexError("pixel run extends past the end of the buffer")
        self._pixels[start:end] = colors

    @staticmethod
    def _decode(
        x0: int, count: int, bpp: int, data: Sequence[int], palette: Sequence[int]
    ) -> Iterator[int]:
        if bpp == 1:
            if not 0 <= x0 < 8:
                raise ValueError("bit offset must be in 0..7")
            for bit in range(x0, x0 + count):
                byte = data[bit >> 3]
                yield palette[(byte >> (7 - (bit & 7))) & 1] & 0xFFFF
        elif bpp == 4:
            first = x0 & 1
            for nibble in range(first, first + count):
                byte = data[nibble >> 1]
                index = (byte >> 4) if nibble % 2 == 0 else (byte & 0x0F)
                yield color_translate(palette[index])
        elif bpp == 8:
            for index in data[:count]:
                yield color_translate(palette[index])
            if len(data) < count:
                raise IndexError("not enough pixel data")
        elif bpp == 16:
            raw = bytes(data)
            if len(raw) < 2 * count:
                raise IndexError("not enough pixel data")
            for i in range(count):
                yield int.from_bytes(raw[2 * i:2 * i + 2], "little")
        else:
            raise ValueError(f"unsupported bits per pixel: {bpp}")

    def _fill_span(self, y: int, x1: int, x2: int, value: int) -> None:
        if x1 & 1:
            self._pixels[self._offset(x1, y)] = value & 0xFFFF
            x1 += 1
        if not x2 & 1:
            self._pixels[self._offset(x2, y)] = value & 0xFFFF
            x2 -= 1
        fill = (value | (value << 16)) & 0xFFFFFFFF
        low, high = fill & 0xFFFF, fill >> 16
        for x in range(x1, x2, 2):
            self._pixels[self._offset(x, y)] = low
            self._pixels[self._offset(x + 1, y)] = high

    def line_draw_h(self, x1: int, x2: int, y: int, value: int) -> None:
        """Draw a horizontal line from x1 to x2 inclusive."""
        self._fill_span(y, x1, x2, value)

    def line_draw_v(self, x: int, y1: int, y2: int, value: int) -> None:
        """Draw a vertical line from y1 to y2 inclusive."""
        for y in range(y1, y2 + 1):
            self._pixels[self._offset(x, y)] = value & 0xFFFF

    def rect_fill(self, rect: Rectangle, value: int) -> None:
        """Fill an inclusive rectangle."""
        for y in range(rect.y_min, rect.y_max + 1):
            self._fill_span(y, rect.x_min, rect.x_max, value)