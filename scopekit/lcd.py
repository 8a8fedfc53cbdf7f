"""Panel driver that pushes the RAM frame buffer to a 128x128 display controller."""

from enum import IntEnum
from typing import Dict, Tuple

from scopekit.bus import LcdBus
from scopekit.framebuffer import (
    CMD_CASET,
    CMD_COLMOD,
    CMD_DISPON,
    CMD_GAMSET,
    CMD_MADCTL,
    CMD_NORON,
    CMD_RAMWR,
    CMD_RASET,
    CMD_SETPWCTR,
    CMD_SETSTBA,
    CMD_SLPOUT,
    LCD_HORIZONTAL_MAX,
    LCD_VERTICAL_MAX,
    MADCTL_BGR,
    MADCTL_MV,
    MADCTL_MX,
    MADCTL_MY,
    FrameBuffer,
)

SLEEP_OUT_DELAY_US = 120_000
SETTLE_DELAY_US = 10


class Orientation(IntEnum):
    """Which way up the panel is mounted."""

    UP = 0
    LEFT = 1
    DOWN = 2
    RIGHT = 3


# Controller RAM is larger than the visible glass; these offsets line them up.
_FRAME_OFFSETS: Dict[Orientation, Tuple[int, int]] = {
    Orientation.UP: (2, 3),
    Orientation.LEFT: (3, 2),
    Orientation.DOWN: (2, 1),
    Orientation.RIGHT: (1, 2),
}

_MADCTL_FLAGS: Dict[Orientation, int] = {
    Orientation.UP: MADCTL_MX | MADCTL_MY | MADCTL_BGR,
    Orientation.LEFT: MADCTL_MY | MADCTL_MV | MADCTL_BGR,
    Orientation.DOWN: MADCTL_BGR,
    Orientation.RIGHT: MADCTL_MX | MADCTL_MV | MADCTL_BGR,
}


class Crystalfontz128x128:
    """A 128x128 panel drawn through a local frame buffer and flushed over ``bus``."""

    def __init__(self, bus: LcdBus) -> None:
        self.bus = bus
        self.buffer = FrameBuffer(LCD_HORIZONTAL_MAX, LCD_VERTICAL_MAX)
        self.orientation = Orientation.UP
        self.screen_width = 0
        self.screen_height = 0
        self.pen_solid = 0
        self.font_solid = 0
        self.flag_read = 0
        self.touch_trim = 0

    @property
    def width(self) -> int:
        """Width of the drawable area in pixels."""
        return self.buffer.width

    @property
    def height(self) -> int:
        """Height of the drawable area in pixels."""
        return self.buffer.height

    def _command(self, command: int, *data: int) -> None:
        self.bus.write_command(command)
        for value in data:
            self.bus.write_data(value)

    def init(self) -> None:
        """Wake the controller, configure it, show the frame buffer and turn the display on."""
        self.bus.port_init()
        self.bus.spi_init()

        self._command(CMD_SLPOUT)
        self.bus.delay(SLEEP_OUT_DELAY_US)
        self._command(CMD_GAMSET, 0x04)
        self._command(CMD_SETPWCTR, 0x0A, 0x14)
        self._command(CMD_SETSTBA, 0x0A, 0x00)
        self._command(CMD_COLMOD, 0x05)
        self.bus.delay(SETTLE_DELAY_US)
        self._command(CMD_MADCTL, MADCTL_BGR)
        self._command(CMD_NORON)

        self.screen_width = LCD_HORIZONTAL_MAX
        self.screen_height = LCD_VERTICAL_MAX
        self.pen_solid = 0
        self.font_solid = 1
        self.flag_read = 0
        self.touch_trim = 0

        self.flush()

        self.bus.delay(SETTLE_DELAY_US)
        self._command(CMD_DISPON)

    def set_draw_frame(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Select the controller RAM window (inclusive) that following pixel data fills."""
        dx, dy = _FRAME_OFFSETS.get(self.orientation, (0, 0))
        x0, x1 = x0 + dx, x1 + dx
        y0, y1 = y0 + dy, y1 + dy
        self._command(CMD_CASET, x0 >> 8, x0, x1 >> 8, x1)
        self._command(CMD_RASET, y0 >> 8, y0, y1 >> 8, y1)

    def set_orientation(self, orientation: int) -> None:
        """Set the scan direction of the panel."""
        try:
            chosen = Orientation(orientation)
        except ValueError:
            raise ValueError(f"invalid orientation: {orientation}") from None
        self.orientation = chosen
        self._command(CMD_MADCTL, _MADCTL_FLAGS[chosen])

    def flush(self) -> None:
        """Copy the whole frame buffer to the panel, low byte of each pixel first."""
        self.set_draw_frame(0, 0, self.buffer.width - 1, self.buffer.height - 1)
        self.bus.write_command(CMD_RAMWR)
        for pixel in self.buffer:
            self.bus.write_data(pixel)
            self.bus.write_data(pixel >> 8)