import pytest

from scopekit.bus import RESET_PULSE_US, RESET_RECOVERY_US, LcdBus
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
)
from scopekit.lcd import Crystalfontz128x128, Orientation


@pytest.fixture
def panel():
    return Crystalfontz128x128(LcdBus())


def test_init_command_sequence(panel):
    panel.init()
    assert panel.bus.commands == [
        CMD_SLPOUT,
        CMD_GAMSET,
        CMD_SETPWCTR,
        CMD_SETSTBA,
        CMD_COLMOD,
        CMD_MADCTL,
        CMD_NORON,
        CMD_CASET,
        CMD_RASET,
        CMD_RAMWR,
        CMD_DISPON,
    ]


def test_init_configuration_bytes(panel):
    panel.init()
    segments = panel.bus.segments
    assert segments[0] == (CMD_SLPOUT, b"")
    assert segments[1] == (CMD_GAMSET, bytes([0x04]))
    assert segments[2] == (CMD_SETPWCTR, bytes([0x0A, 0x14]))
    assert segments[3] == (CMD_SETSTBA, bytes([0x0A, 0x00]))
    assert segments[4] == (CMD_COLMOD, bytes([0x05]))
    assert segments[5] == (CMD_MADCTL, bytes([MADCTL_BGR]))
    assert segments[-1] == (CMD_DISPON, b"")


def test_init_sets_screen_state(panel):
    panel.init()
    assert panel.screen_width == LCD_HORIZONTAL_MAX
    assert panel.screen_height == LCD_VERTICAL_MAX
    assert panel.font_solid == 1
    assert panel.pen_solid == 0


def test_init_delays(panel):
    panel.init()
    expected = RESET_PULSE_US + RESET_RECOVERY_US + 120_000 + 10 + 10
    assert panel.bus.elapsed_us == expected


def test_init_flushes_blank_buffer(panel):
    panel.init()
    ramwr = [data for cmd, data in panel.bus.segments if cmd == CMD_RAMWR]
    assert len(ramwr) == 1
    assert len(ramwr[0]) == 2 * LCD_HORIZONTAL_MAX * LCD_VERTICAL_MAX
    assert set(ramwr[0]) == {0}


def test_flush_sends_low_byte_first(panel):
    panel.buffer.pixel_draw(0, 0, 0x1234)
    panel.buffer.pixel_draw(1, 0, 0xABCD)
    panel.flush()
    data = dict(panel.bus.segments)[CMD_RAMWR]
    assert data[:4] == bytes([0x34, 0x12, 0xCD, 0xAB])


def test_flush_covers_whole_panel_window(panel):
    panel.flush()
    segments = dict(panel.bus.segments)
    assert segments[CMD_CASET] == bytes([0, 2, 0, 129])
    assert segments[CMD_RASET] == bytes([0, 3, 0, 130])


@pytest.mark.parametrize(
    "orientation, dx, dy",
    [
        (Orientation.UP, 2, 3),
        (Orientation.LEFT, 3, 2),
        (Orientation.DOWN, 2, 1),
        (Orientation.RIGHT, 1, 2),
    ],
)
def test_draw_frame_offsets(panel, orientation, dx, dy):
    panel.set_orientation(orientation)
    panel.bus.clear()
    panel.set_draw_frame(10, 20, 30, 40)
    assert panel.bus.segments == [
        (CMD_CASET, bytes([0, 10 + dx, 0, 30 + dx])),
        (CMD_RASET, bytes([0, 20 + dy, 0, 40 + dy])),
    ]


def test_draw_frame_splits_high_byte(panel):
    panel.set_draw_frame(0x1FE, 0, 0x2FE, 0)
    caset = panel.bus.segments[0]
    assert caset == (CMD_CASET, bytes([0x02, 0x00, 0x03, 0x00]))


@pytest.mark.parametrize(
    "orientation, flags",
    [
        (Orientation.UP, MADCTL_MX | MADCTL_MY | MADCTL_BGR),
        (Orientation.LEFT, MADCTL_MY | MADCTL_MV | MADCTL_BGR),
        (Orientation.DOWN, MADCTL_BGR),
        (Orientation.RIGHT, MADCTL_MX | MADCTL_MV | MADCTL_BGR),
    ],
)
def test_set_orientation_madctl(panel, orientation, flags):
    panel.set_orientation(int(orientation))
    assert panel.orientation is orientation
    assert panel.bus.segments == [(CMD_MADCTL, bytes([flags]))]


def test_set_orientation_rejects_unknown(panel):
    with pytest.raises(ValueError):
        panel.set_orientation(7)
    assert panel.bus.transfers == []
    assert panel.orientation is Orientation.UP


def test_dimensions_follow_buffer(panel):
    assert (panel.width, panel.height) == (LCD_HORIZONTAL_MAX, LCD_VERTICAL_MAX)