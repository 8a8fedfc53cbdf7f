"""Recording model of the SPI link and control lines that drive the LCD panel."""

from typing import Dict, List, Optional, Set, Tuple

SYSTEM_CLOCK = 120_000_000
"""System clock speed in Hz."""

SSI_CLOCK = 15_000_000
"""SPI clock speed in Hz."""

SSI_DATA_WIDTH = 8
"""Bits per SPI frame."""

DELAY_LOOPS_PER_US = 40
"""Busy-wait loop iterations that make up one microsecond of delay."""

RESET_PULSE_US = 20
"""How long the reset line is held active during SPI start-up."""

RESET_RECOVERY_US = 120_000
"""How long to wait after releasing reset before talking to the panel."""

PINS: Dict[str, Tuple[str, int]] = {
    "SCK": ("Q", 0),
    "MOSI": ("Q", 2),
    "RST": ("A", 7),
    "CS": ("P", 3),
    "DC": ("K", 7),
}
"""Port letter and pin number of every line connected to the panel."""

Transfer = Tuple[bool, int]


class LcdBus:
    """Byte-level link to the panel that records every transfer it makes.

    Each transfer is kept as ``(is_command, byte)``.  Commands are sent with
    the data/command line low and data bytes with it high, as on the wire.
    """

    def __init__(self) -> None:
        self.configured_pins: Set[str] = set()
        self.spi_enabled = False
        self.chip_selected = False
        self.data_mode = True
        self.in_reset = False
        self.elapsed_us = 0
        self.delay_loops = 0
        self._transfers: List[Transfer] = []

    def port_init(self) -> None:
        """Configure the clock, data, reset, data/command and chip-select lines."""
        self.configured_pins.update(PINS)

    def spi_init(self) -> None:
        """Enable the SPI port, set the control lines and pulse the panel reset."""
        self.spi_enabled = True
        self.chip_selected = True
        self.data_mode = True
        self.in_reset = True
        self.delay(RESET_PULSE_US)
        self.in_reset = False
        self.delay(RESET_RECOVERY_US)

    def write_command(self, command: int) -> None:
        """Send one command byte with the data/command line held low."""
        self.data_mode = False
        self._transfers.append((True, command & 0xFF))
        self.data_mode = True

    def write_data(self, data: int) -> None:
        """Send one data byte."""
        self._transfers.append((False, data & 0xFF))

    def delay(self, microseconds: int) -> None:
        """Wait for the given number of microseconds."""
        if microseconds < 0:
            raise ValueError("delay must not be negative")
        self.elapsed_us += microseconds
        self.delay_loops += microseconds * DELAY_LOOPS_PER_US

    def clear(self) -> None:
        """Forget all recorded transfers and accumulated delay."""
        self._transfers.clear()
        self.elapsed_us = 0
        self.delay_loops = 0

    @property
    def transfers(self) -> List[Transfer]:
        """Every transfer so far, oldest first, as ``(is_command, byte)``."""
        return list(self._transfers)

    @property
    def commands(self) -> List[int]:
        """The command bytes sent so far, in order."""
        return [value for is_command, value in self._transfers if is_command]

    @property
    def segments(self) -> List[Tuple[Optional[int], bytes]]:
        """Transfers grouped as ``(command, data that followed it)``.

        Data sent before any command is grouped under ``None``.
        """
        groups: List[Tuple[Optional[int], bytearray]] = []
        for is_command, value in self._transfers:
            if is_command:
                groups.append((value, bytearray()))
            else:
                if not groups:
                    groups.append((None, bytearray()))
                groups[-1][1].append(value)
        return [(command, bytes(payload)) for command, payload in groups]