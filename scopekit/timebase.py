"""Sampling timebase: maps a time-per-division setting to ADC trigger timer loads."""

import struct
from enum import Enum
from typing import Tuple

SYSTEM_CLOCK = 120_000_000
"""Clock that drives the sampling timer, in Hz."""

SAMPLE_PERIODS: Tuple[float, ...] = (
    5e-3, 2.5e-3, 1e-3, 500e-6, 250e-6, 100e-6, 50e-6, 25e-6, 10e-6, 5e-6, 2.5e-6,
)
"""Seconds between samples for each timer-driven setting (20 samples per division)."""

FREE_RUNNING = len(SAMPLE_PERIODS)
"""Setting in which the ADC samples continuously instead of on the timer."""


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class TriggerSource(Enum):
    """What starts each ADC conversion."""

    ALWAYS = "always"
    TIMER = "timer"


def timer_load(setting: int, clock: int = SYSTEM_CLOCK) -> int:
    """Return the timer period in clock ticks for a timer-driven setting."""
    if not 0 <= setting < len(SAMPLE_PERIODS):
        raise ValueError(f"no timer period for setting {setting}")
    return int(_f32(_f32(SAMPLE_PERIODS[setting]) * _f32(clock)))


class Timebase:
    """State of the ADC trigger source and its periodic timer."""

    def __init__(self, clock: int = SYSTEM_CLOCK) -> None:
        if clock <= 0:
            raise ValueError("clock must be positive")
        self.clock = clock
        self.load = timer_load(FREE_RUNNING - 1, clock)
        self.timer_enabled = True
        self.setting = FREE_RUNNING
        self.trigger = TriggerSource.ALWAYS
        self.sequence_enabled = True

    def select(self, setting: int) -> None:
        """Switch sampling to ``setting``; the free-running setting leaves the timer alone."""
        if not 0 <= setting <= FREE_RUNNING:
            raise ValueError(f"invalid timebase setting: {setting}")
        if setting == FREE_RUNNING:
            self.trigger = TriggerSource.ALWAYS
        else:
            self.trigger = TriggerSource.TIMER
            self.timer_enabled = False
            self.load = timer_load(setting, self.clock)
            self.timer_enabled = True
        self.setting = setting
        self.sequence_enabled = True