"""Button debouncing, joystick-to-button conversion and auto-repeat."""

from typing import List, Tuple

BUTTON_COUNT = 5
"""Number of buttons, not counting joystick directions."""

BUTTON_AND_JOYSTICK_COUNT = 9
"""Number of buttons including the four joystick directions."""

BUTTON_SAMPLES_PRESSED = 2
"""Samples a button must read pressed before it counts as pressed."""

BUTTON_SAMPLES_RELEASED = 5
"""Samples a button must read released before it counts as released."""

BUTTON_PRESSED_STATE = BUTTON_SAMPLES_RELEASED * BUTTON_SAMPLES_PRESSED
BUTTON_STATE_INCREMENT = BUTTON_PRESSED_STATE // BUTTON_SAMPLES_PRESSED
BUTTON_STATE_DECREMENT = BUTTON_PRESSED_STATE // BUTTON_SAMPLES_RELEASED

BUTTON_SCAN_RATE = 200
"""Button scanning rate in Hz."""

BUTTON_AUTOREPEAT_INITIAL = 100
"""Samples held pressed before auto-repeat starts."""

BUTTON_AUTOREPEAT_NEXT = 10
"""Samples held pressed between repeats."""

JOYSTICK_UPPER_PRESS_THRESHOLD = 3595
JOYSTICK_UPPER_RELEASE_THRESHOLD = 3095
JOYSTICK_LOWER_PRESS_THRESHOLD = 500
JOYSTICK_LOWER_RELEASE_THRESHOLD = 1000

ADC_SAMPLING_RATE = 1_000_000
"""Desired ADC sampling rate in samples per second."""

CRYSTAL_FREQUENCY = 25_000_000
"""Crystal oscillator frequency in Hz."""

JOYSTICK_RIGHT = 5
JOYSTICK_LEFT = 6
JOYSTICK_UP = 7
JOYSTICK_DOWN = 8


def adc_clock_divisor(pll_frequency: int, sampling_rate: int = ADC_SAMPLING_RATE) -> int:
    """Return the smallest PLL divisor that keeps the ADC at or below ``sampling_rate``."""
    if pll_frequency <= 0:
        raise ValueError("PLL frequency must be positive")
    if sampling_rate <= 0:
        raise ValueError("sampling rate must be positive")
    return (pll_frequency - 1) // (16 * sampling_rate) + 1


def actual_sampling_rate(pll_frequency: int, divisor: int) -> int:
    """Return the sampling rate the ADC achieves with a given PLL divisor."""
    if divisor <= 0:
        raise ValueError("divisor must be positive")
    if pll_frequency < 0:
        raise ValueError("PLL frequency must not be negative")
    return pll_frequency // (16 * divisor)


class ButtonState:
    """Debounced button bitmap, one bit per button, bits 5..8 for joystick directions."""

    def __init__(self) -> None:
        self.buttons = 0
        self.joystick: Tuple[int, int] = (0, 0)
        self._debounce: List[int] = [0] * BUTTON_COUNT
        self._repeat: List[int] = [0] * BUTTON_AND_JOYSTICK_COUNT

    def debounce(self, raw: int) -> int:
        """Feed one sample of raw button bits and return the updated debounced bitmap."""
        for i, state in enumerate(self._debounce):
            mask = 1 << i
            if raw & mask:
                state += BUTTON_STATE_INCREMENT
                if state >= BUTTON_PRESSED_STATE:
                    state = BUTTON_PRESSED_STATE
                    self.buttons |= mask
            else:
                state -= BUTTON_STATE_DECREMENT
                if state <= 0:
                    state = 0
                    self.buttons &= ~mask
            self._debounce[i] = state
        return self.buttons

    def read_joystick(self, x: int, y: int) -> int:
        """Turn joystick ADC readings into direction bits with hysteresis."""
        self.joystick = (x, y)
        for value, high_bit, low_bit in ((x, JOYSTICK_RIGHT, JOYSTICK_LEFT),
                                         (y, JOYSTICK_UP, JOYSTICK_DOWN)):
            if value > JOYSTICK_UPPER_PRESS_THRESHOLD:
                self.buttons |= 1 << high_bit
            if value < JOYSTICK_UPPER_RELEASE_THRESHOLD:
                self.buttons &= ~(1 << high_bit)
            if value < JOYSTICK_LOWER_PRESS_THRESHOLD:
                self.buttons |= 1 << low_bit
            if value > JOYSTICK_LOWER_RELEASE_THRESHOLD:
                self.buttons &= ~(1 << low_bit)
        return self.buttons

    def auto_repeat(self) -> int:
        """Advance hold counters and return a bitmap of repeated presses."""
        presses = 0
        for i in range(BUTTON_AND_JOYSTICK_COUNT):
            mask = 1 << i
            self._repeat[i] = self._repeat[i] + 1 if self.buttons & mask else 0
            held = self._repeat[i]
            if (held >= BUTTON_AUTOREPEAT_INITIAL
                    and (held - BUTTON_AUTOREPEAT_INITIAL) % BUTTON_AUTOREPEAT_NEXT == 0):
                presses |= mask
        return presses