# scopekit

Building blocks for a small digital oscilloscope with a 128x128 LCD,
written in plain Python with no third-party dependencies.

## What is in the package

- `scopekit.fft.KissFFT` is a mixed-radix complex FFT with radix 2, 3, 4
  and 5 butterflies and a generic butterfly for other primes. With
  `inverse=True` it computes the unscaled inverse transform.
  `KissFFT.transform(data, stride)` reads `nfft` samples from every
  `stride`-th item of `data`.
- `scopekit.factors` has `factorize(n)`, which splits a length into
  (radix, remaining length) stages. It also has `next_fast_size(n)` and
  `next_fast_size_real(n)`, which find sizes whose only prime factors are
  2, 3 and 5.
- `scopekit.framebuffer.FrameBuffer` is a 16-bit RAM frame buffer. Its
  drawing primitives are `pixel_draw`, `pixel_draw_multiple` (1, 4, 8 and
  16 bits per pixel), `line_draw_h`, `line_draw_v` and `rect_fill` with an
  inclusive `Rectangle`. `color_translate` converts 0xRRGGBB to
  byte-swapped RGB565.
- `scopekit.lcd.Crystalfontz128x128` drives an ST7735 panel through that
  frame buffer:
  - `init()` runs the start-up command sequence.
  - `set_orientation()` takes an `Orientation` value.
  - `set_draw_frame()` selects the RAM window.
  - `flush()` sends the whole buffer.
- `scopekit.bus.LcdBus` stands in for the SPI link. It records every
  transfer as `(is_command, byte)` and offers `transfers`, `commands` and
  `segments` views. It also adds up the time spent in `delay()`.
- `scopekit.graph` draws the screen:
  - `draw_grid` paints a black background with a blue grid, 20 pixels per
    division.
  - `draw_line` draws a clipped straight line.
  - `plot_data` draws the grid and a yellow trace, then returns the
    measurement labels.
  - `measurement_labels` returns the trigger, volts/div, time/div and CPU
    load labels as `TextLabel` values.
- `scopekit.buttons.ButtonState` handles the buttons:
  - `debounce(raw)` debounces five buttons.
  - `read_joystick(x, y)` turns joystick readings into direction bits 5 to
    8, with hysteresis.
  - `auto_repeat()` returns repeated presses for held buttons.

  The same module has `adc_clock_divisor` and `actual_sampling_rate`, which
  compute the ADC clock.
- `scopekit.timebase` provides `timer_load(setting, clock)` and
  `Timebase.select(setting)`. They map a time-per-division setting to a
  sampling timer period, or to free-running sampling when the setting is
  `FREE_RUNNING`.
- `scopekit.pll.pll_frequency` computes a PLL output frequency from a
  crystal frequency and the raw register fields.
- `scopekit.fifo.Fifo` is a fixed-size circular queue:
  - `put` returns `False` when the queue is full.
  - `get` raises `IndexError` when it is empty.
- `scopekit.cpuload.CpuLoadMeter` estimates load by counting busy-loop
  iterations. It compares those counts against a calibrated unloaded
  baseline.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Examples

FFT and sizes:

```python
from scopekit.fft import KissFFT
from scopekit.factors import factorize, next_fast_size

fft = KissFFT(8, inverse=False)
print(fft.transform([1, 0, 0, 0, 0, 0, 0, 0], 1))  # eight (1+0j) values

print(factorize(128))       # [(4, 32), (4, 8), (4, 2), (2, 1)]
print(next_fast_size(101))  # 108
```

Drawing and pushing a frame to the panel model:

```python
from types import SimpleNamespace

from scopekit.bus import LcdBus
from scopekit.graph import plot_data
from scopekit.lcd import Crystalfontz128x128, Orientation

bus = LcdBus()
lcd = Crystalfontz128x128(bus)
lcd.init()
lcd.set_orientation(Orientation.UP)

settings = SimpleNamespace(trigger_type=0, volts_per_div=3, time_scale=11)
labels = plot_data(lcd.buffer, [64] * 128, settings, 0.25)
print([label.text for label in labels])
# ['/ Trigger', '1 V', '20 us', 'CPU Load: 25.00%']

bus.clear()
lcd.flush()
print(len(bus.transfers))  # 2 window commands + 8 bytes + RAMWR + 2 bytes per pixel
```

Buttons:

```python
from scopekit.buttons import ButtonState

state = ButtonState()
state.debounce(0b00001)
print(state.debounce(0b00001) & 1)  # 1: pressed after two samples
print(state.read_joystick(4000, 2000) >> 5 & 1)  # 1: joystick right
```

Clocks:

```python
from scopekit.pll import pll_frequency
from scopekit.buttons import adc_clock_divisor, actual_sampling_rate

print(pll_frequency(25_000_000, 96, 0, 3, 4))  # 120000000
divisor = adc_clock_divisor(480_000_000)
print(divisor, actual_sampling_rate(480_000_000, divisor))  # 30 1000000
```

## What the package does not do

The package has no command-line program and no application that ties the
parts together. The following are not included:

- capturing ADC samples into a ring buffer;
- searching for a rising or falling trigger edge;
- scaling samples to screen rows for a volts-per-division setting;
- turning samples into a windowed dB spectrum;
- mapping button presses to setting changes.

The FFT, the drawing code and the button handling are available for a
caller to combine. `graph.measurement_labels` and `graph.plot_data` accept
any settings object with `trigger_type`, `volts_per_div` and `time_scale`
attributes. Text labels come back as data: the package does not render
fonts into the frame buffer.

## Running the tests

```
pytest
```