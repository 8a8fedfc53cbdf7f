"""Oscilloscope building blocks: mixed-radix FFT, button handling, timebase and clock helpers, and a 128x128 LCD frame buffer and panel model."""

__version__ = "0.1.0"