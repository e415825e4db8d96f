"""State of the 5x5 WS2812 LED matrix and the frames shown for each station mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

NUM_LEDS = 25
SIDE = 5

Color = tuple[int, int, int]
Frame = Sequence[Sequence[Color]]

_OFF: Color = (0, 0, 0)
_RED: Color = (150, 0, 0)
_GREEN: Color = (0, 150, 0)

# Rows top to bottom, colours as (r, g, b).
ALERT_FRAME: tuple[tuple[Color, ...], ...] = (
    (_OFF, _OFF, _RED, _OFF, _OFF),
    (_OFF, _OFF, _RED, _OFF, _OFF),
    (_OFF, _OFF, _RED, _OFF, _OFF),
    (_OFF, _OFF, _OFF, _OFF, _OFF),
    (_OFF, _OFF, _RED, _OFF, _OFF),
)

NORMAL_FRAME: tuple[tuple[Color, ...], ...] = (
    (_GREEN, _OFF, _OFF, _OFF, _GREEN),
    (_GREEN, _GREEN, _OFF, _OFF, _GREEN),
    (_GREEN, _OFF, _GREEN, _OFF, _GREEN),
    (_GREEN, _OFF, _OFF, _GREEN, _GREEN),
    (_GREEN, _OFF, _OFF, _OFF, _GREEN),
)


@dataclass
class Pixel:
    """One LED, stored in the GRB order the WS2812 expects."""

    g: int = 0
    r: int = 0
    b: int = 0


def get_index(x: int, y: int) -> int:
    """Map a matrix position to the LED's place in the serpentine chain."""
    if not (0 <= x < SIDE and 0 <= y < SIDE):
        raise ValueError(f"position ({x}, {y}) lies outside the {SIDE}x{SIDE} matrix")
    if y % 2 == 0:
        return 24 - (y * 5 + x)
    return 24 - (y * 5 + (4 - x))


def frame_for_mode(alert: bool) -> tuple[tuple[Color, ...], ...]:
    """Return the "!" frame in alert mode and the "N" frame otherwise."""
    return ALERT_FRAME if alert else NORMAL_FRAME


class LedMatrix:
    """Colour buffer for the LED chain; ``write`` receives each GRB byte stream."""

    def __init__(self, write: Callable[[bytes], None] | None = None) -> None:
        self.leds = [Pixel() for _ in range(NUM_LEDS)]
        self._write = write if write is not None else (lambda _data: None)

    def set_color(self, index: int, r: int, g: int, b: int) -> None:
        """Set the colour of the LED at ``index`` in the chain."""
        if not 0 <= index < len(self.leds):
            raise IndexError(f"LED index {index} out of range")
        for channel in (r, g, b):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"colour channel {channel} outside 0..255")
        self.leds[index] = Pixel(g=g, r=r, b=b)

    def clear(self) -> None:
        """Turn every LED off."""
        self.leds = [Pixel() for _ in self.leds]

    def grb_stream(self) -> Iterator[int]:
        """Yield the bytes sent to the chain: G, R, B for each LED in order."""
        for led in self.leds:
            yield led.g
            yield led.r
            yield led.b

    def show(self) -> bytes:
        """Send the current state to the chain and return the bytes sent."""
        data = bytes(self.grb_stream())
        self._write(data)
        return data

    def show_frame(self, frame: Frame) -> bytes:
        """Clear the matrix, draw a 5x5 frame of (r, g, b) rows and send it."""
        if len(frame) != SIDE or any(len(row) != SIDE for row in frame):
            raise ValueError(f"frame must be {SIDE}x{SIDE}")
        self.clear()
        for y, row in enumerate(frame):
            for x, (r, g, b) in enumerate(row):
                self.set_color(get_index(x, y), r, g, b)
        return self.show()