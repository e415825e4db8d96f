"""Frame buffer and command stream for an SSD1306 monochrome OLED display."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

from .font import glyph

WIDTH = 128
HEIGHT = 64

DATA_PREFIX = 0x40
COMMAND_PREFIX = 0x80

Writer = Callable[[int, bytes], None]


class Command(IntEnum):
    """SSD1306 command opcodes."""

    SET_CONTRAST = 0x81
    SET_ENTIRE_ON = 0xA4
    SET_NORM_INV = 0xA6
    SET_DISP = 0xAE
    SET_MEM_ADDR = 0x20
    SET_COL_ADDR = 0x21
    SET_PAGE_ADDR = 0x22
    SET_DISP_START_LINE = 0x40
    SET_SEG_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_OUT_DIR = 0xC0
    SET_DISP_OFFSET = 0xD3
    SET_COM_PIN_CFG = 0xDA
    SET_DISP_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_VCOM_DESEL = 0xDB
    SET_CHARGE_PUMP = 0x8D


class SSD1306:
    """Display state with a vertically addressed RAM buffer.

    ``write`` is called as ``write(address, data)`` for every bus transfer.
    """

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        external_vcc: bool = False,
        address: int = 0x3C,
        write: Writer | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.pages = height // 8
        self.address = address
        self.external_vcc = external_vcc
        self._write: Writer = write if write is not None else (lambda _addr, _data: None)
        self.bufsize = self.pages * self.width + 1
        self.ram_buffer = bytearray(self.bufsize)
        self.ram_buffer[0] = DATA_PREFIX

    def config(self) -> None:
        """Send the power-up configuration sequence."""
        sequence = [
            Command.SET_DISP | 0x00,
            Command.SET_MEM_ADDR, 0x01,
            Command.SET_DISP_START_LINE | 0x00,
            Command.SET_SEG_REMAP | 0x01,
            Command.SET_MUX_RATIO, HEIGHT - 1,
            Command.SET_COM_OUT_DIR | 0x08,
            Command.SET_DISP_OFFSET, 0x00,
            Command.SET_COM_PIN_CFG, 0x12,
            Command.SET_DISP_CLK_DIV, 0x80,
            Command.SET_PRECHARGE, 0xF1,
            Command.SET_VCOM_DESEL, 0x30,
            Command.SET_CONTRAST, 0xFF,
            Command.SET_ENTIRE_ON,
            Command.SET_NORM_INV,
            Command.SET_CHARGE_PUMP, 0x14,
            Command.SET_DISP | 0x01,
        ]
        for cmd in sequence:
            self.command(cmd)

    def command(self, command: int) -> None:
        """Send a single command byte."""
        self._write(self.address, bytes([COMMAND_PREFIX, int(command) & 0xFF]))

    def send_data(self) -> None:
        """Push the whole RAM buffer to the display."""
        for cmd in (
            Command.SET_COL_ADDR, 0, self.width - 1,
            Command.SET_PAGE_ADDR, 0, self.pages - 1,
        ):
            self.command(cmd)
        self._write(self.address, bytes(self.ram_buffer))

    @staticmethod
    def _locate(x: int, y: int) -> tuple[int, int]:
        x &= 0xFF
        y &= 0xFF
        return (y >> 3) + (x << 3) + 1, y & 0b111

    def pixel(self, x: int, y: int, value) -> None:
        """Set or clear one pixel; raises IndexError outside the buffer."""
        index, bit = self._locate(x, y)
        if index >= self.bufsize:
            raise IndexError(f"pixel ({x}, {y}) lies outside the display buffer")
        if value:
            self.ram_buffer[index] |= 1 << bit
        else:
            self.ram_buffer[index] &= ~(1 << bit) & 0xFF

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether a pixel is lit."""
        index, bit = self._locate(x, y)
        if index >= self.bufsize:
            raise IndexError(f"pixel ({x}, {y}) lies outside the display buffer")
        return bool(self.ram_buffer[index] & (1 << bit))

    def fill(self, value) -> None:
        """Set every pixel to ``value``."""
        for y in range(self.height):
            for x in range(self.width):
                self.pixel(x, y, value)

    def rect(self, top: int, left: int, width: int, height: int, value, fill) -> None:
        """Draw a rectangle outline, optionally filling its interior."""
        for x in range(left, left + width):
            self.pixel(x, top, value)
            self.pixel(x, top + height - 1, value)
        for y in range(top, top + height):
            self.pixel(left, y, value)
            self.pixel(left + width - 1, y, value)
        if fill:
            for x in range(left + 1, left + width - 1):
                for y in range(top + 1, top + height - 1):
                    self.pixel(x, y, value)

    def line(self, x0: int, y0: int, x1: int, y1: int, value) -> None:
        """Draw a straight line with Bresenham's algorithm."""
        x0, y0, x1, y1 = x0 & 0xFF, y0 & 0xFF, x1 & 0xFF, y1 & 0xFF
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.pixel(x0, y0, value)
            if x0 == x1 and y0 == y1:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x0 = (x0 + sx) & 0xFF
            if e2 < dx:
                err += dx
                y0 = (y0 + sy) & 0xFF

    def hline(self, x0: int, x1: int, y: int, value) -> None:
        """Draw a horizontal line from ``x0`` to ``x1`` inclusive."""
        for x in range(x0, x1 + 1):
            self.pixel(x, y, value)

    def vline(self, x: int, y0: int, y1: int, value) -> None:
        """Draw a vertical line from ``y0`` to ``y1`` inclusive."""
        for y in range(y0, y1 + 1):
            self.pixel(x, y, value)

    def draw_char(self, c: str, x: int, y: int) -> None:
        """Draw one 8x8 character with its top-left corner at (x, y)."""
        for i, column in enumerate(glyph(c)):
            for j in range(8):
                self.pixel(x + i, y + j, column & (1 << j))

    def draw_string(self, text: str, x: int, y: int) -> None:
        """Draw text, wrapping to the next row and stopping at the bottom edge."""
        for c in text:
            self.draw_char(c, x, y)
            x = (x + 8) & 0xFF
            if x + 8 >= self.width:
                x = 0
                y = (y + 8) & 0xFF
            if y + 8 >= self.height:
                break