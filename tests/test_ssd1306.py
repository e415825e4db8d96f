import pytest

from chuvalerta.font import glyph
from chuvalerta.ssd1306 import SSD1306, Command


class Recorder:
    def __init__(self):
        self.writes = []

    def __call__(self, address, data):
        self.writes.append((address, bytes(data)))


@pytest.fixture
def bus():
    return Recorder()


@pytest.fixture
def display(bus):
    return SSD1306(128, 64, False, 0x3C, bus)


def lit_count(d):
    return sum(d.get_pixel(x, y) for x in range(d.width) for y in range(d.height))


def matches_glyph(d, char, x, y):
    cols = glyph(char)
    return all(
        d.get_pixel(x + i, y + j) == bool(cols[i] & (1 << j))
        for i in range(8)
        for j in range(8)
    )


def test_buffer_layout(display):
    assert display.pages == 8
    assert len(display.ram_buffer) == 1025
    assert display.ram_buffer[0] == 0x40
    assert lit_count(display) == 0


def test_command_wire_bytes(display, bus):
    display.command(Command.SET_CONTRAST)
    display.command(display.width - 1)
    assert bus.writes == [
        (0x3C, bytes([0x80, Command.SET_CONTRAST])),
        (0x3C, bytes([0x80, display.width - 1])),
    ]
    assert bus.writes[0][1] == bytes([0x80, 0x81])
    assert lit_count(display) == 0


def test_config_sequence(display, bus):
    display.config()
    sent = [data[1] for _, data in bus.writes]
    assert all(addr == 0x3C and data[0] == 0x80 for addr, data in bus.writes)
    assert sent == [
        Command.SET_DISP | 0x00,
        Command.SET_MEM_ADDR, 0x01,
        Command.SET_DISP_START_LINE | 0x00,
        Command.SET_SEG_REMAP | 0x01,
        Command.SET_MUX_RATIO, display.height - 1,
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
    assert display.height - 1 == 63
    assert lit_count(display) == 0


def test_send_data(display, bus):
    display.pixel(5, 5, True)
    display.send_data()
    commands = [data[1] for _, data in bus.writes[:-1]]
    assert commands == [
        Command.SET_COL_ADDR, 0, display.width - 1,
        Command.SET_PAGE_ADDR, 0, display.pages - 1,
    ]
    assert bus.writes[-1] == (0x3C, bytes(display.ram_buffer))


def test_pixel_round_trip(display):
    display.pixel(10, 20, True)
    assert display.get_pixel(10, 20) is True
    assert lit_count(display) == 1
    display.pixel(10, 20, False)
    assert display.get_pixel(10, 20) is False
    assert lit_count(display) == 0


def test_pixel_outside_buffer(display):
    with pytest.raises(IndexError):
        display.pixel(200, 0, True)


def test_fill(display):
    display.fill(True)
    assert display.ram_buffer[0] == 0x40
    assert all(b == 0xFF for b in display.ram_buffer[1:])
    display.fill(False)
    assert lit_count(display) == 0


def test_rect_outline(display):
    display.rect(0, 0, 127, 63, True, False)
    for x, y in [(0, 0), (126, 0), (0, 62), (126, 62), (60, 0), (0, 30)]:
        assert display.get_pixel(x, y)
    assert not display.get_pixel(1, 1)
    assert not display.get_pixel(127, 0)


def test_rect_filled(display):
    display.rect(2, 3, 4, 5, True, True)
    assert lit_count(display) == 4 * 5
    assert all(display.get_pixel(x, y) for x in range(3, 7) for y in range(2, 7))


def test_horizontal_line(display):
    display.line(1, 12, 126, 12, True)
    assert all(display.get_pixel(x, 12) for x in range(1, 127))
    assert lit_count(display) == 126


def test_line_direction_independent(bus):
    a = SSD1306(128, 64, False, 0x3C, bus)
    b = SSD1306(128, 64, False, 0x3C, bus)
    a.line(0, 0, 7, 7, True)
    b.line(7, 7, 0, 0, True)
    assert a.ram_buffer == b.ram_buffer
    assert all(a.get_pixel(i, i) for i in range(8))


def test_hline_and_vline(display):
    display.hline(4, 9, 30, True)
    display.vline(50, 10, 14, True)
    assert all(display.get_pixel(x, 30) for x in range(4, 10))
    assert all(display.get_pixel(50, y) for y in range(10, 15))
    assert lit_count(display) == 6 + 5


def test_draw_char_matches_font(display):
    display.draw_char("A", 20, 3)
    assert matches_glyph(display, "A", 20, 3)


def test_draw_invalid_char_clears_cell(display):
    display.fill(True)
    display.draw_char("\n", 8, 8)
    assert not any(display.get_pixel(x, y) for x in range(8, 16) for y in range(8, 16))


def test_draw_string_wraps(display):
    display.draw_string("AB", 112, 0)
    assert matches_glyph(display, "A", 112, 0)
    assert matches_glyph(display, "B", 0, 8)


def test_draw_string_stops_at_bottom(display):
    display.draw_string("A" * 40, 0, 48)
    assert not any(display.get_pixel(x, y) for x in range(128) for y in range(56, 64))
    assert matches_glyph(display, "A", 0, 48)