"""Flood-alert weather station: readings, mode decision and output rendering."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from .matrix import LedMatrix, frame_for_mode
from .ssd1306 import SSD1306

ADC_MAX = 4095
RAIN_ALERT = 80
LEVEL_ALERT = 70

SYSTEM_CLOCK_HZ = 125_000_000
BUZZER_FREQ = 1000
BUZZER_CLOCK_DIV = 4


@dataclass(frozen=True)
class Reading:
    """Rain volume and water level, both as percentages."""

    rain_volume: float
    water_level: float


def reading_from_adc(vry: int, vrx: int) -> Reading:
    """Convert two 12-bit ADC samples to percentages."""
    for sample in (vry, vrx):
        if not 0 <= sample <= ADC_MAX:
            raise ValueError(f"ADC sample {sample} outside 0..{ADC_MAX}")
    return Reading(
        rain_volume=(vry / 4095.0) * 100.0,
        water_level=(vrx / 4095.0) * 100.0,
    )


def is_alert(reading: Reading) -> bool:
    """Alert when rain reaches 80 % or the water level reaches 70 %."""
    return reading.rain_volume >= RAIN_ALERT or reading.water_level >= LEVEL_ALERT


def format_debug(reading: Reading, alert: bool) -> str:
    """Return the status line printed for every sample."""
    return (
        f"Volume de chuva: {reading.rain_volume:.1f} | "
        f"Nivel da agua: {reading.water_level:.1f} | "
        f"Modo alerta: {int(bool(alert))}"
    )


def value_column(value: float) -> int:
    """Return the x position that right-aligns a percentage before the % sign."""
    if value > 99.5:
        return 92
    if value > 9.9:
        return 100
    return 108


def render_display(display: SSD1306, alert: bool, reading: Reading) -> None:
    """Draw the station screen into the display buffer (without sending it)."""
    display.rect(0, 0, 127, 63, True, False)
    display.line(1, 12, 126, 12, True)
    display.line(1, 24, 126, 24, True)
    display.draw_string("EMB Estacao", 20, 3)
    display.draw_string("Modo:", 12, 15)
    if alert:
        display.draw_string("Alerta", 60, 15)
        display.draw_string("ABRIGUE-SE", 22, 51)
    else:
        display.draw_string("Normal", 60, 15)
        display.draw_string("          ", 22, 51)
    display.draw_string("Vol. Chuva:   %", 4, 27)
    display.draw_string("Niv.  Agua:   %", 4, 38)
    display.draw_string(f"{reading.rain_volume:.0f}", value_column(reading.rain_volume), 27)
    display.draw_string(f"{reading.water_level:.0f}", value_column(reading.water_level), 38)


def led_states(alert: bool) -> tuple[bool, bool]:
    """Return (green, red): red in alert mode, green otherwise."""
    return (not alert, bool(alert))


def buzzer_wrap(freq: int = BUZZER_FREQ, clock_div: int = BUZZER_CLOCK_DIV) -> int:
    """PWM wrap value giving ``freq`` Hz from the system clock and divider."""
    if freq <= 0 or clock_div <= 0:
        raise ValueError("frequency and clock divider must be positive")
    return SYSTEM_CLOCK_HZ // (clock_div * freq) - 1


class WeatherStation:
    """Ties a display and an LED matrix to the alert logic."""

    def __init__(self, display: SSD1306, matrix: LedMatrix) -> None:
        self.display = display
        self.matrix = matrix
        self.reading: Reading | None = None
        self.alert = False
        self.green_led = False
        self.red_led = False
        self.buzzer_on = False
        display.config()
        display.send_data()
        display.fill(False)
        display.send_data()
        matrix.clear()
        matrix.show()

    def update(self, vry: int, vrx: int) -> Reading:
        """Process one pair of ADC samples and refresh every output."""
        reading = reading_from_adc(vry, vrx)
        alert = is_alert(reading)
        self.reading = reading
        self.alert = alert
        render_display(self.display, alert, reading)
        self.display.send_data()
        self.green_led, self.red_led = led_states(alert)
        self.matrix.show_frame(frame_for_mode(alert))
        self.buzzer_on = alert
        return reading


def _parse_sample(text: str) -> tuple[int, int]:
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"expected two ADC values, got {text!r}")
    vry, vrx = (int(part) for part in parts)
    reading_from_adc(vry, vrx)
    return vry, vrx


def _screen_text(display: SSD1306) -> str:
    return "\n".join(
        "".join("#" if display.get_pixel(x, y) else "." for x in range(display.width))
        for y in range(display.height)
    )


def main(argv: list[str] | None = None) -> int:
    """Feed ADC sample pairs through the station and print the status lines."""
    parser = argparse.ArgumentParser(
        prog="chuvalerta",
        description="Run the flood-alert station on rain/level ADC samples.",
    )
    parser.add_argument(
        "samples",
        nargs="*",
        help="samples as VRY,VRX (0..4095); read from stdin, one per line, when omitted",
    )
    parser.add_argument(
        "--display", action="store_true", help="print the OLED screen after each sample"
    )
    args = parser.parse_args(argv)

    lines = args.samples or [line for line in sys.stdin if line.strip()]
    try:
        samples = [_parse_sample(line) for line in lines]
    except ValueError as exc:
        parser.error(str(exc))

    station = WeatherStation(SSD1306(), LedMatrix())
    for vry, vrx in samples:
        reading = station.update(vry, vrx)
        print(format_debug(reading, station.alert))
        if args.display:
            print(_screen_text(station.display))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())