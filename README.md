# chuvalerta

chuvalerta models a small rain-alert weather station. It takes two analog
readings as 12-bit ADC values (0–4095) and turns them into a rain volume and a
water level, each as a percentage. It then decides whether the station is in
alert mode. Alert mode starts when the rain volume reaches 80 % or the water
level reaches 70 %.

All of the station's outputs are rendered in memory:

- `chuvalerta.ssd1306.SSD1306` is a 128×64 monochrome framebuffer. It can set
  and read pixels and draw lines, rectangles and text. It produces the command
  and data byte blocks that an SSD1306 display expects. `Command` lists the
  opcodes.
- `chuvalerta.font.glyph(char)` returns the 8×8 bitmap of a printable ASCII
  character. Any other character gives a blank glyph.
- `chuvalerta.matrix.LedMatrix` is a 5×5 serpentine RGB LED chain.
  `show_frame` draws a frame and returns the GRB byte stream. In alert mode
  `frame_for_mode` gives a red "!" and otherwise a green "N". `get_index`
  maps a matrix position to its place in the chain.
- `chuvalerta.station` holds the alert logic:
  - `reading_from_adc` and `is_alert` turn samples into a `Reading` and make
    the alert decision.
  - `format_debug` builds the status line for a reading.
  - `render_display` draws the station screen into a framebuffer.
  - `led_states` gives the green and red indicator LED states.
  - `buzzer_wrap` gives the PWM wrap value for the buzzer frequency.
  - `WeatherStation` combines these and refreshes every output on each
    `update`.

## Install

```
pip install .
```

To run the tests, install the test extra with `pip install .[test]` and then
run `pytest`.

## Command line

```
chuvalerta 4095,1000 2048,2048
```

Each sample is a `VRY,VRX` pair. The two values may also be separated by
whitespace. With no samples on the command line, the command reads them from
standard input, one per line, and skips blank lines. A value outside 0..4095,
or a line that is not two integers, is reported as a usage error.

The command prints one status line for each sample:

```
Volume de chuva: 100.0 | Nivel da agua: 24.4 | Modo alerta: 1
Volume de chuva: 50.0 | Nivel da agua: 50.0 | Modo alerta: 0
```

With `--display`, the command prints the 128×64 screen after each status
line. Lit pixels are shown as `#` and dark pixels as `.`.

## Library use

```python
from chuvalerta.station import reading_from_adc, is_alert, WeatherStation
from chuvalerta.ssd1306 import SSD1306
from chuvalerta.matrix import LedMatrix

reading = reading_from_adc(4095, 1000)
print(is_alert(reading))          # True: rain volume is 100 %

blocks = []
display = SSD1306(128, 64, False, 0x3C, lambda address, data: blocks.append(data))
matrix = LedMatrix()
station = WeatherStation(display, matrix)
station.update(4095, 1000)

print(station.alert, station.red_led, station.buzzer_on)   # True True True
print(display.get_pixel(0, 0))                             # True: screen border
```

The display's `write` callable is called as `write(address, data)` for every
byte block that would go over I2C. `LedMatrix` also accepts an optional
`write(data)` callable, which receives each GRB byte stream it sends.

## What it does not do

The package does not talk to any hardware. It reads no ADC, drives no I2C bus,
GPIO pins or PWM, and plays no sound. The buzzer appears only as the
`buzzer_on` flag and the `buzzer_wrap` calculation. The LEDs appear only as
states and byte streams passed to the callables you provide.