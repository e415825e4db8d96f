"""Rain and water-level alert station: alert logic, SSD1306 framebuffer, font and LED matrix."""

__version__ = "0.1.0"