# renderer/ppm.py
from typing import TextIO, Tuple

MAX_CHANNEL_VALUE = 255

def format_ppm_header(width: int, height: int) -> str:
    """Header of a plain-text (P3) PPM image."""
    return f"P3\n{width} {height}\n{MAX_CHANNEL_VALUE}\n"

def write_header(file: TextIO, width: int, height: int):
    file.write(format_ppm_header(width, height))

def write_color(file: TextIO, rgb: Tuple[int, int, int]):
    """Writes one pixel as a line of three space-separated integers."""
    r, g, b = rgb
    file.write(f"{r} {g} {b}\n")
