"""
Color conversion utilities.

Converts between HEX, RGB, HSL and decimal notations.
"""

import colorsys
import re
import secrets
from typing import Dict, Optional, Tuple, Union

_HEX_COLOR = re.compile(r"^[0-9a-fA-F]{3}(?:[0-9a-fA-F]{3})?$")
_RGB_FUNCTION = re.compile(r"rgb\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)", re.IGNORECASE)
_HSL_FUNCTION = re.compile(r"hsl\s*\(\s*(\d+)\s*,\s*(\d+)%\s*,\s*(\d+)%\s*\)", re.IGNORECASE)

MAX_DECIMAL_COLOR = 0xFFFFFF

Number = Union[int, float]


def _parse_hex(value: str) -> Optional[Tuple[int, int, int]]:
    digits = value.strip().lstrip("#")
    if not _HEX_COLOR.match(digits):
        return None
    if len(digits) == 3:
        digits = "".join(char * 2 for char in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def _to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def _format_number(value: Number) -> str:
    """1.0 -> '1', 0.5 -> '0.5'"""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def hex_to_rgb(value: str) -> str:
    """'#FF5733' -> 'rgb(255, 87, 51)'"""
    rgb = _parse_hex(value)
    if rgb is None:
        return "Invalid hex color"
    return "rgb({}, {}, {})".format(*rgb)


def rgb_to_hex(value: str) -> str:
    """'rgb(255, 87, 51)' or '255, 87, 51' -> '#ff5733'"""
    match = _RGB_FUNCTION.search(value)
    if match:
        channels = [int(group) for group in match.groups()]
    else:
        parts = [part.strip() for part in value.split(",")]
        if len(parts) != 3 or not all(part.isdigit() for part in parts):
            return "Invalid RGB format"
        channels = [int(part) for part in parts]
    if any(channel > 255 for channel in channels):
        return "RGB values must be 0-255"
    return _to_hex(*channels)


def hex_to_hsl(value: str) -> str:
    """'#FF5733' -> 'hsl(11, 100%, 60%)'"""
    rgb = _parse_hex(value)
    if rgb is None:
        return "Invalid hex color"
    h, l, s = colorsys.rgb_to_hls(*(channel / 255 for channel in rgb))
    return f"hsl({round(h * 360) % 360}, {round(s * 100)}%, {round(l * 100)}%)"


def hsl_to_hex(value: str) -> str:
    """'hsl(0, 100%, 50%)' -> '#ff0000'"""
    match = _HSL_FUNCTION.search(value)
    if not match:
        return "Invalid HSL format"
    hue, saturation, lightness = (int(group) for group in match.groups())
    if saturation > 100 or lightness > 100:
        return "Saturation and lightness must be 0-100%"
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360, lightness / 100, saturation / 100)
    return _to_hex(*(round(channel * 255) for channel in (r, g, b)))


def hex_to_decimal(value: str) -> str:
    """'#FF5733' -> '16734003'"""
    rgb = _parse_hex(value)
    if rgb is None:
        return "Invalid hex color"
    r, g, b = rgb
    return str((r << 16) | (g << 8) | b)


def decimal_to_hex(value: str) -> str:
    """'16734003' -> '#ff5733'"""
    try:
        number = int(value.strip())
    except ValueError:
        return f"Invalid decimal color (must be 0-{MAX_DECIMAL_COLOR})"
    if not 0 <= number <= MAX_DECIMAL_COLOR:
        return f"Invalid decimal color (must be 0-{MAX_DECIMAL_COLOR})"
    return f"#{number:06x}"


def hex_to_rgba(value: str, alpha: Number = 1) -> str:
    """'#FF5733', 0.5 -> 'rgba(255, 87, 51, 0.5)'"""
    rgb = _parse_hex(value)
    if rgb is None:
        return "Invalid hex color"
    alpha = min(max(alpha, 0), 1)
    return "rgba({}, {}, {}, {})".format(*rgb, _format_number(alpha))


def generate_random_hex_color() -> str:
    return f"#{secrets.randbelow(MAX_DECIMAL_COLOR + 1):06x}"


def get_complementary_color(value: str) -> str:
    """Invert each channel: '#FF0000' -> '#00ffff'"""
    rgb = _parse_hex(value)
    if rgb is None:
        return "Invalid hex color"
    return _to_hex(*(255 - channel for channel in rgb))


def hex_to_css_variable(value: str, variable_name: str = "color-primary") -> str:
    """'#FF5733' -> '--color-primary: #FF5733;'"""
    color = value.strip()
    if not color.startswith("#"):
        color = "#" + color
    name = variable_name.strip().lstrip("-") or "color-primary"
    return f"--{name}: {color};"


def parse_color(value: str) -> Dict[str, str]:
    """Recognize HEX, rgb(), hsl() or decimal input and return every notation."""
    text = value.strip()
    hex_color = None

    if text.startswith("#") or _HEX_COLOR.match(text):
        if _parse_hex(text) is not None:
            hex_color = text if text.startswith("#") else "#" + text
    elif text.lower().startswith("rgb"):
        converted = rgb_to_hex(text)
        if converted.startswith("#"):
            hex_color = converted
    elif text.lower().startswith("hsl"):
        converted = hsl_to_hex(text)
        if converted.startswith("#"):
            hex_color = converted
    elif text.isdigit():
        converted = decimal_to_hex(text)
        if converted.startswith("#"):
            hex_color = converted

    if hex_color is None:
        return {"error": "Could not parse color input"}

    return {
        "hex": hex_color.lower(),
        "rgb": hex_to_rgb(hex_color),
        "hsl": hex_to_hsl(hex_color),
        "decimal": hex_to_decimal(hex_color),
        "rgba": hex_to_rgba(hex_color, 1),
        "complementary": get_complementary_color(hex_color),
    }
