"""
Encoding and decoding utilities.

Decoders report malformed input as a descriptive string rather than raising.
"""

import base64
import html
import re
from urllib.parse import quote, unquote

_WHITESPACE = re.compile(r"\s+")

# Characters encodeURIComponent leaves alone, besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"

_HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
    "/": "&#x2F;",
    "`": "&#x60;",
    "=": "&#x3D;",
}


def base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def base64_decode(text: str) -> str:
    data = _WHITESPACE.sub("", text)
    data += "=" * (-len(data) % 4)
    try:
        return base64.b64decode(data, validate=True).decode("utf-8")
    except ValueError:
        return "Invalid Base64 input"


def base32_encode(text: str) -> str:
    return base64.b32encode(text.encode("utf-8")).decode("ascii")


def base32_decode(text: str) -> str:
    data = _WHITESPACE.sub("", text).rstrip("=").upper()
    data += "=" * (-len(data) % 8)
    try:
        return base64.b32decode(data).decode("utf-8")
    except ValueError:
        return "Invalid Base32 input"


def url_encode(text: str) -> str:
    """Percent-encode everything except unreserved characters."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def url_decode(text: str) -> str:
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError:
        return "Invalid URL-encoded input"


def html_encode(text: str) -> str:
    return "".join(_HTML_ENTITIES.get(char, char) for char in text)


def html_decode(text: str) -> str:
    """Decode named and numeric character references."""
    return html.unescape(text)


def text_to_binary(text: str) -> str:
    """'A' -> '01000001', one space-separated group per character."""
    return " ".join(format(ord(char), "08b") for char in text)


def binary_to_text(text: str) -> str:
    bits = _WHITESPACE.sub("", text)
    if not re.fullmatch(r"[01]+", bits):
        return "Invalid binary input"
    # Trailing bits that do not fill a byte are dropped
    return "".join(
        chr(int(bits[i:i + 8], 2))
        for i in range(0, len(bits) - len(bits) % 8, 8)
    )


def text_to_hex(text: str) -> str:
    return " ".join(format(ord(char), "02x") for char in text)


def hex_to_text(text: str) -> str:
    digits = _WHITESPACE.sub("", text)
    if not re.fullmatch(r"[0-9a-fA-F]+", digits):
        return "Invalid hexadecimal input"
    return "".join(chr(int(digits[i:i + 2], 16)) for i in range(0, len(digits), 2))


def utf8_encode(text: str) -> str:
    """Show the UTF-8 bytes of ``text`` as one character per byte."""
    return text.encode("utf-8").decode("latin-1")


def utf8_decode(text: str) -> str:
    try:
        return text.encode("latin-1").decode("utf-8")
    except (UnicodeEncodeError, UnicodeDecodeError):
        return "Invalid UTF-8 input"


def text_to_ascii(text: str) -> str:
    """'Hi' -> '72 105'"""
    return " ".join(str(ord(char)) for char in text)


def ascii_to_text(text: str) -> str:
    chars = []
    for code in text.split():
        try:
            value = int(code, 10)
        except ValueError:
            return "Invalid ASCII code"
        if not 0 <= value <= 127:
            return "Invalid ASCII code"
        chars.append(chr(value))
    return "".join(chars)
