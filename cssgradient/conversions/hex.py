from typing import Tuple

_HEX_DIGITS = set("0123456789abcdefABCDEF")


def hex_to_rgba_int(text: str) -> Tuple[int, int, int, int]:
    """
    Parse CSS hex color notation into 8-bit RGBA channels.

    Accepts ``#rgb``, ``#rgba``, ``#rrggbb`` and ``#rrggbbaa``; the leading
    ``#`` is optional.

    Args:
        text: Hex color string

    Returns:
        Tuple[int, int, int, int]: (r, g, b, a) in [0, 255]
    """
    digits = text[1:] if text.startswith("#") else text
    if not digits or not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"Invalid hex color: {text!r}")

    if len(digits) in (3, 4):
        channels = [int(c * 2, 16) for c in digits]
    elif len(digits) in (6, 8):
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    else:
        raise ValueError(f"Hex color must have 3, 4, 6 or 8 digits: {text!r}")

    if len(channels) == 3:
        channels.append(255)
    return tuple(channels)  # type: ignore[return-value]


def is_hex_color(text: str) -> bool:
    return text.startswith("#") and len(text) in (4, 5, 7, 9) and set(text[1:]) <= _HEX_DIGITS
