"""
Luxafor HID Protocol — USB identifiers, command codes, and the frame builder.
"""

from enum import IntEnum

# ── USB Identifiers ──────────────────────────────────────────────────────
VENDOR_ID  = 0x04D8
PRODUCT_ID = 0xF372

FRAME_SIZE = 5


# ── Command bytes ────────────────────────────────────────────────────────
class Animation(IntEnum):
    """Byte 0 of every frame: how the target LEDs change."""
    STATIC  = 1
    FADE    = 2
    STROBE  = 3
    WAVE    = 4
    PATTERN = 6


class LED(IntEnum):
    """Byte 1 of every frame: which LED(s) the command applies to."""
    FRONT_TOP    = 1
    FRONT_MIDDLE = 2
    FRONT_BOTTOM = 3
    BACK_TOP     = 4
    BACK_MIDDLE  = 5
    BACK_BOTTOM  = 6
    FRONT_ALL    = 65
    BACK_ALL     = 66
    ALL          = 255


class WaveType(IntEnum):
    SINGLE_SMALL = 1
    SINGLE_LARGE = 2
    DOUBLE_SMALL = 3
    DOUBLE_LARGE = 4


# ── LED names (CLI spelling) ─────────────────────────────────────────────
LED_NAMES = {led.name.lower().replace("_", "-"): led for led in LED}


def _parse_led(value):
    """Resolve an LED from its name ('front-top', 'all') or numeric code."""
    key = str(value).strip().lower().replace("_", "-")
    if key in LED_NAMES:
        return LED_NAMES[key]
    try:
        return LED(int(key, 0))
    except ValueError:
        raise ValueError(f"Unknown LED '{value}'. Valid: {', '.join(LED_NAMES)}") from None


# ── Channel checks ───────────────────────────────────────────────────────
def _check_byte(name, value):
    """Reject anything that does not fit in one unsigned byte."""
    if not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be an int in 0-255, got {value!r}")
    return value


# ── Frame builder ────────────────────────────────────────────────────────
def _build(animation, led, r, g, b, speed=0):
    """Build a 5-byte output report.

    Layout: [animation, led, r, g, b].

    ``speed`` is range-checked but not transmitted; the device firmware is
    driven with 5-byte frames only.

    Returns:
        bytes: 5-byte frame.
    """
    for name, value in (("r", r), ("g", g), ("b", b), ("speed", speed)):
        _check_byte(name, value)
    return bytes([Animation(animation), LED(led), r, g, b])
