"""
Luxafor — HID device discovery and per-command open/write/close transactions.
"""

import logging
import time
from contextlib import contextmanager

from luxafor.protocol import VENDOR_ID, PRODUCT_ID, Animation, LED, _build

log = logging.getLogger(__name__)

POLICE_PAUSE_S = 0.5
POLICE_SPEED = 255
RED = (255, 0, 0)
BLUE = (0, 0, 255)


class LuxaforError(RuntimeError):
    """Base class for device I/O failures."""


class OpenError(LuxaforError):
    """The device could not be opened (unplugged, permissions, busy)."""


class WriteError(LuxaforError):
    """A frame write failed after the device was opened."""


def enumerate_devices():
    """Find every attached Luxafor.

    Returns:
        list of Luxafor, in the order the HID layer reports them.
        Empty when nothing is plugged in.
    """
    import hid

    found = []
    for d in hid.enumerate(VENDOR_ID, PRODUCT_ID):
        if d.get("vendor_id") != VENDOR_ID or d.get("product_id") != PRODUCT_ID:
            continue
        found.append(Luxafor(d))
    log.debug("Enumerated %d Luxafor device(s)", len(found))
    return found


class Luxafor:
    """One attached Luxafor, identified by its HID enumeration record.

    No connection is held between calls: every command opens the device,
    writes a single frame and closes it again.
    """

    def __init__(self, info):
        self.info = dict(info)

    def __repr__(self):
        return f"Luxafor(path={self.info.get('path')!r})"

    def describe(self):
        path = self.info.get("path", b"")
        if isinstance(path, bytes):
            path = path.decode(errors="replace")
        product = self.info.get("product_string") or "Luxafor"
        serial = self.info.get("serial_number") or "-"
        return f"{product}  serial={serial}  path={path}"

    # ── Transport ────────────────────────────────────────────────────────
    @contextmanager
    def _open(self):
        """Open the device for one transaction; close is best effort."""
        import hid

        dev = hid.device()
        try:
            dev.open_path(self.info["path"])
        except (OSError, ValueError) as e:
            raise OpenError(f"open device: {e}") from e
        try:
            yield dev
        finally:
            try:
                dev.close()
            except Exception as e:
                log.debug("Ignoring close failure on %r: %s", self, e)

    def send_command(self, animation, led, r, g, b, speed=0):
        """Write one frame ``[animation, led, r, g, b]`` to the device.

        Raises:
            ValueError: a channel or speed is outside 0-255.
            OpenError:  the device could not be opened.
            WriteError: the write raised or reported failure.
        """
        frame = _build(animation, led, r, g, b, speed)
        with self._open() as dev:
            log.debug("TX %s -> %r", frame.hex(), self)
            try:
                n = dev.write(frame)
            except (OSError, ValueError) as e:
                raise WriteError(f"device write: {e}") from e
            if n is not None and n < 0:
                raise WriteError(f"device write: transport returned {n}")

    # ── Commands ─────────────────────────────────────────────────────────
    def solid(self, r, g, b):
        """Turn every LED the same solid color."""
        self.set(LED.ALL, r, g, b)

    def set(self, led, r, g, b):
        # Speed means nothing for static frames.
        self.send_command(Animation.STATIC, led, r, g, b, 0)

    def set_many(self, leds, r, g, b):
        """Set each LED in turn; the first failure is raised and the rest are skipped."""
        for led in leds:
            self.set(led, r, g, b)

    def fade(self, led, r, g, b, speed):
        self.send_command(Animation.FADE, led, r, g, b, speed)

    def police(self, loops):
        """Alternate red/blue between the front and back LEDs.

        Blocks for roughly ``loops`` seconds. A failed frame does not stop the
        sequence: each LuxaforError is logged and collected, never raised.

        Returns:
            list of the LuxaforError instances that were ignored.
        """
        errors = []
        steps = ((RED, BLUE), (BLUE, RED))
        for _ in range(loops):
            for front, back in steps:
                for led, color in ((LED.FRONT_ALL, front), (LED.BACK_ALL, back)):
                    try:
                        self.fade(led, *color, POLICE_SPEED)
                    except LuxaforError as e:
                        log.warning("police: %s frame failed: %s", led.name, e)
                        errors.append(e)
                time.sleep(POLICE_PAUSE_S)
        return errors

    def off(self):
        self.set(LED.ALL, 0, 0, 0)
