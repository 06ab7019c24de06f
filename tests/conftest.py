"""Fake HID layer so every test runs without a Luxafor plugged in."""
import sys
from unittest.mock import patch

import pytest

LUX_VID = 0x04D8
LUX_PID = 0xF372


def make_info(n=0, vid=LUX_VID, pid=LUX_PID):
    """Build an enumeration record shaped like hid.enumerate() output."""
    return {
        "path": f"/dev/hidraw{n}".encode(),
        "vendor_id": vid,
        "product_id": pid,
        "serial_number": f"SN{n:04d}",
        "manufacturer_string": "Microchip Technology Inc.",
        "product_string": "LUXAFOR FLAG",
        "interface_number": 0,
    }


class FakeDevice:
    def __init__(self, hid):
        self._hid = hid
        self.path = None
        self.closed = False

    def open_path(self, path):
        if self._hid.open_error is not None:
            raise self._hid.open_error
        self.path = path

    def write(self, data):
        self._hid.writes.append(bytes(data))
        if self._hid.write_outcomes:
            outcome = self._hid.write_outcomes.pop(0)
            if isinstance(outcome, BaseException):
                raise outcome
            return outcome
        return len(data)

    def close(self):
        self.closed = True
        if self._hid.close_error is not None:
            raise self._hid.close_error


class FakeHid:
    """Stands in for the `hid` module: enumerate() plus device()."""

    def __init__(self):
        self.infos = []
        self.devices = []
        self.writes = []
        self.write_outcomes = []
        self.open_error = None
        self.close_error = None

    def enumerate(self, vendor_id=0, product_id=0):
        return [dict(i) for i in self.infos]

    def device(self):
        dev = FakeDevice(self)
        self.devices.append(dev)
        return dev


@pytest.fixture
def fake_hid():
    hid = FakeHid()
    with patch.dict(sys.modules, {"hid": hid}):
        yield hid


@pytest.fixture
def no_sleep():
    with patch("luxafor.device.time.sleep") as sleep:
        yield sleep
