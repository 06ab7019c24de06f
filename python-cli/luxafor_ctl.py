#!/usr/bin/env python3
# /// script
# dependencies = ["hidapi>=0.14"]
# ///
"""
Luxafor Controller - Python CLI

Drive a Luxafor USB LED indicator over HID with 5-byte command frames.

Usage:
    uv run luxafor_ctl.py <command>

Commands:
    scan                     List connected devices
    leds                     List LED target names
    solid R G B              All LEDs one color
    set LED R G B            One LED target one color
    fade LED R G B [-s N]    Fade an LED target
    police [-n LOOPS]        Red/blue flashing sequence
    off                      All LEDs off

Use -d/--device N to pick a device when several are connected.
"""

import sys
from luxafor.cli import main

if __name__ == "__main__":
    sys.exit(main())
