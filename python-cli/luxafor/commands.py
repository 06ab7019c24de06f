from luxafor.protocol import VENDOR_ID, PRODUCT_ID, LED_NAMES
from luxafor.device import LuxaforError, enumerate_devices


def _pick_device(index):
    """Return the index-th attached Luxafor, or None after printing why."""
    devs = enumerate_devices()
    if not devs:
        print("Luxafor not found.")
        return None
    if not 0 <= index < len(devs):
        print(f"No device #{index} ({len(devs)} connected, see 'scan').")
        return None
    print(f"  Connected: #{index} {devs[index].describe()}")
    return devs[index]


def _run(index, label, action):
    """Run one device action and turn transport failures into exit code 1."""
    print(label)
    lux = _pick_device(index)
    if lux is None:
        return 1
    try:
        action(lux)
    except LuxaforError as e:
        print(f"  Failed: {e}")
        return 1
    print("  -> OK")
    return 0


def cmd_scan():
    print("Scanning for Luxafor...")
    print("=" * 60)
    try:
        devs = enumerate_devices()
    except ImportError as e:
        print(f"  HID library unavailable: {e}")
        print("  Install with: pip install hidapi")
        return 1
    if not devs:
        print(f"  No Luxafor found (0x{VENDOR_ID:04X}:0x{PRODUCT_ID:04X}).")
        return 1
    for i, lux in enumerate(devs):
        print(f"  [{i}] {lux.describe()}")
    return 0


def cmd_leds():
    print(f"{'Code':<6} {'Name'}")
    print("-" * 30)
    for name, led in LED_NAMES.items():
        print(f"{int(led):<6} {name}")
    return 0


def cmd_solid(rgb, device=0):
    r, g, b = rgb
    return _run(device, f"Solid color=({r},{g},{b})",
                lambda lux: lux.solid(r, g, b))


def cmd_set(led, rgb, device=0):
    r, g, b = rgb
    return _run(device, f"Set {led.name} color=({r},{g},{b})",
                lambda lux: lux.set(led, r, g, b))


def cmd_fade(led, rgb, speed, device=0):
    r, g, b = rgb
    return _run(device, f"Fade {led.name} color=({r},{g},{b})  speed={speed}",
                lambda lux: lux.fade(led, r, g, b, speed))


def cmd_police(loops, device=0):
    def action(lux):
        errors = lux.police(loops)
        if errors:
            print(f"  {len(errors)}/{loops * 4} frame(s) failed")

    return _run(device, f"Police x{loops}", action)


def cmd_off(device=0):
    return _run(device, "Turning off", lambda lux: lux.off())
