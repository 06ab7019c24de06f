"""
Luxafor — CLI entry point (argparse).
"""

import argparse
import logging


def _byte(value):
    n = int(value, 0)
    if not 0 <= n <= 255:
        raise argparse.ArgumentTypeError(f"{value} is not in 0-255")
    return n


def _led(value):
    from luxafor.protocol import _parse_led
    try:
        return _parse_led(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _setup_logging(verbose):
    if verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format='[%(levelname)s] %(name)s: %(message)s')
    elif verbose == 1:
        logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    else:
        logging.basicConfig(level=logging.WARNING)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="luxafor",
        description="Luxafor LED indicator — USB HID control",
    )
    parser.add_argument("-d", "--device", type=int, default=0,
                        help="Device index from 'scan' (default 0)")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="More logging (-v info, -vv debug)")
    sub = parser.add_subparsers(dest="command")

    # scan
    sub.add_parser("scan", help="List connected Luxafor devices")

    # leds
    sub.add_parser("leds", help="List LED target names")

    # solid
    p_solid = sub.add_parser("solid", help="Set all LEDs to one color")
    p_solid.add_argument("rgb", nargs=3, type=_byte, metavar=("R", "G", "B"))

    # set
    p_set = sub.add_parser("set", help="Set one LED target to a color")
    p_set.add_argument("led", type=_led, help="LED name or code (see 'leds')")
    p_set.add_argument("rgb", nargs=3, type=_byte, metavar=("R", "G", "B"))

    # fade
    p_fade = sub.add_parser("fade", help="Fade an LED target to a color")
    p_fade.add_argument("led", type=_led, help="LED name or code (see 'leds')")
    p_fade.add_argument("rgb", nargs=3, type=_byte, metavar=("R", "G", "B"))
    p_fade.add_argument("-s", "--speed", type=_byte, default=0,
                        help="Fade speed (0-255)")

    # police
    p_pol = sub.add_parser("police", help="Red/blue flashing sequence")
    p_pol.add_argument("-n", "--loops", type=int, default=5,
                       help="Number of red/blue cycles (default 5)")

    # off
    sub.add_parser("off", help="Turn all LEDs off")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    _setup_logging(args.verbose)

    from luxafor.commands import (cmd_scan, cmd_leds, cmd_solid, cmd_set,
                                  cmd_fade, cmd_police, cmd_off)

    if args.command == "scan":
        return cmd_scan()
    elif args.command == "leds":
        return cmd_leds()
    elif args.command == "solid":
        return cmd_solid(args.rgb, device=args.device)
    elif args.command == "set":
        return cmd_set(args.led, args.rgb, device=args.device)
    elif args.command == "fade":
        return cmd_fade(args.led, args.rgb, args.speed, device=args.device)
    elif args.command == "police":
        return cmd_police(args.loops, device=args.device)
    elif args.command == "off":
        return cmd_off(device=args.device)

    return 0
