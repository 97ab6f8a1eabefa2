"""Command line controller for Zengge LED strips."""

import argparse
import re
import sys
import time
from importlib import metadata

from .client import ZenggeClient
from .colors import RGBColor

_DEFAULT_DURATION = 5.0
_SETTLE_SECONDS = 5
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_COMPONENT = re.compile(r"[0-9]+")


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise _UsageError(message)


def _parse_duration(text):
    body = text
    sign = 1.0
    if body and body[0] in "+-":
        sign = -1.0 if body[0] == "-" else 1.0
        body = body[1:]
    if body == "0":
        return 0.0
    if not body:
        raise argparse.ArgumentTypeError(f'invalid duration "{text}"')
    total = 0.0
    pos = 0
    while pos < len(body):
        match = _DURATION_PART.match(body, pos)
        if match is None:
            raise argparse.ArgumentTypeError(f'invalid duration "{text}"')
        total += float(match.group(1)) * _UNITS[match.group(2)]
        pos = match.end()
    return sign * total


def _trim(number):
    return f"{number:.9f}".rstrip("0").rstrip(".")


def _format_duration(seconds):
    nanos = round(seconds * 1e9)
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)
    if nanos < 1_000:
        return f"{sign}{nanos}ns"
    if nanos < 1_000_000:
        return f"{sign}{_trim(nanos / 1e3)}µs"
    if nanos < 1_000_000_000:
        return f"{sign}{_trim(nanos / 1e6)}ms"
    hours, nanos = divmod(nanos, 3600 * 10**9)
    minutes, nanos = divmod(nanos, 60 * 10**9)
    text = f"{_trim(nanos / 1e9)}s"
    if hours:
        text = f"{hours}h{minutes}m{text}"
    elif minutes:
        text = f"{minutes}m{text}"
    return sign + text


def _log(message):
    print(f"{time.strftime('%Y/%m/%d %H:%M:%S')} {message}", file=sys.stderr)


def parse_power_state(value):
    """Read a power state: "on"/"1" for on, "off"/"0" for off."""
    lowered = value.lower()
    if lowered in ("on", "1"):
        return True
    if lowered in ("off", "0"):
        return False
    raise ValueError(f"invalid state: {value}")


def parse_color_args(args):
    """Read red, green and blue as decimal bytes into an RGBColor."""
    if len(args) != 3:
        raise ValueError(f"expected 3 color components, got {len(args)}")
    values = []
    for text in args:
        if not _COMPONENT.fullmatch(text):
            raise ValueError(f'invalid color component "{text}"')
        value = int(text)
        if value > 255:
            raise ValueError(f'color component "{text}" out of range')
        values.append(value)
    return RGBColor(*values)


def _connected_client(args):
    client = ZenggeClient(args.device)
    _log(f"Connecting to {args.addr}...")
    client.connect(args.addr, args.duration)
    return client


def _run_version(args):
    print(f"version: {args.version}")


def _run_scan(args):
    client = ZenggeClient(args.device)
    print(f"Scanning for {_format_duration(args.duration)}...")
    client.scan(args.duration, args.dup, print)


def _print_notification(notification):
    print(f"Notified: {notification} ")


def _run_connect(args):
    client = _connected_client(args)
    client.subscribe(_print_notification)
    client.send_initial_packet()
    time.sleep(_SETTLE_SECONDS)
    client.get_strip_settings()
    time.sleep(_SETTLE_SECONDS)
    client.power_off()
    time.sleep(_SETTLE_SECONDS)


def _run_power(args):
    state = parse_power_state(args.state)
    client = _connected_client(args)
    if state:
        client.power_on()
    else:
        client.power_off()


def _run_color(args):
    color = parse_color_args([args.red, args.green, args.blue])
    client = _connected_client(args)
    client.set_rgb(color)


def _add_ble_options(parser):
    parser.add_argument("-d", "--device", default="default", help="implementation of ble")
    parser.add_argument(
        "-w", "--duration", type=_parse_duration, default=_DEFAULT_DURATION,
        help="scanning duration (e.g. 5s, 500ms)",
    )


def build_parser(version):
    """Build the argument parser for all subcommands."""
    parser = _Parser(prog="zengge-led-ctl", description="CLI controller for Zengge LED devices")
    parser.set_defaults(handler=lambda args: parser.print_help())
    commands = parser.add_subparsers(dest="command")

    version_cmd = commands.add_parser("version", help="Display version")
    version_cmd.set_defaults(handler=_run_version, version=version)

    scan_cmd = commands.add_parser("scan", help="List discoverable Zengge LED devices")
    _add_ble_options(scan_cmd)
    scan_cmd.add_argument(
        "--dup", action=argparse.BooleanOptionalAction, default=True,
        help="allow duplicate reported",
    )
    scan_cmd.set_defaults(handler=_run_scan)

    connect_cmd = commands.add_parser("connect", help="Connect to device by MAC address")
    connect_cmd.add_argument("addr")
    _add_ble_options(connect_cmd)
    connect_cmd.set_defaults(handler=_run_connect)

    power_cmd = commands.add_parser(
        "power", help="Power device by MAC address, 1 for ON and 0 for OFF"
    )
    power_cmd.add_argument("addr")
    power_cmd.add_argument("state")
    _add_ble_options(power_cmd)
    power_cmd.set_defaults(handler=_run_power)

    color_cmd = commands.add_parser(
        "color", help="Set strip color by MAC address, using RGB (0-255)"
    )
    color_cmd.add_argument("addr")
    color_cmd.add_argument("red")
    color_cmd.add_argument("green")
    color_cmd.add_argument("blue")
    _add_ble_options(color_cmd)
    color_cmd.set_defaults(handler=_run_color)

    return parser


def _package_version():
    try:
        return metadata.version("zenggectl")
    except metadata.PackageNotFoundError:
        return "dev"


def main(argv=None):
    """Run the command line; return the process exit status."""
    parser = build_parser(_package_version())
    try:
        args = parser.parse_args(argv)
        args.handler(args)
    except (_UsageError, Exception) as exc:
        print(f"error executing command: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())