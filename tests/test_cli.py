from unittest import mock

import pytest

from zenggectl.cli import build_parser, main, parse_color_args, parse_power_state
from zenggectl.client import BleTransport, RawAdvertisement, register_backend
from zenggectl.colors import RGBColor
from zenggectl.protocol import (
    POWER_OFF_BYTE,
    POWER_ON_BYTE,
    initial_packet,
    strip_settings_packet,
)

NOTIFY_FULL = "0000ff02-0000-1000-8000-00805f9b34fb"
WRITE_FULL = "0000ff01-0000-1000-8000-00805f9b34fb"
ADDR = "00:00:00:00:00:01"
BACKEND = "cli-test-fake"


class FakeTransport(BleTransport):
    def __init__(self):
        self.connected = None
        self.scan_args = None
        self.writes = []

    def scan(self, duration, duplicates, handler):
        self.scan_args = (duration, duplicates)
        handler(RawAdvertisement("LEDnetWF0100", ADDR, True, -60, b""))
        handler(RawAdvertisement("Speaker", "00:00:00:00:00:02", True, -50, b""))

    def connect(self, addr, timeout):
        self.connected = (addr, timeout)

    def discover(self):
        return [NOTIFY_FULL, WRITE_FULL]

    def subscribe(self, uuid, callback):
        callback(b"\x01\x02")

    def write(self, uuid, data):
        self.writes.append(bytes(data))


@pytest.fixture
def transports():
    created = []

    def factory():
        transport = FakeTransport()
        created.append(transport)
        return transport

    register_backend(BACKEND, factory)
    return created


def test_version_command_output(capsys):
    args = build_parser("v1.0.0").parse_args(["version"])
    args.handler(args)
    assert capsys.readouterr().out == "version: v1.0.0\n"


def test_root_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out


@pytest.mark.parametrize("command", ["connect", "scan"])
def test_invalid_flag_is_an_error(command, capsys):
    assert main([command, "--invalid"]) == 1
    assert "error executing command" in capsys.readouterr().err


def test_version_rejects_arguments(capsys):
    assert main(["version", "extra"]) == 1
    assert "error executing command" in capsys.readouterr().err


@pytest.mark.parametrize(
    "value, expected",
    [("on", True), ("ON", True), ("1", True), ("off", False), ("Off", False), ("0", False)],
)
def test_parse_power_state(value, expected):
    assert parse_power_state(value) is expected


def test_parse_power_state_invalid():
    with pytest.raises(ValueError, match="invalid state: maybe"):
        parse_power_state("maybe")


def test_parse_color_args():
    assert parse_color_args(["3", "252", "102"]) == RGBColor(3, 252, 102)


@pytest.mark.parametrize(
    "args", [["256", "0", "0"], ["-1", "0", "0"], ["a", "0", "0"], [" 1", "0", "0"], ["1", "2"]]
)
def test_parse_color_args_invalid(args):
    with pytest.raises(ValueError):
        parse_color_args(args)


def test_color_command_writes_hsv(transports):
    assert main(["color", "-d", BACKEND, ADDR, "3", "252", "102"]) == 0
    (transport,) = transports
    assert transport.connected == (ADDR, 5.0)
    assert transport.writes[-1][10:13] == bytes((0x47, 0x62, 0x62))


def test_color_command_invalid_component(transports, capsys):
    assert main(["color", "-d", BACKEND, ADDR, "300", "0", "0"]) == 1
    assert transports == []
    assert "error executing command" in capsys.readouterr().err


def test_power_command_on_and_off(transports):
    assert main(["power", "-d", BACKEND, ADDR, "on"]) == 0
    assert main(["power", "-d", BACKEND, "-w", "2s", ADDR, "0"]) == 0
    first, second = transports
    assert first.writes[-1][9] == POWER_ON_BYTE
    assert second.writes[-1][9] == POWER_OFF_BYTE
    assert second.connected == (ADDR, 2.0)


def test_power_command_invalid_state(transports, capsys):
    assert main(["power", "-d", BACKEND, ADDR, "maybe"]) == 1
    assert "invalid state: maybe" in capsys.readouterr().err


def test_scan_command_lists_devices(transports, capsys):
    assert main(["scan", "-d", BACKEND]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Scanning for 5s...\n")
    assert "Name LEDnetWF0100" in out
    assert "Speaker" not in out
    assert transports[0].scan_args == (5.0, True)


def test_scan_command_duration_and_no_dup(transports, capsys):
    assert main(["scan", "-d", BACKEND, "-w", "1m30s", "--no-dup"]) == 0
    assert "Scanning for 1m30s..." in capsys.readouterr().out
    assert transports[0].scan_args == (90.0, False)


def test_scan_command_bad_duration(transports, capsys):
    assert main(["scan", "-d", BACKEND, "-w", "soon"]) == 1
    assert "error executing command" in capsys.readouterr().err


@mock.patch("time.sleep")
def test_connect_command_sequence(sleep, transports, capsys):
    assert main(["connect", "-d", BACKEND, ADDR]) == 0
    writes = transports[0].writes
    assert [w[2:] for w in writes[:2]] == [initial_packet()[2:], strip_settings_packet()[2:]]
    assert writes[2][9] == POWER_OFF_BYTE
    assert sleep.call_count == 3
    assert "Notified: [0102] " in capsys.readouterr().out