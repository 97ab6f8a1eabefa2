import pytest

from zenggectl import protocol

INITIAL = bytes(
    [0x00, 0x00, 0x80, 0x00, 0x00, 0x04, 0x05, 0x0A, 0x81, 0x8A, 0x8B, 0x96]
)
STRIP_SETTINGS = bytes(
    [0x00, 0x00, 0x80, 0x00, 0x00, 0x05, 0x06, 0x0A, 0x63, 0x12, 0x21, 0xF0, 0x86]
)
POWER = [
    0x00, 0x00, 0x80, 0x00, 0x00, 0x0D, 0x0E, 0x0B, 0x3B, 0x23, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x32, 0x00, 0x00, 0x90,
]
HSV = [
    0x00, 0x00, 0x80, 0x00, 0x00, 0x0D, 0x0E, 0x0B, 0x3B, 0xA1, 0x00,
    0x64, 0x64, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
]
WHITE = bytes(
    [
        0x00, 0x00, 0x80, 0x00, 0x00, 0x0D, 0x0E, 0x0B, 0x3B, 0xB1, 0x00,
        0x00, 0x00, 0x1B, 0x36, 0x00, 0x00, 0x00, 0x00, 0x00, 0x3D,
    ]
)


def test_initial_packet_bytes():
    assert protocol.initial_packet() == INITIAL


def test_strip_settings_packet_bytes():
    assert protocol.strip_settings_packet() == STRIP_SETTINGS


def test_white_packet_bytes():
    assert protocol.white_packet() == WHITE


def test_power_on_packet():
    packet = protocol.power_packet(True)
    expected = list(POWER)
    expected[9] = protocol.POWER_ON_BYTE
    assert packet == bytes(expected)


def test_power_off_packet():
    packet = protocol.power_packet(False)
    expected = list(POWER)
    expected[9] = protocol.POWER_OFF_BYTE
    assert packet == bytes(expected)


def test_power_off_does_not_leak_into_power_on():
    protocol.power_packet(False)
    assert protocol.power_packet(True)[9] == 0x23


def test_hsv_packet_sets_components():
    packet = protocol.hsv_packet(71, 98, 98)
    assert packet[10:13] == bytes([71, 98, 98])
    assert packet[:10] == bytes(HSV[:10])
    assert packet[13:] == bytes(HSV[13:])
    assert len(packet) == len(HSV)


def test_hsv_packet_rejects_out_of_range():
    with pytest.raises(ValueError):
        protocol.hsv_packet(256, 0, 0)
    with pytest.raises(ValueError):
        protocol.hsv_packet(0, -1, 0)


def test_with_counter_sets_first_two_bytes():
    packet = protocol.with_counter(INITIAL, 0x0102)
    assert packet[:2] == bytes([0x01, 0x02])
    assert packet[2:] == INITIAL[2:]


def test_with_counter_leaves_input_untouched():
    source = bytearray(STRIP_SETTINGS)
    protocol.with_counter(source, 7)
    assert bytes(source) == STRIP_SETTINGS


def test_with_counter_wraps_at_sixteen_bits():
    assert protocol.with_counter(INITIAL, 0x10000 + 5) == protocol.with_counter(INITIAL, 5)


def test_with_counter_rejects_short_packet():
    with pytest.raises(ValueError):
        protocol.with_counter(b"\x01", 1)


def test_uuids():
    assert protocol.NOTIFY_UUID == "ff02"
    assert protocol.WRITE_UUID == "ff01"
    assert protocol.SERVICE_UUID.startswith("0000ffff")