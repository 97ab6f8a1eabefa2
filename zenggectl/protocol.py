"""Wire constants and packet builders for Zengge LEDnetWF strips."""

SERVICE_UUID = "0000ffff-0000-1000-8000-00805f9b34fb"
NOTIFY_UUID = "ff02"
WRITE_UUID = "ff01"
PIXEL_COUNT = 48

POWER_ON_BYTE = 0x23
POWER_OFF_BYTE = 0x24

_POWER_STATE_OFFSET = 9
_HSV_OFFSET = 10

_INITIAL = bytes(
    (0x00, 0x00, 0x80, 0x00, 0x00, 0x04, 0x05, 0x0A, 0x81, 0x8A, 0x8B, 0x96)
)
_STRIP_SETTINGS = bytes(
    (0x00, 0x00, 0x80, 0x00, 0x00, 0x05, 0x06, 0x0A, 0x63, 0x12, 0x21, 0xF0, 0x86)
)
# The trailing checksum byte does not follow the power state; the strip ignores it.
_POWER = bytes(
    (
        0x00, 0x00, 0x80, 0x00, 0x00, 0x0D, 0x0E, 0x0B, 0x3B, 0x23, 0x00,
        0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x32, 0x00, 0x00, 0x90,
    )
)
_HSV = bytes(
    (
        0x00, 0x00, 0x80, 0x00, 0x00, 0x0D, 0x0E, 0x0B, 0x3B, 0xA1, 0x00,
        0x64, 0x64, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    )
)
_WHITE = bytes(
    (
        0x00, 0x00, 0x80, 0x00, 0x00, 0x0D, 0x0E, 0x0B, 0x3B, 0xB1, 0x00,
        0x00, 0x00, 0x1B, 0x36, 0x00, 0x00, 0x00, 0x00, 0x00, 0x3D,
    )
)


def with_counter(packet, counter):
    """Return a copy of ``packet`` whose first two bytes hold ``counter`` (big endian, 16 bit)."""
    out = bytearray(packet)
    if len(out) < 2:
        raise ValueError("packet too short to hold a counter")
    out[0:2] = (counter & 0xFFFF).to_bytes(2, "big")
    return bytes(out)


def initial_packet():
    """Packet sent right after connecting."""
    return _INITIAL


def strip_settings_packet():
    """Packet asking the strip to report its settings."""
    return _STRIP_SETTINGS


def power_packet(on):
    """Packet switching the strip on or off."""
    out = bytearray(_POWER)
    out[_POWER_STATE_OFFSET] = POWER_ON_BYTE if on else POWER_OFF_BYTE
    return bytes(out)


def hsv_packet(hue, saturation, value):
    """Packet setting the strip colour from byte-sized HSV components."""
    out = bytearray(_HSV)
    out[_HSV_OFFSET:_HSV_OFFSET + 3] = bytes((hue, saturation, value))
    return bytes(out)


def white_packet():
    """Packet setting the strip to white."""
    return _WHITE