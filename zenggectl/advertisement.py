"""Decoding of Zengge LEDnetWF BLE advertisements."""

from dataclasses import dataclass
from typing import Optional

from .colors import RGBColor
from .protocol import POWER_ON_BYTE

_DETAILS_LENGTH = 29


def _format_mac(mac):
    return ":".join(f"{octet:02x}" for octet in mac)


@dataclass(frozen=True)
class AdvertisementDetails:
    """State of a strip as carried in its manufacturer data."""

    firmware: int
    mac: bytes
    on: bool
    mode: int
    brightness: int
    rgb: RGBColor
    temperature: int
    led_count: int

    @classmethod
    def parse(cls, data):
        """Decode manufacturer data; return None when it is not 29 bytes long."""
        data = bytes(data)
        if len(data) != _DETAILS_LENGTH:
            return None
        return cls(
            firmware=data[2],
            mac=data[4:10],
            on=data[16] == POWER_ON_BYTE,
            mode=data[17],
            brightness=int.from_bytes(data[18:20], "little"),
            rgb=RGBColor.from_bytes(data[20:23]),
            temperature=data[23],
            led_count=data[26],
        )

    def __str__(self):
        state = "ON" if self.on else "OFF"
        return (
            f"MAC: {_format_mac(self.mac)} {state} "
            f"Mode: {self.mode:x} Brightness: {self.brightness} RGB: {self.rgb} "
            f"Temperature: {self.temperature} LEDs: {self.led_count}"
        )


@dataclass(frozen=True)
class Advertisement:
    """An advertisement seen from a Zengge strip."""

    name: str
    addr: str
    connectable: bool
    rssi: int
    manufacturer_data: bytes = b""
    details: Optional[AdvertisementDetails] = None

    def __str__(self):
        flag = "C" if self.connectable else "N"
        text = f"[{self.addr}] {flag} {self.rssi:3d}: Name {self.name}"
        if self.manufacturer_data:
            if self.details is None:
                text += f" [MD: {bytes(self.manufacturer_data).hex().upper()}]"
            else:
                text += f" [{self.details}]"
        return text