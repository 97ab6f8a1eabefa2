"""Decoding of notifications sent back by Zengge LEDnetWF strips."""

import json
import re
from dataclasses import dataclass
from typing import Optional

from .colors import RGBColor
from .protocol import POWER_ON_BYTE

_PAYLOAD_LENGTH = 14
_PAYLOAD_MARKER = 0x81
_HEADER_LENGTH = 8
_MIN_LENGTH = 10
_HEX = re.compile(r"(?:[0-9a-fA-F]{2})*")


@dataclass(frozen=True)
class NotificationPayload:
    """Strip state decoded from a notification's hex payload."""

    device: int
    on: bool
    mode: int
    brightness: int
    rgb: RGBColor
    temperature: int
    led_count: int

    @classmethod
    def parse(cls, data):
        """Decode a 14-byte state payload; return None for anything else."""
        data = bytes(data)
        if len(data) != _PAYLOAD_LENGTH or data[0] != _PAYLOAD_MARKER:
            return None
        return cls(
            device=data[1],
            on=data[2] == POWER_ON_BYTE,
            mode=data[4],
            brightness=data[5],
            rgb=RGBColor.from_bytes(data[6:9]),
            temperature=data[9],
            led_count=data[11],
        )

    def __str__(self):
        state = "ON" if self.on else "OFF"
        return (
            f"Device: {self.device:X} {state} "
            f"Mode: {self.mode:x} Brightness: {self.brightness} RGB: {self.rgb} "
            f"Temperature: {self.temperature} LEDs: {self.led_count}"
        )


def _field(obj, key, kind, default):
    value = obj.get(key)
    if value is None:
        return default
    if kind is int and (isinstance(value, bool) or not isinstance(value, int)):
        raise TypeError(key)
    if kind is str and not isinstance(value, str):
        raise TypeError(key)
    return value


@dataclass(frozen=True)
class NotificationDetails:
    """The JSON body of a notification."""

    code: int = 0
    payload_raw: str = ""
    payload: Optional[NotificationPayload] = None

    @classmethod
    def parse(cls, data):
        """Decode the JSON after the 8-byte header; return None if it is not such a body."""
        data = bytes(data)
        if len(data) < _MIN_LENGTH:
            return None
        text = data[_HEADER_LENGTH:].decode("utf-8", errors="replace")
        try:
            body = json.loads(text)
        except ValueError:
            return None
        if body is None:
            body = {}
        if not isinstance(body, dict):
            return None
        try:
            code = _field(body, "code", int, 0)
            payload_raw = _field(body, "payload", str, "")
        except TypeError:
            return None

        payload = None
        if _HEX.fullmatch(payload_raw):
            payload = NotificationPayload.parse(bytes.fromhex(payload_raw))
        return cls(code=code, payload_raw=payload_raw, payload=payload)

    def __str__(self):
        if self.payload is None:
            return f"Code: {self.code} [Payload: {self.payload_raw}]"
        return f"Code: {self.code} [{self.payload}]"


@dataclass(frozen=True)
class Notification:
    """A raw notification together with whatever could be decoded from it."""

    raw: bytes
    details: Optional[NotificationDetails] = None

    @classmethod
    def parse(cls, data):
        """Wrap raw notification bytes, decoding details where possible."""
        raw = bytes(data)
        return cls(raw=raw, details=NotificationDetails.parse(raw))

    def __str__(self):
        if self.details is None:
            return f"[{self.raw.hex().upper()}]"
        return str(self.details)