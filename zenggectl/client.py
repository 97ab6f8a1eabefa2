"""BLE client for Zengge LEDnetWF strips, independent of any particular BLE stack."""

import abc
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .advertisement import Advertisement, AdvertisementDetails
from .colors import RGBColor
from .notification import Notification
from .protocol import (
    NOTIFY_UUID,
    WRITE_UUID,
    hsv_packet,
    initial_packet,
    power_packet,
    strip_settings_packet,
    white_packet,
    with_counter,
)

DEFAULT_BACKEND = "default"
NAME_PREFIX = "LEDnetWF"
_BASE_UUID_SUFFIX = "-0000-1000-8000-00805f9b34fb"


class ClientError(Exception):
    """Raised when the strip cannot be reached or driven."""


@dataclass(frozen=True)
class RawAdvertisement:
    """An advertisement as reported by the BLE stack, before any Zengge decoding."""

    local_name: str
    addr: str
    connectable: bool
    rssi: int
    manufacturer_data: bytes = b""


class BleTransport(abc.ABC):
    """The operations the client needs from a BLE stack."""

    @abc.abstractmethod
    def scan(self, duration, duplicates, handler):
        """Report every advertisement to ``handler`` for ``duration`` seconds.

        Raise TimeoutError when the time runs out and KeyboardInterrupt when interrupted.
        """

    @abc.abstractmethod
    def connect(self, addr, timeout):
        """Open a connection to the device at ``addr``."""

    @abc.abstractmethod
    def discover(self):
        """Return the UUIDs of the characteristics the connected device offers."""

    @abc.abstractmethod
    def subscribe(self, uuid, callback):
        """Call ``callback`` with the bytes of every notification on ``uuid``."""

    @abc.abstractmethod
    def write(self, uuid, data):
        """Write ``data`` to the characteristic ``uuid``."""


_BACKENDS: Dict[str, Callable[[], BleTransport]] = {}


def register_backend(name, factory):
    """Make ``factory`` available as the BLE implementation called ``name``."""
    _BACKENDS[name] = factory


def new_device(impl):
    """Create the BLE transport named ``impl``, falling back to the default one."""
    factory = _BACKENDS.get(impl) or _BACKENDS.get(DEFAULT_BACKEND)
    if factory is None:
        raise ClientError(f"no BLE backend available for {impl!r}")
    return factory()


def _normalise_uuid(uuid):
    text = str(uuid).strip().lower()
    if len(text) == 4:
        return f"0000{text}{_BASE_UUID_SUFFIX}"
    if len(text) == 8:
        return f"{text}{_BASE_UUID_SUFFIX}"
    return text


class ZenggeClient:
    """Scans for, connects to and commands a Zengge LED strip."""

    def __init__(self, device=DEFAULT_BACKEND, transport: Optional[BleTransport] = None):
        if transport is None:
            try:
                transport = new_device(device)
            except Exception as exc:
                raise ClientError(f"can't new device : {exc}") from exc
        self.device_name = device
        self._transport = transport
        self._notify_uuid = None
        self._write_uuid = None
        self._packet_counter = 0

    def scan(self, duration, duplicates, handler):
        """Report Zengge advertisements seen within ``duration`` seconds to ``handler``."""

        def on_advertisement(raw):
            if not raw.local_name.startswith(NAME_PREFIX):
                return
            data = bytes(raw.manufacturer_data)
            handler(
                Advertisement(
                    name=raw.local_name,
                    addr=raw.addr,
                    connectable=raw.connectable,
                    rssi=raw.rssi,
                    manufacturer_data=data,
                    details=AdvertisementDetails.parse(data),
                )
            )

        try:
            self._transport.scan(duration, duplicates, on_advertisement)
        except TimeoutError:
            print("done")
        except KeyboardInterrupt:
            print("canceled")

    def connect(self, addr, duration):
        """Connect to the strip at ``addr`` and locate its notify and write characteristics."""
        self._transport.connect(addr, duration)
        try:
            found = {_normalise_uuid(uuid): uuid for uuid in self._transport.discover()}
        except Exception as exc:
            raise ClientError(f"can't discover profile: {exc}") from exc

        notify = found.get(_normalise_uuid(NOTIFY_UUID))
        if notify is None:
            raise ClientError("cannot find characteristic to subscribe")
        write = found.get(_normalise_uuid(WRITE_UUID))
        if write is None:
            raise ClientError("cannot find characteristic to write")
        self._notify_uuid = notify
        self._write_uuid = write

    def _require_connection(self):
        if self._write_uuid is None:
            raise ClientError("not connected")

    def subscribe(self, handler):
        """Pass every notification from the strip, decoded, to ``handler``."""
        self._require_connection()
        self._transport.subscribe(
            self._notify_uuid, lambda data: handler(Notification.parse(data))
        )

    def _send(self, packet):
        self._require_connection()
        # The strip appears to ignore the counter, but it is kept running anyway.
        self._packet_counter = (self._packet_counter + 1) & 0xFFFF
        self._transport.write(self._write_uuid, with_counter(packet, self._packet_counter))

    def send_initial_packet(self):
        """Send the packet the vendor app sends after connecting."""
        self._send(initial_packet())

    def get_strip_settings(self):
        """Ask the strip to report its settings through a notification."""
        self._send(strip_settings_packet())

    def power_off(self):
        """Switch the strip off."""
        self._send(power_packet(False))

    def power_on(self):
        """Switch the strip on."""
        self._send(power_packet(True))

    def set_white(self):
        """Set the strip to white."""
        self._send(white_packet())

    def set_rgb_bytes(self, red, green, blue):
        """Set the strip colour from 8-bit RGB components."""
        self.set_rgb(RGBColor(red, green, blue))

    def set_rgb(self, color):
        """Set the strip colour from an RGBColor."""
        hsv = color.to_hsv()
        self._send(hsv_packet(hsv.hue, hsv.saturation, hsv.value))