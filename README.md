# zenggectl

A command-line controller and a small library for Zengge LED strips: the
Bluetooth Low Energy controllers that advertise themselves as `LEDnetWF...`.
It finds strips nearby, switches them on and off and sets their colour, and it
decodes the advertisements and notifications those strips send.

## Installation

```
pip install .
```

This installs the `zengge-led-ctl` command.

## What the package does not do

The package contains no Bluetooth stack and ships no Bluetooth transport. Out of
the box, every command that talks to a device (`scan`, `connect`, `power`,
`color`) stops with an error such as:

```
error executing command: can't new device : no BLE backend available for 'default'
```

To drive real hardware you supply a transport yourself (see below) and register
it in the same Python process that runs the commands.

## Providing a Bluetooth transport

A transport is a subclass of `zenggectl.client.BleTransport` implementing:

- `scan(duration, duplicates, handler)`: call `handler` with a
  `zenggectl.client.RawAdvertisement` (`local_name`, `addr`, `connectable`,
  `rssi`, `manufacturer_data`) for every advertisement seen during `duration`
  seconds; raise `TimeoutError` when the time runs out and `KeyboardInterrupt`
  when interrupted.
- `connect(addr, timeout)`: open a connection to the device at `addr`.
- `discover()`: return the UUIDs of the characteristics the device offers.
  Short forms such as `ff01` and full 128-bit UUIDs are both recognised.
- `subscribe(uuid, callback)`: call `callback` with the bytes of each
  notification on `uuid`.
- `write(uuid, data)`: write `data` to the characteristic `uuid`.

Register a factory (called with no arguments) under a name with
`zenggectl.client.register_backend(name, factory)`. The `--device` option picks
a backend by name; a name that is not registered falls back to the one
registered as `default`. A small launcher might look like this:

```python
import sys

from zenggectl import cli
from zenggectl.client import register_backend

from my_transport import MyTransport  # your own BleTransport subclass

register_backend("default", MyTransport)
sys.exit(cli.main())
```

## Command-line usage

Running `zengge-led-ctl` with no subcommand prints the help. On failure a
command prints `error executing command: ...` to standard error and exits with
status 1.

Show the installed version:

```
zengge-led-ctl version
```

List Zengge devices in range (only devices whose name starts with `LEDnetWF`):

```
zengge-led-ctl scan
zengge-led-ctl scan --no-dup -w 10s
```

Each device is printed as its address, `C` (connectable) or `N`, its signal
strength and its name. When its 29-byte manufacturer data decodes, the MAC,
power state, mode, brightness, colour, temperature and LED count follow;
otherwise the raw manufacturer data is shown in hex. Duplicate advertisements
are reported unless `--no-dup` is given. The scan prints `done` when its time
is up and `canceled` when interrupted.

Switch a strip on or off. The state is `on`, `off`, `1` or `0`, in any case:

```
zengge-led-ctl power 00:00:5E:00:53:01 on
zengge-led-ctl power 00:00:5E:00:53:01 off
```

Set a colour from decimal red, green and blue values, each 0 to 255:

```
zengge-led-ctl color 00:00:5E:00:53:01 255 64 0
```

The colour is converted to the strip's HSV encoding (hue in degrees halved,
saturation and value in percent) before it is sent.

Connect, print every notification the strip sends back, send the initial
packet, request the strip's settings and then power it off, waiting five
seconds after each step:

```
zengge-led-ctl connect 00:00:5E:00:53:01
```

`scan`, `connect`, `power` and `color` accept:

- `-d`, `--device`: the registered backend to use (default `default`)
- `-w`, `--duration`: how long to scan, or the connection timeout, written as a
  duration such as `5s`, `500ms`, `1m30s` (default `5s`)

## Library use

- `zenggectl.protocol` holds the characteristic UUIDs and builds the packets
  the strip accepts: `power_packet(on)`, `hsv_packet(hue, saturation, value)`,
  `white_packet()`, `initial_packet()` and `strip_settings_packet()`.
  `with_counter(packet, counter)` returns a copy with the 16-bit counter in its
  first two bytes.
- `zenggectl.colors` provides `rgb_to_hsv(r, g, b)` (degrees, 0..1, 0..1),
  `rgb_to_hsv_bytes(r, g, b)`, and the `RGBColor` (with `from_bytes` and
  `to_hsv`) and `HSVColor` values.
- `zenggectl.advertisement` decodes manufacturer data with
  `AdvertisementDetails.parse(data)`, which returns `None` unless the data is
  29 bytes long; `Advertisement` describes a seen strip.
- `zenggectl.notification` decodes notifications with
  `Notification.parse(data)`: the JSON body after an 8-byte header becomes
  `NotificationDetails` (`code`, `payload_raw`), and a 14-byte hex state payload
  becomes `NotificationPayload`. Anything else is kept only as raw bytes.
- `zenggectl.client.ZenggeClient(device="default", transport=None)` drives a
  strip: `scan`, `connect`, `subscribe`, `send_initial_packet`,
  `get_strip_settings`, `power_on`, `power_off`, `set_white`, `set_rgb` and
  `set_rgb_bytes`. Problems reaching or driving the strip raise
  `zenggectl.client.ClientError`.

```python
from zenggectl.client import ZenggeClient

client = ZenggeClient(transport=MyTransport())
client.connect("00:00:5E:00:53:01", 5.0)
client.set_rgb_bytes(255, 64, 0)
```

## Running the tests

```
pip install .[test]
pytest
```