"""Control Zengge (LEDnetWF) Bluetooth LED strips and decode their messages."""

__version__ = "0.1.0"