from .serial_bridge import SerialBridge, parse_frame

__all__ = [
    "SerialBridge",
    "parse_frame",
]
