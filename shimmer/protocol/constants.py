"""Protocol-wide constants for the Shimmer line protocol."""

ENCODING = "utf-8"
LINE_DELIMITER = "\n"
FIELD_DELIMITER = "|"
DEFAULT_TICK_INTERVAL = 0.05  # seconds between drain ticks
DEFAULT_READ_SIZE = 4096  # max bytes per transport read

__all__ = [
    "ENCODING",
    "LINE_DELIMITER",
    "FIELD_DELIMITER",
    "DEFAULT_TICK_INTERVAL",
    "DEFAULT_READ_SIZE",
]
