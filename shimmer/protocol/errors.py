from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Ways a connection can terminate. Every kind is fatal for the adapter."""

    TRANSPORT_READ = "transport_read"
    TRANSPORT_WRITE = "transport_write"
    END_OF_INPUT = "end_of_input"
    CLASSIFICATION = "classification"


class ShimmerError(Exception):
    """Structured adapter exception carrying the error kind + message."""

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, message: str = "") -> None:
        self.kind = kind
        self.message = message
        super().__init__(f"{kind.name}: {message}" if message else kind.name)

    def to_payload(self) -> dict:
        return {"kind": self.kind.value, "error_message": self.message}


class TransportReadError(ShimmerError):
    def __init__(self, message: str = "") -> None:
        super().__init__(ErrorKind.TRANSPORT_READ, message)


class TransportWriteError(ShimmerError):
    def __init__(self, message: str = "") -> None:
        super().__init__(ErrorKind.TRANSPORT_WRITE, message)


class StreamEndOfInput(ShimmerError):
    def __init__(self, message: str = "") -> None:
        super().__init__(ErrorKind.END_OF_INPUT, message)


class ClassificationError(ShimmerError):
    """Raised when handling an inbound line fails (classifier or event handler)."""

    def __init__(self, message: str = "", line: str = "") -> None:
        self.line = line
        super().__init__(ErrorKind.CLASSIFICATION, message)


__all__ = [
    "ErrorKind",
    "ShimmerError",
    "TransportReadError",
    "TransportWriteError",
    "StreamEndOfInput",
    "ClassificationError",
]
