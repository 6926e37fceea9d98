from __future__ import annotations

import codecs
from typing import Optional

from .constants import ENCODING, LINE_DELIMITER


def normalize_line(text: str) -> str:
    """Ensure the line ends with exactly one delimiter."""
    if text.endswith(LINE_DELIMITER):
        return text
    return text + LINE_DELIMITER


def encode_line(text: str) -> bytes:
    """Encode an outbound line into bytes (text + delimiter)."""
    return normalize_line(text).encode(ENCODING)


def split_line(data: str) -> tuple[Optional[str], str]:
    """
    Split the first complete line off ``data``.
    Returns ``(line, rest)``; ``line`` is None (and ``rest`` is ``data``) when no delimiter is present.
    """
    index = data.find(LINE_DELIMITER)
    if index == -1:
        return None, data
    return data[:index], data[index + len(LINE_DELIMITER) :]


class LineBuffer:
    """
    Pending inbound text.

    Chunks are decoded incrementally so a multi-byte character split across two reads
    is decoded once both halves arrived. Invalid bytes decode to U+FFFD instead of failing.
    There is no size cap: a peer that never sends a newline grows the buffer without bound.
    """

    def __init__(self, encoding: str = ENCODING) -> None:
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._data = ""

    def feed(self, chunk: bytes) -> None:
        self._data += self._decoder.decode(chunk)

    def has_line(self) -> bool:
        return LINE_DELIMITER in self._data

    def pop_line(self) -> Optional[str]:
        line, self._data = split_line(self._data)
        return line

    @property
    def pending(self) -> str:
        return self._data

    def __len__(self) -> int:
        return len(self._data)


__all__ = ["normalize_line", "encode_line", "split_line", "LineBuffer"]
