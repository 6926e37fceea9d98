from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from shimmer.protocol.framing import normalize_line


class OutboundQueue:
    """Unbounded FIFO of lines waiting to be written. No priority, no backpressure."""

    def __init__(self) -> None:
        self._lines: Deque[str] = deque()

    def enqueue(self, line: str) -> str:
        normalized = normalize_line(line)
        self._lines.append(normalized)
        return normalized

    def dequeue_one(self) -> Optional[str]:
        if not self._lines:
            return None
        return self._lines.popleft()

    def snapshot(self) -> List[str]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)


__all__ = ["OutboundQueue"]
