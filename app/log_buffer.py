from __future__ import annotations
import logging
from collections import deque
from typing import Deque, List, Optional

_MAX = 400
_buf: Deque[str] = deque(maxlen=_MAX)

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class RingBufferHandler(logging.Handler):
    """Keeps the last _MAX formatted records for crash/soak reports."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            push(self.format(record))
        except Exception:
            self.handleError(record)


def push(line: str) -> None:
    _buf.append(str(line))


def tail(n: int = 200) -> List[str]:
    if n <= 0:
        return []
    return list(_buf)[-n:]


def clear() -> None:
    _buf.clear()


def install(level: int = logging.INFO, stream_level: Optional[int] = logging.WARNING) -> RingBufferHandler:
    """Attach the ring buffer (and optionally stderr) to the root logger. Idempotent."""
    root = logging.getLogger()
    root.setLevel(min(level, stream_level if stream_level is not None else level))
    for h in root.handlers:
        if isinstance(h, RingBufferHandler):
            h.setLevel(level)
            return h
    fmt = logging.Formatter(_FORMAT)
    ring = RingBufferHandler(level=level)
    ring.setFormatter(fmt)
    root.addHandler(ring)
    if stream_level is not None:
        sh = logging.StreamHandler()
        sh.setLevel(stream_level)
        sh.setFormatter(fmt)
        root.addHandler(sh)
    return ring
