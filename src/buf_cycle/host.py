"""Host-side collaborators of the switcher.

``Host`` is the surface a switch session reads from and writes to.
``BufferList`` is the recency-ordered list of buffers a host keeps.
"""

from __future__ import annotations

import time
from typing import Protocol

from buf_cycle.types import Buffer, InputEvent


class Host(Protocol):
    def list_items(self) -> list[Buffer]:
        """All buffers, most recently shown first."""
        ...

    def current_item(self) -> Buffer: ...

    def display_item(self, item: Buffer) -> None:
        """Show ``item`` without touching the recency order."""
        ...

    def is_restricted_context(self) -> bool:
        """True while focus is somewhere a session must not start (e.g. a prompt)."""
        ...

    def demote(self, item: Buffer) -> None:
        """Move ``item`` to the least recently used end."""
        ...

    def wait_for_input(self, timeout: float) -> InputEvent | None:
        """Block for up to ``timeout`` seconds. None means the wait timed out."""
        ...

    def status_width(self) -> int: ...

    def status_line(self, text: str) -> None: ...

    def clear_status_line(self) -> None: ...


class BufferList:
    """Buffers ordered from most to least recently shown."""

    def __init__(self, buffers: list[Buffer] | None = None):
        self._buffers: list[Buffer] = list(buffers or [])

    def __len__(self) -> int:
        return len(self._buffers)

    def __iter__(self):
        return iter(self._buffers)

    @property
    def buffers(self) -> list[Buffer]:
        return list(self._buffers)

    def names(self) -> list[str]:
        return [b.name for b in self._buffers]

    def add(self, buf: Buffer):
        """Add a new buffer at the least recently used end."""
        if self._index(buf) is None:
            self._buffers.append(buf)

    def find(self, name: str) -> Buffer | None:
        for b in self._buffers:
            if b.name == name:
                return b
        return None

    def select(self, buf: Buffer, now: float | None = None):
        """Make ``buf`` the most recently shown buffer."""
        idx = self._index(buf)
        if idx is None:
            raise KeyError(buf.name)
        self._buffers.insert(0, self._buffers.pop(idx))
        buf.last_shown = time.time() if now is None else now

    def bury(self, buf: Buffer):
        """Move ``buf`` behind every other buffer, keeping the others' order."""
        idx = self._index(buf)
        if idx is None:
            return
        self._buffers.append(self._buffers.pop(idx))

    def kill(self, buf: Buffer):
        idx = self._index(buf)
        if idx is not None:
            del self._buffers[idx]

    def _index(self, buf: Buffer) -> int | None:
        for i, b in enumerate(self._buffers):
            if b is buf:
                return i
        return None
