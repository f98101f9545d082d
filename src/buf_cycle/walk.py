"""Working-set construction and cyclic navigation for a switch session.

No buf_cycle imports beyond typing, so this module sits at Layer 0 and is
tested without curses or a real host.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from buf_cycle.host import Host

HIDDEN_MARKER = " "


def capture(host: Host) -> tuple:
    """Snapshot the host's item list, most recently shown first."""
    return tuple(host.list_items())


def is_eligible(item: Any, marker: str = HIDDEN_MARKER) -> bool:
    """Items whose name starts with the hidden marker never take part in cycling."""
    return not item.name.startswith(marker)


def build_walk(snapshot, current, marker: str = HIDDEN_MARKER) -> tuple:
    """Build the ordered working set for one session.

    The current item always comes first (even when it is itself hidden),
    followed by every other eligible item in snapshot order. Items are
    compared by identity, so each one appears exactly once.
    """
    walk = [current]
    for item in snapshot:
        if item is current or not is_eligible(item, marker):
            continue
        if any(item is seen for seen in walk):
            continue
        walk.append(item)
    return tuple(walk)


def advance(index: int, direction: int, length: int) -> int:
    """Step ``index`` by ``direction`` (+1 or -1), wrapping within ``length``."""
    return ((index + direction) % length + length) % length
