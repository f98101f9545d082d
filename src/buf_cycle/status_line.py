"""Bounded-width status line for a switch session.

Each name is drawn as `` name `` with the current one as `` <name>``.
The leftmost visible label drops its leading space. When the current
label would fall off the right edge, the line scrolls left just far
enough to keep it in view, so it behaves like a marquee that follows
the selection rather than a fixed slice of the list.
"""

from __future__ import annotations

from typing import Sequence


def label(name: str, current: bool, left_edge: bool) -> str:
    """Return the rendered label for one name."""
    lead = "" if left_edge else " "
    if current:
        return f"{lead}<{name}>"
    return f"{lead}{name} "


def label_width(name: str, current: bool, left_edge: bool) -> int:
    # Same arithmetic as label(), without building the string
    return len(name) + (2 if current else 1) + (0 if left_edge else 1)


def find_first_visible(names: Sequence[str], index: int, width: int) -> int:
    """Return the index of the leftmost label so that ``index`` stays visible.

    Walks from 0 to ``index`` summing label widths. Whenever a label
    would overflow ``width``, that label becomes the new left edge and
    the sum restarts from it.
    """
    first = 0
    total = 0
    for i in range(index + 1):
        w = label_width(names[i], i == index, i == first)
        if total + w > width and i != first:
            first = i
            total = label_width(names[i], i == index, True)
        else:
            total += w
    return first


def render(names: Sequence[str], index: int, width: int) -> str:
    """Render ``names`` with ``names[index]`` highlighted, in at most ``width`` columns."""
    if not names or width <= 0:
        return ""
    first = find_first_visible(names, index, width)
    parts = [label(names[first], first == index, True)]
    used = len(parts[0])
    for i in range(first + 1, len(names)):
        text = label(names[i], i == index, False)
        if used + len(text) > width:
            break
        parts.append(text)
        used += len(text)
    # A single label wider than the line is clipped
    return "".join(parts)[:width]
