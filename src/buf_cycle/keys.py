import curses

DEFAULT_FORWARD_KEYS = ["f6"]
DEFAULT_BACKWARD_KEYS = ["S-f6"]

_NAMED_KEYS = {
    "tab": 9,
    "btab": curses.KEY_BTAB,
    "s-tab": curses.KEY_BTAB,
    "esc": 27,
    "pgup": curses.KEY_PPAGE,
    "pgdn": curses.KEY_NPAGE,
}


def parse_key(spec: str) -> int:
    """Parse a key spec like ``f6``, ``S-f6``, ``C-n`` or ``]`` into a curses key code."""
    s = spec.strip()
    low = s.lower()
    if low in _NAMED_KEYS:
        return _NAMED_KEYS[low]

    shifted = False
    if low.startswith("s-") and len(low) > 2:
        shifted = True
        low = low[2:]
    if low.startswith("f") and low[1:].isdigit():
        n = int(low[1:])
        if 1 <= n <= 12:
            # Most terminals send F13..F24 for shifted F1..F12
            return curses.KEY_F0 + (n + 12 if shifted else n)
    if shifted:
        raise ValueError(f"Unknown key spec: {spec!r}")

    if low.startswith("c-") and len(low) == 3 and low[2].isalpha():
        return ord(low[2]) & 0x1F

    if len(s) == 1 and s.isprintable():
        return ord(s)
    raise ValueError(f"Unknown key spec: {spec!r}")


class KeyMap:
    """Trigger keys bound to forward (+1) and backward (-1) advance."""

    def __init__(self, forward: list[str] | None = None, backward: list[str] | None = None):
        fwd = DEFAULT_FORWARD_KEYS if forward is None else forward
        back = DEFAULT_BACKWARD_KEYS if backward is None else backward
        self.forward = {parse_key(k) for k in fwd}
        self.backward = {parse_key(k) for k in back}
        both = [k for k in back if parse_key(k) in self.forward]
        if both:
            raise ValueError(f"Keys bound to both directions: {', '.join(both)}")

    def direction_for(self, code: int) -> int | None:
        if code in self.forward:
            return 1
        if code in self.backward:
            return -1
        return None

    def is_trigger(self, code: int) -> bool:
        return self.direction_for(code) is not None
