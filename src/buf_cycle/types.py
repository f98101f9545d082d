import time
from dataclasses import dataclass, field
from enum import Enum, auto


@dataclass(eq=False)
class Buffer:
    """A named, in-memory text buffer.

    Compared by identity: two buffers with the same name are still
    different buffers.
    """

    name: str
    lines: list[str] = field(default_factory=list)
    last_shown: float = 0.0  # set by the host when the buffer is selected


class EventKind(Enum):
    KEY = auto()
    FOCUS = auto()  # resize / focus change, not a user command


@dataclass(frozen=True)
class InputEvent:
    kind: EventKind
    key: int = -1


def ts_str(t: float) -> str:
    lt = time.localtime(t)
    return time.strftime("%H:%M:%S", lt)
