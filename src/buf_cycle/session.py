"""Switch-session state machine.

A session starts on the first trigger key, stays active while trigger
keys keep arriving within the idle timeout, and ends on timeout or on
any other input. Ending a session commits the choice: the selected
buffer becomes the most recently used one and every other buffer keeps
its relative order from when the session began.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from buf_cycle.status_line import render
from buf_cycle.types import EventKind, InputEvent
from buf_cycle.walk import HIDDEN_MARKER, advance, build_walk, capture

if TYPE_CHECKING:
    from buf_cycle.debug_log import DebugLogger
    from buf_cycle.host import Host
    from buf_cycle.keys import KeyMap


class SessionState(Enum):
    IDLE = auto()
    ACTIVE = auto()


@dataclass
class SwitchSession:
    snapshot: tuple
    walk: tuple
    index: int = 0

    @property
    def selected(self):
        return self.walk[self.index]

    def names(self) -> list[str]:
        return [item.name for item in self.walk]


class BufferSwitcher:
    def __init__(
        self,
        host: Host,
        keymap: KeyMap,
        timeout: float = 3.0,
        hidden_marker: str = HIDDEN_MARKER,
        logger: DebugLogger | None = None,
    ):
        self.host = host
        self.keymap = keymap
        self.timeout = timeout
        self.hidden_marker = hidden_marker
        self.logger = logger
        self.session: SwitchSession | None = None

    @property
    def state(self) -> SessionState:
        return SessionState.IDLE if self.session is None else SessionState.ACTIVE

    # --- Transitions ---

    def start(self) -> bool:
        """Begin a session. Returns False if one is running or the host refuses."""
        if self.session is not None:
            return False
        if self.host.is_restricted_context():
            self._log("refused", reason="restricted context")
            return False
        snapshot = capture(self.host)
        walk = build_walk(snapshot, self.host.current_item(), self.hidden_marker)
        self.session = SwitchSession(snapshot=snapshot, walk=walk)
        self._log("start", walk=self.session.names())
        return True

    def step(self, direction: int):
        """Advance the selection once and redraw the status line."""
        s = self.session
        if s is None:
            return
        new_index = advance(s.index, direction, len(s.walk))
        if new_index != s.index:
            s.index = new_index
            self.host.display_item(s.selected)
        self._redraw()
        self._log("advance", index=s.index, name=s.selected.name)

    def finish(self, reason: str = "input"):
        """End the session and commit the selected buffer as most recent."""
        s = self.session
        if s is None:
            return
        chosen = s.selected
        # Burying everything else in snapshot order leaves the chosen
        # buffer first and the rest in their original relative order.
        for item in s.snapshot:
            if item is not chosen:
                self.host.demote(item)
        self.session = None
        self.host.clear_status_line()
        self._log("finish", chosen=chosen.name, reason=reason)

    # --- Interactive loop ---

    def run(self, direction: int) -> InputEvent | None:
        """Drive a whole session from the trigger key that started it.

        Returns the input event that ended the session so the caller can
        dispatch it as usual, or None if the session timed out (or never
        started).
        """
        if self.session is None and not self.start():
            return None
        reason = "interrupt"
        try:
            while True:
                self.step(direction)
                event = self._wait_for_command()
                if event is None:
                    reason = "timeout"
                    return None
                next_direction = self.keymap.direction_for(event.key)
                if next_direction is None:
                    reason = "input"
                    return event
                direction = next_direction
        finally:
            self.finish(reason)

    def _redraw(self):
        s = self.session
        self.host.status_line(render(s.names(), s.index, self.host.status_width()))

    def _wait_for_command(self) -> InputEvent | None:
        """Wait out the idle timeout, redrawing on focus changes."""
        deadline = time.monotonic() + self.timeout
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return None
            event = self.host.wait_for_input(remaining)
            if event is None:
                return None
            if event.kind is EventKind.FOCUS:
                # The status width may have changed
                self._redraw()
                continue
            return event

    def _log(self, event: str, **fields):
        if self.logger:
            self.logger.log(event, **fields)
