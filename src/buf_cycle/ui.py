from __future__ import annotations

import curses
from typing import TYPE_CHECKING

from buf_cycle.host import BufferList
from buf_cycle.prompt import Prompt
from buf_cycle.types import Buffer, EventKind, InputEvent

if TYPE_CHECKING:
    from buf_cycle.keys import KeyMap


class EditorUI:
    """Curses front end: one visible buffer, a mode line and an echo line.

    Also serves as the switcher's host: it owns the buffer list and the
    echo line the switcher draws into.
    """

    def __init__(self, stdscr, buffers: BufferList, keymap: KeyMap,
                 messages: Buffer | None = None):
        self.stdscr = stdscr
        self.buffers = buffers
        self.keymap = keymap
        self.messages = messages
        self.visible: Buffer | None = buffers.buffers[0] if len(buffers) else None

        self.prompt = Prompt()
        self.message = ""            # echo line when nothing else is shown
        self.switch_text: str | None = None  # set while a switch session is active

        try:
            curses.curs_set(1)
        except curses.error:
            pass
        self.stdscr.keypad(True)
        self.stdscr.timeout(-1)

    # --- Host interface ---

    def list_items(self) -> list[Buffer]:
        return self.buffers.buffers

    def current_item(self) -> Buffer:
        return self.visible

    def display_item(self, item: Buffer):
        self.visible = item
        self.draw()

    def is_restricted_context(self) -> bool:
        return self.prompt.active

    def demote(self, item: Buffer):
        self.buffers.bury(item)

    def wait_for_input(self, timeout: float) -> InputEvent | None:
        self.stdscr.timeout(max(1, int(timeout * 1000)))
        try:
            ch = self.stdscr.getch()
        finally:
            self.stdscr.timeout(-1)
        if ch == -1:
            return None
        if ch == curses.KEY_RESIZE:
            return InputEvent(EventKind.FOCUS, ch)
        return InputEvent(EventKind.KEY, ch)

    def status_width(self) -> int:
        return max(1, self.stdscr.getmaxyx()[1] - 1)

    def status_line(self, text: str):
        self.switch_text = text
        self.draw()

    def clear_status_line(self):
        self.switch_text = None
        self.draw()

    # --- Buffers and messages ---

    def switch_to(self, buf: Buffer):
        """Show ``buf`` and make it the most recently used buffer."""
        self.buffers.select(buf)
        self.visible = buf

    def add_message(self, text: str):
        self.message = text
        if self.messages is not None:
            self.messages.lines.append(text)

    # --- Drawing ---

    def draw(self):
        h, w = self.stdscr.getmaxyx()
        self.stdscr.erase()
        text_h = max(0, h - 2)

        lines = self.visible.lines if self.visible else []
        for row, line in enumerate(lines[:text_h]):
            try:
                self.stdscr.addnstr(row, 0, line, w - 1)
            except curses.error:
                pass

        name = self.visible.name if self.visible else ""
        mode = f"-- {name} --  [{len(self.buffers)} buffers]"
        try:
            self.stdscr.addnstr(h - 2, 0, mode.ljust(w - 1), w - 1, curses.A_REVERSE)
        except curses.error:
            pass

        if self.switch_text is not None:
            echo = self.switch_text
        elif self.prompt.active:
            echo = self.prompt.render()
        else:
            echo = self.message
        try:
            self.stdscr.addnstr(h - 1, 0, echo, w - 1)
        except curses.error:
            pass

        if self.prompt.active and self.switch_text is None:
            cursor_x = min(w - 2, len(self.prompt.prefix) + self.prompt.cursor)
            try:
                self.stdscr.move(h - 1, max(0, cursor_x))
            except curses.error:
                pass
        self.stdscr.refresh()

    # --- Input ---

    def handle_key(self, ch: int):
        # Returns (command_line or None, switch_direction or None)
        if ch == -1:
            return None, None

        # An open prompt keeps the keys it edits with, even bound ones
        if self.prompt.active and self.prompt.uses_key(ch):
            return self.prompt.handle_key(ch), None

        direction = self.keymap.direction_for(ch)
        if direction is not None:
            return None, direction

        if self.prompt.active:
            return self.prompt.handle_key(ch), None

        if ch == ord(self.prompt.prefix):
            self.prompt.open()
            self.message = ""
        return None, None
