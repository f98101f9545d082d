import curses

ENTER_KEYS = (curses.KEY_ENTER, 10, 13)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)
EDIT_KEYS = (27, curses.KEY_DC, curses.KEY_LEFT, curses.KEY_RIGHT, 1, 5, 21)


class Prompt:
    """The ``:`` command line: an editable line of text and whether it is open.

    While open, the prompt owns the keyboard and switching is refused.
    """

    def __init__(self, prefix: str = ":"):
        self.prefix = prefix
        self.active = False
        self._text = ""
        self._cursor = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    def open(self):
        self.active = True
        self._text = ""
        self._cursor = 0

    def close(self) -> str:
        """Close the prompt and return what was typed."""
        text = self._text
        self.active = False
        self._text = ""
        self._cursor = 0
        return text

    def render(self) -> str:
        return self.prefix + self._text

    def uses_key(self, ch: int) -> bool:
        """Whether ``ch`` edits or submits the line."""
        if ch in ENTER_KEYS or ch in BACKSPACE_KEYS or ch in EDIT_KEYS:
            return True
        return 0 <= ch < 256 and chr(ch).isprintable()

    def handle_key(self, ch: int) -> str | None:
        """Edit the line with ``ch``. Returns the line when Enter submits it."""
        if ch in ENTER_KEYS:
            return self.close()
        if ch == 27:  # Esc
            self.close()
        elif ch in BACKSPACE_KEYS:
            if not self._text:
                self.close()
            elif self._cursor > 0:
                self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
                self._cursor -= 1
        elif ch == curses.KEY_DC:
            self._text = self._text[: self._cursor] + self._text[self._cursor + 1 :]
        elif ch == curses.KEY_LEFT:
            self._cursor = max(0, self._cursor - 1)
        elif ch == curses.KEY_RIGHT:
            self._cursor = min(len(self._text), self._cursor + 1)
        elif ch == 1:  # Ctrl+A
            self._cursor = 0
        elif ch == 5:  # Ctrl+E
            self._cursor = len(self._text)
        elif ch == 21:  # Ctrl+U
            self._text = self._text[self._cursor :]
            self._cursor = 0
        elif 0 <= ch < 256 and chr(ch).isprintable():
            self.insert(chr(ch))
        return None

    def insert(self, s: str):
        self._text = self._text[: self._cursor] + s + self._text[self._cursor :]
        self._cursor += len(s)
