from __future__ import annotations

from buf_cycle.config import Config
from buf_cycle.debug_log import DebugLogger
from buf_cycle.host import BufferList
from buf_cycle.keys import KeyMap
from buf_cycle.session import BufferSwitcher
from buf_cycle.types import Buffer, EventKind
from buf_cycle.ui import EditorUI

DEFAULT_BUFFERS = ["*scratch*", "notes", "todo"]
MESSAGES_NAME = " *Messages*"


def _scratch_lines(name: str) -> list[str]:
    return [
        f"Buffer: {name}",
        "",
        "Press the switch keys to cycle buffers, ':' for the command prompt.",
        "Commands: new NAME, b NAME, kill, ls, messages, debug, quit",
    ]


def make_buffers(names: list[str]) -> tuple[BufferList, Buffer]:
    """Build the initial buffer list plus the hidden messages buffer."""
    buffers = BufferList()
    for name in names or DEFAULT_BUFFERS:
        if buffers.find(name) is None:
            buffers.add(Buffer(name, lines=_scratch_lines(name)))
    messages = Buffer(MESSAGES_NAME)
    buffers.add(messages)
    return buffers, messages


def run_command(ui: EditorUI, line: str, logger: DebugLogger) -> bool:
    """Run a prompt command. Returns False when the editor should quit."""
    cmd, _, arg = line.strip().partition(" ")
    cmd = cmd.lower()
    arg = arg.strip()

    if cmd in ("q", "quit"):
        return False
    if not cmd:
        return True

    if cmd == "new":
        if not arg:
            ui.add_message("Usage: new NAME")
        elif ui.buffers.find(arg) is not None:
            ui.add_message(f"Buffer exists: {arg}")
        else:
            buf = Buffer(arg, lines=_scratch_lines(arg))
            ui.buffers.add(buf)
            ui.switch_to(buf)
            ui.add_message(f"Created {arg}")
    elif cmd == "b":
        buf = ui.buffers.find(arg)
        if buf is None:
            ui.add_message(f"No buffer named {arg!r}")
        else:
            ui.switch_to(buf)
    elif cmd == "messages":
        if ui.messages is not None:
            ui.switch_to(ui.messages)
    elif cmd == "kill":
        _kill_visible(ui)
    elif cmd == "ls":
        ui.add_message(" | ".join(n.strip() for n in ui.buffers.names()))
    elif cmd == "debug":
        state = logger.toggle()
        ui.add_message(f"Debug logging {'ON' if state else 'OFF'}")
    else:
        ui.add_message(f"Unknown command: {cmd}")
    return True


def _kill_visible(ui: EditorUI):
    buf = ui.visible
    if buf is None or buf is ui.messages:
        ui.add_message("Cannot kill this buffer")
        return
    others = [b for b in ui.buffers if b is not buf and b is not ui.messages]
    if not others:
        ui.add_message("Cannot kill the last buffer")
        return
    ui.buffers.kill(buf)
    ui.switch_to(others[0])
    ui.add_message(f"Killed {buf.name}")


def run_editor(stdscr, config: Config, names: list[str] | None = None, debug: bool = False):
    logger = DebugLogger()
    if debug:
        logger.start()

    keymap = KeyMap(config.forward_keys, config.backward_keys)
    buffers, messages = make_buffers(names or [])
    ui = EditorUI(stdscr, buffers, keymap, messages=messages)
    ui.switch_to(buffers.buffers[0])
    switcher = BufferSwitcher(
        ui,
        keymap,
        timeout=config.timeout,
        hidden_marker=config.hidden_marker,
        logger=logger,
    )
    ui.add_message("Type :quit to exit.")

    try:
        while True:
            ui.draw()
            ch = stdscr.getch()
            # A key that ends a switch session is handled like any other key
            while ch is not None:
                line, direction = ui.handle_key(ch)
                ch = None
                if direction is not None:
                    event = switcher.run(direction)
                    if not ui.is_restricted_context():
                        # Stamp the committed pick as the latest shown
                        ui.buffers.select(ui.visible)
                    if event is not None and event.kind is EventKind.KEY:
                        ch = event.key
                elif line is not None and not run_command(ui, line, logger):
                    return
    except KeyboardInterrupt:
        return
    finally:
        logger.stop()
