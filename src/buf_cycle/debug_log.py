import time

from buf_cycle.types import ts_str

DEFAULT_LOG_PATH = "buf_cycle_debug.log"


class DebugLogger:
    """Optional debug log of switch-session events."""

    def __init__(self, path: str = DEFAULT_LOG_PATH):
        self.enabled = False
        self.path = path
        self._fh = None

    def start(self):
        self._fh = open(self.path, "a", encoding="utf-8")
        self.enabled = True
        sep = f"\n{'='*60}\n  Session started: {time.strftime('%Y-%m-%d %H:%M:%S')}\n{'='*60}\n"
        self._fh.write(sep)
        self._fh.flush()

    def stop(self):
        self.enabled = False
        if self._fh:
            try:
                self._fh.close()
            except OSError:
                pass
        self._fh = None

    def toggle(self) -> bool:
        if self.enabled:
            self.stop()
        else:
            self.start()
        return self.enabled

    def log(self, event: str, **fields):
        if not self.enabled or not self._fh:
            return
        extra = " ".join(f"{k}={v!r}" for k, v in fields.items())
        self._fh.write(f"{ts_str(time.time())} | {event:<8}" + (f" | {extra}" if extra else "") + "\n")
        self._fh.flush()
