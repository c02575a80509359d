"""Terminal spinners that show progress while a long request runs."""

from __future__ import annotations

import sys
import threading
from typing import Optional, Sequence, TextIO

_BLUE = "\x1b[34m"
_RESET = "\x1b[0m"
_CLEAR_LINE = "\r\x1b[2K"

_ARROW_FRAMES = ("▹▹▹▹▹", "▸▹▹▹▹", "▹▸▹▹▹", "▹▹▸▹▹", "▹▹▹▸▹", "▹▹▹▹▸", "")
_BAR_FRAMES = (
    "[    ]", "[=   ]", "[==  ]", "[=== ]", "[ ===]", "[  ==]", "[   =]", "[    ]",
    "[   =]", "[  ==]", "[ ===]", "[====]", "[=== ]", "[==  ]", "[=   ]",
)


class Spinner:
    """A one-line spinner redrawn on a background thread.

    The last of ``frames`` is shown once the spinner has finished; the others
    cycle while it runs. Output is drawn only when ``enabled`` is true, which
    defaults to whether ``stream`` is a terminal.
    """

    def __init__(
        self,
        frames: Sequence[str],
        interval: float,
        message: str = "",
        separator: str = "",
        stream: Optional[TextIO] = None,
        enabled: Optional[bool] = None,
        styled: Optional[bool] = None,
    ) -> None:
        if len(frames) < 2:
            raise ValueError("a spinner needs at least one ticking and one final frame")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.frames = tuple(frames)
        self.interval = interval
        self.separator = separator
        self.stream = stream if stream is not None else sys.stderr
        is_tty = bool(getattr(self.stream, "isatty", lambda: False)())
        self.enabled = is_tty if enabled is None else enabled
        self.styled = is_tty if styled is None else styled
        self._message = message
        self._position = 0
        self._finished = False
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def message(self) -> str:
        return self._message

    @property
    def is_finished(self) -> bool:
        return self._finished

    def _frame(self) -> str:
        if self._finished:
            return self.frames[-1]
        ticking = self.frames[:-1]
        return ticking[self._position % len(ticking)]

    def _line(self) -> str:
        frame = self._frame()
        if self.styled and frame:
            frame = f"{_BLUE}{frame}{_RESET}"
        return f"{frame}{self.separator}{self._message}"

    def _draw(self) -> None:
        if self.enabled:
            self.stream.write(_CLEAR_LINE + self._line())
            self.stream.flush()

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            with self._lock:
                if self._finished:
                    return
                self._position += 1
                self._draw()

    def start(self) -> "Spinner":
        """Draw the first frame and start ticking; does nothing if already running."""
        with self._lock:
            if self._finished or self._thread is not None:
                return self
            self._draw()
            self._thread = threading.Thread(target=self._run, daemon=True)
            self._thread.start()
        return self

    def set_message(self, msg: str) -> None:
        """Replace the text shown after the spinner frame."""
        with self._lock:
            self._message = msg
            if not self._finished:
                self._draw()

    def finish(self) -> None:
        """Stop ticking and leave the final frame and message on the line."""
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        with self._lock:
            if self._finished:
                return
            self._finished = True
            self._draw()
            if self.enabled:
                self.stream.write("\n")
                self.stream.flush()

    def finish_with_message(self, msg: str) -> None:
        """Finish, showing ``msg`` in place of the current message."""
        with self._lock:
            self._message = msg
        self.finish()

    def __enter__(self) -> "Spinner":
        return self.start()

    def __exit__(self, *exc_info: object) -> None:
        self.finish()


def create_spinner(msg: str) -> Spinner:
    """Start a fast arrow spinner with ``msg`` directly after it."""
    return Spinner(_ARROW_FRAMES, 0.010, message=msg).start()


def create_alt_spinner(msg: str) -> Spinner:
    """Start a bouncing-bar spinner with ``msg`` one space after it."""
    return Spinner(_BAR_FRAMES, 0.080, message=msg, separator=" ").start()