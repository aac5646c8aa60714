"""Line-oriented serial port reader running on a background thread."""

from __future__ import annotations

import threading
from typing import Callable

import serial

LineHandler = Callable[[str], None]

BAUD_RATE = 115200
_READ_CHUNK = 255


class LineBuffer:
    """Split a stream of bytes into non-empty lines ended by a newline."""

    def __init__(self) -> None:
        self._pending = b""

    def feed(self, data: bytes) -> list[str]:
        """Add ``data`` and return the complete lines it finishes.

        A trailing carriage return is removed from each line and empty lines
        are dropped. A chunk is only taken up to its first NUL byte.
        """
        self._pending += bytes(data).split(b"\0", 1)[0]
        *complete, self._pending = self._pending.split(b"\n")
        lines = []
        for raw in complete:
            if raw.endswith(b"\r"):
                raw = raw[:-1]
            if raw:
                lines.append(raw.decode("utf-8", errors="replace"))
        return lines


class SerialPort:
    """Open a serial device at 115200 8N1 and pass each received line to a handler.

    ``path`` may be a device path or any URL pyserial understands. The handler
    is called from the reader thread. Raises serial.SerialException if the
    port cannot be opened.
    """

    def __init__(self, path: str, handler: LineHandler) -> None:
        self._port = serial.serial_for_url(
            path,
            baudrate=BAUD_RATE,
            bytesize=serial.EIGHTBITS,
            parity=serial.PARITY_NONE,
            stopbits=serial.STOPBITS_ONE,
            rtscts=False,
            timeout=0.05,
        )
        self._port.reset_input_buffer()
        self._handler = handler
        self._running = threading.Event()
        self._running.set()
        self._thread = threading.Thread(target=self._read_loop, name="serial-rx", daemon=True)
        self._thread.start()

    def _read_loop(self) -> None:
        lines = LineBuffer()
        while self._running.is_set():
            try:
                size = max(1, min(self._port.in_waiting, _READ_CHUNK))
                chunk = self._port.read(size)
            except (serial.SerialException, OSError, TypeError, AttributeError):
                break
            for line in lines.feed(chunk):
                self._handler(line)

    def close(self) -> None:
        """Stop the reader thread and close the port."""
        self._running.clear()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()
        if self._port.is_open:
            self._port.close()

    def __enter__(self) -> SerialPort:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()