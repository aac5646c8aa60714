"""UDP socket that listens for datagrams on a background thread and sends replies."""

from __future__ import annotations

import select
import socket
import threading
from typing import Callable

DataHandler = Callable[[bytes], None]

_POLL_INTERVAL_S = 0.5
_MAX_DATAGRAM = 1024


class UdpClient:
    """Receive datagrams on a port and pass each one to a handler.

    The handler is called from the listener thread with the datagram's bytes.
    The same socket is used for sending.
    """

    def __init__(self, handler: DataHandler) -> None:
        self._handler = handler
        self._sock: socket.socket | None = None
        self._thread: threading.Thread | None = None
        self._listening = threading.Event()
        self.port: int | None = None

    @property
    def listening(self) -> bool:
        """Whether the listener thread is running."""
        return self._listening.is_set()

    def start_listening(self, port: int) -> None:
        """Bind to ``port`` on all interfaces and start receiving.

        Does nothing if already listening. Raises OSError if the socket cannot
        be created or bound.
        """
        if self._listening.is_set():
            return
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.bind(("", port))
        except OSError:
            sock.close()
            raise
        if self._sock is not None:
            self._sock.close()
        self._sock = sock
        self.port = sock.getsockname()[1]
        self._listening.set()
        self._thread = threading.Thread(
            target=self._listen, args=(sock,), name="udp-listener", daemon=True
        )
        self._thread.start()

    def _listen(self, sock: socket.socket) -> None:
        while self._listening.is_set():
            try:
                readable, _, _ = select.select([sock], [], [], _POLL_INTERVAL_S)
            except (OSError, ValueError):
                break
            if not readable:
                continue
            try:
                data, _ = sock.recvfrom(_MAX_DATAGRAM)
            except OSError:
                continue
            if data:
                self._handler(data)

    def stop_listening(self) -> None:
        """Stop the listener thread and wait for it to finish."""
        self._listening.clear()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()
        self._thread = None

    def send(self, address: str, port: int, message: str | bytes) -> None:
        """Send ``message`` to ``address``:``port``; does nothing without a socket."""
        if self._sock is None:
            return
        payload = message.encode() if isinstance(message, str) else bytes(message)
        self._sock.sendto(payload, (address, port))

    def close(self) -> None:
        """Stop listening and release the socket."""
        self.stop_listening()
        if self._sock is not None:
            self._sock.close()
            self._sock = None
        self.port = None

    def __enter__(self) -> UdpClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()