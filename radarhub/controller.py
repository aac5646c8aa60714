"""Glue between the radar unit, the control unit and the radar model."""

from __future__ import annotations

import re

from radarhub.radar import RadarModel
from radarhub.udp_client import UdpClient

RADAR_LISTENING_PORT = 8888
RADAR_COMMAND_PORT = 8889

_COMMAND_PREFIX = "IR:"

_FLOAT = r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)"
_DETECTION = re.compile(rf"\s*({_FLOAT}),\s*({_FLOAT})", re.IGNORECASE)


def parse_detection(packet: bytes | str) -> tuple[float, float] | None:
    """Parse a ``"<degrees>,<distance>"`` packet.

    Leading whitespace and whitespace after the comma are allowed, and
    anything after the second number is ignored. The packet is read only up
    to its first NUL. Returns None when two numbers cannot be read.
    """
    if isinstance(packet, (bytes, bytearray)):
        text = bytes(packet).split(b"\0", 1)[0].decode("utf-8", errors="replace")
    else:
        text = packet.split("\0", 1)[0]
    match = _DETECTION.match(text)
    if match is None:
        return None
    return float(match.group(1)), float(match.group(2))


class Controller:
    """Feed detections received over UDP into a model and forward commands.

    Detection packets arrive on ``listen_port``. Lines from the control unit
    that start with ``IR:`` are forwarded to the radar unit's
    ``command_port`` once its address has been set.
    """

    def __init__(
        self,
        model: RadarModel,
        listen_port: int = RADAR_LISTENING_PORT,
        command_port: int = RADAR_COMMAND_PORT,
    ) -> None:
        self.model = model
        self.command_port = command_port
        self.radar_ip = ""
        self._udp: UdpClient | None = UdpClient(self.handle_udp_packet)
        try:
            self._udp.start_listening(listen_port)
        except OSError:
            self._udp.close()
            raise

    @property
    def listen_port(self) -> int | None:
        """Port the controller is receiving detections on, if still open."""
        return None if self._udp is None else self._udp.port

    def set_radar_unit_ip(self, ip: str) -> None:
        """Set the address commands are sent to."""
        self.radar_ip = ip
        print(f"Radar IP set to: {self.radar_ip}")

    def handle_serial_line(self, message: str) -> None:
        """Handle one line from the control unit, forwarding ``IR:`` commands."""
        print(f"Received from Control Unit: {message}")
        if message.startswith(_COMMAND_PREFIX):
            self.send_command_to_radar(message[len(_COMMAND_PREFIX):])

    def handle_udp_packet(self, packet: bytes | str) -> None:
        """Record the detection carried by a packet from the radar unit."""
        detection = parse_detection(packet)
        if detection is not None:
            self.model.add_detection(*detection)

    def send_command_to_radar(self, command: str) -> None:
        """Send ``command`` to the radar unit; does nothing without an address."""
        if not self.radar_ip or self._udp is None:
            return
        print(f"Sending to Radar Unit: {command}")
        self._udp.send(self.radar_ip, self.command_port, command)

    def tick(self) -> None:
        """Per-frame hook; detections arrive on the listener thread, so no work is due."""
        return None

    def close(self) -> None:
        """Stop listening and release the socket."""
        if self._udp is not None:
            self._udp.close()
            self._udp = None

    def __enter__(self) -> Controller:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()