import socket
import threading

import pytest

from radarhub.udp_client import UdpClient


class Collector:
    def __init__(self):
        self.items = []
        self.event = threading.Event()

    def __call__(self, data):
        self.items.append(data)
        self.event.set()


def test_receives_datagram():
    collector = Collector()
    with UdpClient(collector) as client:
        client.start_listening(0)
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sender:
            sender.sendto(b"90,0.5", ("127.0.0.1", client.port))
            assert collector.event.wait(5.0)
    assert collector.items == [b"90,0.5"]


def test_listening_state():
    client = UdpClient(Collector())
    assert client.listening is False
    client.start_listening(0)
    assert client.listening is True
    client.stop_listening()
    assert client.listening is False
    client.close()
    assert client.port is None


def test_start_twice_keeps_port():
    with UdpClient(Collector()) as client:
        client.start_listening(0)
        first = client.port
        client.start_listening(0)
        assert client.port == first


def test_bind_conflict_raises():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as taken:
        taken.bind(("", 0))
        port = taken.getsockname()[1]
        client = UdpClient(Collector())
        with pytest.raises(OSError):
            client.start_listening(port)
        assert client.listening is False
        client.close()


def test_send_delivers_message():
    inbox = Collector()
    with UdpClient(inbox) as receiver:
        receiver.start_listening(0)
        with UdpClient(Collector()) as client:
            client.start_listening(0)
            client.send("127.0.0.1", receiver.port, "SCAN")
            assert inbox.event.wait(5.0)
    assert inbox.items == [b"SCAN"]


def test_send_without_socket_is_silent():
    inbox = Collector()
    with UdpClient(inbox) as receiver:
        receiver.start_listening(0)
        client = UdpClient(Collector())
        client.send("127.0.0.1", receiver.port, "SCAN")
        assert inbox.event.wait(0.3) is False
    assert inbox.items == []


def test_no_delivery_after_stop():
    collector = Collector()
    client = UdpClient(collector)
    client.start_listening(0)
    port = client.port
    client.close()
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sender:
        sender.sendto(b"late", ("127.0.0.1", port))
    assert collector.event.wait(0.3) is False
    assert collector.items == []