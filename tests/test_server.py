import socket
import threading

import pytest

from drillbox.server import EchoServer, serve_greeting


def _connect(address):
    sock = socket.create_connection(address, timeout=5)
    sock.settimeout(5)
    return sock


def _serve_until(server, predicate, rounds=20):
    for _ in range(rounds):
        if predicate():
            return
        server.serve_once(0.2)


def test_serve_greeting_exchanges_messages():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.bind(("127.0.0.1", 0))
        listener.listen(1)
        listener.settimeout(5)
        result = {}
        worker = threading.Thread(
            target=lambda: result.setdefault("reply", serve_greeting(listener))
        )
        worker.start()
        with _connect(listener.getsockname()[:2]) as client:
            greeting = b""
            while not greeting.endswith(b"\0"):
                greeting += client.recv(64)
            client.sendall(b"reply\0padding")
        worker.join(5)
    assert greeting == b"hello_OK\0"
    assert result["reply"] == "reply"


def test_serve_greeting_custom_text():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.bind(("127.0.0.1", 0))
        listener.listen(1)
        listener.settimeout(5)
        result = {}
        worker = threading.Thread(
            target=lambda: result.setdefault("reply", serve_greeting(listener, "hi"))
        )
        worker.start()
        with _connect(listener.getsockname()[:2]) as client:
            greeting = client.recv(3)
            client.sendall(b"ok")
        worker.join(5)
    assert greeting == b"hi\0"
    assert result["reply"] == "ok"


def test_echo_server_echoes_data():
    with EchoServer("127.0.0.1", 0) as server:
        with _connect(server.address) as client:
            _serve_until(server, lambda: server.client_count == 1)
            assert server.client_count == 1
            client.sendall(b"ping")
            assert server.serve_once(2) >= 1
            assert client.recv(64) == b"ping"


def test_echo_server_serves_clients_separately():
    with EchoServer("127.0.0.1", 0) as server:
        with _connect(server.address) as first, _connect(server.address) as second:
            _serve_until(server, lambda: server.client_count == 2)
            assert server.client_count == 2
            first.sendall(b"one")
            second.sendall(b"two")
            _serve_until(server, lambda: False, rounds=3)
            assert first.recv(64) == b"one"
            assert second.recv(64) == b"two"


def test_echo_server_drops_closed_client():
    with EchoServer("127.0.0.1", 0) as server:
        client = _connect(server.address)
        _serve_until(server, lambda: server.client_count == 1)
        client.close()
        _serve_until(server, lambda: server.client_count == 0)
        assert server.client_count == 0


def test_serve_once_times_out_with_nothing_ready():
    with EchoServer("127.0.0.1", 0) as server:
        assert server.serve_once(0.05) == 0


def test_serve_once_after_close_raises():
    server = EchoServer("127.0.0.1", 0)
    server.close()
    with pytest.raises(RuntimeError):
        server.serve_once(0.05)


def test_serve_forever_stops_on_close():
    server = EchoServer("127.0.0.1", 0)
    worker = threading.Thread(target=server.serve_forever, daemon=True)
    worker.start()
    with _connect(server.address) as client:
        client.sendall(b"echo me")
        assert client.recv(64) == b"echo me"
    server.close()
    worker.join(5)
    assert not worker.is_alive()


def test_address_reports_bound_port():
    with EchoServer("127.0.0.1", 0) as server:
        host, port = server.address
        assert host == "127.0.0.1"
        assert port > 0