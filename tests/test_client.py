import io
import socket
import threading

import pytest

from drillbox.client import (
    MESSAGE_SIZE,
    ChatClient,
    decode_message,
    encode_message,
    run_chat,
)


@pytest.fixture
def listener():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(5)
    sock.settimeout(5)
    yield sock
    sock.close()


def _connected(listener):
    host, port = listener.getsockname()[:2]
    client = ChatClient(host, port)
    client.connect(retries=3, delay=0)
    conn, _ = listener.accept()
    conn.settimeout(5)
    return client, conn


def _recv_exactly(conn, size):
    data = b""
    while len(data) < size:
        chunk = conn.recv(size - len(data))
        if not chunk:
            break
        data += chunk
    return data


def test_encode_pads_to_frame_size():
    frame = encode_message("hello")
    assert len(frame) == MESSAGE_SIZE
    assert frame.startswith(b"hello\0")
    assert frame[5:] == b"\0" * (MESSAGE_SIZE - 5)


@pytest.mark.parametrize("text", ["", "hi", "quit", "héllo wörld", "x" * (MESSAGE_SIZE - 1)])
def test_encode_decode_round_trip(text):
    assert decode_message(encode_message(text)) == text


def test_encode_rejects_too_long():
    with pytest.raises(ValueError):
        encode_message("x" * MESSAGE_SIZE)


def test_encode_rejects_nul():
    with pytest.raises(ValueError):
        encode_message("a\0b")


def test_decode_stops_at_first_nul():
    assert decode_message(b"hello_OK\0junk") == "hello_OK"
    assert decode_message(b"") == ""


def test_operations_require_connection():
    client = ChatClient("127.0.0.1", 1)
    with pytest.raises(ConnectionError):
        client.send("hi")
    with pytest.raises(ConnectionError):
        client.receive()


def test_connect_gives_up_after_retries():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    client = ChatClient("127.0.0.1", port)
    with pytest.raises(ConnectionError):
        client.connect(retries=2, delay=0)


def test_connect_rejects_zero_retries():
    with pytest.raises(ValueError):
        ChatClient().connect(retries=0)


def test_connect_reports_attempts(listener):
    client, conn = _connected(listener)
    with client, conn:
        assert client.connect is not None
        with pytest.raises(ConnectionError):
            client.connect(retries=1)


def test_send_writes_one_frame(listener):
    client, conn = _connected(listener)
    with client, conn:
        assert client.send("hello") is True
        assert _recv_exactly(conn, MESSAGE_SIZE) == encode_message("hello")


def test_send_quit_returns_false(listener):
    client, conn = _connected(listener)
    with client, conn:
        assert client.send("quit") is False
        assert decode_message(_recv_exactly(conn, MESSAGE_SIZE)) == "quit"


def test_receive_greeting_then_close(listener):
    client, conn = _connected(listener)
    with client:
        conn.sendall(b"hello_OK\0")
        conn.close()
        assert client.receive() == "hello_OK"
        assert client.receive() is None


def test_receive_splits_coalesced_frames(listener):
    client, conn = _connected(listener)
    with client, conn:
        conn.sendall(encode_message("first") + encode_message("second"))
        assert client.receive() == "first"
        assert client.receive() == "second"


def test_receive_unterminated_text_at_close(listener):
    client, conn = _connected(listener)
    with client:
        conn.sendall(b"tail")
        conn.close()
        assert client.receive() == "tail"
        assert client.receive() is None


def test_run_chat_echoes_until_quit(listener):
    host, port = listener.getsockname()[:2]
    received = []

    def echo():
        conn, _ = listener.accept()
        conn.settimeout(5)
        with conn:
            while data := conn.recv(1024):
                received.append(data)
                conn.sendall(data)

    server = threading.Thread(target=echo, daemon=True)
    server.start()
    client = ChatClient(host, port)
    client.connect(retries=3, delay=0)
    output = io.StringIO()
    sent = run_chat(client, ["hi\n", "quit\n", "ignored\n"], output)
    server.join(5)

    assert sent == 2
    assert output.getvalue().splitlines() == ["Server says:hi", "Server says:quit"]
    assert b"".join(received) == encode_message("hi") + encode_message("quit")
    with pytest.raises(ConnectionError):
        client.send("more")