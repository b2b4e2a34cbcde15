"""A line-oriented TCP chat client that exchanges fixed-size messages."""

from __future__ import annotations

import argparse
import itertools
import socket
import sys
import threading
import time
from collections.abc import Iterable, Sequence
from typing import TextIO

MESSAGE_SIZE = 200
QUIT_COMMAND = "quit"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 60000

_DRAIN_TIMEOUT = 2.0


def encode_message(text: str) -> bytes:
    """Encode ``text`` as one NUL-padded frame of ``MESSAGE_SIZE`` bytes."""
    data = text.encode("utf-8")
    if b"\0" in data:
        raise ValueError("message must not contain NUL characters")
    if len(data) >= MESSAGE_SIZE:
        raise ValueError(
            f"message is {len(data)} bytes; at most {MESSAGE_SIZE - 1} fit in a frame"
        )
    return data.ljust(MESSAGE_SIZE, b"\0")


def decode_message(data: bytes) -> str:
    """Decode the text of a frame, up to its first NUL byte."""
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


class ChatClient:
    """A TCP connection that sends framed messages and reads NUL-ended ones."""

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
        self.host = host
        self.port = port
        self._sock: socket.socket | None = None
        self._buffer = bytearray()

    def _require_socket(self) -> socket.socket:
        if self._sock is None:
            raise ConnectionError("client is not connected")
        return self._sock

    def connect(self, retries: int | None = None, delay: float = 0.1) -> int:
        """Connect, trying up to ``retries`` times (forever when None).

        Return the number of attempts it took; raise ConnectionError when
        every attempt failed.
        """
        if retries is not None and retries < 1:
            raise ValueError("retries must be at least 1")
        if self._sock is not None:
            raise ConnectionError("client is already connected")
        attempts = itertools.count(1) if retries is None else range(1, retries + 1)
        last_error: OSError | None = None
        for attempt in attempts:
            try:
                self._sock = socket.create_connection((self.host, self.port))
            except OSError as exc:
                last_error = exc
                if retries is None or attempt < retries:
                    time.sleep(delay)
                continue
            self._buffer.clear()
            return attempt
        raise ConnectionError(
            f"could not connect to {self.host}:{self.port}"
        ) from last_error

    def send(self, message: str) -> bool:
        """Send one framed message; return False when it was the quit command."""
        self._require_socket().sendall(encode_message(message))
        return message != QUIT_COMMAND

    def receive(self) -> str | None:
        """Return the next message, or None once the peer has closed.

        Messages end at a NUL byte; the NUL padding of frames is skipped.
        """
        sock = self._require_socket()
        while True:
            stripped = self._buffer.lstrip(b"\0")
            if len(stripped) != len(self._buffer):
                self._buffer = bytearray(stripped)
            end = self._buffer.find(b"\0")
            if end >= 0:
                message = bytes(self._buffer[:end])
                del self._buffer[: end + 1]
                return decode_message(message)
            if len(self._buffer) >= MESSAGE_SIZE:
                message = bytes(self._buffer[:MESSAGE_SIZE])
                del self._buffer[:MESSAGE_SIZE]
                return decode_message(message)
            chunk = sock.recv(MESSAGE_SIZE)
            if not chunk:
                if self._buffer:
                    message = bytes(self._buffer)
                    self._buffer.clear()
                    return decode_message(message)
                return None
            self._buffer += chunk

    def _shutdown_write(self) -> None:
        sock = self._require_socket()
        try:
            sock.shutdown(socket.SHUT_WR)
        except OSError:
            pass

    def close(self) -> None:
        """Shut the connection down and release the socket."""
        if self._sock is None:
            return
        try:
            self._sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        self._sock.close()
        self._sock = None

    def __enter__(self) -> ChatClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def run_chat(
    client: ChatClient, lines: Iterable[str], output: TextIO | None = None
) -> int:
    """Send each line until the quit command while echoing what arrives.

    Incoming messages are written to ``output`` as ``Server says:<text>``.
    Return the number of messages sent; the client is closed afterwards.
    """
    out = sys.stdout if output is None else output
    lock = threading.Lock()

    def receive_loop() -> None:
        while True:
            try:
                message = client.receive()
            except (OSError, ConnectionError):
                return
            if message is None:
                return
            with lock:
                out.write(f"Server says:{message}\n")

    receiver = threading.Thread(target=receive_loop, daemon=True)
    receiver.start()
    sent = 0
    try:
        for line in lines:
            sent += 1
            if not client.send(line.rstrip("\r\n")):
                break
        client._shutdown_write()
        receiver.join(_DRAIN_TIMEOUT)
    finally:
        client.close()
        receiver.join(_DRAIN_TIMEOUT)
    return sent


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to a chat server and relay standard input to it."""
    parser = argparse.ArgumentParser(description="Simple TCP chat client.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument(
        "--retries", type=int, default=None, help="connection attempts (default: forever)"
    )
    args = parser.parse_args(argv)

    client = ChatClient(args.host, args.port)
    try:
        client.connect(retries=args.retries, delay=0.5)
    except ConnectionError as exc:
        print(f"connect failed! {exc}", file=sys.stderr)
        return 1
    print("connect succeeded!")
    print(f"{QUIT_COMMAND} to exit")
    try:
        run_chat(client, sys.stdin)
    except ValueError as exc:
        print(f"cannot send: {exc}", file=sys.stderr)
        return 1
    print("----------end----------")
    return 0


if __name__ == "__main__":
    sys.exit(main())