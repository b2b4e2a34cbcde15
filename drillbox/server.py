"""TCP servers: a one-shot greeting exchange and a select-based echo server."""

from __future__ import annotations

import argparse
import logging
import selectors
import socket
import sys
import threading
from collections.abc import Sequence

from drillbox.client import MESSAGE_SIZE, decode_message

logger = logging.getLogger(__name__)

ECHO_PORT = 60000
GREETING_PORT = 4999
GREETING = "hello_OK"
READ_SIZE = 1024
_POLL_INTERVAL = 0.2


def serve_greeting(listener: socket.socket, greeting: str = GREETING) -> str:
    """Accept one client, send it ``greeting`` and return its reply.

    The greeting goes out NUL-terminated; the reply is read once and
    decoded up to its first NUL byte.
    """
    conn, peer = listener.accept()
    with conn:
        logger.info("accepted %s:%d", peer[0], peer[1])
        conn.sendall(greeting.encode("utf-8") + b"\0")
        data = conn.recv(MESSAGE_SIZE)
    return decode_message(data)


class EchoServer:
    """Sends every chunk a client writes straight back to that client."""

    def __init__(self, host: str = "0.0.0.0", port: int = ECHO_PORT) -> None:
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._listener.bind((host, port))
            self._listener.listen()
            self._listener.setblocking(False)
        except OSError:
            self._listener.close()
            raise
        self._selector = selectors.DefaultSelector()
        self._selector.register(self._listener, selectors.EVENT_READ)
        self._clients: set[socket.socket] = set()
        self._closed = threading.Event()

    @property
    def address(self) -> tuple[str, int]:
        """The host and port the server listens on."""
        host, port = self._listener.getsockname()[:2]
        return host, port

    @property
    def client_count(self) -> int:
        """How many clients are connected."""
        return len(self._clients)

    def _accept(self) -> None:
        try:
            conn, peer = self._listener.accept()
        except BlockingIOError:
            return
        conn.setblocking(True)
        self._clients.add(conn)
        self._selector.register(conn, selectors.EVENT_READ)
        logger.info("Accepted client:%s:%d", peer[0], peer[1])

    def _drop(self, conn: socket.socket) -> None:
        logger.info("Client socket %d closed.", conn.fileno())
        self._selector.unregister(conn)
        self._clients.discard(conn)
        conn.close()

    def _echo(self, conn: socket.socket) -> None:
        try:
            data = conn.recv(READ_SIZE)
        except ConnectionResetError:
            data = b""
        if not data:
            self._drop(conn)
            return
        try:
            conn.sendall(data)
        except OSError:
            self._drop(conn)

    def serve_once(self, timeout: float | None = 1.0) -> int:
        """Wait up to ``timeout`` seconds and handle what is ready.

        Return the number of sockets that were ready.
        """
        if self._closed.is_set():
            raise RuntimeError("server is closed")
        events = self._selector.select(timeout)
        for key, _ in events:
            if key.fileobj is self._listener:
                self._accept()
            else:
                self._echo(key.fileobj)
        return len(events)

    def serve_forever(self) -> None:
        """Serve until :meth:`close` is called."""
        while not self._closed.is_set():
            try:
                self.serve_once(_POLL_INTERVAL)
            except (OSError, ValueError, KeyError, RuntimeError):
                if self._closed.is_set():
                    return
                raise

    def close(self) -> None:
        """Stop serving and close every socket."""
        if self._closed.is_set():
            return
        self._closed.set()
        for conn in list(self._clients):
            conn.close()
        self._clients.clear()
        self._listener.close()
        self._selector.close()

    def __enter__(self) -> EchoServer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the echo server, or with --greeting a single greeting exchange."""
    parser = argparse.ArgumentParser(description="Simple TCP servers.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument(
        "--greeting",
        action="store_true",
        help="greet one client, print its reply and exit",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.greeting:
        port = GREETING_PORT if args.port is None else args.port
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
                listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
                listener.bind((args.host, port))
                listener.listen(10)
                print(f"listening on {args.host}:{port}")
                print(serve_greeting(listener))
        except OSError as exc:
            print(f"server failed: {exc}", file=sys.stderr)
            return 1
        return 0

    port = ECHO_PORT if args.port is None else args.port
    try:
        with EchoServer(args.host, port) as server:
            print(f"echoing on {server.address[0]}:{server.address[1]}")
            server.serve_forever()
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"server failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())