"""Thread drills: a background counter, a two-stage pipeline, a shared queue."""

from __future__ import annotations

import argparse
import queue
import sys
import threading
import time
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

END_MARKER = -123456
_STOP = object()


class CountingWorker:
    """Counts upwards once every ``interval`` seconds on a background thread."""

    def __init__(self, interval: float = 0.1) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._count = 0
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def _run(self) -> None:
        print("work place")
        while True:
            with self._lock:
                self._count += 1
                value = self._count
            print(value)
            if self._stop.wait(self.interval):
                return

    def start(self) -> None:
        """Reset the count to zero and start counting."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("worker is already running")
        with self._lock:
            self._count = 0
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop counting and wait for the thread to finish."""
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None

    def count(self) -> int:
        """Return the current count."""
        with self._lock:
            return self._count

    def __enter__(self) -> CountingWorker:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


class AddHundredPipeline:
    """A writer thread stores each value; a worker thread adds 100 to it."""

    def __init__(self) -> None:
        self._values: list[int] = []
        self._lock = threading.Lock()
        self._write_queue: queue.Queue[object] = queue.Queue()
        self._work_queue: queue.Queue[object] = queue.Queue()
        self._closed = False
        self._writer = threading.Thread(target=self._write_loop, daemon=True)
        self._worker = threading.Thread(target=self._work_loop, daemon=True)
        self._writer.start()
        self._worker.start()

    def _write_loop(self) -> None:
        while True:
            item = self._write_queue.get()
            if item is _STOP:
                self._work_queue.put(_STOP)
                self._write_queue.task_done()
                return
            with self._lock:
                self._values.append(item)
            self._work_queue.put(True)
            self._work_queue.join()
            self._write_queue.task_done()

    def _work_loop(self) -> None:
        while True:
            item = self._work_queue.get()
            if item is _STOP:
                self._work_queue.task_done()
                return
            with self._lock:
                last = self._values.pop()
                self._values.append(last + 100)
            self._work_queue.task_done()

    def submit(self, value: int) -> None:
        """Hand ``value`` to the writer stage."""
        if self._closed:
            raise RuntimeError("pipeline is closed")
        self._write_queue.put(value)

    def results(self) -> list[int]:
        """Wait for every submitted value to be processed and return them all."""
        self._write_queue.join()
        self._work_queue.join()
        with self._lock:
            return list(self._values)

    def close(self) -> None:
        """Finish outstanding work and stop both threads."""
        if self._closed:
            return
        self._closed = True
        self._write_queue.put(_STOP)
        self._writer.join()
        self._worker.join()

    def __enter__(self) -> AddHundredPipeline:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


@dataclass(frozen=True)
class QueueEvent:
    """One push or pop done by one of the queue demo's threads."""

    worker: int
    action: str
    value: int

    def __str__(self) -> str:
        return f"thread {self.worker}-->{self.action}\t{self.value}"


def run_queue_demo(delay: float = 1.0) -> list[QueueEvent]:
    """Two threads push 1..20 and 21..40 while two threads pop 20 each.

    Every thread holds the shared lock while it works and sleeps; ``delay``
    scales those sleeps. Return the events in the order they happened.
    """
    if delay < 0:
        raise ValueError("delay must not be negative")
    shared: deque[int] = deque()
    events: list[QueueEvent] = []
    condition = threading.Condition()

    def record(event: QueueEvent) -> None:
        events.append(event)
        print(event)

    def producer(worker: int, values: range, pause: float) -> None:
        for value in values:
            with condition:
                record(QueueEvent(worker, "push", value))
                shared.append(value)
                condition.notify_all()
                time.sleep(pause * delay)

    def consumer(worker: int, total: int, pause: float) -> None:
        for _ in range(total):
            with condition:
                condition.wait_for(lambda: bool(shared))
                record(QueueEvent(worker, "pop", shared.popleft()))
                time.sleep(pause * delay)

    threads = [
        threading.Thread(target=producer, args=(1, range(1, 21), 0.150)),
        threading.Thread(target=producer, args=(2, range(21, 41), 0.160)),
        threading.Thread(target=consumer, args=(3, 20, 0.140)),
        threading.Thread(target=consumer, args=(4, 20, 0.060)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return events


def _run_pipeline() -> int:
    with AddHundredPipeline() as pipeline:
        while True:
            print(f"enter {END_MARKER} to end: ")
            line = sys.stdin.readline()
            if not line:
                break
            try:
                value = int(line.strip())
            except ValueError:
                print(f"invalid value: {line.strip()!r}", file=sys.stderr)
                continue
            if value == END_MARKER:
                print("bye bye")
                break
            pipeline.submit(value)
            print(f"WorkThread done. iLast: {pipeline.results()[-1]}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the thread drills."""
    parser = argparse.ArgumentParser(description="Thread drills.")
    commands = parser.add_subparsers(dest="command")
    count = commands.add_parser("count", help="count in the background")
    count.add_argument("--seconds", type=float, default=10.0)
    count.add_argument("--interval", type=float, default=0.1)
    commands.add_parser("add-hundred", help="add 100 to each value read")
    demo = commands.add_parser("queue", help="share a queue between threads")
    demo.add_argument("--delay", type=float, default=1.0)
    args = parser.parse_args(argv)

    if args.command == "count":
        with CountingWorker(args.interval) as worker:
            time.sleep(args.seconds)
        print(f"counted to {worker.count()}")
        return 0
    if args.command == "queue":
        run_queue_demo(args.delay)
        return 0
    return _run_pipeline()


if __name__ == "__main__":
    sys.exit(main())