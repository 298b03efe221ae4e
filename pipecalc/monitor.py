"""Monitor that watches the workers' named pipes and prints their calculations."""

from __future__ import annotations

import argparse
import os
import sys
import threading
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, TextIO

from pipecalc.worker import MESSAGE_SIZE, SEPARATOR, Operation, decode_int

PIPE_NAMES = tuple(
    op.pipe_name
    for op in (Operation.ADD, Operation.DIVIDE, Operation.MULTIPLY, Operation.SUBTRACT)
)


@dataclass
class WorkerReport:
    """Formats one worker's messages in groups of three: operand, operand, result.

    The shared lock is held from the first message of a group until the third,
    so groups from different workers do not interleave.
    """

    name: str
    lock: threading.Lock = field(default_factory=threading.Lock)
    out: TextIO | None = None
    count: int = 0

    def _emit(self, text: str) -> None:
        if self.out is not None:
            self.out.write(text)
            self.out.flush()

    def feed(self, message: int) -> str:
        """Take one message and return the text written for it."""
        self.count += 1
        if self.count == 1:
            text = f"[{self.name}]\n{message}\n"
            self._emit(text)
            self.lock.acquire()
        elif self.count == 2:
            text = f"{message}\n"
            self._emit(text)
        else:
            text = f"={message}\n{SEPARATOR}\n"
            self._emit(text)
            self.count = 0
            self.lock.release()
        return text


def _messages(pipe: BinaryIO) -> Iterator[int]:
    while True:
        buffer = b""
        while len(buffer) < MESSAGE_SIZE:
            chunk = pipe.read(MESSAGE_SIZE - len(buffer))
            if not chunk:
                return
            buffer += chunk
        yield decode_int(buffer)


class Monitor:
    """Watches a set of worker pipes, one thread per pipe."""

    def __init__(
        self,
        directory: str | os.PathLike[str] = ".",
        out: TextIO | None = None,
        pipe_names: Sequence[str] = PIPE_NAMES,
    ) -> None:
        self.directory = Path(directory)
        self.out = sys.stdout if out is None else out
        self.pipe_names = tuple(pipe_names)
        self.lock = threading.Lock()
        self.stopped = threading.Event()

    def watch(self, pipe_name: str) -> WorkerReport:
        """Read messages from one pipe until stopped, reopening it after each writer leaves."""
        path = self.directory / pipe_name
        try:
            os.mkfifo(path, 0o666)
        except FileExistsError:
            pass
        report = WorkerReport(pipe_name, self.lock, self.out)
        while not self.stopped.is_set():
            with open(path, "rb", buffering=0) as pipe:
                for message in _messages(pipe):
                    report.feed(message)
        return report

    def run(self) -> None:
        """Watch every pipe and wait for all watchers to finish."""
        threads = [
            threading.Thread(target=self.watch, args=(name,), name=name, daemon=True)
            for name in self.pipe_names
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="worker_monitor")
    parser.add_argument(
        "--directory", default=".", help="directory that holds the named pipes"
    )
    args = parser.parse_args(argv)

    print("Hello from worker monitor!")
    print("Monitoring workers on named pipes...")
    print(SEPARATOR)
    sys.stdout.flush()
    Monitor(args.directory).run()
    return 0