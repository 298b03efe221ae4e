"""Calculator workers that send their operands and results down a named pipe."""

from __future__ import annotations

import argparse
import os
import struct
import sys
from collections.abc import Iterable, Iterator
from enum import Enum
from pathlib import Path
from typing import TextIO

SEPARATOR = "-- -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- --"
HANDSHAKE = 33
MESSAGE_SIZE = 4

_INT = struct.Struct("=i")
_INT_SPAN = 1 << 32
_INT_MIN = -(1 << 31)


def _wrap_int32(value: int) -> int:
    return (value - _INT_MIN) % _INT_SPAN + _INT_MIN


class Operation(Enum):
    """An arithmetic worker: its name, its prompt verb and what it computes."""

    ADD = ("adder", "add")
    SUBTRACT = ("subtractor", "substract")
    MULTIPLY = ("multiplier", "multiply")
    DIVIDE = ("divider", "divide")

    def __init__(self, worker_name: str, verb: str) -> None:
        self.worker_name = worker_name
        self.verb = verb

    @property
    def pipe_name(self) -> str:
        return f"{self.worker_name}_pipe"

    @property
    def prompt(self) -> str:
        return f"Enter two numbers to {self.verb}: "

    @property
    def sends_handshake(self) -> bool:
        """Every worker but the multiplier opens with a handshake value."""
        return self is not Operation.MULTIPLY

    def apply(self, a: int, b: int) -> int:
        """Compute with 32-bit integer semantics; division truncates toward zero."""
        if self is Operation.ADD:
            result = a + b
        elif self is Operation.SUBTRACT:
            result = a - b
        elif self is Operation.MULTIPLY:
            result = a * b
        else:
            if b == 0:
                raise ZeroDivisionError("integer division by zero")
            quotient = abs(a) // abs(b)
            result = quotient if (a < 0) == (b < 0) else -quotient
        return _wrap_int32(result)


def encode_int(value: int) -> bytes:
    """Encode a value as a native 32-bit integer."""
    try:
        return _INT.pack(value)
    except struct.error as exc:
        raise ValueError(f"{value} does not fit in a 32-bit integer") from exc


def decode_int(data: bytes) -> int:
    """Decode a native 32-bit integer."""
    if len(data) != MESSAGE_SIZE:
        raise ValueError(f"expected {MESSAGE_SIZE} bytes, got {len(data)}")
    return _INT.unpack(data)[0]


def read_numbers(stream: Iterable[str]) -> Iterator[int]:
    """Yield whitespace-separated integers from a text stream."""
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError as exc:
                raise ValueError(f"not an integer: {token!r}") from exc


def _make_fifo(path: Path) -> None:
    try:
        os.mkfifo(path, 0o666)
    except FileExistsError:
        pass


def _send(path: Path, value: int) -> None:
    with open(path, "wb", buffering=0) as pipe:
        pipe.write(encode_int(value))


def run_worker(
    operation: Operation,
    stream: Iterable[str] | None = None,
    directory: str | os.PathLike[str] = ".",
    out: TextIO | None = None,
) -> int:
    """Prompt for pairs of numbers and send each operand and result down the pipe.

    Returns the number of calculations done when the input runs out.
    """
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    path = Path(directory) / operation.pipe_name
    _make_fifo(path)

    with open(path, "wb", buffering=0) as pipe:
        if operation.sends_handshake:
            pipe.write(encode_int(HANDSHAKE))

    numbers = read_numbers(stream)
    done = 0
    while True:
        out.write(operation.prompt + "\n")
        out.flush()

        a = next(numbers, None)
        if a is None:
            return done
        _send(path, a)

        b = next(numbers, None)
        if b is None:
            return done
        _send(path, b)

        result = operation.apply(a, b)
        out.write(f"{result}\n")
        out.flush()
        _send(path, result)
        done += 1


def _worker_main(operation: Operation, argv: list[str] | None) -> int:
    parser = argparse.ArgumentParser(prog=operation.worker_name)
    parser.add_argument(
        "--directory", default=".", help="directory that holds the named pipe"
    )
    args = parser.parse_args(argv)

    print(f"Hello from {operation.worker_name}!")
    print(SEPARATOR)
    try:
        run_worker(operation, sys.stdin, args.directory, sys.stdout)
    except OSError:
        print("Error opening pipe!")
        return 1
    return 0


def adder_main(argv: list[str] | None = None) -> int:
    return _worker_main(Operation.ADD, argv)


def subtractor_main(argv: list[str] | None = None) -> int:
    return _worker_main(Operation.SUBTRACT, argv)


def multiplier_main(argv: list[str] | None = None) -> int:
    return _worker_main(Operation.MULTIPLY, argv)


def divider_main(argv: list[str] | None = None) -> int:
    return _worker_main(Operation.DIVIDE, argv)