# pipecalc

A small set of console programs that talk to each other through named pipes
(FIFOs). Four calculator workers each read pairs of whole numbers from their
input, work out a result, and send both operands and the result down their own
pipe. A monitor listens on all four pipes at once and prints each calculation
as it arrives.

Named pipes are a POSIX feature, so pipecalc runs on Linux, macOS and other
Unix-like systems.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## The programs

| Command               | Operation                  | Pipe it writes to  |
|-----------------------|----------------------------|--------------------|
| `pipecalc-adder`      | `a + b`                    | `adder_pipe`       |
| `pipecalc-subtractor` | `a - b`                    | `subtractor_pipe`  |
| `pipecalc-multiplier` | `a * b`                    | `multiplier_pipe`  |
| `pipecalc-divider`    | `a / b`, truncated to zero | `divider_pipe`     |
| `pipecalc-monitor`    | reads all four             | —                  |

Every command takes `--directory DIR` (default: the current directory), the
directory that holds the pipes. Workers and monitor create the pipes there if
they are not already present.

Every value travels over a pipe as a 4-byte native-endian signed integer.
Results follow 32-bit integer arithmetic: they wrap around on overflow. A
worker opens its pipe afresh for every value it sends, so it waits until the
monitor has the pipe open for reading.

A worker reads whitespace-separated integers from standard input. It stops and
exits with status 0 when its input runs out. If a pipe cannot be opened it
prints `Error opening pipe!` and exits with status 1. Dividing by zero in the
divider ends it with a `ZeroDivisionError`.

## Running a session

Start each program from the same directory, each in its own terminal:

```
pipecalc-monitor
pipecalc-adder
pipecalc-subtractor
pipecalc-multiplier
pipecalc-divider
```

Type two numbers into a worker, for example into the multiplier:

```
Enter two numbers to multiply: 
4
5
20
```

and the monitor prints the calculation under the worker's pipe name:

```
[multiplier_pipe]
4
5
=20
-- -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- --
```

The monitor takes the messages from each pipe in groups of three and prints the
third one with a leading `=`. The adder, subtractor and divider first send a
handshake value of `33` when they start. The monitor counts it like any other
message, so their groups are offset by one: after `4` and `5` are sent to a
freshly started adder, the monitor shows `33`, `4`, `=5`, and the result `9`
begins the next group.

A lock shared by all pipes is held from the first message of a group until the
third, so groups from different workers do not interleave. Until a group is
complete, output from the other workers waits.

The monitor runs until it is interrupted; when a worker closes its pipe, the
monitor opens it again and waits for the next writer.

## Using it from Python

`pipecalc.worker`:

- `Operation` — `ADD`, `SUBTRACT`, `MULTIPLY`, `DIVIDE`; each has
  `worker_name`, `pipe_name`, `prompt` and `sends_handshake`, and
  `apply(a, b)` gives the 32-bit result (raising `ZeroDivisionError` for a zero
  divisor).
- `encode_int(value)` and `decode_int(data)` — the 4-byte wire form of a value;
  both raise `ValueError` for values or data that do not fit.
- `read_numbers(stream)` — yields integers from an iterable of text lines,
  raising `ValueError` on a token that is not an integer.
- `run_worker(operation, stream, directory, out)` — runs one worker against the
  given input lines, pipe directory and output stream, and returns the number
  of calculations done when the input runs out.
- `adder_main`, `subtractor_main`, `multiplier_main`, `divider_main` — the
  command entry points.

`pipecalc.monitor`:

- `WorkerReport(name, lock, out)` — formats one pipe's messages;
  `feed(message)` takes the next value, writes its text to `out` if one is given,
  and returns that text.
- `Monitor(directory, out, pipe_names)` — `watch(pipe_name)` reads one pipe,
  reopening it after each writer leaves, until the `stopped` event is set;
  `run()` starts a daemon thread watching each of `pipe_names` and waits for
  them.
- `main` — the monitor command's entry point.