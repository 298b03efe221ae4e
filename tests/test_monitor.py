import io
import os
import threading

import pytest

from pipecalc.monitor import PIPE_NAMES, Monitor, WorkerReport
from pipecalc.worker import SEPARATOR, encode_int


def _watch(tmp_path, name, payload):
    path = tmp_path / name
    os.mkfifo(path)
    out = io.StringIO()
    monitor = Monitor(tmp_path, out)
    result = []
    thread = threading.Thread(
        target=lambda: result.append(monitor.watch(name)), daemon=True
    )
    thread.start()
    with open(path, "wb", buffering=0) as pipe:
        pipe.write(payload)
        monitor.stopped.set()
    thread.join(10)
    assert not thread.is_alive()
    return out.getvalue(), result[0], monitor


@pytest.mark.parametrize("name", PIPE_NAMES)
def test_each_pipe_name_is_watched_under_its_own_header(tmp_path, name):
    payload = encode_int(1) + encode_int(2) + encode_int(3)
    output, report, monitor = _watch(tmp_path, name, payload)
    assert output == f"[{name}]\n1\n2\n=3\n{SEPARATOR}\n"
    assert report.count == 0
    assert not monitor.lock.locked()


def test_first_message_prints_name_and_takes_lock():
    lock = threading.Lock()
    report = WorkerReport("adder_pipe", lock)
    assert report.feed(2) == "[adder_pipe]\n2\n"
    assert lock.locked()
    lock.release()


def test_full_group_releases_lock_and_resets():
    lock = threading.Lock()
    out = io.StringIO()
    report = WorkerReport("divider_pipe", lock, out)
    texts = [report.feed(m) for m in (9, 3, 3)]
    assert texts[1] == "3\n"
    assert texts[2] == f"=3\n{SEPARATOR}\n"
    assert report.count == 0
    assert not lock.locked()
    assert out.getvalue() == "".join(texts)


def test_groups_restart_with_header():
    report = WorkerReport("subtractor_pipe")
    for message in (1, 2, 3):
        report.feed(message)
    assert report.feed(4).startswith("[subtractor_pipe]\n")
    assert report.count == 1


def test_watch_reads_messages_from_pipe(tmp_path):
    path = tmp_path / "adder_pipe"
    os.mkfifo(path)
    out = io.StringIO()
    monitor = Monitor(tmp_path, out)
    result = []
    thread = threading.Thread(
        target=lambda: result.append(monitor.watch("adder_pipe")), daemon=True
    )
    thread.start()
    with open(path, "wb", buffering=0) as pipe:
        pipe.write(encode_int(2) + encode_int(3) + encode_int(5))
        monitor.stopped.set()
    thread.join(10)
    assert not thread.is_alive()
    assert out.getvalue() == f"[adder_pipe]\n2\n3\n=5\n{SEPARATOR}\n"
    assert result[0].count == 0
    assert not monitor.lock.locked()


def test_watch_ignores_trailing_partial_message(tmp_path):
    path = tmp_path / "multiplier_pipe"
    os.mkfifo(path)
    out = io.StringIO()
    monitor = Monitor(tmp_path, out)
    result = []
    thread = threading.Thread(
        target=lambda: result.append(monitor.watch("multiplier_pipe")), daemon=True
    )
    thread.start()
    with open(path, "wb", buffering=0) as pipe:
        pipe.write(encode_int(7) + b"\x01\x02")
        monitor.stopped.set()
    thread.join(10)
    assert not thread.is_alive()
    assert out.getvalue() == "[multiplier_pipe]\n7\n"
    assert result[0].count == 1
    monitor.lock.release()