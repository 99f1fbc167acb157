import os
import signal
import subprocess
import sys
import threading
from pathlib import Path

import pytest

from pomodorotimer import cli
from pomodorotimer.engine import CountdownEngine


def test_dry_run_lists_the_plan(capsys):
    code = cli.main(["--dry-run", "-c", "3", "--long-break-every", "2"])
    out = capsys.readouterr().out
    assert code == cli.EXIT_OK
    assert "- Focus 1: 25:00" in out
    assert "- Long break: 15:00" in out
    assert "- Focus 3: 25:00" in out
    assert "Total: 95:00" in out


def test_runs_a_fast_session_to_completion(capsys):
    code = cli.main(["--fast", "-c", "2", "-f", "2", "-b", "1", "--tick-seconds", "0"])
    out = capsys.readouterr().out
    assert code == cli.EXIT_OK
    assert "All sessions done" in out


@pytest.mark.parametrize("option", ["--pomodoros", "--focus-minutes", "--short-break-minutes", "--long-break-minutes", "--long-break-every"])
def test_invalid_configuration_exits_with_config_error(option, capsys):
    code = cli.main([option, "0", "--dry-run"])
    captured = capsys.readouterr()
    assert code == cli.EXIT_CONFIG_ERROR
    assert captured.err.startswith("error:")
    assert "Planned intervals" not in captured.out


SRC = Path(__file__).resolve().parents[1] / "src"


class LockedEvent(threading.Event):
    """An event whose set() must not be reached from a signal handler."""

    def set(self):
        raise AssertionError("set() called from the signal handler")


@pytest.mark.parametrize("dry_run", [[], ["--dry-run"]])
def test_negative_tick_is_a_config_error(dry_run, capsys):
    code = cli.main(["--tick-seconds", "-1", *dry_run])
    captured = capsys.readouterr()
    assert code == cli.EXIT_CONFIG_ERROR
    assert "tick_seconds" in captured.err
    assert "Planned intervals" not in captured.out


def test_sigint_interrupts_a_running_session(capsys):
    timer = threading.Timer(0.2, os.kill, (os.getpid(), signal.SIGINT))
    timer.start()
    try:
        code = cli.main(["--fast", "-f", "1000", "--tick-seconds", "0.01"])
    finally:
        timer.cancel()
    assert code == cli.EXIT_INTERRUPTED
    assert code not in (cli.EXIT_OK, cli.EXIT_CONFIG_ERROR)
    assert "Session interrupted" in capsys.readouterr().out


def test_sigint_handler_does_not_touch_the_event_lock():
    engine = CountdownEngine(tick_seconds=0, cancel=LockedEvent())
    before = signal.getsignal(signal.SIGINT)
    with cli.cancel_on_sigint(engine):
        signal.getsignal(signal.SIGINT)(signal.SIGINT, None)
    assert engine.cancelled
    assert signal.getsignal(signal.SIGINT) is before


@pytest.mark.skipif(sys.platform == "win32", reason="needs POSIX signals")
@pytest.mark.parametrize("attempt", range(5))
def test_ctrl_c_with_zero_tick_exits_promptly(attempt):
    env = dict(os.environ, PYTHONPATH=os.pathsep.join(filter(None, [str(SRC), os.environ.get("PYTHONPATH")])))
    proc = subprocess.Popen(
        [sys.executable, "-m", "pomodorotimer", "--fast", "-f", "10000000", "--tick-seconds", "0"],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        env=env,
    )
    try:
        # the first interval header is flushed once the handler is installed
        for line in proc.stdout:
            if line.startswith("▶ Focus 1"):
                break
        proc.send_signal(signal.SIGINT)
        out, _ = proc.communicate(timeout=10)
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.wait()
    assert proc.returncode == cli.EXIT_INTERRUPTED
    assert "Session interrupted" in out
